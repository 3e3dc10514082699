"""Packing of colours into 32-bit pixels and widget identifiers for picking."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Color


@dataclass(frozen=True)
class ChannelOrder:
    """Byte position of each channel inside a pixel; ``alpha`` may be absent."""

    red: int
    green: int
    blue: int
    alpha: int | None = None

    def __post_init__(self) -> None:
        indices = [self.red, self.green, self.blue]
        if self.alpha is not None:
            indices.append(self.alpha)
        if any(not 0 <= index <= 3 for index in indices):
            raise ValueError(f"channel index out of range: {indices}")
        if len(set(indices)) != len(indices):
            raise ValueError(f"channel indices overlap: {indices}")


def map_rgba(color: Color, channels: ChannelOrder) -> int:
    """Pack ``color`` into a pixel value, bytes in little-endian memory order."""
    raw = bytearray(4)
    raw[channels.red] = color.red
    raw[channels.green] = color.green
    raw[channels.blue] = color.blue
    if channels.alpha is not None:
        raw[channels.alpha] = color.alpha
    return int.from_bytes(raw, "little")


def pick_color(pick_id: int) -> Color:
    """The colour that stands for a widget identifier in the picking surface."""
    if pick_id < 0:
        raise ValueError(f"negative pick id: {pick_id}")
    return Color((pick_id >> 16) & 0xFF, (pick_id >> 8) & 0xFF, pick_id & 0xFF, 0)


def pick_id_from_pixel(pixel: int, channels: ChannelOrder) -> int:
    """Read back the widget identifier stored in a picking-surface pixel."""
    if not 0 <= pixel < 1 << 32:
        raise ValueError(f"pixel value out of range: {pixel}")
    raw = pixel.to_bytes(4, "little")
    return (raw[channels.red] << 16) + (raw[channels.green] << 8) + raw[channels.blue]