"""Drawing targets, images and text measurement used by widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from .geometry import Color, Point, Rect, Relief, Size

DEFAULT_FONT = "default"


@dataclass
class Image:
    """A raster image stored row by row."""

    size: Size
    pixels: list[Color] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size.width < 0 or self.size.height < 0:
            raise ValueError(f"negative image size: {self.size}")
        count = self.size.width * self.size.height
        if not self.pixels:
            self.pixels = [Color(0, 0, 0, 0)] * count
        elif len(self.pixels) != count:
            raise ValueError(f"expected {count} pixels, got {len(self.pixels)}")

    @property
    def rect(self) -> Rect:
        return Rect(Point(0, 0), self.size)

    def pixel(self, point: Point) -> Color:
        if not self.rect.contains(point):
            raise IndexError(f"point outside image: {point}")
        return self.pixels[point.y * self.size.width + point.x]

    def copy(self) -> Image:
        return Image(self.size, list(self.pixels))


@dataclass(frozen=True)
class DrawCommand:
    """One drawing operation as recorded by a canvas."""

    kind: str
    color: Color | None = None
    clipper: Rect | None = None
    points: tuple[Point, ...] = ()
    where: Point | None = None
    text: str | None = None
    font: object = None
    rect: Rect | None = None
    image: Image | None = None
    src_rect: Rect | None = None
    relief: Relief | None = None
    border_width: int = 0
    corner_radius: int = 0


class Canvas(Protocol):
    """A surface that widgets draw on."""

    def draw_polygon(
        self, points: Iterable[Point], color: Color, clipper: Rect | None
    ) -> None: ...

    def draw_text(
        self,
        where: Point,
        text: str,
        font: object,
        color: Color,
        clipper: Rect | None,
    ) -> None: ...

    def copy_image(self, dst_rect: Rect, image: Image, src_rect: Rect) -> None: ...

    def draw_button(
        self,
        rect: Rect,
        color: Color,
        relief: Relief,
        border_width: int,
        corner_radius: int,
        clipper: Rect | None,
    ) -> None: ...


class RecordingCanvas:
    """A canvas that keeps every drawing operation in order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw_polygon(
        self, points: Iterable[Point], color: Color, clipper: Rect | None = None
    ) -> None:
        self.commands.append(
            DrawCommand("polygon", color=color, clipper=clipper, points=tuple(points))
        )

    def draw_text(
        self,
        where: Point,
        text: str,
        font: object,
        color: Color,
        clipper: Rect | None = None,
    ) -> None:
        self.commands.append(
            DrawCommand(
                "text", color=color, clipper=clipper, where=where, text=text, font=font
            )
        )

    def copy_image(self, dst_rect: Rect, image: Image, src_rect: Rect) -> None:
        self.commands.append(
            DrawCommand("image", rect=dst_rect, image=image, src_rect=src_rect)
        )

    def draw_button(
        self,
        rect: Rect,
        color: Color,
        relief: Relief,
        border_width: int,
        corner_radius: int,
        clipper: Rect | None = None,
    ) -> None:
        self.commands.append(
            DrawCommand(
                "button",
                color=color,
                clipper=clipper,
                rect=rect,
                relief=relief,
                border_width=border_width,
                corner_radius=corner_radius,
            )
        )

    def of_kind(self, kind: str) -> list[DrawCommand]:
        """The recorded commands of one kind, in drawing order."""
        return [command for command in self.commands if command.kind == kind]


@dataclass(frozen=True)
class FixedTextMeasurer:
    """Measures text as if every character had the same width."""

    char_width: int = 10
    line_height: int = 20

    def text_size(self, text: str | None, font: object = None) -> Size:
        return Size(len(text or "") * self.char_width, self.line_height)