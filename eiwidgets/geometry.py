"""Basic geometric and colour types shared by the widget toolkit."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position in surface coordinates."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    top_left: Point
    size: Size

    @property
    def left(self) -> int:
        return self.top_left.x

    @property
    def top(self) -> int:
        return self.top_left.y

    @property
    def right(self) -> int:
        return self.top_left.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.top_left.y + self.size.height

    def intersect(self, other: Rect) -> Rect | None:
        """Return the common part of both rectangles, or None if it is empty."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect(Point(left, top), Size(right - left, bottom - top))

    def contains(self, point: Point) -> bool:
        """Tell whether the point lies inside the rectangle (right and bottom edges excluded)."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    def lighter(self, amount: int = 40) -> Color:
        """Raise each colour channel by ``amount``, saturating at 255."""
        _check_amount(amount)

        def up(channel: int) -> int:
            return channel + amount if channel <= 255 - amount else 255

        return Color(up(self.red), up(self.green), up(self.blue), self.alpha)

    def darker(self, amount: int = 40) -> Color:
        """Lower each colour channel by ``amount``, saturating at 0."""
        _check_amount(amount)

        def down(channel: int) -> int:
            return channel - amount if channel >= amount else 0

        return Color(down(self.red), down(self.green), down(self.blue), self.alpha)


def _check_amount(amount: int) -> None:
    if not 0 <= amount <= 255:
        raise ValueError(f"colour shift out of range: {amount}")


DEFAULT_BACKGROUND = Color(0xA0, 0xA0, 0xA0, 0xFF)
DEFAULT_TEXT_COLOR = Color(0x00, 0x00, 0x00, 0xFF)


class Anchor(enum.Enum):
    """Where a widget, a text or an image is attached."""

    NONE = enum.auto()
    CENTER = enum.auto()
    NORTH = enum.auto()
    NORTHEAST = enum.auto()
    EAST = enum.auto()
    SOUTHEAST = enum.auto()
    SOUTH = enum.auto()
    SOUTHWEST = enum.auto()
    WEST = enum.auto()
    NORTHWEST = enum.auto()


class Relief(enum.Enum):
    """Border appearance of a widget."""

    NONE = enum.auto()
    RAISED = enum.auto()
    SUNKEN = enum.auto()


class Axis(enum.Enum):
    """Set of axes along which a window may be resized."""

    NONE = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    BOTH = enum.auto()


# 0: aligned to the start, 1: centred, 2: aligned to the end.
_ANCHOR_ALIGNMENT = {
    Anchor.CENTER: (1, 1),
    Anchor.NORTH: (1, 0),
    Anchor.NORTHEAST: (2, 0),
    Anchor.EAST: (2, 1),
    Anchor.SOUTHEAST: (2, 2),
    Anchor.SOUTH: (1, 2),
    Anchor.SOUTHWEST: (0, 2),
    Anchor.WEST: (0, 1),
    Anchor.NORTHWEST: (0, 0),
}


def _align(mode: int, free: int) -> int:
    if mode == 0:
        return 0
    if mode == 1:
        return free >> 1
    return free


def anchor_top_left(anchor: Anchor, area: Rect, size: Size) -> Point:
    """Top-left corner of an object of ``size`` anchored inside ``area``."""
    try:
        horizontal, vertical = _ANCHOR_ALIGNMENT[anchor]
    except KeyError:
        raise ValueError(f"cannot position with anchor {anchor!r}") from None
    free_x = area.size.width - size.width
    free_y = area.size.height - size.height
    return Point(
        area.top_left.x + _align(horizontal, free_x),
        area.top_left.y + _align(vertical, free_y),
    )


def rect_polygon(rect: Rect) -> list[Point]:
    """The closed outline of a rectangle: four corners and the first one again."""
    top_left = rect.top_left
    top_right = Point(rect.right, rect.top)
    bottom_right = Point(rect.right, rect.bottom)
    bottom_left = Point(rect.left, rect.bottom)
    return [top_left, top_right, bottom_right, bottom_left, top_left]


def arc_points(center: Point, radius: int, start: float, end: float) -> list[Point]:
    """Points along a circular arc from angle ``start`` to ``end`` (radians).

    Angles grow counter-clockwise on screen, so the y axis is flipped.
    Both end points are included.
    """
    if radius < 0:
        raise ValueError(f"negative radius: {radius}")
    steps = max(1, math.ceil(abs(end - start) * radius / 2))
    points = []
    for i in range(steps + 1):
        angle = start + (end - start) * i / steps
        points.append(
            Point(
                center.x + round(radius * math.cos(angle)),
                center.y - round(radius * math.sin(angle)),
            )
        )
    return points