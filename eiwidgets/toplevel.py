"""The toplevel widget: a movable, resizable window with a title bar."""

from __future__ import annotations

import enum
import math

from .events import Event, EventType, MouseButton
from .geometry import (
    DEFAULT_BACKGROUND,
    Axis,
    Color,
    Point,
    Rect,
    Relief,
    Size,
    arc_points,
    rect_polygon,
)
from .rendering import DEFAULT_FONT, Canvas
from .widget import Application, Widget, clip_rect

_UNSET = object()

BORDER_COLOR = Color(100, 100, 100, 255)
TITLE_COLOR = Color(255, 255, 255, 255)
CLOSE_BUTTON_COLOR = Color(200, 0, 0, 255)
CLOSE_BUTTON_BORDER_WIDTH = 2
RESIZE_SQUARE_SIZE = 10
RESIZE_GRIP_MARGIN = 15


class _Drag(enum.Enum):
    MOVE = enum.auto()
    RESIZE = enum.auto()


class Toplevel(Widget):
    """A window with a title bar, an optional close button and a resize grip."""

    def __init__(self, app: Application) -> None:
        super().__init__(app)
        self.requested_size = Size(320, 240)
        self.color: Color = DEFAULT_BACKGROUND
        self.border_width = 4
        self.title: str | None = "Toplevel"
        self.closable = True
        self.resizable = Axis.BOTH
        self.min_size = Size(160, 120)
        self._drag: _Drag | None = None
        self._last_mouse: Point | None = None

    def configure(
        self,
        *,
        requested_size: Size | None = None,
        color: Color | None = None,
        border_width: int | None = None,
        title=_UNSET,
        closable: bool | None = None,
        resizable: Axis | None = None,
        min_size: Size | None = None,
    ) -> None:
        """Change the given attributes; omitted ones keep their value.

        Passing ``title=None`` removes the title.
        """
        if requested_size is not None:
            self.requested_size = requested_size
            self.place()
        if color is not None:
            self.color = color
        if border_width is not None:
            self.border_width = border_width
        if title is not _UNSET:
            self.title = title if title else None
        if closable is not None:
            self.closable = closable
        if resizable is not None:
            self.resizable = resizable
        if min_size is not None:
            self.min_size = min_size

        self.run_placer()
        self.app.invalidate_rect(self.screen_location.intersect(self.app.screen_rect))

    def _text_height(self) -> int:
        return self.app.text_measurer.text_size(self.title, DEFAULT_FONT).height

    def title_bar_height(self) -> int:
        """Height of the title bar above the content area."""
        return self._text_height() + 2 * self.border_width

    def compute_screen_location(self) -> Rect:
        text_height = self._text_height()
        border = self.border_width
        content = self.content_rect
        return Rect(
            Point(content.left - border, content.top - 2 * border - text_height),
            Size(
                content.size.width + 2 * border,
                content.size.height + text_height + 3 * border,
            ),
        )

    def _bottom_border(self) -> list[Point]:
        screen = self.screen_location
        content = self.content_rect
        border = self.border_width
        return [
            content.top_left,
            Point(content.left, content.bottom),
            Point(content.right, content.bottom),
            Point(content.right, content.top),
            Point(content.right + border, content.top),
            Point(content.right + border, content.bottom + border),
            Point(screen.left, content.bottom + border),
            Point(screen.left, content.top),
            content.top_left,
        ]

    def _close_button_center(self) -> Point:
        half = self.title_bar_height() >> 1
        return Point(self.screen_location.left + half, self.screen_location.top + half)

    def _upper_border(self) -> list[Point]:
        screen = self.screen_location
        bar_height = self.title_bar_height()
        corner_radius = bar_height >> 1
        start = Point(screen.left, screen.top + bar_height)
        right_corner = Point(screen.right - corner_radius, screen.top + (bar_height >> 1))
        points = [
            start,
            Point(screen.right, start.y),
            Point(screen.right, start.y - (bar_height >> 1)),
        ]
        points.extend(arc_points(right_corner, corner_radius, 0, math.pi / 2))
        points.append(Point(screen.right - corner_radius, screen.top))
        points.append(Point(screen.left + corner_radius, screen.top))
        points.extend(
            arc_points(self._close_button_center(), corner_radius, math.pi / 2, math.pi)
        )
        points.append(Point(screen.left, screen.top + corner_radius))
        points.append(start)
        return points

    def _resize_square(self) -> list[Point]:
        corner = Point(self.content_rect.right, self.content_rect.bottom)
        left = corner.x - RESIZE_SQUARE_SIZE
        top = corner.y - RESIZE_SQUARE_SIZE
        return [
            Point(left, top),
            Point(corner.x + 1, top),
            Point(corner.x + 1, corner.y + 1),
            Point(left, corner.y + 1),
            Point(left, top),
        ]

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Rect | None) -> None:
        self.run_placer()
        visible = clip_rect(clipper, self.screen_location)
        if visible is None or self.placer_params is None:
            return
        content = clip_rect(clipper, self.content_rect)
        pick = self.pick_color

        bottom = self._bottom_border()
        canvas.draw_polygon(bottom, BORDER_COLOR, visible)
        pick_canvas.draw_polygon(bottom, pick, visible)

        upper = self._upper_border()
        canvas.draw_polygon(upper, BORDER_COLOR, visible)
        pick_canvas.draw_polygon(upper, pick, visible)

        if self.closable:
            radius = self._text_height() // 3
            center = self._close_button_center()
            square = Rect(
                Point(center.x - radius, center.y - radius), Size(2 * radius, 2 * radius)
            )
            canvas.draw_button(
                square,
                CLOSE_BUTTON_COLOR,
                Relief.RAISED,
                CLOSE_BUTTON_BORDER_WIDTH,
                radius,
                visible,
            )
            pick_canvas.draw_button(
                square, pick, Relief.RAISED, CLOSE_BUTTON_BORDER_WIDTH, radius, visible
            )

        if self.title is not None:
            corner_radius = self.title_bar_height() >> 1
            where = Point(
                self.screen_location.left + 2 * corner_radius,
                self.screen_location.top + self.border_width,
            )
            canvas.draw_text(where, self.title, DEFAULT_FONT, TITLE_COLOR, visible)

        if content is not None:
            inner = rect_polygon(self.content_rect)
            canvas.draw_polygon(inner, self.color, content)
            pick_canvas.draw_polygon(inner, pick, content)
            self.draw_children(canvas, pick_canvas, content)

        if self.resizable is not Axis.NONE:
            square_points = self._resize_square()
            canvas.draw_polygon(square_points, BORDER_COLOR, visible)
            pick_canvas.draw_polygon(square_points, pick, visible)

    def _drag_to(self, where: Point) -> None:
        params = self.placer_params
        if params is None or self._last_mouse is None:
            return
        dx = where.x - self._last_mouse.x
        dy = where.y - self._last_mouse.y
        if self._drag is _Drag.MOVE:
            params.x += dx
            params.y += dy
            self._last_mouse = where
        elif self._drag is _Drag.RESIZE:
            width = params.width + dx
            params.width = width if width >= self.min_size.width else self.min_size.width
            height = params.height + dy
            params.height = (
                height if height >= self.min_size.height else self.min_size.height
            )
            self._last_mouse = where

    def _in_resize_grip(self, where: Point) -> bool:
        screen = self.screen_location
        margin = RESIZE_GRIP_MARGIN + self.border_width
        return (
            screen.right - margin <= where.x <= screen.right
            and screen.bottom - margin <= where.y <= screen.bottom
        )

    def handle(self, event: Event) -> bool:
        if self.app.active_widget is not None and event.type is EventType.MOUSE_MOVE:
            if event.where is not None:
                self._drag_to(event.where)
            screen = self.app.screen_rect
            self.app.invalidate_rect(self.screen_location.intersect(screen))
            self.run_placer()
            self.app.invalidate_rect(self.screen_location.intersect(screen))
            return True

        if event.type is EventType.MOUSE_BUTTONUP and event.button is MouseButton.LEFT:
            self.app.active_widget = None
            self._drag = None
            return True

        if (
            event.type is EventType.MOUSE_BUTTONDOWN
            and event.button is MouseButton.LEFT
            and event.where is not None
        ):
            where = event.where
            screen = self.screen_location
            if where.y < screen.top + self.title_bar_height():
                radius = self._text_height() // 3
                center = self._close_button_center()
                if (
                    abs(where.x - center.x) <= radius
                    and abs(where.y - center.y) <= radius
                    and self.closable
                ):
                    self.destroy()
                    return True
                self._start_drag(_Drag.MOVE, where)
                return True
            if self.resizable is not Axis.NONE and self._in_resize_grip(where):
                self._start_drag(_Drag.RESIZE, where)
                return True
        return False

    def _start_drag(self, mode: _Drag, where: Point) -> None:
        self.app.active_widget = self
        self._drag = mode
        self._last_mouse = where