"""The button widget: a raised or sunken rounded box that reacts to clicks."""

from __future__ import annotations

from typing import Callable

from .events import Event, EventType
from .frame import draw_anchored_image, draw_anchored_text
from .geometry import (
    DEFAULT_BACKGROUND,
    DEFAULT_TEXT_COLOR,
    Anchor,
    Color,
    Point,
    Rect,
    Relief,
    Size,
)
from .rendering import DEFAULT_FONT, Canvas, Image
from .widget import Application, Widget, clip_rect

DEFAULT_BUTTON_BORDER_WIDTH = 4
DEFAULT_BUTTON_CORNER_RADIUS = 10

ButtonCallback = Callable[[Widget, Event, object], None]

_UNSET = object()

_TOGGLED_RELIEF = {Relief.RAISED: Relief.SUNKEN, Relief.SUNKEN: Relief.RAISED}


class Button(Widget):
    """A clickable widget showing a text or an image, calling back when released."""

    def __init__(self, app: Application) -> None:
        super().__init__(app)
        self.color: Color = DEFAULT_BACKGROUND
        self.border_width = DEFAULT_BUTTON_BORDER_WIDTH
        self.corner_radius = DEFAULT_BUTTON_CORNER_RADIUS
        self.relief = Relief.RAISED
        self.text: str | None = None
        self.text_font: object = DEFAULT_FONT
        self.text_color: Color = DEFAULT_TEXT_COLOR
        self.text_anchor = Anchor.CENTER
        self.img: Image | None = None
        self.img_rect: Rect | None = None
        self.img_anchor = Anchor.CENTER
        self.callback: ButtonCallback | None = None
        self.user_param: object = None

    def configure(
        self,
        *,
        requested_size: Size | None = None,
        color: Color | None = None,
        border_width: int | None = None,
        corner_radius: int | None = None,
        relief: Relief | None = None,
        text=_UNSET,
        text_font: object = None,
        text_color: Color | None = None,
        text_anchor: Anchor | None = None,
        img=_UNSET,
        img_rect=_UNSET,
        img_anchor: Anchor | None = None,
        callback=_UNSET,
        user_param=_UNSET,
    ) -> None:
        """Change the given attributes; omitted ones keep their value.

        Passing ``text=None`` removes the text. Passing ``img=None`` removes the
        image and ends the configuration there.
        """
        if requested_size is not None:
            self.requested_size = requested_size
            self.place()
        if color is not None:
            self.color = color
        if border_width is not None:
            self.border_width = border_width
        if corner_radius is not None:
            self.corner_radius = corner_radius
        if relief is not None:
            self.relief = relief
        if text is not _UNSET:
            self.text = text if text else None
        if text_font is not None:
            self.text_font = text_font
        if text_color is not None:
            self.text_color = text_color
        if text_anchor is not None:
            self.text_anchor = text_anchor
        if img is not _UNSET:
            if img is None:
                self.img = None
                return
            self.img = img.copy()
        if img_rect is not _UNSET:
            self.img_rect = img_rect
        if img_anchor is not None:
            self.img_anchor = img_anchor
        if callback is not _UNSET:
            self.callback = callback
        if user_param is not _UNSET:
            self.user_param = user_param

        self.run_placer()
        self.app.invalidate_rect(self.screen_location.intersect(self.app.screen_rect))

    def natural_size(self) -> Size | None:
        if self.img_rect is not None:
            return self.img_rect.size
        if self.text:
            return self.app.text_measurer.text_size(self.text, self.text_font)
        return None

    def compute_screen_location(self) -> Rect:
        radius = self.corner_radius
        content = self.content_rect
        return Rect(
            Point(content.left - radius, content.top - radius),
            Size(content.size.width + 2 * radius, content.size.height + 2 * radius),
        )

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Rect | None) -> None:
        self.run_placer()
        visible = clip_rect(clipper, self.screen_location)
        if visible is None or self.placer_params is None:
            return
        content = clip_rect(clipper, self.content_rect)

        canvas.draw_button(
            self.screen_location,
            self.color,
            self.relief,
            self.border_width,
            self.corner_radius,
            visible,
        )
        pick_canvas.draw_button(
            self.screen_location,
            self.pick_color,
            self.relief,
            self.border_width,
            self.corner_radius,
            visible,
        )

        if content is None:
            return
        if self.text is not None:
            draw_anchored_text(
                canvas,
                self,
                self.text,
                self.text_font,
                self.text_color,
                self.text_anchor,
                content,
            )
        elif self.img is not None:
            draw_anchored_image(
                canvas, self, self.img, self.img_rect, self.img_anchor, content
            )
        self.draw_children(canvas, pick_canvas, content)

    def _toggle_relief(self) -> None:
        toggled = _TOGGLED_RELIEF.get(self.relief)
        if toggled is not None:
            self.relief = toggled
            self.app.invalidate_rect(self.screen_location)

    def handle(self, event: Event) -> bool:
        if event.type is EventType.MOUSE_BUTTONDOWN:
            self.app.active_widget = self
            self._toggle_relief()
            return True
        if event.type is EventType.MOUSE_BUTTONUP and self.app.active_widget is self:
            self.app.active_widget = None
            self._toggle_relief()
            if self.callback is not None:
                self.callback(self, event, self.user_param)
            return True
        return False