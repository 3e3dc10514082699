"""The frame widget: a rectangle with an optional border, text or image."""

from __future__ import annotations

from .geometry import (
    DEFAULT_BACKGROUND,
    DEFAULT_TEXT_COLOR,
    Anchor,
    Color,
    Point,
    Rect,
    Relief,
    Size,
    anchor_top_left,
    rect_polygon,
)
from .rendering import DEFAULT_FONT, Canvas, Image
from .widget import Application, Widget, clip_rect

_UNSET = object()


def draw_anchored_text(
    canvas: Canvas,
    widget: Widget,
    text: str,
    font: object,
    color: Color,
    anchor: Anchor,
    clipper: Rect | None,
) -> None:
    """Draw ``text`` anchored inside the content rectangle of ``widget``."""
    size = widget.app.text_measurer.text_size(text, font)
    where = anchor_top_left(anchor, widget.content_rect, size)
    canvas.draw_text(where, text, font, color, clipper)


def draw_anchored_image(
    canvas: Canvas,
    widget: Widget,
    img: Image,
    img_rect: Rect | None,
    anchor: Anchor,
    clipper: Rect | None,
) -> None:
    """Copy ``img`` (or its ``img_rect`` part) anchored inside the widget's content."""
    if img_rect is not None:
        size = img_rect.size
        src_x, src_y = img_rect.left, img_rect.top
    else:
        size = img.size
        src_x, src_y = 0, 0

    top_left = anchor_top_left(anchor, widget.content_rect, size)
    dst_x, dst_y = top_left.x, top_left.y
    width, height = size.width, size.height

    if clipper is not None:
        if dst_x + width > clipper.right:
            width = clipper.right - dst_x
        if dst_y + height > clipper.bottom:
            height = clipper.bottom - dst_y
        if dst_x < clipper.left:
            shift = clipper.left - dst_x
            width -= shift
            src_x += shift
            dst_x = clipper.left
        if dst_y < clipper.top:
            shift = clipper.top - dst_y
            height -= shift
            src_y += shift
            dst_y = clipper.top

    if width > 0 and height > 0:
        copied = Size(width, height)
        canvas.copy_image(
            Rect(Point(dst_x, dst_y), copied), img, Rect(Point(src_x, src_y), copied)
        )


class Frame(Widget):
    """A plain rectangular widget, optionally bordered, showing a text or an image."""

    def __init__(self, app: Application) -> None:
        super().__init__(app)
        self.color: Color = DEFAULT_BACKGROUND
        self.border_width = 0
        self.relief = Relief.NONE
        self.text: str | None = None
        self.text_font: object = DEFAULT_FONT
        self.text_color: Color = DEFAULT_TEXT_COLOR
        self.text_anchor = Anchor.CENTER
        self.img: Image | None = None
        self.img_rect: Rect | None = None
        self.img_anchor = Anchor.CENTER

    def configure(
        self,
        *,
        requested_size: Size | None = None,
        color: Color | None = None,
        border_width: int | None = None,
        relief: Relief | None = None,
        text=_UNSET,
        text_font: object = None,
        text_color: Color | None = None,
        text_anchor: Anchor | None = None,
        img=_UNSET,
        img_rect=_UNSET,
        img_anchor: Anchor | None = None,
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

        self.run_placer()
        self.app.invalidate_rect(self.screen_location.intersect(self.app.screen_rect))

    def natural_size(self) -> Size | None:
        if self.img_rect is not None:
            return self.img_rect.size
        if self.text:
            return self.app.text_measurer.text_size(self.text, self.text_font)
        return None

    def compute_screen_location(self) -> Rect:
        border = self.border_width
        content = self.content_rect
        return Rect(
            Point(content.left - border, content.top - border),
            Size(content.size.width + 2 * border, content.size.height + 2 * border),
        )

    def _draw_content(self, canvas: Canvas, clipper: Rect) -> None:
        if self.text is not None:
            draw_anchored_text(
                canvas,
                self,
                self.text,
                self.text_font,
                self.text_color,
                self.text_anchor,
                clipper,
            )
        elif self.img is not None:
            draw_anchored_image(
                canvas, self, self.img, self.img_rect, self.img_anchor, clipper
            )

    def _border_polygons(self) -> tuple[list[Point], list[Point]]:
        screen = self.screen_location
        content = self.content_rect
        upper_left = [
            screen.top_left,
            Point(screen.right, screen.top),
            Point(content.right, content.top),
            content.top_left,
            Point(content.left, content.bottom),
            Point(screen.left, screen.bottom),
            screen.top_left,
        ]
        lower_right = [
            Point(screen.right, screen.bottom),
            Point(screen.right, screen.top),
            Point(content.right, content.top),
            Point(content.right, content.bottom),
            Point(content.left, content.bottom),
            Point(screen.left, screen.bottom),
            Point(screen.right, screen.bottom),
        ]
        return upper_left, lower_right

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Rect | None) -> None:
        self.run_placer()
        visible = clip_rect(clipper, self.screen_location)
        if visible is None or self.placer_params is None:
            return
        content = clip_rect(clipper, self.content_rect)

        if self.relief is Relief.NONE or self.border_width == 0:
            outline = rect_polygon(self.screen_location)
            canvas.draw_polygon(outline, self.color, visible)
            pick_canvas.draw_polygon(outline, self.pick_color, visible)
            if content is not None:
                self._draw_content(canvas, content)
        else:
            light = self.color.lighter(40)
            dark = self.color.darker(40)
            upper_left, lower_right = self._border_polygons()
            if self.relief is Relief.RAISED:
                canvas.draw_polygon(upper_left, light, visible)
                canvas.draw_polygon(lower_right, dark, visible)
            else:
                canvas.draw_polygon(upper_left, dark, visible)
                canvas.draw_polygon(lower_right, light, visible)
            if content is not None:
                inner = rect_polygon(self.content_rect)
                canvas.draw_polygon(inner, self.color, content)
                pick_canvas.draw_polygon(inner, self.pick_color, content)
                self._draw_content(canvas, content)

        if content is not None:
            self.draw_children(canvas, pick_canvas, content)