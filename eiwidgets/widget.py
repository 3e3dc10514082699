"""Widget hierarchy, the placer geometry manager and the application registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .events import Event
from .geometry import Anchor, Point, Rect, Size
from .pixels import ChannelOrder, pick_color, pick_id_from_pixel
from .rendering import Canvas, FixedTextMeasurer

WidgetFactory = Callable[["Application"], "Widget"]
Destructor = Callable[["Widget"], None]
EventHandler = Callable[["Widget", Event], bool]


class WidgetClassError(LookupError):
    """Raised when a widget class name is not registered."""


@dataclass
class PlacerParams:
    """Placement parameters of a widget managed by the placer."""

    anchor: Anchor = Anchor.NORTHWEST
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    rel_x: float = 0.0
    rel_y: float = 0.0
    rel_width: float = 0.0
    rel_height: float = 0.0


def clip_rect(clipper: Rect | None, rect: Rect) -> Rect | None:
    """Part of ``rect`` inside ``clipper``; the whole of ``rect`` if there is no clipper."""
    if clipper is None:
        return rect
    return clipper.intersect(rect)


# How far left (up) of the anchor point the widget starts:
# 0: not at all, 1: half its size, 2: its whole size.
_PLACER_OFFSET = {
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


def _offset(mode: int, length: int) -> int:
    if mode == 0:
        return 0
    if mode == 1:
        return length >> 1
    return length


class Application:
    """Owns the root widget, the registered widget classes and the damaged areas."""

    def __init__(
        self,
        size: Size = Size(800, 600),
        text_measurer: FixedTextMeasurer | None = None,
        root_factory: WidgetFactory | None = None,
    ) -> None:
        self.screen_rect = Rect(Point(0, 0), size)
        self.text_measurer = text_measurer if text_measurer is not None else FixedTextMeasurer()
        self.active_widget: Widget | None = None
        self._classes: dict[str, WidgetFactory] = {}
        self._widgets: dict[int, Widget] = {}
        self._next_pick_id = 0
        self._invalidated: list[Rect] = []

        root = (root_factory or Widget)(self)
        root.class_name = "root"
        root.content_rect = self.screen_rect
        root.placer_params = PlacerParams()
        self._register(root)
        root.run_placer()
        self.root = root

    def register_class(self, name: str, factory: WidgetFactory) -> None:
        """Make ``name`` available to :meth:`create_widget`."""
        if not callable(factory):
            raise TypeError(f"widget factory for {name!r} is not callable")
        self._classes[name] = factory

    def create_widget(
        self,
        class_name: str,
        parent: Widget | None = None,
        user_data: object = None,
        destructor: Destructor | None = None,
    ) -> Widget:
        """Create a widget of a registered class as the last child of ``parent``."""
        try:
            factory = self._classes[class_name]
        except KeyError:
            raise WidgetClassError(f"unknown widget class: {class_name!r}") from None
        if parent is None:
            parent = self.root
        if parent.app is not self:
            raise ValueError("parent widget belongs to another application")
        if parent.destroyed:
            raise ValueError("parent widget has been destroyed")
        widget = factory(self)
        widget.class_name = class_name
        widget.parent = parent
        parent._children.append(widget)
        widget.user_data = user_data
        widget.destructor = destructor
        self._register(widget)
        return widget

    def invalidate_rect(self, rect: Rect | None) -> None:
        """Record a screen area that must be redrawn; ``None`` is ignored."""
        if rect is not None:
            self._invalidated.append(rect)

    def take_invalidated(self) -> list[Rect]:
        """Return the recorded areas, oldest first, and forget them."""
        rects, self._invalidated = self._invalidated, []
        return rects

    def widget_by_pick_id(self, pick_id: int) -> Widget:
        """The live widget with this picking identifier."""
        try:
            return self._widgets[pick_id]
        except KeyError:
            raise KeyError(f"no widget with pick id {pick_id}") from None

    def pick(self, pixel: int, channels: ChannelOrder) -> Widget:
        """The widget whose colour is stored in a picking-surface pixel."""
        return self.widget_by_pick_id(pick_id_from_pixel(pixel, channels))

    def _register(self, widget: Widget) -> None:
        widget.pick_id = self._next_pick_id
        self._widgets[widget.pick_id] = widget
        self._next_pick_id += 1

    def _unregister(self, widget: Widget) -> None:
        self._widgets.pop(widget.pick_id, None)
        if self.active_widget is widget:
            self.active_widget = None


class Widget:
    """Common part of every widget: hierarchy, geometry and drawing of children."""

    def __init__(self, app: Application) -> None:
        self.app = app
        self.class_name = type(self).__name__.lower()
        self.pick_id = -1
        self.user_data: object = None
        self.destructor: Destructor | None = None
        self.event_handler: EventHandler | None = None
        self.parent: Widget | None = None
        self._children: list[Widget] = []
        self.placer_params: PlacerParams | None = None
        self.requested_size = Size(0, 0)
        self.screen_location = Rect(Point(0, 0), Size(0, 0))
        self.content_rect = Rect(Point(0, 0), Size(0, 0))
        self.destroyed = False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.class_name!r} pick_id={self.pick_id}>"

    @property
    def pick_color(self):
        """The colour that identifies this widget on the picking surface."""
        return pick_color(self.pick_id)

    def children(self) -> list[Widget]:
        """The children in drawing order, first to last."""
        return list(self._children)

    def place(
        self,
        anchor: Anchor | None = None,
        x: int | None = None,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
        rel_x: float | None = None,
        rel_y: float | None = None,
        rel_width: float | None = None,
        rel_height: float | None = None,
    ) -> None:
        """Manage the widget with the placer; parameters left as None keep their value."""
        if self.placer_params is None:
            self.placer_params = PlacerParams()
        params = self.placer_params
        if anchor is not None:
            params.anchor = anchor
        if x is not None:
            params.x = x
        if y is not None:
            params.y = y

        natural: Size | None = None
        natural_known = False

        def natural_size() -> Size | None:
            nonlocal natural, natural_known
            if not natural_known:
                natural = self.natural_size()
                natural_known = True
            return natural

        if width is not None:
            params.width = width
        elif rel_width is None:
            if self.requested_size.width != 0:
                params.width = self.requested_size.width
            elif (size := natural_size()) is not None:
                params.width = size.width

        if height is not None:
            params.height = height
        elif rel_height is None:
            if self.requested_size.height != 0:
                params.height = self.requested_size.height
            elif (size := natural_size()) is not None:
                params.height = size.height

        if rel_x is not None:
            params.rel_x = rel_x
        if rel_y is not None:
            params.rel_y = rel_y
        if rel_width is not None:
            params.rel_width = rel_width
        if rel_height is not None:
            params.rel_height = rel_height

        self.run_placer()
        self.app.invalidate_rect(self.screen_location)

    def forget(self) -> None:
        """Stop managing the widget; it is no longer displayed."""
        self.placer_params = None

    def run_placer(self) -> None:
        """Recompute ``content_rect`` and ``screen_location`` from the placer parameters."""
        params = self.placer_params
        if params is None:
            return
        if self.parent is not None:
            parent_rect = self.parent.content_rect
            anchor_x = int(params.rel_x * parent_rect.size.width + params.x + parent_rect.left)
            anchor_y = int(params.rel_y * parent_rect.size.height + params.y + parent_rect.top)
            size = Size(
                int(params.rel_width * parent_rect.size.width + params.width),
                int(params.rel_height * parent_rect.size.height + params.height),
            )
        else:
            anchor_x, anchor_y = params.x, params.y
            size = self.content_rect.size

        offsets = _PLACER_OFFSET.get(params.anchor)
        if offsets is None:
            top_left = self.content_rect.top_left
        else:
            horizontal, vertical = offsets
            top_left = Point(
                anchor_x - _offset(horizontal, size.width),
                anchor_y - _offset(vertical, size.height),
            )
        self.content_rect = Rect(top_left, size)
        self.screen_location = self.compute_screen_location()

    def compute_screen_location(self) -> Rect:
        """The whole area the widget covers, decorations included."""
        return self.content_rect

    def natural_size(self) -> Size | None:
        """Size the widget needs for its content, or None if it has no preference."""
        return None

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Rect | None) -> None:
        """Draw the widget and its descendants within ``clipper``."""
        self.run_placer()
        if self.placer_params is None:
            return
        if clip_rect(clipper, self.screen_location) is None:
            return
        content = clip_rect(clipper, self.content_rect)
        if content is not None:
            self.draw_children(canvas, pick_canvas, content)

    def draw_children(
        self, canvas: Canvas, pick_canvas: Canvas, clipper: Rect | None
    ) -> None:
        """Draw every child, first to last, within ``clipper``."""
        for child in self._children:
            child.draw(canvas, pick_canvas, clipper)

    def handle(self, event: Event) -> bool:
        """React to an event through ``event_handler``; return True if it was consumed.

        A widget without an event handler consumes nothing.
        """
        if self.destroyed or self.event_handler is None:
            return False
        return bool(self.event_handler(self, event))

    def destroy(self) -> None:
        """Remove the widget from the screen and destroy it with all its descendants."""
        if self.destroyed:
            return
        self.app.invalidate_rect(self.screen_location)
        if self.parent is not None and self in self.parent._children:
            self.parent._children.remove(self)
        self._destroy_tree()

    def _destroy_tree(self) -> None:
        for child in list(self._children):
            child._destroy_tree()
        self._children.clear()
        if self.destructor is not None:
            self.destructor(self)
        self.placer_params = None
        self.app._unregister(self)
        self.destroyed = True