import pytest

from eiwidgets.events import Event, EventType
from eiwidgets.geometry import Anchor, Point, Rect, Size
from eiwidgets.pixels import ChannelOrder, map_rgba
from eiwidgets.rendering import RecordingCanvas
from eiwidgets.widget import (
    Application,
    PlacerParams,
    Widget,
    WidgetClassError,
    clip_rect,
)


class _Sized(Widget):
    def natural_size(self):
        return Size(33, 17)


class _Recorder(Widget):
    def __init__(self, app):
        super().__init__(app)
        self.clippers = []

    def draw(self, canvas, pick_canvas, clipper):
        self.clippers.append(clipper)
        super().draw(canvas, pick_canvas, clipper)


@pytest.fixture
def app():
    application = Application(Size(600, 400))
    application.register_class("box", Widget)
    application.register_class("sized", _Sized)
    application.register_class("recorder", _Recorder)
    return application


def test_root_covers_screen(app):
    assert app.root.content_rect == app.screen_rect
    assert app.root.screen_location == app.screen_rect
    assert app.root.parent is None


def test_unknown_class_raises(app):
    with pytest.raises(WidgetClassError):
        app.create_widget("nothing", app.root)


def test_non_callable_factory_rejected(app):
    with pytest.raises(TypeError):
        app.register_class("bad", 42)


def test_children_in_creation_order(app):
    first = app.create_widget("box", app.root)
    second = app.create_widget("box", app.root, user_data="data")
    assert app.root.children() == [first, second]
    assert second.parent is app.root
    assert second.user_data == "data"
    assert first.class_name == "box"


def test_default_parent_is_root(app):
    widget = app.create_widget("box")
    assert widget.parent is app.root


def test_parent_from_other_application_rejected(app):
    other = Application(Size(100, 100))
    with pytest.raises(ValueError):
        app.create_widget("box", other.root)


def test_pick_ids_are_unique(app):
    widgets = [app.create_widget("box", app.root) for _ in range(5)]
    ids = {w.pick_id for w in widgets} | {app.root.pick_id}
    assert len(ids) == 6
    assert all(app.widget_by_pick_id(w.pick_id) is w for w in widgets)


def test_place_northwest_uses_given_geometry(app):
    widget = app.create_widget("box", app.root)
    widget.place(x=150, y=300, width=300, height=200)
    assert widget.content_rect == Rect(Point(150, 300), Size(300, 200))
    assert widget.screen_location == widget.content_rect


def test_place_center_anchor_centres_on_point(app):
    widget = app.create_widget("box", app.root)
    widget.place(anchor=Anchor.CENTER, x=300, y=300, width=40, height=20)
    rect = widget.content_rect
    assert rect.left + rect.size.width // 2 == 300
    assert rect.top + rect.size.height // 2 == 300


def test_place_southeast_ends_at_point(app):
    widget = app.create_widget("box", app.root)
    widget.place(anchor=Anchor.SOUTHEAST, x=200, y=150, width=50, height=30)
    assert widget.content_rect.right == 200
    assert widget.content_rect.bottom == 150


def test_relative_size_fills_parent(app):
    parent = app.create_widget("box", app.root)
    parent.place(x=10, y=20, width=200, height=100)
    child = app.create_widget("box", parent)
    child.place(rel_width=1.0, rel_height=1.0)
    assert child.content_rect == parent.content_rect


def test_relative_position_centres_in_parent(app):
    parent = app.create_widget("box", app.root)
    parent.place(x=0, y=0, width=200, height=100)
    child = app.create_widget("box", parent)
    child.place(anchor=Anchor.CENTER, width=50, height=50, rel_x=0.5, rel_y=0.5)
    assert child.content_rect.left - parent.content_rect.left == parent.content_rect.right - child.content_rect.right


def test_requested_size_used_when_no_width(app):
    widget = app.create_widget("box", app.root)
    widget.requested_size = Size(300, 200)
    widget.place(x=5, y=5)
    assert widget.content_rect.size == Size(300, 200)


def test_natural_size_used_as_fallback(app):
    widget = app.create_widget("sized", app.root)
    widget.place()
    assert widget.content_rect.size == widget.natural_size()


def test_place_keeps_previous_values(app):
    widget = app.create_widget("box", app.root)
    widget.place(anchor=Anchor.WEST, x=150, y=300, width=80, height=40)
    widget.place(x=10)
    assert widget.placer_params.anchor == Anchor.WEST
    assert widget.placer_params.y == 300
    assert widget.placer_params.x == 10


def test_place_invalidates_screen_location(app):
    widget = app.create_widget("box", app.root)
    app.take_invalidated()
    widget.place(x=1, y=2, width=3, height=4)
    assert app.take_invalidated() == [widget.screen_location]
    assert app.take_invalidated() == []


def test_forget_stops_management(app):
    widget = app.create_widget("box", app.root)
    widget.place(width=10, height=10)
    widget.forget()
    assert widget.placer_params is None


def test_placer_params_defaults():
    params = PlacerParams()
    assert params.anchor == Anchor.NORTHWEST
    assert (params.x, params.y, params.width, params.height) == (0, 0, 0, 0)


def test_children_drawn_with_content_clipper(app):
    parent = app.create_widget("box", app.root)
    parent.place(x=10, y=10, width=100, height=100)
    child = app.create_widget("recorder", parent)
    child.place(width=10, height=10)
    clipper = Rect(Point(50, 50), Size(500, 500))
    app.root.draw(RecordingCanvas(), RecordingCanvas(), clipper)
    assert child.clippers == [clipper.intersect(parent.content_rect)]


def test_unplaced_widget_does_not_draw_children(app):
    parent = app.create_widget("box", app.root)
    child = app.create_widget("recorder", parent)
    child.place(width=10, height=10)
    parent.draw(RecordingCanvas(), RecordingCanvas(), None)
    assert child.clippers == []


def test_clip_rect_without_clipper_returns_rect():
    rect = Rect(Point(5, 0), Size(10, 10))
    assert clip_rect(None, rect) == rect


def test_clip_rect_disjoint_is_none():
    assert clip_rect(Rect(Point(0, 0), Size(5, 5)), Rect(Point(10, 10), Size(5, 5))) is None


def test_base_handle_returns_false(app):
    widget = app.create_widget("box", app.root)
    event = Event.mouse(EventType.MOUSE_BUTTONDOWN, Point(1, 1))
    assert widget.handle(event) is False


def test_destroy_removes_subtree(app):
    destroyed = []
    parent = app.create_widget("box", app.root, destructor=destroyed.append)
    child = app.create_widget("box", parent, destructor=destroyed.append)
    sibling = app.create_widget("box", app.root)
    parent.place(x=0, y=0, width=50, height=50)
    app.take_invalidated()
    parent.destroy()
    assert app.root.children() == [sibling]
    assert set(destroyed) == {parent, child}
    assert app.take_invalidated() == [parent.screen_location]
    with pytest.raises(KeyError):
        app.widget_by_pick_id(child.pick_id)


def test_destroy_clears_active_widget(app):
    widget = app.create_widget("box", app.root)
    app.active_widget = widget
    widget.destroy()
    assert app.active_widget is None
    assert widget.destroyed


def test_create_under_destroyed_parent_rejected(app):
    parent = app.create_widget("box", app.root)
    parent.destroy()
    with pytest.raises(ValueError):
        app.create_widget("box", parent)


def test_pick_round_trip(app):
    channels = ChannelOrder(red=2, green=1, blue=0, alpha=3)
    widgets = [app.create_widget("box", app.root) for _ in range(3)]
    for widget in widgets:
        pixel = map_rgba(widget.pick_color, channels)
        assert app.pick(pixel, channels) is widget