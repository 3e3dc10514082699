import pytest

from eiwidgets.button import Button
from eiwidgets.events import Event, EventType, MouseButton
from eiwidgets.frame import Frame
from eiwidgets.geometry import Anchor, Axis, Color, Point, Rect, Relief, Size
from eiwidgets.rendering import RecordingCanvas
from eiwidgets.toplevel import Toplevel
from eiwidgets.widget import Application


def make_app():
    app = Application(Size(800, 600))
    app.register_class("toplevel", Toplevel)
    app.register_class("button", Button)
    app.register_class("frame", Frame)
    return app


def placed_window(app, **config):
    window = app.create_widget("toplevel", app.root)
    if config:
        window.configure(**config)
    window.place(x=30, y=100)
    return window


def down(x, y, button=MouseButton.LEFT):
    return Event.mouse(EventType.MOUSE_BUTTONDOWN, Point(x, y), button)


def up(x, y, button=MouseButton.LEFT):
    return Event.mouse(EventType.MOUSE_BUTTONUP, Point(x, y), button)


def move(x, y):
    return Event.mouse(EventType.MOUSE_MOVE, Point(x, y))


def test_defaults():
    app = make_app()
    window = app.create_widget("toplevel", app.root)
    assert window.title == "Toplevel"
    assert window.border_width == 4
    assert window.closable is True
    assert window.resizable is Axis.BOTH
    assert window.min_size == Size(160, 120)
    assert window.requested_size == Size(320, 240)


def test_hello_world_geometry():
    app = make_app()
    window = app.create_widget("toplevel", app.root)
    window.configure(
        requested_size=Size(320, 240),
        color=Color(0xA0, 0xA0, 0xA0, 0xFF),
        border_width=2,
        title="Hello World",
    )
    window.place(x=30, y=10)
    assert window.content_rect == Rect(Point(30, 10), Size(320, 240))
    assert window.screen_location == Rect(Point(28, -14), Size(324, 266))
    assert window.title_bar_height() == 24

    button = app.create_widget("button", window)
    button.configure(
        color=Color(0x88, 0x88, 0x88, 0xFF),
        border_width=2,
        relief=Relief.RAISED,
        text="click",
        text_color=Color(0, 0, 0, 0xFF),
    )
    button.place(
        anchor=Anchor.SOUTHEAST, x=-20, y=-20, rel_x=1.0, rel_y=1.0, rel_width=0.5
    )
    assert button.content_rect == Rect(Point(170, 210), Size(160, 20))


def test_nested_toplevels_are_destroyed_together():
    app = make_app()
    first = app.create_widget("toplevel", app.root)
    first.configure(closable=True)
    first.place(x=100, y=100, width=400, height=400)
    second = app.create_widget("toplevel", first)
    second.configure(closable=True)
    second.place(x=50, y=50, width=350, height=350)
    third = app.create_widget("toplevel", second)
    third.place(x=50, y=50, width=250, height=250)

    assert second.content_rect == Rect(Point(150, 150), Size(350, 350))
    assert third.content_rect == Rect(Point(200, 200), Size(250, 250))

    first.destroy()
    assert first.destroyed and second.destroyed and third.destroyed
    assert first not in app.root.children()


def test_configure_changes_attributes_and_invalidates():
    app = make_app()
    window = placed_window(app)
    app.take_invalidated()
    window.configure(
        title="Hello World",
        closable=False,
        resizable=Axis.NONE,
        min_size=Size(50, 50),
        border_width=2,
    )
    assert window.title == "Hello World"
    assert window.closable is False
    assert window.resizable is Axis.NONE
    assert window.min_size == Size(50, 50)
    assert app.take_invalidated() == [window.screen_location]


def test_configure_title_none_removes_title():
    app = make_app()
    window = placed_window(app)
    window.configure(title=None)
    assert window.title is None


def test_configure_requested_size_places_widget():
    app = make_app()
    window = app.create_widget("toplevel", app.root)
    window.configure(requested_size=Size(400, 400))
    assert window.placer_params is not None
    assert window.content_rect.size == Size(400, 400)


def test_screen_location_of_default_window():
    app = make_app()
    window = placed_window(app)
    assert window.content_rect == Rect(Point(30, 100), Size(320, 240))
    assert window.screen_location == Rect(Point(26, 72), Size(328, 272))
    assert window.title_bar_height() == 28


def test_click_close_button_destroys_window():
    app = make_app()
    calls = []
    window = app.create_widget("toplevel", app.root, destructor=calls.append)
    window.place(x=30, y=100)
    assert window.handle(down(40, 86)) is True
    assert window.destroyed is True
    assert calls == [window]
    assert window not in app.root.children()


def test_click_close_button_of_unclosable_window_starts_move():
    app = make_app()
    window = placed_window(app, closable=False)
    assert window.handle(down(40, 86)) is True
    assert window.destroyed is False
    assert app.active_widget is window


def test_drag_title_bar_moves_window():
    app = make_app()
    window = placed_window(app)
    assert window.handle(down(100, 80)) is True
    app.take_invalidated()
    assert window.handle(move(110, 90)) is True
    assert window.placer_params.x == 40
    assert window.placer_params.y == 110
    assert window.content_rect.top_left == Point(40, 110)
    assert app.take_invalidated() == [
        Rect(Point(26, 72), Size(328, 272)),
        Rect(Point(36, 82), Size(328, 272)),
    ]
    assert window.handle(up(110, 90)) is True
    assert app.active_widget is None


def test_resize_grip_resizes_with_minimum():
    app = make_app()
    window = placed_window(app)
    assert window.handle(down(350, 340)) is True
    assert app.active_widget is window
    window.handle(move(370, 370))
    assert window.placer_params.width == 340
    assert window.placer_params.height == 270
    assert window.content_rect.size == Size(340, 270)
    window.handle(move(70, 70))
    assert window.placer_params.width == 160
    assert window.placer_params.height == 120


def test_unresizable_window_ignores_grip():
    app = make_app()
    window = placed_window(app, resizable=Axis.NONE)
    assert window.handle(down(350, 340)) is False
    assert app.active_widget is None


def test_right_button_down_is_not_handled():
    app = make_app()
    window = placed_window(app)
    assert window.handle(down(100, 80, MouseButton.RIGHT)) is False


def test_move_without_active_widget_is_not_handled():
    app = make_app()
    window = placed_window(app)
    assert window.handle(move(100, 80)) is False


def test_draw_decorations():
    app = make_app()
    window = placed_window(app)
    canvas, pick = RecordingCanvas(), RecordingCanvas()
    window.draw(canvas, pick, None)

    buttons = canvas.of_kind("button")
    assert len(buttons) == 1
    assert buttons[0].rect == Rect(Point(34, 80), Size(12, 12))
    assert buttons[0].color == Color(200, 0, 0, 255)

    texts = canvas.of_kind("text")
    assert [t.text for t in texts] == ["Toplevel"]
    assert texts[0].where == Point(54, 76)
    assert texts[0].color == Color(255, 255, 255, 255)

    polygons = canvas.of_kind("polygon")
    assert len(polygons) == 4
    assert len(polygons[0].points) == 9
    upper = polygons[1].points
    assert upper[0] == Point(26, 100)
    assert upper[-1] == upper[0]
    assert polygons[2].color == window.color
    assert polygons[2].clipper == window.content_rect
    assert all(c.color == window.pick_color for c in pick.of_kind("polygon"))


def test_draw_without_close_button_or_grip():
    app = make_app()
    window = placed_window(app, closable=False, resizable=Axis.NONE)
    canvas, pick = RecordingCanvas(), RecordingCanvas()
    window.draw(canvas, pick, None)
    assert canvas.of_kind("button") == []
    assert len(canvas.of_kind("polygon")) == 3


def test_draw_children_clipped_to_content():
    app = make_app()
    window = placed_window(app)
    child = app.create_widget("frame", window)
    child.place(x=10, y=10, width=50, height=50)
    canvas, pick = RecordingCanvas(), RecordingCanvas()
    window.draw(canvas, pick, None)
    child_polygons = [c for c in canvas.of_kind("polygon") if c.color == child.color
                      and c.clipper == Rect(Point(40, 110), Size(50, 50))]
    assert len(child_polygons) == 1


def test_unplaced_window_draws_nothing():
    app = make_app()
    window = app.create_widget("toplevel", app.root)
    canvas, pick = RecordingCanvas(), RecordingCanvas()
    window.draw(canvas, pick, None)
    assert canvas.commands == []
    assert pick.commands == []


@pytest.mark.parametrize("border", [0, 2, 6])
def test_screen_location_encloses_content(border):
    app = make_app()
    window = placed_window(app, border_width=border)
    screen = window.screen_location
    content = window.content_rect
    assert screen.intersect(content) == content
    assert content.top - screen.top == window.title_bar_height()