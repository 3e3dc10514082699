# eiwidgets

eiwidgets is a small widget toolkit written in plain Python. It provides:

- three widget classes: `Frame`, `Button` and `Toplevel`
- a placer that handles absolute and relative placement
- tracking of damaged rectangles
- picking of widgets by colour id

Widgets draw through a `Canvas` protocol. The `RecordingCanvas` stores every draw command in order. You can inspect those commands, or replay them on a real drawing backend of your own.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest
```

## Modules

- `eiwidgets.geometry` holds the basic types and helpers:
  - `Point`, `Size`, `Rect` (with `intersect` and `contains`) and `Color` (with `lighter` and `darker`).
  - The enums `Anchor`, `Relief` and `Axis`.
  - The helpers `anchor_top_left`, `rect_polygon` and `arc_points`.
- `eiwidgets.pixels` handles pixel values:
  - `ChannelOrder` gives the byte position of each channel.
  - `map_rgba` packs a colour into a 32-bit pixel.
  - `pick_color` and `pick_id_from_pixel` convert between widget ids and picking colours.
- `eiwidgets.events` defines `EventType`, `MouseButton` and `Event`. Use `Event.mouse(kind, where, button)` to build a mouse event.
- `eiwidgets.rendering` provides:
  - the `Canvas` protocol
  - `RecordingCanvas`, which has `of_kind` for filtering recorded commands
  - `DrawCommand`
  - `Image`, a list of `Color` pixels
  - `FixedTextMeasurer`, which measures text as fixed-width characters
- `eiwidgets.widget` provides:
  - `Application`, which holds the root widget, the registered classes, the invalidated rectangles and the active widget
  - `Widget`, the common base class
  - `PlacerParams`
  - `WidgetClassError`
- `eiwidgets.frame`, `eiwidgets.button` and `eiwidgets.toplevel` hold the widget classes.

## Using it

`Application` starts with no widget classes. Register each class you need before you create widgets of it:

```python
from eiwidgets.button import Button
from eiwidgets.events import Event, EventType, MouseButton
from eiwidgets.geometry import Anchor, Point, Relief, Size
from eiwidgets.rendering import RecordingCanvas
from eiwidgets.toplevel import Toplevel
from eiwidgets.widget import Application

app = Application(Size(800, 600))
app.register_class("toplevel", Toplevel)
app.register_class("button", Button)

window = app.create_widget("toplevel", app.root)
window.configure(requested_size=Size(320, 240), title="Hello World")
window.place(x=30, y=10)

clicks = []
button = app.create_widget("button", window)
button.configure(text="click", relief=Relief.RAISED,
                 callback=lambda widget, event, param: clicks.append(event))
button.place(Anchor.SOUTHEAST, -20, -20, rel_x=1.0, rel_y=1.0, rel_width=0.5)

canvas, picks = RecordingCanvas(), RecordingCanvas()
app.root.draw(canvas, picks, None)

button.handle(Event.mouse(EventType.MOUSE_BUTTONDOWN, Point(0, 0), MouseButton.LEFT))
button.handle(Event.mouse(EventType.MOUSE_BUTTONUP, Point(0, 0), MouseButton.LEFT))
assert len(clicks) == 1
```

### Placing widgets

`Widget.place(...)` stores the placer parameters. Any parameter left as `None` keeps its current value. The parameters are:

- the anchor
- the absolute `x`, `y`, `width` and `height`
- the relative `rel_x`, `rel_y`, `rel_width` and `rel_height`

If you give neither a width nor a relative width, the placer uses the requested size. When the requested size is zero, it falls back to the widget's natural size, which comes from its image rectangle or its text.

After `place` runs, the placer recomputes `content_rect` and `screen_location` and invalidates the new screen area. `Widget.forget()` stops managing the widget.

### Configuring widgets

`Frame.configure`, `Button.configure` and `Toplevel.configure` take keyword arguments only. Anything you leave out keeps its current value.

- Passing `text=None` (or `title=None` for a toplevel) removes the text.
- Passing `img=None` removes the image and ends the configuration at that point. Any settings after `img` in the call are not applied.

### Drawing

`Widget.draw(canvas, pick_canvas, clipper)` draws the widget and then its children. On the pick canvas, each widget paints with its `pick_color`.

`Application.pick(pixel, channels)` reads a pixel from the picking surface and returns the widget it belongs to. `Application.take_invalidated()` returns the damaged rectangles and clears the list.

### Handling events

`Widget.handle(event)` returns `True` when the event was consumed.

- **Buttons:**
  - On press, a button becomes the active widget and its relief toggles between raised and sunken.
  - On release, the relief toggles back and the button calls `callback(widget, event, user_param)`.
- **Toplevels:**
  - Dragging with the left button on the title bar moves the window.
  - Dragging the bottom-right grip resizes the window, but never below `min_size`.
  - Clicking the close button destroys the window when `closable` is set.
- **Destroying:** `Widget.destroy()` removes a widget and all its descendants, and calls each widget's destructor.

## What it does not do

The package has no event loop and opens no window. It does not rasterise polygons or render fonts, and it does not load image files.

To show anything on screen, you feed the recorded draw commands to a real backend and deliver `Event` objects to `Widget.handle` yourself. Text size comes from `FixedTextMeasurer` unless you give the `Application` another measurer that has the same `text_size` method.

## Running the tests

```
pytest
```