# sketchboard

A small sketching tool for drawing straight lines and rectangles. Drawings are saved to and opened from a plain-text file.

## Installing

```
pip install .
```

The window is built with tkinter from the standard library. No other packages are needed. Some Python builds ship without tkinter. On those, the library modules still work, but the `sketchboard` command does not.

## Running the editor

```
sketchboard
```

This opens an 800×600 white canvas that has two menus:

- **文件** (File): **保存** (Save) and **打开** (Open). Both use a file dialog that offers `*.txt` files. A warning box appears if the file cannot be written or read. An information box confirms success.
- **绘图** (Draw): **画线** (Line) and **画矩形** (Rectangle). The choice sets what the next drag creates.

Choose a mode. Then press the left mouse button at one point and release it at another. The shape is added and the canvas is redrawn. Nothing is drawn until a mode has been chosen.

## File format

Each shape takes one line: its kind, then the start and end points:

```
Line,10,20,30,40
Rect,0,0,100,50
```

When a file is loaded:

- A line that starts with neither `Line` nor `Rect` is skipped.
- A field that is not a 32-bit integer reads as 0.
- A line that starts with a kind but does not have exactly five comma-separated fields with that kind as the first field gives a shape at the origin.

## Using it as a library

### Drawings

`sketchboard.drawing.Drawing` holds a list of shapes and builds them from press and release events:

```python
from sketchboard.drawing import Drawing
from sketchboard.sketch import MouseButton

drawing = Drawing()
drawing.select_draw_rectangle()
drawing.press((0, 0), MouseButton.LEFT)
drawing.release((100, 50), MouseButton.LEFT)

text = drawing.dumps()        # "Rect,0,0,100,50\n"
drawing.save("picture.txt")

other = Drawing()
other.load("picture.txt")     # replaces other.shapes
```

- `loads(text)` replaces the shapes with those parsed from a string.
- `save` and `load` raise `OSError` when the file cannot be written or read.
- The current mode is in `draw_mode`, a `DrawMode` of `NONE`, `LINE` or `RECT`.
- While a drag is in progress (`is_drawing`), `paint(painter)` draws all shapes and then a dashed preview from the press point to `end_point`.

### Shapes

`sketchboard.shapes` has `Line` and `Rect`. Each has a `start` point and an `end` point as `(x, y)` tuples, and the methods `paint`, `to_string` and `from_string`:

```python
from sketchboard.shapes import ShapeKind, create_shape, parse_shape

shape = parse_shape("Line,1,2,3,4")
print(shape.to_string())      # Line,1,2,3,4

rect = create_shape(ShapeKind.RECT)   # both points at (0, 0)
```

`parse_shape` returns `None` for text that names no shape.

### Painters

Shapes draw through a `Painter`, which has `draw_line`, `draw_rect` and `set_dashed`. The base `Painter` records each call in `commands` as a tuple `(kind, x1, y1, x2, y2, dashed)`. To render somewhere else, subclass it. `sketchboard.app.CanvasPainter` is such a subclass: it records the calls and also draws them onto a tkinter canvas.

### Sketch pad

`sketchboard.sketch.SketchPad` is a second drag model that follows the mouse as it moves:

- `set_current_shape(kind)` chooses the kind of shape; it is a line by default.
- `press` starts a shape.
- `move` stretches it.
- `release` finishes it with the end point of the last move.
- `paint` draws the finished shapes and the one in progress.

### Numbered segment stacks

`sketchboard.linestack.LineStack` is a last-in, first-out stack of named `Segment`s. Popping an empty stack raises `EmptyStackError`. `sketchboard.filehandler` saves such a stack in its own format, `lineN,x1,y1,x2,y2`, numbered from 1, bottom of the stack first:

```python
from sketchboard.linestack import LineStack, Segment
from sketchboard.filehandler import save_to_file, load_from_file

stack = LineStack()
stack.push(Segment(0, 0, 10, 10))
save_to_file("segments.txt", stack)
restored = load_from_file("segments.txt")   # a new LineStack
```

When loading, lines without exactly five fields are skipped. The first field becomes the segment's `name`.

## What it does not do

- The editor window shows no preview while you drag. The shape appears only when the button is released.
- The window uses `Drawing` only. `SketchPad` and the segment stack are not connected to any command.
- Shapes cannot be selected, moved, deleted or undone.
- Drawings cannot be exported to image formats.

## Running the tests

```
pip install .[test]
pytest
```