from sketchboard.app import CanvasPainter
from sketchboard.drawing import Drawing
from sketchboard.sketch import MouseButton


class _Canvas:
    def __init__(self):
        self.calls = []

    def create_line(self, *args, **kwargs):
        self.calls.append(("create_line", args, kwargs))

    def create_rectangle(self, *args, **kwargs):
        self.calls.append(("create_rectangle", args, kwargs))


def test_solid_line_goes_to_canvas():
    canvas = _Canvas()
    painter = CanvasPainter(canvas)
    painter.draw_line(1, 2, 3, 4)
    assert canvas.calls == [("create_line", (1, 2, 3, 4), {})]
    assert painter.commands == [("line", 1, 2, 3, 4, False)]


def test_dashed_rect_carries_dash_option():
    canvas = _Canvas()
    painter = CanvasPainter(canvas)
    painter.set_dashed(True)
    painter.draw_rect(5, 6, 7, 8)
    name, args, kwargs = canvas.calls[0]
    assert (name, args) == ("create_rectangle", (5, 6, 7, 8))
    assert "dash" in kwargs
    assert painter.commands == [("rect", 5, 6, 7, 8, True)]


def test_switching_back_to_solid_drops_dash():
    canvas = _Canvas()
    painter = CanvasPainter(canvas)
    painter.set_dashed(True)
    painter.set_dashed(False)
    painter.draw_line(0, 0, 1, 1)
    assert canvas.calls[0][2] == {}


def test_drawing_paints_onto_canvas():
    drawing = Drawing()
    drawing.select_draw_line()
    drawing.press((1, 2), MouseButton.LEFT)
    drawing.release((3, 4), MouseButton.LEFT)
    drawing.select_draw_rectangle()
    drawing.press((5, 6), MouseButton.LEFT)
    canvas = _Canvas()
    drawing.paint(CanvasPainter(canvas))
    assert [call[0] for call in canvas.calls] == ["create_line", "create_rectangle"]
    assert canvas.calls[0][1] == (1, 2, 3, 4)
    assert "dash" in canvas.calls[1][2]