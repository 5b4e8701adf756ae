import pytest

from sketchboard.drawing import Drawing, DrawMode
from sketchboard.shapes import Line, Painter, Rect
from sketchboard.sketch import MouseButton


def _drag(drawing, start, end):
    drawing.press(start, MouseButton.LEFT)
    drawing.release(end, MouseButton.LEFT)


def test_no_mode_means_no_drawing():
    drawing = Drawing()
    assert drawing.draw_mode is DrawMode.NONE
    drawing.press((1, 1), MouseButton.LEFT)
    assert drawing.is_drawing is False
    drawing.release((2, 2), MouseButton.LEFT)
    assert drawing.shapes == []


def test_line_mode_creates_line():
    drawing = Drawing()
    drawing.select_draw_line()
    _drag(drawing, (1, 2), (3, 4))
    assert drawing.shapes == [Line(start=(1, 2), end=(3, 4))]
    assert drawing.is_drawing is False


def test_rect_mode_creates_rect():
    drawing = Drawing()
    drawing.select_draw_rectangle()
    _drag(drawing, (5, 6), (7, 8))
    assert drawing.shapes == [Rect(start=(5, 6), end=(7, 8))]


def test_right_button_is_ignored():
    drawing = Drawing()
    drawing.select_draw_line()
    drawing.press((1, 1), MouseButton.RIGHT)
    assert drawing.is_drawing is False
    drawing.press((1, 1), MouseButton.LEFT)
    drawing.release((2, 2), MouseButton.RIGHT)
    assert drawing.is_drawing is True
    assert drawing.shapes == []


def test_paint_shows_dashed_preview_last():
    drawing = Drawing()
    drawing.select_draw_line()
    _drag(drawing, (1, 2), (3, 4))
    drawing.select_draw_rectangle()
    drawing.press((10, 20), MouseButton.LEFT)
    painter = Painter()
    drawing.paint(painter)
    assert painter.commands[0] == ("line", 1, 2, 3, 4, False)
    kind, x1, y1, _, _, dashed = painter.commands[-1]
    assert (kind, x1, y1, dashed) == ("rect", 10, 20, True)
    assert len(painter.commands) == 2


def test_paint_without_drag_has_no_preview():
    drawing = Drawing()
    drawing.select_draw_rectangle()
    _drag(drawing, (0, 0), (9, 9))
    painter = Painter()
    drawing.paint(painter)
    assert painter.commands == [("rect", 0, 0, 9, 9, False)]


def test_dumps_writes_one_shape_per_line():
    drawing = Drawing()
    drawing.select_draw_line()
    _drag(drawing, (1, 2), (3, 4))
    drawing.select_draw_rectangle()
    _drag(drawing, (5, 6), (7, 8))
    assert drawing.dumps() == "Line,1,2,3,4\nRect,5,6,7,8\n"


def test_loads_round_trip():
    drawing = Drawing()
    drawing.select_draw_line()
    _drag(drawing, (1, 2), (3, 4))
    drawing.select_draw_rectangle()
    _drag(drawing, (-5, 6), (7, -8))
    other = Drawing()
    other.loads(drawing.dumps())
    assert other.shapes == drawing.shapes


def test_loads_skips_unknown_and_clears_existing():
    drawing = Drawing()
    drawing.select_draw_line()
    _drag(drawing, (1, 1), (2, 2))
    drawing.loads("Circle,1,2,3\n\nRect,1,2,3,4\n")
    assert drawing.shapes == [Rect(start=(1, 2), end=(3, 4))]


def test_save_and_load_file(tmp_path):
    drawing = Drawing()
    drawing.select_draw_rectangle()
    _drag(drawing, (11, 12), (13, 14))
    path = tmp_path / "shapes.txt"
    drawing.save(path)
    assert path.read_text(encoding="utf-8") == drawing.dumps()
    other = Drawing()
    other.load(path)
    assert other.shapes == drawing.shapes


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        Drawing().load(tmp_path / "missing.txt")


def test_save_into_directory_raises(tmp_path):
    with pytest.raises(OSError):
        Drawing().save(tmp_path)