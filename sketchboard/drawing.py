"""A drawing document: shapes made by mouse drags, saved as text."""

from __future__ import annotations

import os
from enum import Enum

from sketchboard.shapes import Line, Painter, Point, Rect, Shape, parse_shape
from sketchboard.sketch import MouseButton


class DrawMode(Enum):
    """What a left-button drag creates."""

    NONE = "none"
    LINE = "line"
    RECT = "rect"


class Drawing:
    """Shapes placed by press and release, with a dashed preview while dragging."""

    def __init__(self) -> None:
        self.shapes: list[Shape] = []
        self.start_point: Point = (0, 0)
        self.end_point: Point = (0, 0)
        self.is_drawing = False
        self.draw_mode = DrawMode.NONE

    def select_draw_line(self) -> None:
        """Make later drags create lines."""
        self.draw_mode = DrawMode.LINE

    def select_draw_rectangle(self) -> None:
        """Make later drags create rectangles."""
        self.draw_mode = DrawMode.RECT

    def press(self, point: Point, button: MouseButton) -> None:
        """Begin a drag at ``point`` if a drawing mode is selected."""
        if button is MouseButton.LEFT and self.draw_mode is not DrawMode.NONE:
            self.start_point = tuple(point)
            self.is_drawing = True

    def release(self, point: Point, button: MouseButton) -> None:
        """End the drag at ``point`` and add the shape for the current mode."""
        if button is not MouseButton.LEFT or not self.is_drawing:
            return
        self.end_point = tuple(point)
        self.is_drawing = False
        if self.draw_mode is DrawMode.LINE:
            self.shapes.append(Line(start=self.start_point, end=self.end_point))
        elif self.draw_mode is DrawMode.RECT:
            self.shapes.append(Rect(start=self.start_point, end=self.end_point))

    def paint(self, painter: Painter) -> None:
        """Draw all shapes, then a dashed preview of a drag in progress."""
        for shape in self.shapes:
            shape.paint(painter)
        if not self.is_drawing:
            return
        painter.set_dashed(True)
        if self.draw_mode is DrawMode.LINE:
            painter.draw_line(*self.start_point, *self.end_point)
        elif self.draw_mode is DrawMode.RECT:
            painter.draw_rect(*self.start_point, *self.end_point)

    def dumps(self) -> str:
        """Return the shapes as text, one shape per line."""
        return "".join(f"{shape.to_string()}\n" for shape in self.shapes)

    def loads(self, text: str) -> None:
        """Replace the shapes with those read from ``text``.

        Lines that start with neither ``Line`` nor ``Rect`` are skipped.
        """
        self.shapes = [
            shape
            for shape in map(parse_shape, text.splitlines())
            if shape is not None
        ]

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the shapes to ``path``; raises OSError on failure."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(self.dumps())

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read the shapes from ``path``; raises OSError on failure."""
        with open(path, encoding="utf-8") as source:
            text = source.read()
        self.loads(text)