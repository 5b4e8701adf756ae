"""Interactive sketch pad that rubber-bands shapes while the mouse moves."""

from __future__ import annotations

from enum import Enum

from sketchboard.shapes import Painter, Point, Shape, ShapeKind, create_shape


class MouseButton(Enum):
    """Mouse buttons that can be pressed on a drawing surface."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class SketchPad:
    """Builds shapes from left-button drags, showing the one in progress."""

    def __init__(self) -> None:
        self.current_kind = ShapeKind.LINE
        self.current_shape: Shape | None = None
        self.is_drawing = False
        self.shapes: list[Shape] = []

    def set_current_shape(self, kind: ShapeKind) -> None:
        """Choose the kind of shape the next drag creates."""
        self.current_kind = ShapeKind(kind)

    def press(self, point: Point, button: MouseButton) -> None:
        """Start a new shape at ``point`` when the left button goes down."""
        if button is not MouseButton.LEFT:
            return
        shape = create_shape(self.current_kind)
        shape.start = tuple(point)
        shape.end = tuple(point)
        self.current_shape = shape
        self.is_drawing = True

    def move(self, point: Point) -> None:
        """Stretch the shape in progress so that it ends at ``point``."""
        if self.is_drawing and self.current_shape is not None:
            self.current_shape.end = tuple(point)

    def release(self, point: Point, button: MouseButton) -> None:
        """Finish the shape in progress when the left button comes up.

        The shape keeps the end point of the last move; ``point`` is not used.
        """
        if button is MouseButton.LEFT and self.current_shape is not None:
            self.shapes.append(self.current_shape)
            self.current_shape = None
            self.is_drawing = False

    def paint(self, painter: Painter) -> None:
        """Draw every finished shape, then the one in progress."""
        for shape in self.shapes:
            shape.paint(painter)
        if self.current_shape is not None and self.is_drawing:
            self.current_shape.paint(painter)