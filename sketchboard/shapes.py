"""Drawable shapes, their text form, and a painter that records drawing."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

Point = tuple[int, int]

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    """Parse a 32-bit integer, yielding 0 when the text is not one."""
    candidate = text.strip()
    if not _INT_PATTERN.fullmatch(candidate):
        return 0
    value = int(candidate)
    return value if _INT_MIN <= value <= _INT_MAX else 0


class Painter:
    """Painter that records drawing commands in order.

    Each command is a tuple ``(kind, x1, y1, x2, y2, dashed)`` where
    ``kind`` is ``"line"`` or ``"rect"``. Subclasses may render instead.
    """

    def __init__(self) -> None:
        self.commands: list[tuple[str, int, int, int, int, bool]] = []
        self.dashed = False

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line between two points."""
        self.commands.append(("line", x1, y1, x2, y2, self.dashed))

    def draw_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a rectangle spanning two opposite corners."""
        self.commands.append(("rect", x1, y1, x2, y2, self.dashed))

    def set_dashed(self, dashed: bool) -> None:
        """Switch between a dashed and a solid pen for later drawing."""
        self.dashed = bool(dashed)


class ShapeKind(Enum):
    """The kinds of shape that can be drawn."""

    LINE = "Line"
    RECT = "Rect"


@dataclass
class Shape(ABC):
    """A shape defined by a start point and an end point."""

    start: Point = (0, 0)
    end: Point = (0, 0)

    kind: ClassVar[ShapeKind]

    @abstractmethod
    def paint(self, painter: Painter) -> None:
        """Draw the shape with ``painter``."""

    @abstractmethod
    def to_string(self) -> str:
        """Return the shape as one line of text."""

    @abstractmethod
    def from_string(self, data: str) -> None:
        """Take coordinates from a line of text made by :meth:`to_string`."""

    def _format(self) -> str:
        (x1, y1), (x2, y2) = self.start, self.end
        return f"{self.kind.value},{x1},{y1},{x2},{y2}"

    def _apply(self, data: str) -> None:
        parts = data.split(",")
        if len(parts) != 5 or parts[0] != self.kind.value:
            return
        x1, y1, x2, y2 = (_to_int(part) for part in parts[1:])
        self.start = (x1, y1)
        self.end = (x2, y2)


@dataclass
class Line(Shape):
    """A straight line segment."""

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    def paint(self, painter: Painter) -> None:
        painter.draw_line(*self.start, *self.end)

    def to_string(self) -> str:
        return self._format()

    def from_string(self, data: str) -> None:
        self._apply(data)


@dataclass
class Rect(Shape):
    """An axis-aligned rectangle given by two corners."""

    kind: ClassVar[ShapeKind] = ShapeKind.RECT

    def paint(self, painter: Painter) -> None:
        painter.draw_rect(*self.start, *self.end)

    def to_string(self) -> str:
        return self._format()

    def from_string(self, data: str) -> None:
        self._apply(data)


_SHAPE_TYPES: dict[ShapeKind, type[Shape]] = {
    ShapeKind.LINE: Line,
    ShapeKind.RECT: Rect,
}


def create_shape(kind: ShapeKind) -> Shape:
    """Return a new shape of ``kind`` with both points at the origin."""
    return _SHAPE_TYPES[ShapeKind(kind)]()


def parse_shape(text: str) -> Shape | None:
    """Build a shape from a line of text, or return None if it names none."""
    for kind, shape_type in _SHAPE_TYPES.items():
        if text.startswith(kind.value):
            shape = shape_type()
            shape.from_string(text)
            return shape
    return None