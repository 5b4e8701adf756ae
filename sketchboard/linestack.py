"""A stack of named line segments."""

from __future__ import annotations

from dataclasses import dataclass


class EmptyStackError(IndexError):
    """Raised when popping from an empty stack."""


@dataclass
class Segment:
    """A named line segment between two points."""

    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0
    name: str = ""


class LineStack:
    """Last-in, first-out collection of segments."""

    def __init__(self) -> None:
        self._items: list[Segment] = []

    def push(self, line: Segment) -> None:
        """Put a segment on top of the stack."""
        self._items.append(line)

    def pop(self) -> Segment:
        """Remove and return the top segment."""
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return True if the stack holds no segments."""
        return not self._items

    def all_lines(self) -> list[Segment]:
        """Return every segment, from the bottom of the stack to the top."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)