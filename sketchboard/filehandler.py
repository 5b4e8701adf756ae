"""Save and load a line stack as UTF-8 text, one segment per line."""

from __future__ import annotations

import os
import re

from sketchboard.linestack import LineStack, Segment

_INT_PATTERN = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    candidate = text.strip()
    if not _INT_PATTERN.fullmatch(candidate):
        return 0
    value = int(candidate)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def save_to_file(path: str | os.PathLike[str], stack: LineStack) -> None:
    """Write the stack's segments, bottom first, as ``lineN,x1,y1,x2,y2``.

    Raises OSError if the file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as out:
        for number, line in enumerate(stack.all_lines(), start=1):
            out.write(f"line{number},{line.x1},{line.y1},{line.x2},{line.y2}\n")


def load_from_file(path: str | os.PathLike[str]) -> LineStack:
    """Read segments written by :func:`save_to_file` into a new stack.

    Lines that do not hold exactly five comma-separated fields are skipped;
    fields that are not integers read as 0. Raises OSError if the file
    cannot be read.
    """
    stack = LineStack()
    with open(path, encoding="utf-8") as source:
        for raw in source:
            parts = raw.removesuffix("\n").split(",")
            if len(parts) != 5:
                continue
            x1, y1, x2, y2 = (_to_int(part) for part in parts[1:])
            stack.push(Segment(x1, y1, x2, y2, name=parts[0]))
    return stack