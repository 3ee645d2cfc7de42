"""Offset-to-line mapping over immutable text snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

Location = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class Line:
    """Half-open ``[start, end)`` range of one line inside a buffer.

    ``end`` points at the trailing newline, or at ``len(buffer)`` for the last
    line, so ``text`` never contains the terminator. An offset equal to
    ``end`` still belongs to this line; the offset right after the newline is
    the next line's ``start``.
    """

    index: int
    start: int
    end: int
    text: str


def clamp_offset(buffer: str, offset: int) -> int:
    return max(0, min(int(offset), len(buffer)))


def lines_of(buffer: str) -> Iterator[Line]:
    """Yield every line of ``buffer``; an empty buffer yields one empty line."""

    start = 0
    index = 0
    while True:
        newline = buffer.find("\n", start)
        if newline == -1:
            yield Line(index, start, len(buffer), buffer[start:])
            return
        yield Line(index, start, newline, buffer[start:newline])
        start = newline + 1
        index += 1


def line_at(buffer: str, offset: int) -> Line:
    """Return the line containing ``offset`` (clamped into the buffer)."""

    offset = clamp_offset(buffer, offset)
    start = buffer.rfind("\n", 0, offset) + 1
    end = buffer.find("\n", offset)
    if end == -1:
        end = len(buffer)
    index = buffer.count("\n", 0, start)
    return Line(index, start, end, buffer[start:end])


def offset_to_location(buffer: str, offset: int) -> Location:
    line = line_at(buffer, offset)
    return (line.index, clamp_offset(buffer, offset) - line.start)


def location_to_offset(buffer: str, location: Location) -> int:
    """Inverse of :func:`offset_to_location`; rows and columns are clamped."""

    row, col = location
    if row < 0:
        return 0
    lines = lines_of(buffer)
    target = next(lines)
    for candidate in lines:
        if target.index >= row:
            break
        target = candidate
    return target.start + max(0, min(col, len(target.text)))


__all__ = [
    "Line",
    "Location",
    "clamp_offset",
    "line_at",
    "lines_of",
    "location_to_offset",
    "offset_to_location",
]
