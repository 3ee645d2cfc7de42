"""Line-wise indent/unindent that keeps the selection on the same text."""

from __future__ import annotations

import re
from re import Pattern
from typing import List

from mdedit.text.lines import clamp_offset, lines_of
from mdedit.text.ops import EditOp, Selection, clamp_selection

INDENT_UNIT = "    "


def _unindent_pattern(width: int) -> Pattern[str]:
    return re.compile(rf"^( {{1,{max(1, width)}}}|\t)")


_DEFAULT_UNINDENT = _unindent_pattern(len(INDENT_UNIT))


def indent_line(line: str, *, unit: str = INDENT_UNIT) -> str:
    return unit + line


def unindent_line(line: str, *, width: int = len(INDENT_UNIT)) -> str:
    """Strip one leading tab or up to ``width`` leading spaces."""

    pattern = (
        _DEFAULT_UNINDENT if width == len(INDENT_UNIT) else _unindent_pattern(width)
    )
    return pattern.sub("", line, count=1)


def indent(
    buffer: str,
    selection: Selection,
    unindent: bool = False,
    *,
    unit: str = INDENT_UNIT,
) -> EditOp:
    """Indent (or unindent) every line touched by ``selection``.

    The returned operation replaces the touched lines as a whole. The new
    selection brackets the same characters as before: the start moves with
    its own line, the end with every touched line. A selection lying wholly
    outside the buffer touches no line and yields an empty insertion (see
    :attr:`EditOp.is_noop`).
    """

    low, high = sorted(selection)
    if high < 0 or low > len(buffer):
        at = clamp_offset(buffer, low)
        return EditOp(at, at, "", at, at)

    start, end = clamp_selection(buffer, *selection)
    changed: List[str] = []
    edit_start = edit_end = start
    new_start = new_end = start
    end_shift = 0

    for line in lines_of(buffer):
        if line.end < start:
            continue
        # A selection that stops right at a line start leaves that line alone.
        if changed and (line.start > end or (line.start == end and end > start)):
            break

        updated = (
            unindent_line(line.text, width=len(unit))
            if unindent
            else indent_line(line.text, unit=unit)
        )
        move = len(updated) - len(line.text)
        if not changed:
            edit_start = line.start
            new_start = max(start + move, line.start)
        changed.append(updated)
        end_shift += move
        edit_end = line.end

    new_end = max(new_start, end + end_shift)
    return EditOp(
        edit_start=edit_start,
        edit_end=edit_end,
        replacement="\n".join(changed),
        selection_start=new_start,
        selection_end=new_end,
    )


def unindent(buffer: str, selection: Selection, *, unit: str = INDENT_UNIT) -> EditOp:
    return indent(buffer, selection, unindent=True, unit=unit)


__all__ = ["INDENT_UNIT", "indent", "indent_line", "unindent", "unindent_line"]
