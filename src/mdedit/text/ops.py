"""Selection and edit-operation value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .lines import clamp_offset

Selection = Tuple[int, int]  # (start, end) character offsets


def clamp_selection(buffer: str, start: int, end: Optional[int] = None) -> Selection:
    """Clamp ``start``/``end`` into ``buffer`` and order them."""

    start = clamp_offset(buffer, start)
    end = start if end is None else clamp_offset(buffer, end)
    if start > end:
        start, end = end, start
    return (start, end)


@dataclass(frozen=True, slots=True)
class EditOp:
    """Single contiguous replacement plus the selection to restore afterward.

    ``edit_start``/``edit_end`` address the buffer the operation was computed
    from; ``selection_start``/``selection_end`` address the buffer after the
    replacement has been applied.
    """

    edit_start: int
    edit_end: int
    replacement: str
    selection_start: int
    selection_end: int

    def __post_init__(self) -> None:
        if self.edit_start < 0 or self.edit_end < self.edit_start:
            raise ValueError(
                f"invalid edit range ({self.edit_start}, {self.edit_end})"
            )
        if self.selection_start < 0 or self.selection_end < self.selection_start:
            raise ValueError(
                f"invalid selection ({self.selection_start}, {self.selection_end})"
            )

    @property
    def is_insertion(self) -> bool:
        return self.edit_start == self.edit_end

    @property
    def is_noop(self) -> bool:
        """True for an empty insertion, which leaves any buffer unchanged."""

        return self.is_insertion and not self.replacement

    @property
    def selection(self) -> Selection:
        return (self.selection_start, self.selection_end)

    def apply(self, buffer: str) -> str:
        """Return ``buffer`` with the replacement spliced in."""

        return buffer[: self.edit_start] + self.replacement + buffer[self.edit_end :]


__all__ = ["EditOp", "Selection", "clamp_selection"]
