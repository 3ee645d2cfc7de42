"""Host boundary: the editable-text surface the core reads from and edits."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from mdedit.runtime import telemetry

from .ops import Selection
from .undo import UndoEntry, UndoTimeline


@runtime_checkable
class EditSurface(Protocol):
    """Protocol a host text control implements to be driven by the core."""

    @property
    def text(self) -> str:
        """Full current text of the control."""
        ...

    @property
    def selection(self) -> Selection:
        """Current ``(start, end)`` selection, ``start <= end``."""
        ...

    def replace_range(self, start: int, end: int, text: str) -> None:
        """Replace ``[start, end)`` with ``text``."""
        ...

    def set_selection(self, start: int, end: int) -> None:
        """Select ``[start, end)``; equal offsets place a cursor."""
        ...


class SurfaceRangeError(RuntimeError):
    """Raised when a surface is asked to address offsets it does not have."""

    def __init__(self, message: str, *, start: int, end: int) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class MemorySurface:
    """String-backed :class:`EditSurface` with undo/redo."""

    def __init__(
        self,
        text: str = "",
        selection: Optional[Selection] = None,
        *,
        name: str = "default",
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self._text = text
        self._selection: Selection = (0, 0)
        self.undo_timeline = undo or UndoTimeline()
        self._last_entry: Optional[UndoEntry] = None
        if selection is not None:
            self.set_selection(*selection)

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> Selection:
        return self._selection

    def _check_range(self, start: int, end: int) -> None:
        if start < 0 or end < start or end > len(self._text):
            raise SurfaceRangeError(
                f"range ({start}, {end}) outside text of length {len(self._text)}",
                start=start,
                end=end,
            )

    def replace_range(self, start: int, end: int, text: str) -> None:
        self._check_range(start, end)
        with telemetry.span(
            "surface::replace_range",
            component="surface",
            metadata={"surface": self.name},
        ):
            before = self._text
            selection_before = self._selection
            self._text = before[:start] + text + before[end:]
            cursor = start + len(text)
            self._selection = (cursor, cursor)
            entry = UndoEntry(
                label="replace_range",
                before_text=before,
                after_text=self._text,
                selection_before=selection_before,
                selection_after=self._selection,
            )
            self.undo_timeline.push(entry)
            self._last_entry = entry

    def set_selection(self, start: int, end: int) -> None:
        self._check_range(start, end)
        self._selection = (start, end)
        # A selection set right after an edit is what undo/redo should restore.
        if self._last_entry is not None:
            self._last_entry.selection_after = self._selection
            self._last_entry = None

    def undo(self) -> bool:
        entry = self.undo_timeline.undo()
        self._last_entry = None
        if entry is None:
            return False
        self._text = entry.before_text
        self._selection = entry.selection_before
        return True

    def redo(self) -> bool:
        entry = self.undo_timeline.redo()
        self._last_entry = None
        if entry is None:
            return False
        self._text = entry.after_text
        self._selection = entry.selection_after
        return True

    def type_text(self, text: str) -> None:
        """Insert ``text`` over the current selection, as typing would."""

        start, end = self._selection
        self.replace_range(start, end, text)
        self._last_entry = None


__all__ = ["EditSurface", "MemorySurface", "SurfaceRangeError"]
