"""EditSurface over a Textual ``TextArea``."""

from __future__ import annotations

try:  # pragma: no cover - exercised only with textual installed
    from textual.widgets import TextArea
    from textual.widgets.text_area import Selection as TextAreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use mdedit.adapters.textual.surface"
    ) from exc

from mdedit.text import Selection, location_to_offset, offset_to_location


class TextAreaSurface:
    """Translates character offsets to the row/column locations TextArea uses.

    Edits go through ``TextArea.replace`` so they land in the widget's own
    undo history.
    """

    def __init__(self, text_area: TextArea) -> None:
        self.text_area = text_area

    @property
    def text(self) -> str:
        return self.text_area.text

    @property
    def selection(self) -> Selection:
        text = self.text
        selection = self.text_area.selection
        anchor = location_to_offset(text, selection.start)
        cursor = location_to_offset(text, selection.end)
        return (min(anchor, cursor), max(anchor, cursor))

    def replace_range(self, start: int, end: int, text: str) -> None:
        current = self.text
        self.text_area.replace(
            text,
            offset_to_location(current, start),
            offset_to_location(current, end),
        )

    def set_selection(self, start: int, end: int) -> None:
        current = self.text
        self.text_area.selection = TextAreaSelection(
            offset_to_location(current, start),
            offset_to_location(current, end),
        )


__all__ = ["TextAreaSurface"]
