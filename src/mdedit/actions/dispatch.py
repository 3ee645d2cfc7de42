"""Entry points the host calls with a text snapshot and an operation kind."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

from mdedit.runtime import telemetry
from mdedit.runtime.config import EditorSettings
from mdedit.text.ops import EditOp
from mdedit.text.surface import EditSurface

from .continuation import detect_continuation
from .indent import indent


class EditKind(str, Enum):
    INDENT = "indent"
    UNINDENT = "unindent"
    CONTINUE = "continue"


Operation = Callable[[str, int, int, EditorSettings], Optional[EditOp]]


def _indent(text: str, start: int, end: int, settings: EditorSettings) -> EditOp:
    return indent(text, (start, end), unit=settings.indent_unit)


def _unindent(text: str, start: int, end: int, settings: EditorSettings) -> EditOp:
    return indent(text, (start, end), unindent=True, unit=settings.indent_unit)


def _continue(
    text: str, start: int, end: int, settings: EditorSettings
) -> Optional[EditOp]:
    return detect_continuation(
        text, start, selection_end=end, keep_indent=settings.keep_indent
    )


OPERATIONS: Dict[EditKind, Operation] = {
    EditKind.INDENT: _indent,
    EditKind.UNINDENT: _unindent,
    EditKind.CONTINUE: _continue,
}


def run_operation(
    kind: EditKind | str,
    text: str,
    selection_start: int,
    selection_end: int,
    *,
    settings: Optional[EditorSettings] = None,
) -> Optional[EditOp]:
    """Compute the edit for ``kind``; ``None`` means "use default behaviour"."""

    kind = EditKind(kind)
    settings = settings or EditorSettings()
    selection = (selection_start, selection_end)

    with telemetry.span(
        f"edit::{kind.value}",
        component="actions",
        metadata={"selection": selection},
    ) as handle:
        # Offsets stay raw; each operation clamps for itself.
        op = OPERATIONS[kind](text, selection_start, selection_end, settings)
        if op is not None and op.is_noop:
            op = None
        if op is None:
            handle.add_metadata("result", "noop")
            telemetry.record_event(
                "edit.noop",
                level="debug",
                data={"kind": kind.value, "selection": selection},
            )
        return op


def apply_to_surface(
    surface: EditSurface,
    kind: EditKind | str,
    *,
    settings: Optional[EditorSettings] = None,
) -> Optional[EditOp]:
    """Run ``kind`` against ``surface`` and apply the resulting edit to it."""

    start, end = surface.selection
    op = run_operation(kind, surface.text, start, end, settings=settings)
    if op is None:
        return None
    surface.replace_range(op.edit_start, op.edit_end, op.replacement)
    surface.set_selection(op.selection_start, op.selection_end)
    return op


__all__ = ["EditKind", "OPERATIONS", "apply_to_surface", "run_operation"]
