"""Key and toolbar routing between a text widget and the editing core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from mdedit.actions import EditKind, apply_to_surface
from mdedit.runtime.config import EditorSettings, load_settings
from mdedit.text import EditOp, EditSurface

_KEY_ALIASES = {
    "return": "enter",
    "esc": "escape",
    "backtab": "shift+tab",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class UIHooks:
    """Callbacks the controller invokes after it changes the surface."""

    content_changed: Callable[[EditOp], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_key(
    key: str, modifiers: Iterable[str] = ()
) -> Tuple[str, Tuple[str, ...]]:
    """Split ``"shift+tab"``-style names into a base key and sorted modifiers."""

    name = key.strip().lower()
    name = _KEY_ALIASES.get(name, name)
    parts = name.split("+")
    base = parts[-1] or "+"
    mods = {part for part in parts[:-1] if part}
    mods.update(str(mod).strip().lower() for mod in modifiers if str(mod).strip())
    return base, tuple(sorted(mods))


class MarkdownEditorController:
    """Decides which key presses the editing core handles.

    ``handle_key`` returns ``True`` when the press was consumed and the
    widget's default handling must be suppressed. Plain Enter continues lists
    and quotes. Tab and Shift+Tab indent and unindent only while tab capture
    is active: capture starts off so keyboard users can tab past the editor,
    turns on with the first input or pointer event, and Escape turns it off.
    """

    def __init__(
        self,
        surface: EditSurface,
        *,
        settings: Optional[EditorSettings] = None,
        hooks: Optional[UIHooks] = None,
    ) -> None:
        self.surface = surface
        self.settings = settings or load_settings()
        self.hooks = hooks or UIHooks()
        self.tab_capture = False

    def notify_input(self) -> None:
        self.tab_capture = True

    def notify_pointer(self) -> None:
        self.tab_capture = True

    def indent(self) -> Optional[EditOp]:
        return self._run(EditKind.INDENT)

    def unindent(self) -> Optional[EditOp]:
        return self._run(EditKind.UNINDENT)

    def handle_key(self, key: str, modifiers: Iterable[str] = ()) -> bool:
        base, mods = normalize_key(key, modifiers)
        self._log_state("key ->", key=base, mods=mods)

        if base == "escape":
            self.tab_capture = False
            return False

        if base == "enter":
            if mods:
                return False
            return self._run(EditKind.CONTINUE) is not None

        if base == "tab":
            if not (self.settings.tab_indent and self.tab_capture):
                return False
            if set(mods) - {"shift"}:
                return False
            self._run(EditKind.UNINDENT if "shift" in mods else EditKind.INDENT)
            return True

        return False

    def _run(self, kind: EditKind) -> Optional[EditOp]:
        op = apply_to_surface(self.surface, kind, settings=self.settings)
        if op is None:
            self._log_state("result <-", kind=kind.value, status="default")
            return None
        self.hooks.content_changed(op)
        self.hooks.update_status(kind.value)
        self._log_state("result <-", kind=kind.value, status="applied")
        return op

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "selection": self.surface.selection,
            "tab_capture": self.tab_capture,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["MarkdownEditorController", "UIHooks", "normalize_key"]
