"""Executable Textual app hosting the markdown editing core."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Button, Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use mdedit.adapters.textual.app"
    ) from exc

from mdedit.runtime import telemetry
from mdedit.runtime.config import EditorSettings, load_settings
from mdedit.text import EditOp

from .controller import MarkdownEditorController, UIHooks
from .surface import TextAreaSurface


class MarkdownTextArea(TextArea):
    """TextArea that lets the controller claim Enter and Tab first."""

    controller: Optional[MarkdownEditorController] = None

    def _on_key(self, event: events.Key) -> None:
        if self.controller is None:
            return
        if event.is_printable:
            self.controller.notify_input()
        if self.controller.handle_key(event.key):
            event.prevent_default()
            event.stop()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        del event
        if self.controller is not None:
            self.controller.notify_pointer()


class MarkdownEditorApp(App[None]):
    """Minimal editor: toolbar buttons above a markdown text area."""

    CSS = """
	#toolbar {
		height: 3;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, text: str = "", settings: Optional[EditorSettings] = None
    ) -> None:
        super().__init__()
        self._initial_text = text
        self._settings = settings or load_settings()
        self.controller: MarkdownEditorController | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="toolbar"):
            yield Button("Indent", id="indent")
            yield Button("Unindent", id="unindent")
        yield MarkdownTextArea(self._initial_text, id="editor")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        text_area = self.query_one("#editor", MarkdownTextArea)
        hooks = UIHooks(
            content_changed=self._content_changed,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.controller = MarkdownEditorController(
            TextAreaSurface(text_area), settings=self._settings, hooks=hooks
        )
        text_area.controller = self.controller
        text_area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.controller is None:
            return
        if event.button.id == "indent":
            self.controller.indent()
        elif event.button.id == "unindent":
            self.controller.unindent()
        self.query_one("#editor", MarkdownTextArea).focus()

    def _content_changed(self, op: EditOp) -> None:
        telemetry.record_event(
            "editor.changed",
            level="debug",
            data={"range": (op.edit_start, op.edit_end), "selection": op.selection},
        )

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("mdedit.adapters.textual").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the markdown editor demo.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Markdown file to load into the editor",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "quiet"),
        help="Telemetry preset (default: configured from MDEDIT_* variables)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    text = args.path.read_text(encoding="utf-8") if args.path else ""
    MarkdownEditorApp(text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
