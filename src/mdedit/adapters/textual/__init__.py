"""Textual host adapter for the editing core."""

from .controller import MarkdownEditorController, UIHooks, normalize_key

__all__ = ["MarkdownEditorController", "UIHooks", "normalize_key"]
