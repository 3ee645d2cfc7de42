"""Indent, unindent and list continuation over text snapshots."""

from .continuation import (
    PREFIX_RULES,
    Prefix,
    PrefixKind,
    PrefixRule,
    detect_continuation,
    parse_prefix,
)
from .dispatch import EditKind, apply_to_surface, run_operation
from .indent import INDENT_UNIT, indent, indent_line, unindent, unindent_line

__all__ = [
    "EditKind",
    "INDENT_UNIT",
    "PREFIX_RULES",
    "Prefix",
    "PrefixKind",
    "PrefixRule",
    "apply_to_surface",
    "detect_continuation",
    "indent",
    "indent_line",
    "parse_prefix",
    "run_operation",
    "unindent",
    "unindent_line",
]
