"""List, checkbox and blockquote continuation on Enter.

The recognized line prefixes live in :data:`PREFIX_RULES`, an ordered table
of ``(kind, matcher, renderer)`` entries. The first rule whose matcher
accepts the start of the line wins; its renderer produces the prefix for the
next line. Every matcher also accepts leading whitespace, which is carried
over unchanged.

Python's ``re`` only keeps the last iteration of a repeated group, so the
blockquote matcher wraps the whole ``(?:>\\s+)+`` repetition in one named
group and the depth is counted from its text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from re import Match, Pattern
from typing import Callable, Optional, Tuple

from mdedit.text.lines import clamp_offset, line_at
from mdedit.text.ops import EditOp

UNCHECKED_BOX = "[ ]"


class PrefixKind(str, Enum):
    NONE = "none"
    BULLET = "bullet"
    ORDERED = "ordered"
    BLOCKQUOTE = "blockquote"


@dataclass(frozen=True, slots=True)
class Prefix:
    """Parsed leading structure of a single line.

    ``gap`` is the whitespace after the numeral or bullet and
    ``checkbox_gap`` the optional space after a checkbox token; both are
    repeated verbatim on the continued line.
    """

    kind: PrefixKind
    text: str
    indent: str = ""
    quote: str = ""
    number: Optional[int] = None
    delimiter: str = ""
    bullet: str = ""
    gap: str = ""
    checkbox: Optional[str] = None
    checkbox_gap: str = ""
    continuation: str = ""

    def __len__(self) -> int:
        return len(self.text)

    @property
    def has_marker(self) -> bool:
        return self.kind is not PrefixKind.NONE

    @property
    def depth(self) -> int:
        return self.quote.count(">")


Renderer = Callable[[Prefix], str]


@dataclass(frozen=True, slots=True)
class PrefixRule:
    kind: PrefixKind
    matcher: Pattern[str]
    renderer: Renderer


_ORDERED = r"(?P<number>\d+)(?P<delimiter>[.)])(?P<number_gap>\s)"
_BULLET = (
    r"(?P<bullet>[-*+])(?P<bullet_gap>\s+)"
    r"(?:(?P<checkbox>\[[ x]\])(?P<checkbox_gap>\s?))?"
)


def _render_marker(prefix: Prefix) -> str:
    if prefix.number is not None:
        return f"{prefix.number + 1}{prefix.delimiter}{prefix.gap}"
    if not prefix.bullet:
        return ""
    rendered = prefix.bullet + prefix.gap
    if prefix.checkbox is not None:
        rendered += UNCHECKED_BOX + prefix.checkbox_gap
    return rendered


def _render_item(prefix: Prefix) -> str:
    return prefix.indent + prefix.quote + _render_marker(prefix)


def _render_indent(prefix: Prefix) -> str:
    return prefix.indent


PREFIX_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule(
        PrefixKind.BLOCKQUOTE,
        re.compile(
            rf"(?P<indent>\s*)(?P<quote>(?:>\s+)+)(?:{_ORDERED}|{_BULLET})?"
        ),
        _render_item,
    ),
    PrefixRule(
        PrefixKind.ORDERED,
        re.compile(rf"(?P<indent>\s*){_ORDERED}"),
        _render_item,
    ),
    PrefixRule(
        PrefixKind.BULLET,
        re.compile(rf"(?P<indent>\s*){_BULLET}"),
        _render_item,
    ),
    PrefixRule(PrefixKind.NONE, re.compile(r"(?P<indent>\s*)"), _render_indent),
)


def _build_prefix(rule: PrefixRule, match: Match[str]) -> Prefix:
    groups = {key: value or "" for key, value in match.groupdict().items()}
    number = groups.get("number")
    prefix = Prefix(
        kind=rule.kind,
        text=match.group(0),
        indent=groups["indent"],
        quote=groups.get("quote", ""),
        number=int(number) if number else None,
        delimiter=groups.get("delimiter", ""),
        bullet=groups.get("bullet", ""),
        gap=groups.get("number_gap") or groups.get("bullet_gap", ""),
        checkbox=match.groupdict().get("checkbox"),
        checkbox_gap=groups.get("checkbox_gap", ""),
    )
    return replace(prefix, continuation=rule.renderer(prefix))


def parse_prefix(line: str) -> Prefix:
    """Return the prefix of ``line``; lines without a marker get kind NONE."""

    for rule in PREFIX_RULES:
        match = rule.matcher.match(line)
        if match is not None:
            return _build_prefix(rule, match)
    # Unreachable: the NONE rule matches any string.
    return Prefix(kind=PrefixKind.NONE, text="", continuation="")


def detect_continuation(
    buffer: str,
    cursor: int,
    *,
    selection_end: Optional[int] = None,
    keep_indent: bool = False,
) -> Optional[EditOp]:
    """Return the insertion that continues the cursor's list or quote line.

    ``None`` tells the host to fall back to its own newline handling: the
    cursor lies outside the buffer, the selection is not collapsed, the line
    has no recognized prefix, or the cursor sits inside the prefix. With
    ``keep_indent`` a line that only has leading whitespace is continued with
    the same whitespace.
    """

    if not 0 <= cursor <= len(buffer):
        return None
    if selection_end is not None and clamp_offset(buffer, selection_end) != cursor:
        return None

    line = line_at(buffer, cursor)
    prefix = parse_prefix(line.text)
    if not prefix.text:
        return None
    if not prefix.has_marker and not keep_indent:
        return None
    if line.start + len(prefix) > cursor:
        return None

    inserted = "\n" + prefix.continuation
    after = cursor + len(inserted)
    return EditOp(
        edit_start=cursor,
        edit_end=cursor,
        replacement=inserted,
        selection_start=after,
        selection_end=after,
    )


__all__ = [
    "PREFIX_RULES",
    "Prefix",
    "PrefixKind",
    "PrefixRule",
    "detect_continuation",
    "parse_prefix",
]
