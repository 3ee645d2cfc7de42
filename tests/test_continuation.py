import pytest

from mdedit.actions import PrefixKind, detect_continuation, parse_prefix

INIT = "* first\n* second\n* third\n* last"


def press_enter(text: str, cursor: int, **kwargs) -> str | None:
    op = detect_continuation(text, cursor, **kwargs)
    return None if op is None else op.replacement


def type_after_enter(text: str, cursor: int, typed: str) -> str:
    op = detect_continuation(text, cursor)
    assert op is not None
    updated = op.apply(text)
    at = op.selection_end
    return updated[:at] + typed + updated[at:]


def test_unordered_continuation_inside_buffer() -> None:
    end_of_second = INIT.index("\n* third")

    op = detect_continuation(INIT, end_of_second)

    assert op is not None
    assert op.is_insertion
    assert (op.edit_start, op.replacement) == (end_of_second, "\n* ")
    assert op.selection == (end_of_second + 3, end_of_second + 3)
    assert (
        type_after_enter(INIT, end_of_second, "middle")
        == "* first\n* second\n* middle\n* third\n* last"
    )


def test_breaking_in_the_middle_of_a_line() -> None:
    text = "    * mutateddle"
    cursor = text.index("ddle")

    assert type_after_enter(text, cursor, "me") == "    * mutate\n    * meddle"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1. one\n2. two", "1. one\n2. two\n3. three"),
        ("1) one\n2) two", "1) one\n2) two\n3) three"),
        ("99. many", "99. many\n100. three"),
        ("   3. c", "   3. c\n   4. three"),
    ],
)
def test_ordered_numeral_is_incremented(text: str, expected: str) -> None:
    assert type_after_enter(text, len(text), "three") == expected


def test_checkbox_is_reset() -> None:
    text = "- [ ] have a problem\n- [x] create a solution"

    assert press_enter(text, len(text)) == "\n- [ ] "
    assert (
        type_after_enter(text, len(text), "write a test")
        == "- [ ] have a problem\n- [x] create a solution\n- [ ] write a test"
    )


def test_blockquote_continuation() -> None:
    text = "> knowledge is power"

    assert press_enter(text, len(text)) == "\n> "
    assert (
        type_after_enter(text, len(text), "france is bacon")
        == "> knowledge is power\n> france is bacon"
    )


@pytest.mark.parametrize(
    "prefix",
    [
        "- ",
        " - ",
        "* ",
        "+ ",
        "    - ",
        "\t\t* ",
        "> ",
        "> > ",
        "> > > ",
        "- [ ] ",
        "- [ ]",
        "* [ ] ",
        "+ [ ] ",
    ],
)
def test_prefix_is_repeated_verbatim(prefix: str) -> None:
    text = f"{prefix}one"

    assert type_after_enter(text, len(text), "two") == f"{prefix}one\n{prefix}two"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("> 1. item", "\n> 2. "),
        ("> - [x] done", "\n> - [ ] "),
        ("> > * nested", "\n> > * "),
        ("  > quoted", "\n  > "),
    ],
)
def test_blockquote_with_nested_marker(text: str, expected: str) -> None:
    assert press_enter(text, len(text)) == expected


def test_deep_blockquote_depth_is_counted() -> None:
    prefix = parse_prefix("> > > > deep")

    assert prefix.kind is PrefixKind.BLOCKQUOTE
    assert prefix.depth == 4
    assert prefix.continuation == "> > > > "


def test_no_trigger_inside_prefix() -> None:
    assert press_enter("- one", 0) is None
    assert press_enter("- one", 1) is None
    assert press_enter("- one", 2) == "\n- "
    assert press_enter("1. one\n22. two", len("1. one\n22.")) is None


def test_non_collapsed_selection_defers() -> None:
    assert press_enter("- one", 3, selection_end=5) is None
    assert press_enter("- one", 5, selection_end=5) == "\n- "


@pytest.mark.parametrize(
    "text",
    ["-", "-one", "*", "+two", "[ ] task", "[x] task", "plain", "", ">> x", "1.5 x"],
)
def test_unrecognized_lines_defer(text: str) -> None:
    assert press_enter(text, len(text)) is None


@pytest.mark.parametrize("prefix", ["  ", "    ", "\t"])
def test_whitespace_only_prefix(prefix: str) -> None:
    text = f"{prefix}one"

    assert press_enter(text, len(text)) is None
    assert press_enter(text, len(text), keep_indent=True) == f"\n{prefix}"


@pytest.mark.parametrize(
    ("text", "cursor"), [("- a", -1), ("- a", 4), ("- item", 50), ("1. one", 7)]
)
def test_cursor_outside_buffer_defers(text: str, cursor: int) -> None:
    assert press_enter(text, cursor) is None
    assert press_enter(text, cursor, selection_end=cursor) is None


def test_selection_end_past_buffer_is_clamped() -> None:
    op = detect_continuation("- a", 3, selection_end=99)

    assert op is not None
    assert (op.edit_start, op.replacement) == (3, "\n- ")


def test_parse_prefix_fields() -> None:
    prefix = parse_prefix("  - [x] done")

    assert prefix.kind is PrefixKind.BULLET
    assert prefix.text == "  - [x] "
    assert prefix.indent == "  "
    assert (prefix.bullet, prefix.gap) == ("-", " ")
    assert (prefix.checkbox, prefix.checkbox_gap) == ("[x]", " ")
    assert prefix.continuation == "  - [ ] "

    ordered = parse_prefix("12) twelve")
    assert ordered.kind is PrefixKind.ORDERED
    assert (ordered.number, ordered.delimiter) == (12, ")")
    assert ordered.continuation == "13) "

    assert parse_prefix("text").kind is PrefixKind.NONE
    assert len(parse_prefix("text")) == 0
