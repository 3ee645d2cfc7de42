from mdedit.text import line_at, lines_of, location_to_offset, offset_to_location

TEXT = "* first\n* second\n\n* last"


def test_empty_buffer_has_one_empty_line() -> None:
    lines = list(lines_of(""))

    assert len(lines) == 1
    assert (lines[0].start, lines[0].end, lines[0].text) == (0, 0, "")


def test_lines_exclude_terminators() -> None:
    lines = list(lines_of(TEXT))

    assert [line.text for line in lines] == ["* first", "* second", "", "* last"]
    assert [(line.start, line.end) for line in lines] == [
        (0, 7),
        (8, 16),
        (17, 17),
        (18, 24),
    ]


def test_lines_of_is_restartable() -> None:
    assert list(lines_of(TEXT)) == list(lines_of(TEXT))


def test_trailing_newline_yields_final_empty_line() -> None:
    lines = list(lines_of("a\n"))

    assert [line.text for line in lines] == ["a", ""]
    assert (lines[1].start, lines[1].end) == (2, 2)


def test_offset_on_newline_belongs_to_preceding_line() -> None:
    line = line_at(TEXT, 7)

    assert line.index == 0
    assert line.text == "* first"


def test_offset_after_newline_starts_next_line() -> None:
    line = line_at(TEXT, 8)

    assert line.index == 1
    assert line.start == 8


def test_every_offset_maps_to_containing_line() -> None:
    for offset in range(len(TEXT) + 1):
        line = line_at(TEXT, offset)
        matches = [
            candidate
            for candidate in lines_of(TEXT)
            if candidate.start <= offset <= candidate.end
        ]
        assert matches == [line]


def test_line_at_clamps_out_of_range_offsets() -> None:
    assert line_at(TEXT, -5).index == 0
    assert line_at(TEXT, 999).text == "* last"


def test_location_round_trip() -> None:
    for offset in range(len(TEXT) + 1):
        assert location_to_offset(TEXT, offset_to_location(TEXT, offset)) == offset


def test_location_to_offset_clamps() -> None:
    assert location_to_offset(TEXT, (0, 99)) == 7
    assert location_to_offset(TEXT, (99, 2)) == 20
    assert location_to_offset(TEXT, (-1, 3)) == 0


def test_location_to_offset_on_single_line_buffer() -> None:
    assert location_to_offset("abc", (0, 2)) == 2
    assert location_to_offset("abc", (5, 1)) == 1
    assert location_to_offset("", (3, 3)) == 0
