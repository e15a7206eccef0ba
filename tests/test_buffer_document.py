from __future__ import annotations

import pytest

from indent_engine.buffer import BufferValidationError, Region, TextDocument


def make_document(text: str = "a\n b\n  c\n   d\n") -> TextDocument:
    return TextDocument.from_text(text)


def test_line_count_counts_trailing_empty_line() -> None:
    assert make_document().line_count == 5
    assert make_document("").line_count == 1
    assert make_document("abc").line_count == 1


def test_row_of_assigns_line_break_to_its_line() -> None:
    document = make_document()

    assert document.row_of(0) == 0
    assert document.row_of(1) == 0  # the "\n" ending "a"
    assert document.row_of(2) == 1
    assert document.row_of(document.size) == 4


def test_row_of_empty_document() -> None:
    assert make_document("").row_of(0) == 0


def test_line_content_excludes_break() -> None:
    document = make_document()

    assert document.line(1) == " b"
    assert document.line_region(2) == Region(5, 8)
    assert document.line(4) == ""


def test_row_col_and_text_point_agree() -> None:
    document = make_document()

    assert document.row_col(11) == (3, 2)
    assert document.text_point(3, 2) == 11


def test_insert_and_erase_refresh_line_starts() -> None:
    document = make_document()

    document.insert(2, "\t")
    assert document.line_start(2) == 6
    assert document.version == 1

    removed = document.erase(Region(3, 2))
    assert removed == "\t"
    assert document.text == "a\n b\n  c\n   d\n"
    assert document.line_start(2) == 5


def test_substr_accepts_reversed_region() -> None:
    assert make_document().substr(Region(4, 2)) == " b"


@pytest.mark.parametrize("offset", [-1, 15])
def test_offsets_outside_buffer_raise(offset: int) -> None:
    document = make_document()

    with pytest.raises(BufferValidationError) as excinfo:
        document.row_of(offset)

    assert excinfo.value.offset == offset
    assert isinstance(excinfo.value, IndexError)


def test_text_point_rejects_column_past_line_end() -> None:
    with pytest.raises(BufferValidationError):
        make_document().text_point(0, 2)
