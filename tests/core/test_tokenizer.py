"""Tests for the line splitter / tokenizer."""

from objforge.core.tokenizer import LogicalLine, iter_logical_lines


def test_splits_keyword_and_values():
    lines = list(iter_logical_lines("v 1.0  2.0\t3.0"))
    assert lines == [LogicalLine(1, "v", ("1.0", "2.0", "3.0"))]


def test_skips_blank_and_comment_lines():
    text = "# header\n\n   \nv 1 2 3\n  # indented comment\n"
    lines = list(iter_logical_lines(text))
    assert len(lines) == 1
    assert lines[0].number == 4


def test_strips_trailing_comment():
    lines = list(iter_logical_lines("f 1 2 3 # a triangle"))
    assert lines[0].values == ("1", "2", "3")


def test_escaped_hash_is_literal():
    lines = list(iter_logical_lines(r"usemtl mat\#2 # comment"))
    assert lines[0].values == ("mat#2",)


def test_continuation_joins_lines_and_keeps_first_number():
    text = "o thing\nf 1 2 \\\n  3 4\nv 0 0 0"
    lines = list(iter_logical_lines(text))
    assert [l.keyword for l in lines] == ["o", "f", "v"]
    face = lines[1]
    assert face.number == 2
    assert face.values == ("1", "2", "3", "4")
    assert lines[2].number == 4


def test_continuation_at_end_of_input():
    lines = list(iter_logical_lines("g a \\"))
    assert lines == [LogicalLine(1, "g", ("a",))]


def test_keyword_only_line_has_no_values():
    lines = list(iter_logical_lines("g"))
    assert lines[0].values == ()


def test_crlf_line_endings():
    lines = list(iter_logical_lines("v 1 2 3\r\nv 4 5 6\r\n"))
    assert [l.number for l in lines] == [1, 2]
    assert lines[1].values == ("4", "5", "6")


def test_lazy_iteration():
    it = iter_logical_lines("v 1 2 3\nv 4 5 6")
    first = next(it)
    assert first.values == ("1", "2", "3")
    assert len(list(it)) == 1
    assert list(it) == []


def test_only_cr_and_lf_end_lines():
    text = "v 1 2 3\x0c\nusemtl a\x0bb\x85c\nv 4 5 6\rv 7 8 9"
    lines = list(iter_logical_lines(text))
    assert [l.number for l in lines] == [1, 2, 3, 4]
    assert lines[0].values == ("1", "2", "3")
    # Other separators are whitespace inside the line
    assert lines[1].values == ("a", "b", "c")
