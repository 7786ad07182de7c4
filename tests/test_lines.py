import io

import pytest

from raycub.lines import LineReader, read_lines, remove_nl

SAMPLES = [
    "ab\ncd\n",
    "first line\nsecond\nno newline at end",
    "\n\n\n",
    "single",
    "a much longer line than any buffer used in these tests\nshort\n",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [1, 2, 3, 10, 1000])
def test_lines_join_back_to_input(text, size):
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


@pytest.mark.parametrize("size", [1, 4, 10])
def test_lines_match_splitlines(size):
    text = "NO ./north.xpm\nSO ./south.xpm\n\n111\n1N1\n111"
    assert list(LineReader(io.StringIO(text), size)) == text.splitlines(keepends=True)


def test_empty_stream_returns_none():
    reader = LineReader(io.StringIO(""), 10)
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_next_line_then_none():
    reader = LineReader(io.StringIO("x\n"), 1)
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None


def test_readers_keep_separate_buffers():
    first = LineReader(io.StringIO("a1\na2\n"), 100)
    second = LineReader(io.StringIO("b1\nb2\n"), 100)
    assert first.next_line() == "a1\n"
    assert second.next_line() == "b1\n"
    assert first.next_line() == "a2\n"
    assert second.next_line() == "b2\n"


@pytest.mark.parametrize("size", [0, -5])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_remove_nl():
    assert remove_nl("abc\n") == "abc"
    assert remove_nl("abc") == "abc"
    assert remove_nl("\n") == ""
    assert remove_nl("") == ""


@pytest.mark.parametrize("size", [1, 3, 10])
def test_read_lines_strips_newlines(size):
    text = "\n\n1111\n10N1\n1111"
    assert list(read_lines(io.StringIO(text), size)) == text.split("\n")


def test_read_lines_trailing_newline_gives_no_extra_line():
    assert list(read_lines(io.StringIO("a\nb\n"), 2)) == ["a", "b"]