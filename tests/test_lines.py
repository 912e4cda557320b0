import io

import pytest

from cubcaster.lines import LineReader

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 5, 42, 1000])
def test_lines_rejoin_to_original(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert "".join(reader) == TEXT


@pytest.mark.parametrize("size", [1, 3, 42])
def test_lines_match_splitlines(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == TEXT.splitlines(keepends=True)


def test_read_line_keeps_newline_and_ends_with_none():
    reader = LineReader(io.StringIO("a\nb"))
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_blank_line_is_returned():
    reader = LineReader(io.StringIO("\n\n"), 1)
    assert list(reader) == ["\n", "\n"]


def test_binary_stream():
    data = b"one\ntwo\nthree"
    reader = LineReader(io.BytesIO(data), 4)
    assert list(reader) == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_data_appended_after_end_is_read():
    stream = io.StringIO()
    reader = LineReader(stream)
    assert reader.read_line() is None
    stream.write("late\n")
    stream.seek(0)
    assert reader.read_line() == "late\n"