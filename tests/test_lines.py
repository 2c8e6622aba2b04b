import io

import pytest

from ftkit.lines import LineReader

TEXT = "first line\nsecond\n\nlast without newline"


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO(TEXT), 4)
    assert list(reader) == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 50, 1000])
def test_round_trip_for_any_buffer_size(size):
    assert "".join(LineReader(io.StringIO(TEXT), size)) == TEXT


def test_bytes_stream():
    data = TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), 5))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_none_after_end():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


def test_every_line_but_last_ends_with_newline():
    lines = list(LineReader(io.StringIO(TEXT), 3))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


def test_stream_read_in_chunks_of_buffer_size():
    class Recorder(io.StringIO):
        def __init__(self, value):
            super().__init__(value)
            self.sizes = []

        def read(self, size=-1):
            self.sizes.append(size)
            return super().read(size)

    stream = Recorder(TEXT)
    list(LineReader(stream, 6))
    assert set(stream.sizes) == {6}


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(TEXT), size)