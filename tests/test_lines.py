import os

import pytest

from amoa.lines import MAX_FD, LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


@pytest.fixture
def open_fds():
    fds = []
    yield fds
    for fd in fds:
        try:
            os.close(fd)
        except OSError:
            pass


def _source(open_fds, data: bytes) -> int:
    fd = _pipe_with(data)
    open_fds.append(fd)
    return fd


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 64, 4096])
def test_lines_reassemble_input(open_fds, buffer_size):
    data = b"first line\nsecond\n\nlast without newline"
    lines = list(LineReader(_source(open_fds, data), buffer_size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert lines[-1] == b"last without newline"


def test_lines_match_splitlines(open_fds):
    data = b"one\ntwo\nthree\n"
    lines = list(LineReader(_source(open_fds, data), 5))
    assert lines == data.splitlines(keepends=True)


def test_empty_input_gives_none(open_fds):
    reader = LineReader(_source(open_fds, b""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_read_line_after_end_keeps_returning_none(open_fds):
    reader = LineReader(_source(open_fds, b"x\n"), 8)
    assert reader.read_line() == b"x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


@pytest.mark.parametrize("buffer_size", [0, -3])
def test_invalid_buffer_size_raises(buffer_size):
    with pytest.raises(ValueError):
        LineReader(0, buffer_size)


def test_negative_fd_raises():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_closed_fd_raises_oserror():
    fd = _pipe_with(b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).read_line()


def test_get_next_line_reads_all_lines(open_fds):
    data = b"alpha\nbeta\ngamma"
    fd = _source(open_fds, data)
    lines = []
    while (line := get_next_line(fd)) is not None:
        lines.append(line)
    assert lines == data.splitlines(keepends=True)


def test_get_next_line_keeps_state_per_descriptor(open_fds):
    first = _source(open_fds, b"a1\na2\n")
    second = _source(open_fds, b"b1\nb2\n")
    assert get_next_line(first) == b"a1\n"
    assert get_next_line(second) == b"b1\n"
    assert get_next_line(first) == b"a2\n"
    assert get_next_line(second) == b"b2\n"
    assert get_next_line(first) is None
    assert get_next_line(second) is None


@pytest.mark.parametrize("fd", [-1, MAX_FD])
def test_get_next_line_out_of_range_fd_raises(fd):
    with pytest.raises(ValueError):
        get_next_line(fd)