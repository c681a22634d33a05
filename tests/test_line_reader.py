import os

import pytest

from ftkit.line_reader import LineReader


@pytest.fixture
def open_fd(tmp_path):
    fds = []

    def opener(data: bytes):
        path = tmp_path / "input.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield opener
    for fd in fds:
        os.close(fd)


def test_reads_lines_with_newlines(open_fd):
    reader = LineReader(open_fd(b"first\nsecond\nthird"))
    assert reader.readline() == b"first\n"
    assert reader.readline() == b"second\n"
    assert reader.readline() == b"third"
    assert reader.readline() is None


def test_none_after_end_repeatedly(open_fd):
    reader = LineReader(open_fd(b"only\n"))
    assert reader.readline() == b"only\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_empty_input(open_fd):
    assert LineReader(open_fd(b"")).readline() is None


def test_empty_lines_are_kept(open_fd):
    reader = LineReader(open_fd(b"\n\nx\n"))
    assert list(reader) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_buffer_size_does_not_change_result(open_fd, size):
    data = b"alpha\nbeta gamma\n\ndelta\nepsilon"
    lines = list(LineReader(open_fd(data), size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_long_line_larger_than_buffer(open_fd):
    data = b"z" * 500 + b"\nend"
    lines = list(LineReader(open_fd(data), 7))
    assert lines == [b"z" * 500 + b"\n", b"end"]


def test_pipe_input():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"one\ntwo\n")
        os.close(write_fd)
        assert list(LineReader(read_fd)) == [b"one\n", b"two\n"]
    finally:
        os.close(read_fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -4])
def test_bad_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(0, size)


def test_closed_fd_raises(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).readline()