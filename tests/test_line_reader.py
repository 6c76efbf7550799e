import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.line_reader import LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


@pytest.fixture
def open_file(tmp_path):
    opened = []

    def make(data: bytes) -> int:
        path = tmp_path / f"file{len(opened)}.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield make
    for fd in opened:
        os.close(fd)


def test_reads_lines_with_newlines(open_file):
    fd = open_file(b"one\ntwo\nthree")
    reader = LineReader()
    assert reader.read_line(fd) == b"one\n"
    assert reader.read_line(fd) == b"two\n"
    assert reader.read_line(fd) == b"three"
    assert reader.read_line(fd) is None


def test_empty_file_gives_none(open_file):
    fd = open_file(b"")
    assert LineReader().read_line(fd) is None


def test_line_longer_than_buffer(open_file):
    text = b"x" * 100 + b"\n" + b"tail\n"
    fd = open_file(text)
    reader = LineReader(buffer_size=7)
    assert reader.read_line(fd) == b"x" * 100 + b"\n"
    assert reader.read_line(fd) == b"tail\n"
    assert reader.read_line(fd) is None


def test_empty_lines_kept(open_file):
    fd = open_file(b"\n\na\n")
    reader = LineReader()
    assert list(reader.lines(fd)) == [b"\n", b"\n", b"a\n"]


def test_separate_descriptors_interleave(open_file):
    first = open_file(b"a1\na2\n")
    second = open_file(b"b1\nb2\n")
    reader = LineReader()
    assert reader.read_line(first) == b"a1\n"
    assert reader.read_line(second) == b"b1\n"
    assert reader.read_line(first) == b"a2\n"
    assert reader.read_line(second) == b"b2\n"


def test_negative_descriptor():
    assert LineReader().read_line(-1) is None


def test_descriptor_beyond_limit():
    assert LineReader().read_line(5000) is None


def test_closed_descriptor_gives_none():
    fd = _pipe_with(b"data\n")
    os.close(fd)
    assert LineReader().read_line(fd) is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(buffer_size=0)


def test_get_next_line_reads_pipe():
    fd = _pipe_with(b"hello\nworld\n")
    try:
        assert get_next_line(fd) == b"hello\n"
        assert get_next_line(fd) == b"world\n"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


@given(st.binary(max_size=300), st.integers(1, 50))
def test_lines_round_trip(data, size):
    fd = _pipe_with(data)
    try:
        lines = list(LineReader(buffer_size=size).lines(fd))
    finally:
        os.close(fd)
    assert b"".join(lines) == data
    assert all(line.count(b"\n") <= 1 for line in lines)
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(lines)