from collections import deque

import pytest

from stdplus.exception import Eof
from stdplus.line import LineReader


class ChunkFd:
    def __init__(self, chunks):
        self.chunks = deque(chunks)
        self.requests = []

    def read(self, size):
        self.requests.append(size)
        if not self.chunks:
            raise Eof("test")
        return self.chunks.popleft()


def test_lines_then_empty_then_eof():
    reader = LineReader(ChunkFd([b"hello\nworld\n"]))
    assert reader.read_line() == b"hello"
    assert reader.read_line() == b"world"
    assert reader.read_line() == b""
    with pytest.raises(Eof):
        reader.read_line()


def test_lines_split_across_reads():
    reader = LineReader(ChunkFd([b"he", b"llo\nwo", b"rld"]))
    assert reader.read_line() == b"hello"
    assert reader.read_line() == b"world"
    with pytest.raises(Eof):
        reader.read_line()


def test_would_block_keeps_partial_line():
    reader = LineReader(ChunkFd([b"ab", b"", b"c\nd\n"]))
    assert reader.read_line() is None
    assert reader.read_line() == b"abc"
    assert reader.read_line() == b"d"


def test_empty_lines_are_returned():
    reader = LineReader(ChunkFd([b"\n\nx\n"]))
    assert [reader.read_line() for _ in range(3)] == [b"", b"", b"x"]


def test_reads_use_buffer_size():
    fd = ChunkFd([b"a\n"])
    reader = LineReader(fd)
    reader.read_line()
    reader.read_line()
    assert fd.requests == [LineReader.BUF_SIZE, LineReader.BUF_SIZE]
    assert LineReader.BUF_SIZE == 4096


def test_immediate_eof_returns_empty_once():
    reader = LineReader(ChunkFd([]))
    assert reader.read_line() == b""
    with pytest.raises(Eof):
        reader.read_line()