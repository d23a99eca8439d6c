"""Read newline-terminated lines from a descriptor-like object."""

from __future__ import annotations

from typing import Any, Optional

from stdplus.exception import Eof

__all__ = ["LineReader"]


class LineReader:
    """Splits the data read from ``fd`` into lines.

    ``fd.read(size)`` returns bytes, an empty result when it would block, and
    raises :class:`~stdplus.exception.Eof` at the end of the stream.
    """

    BUF_SIZE = 4096

    def __init__(self, fd: Any) -> None:
        self._fd = fd
        self._pending = b""
        self._line = bytearray()
        self._line_complete = False
        self._hit_eof = False

    def read_line(self) -> Optional[bytes]:
        """Return the next line without its newline.

        Returns ``None`` if no complete line is available without blocking;
        the partial line is kept for the next call. At end of stream the
        remaining text (possibly empty) is returned once, and later calls
        raise :class:`Eof`.
        """
        if self._hit_eof:
            raise Eof("readLine")
        if self._line_complete:
            self._line.clear()
        while True:
            if not self._pending:
                try:
                    self._pending = bytes(self._fd.read(self.BUF_SIZE))
                except Eof:
                    self._hit_eof = True
                    return bytes(self._line)
                if not self._pending:
                    return None
            self._line_complete = False
            head, newline, rest = self._pending.partition(b"\n")
            self._line.extend(head)
            self._pending = rest
            if newline:
                self._line_complete = True
                return bytes(self._line)