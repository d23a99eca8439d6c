"""Strings bounded by a nul terminator rather than a stored length."""

from __future__ import annotations

import functools
from typing import Any, Union

__all__ = ["find_term", "ZString"]

Text = Union[str, bytes, bytearray]


def _nul(text: Any) -> Any:
    """Return the terminator matching the kind of ``text``."""
    if isinstance(text, str):
        return "\0"
    if isinstance(text, (bytes, bytearray)):
        return b"\0"
    raise TypeError(f"zstring: unsupported type {type(text).__name__}")


def find_term(text: Text, minimum: int, maximum: int) -> int:
    """Return the index of the terminator within ``[minimum, maximum)``.

    Returns -1 if a terminator occurs before ``minimum`` or none lies in the
    range.
    """
    nul = _nul(text)
    maximum = min(maximum, len(text))
    if text.find(nul, 0, minimum) != -1:
        return -1
    return text.find(nul, minimum, maximum)


@functools.total_ordering
class ZString:
    """A nul-terminated string.

    A ``bytearray`` is used in place and must contain a terminator; the
    string ends at the first one, and later changes to the buffer are seen.
    A ``str`` or ``bytes`` value is the whole string and must not contain a
    nul. Invalid input raises ``ValueError``.
    """

    def __init__(self, data: Union[Text, "ZString"]) -> None:
        if isinstance(data, ZString):
            self._data: Text = data._data
            self._start: int = data._start
            return
        if isinstance(data, bytearray):
            if find_term(data, 0, len(data)) < 0:
                raise ValueError("zstring: buffer has no terminator")
            self._data = data
        elif isinstance(data, (str, bytes)):
            if find_term(data + _nul(data), len(data), len(data) + 1) < 0:
                raise ValueError("zstring: embedded terminator")
            self._data = data + _nul(data)
        else:
            raise TypeError(f"zstring: unsupported type {type(data).__name__}")
        self._start = 0

    @classmethod
    def _at(cls, data: Text, start: int) -> "ZString":
        obj = cls.__new__(cls)
        obj._data = data
        obj._start = start
        return obj

    def _content(self) -> Union[str, bytes]:
        end = self._data.find(_nul(self._data), self._start)
        piece = self._data[self._start:end]
        return bytes(piece) if isinstance(piece, bytearray) else piece

    def empty(self) -> bool:
        return self._data.find(_nul(self._data), self._start) == self._start

    def front(self) -> Union[str, int]:
        """Return the first character, which is the terminator when empty."""
        return self._data[self._start]

    def suffix(self, size: int) -> "ZString":
        """Return the string starting ``size`` characters in."""
        start = self._start + size
        if size < 0 or start >= len(self._data):
            raise IndexError("zstring suffix out of range")
        return ZString._at(self._data, start)

    def _other_content(self, other: Any) -> Union[str, bytes, None]:
        if isinstance(other, ZString):
            other = other._content()
        mine = isinstance(self._data, str)
        if isinstance(other, str) and mine:
            return other
        if isinstance(other, (bytes, bytearray, memoryview)) and not mine:
            return bytes(other)
        return None

    def compare(self, other: Any) -> int:
        """Return -1, 0 or 1 as this string orders before, equal to or after ``other``.

        A plain ``str`` or ``bytes`` is compared with its full length, so a
        nul inside it takes part in the comparison.
        """
        rhs = self._other_content(other)
        if rhs is None:
            raise TypeError(f"cannot compare zstring with {type(other).__name__}")
        lhs = self._content()
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other: object) -> bool:
        if self._other_content(other) is None:
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if self._other_content(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self._content())

    def __getitem__(self, pos: int) -> Union[str, int]:
        return self._data[self._start + pos]

    def __str__(self) -> str:
        content = self._content()
        if isinstance(content, str):
            return content
        return content.decode("utf-8", errors="surrogateescape")

    def __bytes__(self) -> bytes:
        content = self._content()
        if isinstance(content, str):
            return content.encode("utf-8", errors="surrogateescape")
        return content

    def __repr__(self) -> str:
        return f"ZString({self._content()!r})"