"""Owned file descriptors and memory mappings over them."""

from __future__ import annotations

import mmap
import os
from typing import Any, Optional

from stdplus.handle import Managed

__all__ = ["ManagedFd", "MMap"]


def _fileno(fd: Any) -> int:
    return fd if isinstance(fd, int) else fd.fileno()


class ManagedFd:
    """Sole owner of a file descriptor, which is closed when dropped.

    Taking ownership marks the descriptor close-on-exec. With no argument
    the object is empty.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._handle: Managed[int] = Managed(fd, os.close)
        if fd is not None:
            try:
                os.set_inheritable(fd, False)
            except BaseException:
                self._handle.close()
                raise

    def get(self) -> int:
        """Return the descriptor, raising ``ValueError`` if empty."""
        return self._handle.value()

    def fileno(self) -> int:
        return self.get()

    def release(self) -> int:
        """Give up ownership and return the descriptor without closing it."""
        return self._handle.release()

    def close(self) -> None:
        self._handle.close()

    def __bool__(self) -> bool:
        return bool(self._handle)

    def __enter__(self) -> "ManagedFd":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ManagedFd({self._handle.maybe_value()!r})"


class MMap:
    """A memory mapping of ``window_size`` bytes of ``fd``, unmapped on close.

    ``prot`` and ``flags`` take the ``mmap.PROT_*`` and ``mmap.MAP_*``
    values. Views returned by :meth:`get` must be released before closing.
    """

    def __init__(
        self,
        fd: Any,
        window_size: int,
        prot: int,
        flags: int,
        offset: int = 0,
    ) -> None:
        mapping = mmap.mmap(
            _fileno(fd), window_size, flags=flags, prot=prot, offset=offset
        )
        self._fd = fd
        self._handle: Managed[mmap.mmap] = Managed(mapping, mmap.mmap.close)

    def get(self) -> memoryview:
        """Return a view of the mapped bytes."""
        return memoryview(self._handle.value())

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "MMap":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()