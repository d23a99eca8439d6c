"""Whole-buffer and aligned transfers over descriptor-like objects.

The ``fd`` argument of these functions is any object with the methods the
operation needs:

* ``read(size) -> bytes`` and ``recv(size, flags) -> bytes`` return at most
  ``size`` bytes. An empty result means the call would block, and
  :class:`~stdplus.exception.Eof` is raised at the end of the stream.
* ``write(data) -> int``, ``send(data, flags) -> int`` and
  ``sendto(data, flags, addr) -> int`` return how many bytes were taken,
  with 0 meaning the call would block.
"""

from __future__ import annotations

import errno
from typing import Any, Callable

from stdplus.exception import Eof, Incomplete, WouldBlock

__all__ = [
    "MAX_STRIDE",
    "read_exact",
    "recv_exact",
    "write_exact",
    "send_exact",
    "sendto_exact",
    "read_aligned",
    "recv_aligned",
    "write_aligned",
    "send_aligned",
    "read_all",
    "read_all_fixed",
    "verify_exact",
]

MAX_STRIDE = 65536
_INITIAL_STRIDE = 256

Step = Callable[[int], int]


def _reader(read: Callable[[int], bytes], size: int) -> tuple[bytearray, Step]:
    buf = bytearray()

    def step(_total: int) -> int:
        chunk = read(size - len(buf))
        buf.extend(chunk)
        return len(chunk)

    return buf, step


def _writer(write: Callable[[memoryview], int], data: Any) -> tuple[memoryview, Step]:
    view = memoryview(data).cast("B")

    def step(total: int) -> int:
        return write(view[total:])

    return view, step


def _exact(name: str, size: int, step: Step) -> None:
    total = 0
    try:
        while total < size:
            moved = step(total)
            if moved == 0:
                raise WouldBlock(f"{name} missing")
            total += moved
    except OSError as err:
        if total != 0:
            raise Incomplete(f"{name} is {total}B/{size}B") from err
        raise


def _aligned(name: str, align: int, step: Step) -> int:
    total = 0
    try:
        while True:
            moved = step(total)
            if total != 0 and moved == 0:
                raise Incomplete(f"{name} is {total % align}B/{align}B")
            total += moved
            if total % align == 0:
                break
    except OSError as err:
        if total % align:
            raise Incomplete(f"{name} is {total % align}B/{align}B") from err
        raise
    return total


def read_exact(fd: Any, size: int) -> bytes:
    """Read exactly ``size`` bytes.

    Raises :class:`WouldBlock` or :class:`Eof` if nothing was read, and
    :class:`Incomplete` if the transfer stopped part way.
    """
    buf, step = _reader(fd.read, size)
    _exact("readExact", size, step)
    return bytes(buf)


def recv_exact(fd: Any, size: int, flags: int) -> bytes:
    """Receive exactly ``size`` bytes, like :func:`read_exact`."""
    buf, step = _reader(lambda n: fd.recv(n, flags), size)
    _exact("recvExact", size, step)
    return bytes(buf)


def write_exact(fd: Any, data: Any) -> None:
    """Write all of ``data``, like :func:`read_exact` in the other direction."""
    view, step = _writer(fd.write, data)
    _exact("writeExact", view.nbytes, step)


def send_exact(fd: Any, data: Any, flags: int) -> None:
    """Send all of ``data`` with ``flags``."""
    view, step = _writer(lambda v: fd.send(v, flags), data)
    _exact("sendExact", view.nbytes, step)


def sendto_exact(fd: Any, data: Any, flags: int, addr: Any) -> None:
    """Send ``data`` to ``addr`` in a single call, which must take all of it."""
    sent = fd.sendto(data, flags, addr)
    if sent == 0:
        raise WouldBlock("sendto")
    if sent < memoryview(data).nbytes:
        raise Incomplete("sendto")


def read_aligned(fd: Any, align: int, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping only on a multiple of ``align``.

    Returns what was read, which may be empty if the first read would block.
    Raises :class:`Incomplete` if the data stops between two boundaries.
    """
    buf, step = _reader(fd.read, size)
    _aligned("readAligned", align, step)
    return bytes(buf)


def recv_aligned(fd: Any, align: int, size: int, flags: int) -> bytes:
    """Receive up to ``size`` bytes, like :func:`read_aligned`."""
    buf, step = _reader(lambda n: fd.recv(n, flags), size)
    _aligned("recvAligned", align, step)
    return bytes(buf)


def write_aligned(fd: Any, align: int, data: Any) -> memoryview:
    """Write a multiple of ``align`` bytes from ``data``; return what was written."""
    view, step = _writer(fd.write, data)
    total = _aligned("writeAligned", align, step)
    return view[:total]


def send_aligned(fd: Any, align: int, data: Any, flags: int) -> memoryview:
    """Send a multiple of ``align`` bytes from ``data``; return what was sent."""
    view, step = _writer(lambda v: fd.send(v, flags), data)
    total = _aligned("sendAligned", align, step)
    return view[:total]


def read_all(fd: Any) -> bytes:
    """Read until end of stream and return everything read.

    Reads grow from 256 bytes up to :data:`MAX_STRIDE`. Raises
    :class:`WouldBlock` if a read would block before the end is reached.
    """
    buf = bytearray()
    stride = _INITIAL_STRIDE
    try:
        while True:
            chunk = fd.read(stride)
            if not chunk:
                raise WouldBlock("readAll")
            buf.extend(chunk)
            if stride < MAX_STRIDE and len(buf) >= stride:
                stride <<= 1
    except Eof:
        return bytes(buf)


def read_all_fixed(fd: Any, align: int, size: int) -> bytes:
    """Read until end of stream into at most ``size`` bytes.

    The amount read must be a multiple of ``align``, or :class:`Incomplete`
    is raised. More data than ``size`` raises ``OSError`` with ``EOVERFLOW``.
    """
    buf = bytearray()

    def validate() -> None:
        if len(buf) % align != 0:
            raise Incomplete(f"readAllFixed partial {len(buf) % align}B/{align}B")

    try:
        while len(buf) < size:
            chunk = fd.read(min(MAX_STRIDE, size - len(buf)))
            if not chunk:
                raise WouldBlock("readAllFixed")
            buf.extend(chunk)
        if not fd.read(1):
            raise WouldBlock("readAllFixed")
        raise OSError(errno.EOVERFLOW, "readAllFixed overflow")
    except Eof:
        validate()
        return bytes(buf)
    except OSError:
        validate()
        raise


def verify_exact(expected: int, actual: int) -> None:
    """Raise :class:`WouldBlock` unless ``expected`` equals ``actual``."""
    if expected != actual:
        raise WouldBlock("verifyExact")