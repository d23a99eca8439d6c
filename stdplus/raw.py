"""Reinterpret raw byte buffers as fixed-layout values and back."""

from __future__ import annotations

import struct
from typing import Any, Union

from stdplus.exception import Incomplete

__all__ = [
    "equal",
    "copy_from",
    "copy_from_strict",
    "ref_from",
    "ref_from_strict",
    "extract",
    "extract_ref",
    "as_view",
]

Format = Union[str, struct.Struct]


def _struct(fmt: Format) -> struct.Struct:
    return fmt if isinstance(fmt, struct.Struct) else struct.Struct(fmt)


def _bytes_view(data: Any) -> memoryview:
    return memoryview(data).cast("B")


def _single(values: tuple) -> Any:
    return values[0] if len(values) == 1 else values


def equal(a: Any, b: Any) -> bool:
    """Return whether two buffers hold the same bytes.

    Both buffers must have the same size; otherwise ``ValueError`` is raised.
    """
    va, vb = _bytes_view(a), _bytes_view(b)
    if va.nbytes != vb.nbytes:
        raise ValueError(f"equal: sizes differ ({va.nbytes} != {vb.nbytes})")
    return va == vb


def _copy(name: str, fmt: Format, data: Any, strict: bool) -> Any:
    layout = _struct(fmt)
    view = _bytes_view(data)
    size = view.nbytes
    if size < layout.size or (strict and size != layout.size):
        raise Incomplete(f"{name}: {size} < {layout.size}")
    return _single(layout.unpack_from(view))


def copy_from(fmt: Format, data: Any) -> Any:
    """Unpack ``fmt`` from the start of ``data``.

    A format with one field gives that field, otherwise a tuple. Raises
    :class:`Incomplete` if ``data`` is shorter than the format.
    """
    return _copy("copy_from", fmt, data, strict=False)


def copy_from_strict(fmt: Format, data: Any) -> Any:
    """Like :func:`copy_from`, but ``data`` must be exactly the format's size."""
    return _copy("copy_from_strict", fmt, data, strict=True)


def _ref(name: str, fmt: Format, data: Any, strict: bool) -> memoryview:
    layout = _struct(fmt)
    view = _bytes_view(data)
    size = view.nbytes
    if size < layout.size or (strict and size != layout.size):
        raise Incomplete(f"{name}: {size} < {layout.size}")
    return view[: layout.size]


def ref_from(fmt: Format, data: Any) -> memoryview:
    """Return a view of the first ``fmt``-sized bytes of ``data``.

    The view shares memory with ``data`` and is writable when ``data`` is.
    """
    return _ref("ref_from", fmt, data, strict=False)


def ref_from_strict(fmt: Format, data: Any) -> memoryview:
    """Like :func:`ref_from`, but ``data`` must be exactly the format's size."""
    return _ref("ref_from_strict", fmt, data, strict=True)


def extract(fmt: Format, data: Any) -> tuple[Any, memoryview]:
    """Unpack ``fmt`` from the front of ``data``.

    Returns the value and a view of the bytes that remain.
    """
    layout = _struct(fmt)
    value = copy_from(layout, data)
    return value, _bytes_view(data)[layout.size:]


def extract_ref(fmt: Format, data: Any) -> tuple[memoryview, memoryview]:
    """Split a view of the first ``fmt``-sized bytes off ``data``.

    Returns that view and a view of the bytes that remain.
    """
    layout = _struct(fmt)
    ref = ref_from(layout, data)
    return ref, _bytes_view(data)[layout.size:]


def as_view(fmt: str, *args: Any) -> memoryview:
    """View data as a sequence of elements of the single-item format ``fmt``.

    With one buffer argument, that buffer is reinterpreted in place; its size
    must be a multiple of the element size. Otherwise the arguments are packed
    as consecutive ``fmt`` elements and a view of the result is returned.
    """
    if len(args) == 1 and isinstance(args[0], (bytes, bytearray, memoryview)):
        view = _bytes_view(args[0])
    else:
        view = memoryview(struct.pack(f"={len(args)}{fmt}", *args))
    itemsize = struct.calcsize(fmt)
    if view.nbytes % itemsize != 0:
        raise ValueError(f"as_view: {view.nbytes} bytes is not a multiple of {itemsize}")
    return view.cast(fmt)