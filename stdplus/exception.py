"""Error types for descriptor I/O and helpers that swallow exceptions."""

from __future__ import annotations

import functools
import inspect
import sys
from typing import Any, Callable, Optional, TypeVar

__all__ = ["Incomplete", "WouldBlock", "Eof", "ignore", "ignore_quiet"]

R = TypeVar("R")


class Incomplete(OSError):
    """An operation transferred only part of the data it needed."""

    def __init__(self, what: str) -> None:
        super().__init__(what)


class WouldBlock(OSError):
    """An operation could not make progress without blocking."""

    def __init__(self, what: str) -> None:
        super().__init__(what)


class Eof(OSError):
    """The end of the stream was reached."""

    def __init__(self, what: str) -> None:
        super().__init__(what)


def _caller_location() -> tuple[str, int, str]:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>", 0, "<unknown>"
        return caller.f_code.co_filename, caller.f_lineno, caller.f_code.co_name
    finally:
        del frame


def ignore(func: Callable[..., R]) -> Callable[..., Optional[R]]:
    """Wrap ``func`` so that exceptions are reported on stderr and dropped.

    The report names the place where ``ignore`` was called. When an
    exception is dropped the wrapper returns ``None``.
    """
    file, line, where = _caller_location()

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Optional[R]:
        try:
            return func(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001 - dropping is the point
            print(f"Ignoring({file}:{line} {where}): {exc}", file=sys.stderr)
        return None

    return wrapper


def ignore_quiet(func: Callable[..., R]) -> Callable[..., Optional[R]]:
    """Wrap ``func`` so that exceptions are silently dropped."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Optional[R]:
        try:
            return func(*args, **kwargs)
        except Exception:  # noqa: BLE001 - dropping is the point
            return None

    return wrapper