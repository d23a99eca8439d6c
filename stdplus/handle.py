"""Owning handles that run a cleanup function when their value is dropped."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

__all__ = ["Managed", "Copyable"]

T = TypeVar("T")


class Managed(Generic[T]):
    """Owns a value and calls ``drop(value, *args)`` when it is released.

    A value of ``None`` means the handle is empty. The value is dropped when
    it is replaced with :meth:`reset`, when :meth:`close` is called, when a
    ``with`` block ends or when the handle is collected.
    """

    def __init__(self, value: Optional[T], drop: Callable[..., None], *args: Any) -> None:
        self._drop = drop
        self._args = tuple(args)
        self._value: Optional[T] = value

    def value(self) -> T:
        """Return the managed value, raising ``ValueError`` if empty."""
        if self._value is None:
            raise ValueError("handle holds no value")
        return self._value

    def has_value(self) -> bool:
        return self._value is not None

    def maybe_value(self) -> Optional[T]:
        return self._value

    def data(self) -> tuple:
        """Return the extra arguments passed to the drop function."""
        return self._args

    def _drop_current(self) -> None:
        if self._value is not None:
            current = self._value
            self._value = None
            self._drop(current, *self._args)

    def reset(self, value: Optional[T] = None) -> None:
        """Drop the current value and take ownership of ``value``."""
        self._drop_current()
        self._value = value

    def release(self) -> T:
        """Give up ownership of the value without dropping it."""
        result = self.value()
        self._value = None
        return result

    def maybe_release(self) -> Optional[T]:
        result = self._value
        self._value = None
        return result

    def close(self) -> None:
        self._drop_current()

    def __enter__(self) -> "Managed[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __bool__(self) -> bool:
        return self._value is not None

    def __del__(self) -> None:
        if getattr(self, "_value", None) is not None:
            self._drop_current()


class Copyable(Managed[T]):
    """A managed handle that can be copied.

    Copies are made with ``ref(value, *args)``, which must return a new value
    owned by the copy (for instance a duplicated descriptor).
    """

    def __init__(
        self,
        value: Optional[T],
        drop: Callable[..., None],
        ref: Callable[..., T],
        *args: Any,
    ) -> None:
        super().__init__(value, drop, *args)
        self._ref = ref

    def _take_ref(self, value: Optional[T]) -> Optional[T]:
        if value is None:
            return None
        return self._ref(value, *self._args)

    def copy(self) -> "Copyable[T]":
        """Return a new handle owning a reference to the same value."""
        return Copyable(self._take_ref(self._value), self._drop, self._ref, *self._args)

    __copy__ = copy

    def reset(self, value: Optional[T] = None) -> None:
        """Drop the current value and hold a reference made from ``value``.

        ``None`` simply empties the handle.
        """
        referenced = self._take_ref(value)
        super().reset(referenced)

    def assign(self, other: "Copyable[T]") -> None:
        """Become a copy of ``other``, dropping the current value first."""
        if other is self:
            return
        self.close()
        self._args = other._args
        self.reset(other.maybe_value())