"""An optional value holder and a sentinel-based variant of it."""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, TypeVar

V = TypeVar("V")
T = TypeVar("T")

_EMPTY: Any = object()


class OptionError(ValueError):
    """Raised when a value is requested from an empty option."""


class Option(Generic[V]):
    """Holds either some value or nothing.

    ``Option()`` is empty; ``Option(value)`` holds ``value`` (which may itself
    be ``None``).  Two options compare equal only when both hold values that
    compare equal; two empty options are not equal.
    """

    __slots__ = ("_value",)

    def __init__(self, value: V = _EMPTY) -> None:
        self._value = value

    def is_some(self) -> bool:
        """Return whether a value is held."""
        return self._value is not _EMPTY

    def is_none(self) -> bool:
        """Return whether the option is empty."""
        return self._value is _EMPTY

    def __bool__(self) -> bool:
        return self.is_some()

    def value(self) -> V:
        """Return the held value; raise OptionError when empty."""
        if self.is_none():
            raise OptionError("Tried to access value 'Some' when Option is 'None'.")
        return self._value

    def value_or(self, default: V) -> V:
        """Return the held value, or ``default`` when empty."""
        return self._value if self.is_some() else default

    def unwrap(self) -> V:
        """Return the held value; raise OptionError when empty."""
        if self.is_none():
            raise OptionError("Tried to unwrap value 'Some' when Option is 'None'.")
        return self._value

    def unwrap_or(self, default: V) -> V:
        """Return the held value, or ``default`` when empty."""
        return self._value if self.is_some() else default

    def match(self, some_fn: Callable[[V], T], none_fn: Callable[[], T]) -> T:
        """Call ``some_fn(value)`` when a value is held, else ``none_fn()``."""
        if self.is_some():
            return some_fn(self._value)
        return none_fn()

    def contains(self, other: Any) -> bool:
        """Return whether a value is held and it equals ``other``."""
        return self.is_some() and bool(self._value == other)

    def clone(self) -> Option[V]:
        """Return a new option holding a copy of the value."""
        if self.is_some():
            return Option(copy.copy(self._value))
        return Option()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.is_some() and other.is_some() and bool(self._value == other._value)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.is_some() and other.is_some():
            return bool(self._value != other._value)
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_some():
            return f"some({self._value!r})"
        return "none()"


def some(value: V) -> Option[V]:
    """Return an option holding ``value``."""
    return Option(value)


def none() -> Option[Any]:
    """Return an empty option."""
    return Option()


class IntrusiveOption(Generic[V]):
    """An optional value where one reserved value stands for 'nothing'.

    Holding ``none_value`` itself makes the option empty.
    """

    __slots__ = ("_value", "_none_value")

    def __init__(self, none_value: V, value: Any = _EMPTY) -> None:
        self._none_value = none_value
        if isinstance(value, Option):
            value = value.value_or(none_value)
        self._value = none_value if value is _EMPTY else value

    def is_some(self) -> bool:
        """Return whether a value other than the reserved one is held."""
        return bool(self._value != self._none_value)

    def is_none(self) -> bool:
        """Return whether the reserved 'nothing' value is held."""
        return bool(self._value == self._none_value)

    def __bool__(self) -> bool:
        return self.is_some()

    def value(self) -> V:
        """Return the held value; raise OptionError when empty."""
        if self.is_none():
            raise OptionError("Tried to access value 'Some' when Option is 'None'.")
        return self._value

    def __repr__(self) -> str:
        return f"IntrusiveOption(none_value={self._none_value!r}, value={self._value!r})"