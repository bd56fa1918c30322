"""A success-or-failure value holder and its Ok/Err wrappers."""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, TypeVar

from dckit.option import Option

V = TypeVar("V")
E = TypeVar("E")
T = TypeVar("T")


class UnwrapError(ValueError):
    """Raised when the wrong side of a result is requested."""


class Ok(Generic[V]):
    """Wraps a success value, used to build a Result."""

    __slots__ = ("_value",)

    def __init__(self, value: V) -> None:
        self._value = value

    def value(self) -> V:
        """Return the wrapped value."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return bool(self._value == other._value)
        if isinstance(other, Err):
            return False
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return bool(self._value != other._value)
        if isinstance(other, Err):
            return True
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Wraps an error value, used to build a Result."""

    __slots__ = ("_value",)

    def __init__(self, value: E) -> None:
        self._value = value

    def value(self) -> E:
        """Return the wrapped error."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Err):
            return bool(self._value == other._value)
        if isinstance(other, Ok):
            return False
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Err):
            return bool(self._value != other._value)
        if isinstance(other, Ok):
            return True
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Err({self._value!r})"


class Result(Generic[V, E]):
    """Holds either a success value or an error.

    Build one from an ``Ok`` or an ``Err``: ``Result(Ok(1))``.
    """

    __slots__ = ("_is_ok", "_payload")

    def __init__(self, outcome: Ok[V] | Err[E]) -> None:
        if isinstance(outcome, Ok):
            self._is_ok = True
        elif isinstance(outcome, Err):
            self._is_ok = False
        else:
            raise TypeError(
                f"Result must be built from Ok or Err, not {type(outcome).__name__}"
            )
        self._payload = outcome.value()

    def is_ok(self) -> bool:
        """Return whether a success value is held."""
        return self._is_ok

    def is_err(self) -> bool:
        """Return whether an error is held."""
        return not self._is_ok

    def __bool__(self) -> bool:
        return self._is_ok

    def ok(self) -> Option[V]:
        """Return the success value as an option, empty on error."""
        return Option(self._payload) if self._is_ok else Option()

    def err(self) -> Option[E]:
        """Return the error as an option, empty on success."""
        return Option() if self._is_ok else Option(self._payload)

    def unwrap(self) -> V:
        """Return the success value; raise UnwrapError on error."""
        if not self._is_ok:
            raise UnwrapError("Tried to unwrap a result that was not 'Ok'.")
        return self._payload

    def unwrap_or(self, default: V) -> V:
        """Return the success value, or ``default`` on error."""
        return self._payload if self._is_ok else default

    def unwrap_err(self) -> E:
        """Return the error; raise UnwrapError on success."""
        if self._is_ok:
            raise UnwrapError("Tried to unwrapErr a result that was not 'Err'.")
        return self._payload

    def unwrap_err_or(self, default: E) -> E:
        """Return the error, or ``default`` on success."""
        return default if self._is_ok else self._payload

    def map(self, op: Callable[[V], T]) -> Result[T, E]:
        """Apply ``op`` to the success value, passing an error through."""
        if self._is_ok:
            return Result(Ok(op(self._payload)))
        return Result(Err(self._payload))

    def map_err(self, op: Callable[[E], T]) -> Result[V, T]:
        """Apply ``op`` to the error, passing a success value through."""
        if self._is_ok:
            return Result(Ok(self._payload))
        return Result(Err(op(self._payload)))

    def value(self) -> V:
        """Return the success value; raise UnwrapError on error."""
        if not self._is_ok:
            raise UnwrapError("Tried to access 'value' when 'isOk()' is false.")
        return self._payload

    def err_value(self) -> E:
        """Return the error; raise UnwrapError on success."""
        if self._is_ok:
            raise UnwrapError("Tried to access 'err' when 'isErr()' is false.")
        return self._payload

    def match(self, ok_fn: Callable[[V], T], err_fn: Callable[[E], T]) -> T:
        """Call ``ok_fn(value)`` on success, else ``err_fn(error)``."""
        if self._is_ok:
            return ok_fn(self._payload)
        return err_fn(self._payload)

    def contains(self, other: Any) -> bool:
        """Return whether a success value equal to ``other`` is held."""
        return self._is_ok and bool(self._payload == other)

    def contains_err(self, other: Any) -> bool:
        """Return whether an error equal to ``other`` is held."""
        return not self._is_ok and bool(self._payload == other)

    def clone(self) -> Result[V, E]:
        """Return a new result holding a copy of the value or error."""
        payload = copy.copy(self._payload)
        return Result(Ok(payload)) if self._is_ok else Result(Err(payload))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return self._is_ok == other._is_ok and bool(self._payload == other._payload)
        if isinstance(other, Ok):
            return self._is_ok and bool(self._payload == other.value())
        if isinstance(other, Err):
            return not self._is_ok and bool(self._payload == other.value())
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Result):
            if self._is_ok != other._is_ok:
                return True
            return bool(self._payload != other._payload)
        if isinstance(other, Ok):
            return not self._is_ok or bool(self._payload != other.value())
        if isinstance(other, Err):
            return self._is_ok or bool(self._payload != other.value())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "Ok" if self._is_ok else "Err"
        return f"Result({kind}({self._payload!r}))"


def make_ok(value: V) -> Result[V, Any]:
    """Return a successful result holding ``value``."""
    return Result(Ok(value))


def make_err(error: E) -> Result[Any, E]:
    """Return a failed result holding ``error``."""
    return Result(Err(error))