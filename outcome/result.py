"""
Result pattern for explicit error handling.

This module provides a Result type that makes error handling explicit
by returning either an Ok or an Err value instead of raising exceptions.

Example:
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return err("Division by zero")
    ...     return ok(a / b)
    ...
    >>> result = divide(10, 2)
    >>> if result.is_ok():
    ...     print(f"Result: {result.unwrap()}")
    ... else:
    ...     print(f"Error: {result.unwrap_err()}")
    Result: 5.0

Failures stay data while they flow through ``map``, ``flatmap`` and the
other combinators. Only ``unwrap``, ``unwrap_err`` and ``expect`` raise.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Never

from pydantic import ValidationError

from outcome.config import get_settings
from outcome.errors import TypeMismatchError, UnwrapError, describe_error
from outcome.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from outcome.option import Option

logger = get_logger(__name__)

UNWRAP_ERR_ON_OK_MESSAGE = "Call to unwrap_err on an Ok result"


class ResultKind(str, Enum):
    """Discriminant of a Result."""

    OK = "ok"
    ERR = "err"


def _check_result(value: object) -> Result[Any, Any]:
    if not isinstance(value, Ok | Err):
        raise TypeMismatchError("a Result", value)
    return value


def _debug(event: str, **fields: object) -> None:
    # invalid settings turn events off, never the failure being reported
    try:
        enabled = get_settings().log_events
    except ValidationError:
        return
    if enabled:
        logger.debug(event, **fields)


def _raise_unwrap(message: str, payload: object) -> Never:
    _debug("unwrap_failed", error=message)
    if isinstance(payload, BaseException):
        raise UnwrapError(message, payload) from payload
    raise UnwrapError(message, payload)


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """
    Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    @property
    def kind(self) -> ResultKind:
        """Return ResultKind.OK."""
        return ResultKind.OK

    def is_ok(self) -> bool:
        """Return True if this is an Ok."""
        return True

    def is_err(self) -> bool:
        """Return False if this is an Ok."""
        return False

    def unwrap(self) -> T:
        """
        Return the success value.

        Returns:
            The contained success value.
        """
        return self.value

    def unwrap_err(self) -> Never:
        """
        Raise an error since this is an Ok.

        Raises:
            UnwrapError: Always, since Ok has no error value.
        """
        raise UnwrapError(UNWRAP_ERR_ON_OK_MESSAGE, self.value)

    def expect(self, _message: str) -> T:
        """Return the success value (message is only used by Err)."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """
        Return the success value (ignores default).

        Args:
            _default: Default value (ignored for Ok).

        Returns:
            The contained success value.
        """
        return self.value

    def unwrap_or_else(self, _supplier: Callable[[], T]) -> T:
        """Return the success value without calling the supplier."""
        return self.value

    def if_ok(self, consumer: Callable[[T], object]) -> None:
        """Call ``consumer(value)``."""
        consumer(self.value)

    def if_err(self, _consumer: Callable[[Any], object]) -> None:
        """Do nothing for Ok."""

    def ok_option(self) -> Option[T]:
        """Return ``Option.of(value)``."""
        from outcome.option import Option

        return Option.of(self.value)

    def err_option(self) -> Option[Any]:
        """Return the empty Option, discarding the success value."""
        from outcome.option import Option

        return Option.empty()

    def and_other[U, F](self, other: Result[U, F]) -> Result[U, F]:
        """
        Return ``other``, since this is an Ok.

        Raises:
            TypeMismatchError: If ``other`` is not a Result.
        """
        return _check_result(other)

    def or_other[F](self, other: Result[T, F]) -> Ok[T]:
        """
        Return self unchanged.

        Raises:
            TypeMismatchError: If ``other`` is not a Result.
        """
        _check_result(other)
        return self

    def or_else_other[F](self, _supplier: Callable[[], Result[T, F]]) -> Ok[T]:
        """Return self without calling the supplier."""
        return self

    def map[U](self, func: Callable[[T], U]) -> Ok[U]:
        """
        Apply a function to the success value.

        Args:
            func: Function to apply to the value.

        Returns:
            New Ok with the mapped value.
        """
        return Ok(func(self.value))

    def map_err[E, F](self, _func: Callable[[E], F]) -> Ok[T]:
        """
        Do nothing for Ok (error mapping doesn't apply).

        Args:
            _func: Function to apply to error (not used).

        Returns:
            Self unchanged.
        """
        return self

    def flatmap[U, F](self, func: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """
        Chain a computation that may itself fail.

        Args:
            func: Function returning a Result.

        Returns:
            The Result returned by ``func``.

        Raises:
            TypeMismatchError: If ``func`` does not return a Result.
        """
        return _check_result(func(self.value))

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return self.value < other.value
        if isinstance(other, Err):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return self.value <= other.value
        if isinstance(other, Err):
            return False
        return NotImplemented

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """
    Represents a failed result containing an error.

    The error can be any value: a string, an exception, a structured
    record. ``unwrap()`` turns it into a readable message with
    ``describe_error()``.

    Attributes:
        error: The error value.
    """

    error: E

    @property
    def kind(self) -> ResultKind:
        """Return ResultKind.ERR."""
        return ResultKind.ERR

    def is_ok(self) -> bool:
        """Return False if this is an Err."""
        return False

    def is_err(self) -> bool:
        """Return True if this is an Err."""
        return True

    def unwrap(self) -> Never:
        """
        Raise an error since this is an Err.

        Raises:
            UnwrapError: Always, with a message derived from the error value.
                Exception payloads are chained as the cause.
        """
        _raise_unwrap(describe_error(self.error), self.error)

    def unwrap_err(self) -> E:
        """Return the error value."""
        return self.error

    def expect(self, message: str) -> Never:
        """
        Raise an error with a custom message.

        Raises:
            UnwrapError: Always, with ``message``.
        """
        _raise_unwrap(message, self.error)

    def unwrap_or[T](self, default: T) -> T:
        """
        Return the default value since this is an Err.

        Args:
            default: Default value to return.

        Returns:
            The provided default value.
        """
        return default

    def unwrap_or_else[T](self, supplier: Callable[[], T]) -> T:
        """Return ``supplier()``."""
        return supplier()

    def if_ok(self, _consumer: Callable[[Any], object]) -> None:
        """Do nothing for Err."""

    def if_err(self, consumer: Callable[[E], object]) -> None:
        """Call ``consumer(error)``."""
        consumer(self.error)

    def ok_option(self) -> Option[Any]:
        """Return the empty Option, discarding the error."""
        from outcome.option import Option

        return Option.empty()

    def err_option(self) -> Option[E]:
        """Return ``Option.of(error)``."""
        from outcome.option import Option

        return Option.of(self.error)

    def and_other[U, F](self, other: Result[U, F]) -> Err[E]:
        """
        Return self unchanged.

        Raises:
            TypeMismatchError: If ``other`` is not a Result.
        """
        _check_result(other)
        return self

    def or_other[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """
        Return ``other``, since this is an Err.

        Raises:
            TypeMismatchError: If ``other`` is not a Result.
        """
        return _check_result(other)

    def or_else_other[T, F](self, supplier: Callable[[], Result[T, F]]) -> Result[T, F]:
        """
        Return ``supplier()``.

        Raises:
            TypeMismatchError: If ``supplier`` does not return a Result.
        """
        return _check_result(supplier())

    def map[T, U](self, _func: Callable[[T], U]) -> Err[E]:
        """
        Do nothing for Err (value mapping doesn't apply).

        Args:
            _func: Function to apply to value (not used).

        Returns:
            Self unchanged.
        """
        return self

    def map_err[F](self, func: Callable[[E], F]) -> Err[F]:
        """
        Apply a function to the error value.

        Args:
            func: Function to apply to the error.

        Returns:
            New Err with the mapped error.
        """
        return Err(func(self.error))

    def flatmap[T, U, F](self, _func: Callable[[T], Result[U, F]]) -> Err[E]:
        """Return self without calling the function."""
        return self

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Err):
            return self.error < other.error
        if isinstance(other, Ok):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Err):
            return self.error <= other.error
        if isinstance(other, Ok):
            return False
        return NotImplemented

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
type Result[T, E] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """
    Create an Ok result.

    Args:
        value: The success value.

    Returns:
        An Ok containing the value.
    """
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """
    Create an Err result.

    Args:
        error: The error value.

    Returns:
        An Err containing the error.
    """
    return Err(error)


def attempt[T](func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """
    Call a function and capture its outcome.

    Args:
        func: The function to call.
        *args: Positional arguments passed to ``func``.
        **kwargs: Keyword arguments passed to ``func``.

    Returns:
        ``Ok(return_value)`` if the call returned normally, or
        ``Err(exception)`` if it raised an ``Exception``. Other
        ``BaseException``s (``KeyboardInterrupt``, ``SystemExit``) propagate.
    """
    try:
        value = func(*args, **kwargs)
    except Exception as exc:
        _debug(
            "exception_captured",
            func=getattr(func, "__qualname__", repr(func)),
            error=repr(exc),
        )
        return Err(exc)
    return Ok(value)


def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """
    Decorate a function so that it returns a Result instead of raising.

    Example:
        >>> @safe
        ... def parse_port(raw: str) -> int:
        ...     return int(raw)
        ...
        >>> parse_port("8080")
        Ok(8080)
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return attempt(func, *args, **kwargs)

    return wrapper
