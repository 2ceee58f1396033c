"""
Option type for values that may be absent.

An Option either holds a value (``Some``) or holds nothing. It replaces a
bare ``None`` return with a container whose combinators never invoke a
function on a missing value.

Example:
    >>> def find_user(user_id: int) -> Option[str]:
    ...     return Option.of(USERS.get(user_id))
    ...
    >>> find_user(1).map(str.upper).unwrap_or("anonymous")
    'ALICE'

``Option.of(None)`` is the empty Option, so an Option cannot tell a stored
``None`` apart from absence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from outcome.errors import TypeMismatchError, ValueAbsentError

if TYPE_CHECKING:
    from collections.abc import Callable

    from outcome.result import Result

UNWRAP_EMPTY_MESSAGE = "Call to unwrap on an empty Option"


def _check_option(value: object) -> Option[Any]:
    if not isinstance(value, Option):
        raise TypeMismatchError("an Option", value)
    return value


class Option[T]:
    """
    A value that may or may not be present.

    Build instances with ``Option.of()`` or ``Option.empty()``. The only
    mutating operation is ``take()``; every other method leaves the receiver
    untouched and returns either the receiver or a new Option.
    """

    __slots__ = ("_present", "_value")

    def __init__(self, value: T | None = None) -> None:
        self._present = value is not None
        self._value = value

    @classmethod
    def of(cls, value: T | None) -> Option[T]:
        """
        Wrap a value.

        Args:
            value: The value to wrap. ``None`` produces the empty Option.

        Returns:
            A present Option, or the shared empty Option for ``None``.
        """
        if value is None:
            return _EMPTY
        return cls(value)

    @classmethod
    def empty(cls) -> Option[T]:
        """Return the shared empty Option."""
        return _EMPTY

    def is_present(self) -> bool:
        """Return True if a value is present."""
        return self._present

    def is_empty(self) -> bool:
        """Return True if no value is present."""
        return not self._present

    def unwrap(self) -> T:
        """
        Return the value.

        Raises:
            ValueAbsentError: If the Option is empty.
        """
        return self.expect(UNWRAP_EMPTY_MESSAGE)

    def expect(self, message: str) -> T:
        """
        Return the value, or raise with a custom message.

        Args:
            message: Message of the raised error when the Option is empty.

        Raises:
            ValueAbsentError: If the Option is empty.
        """
        if not self._present:
            raise ValueAbsentError(message)
        return self._value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if empty."""
        if self._present:
            return self._value  # type: ignore[return-value]
        return default

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        """
        Return the value, or the result of ``supplier()`` if empty.

        ``supplier`` is called only when the Option is empty.
        """
        if self._present:
            return self._value  # type: ignore[return-value]
        return supplier()

    def take(self) -> Option[T]:
        """
        Move the value out of this Option, leaving it empty.

        Returns:
            A new Option holding the value, or the empty Option if there
            was nothing to take. Taking from an empty Option is a no-op.
        """
        if not self._present:
            return _EMPTY
        taken = Option(self._value)
        self._present = False
        self._value = None
        return taken

    def if_present(self, consumer: Callable[[T], object]) -> None:
        """Call ``consumer(value)`` if a value is present."""
        if self._present:
            consumer(self._value)  # type: ignore[arg-type]

    def if_empty(self, consumer: Callable[[], object]) -> None:
        """Call ``consumer()`` if the Option is empty."""
        if not self._present:
            consumer()

    def and_other[U](self, other: Option[U]) -> Option[U]:
        """
        Return ``other`` if a value is present, otherwise self.

        Raises:
            TypeMismatchError: If ``other`` is not an Option.
        """
        _check_option(other)
        if self._present:
            return other
        return self  # type: ignore[return-value]

    def or_other(self, other: Option[T]) -> Option[T]:
        """
        Return self if a value is present, otherwise ``other``.

        Raises:
            TypeMismatchError: If ``other`` is not an Option.
        """
        _check_option(other)
        if self._present:
            return self
        return other

    def or_else_other(self, supplier: Callable[[], Option[T]]) -> Option[T]:
        """
        Return self if a value is present, otherwise ``supplier()``.

        Raises:
            TypeMismatchError: If ``supplier`` does not return an Option.
        """
        if self._present:
            return self
        return _check_option(supplier())

    def map[U](self, func: Callable[[T], U | None]) -> Option[U]:
        """
        Apply a function to the value.

        Args:
            func: Function applied to the value. Not called when empty.

        Returns:
            ``Option.of(func(value))``, or self if empty.
        """
        if not self._present:
            return self  # type: ignore[return-value]
        return Option.of(func(self._value))  # type: ignore[arg-type]

    def map_or[U](self, default: U | None, func: Callable[[T], U | None]) -> Option[U]:
        """Apply ``func`` to the value, or wrap ``default`` if empty."""
        if not self._present:
            return Option.of(default)
        return Option.of(func(self._value))  # type: ignore[arg-type]

    def map_or_else[U](
        self,
        default_supplier: Callable[[], U | None],
        func: Callable[[T], U | None],
    ) -> Option[U]:
        """Apply ``func`` to the value, or wrap ``default_supplier()`` if empty."""
        if not self._present:
            return Option.of(default_supplier())
        return Option.of(func(self._value))  # type: ignore[arg-type]

    def flatmap[U](self, func: Callable[[T], Option[U]]) -> Option[U]:
        """
        Chain a computation that may itself produce an empty Option.

        Args:
            func: Function returning an Option. Not called when empty.

        Returns:
            The Option returned by ``func``, or self if empty.

        Raises:
            TypeMismatchError: If ``func`` does not return an Option.
        """
        if not self._present:
            return self  # type: ignore[return-value]
        return _check_option(func(self._value))  # type: ignore[arg-type]

    def ok_or[E](self, error: E) -> Result[T, E]:
        """Convert to ``Ok(value)``, or ``Err(error)`` if empty."""
        from outcome.result import Err, Ok

        if self._present:
            return Ok(self._value)  # type: ignore[arg-type]
        return Err(error)

    def ok_or_else[E](self, error_supplier: Callable[[], E]) -> Result[T, E]:
        """Convert to ``Ok(value)``, or ``Err(error_supplier())`` if empty."""
        from outcome.result import Err, Ok

        if self._present:
            return Ok(self._value)  # type: ignore[arg-type]
        return Err(error_supplier())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._present != other._present:
            return False
        return not self._present or self._value == other._value

    # take() makes Options mutable
    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Option[T]) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._present and other._present and self._value < other._value

    def __le__(self, other: Option[T]) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._present and other._present and self._value <= other._value

    def __repr__(self) -> str:
        if self._present:
            return f"Some({self._value!r})"
        return "Nothing"


_EMPTY: Option[Any] = Option()


def some[T](value: T | None) -> Option[T]:
    """
    Create an Option holding a value.

    Args:
        value: The value to wrap. ``None`` produces the empty Option.

    Returns:
        The wrapped value.
    """
    return Option.of(value)


def none() -> Option[Any]:
    """Return the shared empty Option."""
    return _EMPTY
