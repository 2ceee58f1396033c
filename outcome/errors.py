"""
Exceptions raised by the outcome containers.

Absence (an empty Option) and failure (an Err Result) are modeled as data
and never raise on their own. The exceptions below are raised only at an
explicit extraction boundary (``unwrap``, ``expect``, ``unwrap_err``) or when
a composition receives something that is not the expected container.
"""

from __future__ import annotations

import dataclasses
import numbers
import types
from collections.abc import Mapping, Sequence, Set
from typing import Any


class OutcomeError(Exception):
    """Base class for every exception raised by this package."""


class ValueAbsentError(OutcomeError, ValueError):
    """Raised when a value is extracted from an empty Option."""


class UnwrapError(OutcomeError, ValueError):
    """
    Raised when a Result is unwrapped on the wrong variant.

    Attributes:
        payload: The value held by the Result that could not be unwrapped.
    """

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class TypeMismatchError(OutcomeError, TypeError):
    """Raised when a composition argument is not the expected container."""

    def __init__(self, expected: str, value: object) -> None:
        super().__init__(f"Value must be {expected}. Found {type(value).__name__}")
        self.expected = expected
        self.value = value


def _defines_str(value: object) -> bool:
    return type(value).__str__ is not object.__str__


def _is_record(value: object) -> bool:
    if callable(value) or isinstance(value, types.ModuleType):
        return False
    if dataclasses.is_dataclass(value):
        return True
    if hasattr(value, "__dict__") or hasattr(type(value), "__slots__"):
        return True
    return isinstance(value, Mapping | Set) or (
        isinstance(value, Sequence) and not isinstance(value, str | bytes)
    )


def describe_error(value: object) -> str:
    """
    Build a readable message for an error payload.

    Args:
        value: The payload of an Err Result.

    Returns:
        The message used when the payload surfaces through ``unwrap()``.

    Example:
        >>> describe_error("boom")
        'boom'
        >>> describe_error(404)
        'number error (404)'
        >>> describe_error({"code": 404})
        'table error'
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "nil error"
    # bool is a Number subclass, test it first
    if isinstance(value, bool):
        return f"boolean error ({value})"
    if isinstance(value, numbers.Number):
        return f"number error ({value})"
    if _defines_str(value):
        return str(value)
    if _is_record(value):
        return "table error"
    return f"error of type {type(value).__name__}"
