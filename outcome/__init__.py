"""Composable Option and Result types."""

from outcome.errors import (
    OutcomeError,
    TypeMismatchError,
    UnwrapError,
    ValueAbsentError,
    describe_error,
)
from outcome.option import Option, none, some
from outcome.result import Err, Ok, Result, ResultKind, attempt, err, ok, safe

__version__ = "1.0.0"

__all__ = [
    "Err",
    "Ok",
    "Option",
    "OutcomeError",
    "Result",
    "ResultKind",
    "TypeMismatchError",
    "UnwrapError",
    "ValueAbsentError",
    "attempt",
    "describe_error",
    "err",
    "none",
    "ok",
    "safe",
    "some",
]
