"""Exception Handlers

Bridges the typed error values with Python exceptions. Every public lexis
operation raises a LexisError subclass; the subclass is selected from the
error code so callers can catch the precise failure kind while still having
the structured AppError attached.
"""
from __future__ import annotations

from typing import Callable, TypeVar

from .types import AppError, Err, ErrorCode, Ok, Result, from_exception

T = TypeVar("T")


class LexisError(Exception):
    """Exception wrapper for AppError."""

    code: ErrorCode = ErrorCode.E9000_INTERNAL_GENERIC

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def metadata(self) -> dict:
        return self.error.metadata


class InvalidFeatureType(LexisError, ValueError):
    """Feature type is not one of the supported feature types."""
    code = ErrorCode.E2004_INVALID_FEATURE_TYPE


class EmptyValue(LexisError, ValueError):
    """A required value is missing or empty."""
    code = ErrorCode.E2001_EMPTY_VALUE


class UnknownValue(LexisError, KeyError):
    """An importer has no mapping for a value and does not pass unknowns through."""
    code = ErrorCode.E4010_UNKNOWN_VALUE

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.error.message


class MissingImporter(LexisError, KeyError):
    """No importer is registered under the requested name."""
    code = ErrorCode.E4011_MISSING_IMPORTER

    def __str__(self) -> str:
        return self.error.message


class UnsupportedLanguage(LexisError, ValueError):
    """No language model is registered for a language."""
    code = ErrorCode.E4012_UNSUPPORTED_LANGUAGE


_EXCEPTIONS: dict[ErrorCode, type[LexisError]] = {
    cls.code: cls
    for cls in (InvalidFeatureType, EmptyValue, UnknownValue, MissingImporter, UnsupportedLanguage)
}


def exception_for(error: AppError) -> LexisError:
    """Build the exception matching an error's code."""
    return _EXCEPTIONS.get(error.code, LexisError)(error)


def raise_error(error: AppError | Err[AppError]) -> None:
    """Raise the exception for an AppError (or an Err wrapping one)."""
    if isinstance(error, Err):
        error = error.error
    raise exception_for(error)


def raise_result(result: Result[T, AppError]) -> T:
    """Unwrap Ok or raise the exception for Err."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise exception_for(error)


def try_result(f: Callable[[], T], origin: str = "") -> Result[T, AppError]:
    """Execute function and wrap its outcome in a Result.

    LexisErrors keep their AppError; any other exception becomes an
    unexpected-error Err.
    """
    try:
        return Ok(f())
    except LexisError as e:
        return Err(e.error)
    except Exception as e:
        return from_exception(e, origin=origin)
