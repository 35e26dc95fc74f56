"""Error Handling

Typed error values and the exceptions raised by lexis operations.

Key components:
- AppError / ErrorCode: structured error with a code from the taxonomy
- Result[T, E]: Ok/Err container used by the non-raising *_result variants
- LexisError and subclasses: raised by every public operation

Usage:
    from lexis.core.errors import UnknownValue

    try:
        importer.get("Abl")
    except UnknownValue as e:
        log.warning("unmapped_tag", **e.metadata)

    match importer.get_result("Abl"):
        case Ok(value):
            ...
        case Err(error):
            ...
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
)

from .builders import (
    validation_error,
    empty_value,
    invalid_feature_type,
    lookup_error,
    unknown_value,
    missing_importer,
    unsupported_language,
)

from .handlers import (
    LexisError,
    InvalidFeatureType,
    EmptyValue,
    UnknownValue,
    MissingImporter,
    UnsupportedLanguage,
    exception_for,
    raise_error,
    raise_result,
    try_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    # Validation (E2xxx)
    "validation_error",
    "empty_value",
    "invalid_feature_type",
    # Lookup (E4xxx)
    "lookup_error",
    "unknown_value",
    "missing_importer",
    "unsupported_language",
    # Exceptions
    "LexisError",
    "InvalidFeatureType",
    "EmptyValue",
    "UnknownValue",
    "MissingImporter",
    "UnsupportedLanguage",
    "exception_for",
    "raise_error",
    "raise_result",
    "try_result",
]
