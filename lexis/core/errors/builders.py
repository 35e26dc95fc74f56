"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context, wrapped in Err.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: object = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def empty_value(field: str, message: str | None = None, origin: str = "") -> Err[AppError]:
    return validation_error(
        message or f"{field.capitalize()} should not be empty.",
        code=ErrorCode.E2001_EMPTY_VALUE,
        field=field,
        origin=origin,
    )


def invalid_feature_type(
    feature_type: object, reason: str = "", origin: str = ""
) -> Err[AppError]:
    msg = f'Features of "{feature_type}" type are not supported'
    if reason:
        msg += f": {reason}"
    return validation_error(
        msg,
        code=ErrorCode.E2004_INVALID_FEATURE_TYPE,
        field="type",
        value=str(feature_type),
        origin=origin,
    )


# =============================================================================
# Lookup Errors (E4xxx)
# =============================================================================

def lookup_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E4000_LOOKUP_GENERIC,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create lookup error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
    ))


def unknown_value(key: str, origin: str = "") -> Err[AppError]:
    return lookup_error(
        f'A value "{key}" is not found in the importer.',
        code=ErrorCode.E4010_UNKNOWN_VALUE,
        origin=origin,
        key=key,
    )


def missing_importer(name: str, available: list[str], origin: str = "") -> Err[AppError]:
    listed = ", ".join(available) or "none"
    return lookup_error(
        f'Importer "{name}" is not registered. Available: {listed}',
        code=ErrorCode.E4011_MISSING_IMPORTER,
        origin=origin,
        name=name,
        available=available,
    )


def unsupported_language(language: object, available: list[str], origin: str = "") -> Err[AppError]:
    listed = ", ".join(available) or "none"
    return lookup_error(
        f"Language '{language}' not registered. Available: {listed}",
        code=ErrorCode.E4012_UNSUPPORTED_LANGUAGE,
        origin=origin,
        language=str(language),
        available=available,
    )

