"""Exception hierarchy for ScanCode result processing.

Structural problems in a raw result are fatal to the single invocation that
hit them and surface to the caller as ``MalformedResultError`` subclasses.
Problems reported by the scanner itself are never raised; they become
``Issue`` records in the produced summary.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Custom Exception Hierarchy
# =============================================================================


class ScanResultError(Exception):
    """Base class for all errors raised while processing a scan result."""

    pass


class MalformedResultError(ScanResultError):
    """The raw result violates the structure the pipeline relies on.

    Raised for a missing or duplicated header, missing required fields,
    values of the wrong type and similar integration errors. Summary
    generation for the affected document is aborted.
    """

    pass


class FieldMissingError(MalformedResultError):
    """A required field is absent or null."""

    def __init__(self, field: str, context: str = "") -> None:
        self.field = field
        self.context = context
        where = f" in {context}" if context else ""
        super().__init__(f"Required field '{field}' is missing{where}")


class TypeMismatchError(MalformedResultError):
    """A field holds a JSON value of an unexpected type."""

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        context: str = "",
    ) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        self.context = context
        where = f" in {context}" if context else ""
        super().__init__(
            f"Field '{field}'{where} must be of type {expected}, got {actual}"
        )


class TimestampParseError(MalformedResultError):
    """A scan timestamp is missing or does not match the expected pattern."""

    def __init__(self, field: str, value: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        if value is None:
            message = f"Timestamp field '{field}' is missing"
        else:
            message = f"Timestamp field '{field}' has unexpected format: {value!r}"
        super().__init__(message)


class UnsupportedInputConfigurationError(MalformedResultError):
    """The scan was run over more than one input root."""

    pass


class SchemaVersionMismatch(ScanResultError):
    """The declared output format version is not API compatible.

    Never escapes summary generation: the version gate downgrades it to a
    WARNING issue and processing continues on a best-effort basis.
    """

    def __init__(self, version: str, max_major: int) -> None:
        self.version = version
        self.max_major = max_major
        super().__init__(
            f"The output format version {version} exceeds the supported major "
            f"version {max_major}. Results may be incomplete or incorrect."
        )


class LicenseExpressionError(ValueError):
    """A license expression cannot be tokenized or parsed."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid license expression {expression!r}: {reason}")


__all__ = [
    "ScanResultError",
    "MalformedResultError",
    "FieldMissingError",
    "TypeMismatchError",
    "TimestampParseError",
    "UnsupportedInputConfigurationError",
    "SchemaVersionMismatch",
    "LicenseExpressionError",
]
