"""Normalize raw ScanCode results into scanner-agnostic scan summaries."""

from scansummary.config import ScanCodeConfig, load_config
from scansummary.document import ScanDocument
from scansummary.errors import (
    FieldMissingError,
    LicenseExpressionError,
    MalformedResultError,
    ScanResultError,
    SchemaVersionMismatch,
    TimestampParseError,
    TypeMismatchError,
    UnsupportedInputConfigurationError,
)
from scansummary.models import (
    CopyrightFinding,
    Issue,
    LicenseFinding,
    ScanSummary,
    Severity,
    TextLocation,
)
from scansummary.scancode import (
    IssueClassification,
    classify_issues,
    classify_timeouts,
    classify_unknown_issues,
    generate_summary,
)

__all__ = [
    "ScanCodeConfig",
    "load_config",
    "ScanDocument",
    "FieldMissingError",
    "LicenseExpressionError",
    "MalformedResultError",
    "ScanResultError",
    "SchemaVersionMismatch",
    "TimestampParseError",
    "TypeMismatchError",
    "UnsupportedInputConfigurationError",
    "CopyrightFinding",
    "Issue",
    "LicenseFinding",
    "ScanSummary",
    "Severity",
    "TextLocation",
    "IssueClassification",
    "classify_issues",
    "classify_timeouts",
    "classify_unknown_issues",
    "generate_summary",
]
