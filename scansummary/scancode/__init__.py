"""ScanCode result processing: summary generation and issue classification."""

from scansummary.scancode.classifier import (
    IssueClassification,
    classify_issues,
    classify_timeouts,
    classify_unknown_issues,
    map_timeout_errors,
    map_unknown_issues,
)
from scansummary.scancode.summary import generate_summary

__all__ = [
    "IssueClassification",
    "classify_issues",
    "classify_timeouts",
    "classify_unknown_issues",
    "generate_summary",
    "map_timeout_errors",
    "map_unknown_issues",
]
