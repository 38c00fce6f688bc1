"""Canonical, scanner-agnostic scan summary models.

All models are immutable value objects. Findings are hashable so they can be
collected into sets; the order of findings carries no meaning. Issues keep
their discovery order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Tuple


class Severity(str, Enum):
    """Severity of an issue."""

    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True, order=True)
class TextLocation:
    """A line range inside a file.

    Attributes:
        path: Slash-separated path relative to the scanned root.
        start_line: First line (1-based, inclusive).
        end_line: Last line (1-based, inclusive).
    """

    path: str
    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line > self.end_line:
            raise ValueError(
                f"start_line {self.start_line} is after end_line {self.end_line} "
                f"for {self.path}"
            )


@dataclass(frozen=True)
class LicenseFinding:
    """A license expression detected at a text location."""

    license: str
    location: TextLocation
    score: float = 0.0

    def sort_key(self) -> Tuple[TextLocation, str, float]:
        return (self.location, self.license, self.score)


@dataclass(frozen=True)
class CopyrightFinding:
    """A copyright statement detected at a text location."""

    statement: str
    location: TextLocation

    def sort_key(self) -> Tuple[TextLocation, str]:
        return (self.location, self.statement)


@dataclass(frozen=True)
class Issue:
    """A diagnostic produced while scanning or while processing results."""

    source: str
    message: str
    severity: Severity = Severity.ERROR


@dataclass(frozen=True)
class ScanSummary:
    """Normalized result of one scanner run.

    Attributes:
        start_time: Scan start (UTC).
        end_time: Scan end (UTC), never before ``start_time``.
        license_findings: Deduplicated license findings.
        copyright_findings: Deduplicated copyright findings.
        issues: Issues in discovery order.
    """

    start_time: datetime
    end_time: datetime
    license_findings: FrozenSet[LicenseFinding] = field(default_factory=frozenset)
    copyright_findings: FrozenSet[CopyrightFinding] = field(default_factory=frozenset)
    issues: Tuple[Issue, ...] = ()

    def __post_init__(self) -> None:
        if self.start_time > self.end_time:
            raise ValueError(
                f"start_time {self.start_time.isoformat()} is after "
                f"end_time {self.end_time.isoformat()}"
            )

    def sorted_license_findings(self) -> list[LicenseFinding]:
        return sorted(self.license_findings, key=LicenseFinding.sort_key)

    def sorted_copyright_findings(self) -> list[CopyrightFinding]:
        return sorted(self.copyright_findings, key=CopyrightFinding.sort_key)


__all__ = [
    "Severity",
    "TextLocation",
    "LicenseFinding",
    "CopyrightFinding",
    "Issue",
    "ScanSummary",
]
