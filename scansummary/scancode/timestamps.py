"""Parsing of ScanCode's custom scan timestamps.

ScanCode writes timestamps like ``2020-02-11T094021.123456``: no separators
in the time part, a decimal fraction of the second, and no zone. They are
interpreted as UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Mapping

from scansummary.errors import TimestampParseError

TIMESTAMP_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})"
    r"\.(?P<fraction>\d+)$"
)


def parse_timestamp(value: str, field: str = "timestamp") -> datetime:
    """Parse a ScanCode timestamp into an aware UTC datetime.

    Fraction digits beyond microsecond precision are truncated.

    Raises:
        TimestampParseError: The value does not match the pattern or names an
            impossible date or time.
    """
    match = TIMESTAMP_PATTERN.match(value.strip())
    if match is None:
        raise TimestampParseError(field, value)

    microsecond = int(match.group("fraction")[:6].ljust(6, "0"))
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise TimestampParseError(field, value) from exc


def read_timestamp(header: Mapping[str, Any], field: str) -> datetime:
    """Read and parse a timestamp field of the result header."""
    value = header.get(field)
    if value is None:
        raise TimestampParseError(field)
    if not isinstance(value, str):
        raise TimestampParseError(field, str(value))
    return parse_timestamp(value, field)


__all__ = ["TIMESTAMP_PATTERN", "parse_timestamp", "read_timestamp"]
