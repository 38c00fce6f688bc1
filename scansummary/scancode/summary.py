"""Generate a canonical ScanSummary from a raw ScanCode result."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from scansummary.config.schema import ScanCodeConfig
from scansummary.document import ScanDocument
from scansummary.errors import MalformedResultError
from scansummary.models import ScanSummary
from scansummary.scancode.copyrights import get_copyright_findings
from scansummary.scancode.issues import get_issues
from scansummary.scancode.licenses import get_license_findings
from scansummary.scancode.timestamps import read_timestamp
from scansummary.scancode.version import check_output_format_version

logger = logging.getLogger("scansummary.scancode.summary")


def generate_summary(
    result: Union[ScanDocument, Mapping[str, Any]],
    parse_expressions: Optional[bool] = None,
    config: Optional[ScanCodeConfig] = None,
) -> ScanSummary:
    """Generate a summary from one raw ScanCode result.

    Args:
        result: The decoded JSON result, or a ScanDocument wrapping it.
        parse_expressions: Prefer rule license expressions over separate
            license keys. Defaults to ``config.parse_expressions``.
        config: Processing configuration; defaults apply when omitted.

    Returns:
        The summary. Its issues are the version gate warning, if any,
        followed by the per-file scan errors.

    Raises:
        MalformedResultError: The result is structurally invalid.
    """
    config = config or ScanCodeConfig.default()
    if parse_expressions is None:
        parse_expressions = config.parse_expressions
    document = result if isinstance(result, ScanDocument) else ScanDocument(result)

    header = document.header
    issues = check_output_format_version(
        document,
        config.scanner_name,
        config.max_supported_output_format_major_version,
    )

    start_time = read_timestamp(header, "start_timestamp")
    end_time = read_timestamp(header, "end_timestamp")
    if start_time > end_time:
        raise MalformedResultError(
            f"Scan end {end_time.isoformat()} is before scan start {start_time.isoformat()}"
        )

    license_findings = get_license_findings(document, parse_expressions, config.scanner_name)
    copyright_findings = get_copyright_findings(document)
    issues.extend(get_issues(document, config.scanner_name))

    logger.info(
        "Summarized scan: %d license finding(s), %d copyright finding(s), %d issue(s)",
        len(license_findings),
        len(copyright_findings),
        len(issues),
    )

    return ScanSummary(
        start_time=start_time,
        end_time=end_time,
        license_findings=frozenset(license_findings),
        copyright_findings=frozenset(copyright_findings),
        issues=tuple(issues),
    )


__all__ = ["generate_summary"]
