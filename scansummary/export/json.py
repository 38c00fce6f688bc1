"""JSON export for scan summaries."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from scansummary.models import ScanSummary, TextLocation

logger = logging.getLogger("scansummary.export.json")


def _timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _location(location: TextLocation) -> Dict[str, Any]:
    return {
        "path": location.path,
        "start_line": location.start_line,
        "end_line": location.end_line,
    }


def summary_to_dict(summary: ScanSummary) -> Dict[str, Any]:
    """Convert a summary to a JSON-ready mapping with deterministic ordering.

    Args:
        summary: Summary to convert.

    Returns:
        Mapping with timestamps as ISO-8601 UTC strings and findings sorted
        by location.
    """
    return {
        "start_time": _timestamp(summary.start_time),
        "end_time": _timestamp(summary.end_time),
        "license_findings": [
            {
                "license": finding.license,
                "location": _location(finding.location),
                "score": finding.score,
            }
            for finding in summary.sorted_license_findings()
        ],
        "copyright_findings": [
            {
                "statement": finding.statement,
                "location": _location(finding.location),
            }
            for finding in summary.sorted_copyright_findings()
        ],
        "issues": [
            {
                "source": issue.source,
                "message": issue.message,
                "severity": issue.severity.value,
            }
            for issue in summary.issues
        ],
    }


def export_json(summary: ScanSummary, output_path: Path) -> None:
    """Export summary to JSON format.

    Args:
        summary: Summary to export.
        output_path: Output file path.
    """
    logger.info("Exporting summary to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = summary_to_dict(summary)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("JSON export completed: %d license findings, %d copyright findings, %d issues",
                len(data["license_findings"]), len(data["copyright_findings"]),
                len(data["issues"]))
