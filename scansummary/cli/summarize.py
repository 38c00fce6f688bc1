"""CLI command to turn a raw ScanCode JSON result into a canonical summary.

The input is a result file written by ``scancode --json``/``--json-pp``. The
output is a JSON document:

    {
        "start_time": "...",
        "end_time": "...",
        "license_findings": [{"license": ..., "location": {...}, "score": ...}],
        "copyright_findings": [{"statement": ..., "location": {...}}],
        "issues": [{"source": ..., "message": ..., "severity": ...}]
    }

ScanCode itself is not run by this command.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from pydantic import ValidationError

from scansummary.config.loader import load_config
from scansummary.document import ScanDocument
from scansummary.errors import ScanResultError
from scansummary.export.json import export_json
from scansummary.scancode.classifier import classify_issues
from scansummary.scancode.summary import generate_summary

logger = logging.getLogger("scansummary.cli.summarize")


def summarize_command(args) -> int:
    """Execute summarize command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code.
    """
    try:
        config = load_config(getattr(args, "config", None))
        result_path = Path(args.result)
        output = Path(args.output)
        parse_expressions = not getattr(args, "no_expressions", False)

        if not result_path.is_file():
            logger.error("ScanCode result file does not exist: %s", result_path)
            return 1

        document = ScanDocument.from_path(result_path)
        summary = generate_summary(document, parse_expressions=parse_expressions, config=config)

        if getattr(args, "classify", False):
            classification = classify_issues(summary.issues, config.timeout)
            summary = replace(summary, issues=classification.issues)
            if classification.wholly_failed:
                logger.warning(
                    "Scan of %s failed as a whole (only memory errors: %s, only timeouts: %s)",
                    result_path,
                    classification.only_memory_errors,
                    classification.only_timeouts,
                )

        export_json(summary, output)
        logger.info("Summary of %s exported to %s", result_path, output)
        return 0

    except ScanResultError as e:
        logger.error("Malformed ScanCode result: %s", e)
        return 1
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.error("summarize command failed: %s", e, exc_info=True)
        return 1
