"""License finding extraction from ScanCode results.

ScanCode reports one detection per license key a matched rule refers to, so
a rule like ``mit or apache-2.0`` shows up as two detections sharing the same
rule expression, lines and score. Detections are grouped by that
``LicenseMatch`` key and each group becomes one finding whose expression has
all ScanCode keys replaced by SPDX identifiers. The order of the returned
findings is not significant.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Set, Tuple

from scansummary.config.schema import DEFAULT_SCANNER_NAME
from scansummary.document import (
    ScanDocument,
    iter_objects,
    optional_str,
    require_int,
    require_number,
    require_object,
    require_str,
)
from scansummary.errors import LicenseExpressionError, MalformedResultError
from scansummary.models import LicenseFinding, TextLocation
from scansummary.spdx.exceptions import associate_licenses_with_exceptions
from scansummary.spdx.expression import map_license
from scansummary.spdx.identifiers import is_valid_spdx_id, license_ref_prefix, to_spdx_id

logger = logging.getLogger("scansummary.scancode.licenses")

UNKNOWN_LICENSE_TOKEN = "unknown"


@dataclass(frozen=True)
class LicenseMatch:
    """Grouping key of detections that stem from one rule match."""

    expression: str
    start_line: int
    end_line: int
    score: float


def get_spdx_license_id(
    detection: Mapping[str, Any],
    scanner_name: str = DEFAULT_SCANNER_NAME,
    context: str = "license detection",
) -> str:
    """Get the SPDX license id, or a LicenseRef fallback, for a detection.

    ScanCode's own SPDX key is preferred if it is a valid SPDX short
    identifier. Some ScanCode versions report an empty string instead of
    null for licenses unknown to SPDX; in that case, and for keys that are
    not valid identifiers, the ScanCode key is turned into
    ``LicenseRef-<scanner>-<key>``. Keys with nothing usable in them map to
    ``LicenseRef-<scanner>-unknown``.
    """
    spdx_key = (optional_str(detection, "spdx_license_key", context) or "").strip()
    if spdx_key:
        if is_valid_spdx_id(spdx_key):
            return spdx_key
        logger.debug("Ignoring invalid SPDX key %r in %s", spdx_key, context)

    key = require_str(detection, "key", context)
    id_from_key = to_spdx_id(key, allow_plus_suffix=True)
    if not id_from_key:
        logger.warning("No usable license key %r in %s", key, context)
        id_from_key = UNKNOWN_LICENSE_TOKEN

    return f"{license_ref_prefix(scanner_name)}{id_from_key}"


def make_location(path: str, start_line: int, end_line: int) -> TextLocation:
    try:
        return TextLocation(path=path, start_line=start_line, end_line=end_line)
    except ValueError as exc:
        raise MalformedResultError(str(exc)) from exc


def _map_expression(expression: str, replacements: Dict[str, str], path: str) -> str:
    if not expression.strip():
        # No tokens to map; the resolved ids stand for the whole rule.
        return " AND ".join(sorted(set(replacements.values())))
    try:
        return map_license(expression, replacements)
    except LicenseExpressionError as exc:
        logger.warning("Keeping unmapped license expression for %s: %s", path, exc)
        return expression


def _group_file_detections(
    file_entry: Mapping[str, Any],
    path: str,
    parse_expressions: bool,
    scanner_name: str,
) -> Dict[LicenseMatch, List[Tuple[str, str]]]:
    groups: Dict[LicenseMatch, List[Tuple[str, str]]] = defaultdict(list)
    context = f"licenses of {path}"

    for detection in iter_objects(file_entry, "licenses", context):
        key = require_str(detection, "key", context)
        if parse_expressions:
            matched_rule = require_object(detection, "matched_rule", context)
            expression = require_str(matched_rule, "license_expression", context)
        else:
            expression = key

        match = LicenseMatch(
            expression=expression,
            start_line=require_int(detection, "start_line", context),
            end_line=require_int(detection, "end_line", context),
            score=require_number(detection, "score", context),
        )
        groups[match].append((key, get_spdx_license_id(detection, scanner_name, context)))

    return groups


def get_license_findings(
    document: ScanDocument,
    parse_expressions: bool = True,
    scanner_name: str = DEFAULT_SCANNER_NAME,
) -> Set[LicenseFinding]:
    """Get the license findings of all regular files in a result.

    Args:
        document: The raw result.
        parse_expressions: Use the expression of the matched rule instead of
            the bare license key as the finding's expression.
        scanner_name: Namespace for LicenseRef fallback identifiers.

    Returns:
        Deduplicated license findings with exceptions already associated.
    """
    findings: List[LicenseFinding] = []

    for file_entry in document.files():
        if optional_str(file_entry, "type", "file entry") != "file":
            continue

        path = require_str(file_entry, "path", "file entry")
        groups = _group_file_detections(file_entry, path, parse_expressions, scanner_name)

        for match, replacements in groups.items():
            findings.append(
                LicenseFinding(
                    license=_map_expression(match.expression, dict(replacements), path),
                    location=make_location(path, match.start_line, match.end_line),
                    score=match.score,
                )
            )

    logger.debug("Extracted %d license finding(s) before exception association", len(findings))
    return associate_licenses_with_exceptions(findings)


__all__ = ["LicenseMatch", "get_spdx_license_id", "get_license_findings", "make_location"]
