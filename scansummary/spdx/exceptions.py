"""Associate license exception findings with license findings.

Scanners often report a license and its exception as two separate detections
at the same location, e.g. ``GPL-2.0-only`` and ``Classpath-exception-2.0``.
This module merges such pairs into ``GPL-2.0-only WITH Classpath-exception-2.0``
and drops the then redundant standalone exception findings.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Set, Tuple

from scansummary.errors import LicenseExpressionError
from scansummary.models import LicenseFinding, TextLocation
from scansummary.spdx.expression import (
    Expression,
    LicenseId,
    apply_exception,
    associate_exceptions,
    attached_exceptions,
    parse_expression,
    render_expression,
)
from scansummary.spdx.identifiers import is_exception_id

logger = logging.getLogger("scansummary.spdx.exceptions")


def associate_licenses_with_exceptions(
    findings: Iterable[LicenseFinding],
) -> Set[LicenseFinding]:
    """Merge exception findings into license findings at the same location.

    Args:
        findings: License findings of one scan, in any order.

    Returns:
        The transformed finding set. Findings whose expression cannot be
        parsed are passed through unchanged.
    """
    result: Set[LicenseFinding] = set()
    by_location: Dict[TextLocation, List[Tuple[LicenseFinding, Expression]]] = defaultdict(list)

    for finding in findings:
        try:
            expression = parse_expression(finding.license)
        except LicenseExpressionError as exc:
            logger.debug("Keeping unparsable license finding as is: %s", exc)
            result.add(finding)
            continue
        by_location[finding.location].append((finding, expression))

    for entries in by_location.values():
        result.update(_associate_at_location(entries))

    return result


@dataclass
class _LicenseEntry:
    """A license finding at one location and its possibly rewritten expression."""

    finding: LicenseFinding
    expression: Expression
    changed: bool = False

    def to_finding(self) -> LicenseFinding:
        if not self.changed:
            return self.finding
        return replace(self.finding, license=render_expression(self.expression))


def _associate_at_location(
    entries: List[Tuple[LicenseFinding, Expression]],
) -> Set[LicenseFinding]:
    exceptions: List[Tuple[str, LicenseFinding]] = []
    licenses: List[_LicenseEntry] = []

    for finding, expression in entries:
        if isinstance(expression, LicenseId) and is_exception_id(expression.id):
            exceptions.append((expression.id, finding))
        else:
            associated = associate_exceptions(expression)
            licenses.append(_LicenseEntry(finding, associated, associated != expression))

    attached: Set[str] = set()
    for entry in licenses:
        attached |= attached_exceptions(entry.expression)

    remaining: Set[LicenseFinding] = set()
    for exception, finding in sorted(exceptions, key=lambda item: (item[0], item[1].score)):
        if exception in attached:
            continue

        applied = False
        for entry in licenses:
            updated = apply_exception(entry.expression, exception)
            if updated is not None:
                entry.expression = updated
                entry.changed = True
                applied = True

        if applied:
            attached.add(exception)
            logger.debug(
                "Attached %s to license findings at %s:%d-%d",
                exception,
                finding.location.path,
                finding.location.start_line,
                finding.location.end_line,
            )
        else:
            remaining.add(finding)

    return remaining | {entry.to_finding() for entry in licenses}


__all__ = ["associate_licenses_with_exceptions"]
