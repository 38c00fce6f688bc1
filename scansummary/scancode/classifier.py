"""Classification of ScanCode scan errors.

ScanCode reports per-file failures as verbose free text. The passes in this
module recognize timeouts and unhandled exceptions (most importantly memory
exhaustion), rewrite them into a compact canonical form and collapse
duplicates. Each pass also tells whether *all* issues fell into its category,
which callers use to treat a scan as failed as a whole instead of partially
degraded.

Both the pure ``map_*`` functions and the list-replacing ``classify_*``
variants never raise. The canonical messages do not match the detection
patterns, so running a pass again does not change its output.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Iterable, List, MutableSequence, Sequence, Tuple

from scansummary.config.schema import DEFAULT_TIMEOUT
from scansummary.models import Issue

logger = logging.getLogger("scansummary.scancode.classifier")

# The "(File: ...)" part is appended by scansummary.scancode.issues.
UNKNOWN_ERROR_REGEX = re.compile(
    r"(ERROR: for scanner: (?P<scanner>\w+):\n)?"
    r"ERROR: Unknown error:\n.+\n(?P<error>\w+Error)(:|\n)(?P<message>.*) \(File: (?P<file>.+)\)",
    re.DOTALL,
)

TIMEOUT_ERROR_REGEX = re.compile(
    r"(ERROR: for scanner: (?P<scanner>\w+):\n)?"
    r"ERROR: Processing interrupted: timeout after (?P<timeout>\d+) seconds. \(File: (?P<file>.+)\)"
)

MEMORY_ERROR = "MemoryError"


def _distinct_by_message(issues: Iterable[Issue]) -> List[Issue]:
    seen = set()
    distinct: List[Issue] = []
    for issue in issues:
        if issue.message in seen:
            continue
        seen.add(issue.message)
        distinct.append(issue)
    return distinct


def map_timeout_errors(
    issues: Sequence[Issue], timeout: int = DEFAULT_TIMEOUT
) -> Tuple[List[Issue], bool]:
    """Map timeout error messages to a compact form.

    Only timeouts reporting the configured ``timeout`` are rewritten.

    Returns:
        The rewritten, deduplicated issues and whether the (non-empty) input
        consisted of such timeout errors only.
    """
    if not issues:
        return [], False

    only_timeout_errors = True
    mapped: List[Issue] = []

    for issue in issues:
        match = TIMEOUT_ERROR_REGEX.fullmatch(issue.message)
        if match is not None and match.group("timeout") == str(timeout):
            file_path = match.group("file")
            mapped.append(
                replace(
                    issue,
                    message=f"ERROR: Timeout after {timeout} seconds while scanning file '{file_path}'.",
                )
            )
        else:
            only_timeout_errors = False
            mapped.append(issue)

    return _distinct_by_message(mapped), only_timeout_errors


def map_unknown_issues(issues: Sequence[Issue]) -> Tuple[List[Issue], bool]:
    """Map messages about unhandled exceptions to a compact form.

    Returns:
        The rewritten, deduplicated issues and whether the (non-empty) input
        consisted of memory errors only.
    """
    if not issues:
        return [], False

    only_memory_errors = True
    mapped: List[Issue] = []

    for issue in issues:
        match = UNKNOWN_ERROR_REGEX.fullmatch(issue.message)
        if match is None:
            only_memory_errors = False
            mapped.append(issue)
            continue

        file_path = match.group("file")
        error = match.group("error")
        if error == MEMORY_ERROR:
            message = f"ERROR: {MEMORY_ERROR} while scanning file '{file_path}'."
        else:
            only_memory_errors = False
            detail = match.group("message").strip()
            message = f"ERROR: {error} while scanning file '{file_path}' ({detail})."
        mapped.append(replace(issue, message=message))

    return _distinct_by_message(mapped), only_memory_errors


def classify_timeouts(issues: MutableSequence[Issue], timeout: int = DEFAULT_TIMEOUT) -> bool:
    """Rewrite timeout errors of a caller-owned list in place.

    The list contents are replaced as a whole.

    Returns:
        True if solely timeout errors occurred.
    """
    mapped, only_timeouts = map_timeout_errors(list(issues), timeout)
    issues[:] = mapped
    return only_timeouts


def classify_unknown_issues(issues: MutableSequence[Issue]) -> bool:
    """Rewrite unhandled exception errors of a caller-owned list in place.

    Returns:
        True if solely memory errors occurred.
    """
    mapped, only_memory_errors = map_unknown_issues(list(issues))
    issues[:] = mapped
    return only_memory_errors


@dataclass(frozen=True)
class IssueClassification:
    """Outcome of running all classification passes over an issue list."""

    issues: Tuple[Issue, ...]
    only_memory_errors: bool
    only_timeouts: bool

    @property
    def wholly_failed(self) -> bool:
        return self.only_memory_errors or self.only_timeouts


def classify_issues(issues: Sequence[Issue], timeout: int = DEFAULT_TIMEOUT) -> IssueClassification:
    """Run the unknown error pass, then the timeout pass."""
    mapped, only_memory_errors = map_unknown_issues(issues)
    mapped, only_timeouts = map_timeout_errors(mapped, timeout)

    if only_memory_errors:
        logger.warning("All %d issue(s) are memory errors", len(mapped))
    elif only_timeouts:
        logger.warning("All %d issue(s) are timeouts after %d seconds", len(mapped), timeout)

    return IssueClassification(
        issues=tuple(mapped),
        only_memory_errors=only_memory_errors,
        only_timeouts=only_timeouts,
    )


__all__ = [
    "UNKNOWN_ERROR_REGEX",
    "TIMEOUT_ERROR_REGEX",
    "map_timeout_errors",
    "map_unknown_issues",
    "classify_timeouts",
    "classify_unknown_issues",
    "IssueClassification",
    "classify_issues",
]
