"""Tests for timeout and unknown error classification."""

from __future__ import annotations

from scansummary.models import Issue
from scansummary.scancode.classifier import (
    classify_issues,
    classify_timeouts,
    classify_unknown_issues,
    map_timeout_errors,
    map_unknown_issues,
)


def _timeout(path: str, seconds: int = 300) -> Issue:
    return Issue(
        "ScanCode",
        "ERROR: for scanner: licenses:\n"
        f"ERROR: Processing interrupted: timeout after {seconds} seconds. (File: {path})",
    )


def _unknown(path: str, error_line: str) -> Issue:
    return Issue(
        "ScanCode",
        "ERROR: for scanner: licenses:\n"
        "ERROR: Unknown error:\n"
        "Traceback (most recent call last):\n"
        '  File "/opt/scancode/interrupt.py", line 88, in interruptible\n'
        "    return NO_ERROR, func(*(args or ()), **(kwargs or {}))\n"
        f"{error_line}\n"
        f" (File: {path})",
    )


def test_duplicate_timeouts_collapse() -> None:
    issues = [_timeout("big.js"), _timeout("big.js")]

    mapped, only_timeouts = map_timeout_errors(issues, 300)

    assert only_timeouts is True
    assert [issue.message for issue in mapped] == [
        "ERROR: Timeout after 300 seconds while scanning file 'big.js'."
    ]


def test_timeout_with_other_value_is_untouched() -> None:
    issues = [_timeout("big.js", seconds=120)]

    mapped, only_timeouts = map_timeout_errors(issues, 300)

    assert only_timeouts is False
    assert mapped == issues


def test_timeout_without_scanner_line() -> None:
    issue = Issue(
        "ScanCode",
        "ERROR: Processing interrupted: timeout after 60 seconds. (File: a.c)",
    )

    mapped, only_timeouts = map_timeout_errors([issue], 60)

    assert only_timeouts is True
    assert mapped[0].message == "ERROR: Timeout after 60 seconds while scanning file 'a.c'."


def test_memory_errors_only() -> None:
    issues = [_unknown("a.bin", "MemoryError"), _unknown("b.bin", "MemoryError")]

    mapped, only_memory_errors = map_unknown_issues(issues)

    assert only_memory_errors is True
    assert [issue.message for issue in mapped] == [
        "ERROR: MemoryError while scanning file 'a.bin'.",
        "ERROR: MemoryError while scanning file 'b.bin'.",
    ]


def test_memory_error_with_unrelated_issue() -> None:
    unrelated = Issue("ScanCode", "ERROR: something else (File: c.txt)")
    issues = [_unknown("a.bin", "MemoryError"), unrelated]

    mapped, only_memory_errors = map_unknown_issues(issues)

    assert only_memory_errors is False
    assert mapped == [
        Issue("ScanCode", "ERROR: MemoryError while scanning file 'a.bin'."),
        unrelated,
    ]


def test_other_unknown_errors_keep_their_message() -> None:
    issues = [_unknown("src/a.c", "ValueError: invalid literal for int()")]

    mapped, only_memory_errors = map_unknown_issues(issues)

    assert only_memory_errors is False
    assert mapped[0].message == (
        "ERROR: ValueError while scanning file 'src/a.c' (invalid literal for int())."
    )


def test_empty_input_is_not_a_failure() -> None:
    assert map_timeout_errors([]) == ([], False)
    assert map_unknown_issues([]) == ([], False)
    assert classify_issues([]).wholly_failed is False


def test_passes_are_idempotent() -> None:
    issues = [_timeout("a.c"), _unknown("b.bin", "MemoryError"), _timeout("a.c")]

    once, _ = map_timeout_errors(map_unknown_issues(issues)[0])
    twice, _ = map_timeout_errors(map_unknown_issues(once)[0])

    assert twice == once


def test_classify_replaces_list_contents() -> None:
    issues = [_timeout("a.c"), _timeout("a.c")]
    original = issues

    assert classify_timeouts(issues) is True
    assert issues is original
    assert len(issues) == 1

    unknown = [_unknown("x", "MemoryError")]
    assert classify_unknown_issues(unknown) is True
    assert unknown[0].message == "ERROR: MemoryError while scanning file 'x'."


def test_classify_issues_runs_both_passes() -> None:
    result = classify_issues([_unknown("a.bin", "MemoryError"), _timeout("b.js")], 300)

    assert [issue.message for issue in result.issues] == [
        "ERROR: MemoryError while scanning file 'a.bin'.",
        "ERROR: Timeout after 300 seconds while scanning file 'b.js'.",
    ]
    assert result.only_memory_errors is False
    assert result.only_timeouts is False
    assert result.wholly_failed is False


def test_classify_issues_reports_total_timeout_failure() -> None:
    result = classify_issues([_timeout("a.c"), _timeout("b.c")], 300)

    assert result.only_timeouts is True
    assert result.wholly_failed is True
