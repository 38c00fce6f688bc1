"""Tests for per-file scan error extraction."""

from __future__ import annotations

import pytest

from scansummary.document import ScanDocument
from scansummary.errors import (
    FieldMissingError,
    MalformedResultError,
    TypeMismatchError,
    UnsupportedInputConfigurationError,
)
from scansummary.models import Issue, Severity
from scansummary.scancode.issues import get_input_path, get_issues


def test_scan_errors_become_error_issues(make_result, make_file) -> None:
    document = ScanDocument(
        make_result(
            input_path="/scan/root",
            files=[make_file("/scan/root/src/main.c", scan_errors=["ERROR: boom", "ERROR: bang"])],
        )
    )

    issues = get_issues(document)

    assert issues == [
        Issue("ScanCode", "ERROR: boom (File: src/main.c)", Severity.ERROR),
        Issue("ScanCode", "ERROR: bang (File: src/main.c)", Severity.ERROR),
    ]


@pytest.mark.parametrize("input_path", ["/scan/root/", ["/scan/root"]])
def test_input_path_variants(make_result, input_path) -> None:
    """Trailing slashes and single-element lists give the same prefix."""
    assert get_input_path(ScanDocument(make_result(input_path=input_path))) == "/scan/root/"


def test_paths_outside_input_are_kept(make_result, make_file) -> None:
    document = ScanDocument(
        make_result(files=[make_file("other/file.txt", scan_errors=["ERROR: x"])])
    )

    assert get_issues(document)[0].message == "ERROR: x (File: other/file.txt)"


def test_multiple_inputs_are_unsupported(make_result) -> None:
    document = ScanDocument(make_result(input_path=["/a", "/b"]))

    with pytest.raises(UnsupportedInputConfigurationError):
        get_input_path(document)


def test_bad_input_options(make_result) -> None:
    with pytest.raises(MalformedResultError):
        get_input_path(ScanDocument(make_result(input_path=[])))
    with pytest.raises(TypeMismatchError):
        get_input_path(ScanDocument(make_result(input_path=7)))
    with pytest.raises(FieldMissingError):
        get_input_path(ScanDocument(make_result(input_path=None)))


def test_non_string_scan_error_is_type_mismatch(make_result, make_file) -> None:
    entry = make_file("/scan/root/a.c")
    entry["scan_errors"] = [{"message": "nope"}]
    document = ScanDocument(make_result(files=[entry]))

    with pytest.raises(TypeMismatchError):
        get_issues(document)


def test_scanner_name_is_issue_source(make_result, make_file) -> None:
    document = ScanDocument(make_result(files=[make_file("/scan/root/a", scan_errors=["E"])]))

    assert get_issues(document, "MyScanner")[0].source == "MyScanner"


def test_windows_input_root_is_stripped(make_result, make_file) -> None:
    document = ScanDocument(
        make_result(
            input_path="C:\\scan\\root",
            files=[make_file("C:\\scan\\root\\a.c", scan_errors=["boom"])],
        )
    )

    assert get_issues(document)[0].message == "boom (File: a.c)"
