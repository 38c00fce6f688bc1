"""End-to-end tests for summary generation from raw results."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from scansummary.config.schema import ScanCodeConfig
from scansummary.document import ScanDocument
from scansummary.errors import MalformedResultError, TimestampParseError
from scansummary.models import Severity, TextLocation
from scansummary.scancode.summary import generate_summary


def _sample_files(make_file, make_detection, copyright_key: str = "value"):
    return [
        make_file("/scan/root/src", type="directory"),
        make_file(
            "/scan/root/src/main.c",
            licenses=[make_detection("mit", "MIT", start_line=1, end_line=3)],
            copyrights=[{copyright_key: "Copyright 2020 Jane Doe", "start_line": 1, "end_line": 1}],
            scan_errors=["ERROR: for scanner: emails:\nERROR: boom"],
        ),
    ]


def test_summary_of_complete_result(make_result, make_file, make_detection) -> None:
    summary = generate_summary(make_result(files=_sample_files(make_file, make_detection)))

    assert summary.start_time == datetime(2020, 2, 11, 9, 40, 21, 123456, tzinfo=timezone.utc)
    assert summary.start_time <= summary.end_time
    assert [f.license for f in summary.license_findings] == ["MIT"]
    assert [f.statement for f in summary.copyright_findings] == ["Copyright 2020 Jane Doe"]
    assert [issue.message for issue in summary.issues] == [
        "ERROR: for scanner: emails:\nERROR: boom (File: src/main.c)"
    ]


def test_summary_accepts_scan_document(make_result) -> None:
    summary = generate_summary(ScanDocument(make_result()))

    assert summary.license_findings == frozenset()
    assert summary.issues == ()


def test_unsupported_version_is_processed_with_warning(
    make_result, make_file, make_detection
) -> None:
    """A newer major version only adds a single leading WARNING issue."""
    files = _sample_files(make_file, make_detection, copyright_key="copyright")

    summary = generate_summary(make_result(version="5.0.0", files=files))

    assert summary.license_findings
    assert summary.copyright_findings
    warnings = [issue for issue in summary.issues if issue.severity is Severity.WARNING]
    assert len(warnings) == 1
    assert summary.issues[0] == warnings[0]


def test_parse_expressions_defaults_to_config(make_result, make_file, make_detection) -> None:
    files = [
        make_file(
            "/scan/root/LICENSE",
            licenses=[
                make_detection("mit", "MIT", "mit or apache-2.0"),
                make_detection("apache-2.0", "Apache-2.0", "mit or apache-2.0"),
            ],
        )
    ]
    config = ScanCodeConfig(parse_expressions=False)

    by_config = generate_summary(make_result(files=files), config=config)
    by_argument = generate_summary(make_result(files=files), parse_expressions=True, config=config)

    assert {f.license for f in by_config.license_findings} == {"MIT", "Apache-2.0"}
    assert {f.license for f in by_argument.license_findings} == {"MIT or Apache-2.0"}


def test_license_paths_are_not_rewritten(make_result, make_file, make_detection) -> None:
    summary = generate_summary(make_result(files=_sample_files(make_file, make_detection)))

    (finding,) = summary.license_findings
    assert finding.location == TextLocation("/scan/root/src/main.c", 1, 3)


def test_end_before_start_is_malformed(make_result) -> None:
    data = make_result(start="2020-02-11T100000.0", end="2020-02-11T090000.0")

    with pytest.raises(MalformedResultError):
        generate_summary(data)


def test_missing_timestamp_is_fatal(make_result) -> None:
    with pytest.raises(TimestampParseError):
        generate_summary(make_result(end=None))


def test_missing_header_is_fatal() -> None:
    with pytest.raises(MalformedResultError):
        generate_summary({"files": []})
