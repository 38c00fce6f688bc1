"""Shared builders for raw ScanCode result documents."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

import pytest

START = "2020-02-11T094021.123456"
END = "2020-02-11T094525.654321"


def _detection(
    key: str,
    spdx: Optional[str] = "",
    expression: Optional[str] = None,
    start_line: int = 1,
    end_line: int = 1,
    score: float = 100.0,
) -> Dict[str, Any]:
    return {
        "key": key,
        "score": score,
        "start_line": start_line,
        "end_line": end_line,
        "spdx_license_key": spdx,
        "matched_rule": {"license_expression": expression if expression is not None else key},
    }


def _file(
    path: str,
    licenses: Iterable[Dict[str, Any]] = (),
    copyrights: Iterable[Dict[str, Any]] = (),
    scan_errors: Iterable[str] = (),
    type: str = "file",
) -> Dict[str, Any]:
    return {
        "path": path,
        "type": type,
        "licenses": list(licenses),
        "copyrights": list(copyrights),
        "scan_errors": list(scan_errors),
    }


def _result(
    files: Iterable[Dict[str, Any]] = (),
    version: Optional[str] = "1.0.0",
    input_path: Any = "/scan/root",
    start: Optional[str] = START,
    end: Optional[str] = END,
) -> Dict[str, Any]:
    header: Dict[str, Any] = {"tool_name": "scancode-toolkit", "options": {"input": input_path}}
    if version is not None:
        header["output_format_version"] = version
    if start is not None:
        header["start_timestamp"] = start
    if end is not None:
        header["end_timestamp"] = end
    files_list: List[Dict[str, Any]] = list(files)
    return {"headers": [header], "files": files_list}


@pytest.fixture
def make_detection() -> Callable[..., Dict[str, Any]]:
    """Build one entry of a file's ``licenses`` array."""
    return _detection


@pytest.fixture
def make_file() -> Callable[..., Dict[str, Any]]:
    """Build one entry of the ``files`` array."""
    return _file


@pytest.fixture
def make_result() -> Callable[..., Dict[str, Any]]:
    """Build a complete raw result with a single header."""
    return _result
