"""Issue extraction from per-file ScanCode scan errors.

Each raw error string is suffixed with `` (File: <relative path>)``. The
classifier in ``scansummary.scancode.classifier`` matches on exactly this
suffix, so the format must not change independently.
"""

from __future__ import annotations

import logging
from typing import List

from scansummary.config.schema import DEFAULT_SCANNER_NAME
from scansummary.document import (
    ScanDocument,
    json_type_name,
    optional_list,
    require_field,
    require_object,
    require_str,
)
from scansummary.errors import (
    MalformedResultError,
    TypeMismatchError,
    UnsupportedInputConfigurationError,
)
from scansummary.models import Issue
from scansummary.utils.path_utils import input_prefix, strip_input_prefix

logger = logging.getLogger("scansummary.scancode.issues")

FILE_SUFFIX_FORMAT = "{error} (File: {path})"


def get_input_path(document: ScanDocument) -> str:
    """Return the single input root of the scan with a trailing slash.

    ScanCode records ``options.input`` either as a string or, in newer
    versions, as a list of paths. Only one input root is supported.
    """
    options = require_object(document.header, "options", "header")
    raw_input = require_field(options, "input", "header options")

    if isinstance(raw_input, list):
        if len(raw_input) > 1:
            raise UnsupportedInputConfigurationError(
                f"Scans of multiple input paths are not supported: {raw_input!r}"
            )
        if not raw_input:
            raise MalformedResultError("The header options list no input path")
        raw_input = raw_input[0]

    if not isinstance(raw_input, str):
        raise TypeMismatchError("input", "string", json_type_name(raw_input), "header options")

    return input_prefix(raw_input)


def format_file_issue(error: str, path: str) -> str:
    return FILE_SUFFIX_FORMAT.format(error=error, path=path)


def get_issues(document: ScanDocument, scanner_name: str = DEFAULT_SCANNER_NAME) -> List[Issue]:
    """Get one ERROR issue per scan error, in file order."""
    prefix = get_input_path(document)
    issues: List[Issue] = []

    for file_entry in document.files():
        path = strip_input_prefix(require_str(file_entry, "path", "file entry"), prefix)
        context = f"scan errors of {path}"

        for index, error in enumerate(optional_list(file_entry, "scan_errors", context)):
            if not isinstance(error, str):
                raise TypeMismatchError(
                    f"scan_errors[{index}]", "string", json_type_name(error), context
                )
            issue = Issue(source=scanner_name, message=format_file_issue(error, path))
            logger.debug("%s: %s", scanner_name, issue.message)
            issues.append(issue)

    return issues


__all__ = ["get_input_path", "format_file_issue", "get_issues", "FILE_SUFFIX_FORMAT"]
