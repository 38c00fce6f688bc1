"""Output format version checks for ScanCode results.

ScanCode declares the version of its JSON output format in the header since
the 3.x releases; older results carry no version and are not checked.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from packaging.version import InvalidVersion, Version

from scansummary.config.schema import MAX_SUPPORTED_OUTPUT_FORMAT_MAJOR_VERSION
from scansummary.document import ScanDocument
from scansummary.errors import MalformedResultError, SchemaVersionMismatch
from scansummary.models import Issue, Severity

logger = logging.getLogger("scansummary.scancode.version")

COPYRIGHT_KEY_CHANGE_VERSION = Version("2.0.0")


def parse_output_format_version(document: ScanDocument) -> Optional[Version]:
    """Return the declared output format version, if any.

    Raises:
        MalformedResultError: The declared version is not a valid version string.
    """
    raw = document.output_format_version
    if raw is None:
        return None
    try:
        return Version(raw)
    except InvalidVersion as exc:
        raise MalformedResultError(f"Invalid output_format_version {raw!r}") from exc


def ensure_supported_output_format(version: Version, max_major: int) -> None:
    """Raise if ``version`` is a breaking major bump over ``max_major``.

    Newer minor and patch versions of a supported major are API compatible.
    """
    max_supported = Version(str(max_major))
    if version > max_supported and version.major != max_supported.major:
        raise SchemaVersionMismatch(str(version), max_major)


def check_output_format_version(
    document: ScanDocument,
    scanner_name: str,
    max_major: int = MAX_SUPPORTED_OUTPUT_FORMAT_MAJOR_VERSION,
) -> List[Issue]:
    """Gate a result on its declared output format version.

    Processing always continues; an incompatible newer format only yields a
    WARNING issue.

    Returns:
        Zero or one issues.
    """
    version = parse_output_format_version(document)
    if version is None:
        logger.debug("No output format version declared; skipping version check")
        return []

    try:
        ensure_supported_output_format(version, max_major)
    except SchemaVersionMismatch as exc:
        logger.warning("%s: %s", scanner_name, exc)
        return [Issue(source=scanner_name, message=str(exc), severity=Severity.WARNING)]

    return []


def copyright_key_name(version: Optional[Version]) -> str:
    """Name of the field holding the statement of a copyright detection."""
    if version is None or version < COPYRIGHT_KEY_CHANGE_VERSION:
        return "value"
    return "copyright"


__all__ = [
    "parse_output_format_version",
    "ensure_supported_output_format",
    "check_output_format_version",
    "copyright_key_name",
]
