"""Copyright finding extraction from ScanCode results."""

from __future__ import annotations

import logging
from typing import Set

from scansummary.document import ScanDocument, iter_objects, require_int, require_str
from scansummary.models import CopyrightFinding
from scansummary.scancode.licenses import make_location
from scansummary.scancode.version import copyright_key_name, parse_output_format_version

logger = logging.getLogger("scansummary.scancode.copyrights")


def get_copyright_findings(document: ScanDocument) -> Set[CopyrightFinding]:
    """Get one finding per copyright detection of all file entries.

    Output format 2.0.0 renamed the statement field from ``value`` to
    ``copyright``; the declared version decides which one is read.
    """
    key_name = copyright_key_name(parse_output_format_version(document))
    findings: Set[CopyrightFinding] = set()

    for file_entry in document.files():
        path = require_str(file_entry, "path", "file entry")
        context = f"copyrights of {path}"

        for copyright in iter_objects(file_entry, "copyrights", context):
            findings.add(
                CopyrightFinding(
                    statement=require_str(copyright, key_name, context),
                    location=make_location(
                        path,
                        require_int(copyright, "start_line", context),
                        require_int(copyright, "end_line", context),
                    ),
                )
            )

    logger.debug("Extracted %d copyright finding(s) using key %r", len(findings), key_name)
    return findings


__all__ = ["get_copyright_findings"]
