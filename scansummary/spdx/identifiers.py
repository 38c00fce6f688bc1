"""SPDX short identifier normalization and classification."""

from __future__ import annotations

import re
from typing import FrozenSet

LICENSE_REF_PREFIX = "LicenseRef-"

_INVALID_ID_CHARS = re.compile(r"[^A-Za-z0-9.]+")
_VALID_ID = re.compile(r"^[A-Za-z0-9.]+(?:-[A-Za-z0-9.]+)*\+?$")
# "-exception" as the last word of a LicenseRef, optionally followed by a version.
_LICENSE_REF_EXCEPTION = re.compile(r"-exception(?:-[0-9][0-9.]*)?$", re.IGNORECASE)

# License exception identifiers from the SPDX exception list.
SPDX_EXCEPTION_IDS: FrozenSet[str] = frozenset(
    {
        "389-exception",
        "Asterisk-exception",
        "Autoconf-exception-2.0",
        "Autoconf-exception-3.0",
        "Autoconf-exception-generic",
        "Autoconf-exception-generic-3.0",
        "Autoconf-exception-macro",
        "Bison-exception-1.24",
        "Bison-exception-2.2",
        "Bootloader-exception",
        "Classpath-exception-2.0",
        "CLISP-exception-2.0",
        "cryptsetup-OpenSSL-exception",
        "DigiRule-FOSS-exception",
        "eCos-exception-2.0",
        "Fawkes-Runtime-exception",
        "FLTK-exception",
        "fmt-exception",
        "Font-exception-2.0",
        "freertos-exception-2.0",
        "GCC-exception-2.0",
        "GCC-exception-2.0-note",
        "GCC-exception-3.1",
        "Gmsh-exception",
        "GNAT-exception",
        "GNOME-examples-exception",
        "GNU-compiler-exception",
        "gnu-javamail-exception",
        "GPL-3.0-interface-exception",
        "GPL-3.0-linking-exception",
        "GPL-3.0-linking-source-exception",
        "GPL-CC-1.0",
        "GStreamer-exception-2005",
        "GStreamer-exception-2008",
        "i2p-gpl-java-exception",
        "KiCad-libraries-exception",
        "LGPL-3.0-linking-exception",
        "libpri-OpenH323-exception",
        "Libtool-exception",
        "Linux-syscall-note",
        "LLGPL",
        "LLVM-exception",
        "LZMA-exception",
        "mif-exception",
        "OCaml-LGPL-linking-exception",
        "OCCT-exception-1.0",
        "OpenJDK-assembly-exception-1.0",
        "openvpn-openssl-exception",
        "PS-or-PDF-font-exception-20170817",
        "QPL-1.0-INRIA-2004-exception",
        "Qt-GPL-exception-1.0",
        "Qt-LGPL-exception-1.1",
        "Qwt-exception-1.0",
        "SANE-exception",
        "SHL-2.0",
        "SHL-2.1",
        "stunnel-exception",
        "SWI-exception",
        "Swift-exception",
        "Texinfo-exception",
        "u-boot-exception-2.0",
        "UBDL-exception",
        "Universal-FOSS-exception-1.0",
        "vsftpd-openssl-exception",
        "WxWindows-exception-3.1",
        "x11vnc-openssl-exception",
    }
)

_EXCEPTION_IDS_LOWER: FrozenSet[str] = frozenset(i.lower() for i in SPDX_EXCEPTION_IDS)


def to_spdx_id(text: str, allow_plus_suffix: bool = False) -> str:
    """Normalize free text into an SPDX short identifier.

    Every run of characters outside ``[A-Za-z0-9.]`` becomes a single ``-``
    and leading or trailing dashes are dropped. A trailing ``+`` survives only
    when ``allow_plus_suffix`` is set.

    Args:
        text: Raw identifier text, e.g. a scanner license key.
        allow_plus_suffix: Keep a trailing "or later" ``+`` operator.

    Returns:
        The normalized identifier, or an empty string if nothing usable is left.
    """
    text = text.strip()
    has_plus_suffix = text.endswith("+")
    if has_plus_suffix:
        text = text[:-1]

    normalized = _INVALID_ID_CHARS.sub("-", text).strip("-")
    if not normalized:
        return ""

    if allow_plus_suffix and has_plus_suffix:
        return f"{normalized}+"
    return normalized


def is_valid_spdx_id(text: str) -> bool:
    return bool(_VALID_ID.match(text))


def license_ref_prefix(scanner_name: str) -> str:
    """Return the LicenseRef namespace for identifiers a scanner made up."""
    return f"{LICENSE_REF_PREFIX}{scanner_name.lower()}-"


def is_license_ref(identifier: str) -> bool:
    return identifier.startswith(LICENSE_REF_PREFIX)


def is_exception_id(identifier: str) -> bool:
    """Tell whether an identifier names a license exception.

    SPDX exception ids are matched case-insensitively. LicenseRefs count as
    exceptions when their name ends in ``-exception``, optionally followed by
    a version, which is how scanners publish exceptions that are missing from
    the SPDX list. ``...-with-exception-notice`` is not an exception.
    """
    if identifier.lower() in _EXCEPTION_IDS_LOWER:
        return True
    return is_license_ref(identifier) and bool(_LICENSE_REF_EXCEPTION.search(identifier))


__all__ = [
    "LICENSE_REF_PREFIX",
    "SPDX_EXCEPTION_IDS",
    "to_spdx_id",
    "is_valid_spdx_id",
    "license_ref_prefix",
    "is_license_ref",
    "is_exception_id",
]
