"""SPDX identifier and license expression utilities."""

from scansummary.spdx.exceptions import associate_licenses_with_exceptions
from scansummary.spdx.expression import (
    Compound,
    Expression,
    LicenseId,
    WithException,
    map_license,
    parse_expression,
    render_expression,
)
from scansummary.spdx.identifiers import (
    LICENSE_REF_PREFIX,
    is_exception_id,
    license_ref_prefix,
    to_spdx_id,
)

__all__ = [
    "associate_licenses_with_exceptions",
    "Compound",
    "Expression",
    "LicenseId",
    "WithException",
    "map_license",
    "parse_expression",
    "render_expression",
    "LICENSE_REF_PREFIX",
    "is_exception_id",
    "license_ref_prefix",
    "to_spdx_id",
]
