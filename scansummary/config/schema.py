"""Configuration schema definitions using Pydantic for validation.

This module provides the strongly-typed configuration for ScanCode result
processing. Using Pydantic ensures configuration errors are caught early
with clear error messages.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

DEFAULT_SCANNER_NAME = "ScanCode"
DEFAULT_TIMEOUT = 300
MAX_SUPPORTED_OUTPUT_FORMAT_MAJOR_VERSION = 2


class ScanCodeConfig(BaseModel):
    """Configuration for turning raw ScanCode results into summaries.

    Attributes:
        scanner_name: Source name of produced issues; its lower-case form is
            the namespace of LicenseRef fallback identifiers.
        timeout: Per-file timeout (seconds) ScanCode was run with. Only timeout
            errors reporting exactly this value are classified as timeouts.
        max_supported_output_format_major_version: Highest output format
            major version known to parse correctly.
        parse_expressions: Prefer the license expressions of matched rules
            over bare license keys.
    """

    scanner_name: str = DEFAULT_SCANNER_NAME
    timeout: int = Field(default=DEFAULT_TIMEOUT, ge=1)
    max_supported_output_format_major_version: int = Field(
        default=MAX_SUPPORTED_OUTPUT_FORMAT_MAJOR_VERSION, ge=1
    )
    parse_expressions: bool = True

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("scanner_name")
    @classmethod
    def validate_scanner_name(cls, v: str) -> str:
        """Validate that the scanner name can form a LicenseRef namespace."""
        if not v or not v.strip():
            raise ValueError("scanner_name must not be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"scanner_name must not contain whitespace: {v!r}")
        return v

    @classmethod
    def default(cls) -> "ScanCodeConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanCodeConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            ScanCodeConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
