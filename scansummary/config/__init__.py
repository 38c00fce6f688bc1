"""Configuration schema and loading for scansummary."""

from .loader import load_config
from .schema import (
    DEFAULT_SCANNER_NAME,
    DEFAULT_TIMEOUT,
    MAX_SUPPORTED_OUTPUT_FORMAT_MAJOR_VERSION,
    ScanCodeConfig,
)

__all__ = [
    "DEFAULT_SCANNER_NAME",
    "DEFAULT_TIMEOUT",
    "MAX_SUPPORTED_OUTPUT_FORMAT_MAJOR_VERSION",
    "ScanCodeConfig",
    "load_config",
]
