"""Helpers for loading ScanCode processing configuration from TOML/JSON sources.

``load_config`` accepts:

* None -> default ScanCodeConfig
* dict -> already parsed values
* Path / path-like string -> a .toml/.json file
* Inline JSON/TOML strings

Values may be given at the top level or nested under a ``scancode`` table, so
the same file can also hold settings of other tools.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from scansummary.config.schema import ScanCodeConfig

logger = logging.getLogger("scansummary.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

SECTION = "scancode"

_TOML_SUFFIXES = {".toml", ".tml"}
_TOML_TABLE_HEADER = re.compile(r"\[\s*[A-Za-z_]")


def _looks_like_json(text: str) -> bool:
    stripped = text.lstrip()
    if stripped.startswith("{"):
        return True
    # "[scancode]" opens a TOML table, "[1, 2]" a JSON array.
    return stripped.startswith("[") and not _TOML_TABLE_HEADER.match(stripped)


def _read_source(source: Union[str, Path]) -> Tuple[str, bool]:
    """Return the configuration text and whether it is JSON.

    Multi-line strings are always inline text; anything else names a file
    if one exists at that path.
    """
    if "\n" not in str(source):
        path = Path(source)
        if path.is_file():
            text = path.read_text(encoding="utf-8")
            if path.suffix.lower() in _TOML_SUFFIXES:
                is_json = False
            elif path.suffix.lower() == ".json":
                is_json = True
            else:
                is_json = _looks_like_json(text)
            logger.info("Loading configuration from file: %s", path)
            return text, is_json

    text = str(source)
    logger.info("Loading configuration from inline string")
    return text, _looks_like_json(text)


def _scancode_section(data: Any) -> Dict[str, Any]:
    """Pick the ``scancode`` table out of parsed values, if present."""
    if not isinstance(data, dict):
        raise ValueError("Top-level configuration must be a mapping/dict")
    section = data.get(SECTION)
    return section if isinstance(section, dict) else data


def load_config(source: ConfigSource) -> ScanCodeConfig:
    """Load ScanCodeConfig from various configuration sources.

    Args:
        source: None, a parsed mapping, a path to a .toml/.json file, or an
            inline TOML/JSON string (format auto-detected).

    Returns:
        ScanCodeConfig instance.

    Raises:
        ValueError: The parsed configuration is not a mapping.
        ValidationError: A value is out of range or unknown.
        TypeError: The source is of an unsupported type.
    """
    if source is None:
        logger.debug("No config source provided; using default ScanCodeConfig")
        return ScanCodeConfig.default()

    if isinstance(source, dict):
        data: Any = source
    elif isinstance(source, (str, Path)):
        text, is_json = _read_source(source)
        data = json.loads(text) if is_json else tomllib.loads(text)
    else:
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    return ScanCodeConfig.from_dict(_scancode_section(data))


__all__ = ["load_config"]
