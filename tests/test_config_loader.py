"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scansummary.config import ScanCodeConfig, load_config


def test_defaults() -> None:
    config = load_config(None)

    assert config.scanner_name == "ScanCode"
    assert config.timeout == 300
    assert config.max_supported_output_format_major_version == 2
    assert config.parse_expressions is True


def test_load_from_dict_with_section() -> None:
    config = load_config({"scancode": {"timeout": 120}})

    assert config.timeout == 120


def test_load_toml_file(tmp_path: Path) -> None:
    config_file = tmp_path / "scansummary.toml"
    config_file.write_text(
        '[scancode]\nscanner_name = "ScanCodeLegacy"\nparse_expressions = false\n',
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.scanner_name == "ScanCodeLegacy"
    assert config.parse_expressions is False


def test_load_json_file_path_string(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text('{"timeout": 600}', encoding="utf-8")

    assert load_config(str(config_file)).timeout == 600


def test_load_inline_strings() -> None:
    assert load_config('{"timeout": 42}').timeout == 42
    assert load_config("timeout = 43\n").timeout == 43


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        load_config({"timeout": 0})
    with pytest.raises(ValidationError):
        load_config({"scanner_name": "Scan Code"})
    with pytest.raises(ValidationError):
        load_config({"unknown_option": True})


def test_non_mapping_top_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        load_config("[1, 2, 3]")


def test_unsupported_source_type() -> None:
    with pytest.raises(TypeError):
        load_config(42)  # type: ignore[arg-type]


def test_config_round_trips_through_dict() -> None:
    config = ScanCodeConfig(timeout=10)

    assert ScanCodeConfig.from_dict(config.to_dict()) == config


def test_file_without_suffix_is_sniffed(tmp_path: Path) -> None:
    """Files without a known suffix are parsed by their content."""
    json_file = tmp_path / "settings"
    json_file.write_text('{"scancode": {"timeout": 7}}', encoding="utf-8")
    toml_file = tmp_path / "settings.cfg"
    toml_file.write_text("[scancode]\ntimeout = 8\n", encoding="utf-8")

    assert load_config(json_file).timeout == 7
    assert load_config(toml_file).timeout == 8


def test_missing_file_path_is_read_as_inline_toml() -> None:
    """A single-line string that names no file is parsed as TOML text."""
    assert load_config("timeout = 9").timeout == 9


def test_inline_toml_table_is_not_json() -> None:
    assert load_config("[scancode]\ntimeout = 11\n").timeout == 11
