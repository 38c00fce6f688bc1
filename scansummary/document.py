"""Typed access layer over a raw ScanCode JSON result.

The raw result is a weakly-typed tree of JSON objects, arrays and scalars.
All extractors read it through the accessors in this module so that malformed
input fails the same way everywhere: ``FieldMissingError`` for absent or null
required fields and ``TypeMismatchError`` for values of the wrong JSON type.

The wrapped tree is never mutated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Mapping, Optional, Union

from scansummary.errors import FieldMissingError, MalformedResultError, TypeMismatchError

logger = logging.getLogger("scansummary.document")


def json_type_name(value: Any) -> str:
    """Return the JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def require_field(node: Mapping[str, Any], key: str, context: str = "") -> Any:
    """Return a required, non-null field value."""
    value = node.get(key)
    if value is None:
        raise FieldMissingError(key, context)
    return value


def require_str(node: Mapping[str, Any], key: str, context: str = "") -> str:
    value = require_field(node, key, context)
    if not isinstance(value, str):
        raise TypeMismatchError(key, "string", json_type_name(value), context)
    return value


def optional_str(node: Mapping[str, Any], key: str, context: str = "") -> Optional[str]:
    """Return a string field, or None when it is absent or null."""
    value = node.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeMismatchError(key, "string", json_type_name(value), context)
    return value


def require_int(node: Mapping[str, Any], key: str, context: str = "") -> int:
    value = require_field(node, key, context)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(key, "integer", json_type_name(value), context)
    return value


def require_number(node: Mapping[str, Any], key: str, context: str = "") -> float:
    value = require_field(node, key, context)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatchError(key, "number", json_type_name(value), context)
    return float(value)


def require_object(node: Mapping[str, Any], key: str, context: str = "") -> Mapping[str, Any]:
    value = require_field(node, key, context)
    if not isinstance(value, Mapping):
        raise TypeMismatchError(key, "object", json_type_name(value), context)
    return value


def optional_list(node: Mapping[str, Any], key: str, context: str = "") -> List[Any]:
    """Return an array field, or an empty list when it is absent or null."""
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeMismatchError(key, "array", json_type_name(value), context)
    return value


def iter_objects(node: Mapping[str, Any], key: str, context: str = "") -> Iterator[Mapping[str, Any]]:
    """Iterate over an optional array field whose elements must be objects."""
    for index, element in enumerate(optional_list(node, key, context)):
        if not isinstance(element, Mapping):
            raise TypeMismatchError(
                f"{key}[{index}]", "object", json_type_name(element), context
            )
        yield element


class ScanDocument:
    """Read-only view of exactly one ScanCode tool run."""

    def __init__(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            raise TypeMismatchError("<root>", "object", json_type_name(data))
        self._data = data

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ScanDocument":
        """Load a result file written with ``--json`` or ``--json-pp``."""
        path = Path(path)
        logger.debug("Loading ScanCode result from %s", path)
        with path.open("r", encoding="utf-8") as handle:
            return cls(json.load(handle))

    @property
    def header(self) -> Mapping[str, Any]:
        """The single header record describing the tool run."""
        headers = optional_list(self._data, "headers", "result")
        if len(headers) != 1:
            raise MalformedResultError(
                f"Expected exactly one header in the result, found {len(headers)}"
            )
        header = headers[0]
        if not isinstance(header, Mapping):
            raise TypeMismatchError("headers[0]", "object", json_type_name(header), "result")
        return header

    @property
    def output_format_version(self) -> Optional[str]:
        return optional_str(self.header, "output_format_version", "header")

    def files(self) -> Iterator[Mapping[str, Any]]:
        """Iterate over all file entries, including directories."""
        return iter_objects(self._data, "files", "result")


__all__ = [
    "ScanDocument",
    "json_type_name",
    "require_field",
    "require_str",
    "optional_str",
    "require_int",
    "require_number",
    "require_object",
    "optional_list",
    "iter_objects",
]
