"""Explicit schema checks for JSON and text produced by remote commands.

Every reader raises MalformedOutputError instead of letting a KeyError,
TypeError or json.JSONDecodeError escape, so read operations can absorb one
exception type.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from errors import MalformedOutputError

_MISSING = object()


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse text as a JSON object.

    Raises:
        MalformedOutputError: If text is not valid JSON or not an object
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError) as e:
        raise MalformedOutputError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedOutputError(f"Expected JSON object, got {type(data).__name__}")
    return data


def parse_json_array(text: str) -> list[Any]:
    """Parse text as a JSON array.

    Raises:
        MalformedOutputError: If text is not valid JSON or not an array
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError) as e:
        raise MalformedOutputError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise MalformedOutputError(f"Expected JSON array, got {type(data).__name__}")
    return data


def _get(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        if default is _MISSING:
            raise MalformedOutputError(f"Missing required field '{key}'")
        return default
    return value


def read_str(data: Mapping[str, Any], key: str, default: Any = _MISSING, nullable: bool = False) -> Any:
    """Read a string field."""
    value = _get(data, key, default)
    if value is None and (nullable or default is None):
        return None
    if not isinstance(value, str):
        raise MalformedOutputError(f"Field '{key}' must be a string")
    return value


def read_bool(data: Mapping[str, Any], key: str, default: Any = _MISSING, nullable: bool = False) -> Any:
    """Read a boolean field."""
    value = _get(data, key, default)
    if value is None and (nullable or default is None):
        return None
    if not isinstance(value, bool):
        raise MalformedOutputError(f"Field '{key}' must be a boolean")
    return value


def read_int(data: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    """Read an integer field (booleans are rejected)."""
    value = _get(data, key, default)
    if value is None and default is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedOutputError(f"Field '{key}' must be an integer")
    return value


def read_str_list(data: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    """Read a list-of-strings field. Returns a fresh list."""
    value = _get(data, key, default)
    if value is None and default is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedOutputError(f"Field '{key}' must be a list of strings")
    return list(value)


def read_object(data: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    """Read a nested JSON object field."""
    value = _get(data, key, default)
    if value is None and default is None:
        return None
    if not isinstance(value, dict):
        raise MalformedOutputError(f"Field '{key}' must be an object")
    return value
