"""Payload codec: structured values as shell-safe lowercase hex tokens."""

from __future__ import annotations

import json
import re
from typing import Any

from errors import MalformedOutputError

_HEX_TOKEN = re.compile(r"^(?:[0-9a-f]{2})*$")


def canonical_json(value: Any) -> str:
    """Serialize value deterministically (sorted keys, no whitespace)."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def hex_encode(text: str) -> str:
    """Map each UTF-8 byte of text to two lowercase hex digits.

    The result only ever contains [0-9a-f] and is exactly twice as long as the
    UTF-8 byte length of text, whatever characters text contains.
    """
    return text.encode("utf-8").hex()


def encode_payload(value: Any) -> str:
    """Encode a JSON-compatible value as hex of its canonical JSON."""
    return hex_encode(canonical_json(value))


def decode_payload(token: str) -> Any:
    """Inverse of encode_payload.

    Raises:
        MalformedOutputError: If the token is not lowercase hex pairs or not JSON
    """
    if not _HEX_TOKEN.match(token):
        raise MalformedOutputError("Payload is not a lowercase hex token")
    try:
        return json.loads(bytes.fromhex(token).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedOutputError(f"Payload does not decode to JSON: {e}") from e
