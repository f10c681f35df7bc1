"""
Object utilities for JSON serialization and identifier generation.

Provides the JSON encoders shared by local storage (readable form) and the
share-link transport (compact form), plus short random identifiers for
saved seller and buyer profiles.
"""

import json
import secrets
import string
import time
from dataclasses import asdict, is_dataclass
from typing import Any

_BASE36 = string.digits + string.ascii_lowercase


def to_json(obj: Any, indent: int | None = None, compact: bool = False) -> str:
    """
    Serialize an object to JSON string.

    Handles dataclasses and objects exposing to_dict() by converting them
    to dictionaries first. Non-ASCII text is written as-is, matching what a
    browser's JSON.stringify produces.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.
        compact: Drop the whitespace after separators.

    Returns:
        JSON string representation.
    """
    separators = (",", ":") if compact else None
    return json.dumps(
        _default_serializer(obj),
        default=_json_default,
        ensure_ascii=False,
        indent=indent,
        separators=separators,
    )


def from_json(text: str) -> Any:
    """Parse a JSON string."""
    return json.loads(text)


def generate_id() -> str:
    """
    Return a short, mostly time-ordered identifier.

    The identifier is the current time in milliseconds in base 36 followed
    by seven random base 36 characters.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(7))
    return _to_base36(millis) + suffix


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Args:
        obj: Object to serialize.

    Returns:
        JSON-serializable representation.
    """
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def _json_default(obj: Any) -> Any:
    """Fallback hook for nested objects json cannot encode natively."""
    if hasattr(obj, "to_dict") or (is_dataclass(obj) and not isinstance(obj, type)):
        return _default_serializer(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
