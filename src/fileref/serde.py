"""Validation and encoding helpers for FileReference to_dict / from_dict."""

import base64
import binascii
from collections.abc import Mapping


def as_str_object_dict(value: object, *, field_name: str) -> dict[str, object]:
    """Validate and normalize a mapping value into ``dict[str, object]``."""
    if not isinstance(value, Mapping):
        msg = f"{field_name} must be a mapping."
        raise TypeError(msg)
    return {str(key): item for key, item in value.items()}


def optional_string(value: object, *, field_name: str) -> str | None:
    """Validate an optional string field, treating ``""`` as absent."""
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{field_name} must be a string or None."
        raise TypeError(msg)
    return value or None


def optional_int(value: object, *, field_name: str) -> int | None:
    """Validate an optional integer field (rejects booleans)."""
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{field_name} must be an int or None."
        raise TypeError(msg)
    return value


def encode_bytes(data: bytes | None) -> str | None:
    """Encode a byte payload as a Base64 string."""
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def decode_bytes(value: object, *, field_name: str) -> bytes | None:
    """Decode a Base64 string (or a legacy list of byte values) into bytes.

    Raise ``ValueError`` for undecodable Base64 and ``TypeError`` for other
    value types.
    """
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            msg = f"{field_name} is not valid Base64."
            raise ValueError(msg) from exc
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, int) and not isinstance(item, bool) and 0 <= item < 256 for item in value):
            msg = f"{field_name} items must be integers in range(256)."
            raise TypeError(msg)
        return bytes(value)
    msg = f"{field_name} must be a Base64 string, a list of byte values, or None."
    raise TypeError(msg)
