"""Media classification and size formatting helpers."""

import mimetypes
from enum import Enum

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
_BYTES_PER_MB = 1024 * 1024


class MediaType(Enum):
    """Coarse content category derived from a MIME type."""

    FILE = "file"
    IMAGE = "image"
    VIDEO = "video"


def guess_mime_type(name: str) -> str | None:
    """Sniff a MIME type from a file name's extension."""
    mime_type, _ = mimetypes.guess_type(name, strict=False)
    return mime_type


def classify_media_type(mime_type: str | None) -> MediaType:
    """Map a MIME string's primary component onto a MediaType."""
    if not mime_type:
        return MediaType.FILE
    major = mime_type.split("/", 1)[0].strip().lower()
    if major == "video":
        return MediaType.VIDEO
    if major == "image":
        return MediaType.IMAGE
    return MediaType.FILE


def format_size(size: int) -> str:
    """Format a byte count as a human-scaled string such as ``"1.5 KB"``.

    Values are divided by 1024 until below 1024 (or the largest unit is
    reached), then rounded to two decimals with trailing zeros removed.
    """
    if size < 0:
        msg = "size must be >= 0."
        raise ValueError(msg)
    if size < 1024:
        return f"{size} B"

    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[unit_index]}"


def bytes_to_mb(size: int) -> float:
    """Convert a byte count to mebibytes without rounding."""
    return size / _BYTES_PER_MB
