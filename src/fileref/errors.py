"""Typed errors for fileref."""

from collections.abc import Mapping


class FileRefError(Exception):
    """Base exception for all fileref errors."""


class InvalidFileMapError(FileRefError, ValueError):
    """Raised when a mapping cannot be deserialized into a FileReference."""

    def __init__(self, reason: str, payload: Mapping[str, object]) -> None:
        """Initialize with the failure reason and the offending mapping."""
        self.reason = reason
        self.payload = dict(payload)
        super().__init__(f"FileReference.from_dict: {reason}. Keys: {sorted(map(str, self.payload))}")


class MalformedUrlError(FileRefError, ValueError):
    """Raised when a network URL cannot be parsed."""

    def __init__(self, url: str) -> None:
        """Initialize with the URL that failed to parse."""
        self.url = url
        super().__init__(f"Malformed URL: {url!r}")
