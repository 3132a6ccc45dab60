"""Origin variants: where a FileReference's content comes from."""

from dataclasses import dataclass
from typing import TypeAlias


def _require_non_empty(value: object, *, field_name: str) -> None:
    if not isinstance(value, str):
        msg = f"{field_name} must be a string."
        raise TypeError(msg)
    if not value:
        msg = f"{field_name} cannot be empty."
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LocalPath:
    """A file on the local filesystem."""

    path: str

    def __post_init__(self) -> None:
        """Validate the path."""
        _require_non_empty(self.path, field_name="LocalPath.path")


@dataclass(frozen=True, slots=True)
class ByteContent:
    """An in-memory byte buffer."""

    data: bytes

    def __post_init__(self) -> None:
        """Normalize bytes-like input into immutable ``bytes``."""
        if isinstance(self.data, bytes):
            return
        if isinstance(self.data, (bytearray, memoryview)):
            object.__setattr__(self, "data", bytes(self.data))
            return
        if isinstance(self.data, (list, tuple)):
            try:
                object.__setattr__(self, "data", bytes(self.data))
            except (TypeError, ValueError) as exc:
                msg = "ByteContent.data items must be integers in range(256)."
                raise TypeError(msg) from exc
            return
        msg = "ByteContent.data must be bytes-like."
        raise TypeError(msg)

    def __repr__(self) -> str:
        """Summarize the payload without dumping it."""
        return f"ByteContent(<{len(self.data)} bytes>)"


@dataclass(frozen=True, slots=True)
class NetworkUrl:
    """A remote file, absolute or relative to the configured base media URL."""

    url: str

    def __post_init__(self) -> None:
        """Validate the URL string."""
        _require_non_empty(self.url, field_name="NetworkUrl.url")


@dataclass(frozen=True, slots=True)
class AssetPath:
    """A file bundled with the application."""

    path: str

    def __post_init__(self) -> None:
        """Validate the asset path."""
        _require_non_empty(self.path, field_name="AssetPath.path")


Origin: TypeAlias = LocalPath | ByteContent | NetworkUrl | AssetPath
