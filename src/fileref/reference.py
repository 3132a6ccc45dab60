"""FileReference: immutable description of a file from one of four origins."""

from __future__ import annotations

import asyncio
import logging
import os
import posixpath
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from fileref.config import FileRefConfig, get_config, resolve_url
from fileref.errors import InvalidFileMapError, MalformedUrlError
from fileref.hashing import content_hash, metadata_hash, name_hash, url_cache_key
from fileref.media import MediaType, bytes_to_mb, classify_media_type, format_size, guess_mime_type
from fileref.origins import AssetPath, ByteContent, LocalPath, NetworkUrl, Origin
from fileref.serde import as_str_object_dict, decode_bytes, encode_bytes, optional_int, optional_string

logger = logging.getLogger(__name__)

_ORIGIN_TYPES = (LocalPath, ByteContent, NetworkUrl, AssetPath)
_ORIGIN_KEYS = ("filePath", "bytes", "networkUrl", "assetsPath")


def _last_segment(path: str) -> str:
    return posixpath.basename(path.rstrip("/"))


def _url_file_name(url: str) -> str:
    """Return the final path segment of a URL, ignoring query and fragment."""
    try:
        path = urlsplit(url).path
    except ValueError as exc:
        raise MalformedUrlError(url) from exc
    name = _last_segment(path) or _last_segment(url)
    if not name:
        raise MalformedUrlError(url)
    return name


@dataclass(frozen=True, slots=True)
class FileReference:
    """A file described by exactly one origin plus its derived metadata.

    Build instances with :meth:`from_path`, :meth:`from_bytes`,
    :meth:`from_url`, :meth:`from_asset` or :meth:`from_dict`.

    ``file_hash`` depends on the origin: a SHA-256 digest for byte buffers,
    a size/mtime/extension fingerprint for local files, and the file stem
    for URLs and assets. See :mod:`fileref.hashing`.
    """

    name: str
    origin: Origin
    file_hash: str
    file_size: int = 0
    mime_type: str | None = None

    def __post_init__(self) -> None:
        """Validate fields and sniff ``mime_type`` from ``name`` when absent."""
        if not isinstance(self.name, str) or not self.name:
            msg = "FileReference.name must be a non-empty string."
            raise ValueError(msg)
        if not isinstance(self.origin, _ORIGIN_TYPES):
            msg = "FileReference.origin must be LocalPath, ByteContent, NetworkUrl or AssetPath."
            raise TypeError(msg)
        if not isinstance(self.file_hash, str):
            msg = "FileReference.file_hash must be a string."
            raise TypeError(msg)
        if not isinstance(self.file_size, int) or isinstance(self.file_size, bool):
            msg = "FileReference.file_size must be an int."
            raise TypeError(msg)
        if self.file_size < 0:
            msg = "FileReference.file_size must be >= 0."
            raise ValueError(msg)
        if not self.mime_type:
            object.__setattr__(self, "mime_type", guess_mime_type(self.name))

    # ---- construction ----

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> FileReference:
        """Describe a local file, reading its size and modification time.

        Raise ``OSError`` when the file is missing, unreadable or a directory.
        """
        file_path = Path(path)
        with file_path.open("rb") as handle:
            stat_result = os.fstat(handle.fileno())
        name = file_path.name
        logger.debug("stat %s: size=%d mtime_ns=%d", file_path, stat_result.st_size, stat_result.st_mtime_ns)
        return cls(
            name=name,
            origin=LocalPath(os.fspath(path)),
            file_hash=metadata_hash(stat_result, os.path.splitext(name)[1]),
            file_size=stat_result.st_size,
        )

    @classmethod
    def from_bytes(cls, name: str, data: bytes, *, mime_type: str | None = None) -> FileReference:
        """Describe an in-memory buffer; ``file_hash`` is its SHA-256 digest."""
        origin = ByteContent(data)
        return cls(
            name=name,
            origin=origin,
            file_hash=content_hash(origin.data),
            file_size=len(origin.data),
            mime_type=mime_type,
        )

    @classmethod
    def from_url(cls, url: str, file_size: int = 0, *, mime_type: str | None = None) -> FileReference:
        """Describe a remote file by URL (absolute or relative to the base media URL)."""
        origin = NetworkUrl(url)
        name = _url_file_name(origin.url)
        return cls(
            name=name,
            origin=origin,
            file_hash=name_hash(name),
            file_size=file_size,
            mime_type=mime_type,
        )

    @classmethod
    def from_asset(cls, asset_path: str, file_size: int = 0, *, mime_type: str | None = None) -> FileReference:
        """Describe a file bundled with the application."""
        origin = AssetPath(asset_path)
        name = _last_segment(origin.path)
        return cls(
            name=name,
            origin=origin,
            file_hash=name_hash(name),
            file_size=file_size,
            mime_type=mime_type,
        )

    # ---- origin accessors ----

    @property
    def local_path(self) -> str | None:
        """Return the local filesystem path, if this is a path reference."""
        return self.origin.path if isinstance(self.origin, LocalPath) else None

    @property
    def network_url(self) -> str | None:
        """Return the raw (unresolved) network URL, if any."""
        return self.origin.url if isinstance(self.origin, NetworkUrl) else None

    @property
    def asset_path(self) -> str | None:
        """Return the bundled asset path, if any."""
        return self.origin.path if isinstance(self.origin, AssetPath) else None

    @property
    def is_from_path(self) -> bool:
        return isinstance(self.origin, LocalPath)

    @property
    def is_from_bytes(self) -> bool:
        return isinstance(self.origin, ByteContent)

    @property
    def is_from_url(self) -> bool:
        return isinstance(self.origin, NetworkUrl)

    @property
    def is_from_assets(self) -> bool:
        return isinstance(self.origin, AssetPath)

    @property
    def is_not_url(self) -> bool:
        """Return whether the content is available locally (bytes or path)."""
        return self.is_from_bytes or self.is_from_path

    # ---- derived metadata ----

    @property
    def extension(self) -> str:
        """Return the name's extension including the dot, or ``""``."""
        return os.path.splitext(self.name)[1]

    @property
    def media_type(self) -> MediaType:
        return classify_media_type(self.mime_type)

    @property
    def is_content_image(self) -> bool:
        return self.media_type is MediaType.IMAGE

    @property
    def is_content_video(self) -> bool:
        return self.media_type is MediaType.VIDEO

    @property
    def is_content_file(self) -> bool:
        return self.media_type is MediaType.FILE

    @property
    def readable_size(self) -> str:
        """Return ``file_size`` as a human-scaled string, e.g. ``"2 KB"``."""
        return format_size(self.file_size)

    @property
    def size_in_mb(self) -> float:
        return bytes_to_mb(self.file_size)

    def resolve_network_url(self, config: FileRefConfig | None = None) -> str | None:
        """Resolve the network URL against ``config`` (default: the process config)."""
        if not isinstance(self.origin, NetworkUrl):
            return None
        return resolve_url(self.origin.url, config if config is not None else get_config())

    @property
    def full_network_url(self) -> str | None:
        """Return the network URL resolved against the process-wide config."""
        return self.resolve_network_url()

    def cache_key_for(self, config: FileRefConfig | None = None) -> str:
        """Return a cache key; URL references ignore query string and fragment."""
        url = self.resolve_network_url(config)
        if url is None:
            return self.name
        return url_cache_key(url)

    @property
    def cache_key(self) -> str:
        return self.cache_key_for()

    # ---- content ----

    def get_bytes(self) -> bytes:
        """Return the file content.

        Byte references return their buffer. Path references read the file
        from disk on every call, so callers reading repeatedly should keep the
        result. URL and asset references return ``b""``.
        """
        if isinstance(self.origin, ByteContent):
            return self.origin.data
        if isinstance(self.origin, LocalPath):
            logger.debug("reading %s from disk", self.origin.path)
            return Path(self.origin.path).read_bytes()
        return b""

    async def aget_bytes(self) -> bytes:
        """Async variant of :meth:`get_bytes` that reads in a worker thread."""
        return await asyncio.to_thread(self.get_bytes)

    @property
    def bytes(self) -> bytes | None:
        """Return the in-memory buffer, if this is a byte reference."""
        return self.origin.data if isinstance(self.origin, ByteContent) else None

    # ---- serialization ----

    def to_dict(self) -> dict[str, object]:
        """Serialize to the wire mapping; byte content is Base64-encoded."""
        return {
            "name": self.name,
            "networkUrl": self.network_url,
            "filePath": self.local_path,
            "assetsPath": self.asset_path,
            "bytes": encode_bytes(self.bytes),
            "mimeType": self.mime_type,
            "fileSize": self.file_size,
            "fileHash": self.file_hash,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object]) -> FileReference:
        """Deserialize from the wire mapping produced by :meth:`to_dict`.

        Accept the legacy ``url`` key when ``networkUrl`` is absent and derive
        ``fileHash`` from ``name`` when it is missing. The filesystem is never
        touched.

        Empty strings count as absent for ``filePath``, ``networkUrl`` and
        ``assetsPath``. An empty ``bytes`` value is an empty buffer, and is
        only taken as the origin when no other origin key is set.
        """
        payload = as_str_object_dict(value, field_name="FileReference")

        name = optional_string(payload.get("name"), field_name="FileReference.name")
        if name is None:
            reason = "name is required"
            raise InvalidFileMapError(reason, payload)

        file_path = optional_string(payload.get("filePath"), field_name="FileReference.filePath")
        network_url = optional_string(payload.get("networkUrl"), field_name="FileReference.networkUrl")
        if network_url is None:
            network_url = optional_string(payload.get("url"), field_name="FileReference.url")
            if network_url is not None:
                logger.debug("using legacy 'url' key for %r", name)
        assets_path = optional_string(payload.get("assetsPath"), field_name="FileReference.assetsPath")
        try:
            data = decode_bytes(payload.get("bytes"), field_name="FileReference.bytes")
        except ValueError as exc:
            reason = "bytes is not valid Base64"
            raise InvalidFileMapError(reason, payload) from exc

        origins: list[Origin] = []
        if file_path is not None:
            origins.append(LocalPath(file_path))
        if network_url is not None:
            origins.append(NetworkUrl(network_url))
        if assets_path is not None:
            origins.append(AssetPath(assets_path))
        if data is not None and (data or not origins):
            origins.append(ByteContent(data))

        if not origins:
            reason = f"one of {', '.join(_ORIGIN_KEYS)} is required"
            raise InvalidFileMapError(reason, payload)
        if len(origins) > 1:
            reason = f"only one of {', '.join(_ORIGIN_KEYS)} may be set"
            raise InvalidFileMapError(reason, payload)

        file_hash = optional_string(payload.get("fileHash"), field_name="FileReference.fileHash")
        if file_hash is None:
            file_hash = name_hash(name)
            logger.debug("fileHash missing for %r, derived %r from name", name, file_hash)

        file_size = optional_int(payload.get("fileSize"), field_name="FileReference.fileSize")
        return cls(
            name=name,
            origin=origins[0],
            file_hash=file_hash,
            file_size=file_size or 0,
            mime_type=optional_string(payload.get("mimeType"), field_name="FileReference.mimeType"),
        )
