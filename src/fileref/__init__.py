"""fileref: one value type for files from paths, bytes, URLs and assets."""

import importlib.metadata as importlib_metadata

from fileref.config import FileRefConfig, configure, get_config, reset_config
from fileref.errors import FileRefError, InvalidFileMapError, MalformedUrlError
from fileref.media import MediaType, format_size
from fileref.origins import AssetPath, ByteContent, LocalPath, NetworkUrl, Origin
from fileref.reference import FileReference


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("fileref")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "AssetPath",
    "ByteContent",
    "FileRefConfig",
    "FileRefError",
    "FileReference",
    "InvalidFileMapError",
    "LocalPath",
    "MalformedUrlError",
    "MediaType",
    "NetworkUrl",
    "Origin",
    "configure",
    "format_size",
    "get_config",
    "reset_config",
]
