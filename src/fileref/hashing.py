"""Identity hashes and cache keys for file references.

Three derivations coexist and are kept deliberately distinct:

- byte buffers get a SHA-256 content digest;
- local files get a ``"{size}-{mtime_ms}-{ext}"`` metadata fingerprint, which
  changes on every modification but collides for same-size files touched at
  the same millisecond;
- URLs and assets get their file stem with spaces replaced by hyphens.
"""

import hashlib
import os
from urllib.parse import urlsplit

from fileref.errors import MalformedUrlError


def content_hash(data: bytes) -> str:
    """Return the SHA-256 hex digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def metadata_hash(stat_result: os.stat_result, extension: str) -> str:
    """Build the size/mtime/extension fingerprint used for local files."""
    mtime_ms = stat_result.st_mtime_ns // 1_000_000
    return f"{stat_result.st_size}-{mtime_ms}-{extension}"


def name_hash(name: str) -> str:
    """Derive a pseudo-hash from a file name: stem with spaces as hyphens."""
    stem, _ = os.path.splitext(name)
    return stem.replace(" ", "-")


def normalize_url(url: str) -> str:
    """Reduce a URL to ``scheme://host/path``, dropping query and fragment."""
    try:
        parts = urlsplit(url)
        host = parts.hostname or ""
    except ValueError as exc:
        raise MalformedUrlError(url) from exc
    return f"{parts.scheme.lower()}://{host}{parts.path}"


def url_cache_key(url: str) -> str:
    """Return a stable cache key for a URL that ignores query strings."""
    return hashlib.sha256(normalize_url(url).encode("utf-8")).hexdigest()
