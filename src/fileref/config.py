"""FileRefConfig: base-URL configuration for network references."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

BASE_MEDIA_URL_ENV = "FILEREF_BASE_MEDIA_URL"



class _Unset:
    """Marker for keywords omitted from :func:`configure`."""


_UNSET = _Unset()


@dataclass(frozen=True, slots=True)
class FileRefConfig:
    """Settings consulted when resolving relative network URLs.

    ``base_media_url`` is prepended verbatim to URLs that do not already
    start with ``http``; no slash is inserted between the two.
    """

    base_media_url: str | None = None

    def __post_init__(self) -> None:
        """Validate the base URL type."""
        if self.base_media_url is not None and not isinstance(self.base_media_url, str):
            msg = "FileRefConfig.base_media_url must be a string or None."
            raise TypeError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FileRefConfig:
        """Build a config from ``FILEREF_BASE_MEDIA_URL`` (blank means unset)."""
        source = os.environ if environ is None else environ
        raw = source.get(BASE_MEDIA_URL_ENV, "").strip()
        return cls(base_media_url=raw or None)


_lock = threading.Lock()
_current = FileRefConfig()


def get_config() -> FileRefConfig:
    """Return the process-wide default config."""
    return _current


def configure(*, base_media_url: str | None | _Unset = _UNSET) -> FileRefConfig:
    """Replace the process-wide default config and return the new value.

    Omitted keywords keep their current value; pass ``None`` to clear.
    """
    global _current  # noqa: PLW0603
    with _lock:
        updated = _current
        if not isinstance(base_media_url, _Unset):
            updated = replace(updated, base_media_url=base_media_url)
        _current = updated
    logger.debug("fileref config updated: base_media_url=%r", updated.base_media_url)
    return updated


def reset_config() -> None:
    """Restore the process-wide default config to its initial state."""
    global _current  # noqa: PLW0603
    with _lock:
        _current = FileRefConfig()


def resolve_url(url: str, config: FileRefConfig) -> str:
    """Prefix a relative URL with the configured base media URL."""
    if url.startswith("http") or config.base_media_url is None:
        return url
    return config.base_media_url + url
