"""
Dictionary Cache
=================

Path and optional in-memory copy of a newline-separated wordlist file.

The analyzer (weak-password list) and the generator (word source) each own
an independent :class:`DictionaryCache`. Cached content always corresponds
to the file at the currently configured path: changing the path or
disabling the cache clears it, and a read that started before a path change
never installs its content afterwards.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Optional, Union

from shared.logger import KeysmithLogger

from keysmith.core.errors import DictionaryReadError, ValidationError

logger = KeysmithLogger("dictionary")

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_CHUNK_SIZE = 4096


class DictionaryCache:
    """Wordlist location plus cache state with chainable setters.

    Usage::

        cache = DictionaryCache().set_path("rockyou.txt").set_cache_enabled(True)
        text = cache.cached_content or cache.load()

    Args:
        path: Initial dictionary path; ``None`` or ``""`` means unset.
        cache_enabled: Keep the file content in memory after the first read.
    """

    def __init__(
        self,
        path: Optional[PathLike] = None,
        cache_enabled: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._path: Optional[str] = None
        self._cache_enabled = bool(cache_enabled)
        self._content: Optional[str] = None
        if path is not None:
            self.set_path(path)

    # ------------------------------------------------------------------ #
    #  Configuration
    # ------------------------------------------------------------------ #

    @property
    def path(self) -> Optional[str]:
        """Configured dictionary path, or ``None`` when unset."""
        return self._path

    @property
    def cache_enabled(self) -> bool:
        return self._cache_enabled

    @property
    def cached_content(self) -> Optional[str]:
        """Cached file content, or ``None`` when nothing is cached."""
        return self._content

    def set_path(self, path: PathLike) -> DictionaryCache:
        """Set the dictionary path; a different path invalidates the cache.

        Raises:
            ValidationError: If *path* is not a string or path-like object.
        """
        if isinstance(path, os.PathLike):
            path = os.fspath(path)
        if not isinstance(path, str):
            raise ValidationError("Invalid dictionary path.")
        normalized = path or None
        with self._lock:
            if normalized != self._path:
                self._content = None
                self._path = normalized
        return self

    def set_cache_enabled(self, enabled: bool) -> DictionaryCache:
        """Enable or disable caching. Disabling drops cached content."""
        with self._lock:
            self._cache_enabled = enabled is True
            if not self._cache_enabled:
                self._content = None
        return self

    def invalidate(self) -> DictionaryCache:
        """Drop any cached content."""
        with self._lock:
            self._content = None
        return self

    # ------------------------------------------------------------------ #
    #  Reading
    # ------------------------------------------------------------------ #

    def load(self) -> str:
        """Read the whole dictionary, caching it when caching is enabled.

        Returns:
            The file content decoded as UTF-8.

        Raises:
            DictionaryReadError: If no path is set or the file cannot be
                read. The cache is left untouched.
        """
        path = self._path
        if path is None:
            raise DictionaryReadError("", "no dictionary path configured")

        content = read_dictionary(path)

        with self._lock:
            if (
                content
                and self._cache_enabled
                and self._path == path
            ):
                self._content = content
                logger.debug("Cached dictionary", path=path, chars=len(content))
        return content


def read_dictionary(path: str) -> str:
    """Read a dictionary file as UTF-8, wrapping failures."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryReadError(path, str(exc)) from exc
