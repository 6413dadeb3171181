# src/dictweb/core/cache.py
"""
Flat-file cache of dictionary responses.

One file per lookup key, named after the key, holding the verbatim body of
the first successful response. Entries never expire; they go away only
when removed from outside (see `dictweb cache rm`).

Writes go through a temporary file and os.replace, so a reader sees
either the old file, the new one, or none. Two writers for the same key:
last one wins.
"""

import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dictweb.logging_setup import get_logger

log = get_logger("cache")

TMP_PREFIX = ".tmp-"


class CacheStatus(Enum):
    HIT = "hit"
    MISS = "miss"
    UNREADABLE = "unreadable"
    SKIPPED = "skipped"  # caching disabled or degenerate key


@dataclass(frozen=True)
class CacheRead:
    status: CacheStatus
    data: bytes | None = None

    @property
    def hit(self) -> bool:
        return self.status is CacheStatus.HIT


def normalize_key(word: str) -> str:
    """The lookup key for a search term."""
    return word.strip()


def is_degenerate(key: str) -> bool:
    """Keys that must never become a file name under the cache root."""
    if key in ("", ".", ".."):
        return True
    if "/" in key or "\\" in key or "\x00" in key:
        return True
    return key.startswith(TMP_PREFIX)


class CacheStore:
    """Maps lookup keys to cached response bodies on disk."""

    def __init__(self, root: Path | None):
        self.root = Path(root) if root is not None else None

    @property
    def enabled(self) -> bool:
        return self.root is not None

    def path_for(self, key: str) -> Path | None:
        """File for key, or None if the key may not be cached."""
        if self.root is None or is_degenerate(key):
            return None
        path = self.root / key
        # The file has to sit directly in the root, whatever the key says.
        if path.parent != self.root or path == self.root:
            return None
        return path

    def get(self, key: str) -> CacheRead:
        path = self.path_for(key)
        if path is None:
            return CacheRead(CacheStatus.SKIPPED)
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            log.info("cache miss: %s", path)
            return CacheRead(CacheStatus.MISS)
        except OSError as e:
            log.warning("failed to read cache file %s: %s", path, e)
            return CacheRead(CacheStatus.UNREADABLE)
        log.info("cache hit: %s", path)
        return CacheRead(CacheStatus.HIT, data)

    def put(self, key: str, data: bytes) -> bool:
        """Write data for key. Returns False (and logs) on failure."""
        path = self.path_for(key)
        if path is None:
            return False
        log.info("caching: %s", key)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=self.root, prefix=TMP_PREFIX, delete=False
            ) as handle:
                tmp_path = Path(handle.name)
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except OSError as e:
            log.warning("failed to write cache %s: %s", path, e)
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            return False
        return True

    def keys(self) -> list[str]:
        if self.root is None or not self.root.is_dir():
            return []
        return sorted(
            p.name for p in self.root.iterdir()
            if p.is_file() and not p.name.startswith(TMP_PREFIX)
        )

    def delete(self, key: str) -> bool:
        path = self.path_for(key)
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        log.info("removed cache entry: %s", key)
        return True

    def clear(self) -> int:
        removed = 0
        for key in self.keys():
            if self.delete(key):
                removed += 1
        return removed
