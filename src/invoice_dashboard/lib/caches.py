"""
Disk-based caching for parsed record documents.

Provides a DiskCache class that stores values on disk using the
diskcache library. Thread-safe and process-safe.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

import diskcache

T = TypeVar("T")


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
        hit: True when the value came from the cache rather than the loader.
    """

    value: Any
    hit: bool = False


class DiskCache:
    """
    Disk-based cache with optional TTL.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get_or_load(
        self,
        key: str,
        loader: Callable[[], T],
        expire: int | None = None,
    ) -> CacheEntry:
        """
        Get a value from cache or load it using the provided function.

        The loader is only called on a miss; its result is stored before
        being returned. Exceptions from the loader propagate and nothing
        is stored.

        Args:
            key: Cache key string.
            loader: Function to call on a cache miss (no arguments).
            expire: TTL in seconds. None means no expiration.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached, hit=True)

        value = loader()
        self._cache.set(key, value, expire=expire)
        return CacheEntry(value=value)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        self._cache.clear()

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
