"""
Time-boxed read-through cache for repository lookups.

Entries are keyed by operation name plus arguments and served only while
younger than the configured TTL. Nothing is invalidated on write unless
the owner calls ``delete`` or ``clear`` itself.
"""

import time
from typing import Any, Callable, Dict, Optional

import structlog
from cachetools import TTLCache  # type: ignore[import-untyped]

logger = structlog.get_logger(__name__)


def build_cache_key(operation: str, *args: Any) -> str:
    """
    Build a cache key from an operation name and its arguments.

    Example:
        build_cache_key("get_by_user_id", "u1") -> "get_by_user_id:u1"
    """
    return ":".join([operation, *(str(arg) for arg in args)])


class QueryCache:
    """
    In-memory TTL cache for query results.

    Attributes:
        ttl_seconds: Age after which an entry is treated as a miss
        max_size: Maximum number of entries before LRU eviction
        hits: Number of cache hits
        misses: Number of cache misses
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_size: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize cache.

        Args:
            ttl_seconds: Time-to-live in seconds (default: 5 minutes)
            max_size: Maximum number of entries
            timer: Clock used to age entries
        """
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl_seconds, timer=timer)

        self.hits = 0
        self.misses = 0

        logger.debug("Initialized QueryCache", ttl_seconds=ttl_seconds, max_size=max_size)

    def get(self, key: str) -> Optional[Any]:
        """
        Get a cached value.

        Returns:
            Cached value, or None if absent or expired
        """
        value = self._cache.get(key)
        if value is None:
            self.misses += 1
            logger.debug("Cache MISS", key=key)
            return None

        self.hits += 1
        logger.debug("Cache HIT", key=key)
        return value

    def set(self, key: str, value: Any) -> Any:
        """Store a value and return it unchanged."""
        self._cache[key] = value
        return value

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def delete(self, key: str) -> bool:
        """
        Delete an entry.

        Returns:
            True if an entry was removed, False if it was not cached
        """
        if self._cache.pop(key, None) is None:
            return False
        logger.debug("Cache entry invalidated", key=key)
        return True

    def clear(self) -> None:
        """Clear all entries."""
        count = len(self._cache)
        self._cache.clear()
        logger.debug("Cache cleared", count=count)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with size, hit and miss counts and hit rate
        """
        total = self.hits + self.misses
        hit_rate = (self.hits / total * 100) if total > 0 else 0.0

        return {
            "size": len(self._cache),
            "max_size": self.max_size,
            "ttl_seconds": self.ttl_seconds,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate_percent": round(hit_rate, 2),
        }
