"""Cache module initialization."""

from app.cache.query_cache import QueryCache, build_cache_key

__all__ = ["QueryCache", "build_cache_key"]
