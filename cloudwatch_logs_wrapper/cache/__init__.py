"""
Local content cache for fully retrieved log streams.

- ContentCache: get-or-fetch logic keyed by sanitized (group, stream)
- CacheStore: narrow read/write storage interface
- FileCacheStore / MemoryCacheStore: storage implementations
"""

from .content_cache import (
    ContentCache,
    cache_key_for,
    deserialize_events,
    serialize_events,
)
from .store import CacheStore, FileCacheStore, MemoryCacheStore

__all__ = [
    "ContentCache",
    "cache_key_for",
    "serialize_events",
    "deserialize_events",
    "CacheStore",
    "FileCacheStore",
    "MemoryCacheStore",
]
