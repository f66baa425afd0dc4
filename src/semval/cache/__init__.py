"""Key-scoped caching: key generation, backing stores, handlers and the
singleton handler registry."""
from __future__ import annotations

from semval.cache.handler import CacheHandler
from semval.cache.keys import CacheIdGenerator, generate
from semval.cache.registry import CacheRegistry
from semval.cache.stores import STORE_TYPES, CacheStore, HashStore, RedisStore, build_store

__all__ = [
    "CacheHandler",
    "CacheIdGenerator",
    "CacheRegistry",
    "CacheStore",
    "HashStore",
    "RedisStore",
    "STORE_TYPES",
    "build_store",
    "generate",
]
