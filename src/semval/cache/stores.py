"""Backing stores for ``CacheHandler``.

A store offers ``get``/``set``/``delete`` on string keys.  Absent or
expired entries read as ``None``.  Stores add no atomicity beyond what
the underlying storage provides.

``STORE_TYPES`` maps the ``store`` option of a configured cache to a
factory; ``build_store`` turns a cache identifier into a store, or
``None`` when the identifier is not configured.
"""
from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

import redis
from redis.exceptions import RedisError

from semval.config import Settings
from semval.errors import ConfigurationError

logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """Minimal key/value store interface."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key``, or ``None``."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store ``value`` under ``key``; ``ttl`` seconds, 0 for no expiry."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether an entry was removed."""


class HashStore(CacheStore):
    """In-process store backed by a dict.  Contents do not persist."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[Any, float | None]] = {}

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "HashStore":
        return cls()

    def get(self, key: str) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        expires_at = self._clock() + ttl if ttl > 0 else None
        self._entries[key] = (value, expires_at)
        return True

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"HashStore(entries={len(self._entries)})"


def _check_payload(value: Any, path: str = "value") -> None:
    """Reject values that would not come back unchanged from JSON."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return
    if isinstance(value, list):
        for index, element in enumerate(value):
            _check_payload(element, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, element in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{path} has a non-str key {key!r}")
            _check_payload(element, f"{path}[{key!r}]")
        return
    raise TypeError(
        f"{path} is a {type(value).__name__}; the redis store only holds "
        "JSON values (dict with str keys, list, str, int, float, bool, None)"
    )


class RedisStore(CacheStore):
    """Store backed by a Redis server.  Values are stored as JSON.

    Only JSON-compatible payloads are accepted, so that ``get`` returns
    what ``set`` was given.  Connection failures are logged and reported
    as cache misses.
    """

    def __init__(self, client: "redis.Redis") -> None:
        self._client = client

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "RedisStore":
        url = options.get("url", "redis://localhost:6379/0")
        return cls(redis.Redis.from_url(url, decode_responses=True))

    @property
    def client(self) -> "redis.Redis":
        return self._client

    def get(self, key: str) -> Any:
        try:
            payload = self._client.get(key)
        except RedisError:
            logger.exception("Failed to read cache entry %r", key)
            return None
        if payload is None:
            return None
        try:
            return json.loads(payload)
        except (TypeError, ValueError):
            logger.warning("Discarding undecodable cache entry %r", key)
            return None

    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store ``value`` as JSON.

        Raises
        ------
        TypeError
            If ``value`` is not made of JSON types only; tuples, dates and
            non-str dict keys would read back as something else.
        """
        _check_payload(value)
        payload = json.dumps(value)
        try:
            return bool(self._client.set(key, payload, ex=ttl if ttl > 0 else None))
        except RedisError:
            logger.exception("Failed to write cache entry %r", key)
            return False

    def delete(self, key: str) -> bool:
        try:
            return bool(self._client.delete(key))
        except RedisError:
            logger.exception("Failed to delete cache entry %r", key)
            return False

    def __repr__(self) -> str:
        return f"RedisStore(client={self._client!r})"


STORE_TYPES: dict[str, Callable[[Mapping[str, Any]], CacheStore]] = {
    "hash": HashStore.from_options,
    "redis": RedisStore.from_options,
}


def build_store(cache_id: str, settings: Settings) -> CacheStore | None:
    """Create the store configured for ``cache_id``.

    Returns ``None`` when ``cache_id`` is not in ``settings.object_caches``.

    Raises
    ------
    ConfigurationError
        If the configured store type is unknown.
    """
    options = settings.object_caches.get(cache_id)
    if options is None:
        return None
    store_type = options.get("store", cache_id)
    factory = STORE_TYPES.get(store_type)
    if factory is None:
        raise ConfigurationError(
            f"Cache {cache_id!r} uses unknown store type {store_type!r}; "
            f"expected one of {sorted(STORE_TYPES)}"
        )
    logger.debug("Building %s store for cache %r", store_type, cache_id)
    return factory(options)
