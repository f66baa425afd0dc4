"""CacheHandler: a key-scoped view onto a backing store.

A handler starts without a key.  Once a key is bound (``key()`` or
``set_key()``) and caching is enabled, ``get``/``set``/``delete`` pass
through to the store; otherwise they do nothing and report an empty
result.  A handler without a store can never be enabled.

Usage
-----
::

    handler = CacheHandler.new_from_id("hash")
    handler.set_cache_enabled(True).key("page", "Main_Page")
    if handler.get() is None:
        handler.set(expensive_result())
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from semval.cache.stores import CacheStore
from semval.errors import ValueIssue

if TYPE_CHECKING:
    from semval.cache.registry import CacheRegistry

logger = logging.getLogger(__name__)


class KeyGenerator(Protocol):
    def generate_id(self) -> str: ...


class CacheHandler:
    """Key-scoped cache access with an enable/disable switch.

    Parameters
    ----------
    store:
        The backing store, or ``None`` for a permanently disabled handler.
    registry:
        The registry that handed out this handler, if any.
    cache_id:
        Identifier the handler was requested under.
    unavailable:
        Why the handler has no store, when it came from a registry.
    """

    def __init__(
        self,
        store: CacheStore | None = None,
        *,
        registry: "CacheRegistry | None" = None,
        cache_id: str | None = None,
        unavailable: ValueIssue | None = None,
    ) -> None:
        if store is not None and not isinstance(store, CacheStore):
            raise TypeError(f"store must be a CacheStore or None, got {type(store).__name__}")
        self._store = store
        self._registry = registry
        self._cache_id = cache_id
        self._unavailable = unavailable
        self._enabled = False
        self._key: str | None = None

    @classmethod
    def new_from_id(cls, cache_id: str | None = None) -> "CacheHandler":
        """Return the process-wide handler for ``cache_id``."""
        from semval.context import get_context

        return get_context().caches.new_from_id(cache_id)

    @property
    def cache_id(self) -> str | None:
        return self._cache_id

    @property
    def unavailable(self) -> ValueIssue | None:
        return self._unavailable

    def get_cache(self) -> CacheStore | None:
        return self._store

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_cache_enabled(self, enabled: bool) -> "CacheHandler":
        self._enabled = bool(enabled)
        return self

    def key(self, *parts: str) -> "CacheHandler":
        """Bind the key formed by joining ``parts`` with ``:``."""
        if not parts or not all(isinstance(p, str) for p in parts):
            raise TypeError("key() needs one or more str parts")
        self._key = ":".join(parts) if self._store is not None else None
        return self

    def set_key(self, generator: KeyGenerator) -> "CacheHandler":
        """Bind the key produced by ``generator.generate_id()``."""
        if not callable(getattr(generator, "generate_id", None)):
            raise TypeError(f"{type(generator).__name__} has no generate_id()")
        self._key = generator.generate_id() if self._store is not None else None
        return self

    def get_key(self) -> str | None:
        return self._key

    def is_enabled(self) -> bool:
        """True only when enabled, backed by a store and bound to a key."""
        return self._enabled and self._store is not None and bool(self._key)

    # ------------------------------------------------------------------
    # Store access
    # ------------------------------------------------------------------

    def set(self, value: Any, ttl: int = 0) -> bool:
        if not self.is_enabled():
            return False
        assert self._store is not None and self._key is not None
        return self._store.set(self._key, value, ttl)

    def get(self) -> Any:
        if not self.is_enabled():
            return None
        assert self._store is not None and self._key is not None
        return self._store.get(self._key)

    def delete(self) -> bool:
        """Erase the stored entry; the key stays bound."""
        if not self.is_enabled():
            return False
        assert self._store is not None and self._key is not None
        return self._store.delete(self._key)

    def reset(self) -> None:
        """Drop every handler singleton held by the owning registry."""
        if self._registry is not None:
            self._registry.reset_all()
            return
        from semval.context import get_context

        get_context().caches.reset_all()

    def __repr__(self) -> str:
        return (
            f"CacheHandler(cache_id={self._cache_id!r}, key={self._key!r}, "
            f"enabled={self.is_enabled()})"
        )
