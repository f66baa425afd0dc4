"""Registry of singleton cache handlers, one per cache identifier.

The registry is an explicit object held by the application context
(``semval.context``).  It is not thread-safe; hosts running several
threads must serialize ``new_from_id`` and the reset methods.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from semval import errors
from semval.cache.handler import CacheHandler
from semval.cache.keys import CacheIdGenerator
from semval.cache.stores import CacheStore, build_store
from semval.config import Settings
from semval.errors import IssueKind, ValueIssue

logger = logging.getLogger(__name__)

StoreFactory = Callable[[str, Settings], "CacheStore | None"]


class CacheRegistry:
    """Hands out one ``CacheHandler`` per cache identifier.

    Parameters
    ----------
    settings:
        Supplies the default cache type, the allow-list of identifiers
        and the key namespace.
    store_factory:
        Builds the store for an identifier, returning ``None`` for
        identifiers that are not available.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store_factory: StoreFactory = build_store,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._store_factory = store_factory
        self._handlers: dict[str, CacheHandler] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    def new_from_id(self, cache_id: str | None = None) -> CacheHandler:
        """Return the handler for ``cache_id``, creating it on first use.

        New handlers start enabled.  Identifiers that are not configured
        give a handler with no store, which can never be enabled.
        """
        if cache_id is not None and not isinstance(cache_id, str):
            raise TypeError(f"cache_id must be a str or None, got {type(cache_id).__name__}")
        cache_id = cache_id or self._settings.cache_type
        handler = self._handlers.get(cache_id)
        if handler is not None:
            return handler

        store = self._store_factory(cache_id, self._settings)
        if store is None:
            issue = ValueIssue(
                IssueKind.UNAVAILABLE_CACHE,
                errors.UNAVAILABLE_CACHE,
                f"Cache {cache_id!r} is not configured; caching is disabled for it.",
            )
            logger.warning("%s", issue.message)
            handler = CacheHandler(None, registry=self, cache_id=cache_id, unavailable=issue)
        else:
            logger.debug("Created cache handler for %r", cache_id)
            handler = CacheHandler(store, registry=self, cache_id=cache_id)
        handler.set_cache_enabled(True)
        self._handlers[cache_id] = handler
        return handler

    def new_key_generator(self, hashable: object, prefix: str | None = None) -> CacheIdGenerator:
        """Return a key generator using the configured namespace."""
        return CacheIdGenerator(hashable, prefix, self._settings.key_namespace)

    def reset_all(self) -> None:
        """Forget every handler; the next request creates fresh ones."""
        self._handlers.clear()
        logger.debug("Cleared all cache handlers")

    def reset_one(self, cache_id: str) -> None:
        """Forget the handler for ``cache_id``, if there is one."""
        self._handlers.pop(cache_id, None)

    def cache_ids(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, cache_id: object) -> bool:
        return cache_id in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"CacheRegistry(handlers={self.cache_ids()})"
