"""Cache key generation.

A key is ``"<namespace>:[<prefix>:]<md5>"`` where the digest covers the
JSON form of the hashable seed.  The same seed and prefix always give the
same key, and the prefix is readable inside the key.
"""
from __future__ import annotations

import hashlib
import json

DEFAULT_NAMESPACE = "semval"


class CacheIdGenerator:
    """Derives a cache key from a JSON-serialisable seed.

    Parameters
    ----------
    hashable:
        Any JSON-serialisable value identifying the cached content.
    prefix:
        Optional sub-namespace, e.g. the name of the calling component.
    namespace:
        Leading key segment shared by everything this process caches.
    """

    def __init__(
        self,
        hashable: object,
        prefix: str | None = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f"prefix must be a str or None, got {type(prefix).__name__}")
        self._hashable = hashable
        self._prefix = prefix
        self._namespace = namespace

    @property
    def prefix(self) -> str | None:
        return self._prefix

    def get_prefix(self) -> str:
        """Return the readable leading part of the key, ending in ``:``."""
        parts = [self._namespace]
        if self._prefix:
            parts.append(self._prefix)
        return ":".join(parts) + ":"

    def generate_id(self) -> str:
        """Return the key.

        Raises
        ------
        TypeError
            If the seed is not JSON-serialisable.
        """
        payload = json.dumps([self._hashable], sort_keys=True, ensure_ascii=False)
        return self.get_prefix() + hashlib.md5(payload.encode("utf-8")).hexdigest()

    def __repr__(self) -> str:
        return f"CacheIdGenerator(prefix={self._prefix!r}, namespace={self._namespace!r})"


def generate(seed: object, prefix: str | None = None, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Shortcut for ``CacheIdGenerator(seed, prefix, namespace).generate_id()``."""
    return CacheIdGenerator(seed, prefix, namespace).generate_id()
