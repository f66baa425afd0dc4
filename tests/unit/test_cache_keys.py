"""Unit tests for semval.cache.keys."""
from __future__ import annotations

import hashlib
import json

import pytest

from semval.cache.keys import DEFAULT_NAMESPACE, CacheIdGenerator, generate


class TestCacheIdGenerator:
    def test_key_contains_prefix(self) -> None:
        key = CacheIdGenerator("key", "test-prefix").generate_id()
        assert "test-prefix" in key

    def test_key_layout(self) -> None:
        digest = hashlib.md5(json.dumps(["key"]).encode("utf-8")).hexdigest()
        assert CacheIdGenerator("key", "p").generate_id() == f"{DEFAULT_NAMESPACE}:p:{digest}"

    def test_get_prefix(self) -> None:
        assert CacheIdGenerator("key").get_prefix() == "semval:"
        assert CacheIdGenerator("key", "p", namespace="wiki").get_prefix() == "wiki:p:"

    def test_stable_for_equal_seeds(self) -> None:
        first = CacheIdGenerator({"b": 1, "a": [1, 2]}, "p").generate_id()
        second = CacheIdGenerator({"a": [1, 2], "b": 1}, "p").generate_id()
        assert first == second

    def test_differs_for_different_seeds(self) -> None:
        assert generate("a") != generate("b")

    def test_differs_for_different_prefixes(self) -> None:
        assert generate("a", "x") != generate("a", "y")

    def test_unserialisable_seed_raises(self) -> None:
        with pytest.raises(TypeError):
            CacheIdGenerator(object()).generate_id()

    def test_prefix_must_be_str(self) -> None:
        with pytest.raises(TypeError):
            CacheIdGenerator("key", 5)  # type: ignore[arg-type]

    def test_repr(self) -> None:
        assert "test-prefix" in repr(CacheIdGenerator("key", "test-prefix"))
