"""Unit tests for semval.cache.stores — HashStore, RedisStore and
store construction from settings.
"""
from __future__ import annotations

import json
import logging
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from semval.cache.handler import CacheHandler
from semval.cache.stores import HashStore, RedisStore, build_store
from semval.config import Settings
from semval.errors import ConfigurationError


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


# ===========================================================================
# HashStore
# ===========================================================================


class TestHashStore:
    def test_set_and_get(self) -> None:
        store = HashStore()
        assert store.set("k", {"a": 1})
        assert store.get("k") == {"a": 1}

    def test_missing_key(self) -> None:
        assert HashStore().get("missing") is None

    def test_delete(self) -> None:
        store = HashStore()
        store.set("k", 1)
        assert store.delete("k")
        assert not store.delete("k")
        assert store.get("k") is None

    def test_ttl_expiry(self) -> None:
        clock = _Clock()
        store = HashStore(clock=clock)
        store.set("k", "v", ttl=10)
        clock.now += 9
        assert store.get("k") == "v"
        clock.now += 1
        assert store.get("k") is None
        assert len(store) == 0

    def test_zero_ttl_never_expires(self) -> None:
        clock = _Clock()
        store = HashStore(clock=clock)
        store.set("k", "v")
        clock.now += 1e9
        assert store.get("k") == "v"


# ===========================================================================
# RedisStore
# ===========================================================================


class TestRedisStore:
    def test_get_decodes_json(self) -> None:
        client = MagicMock()
        client.get.return_value = json.dumps({"a": 1})
        assert RedisStore(client).get("k") == {"a": 1}
        client.get.assert_called_once_with("k")

    def test_get_missing(self) -> None:
        client = MagicMock()
        client.get.return_value = None
        assert RedisStore(client).get("k") is None

    def test_get_undecodable(self) -> None:
        client = MagicMock()
        client.get.return_value = "{not json"
        assert RedisStore(client).get("k") is None

    def test_set_encodes_json(self) -> None:
        client = MagicMock()
        client.set.return_value = True
        assert RedisStore(client).set("k", [1, 2], ttl=30)
        client.set.assert_called_once_with("k", "[1, 2]", ex=30)

    def test_set_without_ttl(self) -> None:
        client = MagicMock()
        RedisStore(client).set("k", "v")
        client.set.assert_called_once_with("k", '"v"', ex=None)

    @pytest.mark.parametrize(
        "value", [("a", "b"), date(2020, 1, 1), {1: "x"}, {"nested": [("a",)]}]
    )
    def test_set_rejects_values_json_would_change(self, value: object) -> None:
        client = MagicMock()
        with pytest.raises(TypeError):
            RedisStore(client).set("k", value)
        client.set.assert_not_called()

    def test_handler_reads_back_what_it_stored(self) -> None:
        entries: dict[str, str] = {}
        client = MagicMock()
        client.set.side_effect = lambda key, payload, ex=None: entries.__setitem__(key, payload)
        client.get.side_effect = entries.get
        handler = CacheHandler(RedisStore(client)).set_cache_enabled(True).key("k")
        value = {"a": ["b", 1, 2.5, True, None]}
        handler.set(value)
        assert handler.get() == value
        with pytest.raises(TypeError):
            handler.set(("a", "b"))
        assert handler.get() == value

    def test_delete(self) -> None:
        client = MagicMock()
        client.delete.return_value = 1
        assert RedisStore(client).delete("k")

    def test_errors_are_logged_and_reported_as_misses(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        client = MagicMock()
        client.get.side_effect = RedisConnectionError("down")
        client.set.side_effect = RedisConnectionError("down")
        client.delete.side_effect = RedisConnectionError("down")
        store = RedisStore(client)
        with caplog.at_level(logging.ERROR, logger="semval.cache.stores"):
            assert store.get("k") is None
            assert store.set("k", 1) is False
            assert store.delete("k") is False
        assert "Failed to read cache entry" in caplog.text

    def test_from_options_uses_url(self) -> None:
        with patch("semval.cache.stores.redis.Redis.from_url") as from_url:
            store = RedisStore.from_options({"url": "redis://cache:6379/2"})
        from_url.assert_called_once_with("redis://cache:6379/2", decode_responses=True)
        assert store.client is from_url.return_value


# ===========================================================================
# build_store
# ===========================================================================


class TestBuildStore:
    def test_default_hash_cache(self) -> None:
        assert isinstance(build_store("hash", Settings()), HashStore)

    def test_unconfigured_id(self) -> None:
        assert build_store("lula", Settings()) is None

    def test_store_type_from_options(self) -> None:
        settings = Settings.from_mapping({"object_caches": {"local": {"store": "hash"}}})
        assert isinstance(build_store("local", settings), HashStore)

    def test_redis_store(self) -> None:
        settings = Settings.from_mapping(
            {"object_caches": {"shared": {"store": "redis", "url": "redis://x:6379/0"}}}
        )
        with patch("semval.cache.stores.redis.Redis.from_url"):
            assert isinstance(build_store("shared", settings), RedisStore)

    def test_unknown_store_type(self) -> None:
        settings = Settings.from_mapping({"object_caches": {"odd": {"store": "memcached"}}})
        with pytest.raises(ConfigurationError):
            build_store("odd", settings)
