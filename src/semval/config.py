"""Settings for semval.

Settings are immutable and can be built from a mapping or a YAML file::

    cache_type: hash
    key_namespace: mywiki
    default_property_type: _wpg
    object_caches:
      hash:
        store: hash
      shared:
        store: redis
        url: redis://cache.internal:6379/0

``object_caches`` is the allow-list of cache identifiers: asking for any
other identifier yields a permanently disabled cache handler.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from semval.errors import ConfigurationError

DEFAULT_OBJECT_CACHES: dict[str, dict[str, Any]] = {"hash": {"store": "hash"}}


def _default_object_caches() -> dict[str, dict[str, Any]]:
    return {name: dict(options) for name, options in DEFAULT_OBJECT_CACHES.items()}


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Parameters
    ----------
    cache_type:
        Cache identifier used when ``new_from_id`` is called without one.
    object_caches:
        Available cache identifiers and their store options.  Each entry
        names a ``store`` type (``"hash"`` or ``"redis"``); the identifier
        itself is used when ``store`` is omitted.
    key_namespace:
        First segment of generated cache keys.
    default_property_type:
        Type id of user properties without a declared type.
    """

    cache_type: str = "hash"
    object_caches: Mapping[str, Mapping[str, Any]] = field(default_factory=_default_object_caches)
    key_namespace: str = "semval"
    default_property_type: str = "_wpg"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        """Build settings from a mapping, validating every key.

        Raises
        ------
        ConfigurationError
            On unknown keys or values of the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Settings must be a mapping, got {type(data).__name__}")
        known = {"cache_type", "object_caches", "key_namespace", "default_property_type"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown setting(s): {', '.join(map(str, unknown))}")

        for name in ("cache_type", "key_namespace", "default_property_type"):
            if name in data and (not isinstance(data[name], str) or not data[name]):
                raise ConfigurationError(f"Setting {name!r} must be a non-empty string")

        caches = data.get("object_caches", _default_object_caches())
        if not isinstance(caches, Mapping):
            raise ConfigurationError("Setting 'object_caches' must be a mapping")
        object_caches: dict[str, dict[str, Any]] = {}
        for name, options in caches.items():
            if not isinstance(name, str) or not name:
                raise ConfigurationError("Cache identifiers must be non-empty strings")
            options = {} if options is None else options
            if not isinstance(options, Mapping):
                raise ConfigurationError(f"Options for cache {name!r} must be a mapping")
            object_caches[name] = dict(options)

        return cls(
            cache_type=data.get("cache_type", "hash"),
            object_caches=object_caches,
            key_namespace=data.get("key_namespace", "semval"),
            default_property_type=data.get("default_property_type", "_wpg"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "cache_type": self.cache_type,
            "object_caches": {k: dict(v) for k, v in self.object_caches.items()},
            "key_namespace": self.key_namespace,
            "default_property_type": self.default_property_type,
        }


def load_settings(path: str | Path) -> Settings:
    """Read settings from a YAML file.  An empty file gives the defaults.

    Raises
    ------
    ConfigurationError
        If the file cannot be read or parsed, or holds invalid settings.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return Settings()
    return Settings.from_mapping(data)
