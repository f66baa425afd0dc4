"""Data item serialization to plain dicts, JSON and YAML.

The serialized form is a flat dict with a ``"kind"`` discriminator naming
the data item class, so that deserialization is unambiguous.

Usage
-----
::

    from semval.dataitems.serializer import DataItemSerializer

    serializer = DataItemSerializer()
    data = serializer.to_dict(DIWikiPage("Main_Page"))
    yaml_text = serializer.to_yaml(DIWikiPage("Main_Page"))
    item = serializer.from_yaml(yaml_text)
"""
from __future__ import annotations

import dataclasses
import json
from enum import Enum

import yaml

from semval.dataitems.nodes import (
    DataItem,
    DIBlob,
    DIBoolean,
    DIError,
    DINumber,
    DIProperty,
    DITime,
    DIUri,
    DIWikiPage,
    TimePrecision,
)

_KINDS: dict[str, type[DataItem]] = {
    cls.__name__: cls
    for cls in (DINumber, DIBlob, DIBoolean, DIUri, DITime, DIWikiPage, DIProperty, DIError)
}


class DataItemSerializer:
    """Converts between data items and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (item -> dict)
    # ------------------------------------------------------------------

    def to_dict(self, item: DataItem) -> dict[str, object]:
        """Serialize a data item to a JSON-compatible dict."""
        if not isinstance(item, DataItem):
            raise TypeError(f"Expected a DataItem, got {type(item).__name__}")
        data: dict[str, object] = {"kind": type(item).__name__, "type": item.di_type.name}
        for f in dataclasses.fields(item):
            value = getattr(item, f.name)
            if isinstance(value, Enum):
                value = value.name
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data

    # ------------------------------------------------------------------
    # Deserialization (dict -> item)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> DataItem:
        """Deserialize a data item from a plain dict.

        Raises
        ------
        ValueError
            If the ``"kind"`` is unknown or the payload is invalid.
        """
        kind = data.get("kind")
        cls = _KINDS.get(kind) if isinstance(kind, str) else None
        if cls is None:
            raise ValueError(f"Unknown data item kind: {kind!r}")
        kwargs: dict[str, object] = {}
        for f in dataclasses.fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name == "precision":
                value = TimePrecision[str(value)]
            elif f.name == "errors":
                value = tuple(str(v) for v in value)  # type: ignore[union-attr]
            kwargs[f.name] = value
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise ValueError(f"Invalid {kind} payload: {exc}") from exc

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, item: DataItem, indent: int = 2) -> str:
        """Serialize a data item to a JSON string."""
        return json.dumps(self.to_dict(item), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> DataItem:
        """Deserialize a data item from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, item: DataItem) -> str:
        """Serialize a data item to a YAML string."""
        return yaml.dump(self.to_dict(item), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> DataItem:
        """Deserialize a data item from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
