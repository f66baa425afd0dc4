"""Unit tests for semval.dataitems.serializer."""
from __future__ import annotations

import json

import pytest
import yaml

from semval.dataitems.nodes import DIError, DINumber, DIProperty, DITime, DIWikiPage, TimePrecision
from semval.dataitems.serializer import DataItemSerializer


@pytest.fixture()
def serializer() -> DataItemSerializer:
    return DataItemSerializer()


class TestToDict:
    def test_includes_kind_and_type(self, serializer: DataItemSerializer) -> None:
        data = serializer.to_dict(DIWikiPage("Main_Page"))
        assert data["kind"] == "DIWikiPage"
        assert data["type"] == "WIKIPAGE"
        assert data["dbkey"] == "Main_Page"
        assert data["namespace"] == 0

    def test_enum_fields_stored_by_name(self, serializer: DataItemSerializer) -> None:
        data = serializer.to_dict(DITime(1970, precision=TimePrecision.YEAR))
        assert data["precision"] == "YEAR"

    def test_tuple_fields_stored_as_lists(self, serializer: DataItemSerializer) -> None:
        data = serializer.to_dict(DIError(("a", "b")))
        assert data["errors"] == ["a", "b"]

    def test_rejects_non_items(self, serializer: DataItemSerializer) -> None:
        with pytest.raises(TypeError):
            serializer.to_dict("not an item")  # type: ignore[arg-type]


class TestFromDict:
    def test_restores_time_precision(self, serializer: DataItemSerializer) -> None:
        item = DITime(1970, 5, precision=TimePrecision.MONTH)
        assert serializer.from_dict(serializer.to_dict(item)) == item

    def test_restores_error_tuple(self, serializer: DataItemSerializer) -> None:
        item = serializer.from_dict({"kind": "DIError", "errors": ["x"]})
        assert item == DIError(("x",))

    def test_unknown_kind_raises(self, serializer: DataItemSerializer) -> None:
        with pytest.raises(ValueError, match="Unknown data item kind"):
            serializer.from_dict({"kind": "DIMystery"})

    def test_missing_field_raises_value_error(self, serializer: DataItemSerializer) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"kind": "DINumber"})

    def test_invalid_payload_raises_value_error(self, serializer: DataItemSerializer) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"kind": "DIProperty", "key": ""})


class TestJsonAndYaml:
    def test_json_is_valid(self, serializer: DataItemSerializer) -> None:
        data = json.loads(serializer.to_json(DINumber(9001)))
        assert data == {"kind": "DINumber", "type": "NUMBER", "number": 9001, "unit": ""}

    def test_json_round_trip(self, serializer: DataItemSerializer) -> None:
        item = DIProperty("Foo", inverse=True)
        assert serializer.from_json(serializer.to_json(item)) == item

    def test_yaml_is_block_style(self, serializer: DataItemSerializer) -> None:
        text = serializer.to_yaml(DIWikiPage("Foo"))
        assert "dbkey: Foo" in text
        assert yaml.safe_load(text)["kind"] == "DIWikiPage"

    def test_yaml_round_trip(self, serializer: DataItemSerializer) -> None:
        item = DITime(2001, 9, 11, 8, 46, 0, TimePrecision.TIME)
        assert serializer.from_yaml(serializer.to_yaml(item)) == item
