"""Unit tests for semval.datatypes.registry — ValueClassRegistry,
DataTypeRegistry, error types and the built-in seed table.
"""
from __future__ import annotations

import pytest

from semval.dataitems.nodes import DataItemType
from semval.datatypes.builtins import BUILTIN_DATATYPES, build_default_registry
from semval.datatypes.registry import DataTypeRegistry, ValueClassRegistry, ValueKind
from semval.datavalues import (
    DataValue,
    NumberValue,
    QuantityValue,
    StringValue,
    URIValue,
    value_classes,
)
from semval.errors import DataTypeAlreadyRegisteredError, DataTypeNotFoundError


class NotAValue:
    """Does NOT subclass DataValue — used for error path testing."""


def _fresh_registry(name: str = "test") -> ValueClassRegistry[DataValue]:
    """Return a new empty registry for each test."""
    return ValueClassRegistry(DataValue, name)


# ===========================================================================
# Error types
# ===========================================================================


class TestDataTypeNotFoundError:
    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise DataTypeNotFoundError("_foo", "datatypes")

    def test_has_attributes(self) -> None:
        error = DataTypeNotFoundError("_foo", "datatypes")
        assert error.type_name == "_foo"
        assert error.registry_name == "datatypes"


class TestDataTypeAlreadyRegisteredError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise DataTypeAlreadyRegisteredError("_foo", "datatypes")

    def test_message_contains_name(self) -> None:
        assert "_foo" in str(DataTypeAlreadyRegisteredError("_foo", "datatypes"))


# ===========================================================================
# ValueClassRegistry
# ===========================================================================


class TestValueClassRegistry:
    def test_register_decorator_returns_class(self) -> None:
        registry = _fresh_registry()
        decorated = registry.register(ValueKind.TEXT)(StringValue)
        assert decorated is StringValue
        assert registry.get(ValueKind.TEXT) is StringValue

    def test_duplicate_kind_raises(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ValueKind.TEXT, StringValue)
        with pytest.raises(DataTypeAlreadyRegisteredError):
            registry.register_class(ValueKind.TEXT, StringValue)

    def test_non_subclass_raises(self) -> None:
        with pytest.raises(TypeError):
            _fresh_registry().register_class(ValueKind.TEXT, NotAValue)  # type: ignore[arg-type]

    def test_non_kind_raises(self) -> None:
        with pytest.raises(TypeError):
            _fresh_registry().register_class("text", StringValue)  # type: ignore[arg-type]

    def test_get_missing_raises(self) -> None:
        with pytest.raises(DataTypeNotFoundError):
            _fresh_registry().get(ValueKind.TEXT)

    def test_deregister(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ValueKind.TEXT, StringValue)
        registry.deregister(ValueKind.TEXT)
        assert ValueKind.TEXT not in registry

    def test_deregister_missing_raises(self) -> None:
        with pytest.raises(DataTypeNotFoundError):
            _fresh_registry().deregister(ValueKind.TEXT)

    def test_kinds_in_declaration_order(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ValueKind.NUMBER, NumberValue)
        registry.register_class(ValueKind.TEXT, StringValue)
        assert registry.kinds() == [ValueKind.TEXT, ValueKind.NUMBER]
        assert len(registry) == 2

    def test_builtin_table_covers_every_kind(self) -> None:
        assert set(value_classes.kinds()) == set(ValueKind)

    def test_repr(self) -> None:
        assert "test" in repr(_fresh_registry())


# ===========================================================================
# DataTypeRegistry
# ===========================================================================


class TestDataTypeRegistry:
    def test_register_datatype(self) -> None:
        registry: DataTypeRegistry[DataValue] = DataTypeRegistry(value_classes)
        definition = registry.register_datatype(
            "_foo", ValueKind.TEXT, DataItemType.BLOB, label="Foo", aliases=("Bar",)
        )
        assert definition.kind is ValueKind.TEXT
        assert registry.value_class_for("_foo") is StringValue
        assert registry.find_type_id("Bar") == "_foo"
        assert registry.find_type_label("_foo") == "Foo"

    def test_duplicate_type_id_raises(self) -> None:
        registry: DataTypeRegistry[DataValue] = DataTypeRegistry(value_classes)
        registry.register_datatype("_foo", ValueKind.TEXT, DataItemType.BLOB)
        with pytest.raises(DataTypeAlreadyRegisteredError):
            registry.register_datatype("_foo", ValueKind.TEXT, DataItemType.BLOB)

    def test_unknown_kind_raises(self) -> None:
        registry: DataTypeRegistry[DataValue] = DataTypeRegistry(_fresh_registry())
        with pytest.raises(DataTypeNotFoundError):
            registry.register_datatype("_foo", ValueKind.TEXT, DataItemType.BLOB)

    @pytest.mark.parametrize("type_id", ["", "-foo"])
    def test_invalid_type_id_raises(self, type_id: str) -> None:
        registry: DataTypeRegistry[DataValue] = DataTypeRegistry(value_classes)
        with pytest.raises(ValueError):
            registry.register_datatype(type_id, ValueKind.TEXT, DataItemType.BLOB)

    def test_first_type_per_item_type_is_default(self) -> None:
        registry = build_default_registry()
        assert registry.default_type_id(DataItemType.NUMBER) == "_num"
        assert registry.default_type_id(DataItemType.URI) == "_uri"
        assert registry.default_type_id(DataItemType.NOTYPE) == ""


class TestBuiltinRegistry:
    @pytest.fixture()
    def registry(self) -> DataTypeRegistry[DataValue]:
        return build_default_registry()

    def test_every_builtin_registered(self, registry: DataTypeRegistry[DataValue]) -> None:
        assert registry.type_ids() == [entry[0] for entry in BUILTIN_DATATYPES]

    @pytest.mark.parametrize(
        "label, type_id",
        [
            ("URL", "_uri"),
            ("Page", "_wpg"),
            ("String", "_txt"),
            ("Text", "_txt"),
            ("Number", "_num"),
            ("Quantity", "_qty"),
            ("Date", "_dat"),
            ("Email", "_ema"),
            ("", ""),
        ],
    )
    def test_find_type_id(
        self, registry: DataTypeRegistry[DataValue], label: str, type_id: str
    ) -> None:
        assert registry.find_type_id(label) == type_id

    def test_label_lookup_round_trips(self, registry: DataTypeRegistry[DataValue]) -> None:
        for type_id in registry.known_type_labels():
            assert registry.find_type_id(registry.find_type_label(type_id)) == type_id

    def test_alias_keeps_primary_label(self, registry: DataTypeRegistry[DataValue]) -> None:
        registry.register_alias("_num", "Count")
        assert registry.find_type_id("Count") == "_num"
        assert registry.find_type_label("_num") == "Number"

    def test_internal_types_have_no_label(self, registry: DataTypeRegistry[DataValue]) -> None:
        assert registry.find_type_label("__pro") == ""
        assert "__pro" in registry

    def test_resolve_type_id(self, registry: DataTypeRegistry[DataValue]) -> None:
        assert registry.resolve_type_id("_num") == "_num"
        assert registry.resolve_type_id("Number") == "_num"
        assert registry.resolve_type_id("-_num") == ""
        assert registry.resolve_type_id("_nope") == ""
        assert registry.resolve_type_id("") == ""

    def test_value_class_for(self, registry: DataTypeRegistry[DataValue]) -> None:
        assert registry.value_class_for("_qty") is QuantityValue
        assert registry.value_class_for("_anu") is URIValue
        assert registry.value_class_for("_nope") is None

    def test_get_data_item_type(self, registry: DataTypeRegistry[DataValue]) -> None:
        assert registry.get_data_item_type("_ema") is DataItemType.URI
        assert registry.get_data_item_type("_nope") is DataItemType.NOTYPE

    def test_registries_are_independent(self) -> None:
        first = build_default_registry()
        second = build_default_registry()
        first.register_alias("_txt", "Prose")
        assert second.find_type_id("Prose") == ""

    def test_known_type_labels(self, registry: DataTypeRegistry[DataValue]) -> None:
        labels = registry.known_type_labels()
        assert labels["_txt"] == "Text"
        assert "__err" not in labels
        assert "Telephone number" in registry.known_labels()
