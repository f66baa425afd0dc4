"""Unit tests for semval.datatypes.aliases.TypeAliasTable."""
from __future__ import annotations

import pytest

from semval.datatypes.aliases import TypeAliasTable


def _table() -> TypeAliasTable:
    table = TypeAliasTable()
    table.register_label("_txt", "Text")
    table.register_label("_num", "Number")
    table.register_alias("_txt", "String")
    return table


class TestRegistration:
    def test_first_label_is_primary(self) -> None:
        table = _table()
        table.register_label("_txt", "Plain text")
        assert table.find_type_label("_txt") == "Text"
        assert table.find_type_id("Plain text") == "_txt"
        assert "Plain text" in table.aliases_of("_txt")

    def test_alias_never_replaces_primary_label(self) -> None:
        table = _table()
        assert table.find_type_label("_txt") == "Text"

    def test_non_str_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            TypeAliasTable().register_label("_txt", 1)  # type: ignore[arg-type]

    def test_empty_label_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            TypeAliasTable().register_alias("_txt", "")


class TestLookup:
    def test_find_type_id_by_primary(self) -> None:
        assert _table().find_type_id("Number") == "_num"

    def test_find_type_id_by_alias(self) -> None:
        assert _table().find_type_id("String") == "_txt"

    def test_unknown_label_gives_empty(self) -> None:
        assert _table().find_type_id("Nope") == ""

    def test_lookup_is_case_sensitive(self) -> None:
        assert _table().find_type_id("text") == ""

    def test_unknown_type_gives_empty_label(self) -> None:
        assert _table().find_type_label("_zzz") == ""

    def test_primary_wins_over_alias(self) -> None:
        table = _table()
        table.register_alias("_num", "Text")
        assert table.find_type_id("Text") == "_txt"

    def test_known_labels_are_primary_only(self) -> None:
        assert _table().known_labels() == {"Text", "Number"}

    def test_known_type_labels_is_a_copy(self) -> None:
        table = _table()
        labels = table.known_type_labels()
        labels["_foo"] = "Foo"
        assert table.find_type_label("_foo") == ""

    def test_contains_and_len(self) -> None:
        table = _table()
        assert "String" in table
        assert "Text" in table
        assert "Nope" not in table
        assert len(table) == 2
