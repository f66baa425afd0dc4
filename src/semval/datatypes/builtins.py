"""Built-in datatype seed table.

Each entry is ``(type_id, kind, data_item_type, label, aliases)``.
Internal types carry no label.  Order matters: the first type id seen for
a data item type becomes its default.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from semval.dataitems.nodes import DataItemType
from semval.datatypes.aliases import TypeAliasTable
from semval.datatypes.registry import DataTypeRegistry, ValueKind

if TYPE_CHECKING:
    from semval.datavalues.base import DataValue

BUILTIN_DATATYPES: tuple[tuple[str, ValueKind, DataItemType, str, tuple[str, ...]], ...] = (
    ("_txt", ValueKind.TEXT, DataItemType.BLOB, "Text", ("String",)),
    ("_cod", ValueKind.CODE, DataItemType.BLOB, "Code", ()),
    ("_wpg", ValueKind.WIKIPAGE, DataItemType.WIKIPAGE, "Page", ()),
    ("_num", ValueKind.NUMBER, DataItemType.NUMBER, "Number", ()),
    ("_qty", ValueKind.QUANTITY, DataItemType.NUMBER, "Quantity", ()),
    ("_dat", ValueKind.TIME, DataItemType.TIME, "Date", ()),
    ("_uri", ValueKind.URI, DataItemType.URI, "URL", ("URI",)),
    ("_anu", ValueKind.URI, DataItemType.URI, "Annotation URI", ()),
    ("_ema", ValueKind.EMAIL, DataItemType.URI, "Email", ()),
    ("_tel", ValueKind.TELEPHONE, DataItemType.URI, "Telephone number", ()),
    ("_boo", ValueKind.BOOLEAN, DataItemType.BOOLEAN, "Boolean", ()),
    ("__pro", ValueKind.PROPERTY, DataItemType.PROPERTY, "", ()),
    ("__typ", ValueKind.TYPE, DataItemType.URI, "", ()),
    ("__err", ValueKind.ERROR, DataItemType.ERROR, "", ()),
)

ERROR_TYPE_ID = "__err"
PROPERTY_TYPE_ID = "__pro"


def build_default_registry() -> "DataTypeRegistry[DataValue]":
    """Return a new registry seeded with the built-in datatypes."""
    from semval.datavalues import value_classes

    registry: DataTypeRegistry[DataValue] = DataTypeRegistry(value_classes, TypeAliasTable())
    for type_id, kind, data_item_type, label, aliases in BUILTIN_DATATYPES:
        registry.register_datatype(type_id, kind, data_item_type, label, aliases)
    return registry
