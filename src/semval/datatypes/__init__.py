"""Datatype subsystem: type labels, value kinds and the type id registry."""
from __future__ import annotations

from semval.datatypes.aliases import TypeAliasTable
from semval.datatypes.builtins import BUILTIN_DATATYPES, build_default_registry
from semval.datatypes.registry import (
    DataTypeDefinition,
    DataTypeRegistry,
    ValueClassRegistry,
    ValueKind,
)

__all__ = [
    "BUILTIN_DATATYPES",
    "DataTypeDefinition",
    "DataTypeRegistry",
    "TypeAliasTable",
    "ValueClassRegistry",
    "ValueKind",
    "build_default_registry",
]
