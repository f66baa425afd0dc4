"""Datatype registries for semval.

Two registries cooperate to turn a type id into a value object:

``ValueClassRegistry``
    The closed dispatch table from a ``ValueKind`` discriminator to the
    ``DataValue`` subclass implementing it.  Value classes register
    themselves with a decorator at import time.

``DataTypeRegistry``
    The open table of type ids.  Every type id is defined onto one
    ``ValueKind`` and one ``DataItemType``, and may carry a primary
    label and aliases in a ``TypeAliasTable``.

Example
-------
Register a value class::

    value_classes: ValueClassRegistry[DataValue] = ValueClassRegistry(
        DataValue, "datavalues"
    )

    @value_classes.register(ValueKind.TEXT)
    class StringValue(DataValue):
        ...

Define a new type id on top of an existing kind::

    registry = DataTypeRegistry(value_classes)
    registry.register_datatype("_foo", ValueKind.TEXT, DataItemType.BLOB, label="Foo")
    registry.value_class_for("_foo")   # StringValue
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

from semval.dataitems.nodes import DataItemType
from semval.datatypes.aliases import TypeAliasTable
from semval.errors import DataTypeAlreadyRegisteredError, DataTypeNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RESERVED_PREFIX = "-"


class ValueKind(Enum):
    """Discriminator for the closed set of value implementations."""

    TEXT = auto()
    CODE = auto()
    WIKIPAGE = auto()
    NUMBER = auto()
    QUANTITY = auto()
    TIME = auto()
    URI = auto()
    EMAIL = auto()
    TELEPHONE = auto()
    BOOLEAN = auto()
    PROPERTY = auto()
    TYPE = auto()
    ERROR = auto()


@dataclass(frozen=True)
class DataTypeDefinition:
    """A registered type id.

    Parameters
    ----------
    type_id:
        Canonical type id, e.g. ``"_txt"``.
    kind:
        The value implementation used for this type.
    data_item_type:
        The structural kind of the data items this type produces.
    label:
        Primary user-facing label, empty for internal types.
    """

    type_id: str
    kind: ValueKind
    data_item_type: DataItemType
    label: str = ""


class ValueClassRegistry(Generic[T]):
    """Type-safe registry from ``ValueKind`` to implementation class.

    Parameters
    ----------
    base_class:
        The base class all registered classes must subclass.
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._classes: dict[ValueKind, type[T]] = {}

    def register(self, kind: ValueKind) -> Callable[[type[T]], type[T]]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        DataTypeAlreadyRegisteredError
            If ``kind`` already has a class in this registry.
        TypeError
            If the decorated class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(kind, cls)
            return cls

        return decorator

    def register_class(self, kind: ValueKind, cls: type[T]) -> None:
        """Register ``cls`` for ``kind`` without the decorator syntax."""
        if not isinstance(kind, ValueKind):
            raise TypeError(f"kind must be a ValueKind, got {type(kind).__name__}")
        if kind in self._classes:
            raise DataTypeAlreadyRegisteredError(kind.name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} under {kind.name}: "
                f"it must be a subclass of {self._base_class.__name__}."
            )
        self._classes[kind] = cls
        logger.debug(
            "Registered value class %s -> %s in registry %r",
            kind.name,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, kind: ValueKind) -> None:
        """Remove the class registered for ``kind``.

        Raises
        ------
        DataTypeNotFoundError
            If ``kind`` is not currently registered.
        """
        if kind not in self._classes:
            raise DataTypeNotFoundError(kind.name, self._name)
        del self._classes[kind]
        logger.debug("Deregistered value class %s from registry %r", kind.name, self._name)

    def get(self, kind: ValueKind) -> type[T]:
        """Return the class registered for ``kind``.

        Raises
        ------
        DataTypeNotFoundError
            If no class is registered for ``kind``.
        """
        try:
            return self._classes[kind]
        except KeyError:
            raise DataTypeNotFoundError(kind.name, self._name) from None

    def kinds(self) -> list[ValueKind]:
        """Return the registered kinds in declaration order."""
        return [kind for kind in ValueKind if kind in self._classes]

    def __contains__(self, kind: object) -> bool:
        return kind in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return (
            f"ValueClassRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"kinds={[k.name for k in self.kinds()]})"
        )


class DataTypeRegistry(Generic[T]):
    """Registry of type ids, their labels and their value classes.

    Parameters
    ----------
    value_classes:
        The ``ValueKind`` dispatch table.
    aliases:
        Label table to use.  A fresh one is created when omitted.
    """

    def __init__(
        self,
        value_classes: ValueClassRegistry[T],
        aliases: TypeAliasTable | None = None,
    ) -> None:
        self._value_classes = value_classes
        self._aliases = aliases if aliases is not None else TypeAliasTable()
        self._definitions: dict[str, DataTypeDefinition] = {}
        self._default_type_ids: dict[DataItemType, str] = {}

    @property
    def aliases(self) -> TypeAliasTable:
        return self._aliases

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_datatype(
        self,
        type_id: str,
        kind: ValueKind,
        data_item_type: DataItemType,
        label: str = "",
        aliases: Iterable[str] = (),
    ) -> DataTypeDefinition:
        """Define ``type_id`` on top of an existing value kind.

        The first type id registered for a data item type becomes the
        default used when a value is built from a bare data item.

        Raises
        ------
        DataTypeAlreadyRegisteredError
            If ``type_id`` is already defined.
        DataTypeNotFoundError
            If no value class is registered for ``kind``.
        ValueError
            If ``type_id`` is empty or starts with the reserved prefix.
        """
        if not isinstance(type_id, str):
            raise TypeError(f"type_id must be a str, got {type(type_id).__name__}")
        if not type_id or type_id.startswith(RESERVED_PREFIX):
            raise ValueError(f"Invalid type id {type_id!r}")
        if type_id in self._definitions:
            raise DataTypeAlreadyRegisteredError(type_id, "datatypes")
        if kind not in self._value_classes:
            raise DataTypeNotFoundError(kind.name, "datatypes")

        definition = DataTypeDefinition(type_id, kind, data_item_type, label)
        self._definitions[type_id] = definition
        self._default_type_ids.setdefault(data_item_type, type_id)
        if label:
            self._aliases.register_label(type_id, label)
        for alias in aliases:
            self._aliases.register_alias(type_id, alias)
        logger.debug("Registered datatype %r as %s", type_id, kind.name)
        return definition

    def register_alias(self, type_id: str, label: str) -> None:
        """Add ``label`` as an alias of ``type_id``."""
        self._aliases.register_alias(type_id, label)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_definition(self, type_id: str) -> DataTypeDefinition | None:
        return self._definitions.get(type_id)

    def resolve_type_id(self, name: str) -> str:
        """Normalize a type id or label to a registered type id.

        Returns ``""`` for reserved, empty and unknown names.
        """
        if not name or name.startswith(RESERVED_PREFIX):
            return ""
        if name in self._definitions:
            return name
        type_id = self._aliases.find_type_id(name)
        return type_id if type_id in self._definitions else ""

    def value_class_for(self, type_id: str) -> type[T] | None:
        """Return the value class for a registered ``type_id``."""
        definition = self._definitions.get(type_id)
        if definition is None:
            return None
        return self._value_classes.get(definition.kind)

    def get_data_item_type(self, type_id: str) -> DataItemType:
        """Return the data item type of ``type_id``; NOTYPE if unknown."""
        definition = self._definitions.get(type_id)
        return definition.data_item_type if definition else DataItemType.NOTYPE

    def default_type_id(self, data_item_type: DataItemType) -> str:
        """Return the canonical type id for items of ``data_item_type``."""
        return self._default_type_ids.get(data_item_type, "")

    def find_type_id(self, label: str) -> str:
        return self._aliases.find_type_id(label)

    def find_type_label(self, type_id: str) -> str:
        return self._aliases.find_type_label(type_id)

    def known_labels(self) -> set[str]:
        return self._aliases.known_labels()

    def known_type_labels(self) -> dict[str, str]:
        return self._aliases.known_type_labels()

    def type_ids(self) -> list[str]:
        """Return all registered type ids in registration order."""
        return list(self._definitions)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"DataTypeRegistry(types={self.type_ids()})"
