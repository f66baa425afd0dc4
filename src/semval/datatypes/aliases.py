"""Mapping between canonical type ids and user-facing type labels.

Each type id has at most one *primary* label, fixed by the first
registration for that id.  Any number of *aliases* can be added later;
they resolve to the id but never replace the primary label.

Example
-------
::

    table = TypeAliasTable()
    table.register_label("_txt", "Text")
    table.register_alias("_txt", "String")

    table.find_type_id("String")    # "_txt"
    table.find_type_label("_txt")   # "Text"
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _require_text(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if not value:
        raise ValueError(f"{name} must not be empty")
    return value


class TypeAliasTable:
    """Bidirectional type id / label table.

    Lookups are exact and case-sensitive.  Primary labels take priority
    over aliases when both name the same label.
    """

    def __init__(self) -> None:
        self._primary_labels: dict[str, str] = {}
        self._primary_index: dict[str, str] = {}
        self._alias_index: dict[str, str] = {}

    def register_label(self, type_id: str, label: str) -> None:
        """Bind ``label`` to ``type_id``.

        The first label bound to a type id becomes its primary label.  If
        ``type_id`` already has one, ``label`` is recorded as an alias.
        """
        _require_text("type_id", type_id)
        _require_text("label", label)
        if type_id in self._primary_labels:
            self.register_alias(type_id, label)
            return
        self._primary_labels[type_id] = label
        self._primary_index.setdefault(label, type_id)
        logger.debug("Registered type label %r -> %r", label, type_id)

    def register_alias(self, type_id: str, label: str) -> None:
        """Add ``label`` as a secondary name for ``type_id``."""
        _require_text("type_id", type_id)
        _require_text("label", label)
        self._alias_index[label] = type_id
        logger.debug("Registered type alias %r -> %r", label, type_id)

    def find_type_id(self, label: str) -> str:
        """Return the type id for ``label``, or ``""`` if it is unknown."""
        if label in self._primary_index:
            return self._primary_index[label]
        return self._alias_index.get(label, "")

    def find_type_label(self, type_id: str) -> str:
        """Return the primary label of ``type_id``, or ``""`` if it has none."""
        return self._primary_labels.get(type_id, "")

    def aliases_of(self, type_id: str) -> list[str]:
        """Return the aliases of ``type_id`` in registration order."""
        return [label for label, tid in self._alias_index.items() if tid == type_id]

    def known_labels(self) -> set[str]:
        """Return the set of primary labels."""
        return set(self._primary_labels.values())

    def known_type_labels(self) -> dict[str, str]:
        """Return a copy of the type id -> primary label mapping."""
        return dict(self._primary_labels)

    def __contains__(self, label: object) -> bool:
        return label in self._primary_index or label in self._alias_index

    def __len__(self) -> int:
        return len(self._primary_labels)

    def __repr__(self) -> str:
        return (
            f"TypeAliasTable(labels={len(self._primary_labels)}, "
            f"aliases={len(self._alias_index)})"
        )
