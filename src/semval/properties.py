"""Property resolution.

Turns user-facing property labels into ``DIProperty`` items and decides
which type id a property's values use.

* Internal properties (keys starting with ``_``) have a fixed type and a
  fixed label, registered in ``BUILTIN_PROPERTIES``.
* User properties use the type declared with ``declare_user_type``, or
  the configured default type (Page) when nothing was declared.
* A leading ``-`` on a label denotes the inverse of a property.  Inverse
  properties always hold page references.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from semval import errors
from semval.dataitems.nodes import DIProperty
from semval.errors import IssueKind, ValueIssue

logger = logging.getLogger(__name__)

INVERSE_PREFIX = "-"
INTERNAL_PREFIX = "_"

_ILLEGAL_LABEL_CHARS = re.compile(r"[\[\]{}|#<>]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class InternalProperty:
    """A system property with a fixed type."""

    key: str
    type_id: str
    label: str = ""
    visible: bool = True


BUILTIN_PROPERTIES: tuple[InternalProperty, ...] = (
    InternalProperty("_TYPE", "__typ", "Has type"),
    InternalProperty("_URI", "_uri", "Equivalent URI"),
    InternalProperty("_MDAT", "_dat", "Modification date"),
    InternalProperty("_ERRP", "_wpg", "Has improper value for"),
    InternalProperty("_ASKST", "_cod", "Query string"),
    InternalProperty("_ASKSI", "_num", "Query size"),
    InternalProperty("_ASKDE", "_num", "Query depth"),
    InternalProperty("_ASKFO", "_txt", "Query format"),
    InternalProperty("_SKEY", "_txt", visible=False),
)


def normalize_label(label: str) -> str:
    """Return ``label`` with underscores as spaces, collapsed whitespace
    and an upper-case first letter."""
    text = _WHITESPACE.sub(" ", label.replace("_", " ")).strip()
    return text[:1].upper() + text[1:]


def _invalid(code: str, message: str) -> ValueIssue:
    return ValueIssue(IssueKind.INVALID_PROPERTY, code, message)


class PropertyRegistry:
    """Internal property table plus user property type declarations.

    Parameters
    ----------
    default_type_id:
        Type id for user properties without a declared type.
    internal:
        Internal properties to register up front.
    """

    def __init__(
        self,
        default_type_id: str = "_wpg",
        internal: tuple[InternalProperty, ...] = BUILTIN_PROPERTIES,
    ) -> None:
        self._default_type_id = default_type_id
        self._internal: dict[str, InternalProperty] = {}
        self._internal_labels: dict[str, str] = {}
        self._user_types: dict[str, str] = {}
        for prop in internal:
            self.register_internal(prop)

    @property
    def default_type_id(self) -> str:
        return self._default_type_id

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_internal(self, prop: InternalProperty) -> None:
        """Register an internal property.

        Raises
        ------
        ValueError
            If the key lacks the internal prefix or is already registered.
        """
        if not prop.key.startswith(INTERNAL_PREFIX):
            raise ValueError(f"Internal property keys must start with {INTERNAL_PREFIX!r}")
        if prop.key in self._internal:
            raise ValueError(f"Internal property {prop.key!r} is already registered")
        self._internal[prop.key] = prop
        if prop.label:
            self._internal_labels[prop.label] = prop.key
        logger.debug("Registered internal property %r (%s)", prop.key, prop.type_id)

    def declare_user_type(self, label: str, type_id: str) -> DIProperty:
        """Declare the type of the user property named ``label``."""
        resolved = self.resolve_label(label)
        if isinstance(resolved, ValueIssue) or not resolved.is_user_defined:
            raise ValueError(f"{label!r} is not a valid user property label")
        self._user_types[resolved.key] = type_id
        return resolved

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_internal(self, key: str) -> bool:
        return key in self._internal

    def is_valid(self, prop: DIProperty) -> bool:
        """Return False for internal keys that are not registered."""
        return prop.is_user_defined or prop.key in self._internal

    def find_type_id(self, prop: DIProperty) -> str:
        """Return the type id used by values of ``prop``; ``""`` if unknown."""
        if prop.inverse:
            return "_wpg"
        if not prop.is_user_defined:
            internal = self._internal.get(prop.key)
            return internal.type_id if internal else ""
        return self._user_types.get(prop.key, self._default_type_id)

    def label_for(self, prop: DIProperty) -> str:
        """Return the display label of ``prop`` (``-`` marks inverses)."""
        if prop.is_user_defined:
            label = prop.label
        else:
            internal = self._internal.get(prop.key)
            label = internal.label if internal and internal.label else prop.key
        return f"{INVERSE_PREFIX}{label}" if prop.inverse else label

    def resolve_label(self, label: str) -> DIProperty | ValueIssue:
        """Turn a user-facing label into a property.

        Returns a ``ValueIssue`` of kind INVALID_PROPERTY for empty,
        malformed and unknown internal labels.
        """
        if not isinstance(label, str):
            raise TypeError(f"Property label must be a str, got {type(label).__name__}")
        text = label.strip()
        inverse = text.startswith(INVERSE_PREFIX)
        if inverse:
            text = text[len(INVERSE_PREFIX) :].strip()
        if not text:
            return _invalid(errors.INVALID_PROPERTY_LABEL, "Property label is empty.")

        if text.startswith(INTERNAL_PREFIX):
            if text not in self._internal:
                return _invalid(
                    errors.UNKNOWN_INTERNAL_PROPERTY,
                    f"{text!r} is not a known internal property.",
                )
            return DIProperty(text, inverse)

        if _ILLEGAL_LABEL_CHARS.search(text):
            return _invalid(
                errors.INVALID_PROPERTY_LABEL,
                f"Property label {text!r} contains illegal characters.",
            )
        normalized = normalize_label(text)
        if normalized in self._internal_labels:
            return DIProperty(self._internal_labels[normalized], inverse)
        return DIProperty(normalized.replace(" ", "_"), inverse)

    def internal_properties(self) -> list[InternalProperty]:
        return list(self._internal.values())

    def __repr__(self) -> str:
        return (
            f"PropertyRegistry(internal={len(self._internal)}, "
            f"user_types={len(self._user_types)}, default={self._default_type_id!r})"
        )
