"""DataValueFactory: the single entry point for building value objects.

All four constructors end in ``new_type_id_value``.  Recoverable
problems (unknown or reserved type ids, malformed property labels,
unknown internal properties) never raise: they produce an
``ErrorValue`` whose ``get_errors()`` explains what went wrong.  Passing
arguments of the wrong type is a programming error and raises
``TypeError``.

Usage
-----
::

    from semval.context import get_context

    factory = get_context().factory
    value = factory.new_type_id_value("_num", "9001")
    value.get_wiki_value()          # "9,001"

    value = factory.new_property_value("Has population", "9,001")
    value.get_property()            # DIProperty("Has_population")
"""
from __future__ import annotations

import logging

from semval import errors
from semval.dataitems.nodes import DataItem, DataItemType, DIError, DIProperty, DIWikiPage
from semval.datatypes.builtins import ERROR_TYPE_ID, PROPERTY_TYPE_ID
from semval.datatypes.registry import RESERVED_PREFIX, DataTypeRegistry
from semval.datavalues.base import DataValue
from semval.datavalues.error import ErrorValue
from semval.errors import IssueKind, ValueIssue
from semval.properties import INTERNAL_PREFIX, INVERSE_PREFIX, PropertyRegistry

logger = logging.getLogger(__name__)


def _check_optional(name: str, value: object, expected: type) -> None:
    if value is not None and not isinstance(value, expected):
        raise TypeError(f"{name} must be a {expected.__name__} or None, got {type(value).__name__}")


class DataValueFactory:
    """Builds ``DataValue`` objects from type ids, properties or data items.

    Parameters
    ----------
    registry:
        Datatype registry used to select value classes.
    properties:
        Property registry used to resolve labels and property types.
    """

    def __init__(
        self,
        registry: DataTypeRegistry[DataValue],
        properties: PropertyRegistry,
    ) -> None:
        self._registry = registry
        self._properties = properties

    @property
    def registry(self) -> DataTypeRegistry[DataValue]:
        return self._registry

    @property
    def properties(self) -> PropertyRegistry:
        return self._properties

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def new_type_id_value(
        self,
        type_id: str,
        raw: object = None,
        caption: str | None = None,
        property: DIProperty | None = None,
        context_subject: DIWikiPage | None = None,
    ) -> DataValue:
        """Build a value of type ``type_id`` (a type id or a type label).

        ``caption``, ``property`` and ``context_subject`` are attached as
        metadata and never change the validation outcome.  ``raw=None``
        leaves the value empty.
        """
        if not isinstance(type_id, str):
            raise TypeError(f"type_id must be a str, got {type(type_id).__name__}")
        _check_optional("caption", caption, str)
        _check_optional("property", property, DIProperty)
        _check_optional("context_subject", context_subject, DIWikiPage)

        if type_id.startswith(RESERVED_PREFIX):
            issue = ValueIssue(
                IssueKind.UNKNOWN_TYPE,
                errors.RESERVED_TYPE_PREFIX,
                f"{type_id!r} uses the reserved prefix {RESERVED_PREFIX!r}.",
            )
            return self._error_value(type_id, issue, raw, caption, property, context_subject)

        resolved = self._registry.resolve_type_id(type_id)
        value_class = self._registry.value_class_for(resolved) if resolved else None
        if value_class is None:
            issue = ValueIssue(
                IssueKind.UNKNOWN_TYPE,
                errors.UNKNOWN_TYPE,
                f"{type_id!r} is not a known datatype.",
            )
            return self._error_value(type_id, issue, raw, caption, property, context_subject)

        value = value_class(resolved, self._registry, self._properties)
        value.set_property(property)
        value.set_context_subject(context_subject)
        if raw is not None:
            value.set_user_value(raw, caption)
        else:
            value.set_caption(caption)
        return value

    def new_property_object_value(
        self,
        property: DIProperty,
        raw: object = None,
        caption: str | None = None,
        context_subject: DIWikiPage | None = None,
    ) -> DataValue:
        """Build a value for ``property`` using the property's type."""
        if not isinstance(property, DIProperty):
            raise TypeError(f"property must be a DIProperty, got {type(property).__name__}")
        if not self._properties.is_valid(property):
            issue = ValueIssue(
                IssueKind.INVALID_PROPERTY,
                errors.UNKNOWN_INTERNAL_PROPERTY,
                f"{property.key!r} is not a known internal property.",
            )
            return self._error_value(ERROR_TYPE_ID, issue, raw, caption, None, context_subject)
        type_id = self._properties.find_type_id(property)
        return self.new_type_id_value(type_id, raw, caption, property, context_subject)

    def new_property_value(
        self,
        label: str,
        raw: object = None,
        caption: str | None = None,
        context_subject: DIWikiPage | None = None,
    ) -> DataValue:
        """Build a value for the property named ``label``.

        Inverse (``-``), malformed and unregistered internal labels yield
        an ``ErrorValue``.  Registered internal (``_``) keys yield a
        ``PropertyValue`` for the key itself.
        """
        if not isinstance(label, str):
            raise TypeError(f"label must be a str, got {type(label).__name__}")
        text = label.strip()

        if text.startswith(INVERSE_PREFIX):
            issue = ValueIssue(
                IssueKind.INVALID_PROPERTY,
                errors.INVERSE_PROPERTY_ANNOTATION,
                f"Values cannot be annotated on the inverse property {text!r}.",
            )
            return self._error_value(ERROR_TYPE_ID, issue, raw, caption, None, context_subject)

        resolved = self._properties.resolve_label(text)
        if isinstance(resolved, ValueIssue):
            return self._error_value(ERROR_TYPE_ID, resolved, raw, caption, None, context_subject)

        if text.startswith(INTERNAL_PREFIX):
            return self.new_type_id_value(
                PROPERTY_TYPE_ID, text, caption, context_subject=context_subject
            )
        return self.new_property_object_value(resolved, raw, caption, context_subject)

    def new_data_item_value(
        self,
        item: DataItem,
        property: DIProperty | None = None,
        caption: str | None = None,
    ) -> DataValue:
        """Wrap an existing data item in the matching value object.

        The type follows the item's kind.  A property's declared type is
        used only when it produces items of that same kind.
        """
        if not isinstance(item, DataItem):
            raise TypeError(f"item must be a DataItem, got {type(item).__name__}")
        _check_optional("property", property, DIProperty)
        _check_optional("caption", caption, str)

        if isinstance(item, DIError):
            issues = [
                ValueIssue(IssueKind.VALIDATION_FAILURE, errors.MALFORMED_VALUE, message)
                for message in item.errors
            ]
            value: DataValue = ErrorValue(ERROR_TYPE_ID, self._registry, self._properties, issues)
            value.set_property(property)
            value.set_caption(caption)
            return value

        type_id = ""
        if property is not None and self._properties.is_valid(property):
            candidate = self._properties.find_type_id(property)
            if self._registry.get_data_item_type(candidate) == item.di_type:
                type_id = candidate
        if not type_id:
            type_id = self._registry.default_type_id(item.di_type)

        value_class = self._registry.value_class_for(type_id)
        if value_class is None:
            issue = ValueIssue(
                IssueKind.UNKNOWN_TYPE,
                errors.UNKNOWN_TYPE,
                f"No datatype handles {item.di_type.name} data items.",
            )
            return self._error_value(ERROR_TYPE_ID, issue, None, caption, property, None)

        value = value_class(type_id, self._registry, self._properties)
        value.set_data_item(item)
        value.set_property(property)
        value.set_caption(caption)
        return value

    def _error_value(
        self,
        type_id: str,
        issue: ValueIssue,
        raw: object,
        caption: str | None,
        property: DIProperty | None,
        context_subject: DIWikiPage | None,
    ) -> ErrorValue:
        logger.debug("Returning error value for %r: %s", type_id, issue)
        value = ErrorValue(type_id, self._registry, self._properties, (issue,))
        value.set_property(property)
        value.set_context_subject(context_subject)
        if raw is not None:
            value.set_user_value(raw, caption)
        else:
            value.set_caption(caption)
        return value

    # ------------------------------------------------------------------
    # Type table passthroughs
    # ------------------------------------------------------------------

    def find_type_id(self, label: str) -> str:
        return self._registry.find_type_id(label)

    def find_type_label(self, type_id: str) -> str:
        return self._registry.find_type_label(type_id)

    def register_datatype_alias(self, type_id: str, label: str) -> None:
        self._registry.register_alias(type_id, label)

    def known_type_labels(self) -> dict[str, str]:
        return self._registry.known_type_labels()

    def get_data_item_id(self, type_id: str) -> DataItemType:
        return self._registry.get_data_item_type(type_id)
