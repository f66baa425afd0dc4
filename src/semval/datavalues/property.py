"""Values naming a property or a datatype."""
from __future__ import annotations

from semval import errors
from semval.dataitems.nodes import DataItem, DataItemType, DIProperty, DIUri
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes
from semval.errors import IssueKind, ValueIssue

TYPE_URI_PREFIX = "semval:type:"


@value_classes.register(ValueKind.PROPERTY)
class PropertyValue(DataValue):
    """A property, parsed from its label.

    ``-Label`` denotes the inverse property and ``_KEY`` an internal one.
    """

    data_item_type = DataItemType.PROPERTY

    def _parse_user_value(self, text: str) -> None:
        resolved = self.properties.resolve_label(text)
        if isinstance(resolved, ValueIssue):
            self._issues.append(resolved)
            return
        self._data_item = resolved

    def _load_data_item(self, item: DataItem) -> None:
        assert isinstance(item, DIProperty)
        if not self.properties.is_valid(item):
            self.add_issue(
                IssueKind.INVALID_PROPERTY,
                errors.UNKNOWN_INTERNAL_PROPERTY,
                f"{item.key!r} is not a known internal property.",
            )

    def get_property_type_id(self) -> str:
        """Return the type id of the named property; ``""`` if invalid."""
        item = self._data_item
        if self._issues or not isinstance(item, DIProperty):
            return ""
        return self.properties.find_type_id(item)

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIProperty)
        return self.properties.label_for(item)


@value_classes.register(ValueKind.TYPE)
class TypesValue(DataValue):
    """A datatype, given by its label (``"Number"``) or type id."""

    data_item_type = DataItemType.URI

    @property
    def resolved_type_id(self) -> str:
        item = self._data_item
        if self._issues or not isinstance(item, DIUri):
            return ""
        return item.hierpart[len(TYPE_URI_PREFIX) :]

    def _parse_user_value(self, text: str) -> None:
        type_id = self.registry.resolve_type_id(text)
        if not type_id:
            self.add_issue(
                IssueKind.UNKNOWN_TYPE, errors.UNKNOWN_TYPE, f"{text!r} is not a known datatype."
            )
            return
        self._data_item = DIUri("urn", f"{TYPE_URI_PREFIX}{type_id}")

    def _load_data_item(self, item: DataItem) -> None:
        assert isinstance(item, DIUri)
        if item.scheme != "urn" or not item.hierpart.startswith(TYPE_URI_PREFIX):
            self._malformed(f"{item.uri!r} does not name a datatype.")

    def _format_wiki_value(self, item: DataItem) -> str:
        type_id = self.resolved_type_id
        return self.registry.find_type_label(type_id) or type_id
