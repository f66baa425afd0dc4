"""Base class for value objects.

A ``DataValue`` turns raw user input into a data item, collecting every
problem it meets as a ``ValueIssue`` instead of raising.  Callers must
check ``get_errors()`` before trusting ``get_wiki_value()`` or
``get_data_item()``; values with errors still report the raw input as
their wiki value and a ``DIError`` as their data item.

Subclasses implement two hooks:

``_parse_user_value(text)``
    Validate the stripped, non-empty ``text`` and set ``self._data_item``
    or record issues.
``_format_wiki_value(item)``
    Render a valid data item back to canonical wiki text.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from semval import errors
from semval.dataitems.nodes import DataItem, DataItemType, DIError, DIProperty, DIWikiPage
from semval.datatypes.registry import ValueClassRegistry
from semval.errors import IssueKind, ValueIssue

if TYPE_CHECKING:
    from semval.datatypes.registry import DataTypeRegistry
    from semval.properties import PropertyRegistry


def coerce_raw_value(raw: object) -> str:
    """Return the textual form of a raw input value.

    Raises
    ------
    TypeError
        If ``raw`` is not a str, int or float.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, float):
        return str(int(raw)) if raw.is_integer() else repr(raw)
    raise TypeError(f"Raw value must be a str, int or float, got {type(raw).__name__}")


class DataValue(ABC):
    """A typed, validated value built from user input or a data item.

    Parameters
    ----------
    type_id:
        The type id this value was created for.
    registry:
        Datatype registry used by values that look up other types.
        Defaults to the one in the active context.
    properties:
        Property registry used by property-valued types.  Defaults to
        the one in the active context.
    """

    data_item_type: ClassVar[DataItemType] = DataItemType.NOTYPE

    def __init__(
        self,
        type_id: str,
        registry: "DataTypeRegistry[DataValue] | None" = None,
        properties: "PropertyRegistry | None" = None,
    ) -> None:
        self._type_id = type_id
        self._registry = registry
        self._properties = properties
        self._issues: list[ValueIssue] = []
        self._data_item: DataItem | None = None
        self._raw: str | None = None
        self._caption: str | None = None
        self._property: DIProperty | None = None
        self._context_subject: DIWikiPage | None = None

    # ------------------------------------------------------------------
    # Collaborators and metadata
    # ------------------------------------------------------------------

    @property
    def type_id(self) -> str:
        return self._type_id

    @property
    def registry(self) -> "DataTypeRegistry[DataValue]":
        if self._registry is None:
            from semval.context import get_context

            self._registry = get_context().registry
        return self._registry

    @property
    def properties(self) -> "PropertyRegistry":
        if self._properties is None:
            from semval.context import get_context

            self._properties = get_context().properties
        return self._properties

    def get_property(self) -> DIProperty | None:
        """Return the property this value was annotated with, if any."""
        return self._property

    def set_property(self, prop: DIProperty | None) -> None:
        if prop is not None and not isinstance(prop, DIProperty):
            raise TypeError(f"Expected a DIProperty, got {type(prop).__name__}")
        self._property = prop

    @property
    def context_subject(self) -> DIWikiPage | None:
        """The page this value was entered on, if known."""
        return self._context_subject

    def set_context_subject(self, subject: DIWikiPage | None) -> None:
        if subject is not None and not isinstance(subject, DIWikiPage):
            raise TypeError(f"Expected a DIWikiPage, got {type(subject).__name__}")
        self._context_subject = subject

    @property
    def caption(self) -> str | None:
        return self._caption

    def set_caption(self, caption: str | None) -> None:
        if caption is not None and not isinstance(caption, str):
            raise TypeError(f"Caption must be a str, got {type(caption).__name__}")
        self._caption = caption or None

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_user_value(self, raw: object, caption: str | None = None) -> "DataValue":
        """Validate ``raw`` and replace the current content with it."""
        text = coerce_raw_value(raw)
        self.set_caption(caption)
        self._raw = text
        self._data_item = None
        self._issues = list(self._initial_issues())
        stripped = text.strip()
        if not self._issues:
            if stripped:
                self._parse_user_value(stripped)
            else:
                self.add_issue(
                    IssueKind.VALIDATION_FAILURE, errors.EMPTY_VALUE, "No value was given."
                )
        return self

    def set_data_item(self, item: DataItem) -> "DataValue":
        """Replace the current content with a data item.

        Raises
        ------
        TypeError
            If the item's type does not match this value kind.
        """
        if not isinstance(item, DataItem) or item.di_type != self.data_item_type:
            raise TypeError(
                f"{type(self).__name__} cannot hold a {type(item).__name__} data item"
            )
        self._issues = list(self._initial_issues())
        self._data_item = item
        self._raw = None
        self._load_data_item(item)
        return self

    def add_issue(self, kind: IssueKind, code: str, message: str) -> None:
        self._issues.append(ValueIssue(kind, code, message))

    def _malformed(self, message: str) -> None:
        self.add_issue(IssueKind.VALIDATION_FAILURE, errors.MALFORMED_VALUE, message)

    def _initial_issues(self) -> tuple[ValueIssue, ...]:
        return ()

    def _load_data_item(self, item: DataItem) -> None:
        """Hook for kinds that need to check or unpack a data item."""

    @abstractmethod
    def _parse_user_value(self, text: str) -> None:
        """Validate ``text`` and set ``self._data_item`` or record issues."""

    @abstractmethod
    def _format_wiki_value(self, item: DataItem) -> str:
        """Render a valid data item as wiki text."""

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def issues(self) -> list[ValueIssue]:
        return list(self._issues)

    def get_errors(self) -> list[str]:
        """Return error messages in the order they were found."""
        return [issue.message for issue in self._issues]

    def is_valid(self) -> bool:
        return not self._issues and self._data_item is not None

    def get_data_item(self) -> DataItem | None:
        """Return the data item; a ``DIError`` when the value has errors."""
        if self._issues:
            return DIError(tuple(self.get_errors()))
        return self._data_item

    def get_wiki_value(self) -> str:
        """Return the canonical wiki text, or the raw input for invalid values."""
        if self._issues or self._data_item is None:
            return self._raw.strip() if self._raw is not None else ""
        return self._format_wiki_value(self._data_item)

    def get_short_wiki_text(self) -> str:
        """Return the caption if one was given, otherwise the wiki value."""
        return self._caption if self._caption is not None else self.get_wiki_value()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type_id={self._type_id!r}, "
            f"value={self.get_wiki_value()!r}, errors={len(self._issues)})"
        )


value_classes: ValueClassRegistry[DataValue] = ValueClassRegistry(DataValue, "datavalues")
