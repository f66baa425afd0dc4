"""The error value, returned when no value kind could be selected."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from semval import errors
from semval.dataitems.nodes import DataItem, DataItemType, DIError
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes
from semval.errors import IssueKind, ValueIssue

if TYPE_CHECKING:
    from semval.datatypes.registry import DataTypeRegistry
    from semval.properties import PropertyRegistry


@value_classes.register(ValueKind.ERROR)
class ErrorValue(DataValue):
    """A value that always carries at least one issue.

    The raw input is kept so that callers can show it next to the errors.

    Parameters
    ----------
    type_id:
        The type id that was requested.
    issues:
        Why no real value could be built.  A generic UNKNOWN_TYPE issue is
        used when empty.
    """

    data_item_type = DataItemType.ERROR

    def __init__(
        self,
        type_id: str,
        registry: "DataTypeRegistry[DataValue] | None" = None,
        properties: "PropertyRegistry | None" = None,
        issues: Iterable[ValueIssue] = (),
    ) -> None:
        super().__init__(type_id, registry, properties)
        self._seed_issues = tuple(issues) or (
            ValueIssue(
                IssueKind.UNKNOWN_TYPE,
                errors.UNKNOWN_TYPE,
                f"{type_id!r} is not a known datatype.",
            ),
        )
        self._issues = list(self._seed_issues)

    def _initial_issues(self) -> tuple[ValueIssue, ...]:
        return self._seed_issues

    def _load_data_item(self, item: DataItem) -> None:
        assert isinstance(item, DIError)
        known = set(self.get_errors())
        for message in item.errors:
            if message not in known:
                self._malformed(message)

    def _parse_user_value(self, text: str) -> None:
        """Never reached: the seeded issues stop parsing."""

    def _format_wiki_value(self, item: DataItem) -> str:
        return ""
