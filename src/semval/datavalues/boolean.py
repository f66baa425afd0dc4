"""Boolean values."""
from __future__ import annotations

from semval.dataitems.nodes import DataItem, DataItemType, DIBoolean
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes

TRUE_WORDS = frozenset({"true", "yes", "y", "t", "1"})
FALSE_WORDS = frozenset({"false", "no", "n", "f", "0"})


@value_classes.register(ValueKind.BOOLEAN)
class BooleanValue(DataValue):
    data_item_type = DataItemType.BOOLEAN

    def _parse_user_value(self, text: str) -> None:
        word = text.lower()
        if word in TRUE_WORDS:
            self._data_item = DIBoolean(True)
        elif word in FALSE_WORDS:
            self._data_item = DIBoolean(False)
        else:
            self._malformed(f"{text!r} is not a truth value.")

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIBoolean)
        return "true" if item.value else "false"
