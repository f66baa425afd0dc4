"""Text and code values."""
from __future__ import annotations

from semval.dataitems.nodes import DataItem, DataItemType, DIBlob
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes


@value_classes.register(ValueKind.TEXT)
class StringValue(DataValue):
    """Free text; any non-empty input is accepted verbatim."""

    data_item_type = DataItemType.BLOB

    def _parse_user_value(self, text: str) -> None:
        self._data_item = DIBlob(text)

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIBlob)
        return item.text


@value_classes.register(ValueKind.CODE)
class CodeValue(StringValue):
    """Preformatted text, rendered inside ``<pre>`` tags."""

    def get_short_wiki_text(self) -> str:
        if self._caption is not None or not self.is_valid():
            return super().get_short_wiki_text()
        return f"<pre>{self.get_wiki_value()}</pre>"
