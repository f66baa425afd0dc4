"""Page reference values.

Titles are normalized the way page titles usually are: underscores and
runs of whitespace become single spaces, and the first letter is
upper-cased.  A known namespace name followed by ``:`` selects that
namespace.
"""
from __future__ import annotations

import re

from semval.dataitems.nodes import DataItem, DataItemType, DIWikiPage
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes
from semval.properties import normalize_label as normalize_title

NAMESPACES: dict[str, int] = {
    "Talk": 1,
    "User": 2,
    "Project": 4,
    "File": 6,
    "Template": 10,
    "Help": 12,
    "Category": 14,
    "Property": 102,
    "Concept": 108,
}
NAMESPACE_NAMES: dict[int, str] = {number: name for name, number in NAMESPACES.items()}

MAX_TITLE_LENGTH = 255

_ILLEGAL_TITLE_CHARS = re.compile(r"[\[\]{}|#<>]")


@value_classes.register(ValueKind.WIKIPAGE)
class WikiPageValue(DataValue):
    """A reference to a page."""

    data_item_type = DataItemType.WIKIPAGE

    def _parse_user_value(self, text: str) -> None:
        if _ILLEGAL_TITLE_CHARS.search(text):
            self._malformed(f"{text!r} contains characters that are not allowed in page titles.")
            return

        namespace = 0
        title = text
        prefix, sep, rest = text.partition(":")
        if sep and normalize_title(prefix) in NAMESPACES:
            namespace = NAMESPACES[normalize_title(prefix)]
            title = rest

        title = normalize_title(title)
        if not title:
            self._malformed(f"{text!r} does not name a page.")
            return
        if len(title) > MAX_TITLE_LENGTH:
            self._malformed(f"Page titles are limited to {MAX_TITLE_LENGTH} characters.")
            return
        self._data_item = DIWikiPage(title.replace(" ", "_"), namespace)

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIWikiPage)
        namespace = NAMESPACE_NAMES.get(item.namespace)
        text = f"{namespace}:{item.title}" if namespace else item.title
        if item.subobject:
            text += f"#{item.subobject}"
        return text
