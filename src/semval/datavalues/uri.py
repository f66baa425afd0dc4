"""URI-backed values: URLs, email addresses and telephone numbers."""
from __future__ import annotations

import re
from urllib.parse import urlsplit

from semval.dataitems.nodes import DataItem, DataItemType, DIUri
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+$")
_TELEPHONE = re.compile(r"^\+\d[\d-]{3,}\d$")


def _strip_scheme(text: str, scheme: str) -> str:
    if text.lower().startswith(f"{scheme}:"):
        return text[len(scheme) + 1 :]
    return text


@value_classes.register(ValueKind.URI)
class URIValue(DataValue):
    """An absolute URI; a scheme is required."""

    data_item_type = DataItemType.URI

    def _parse_user_value(self, text: str) -> None:
        if any(c.isspace() for c in text):
            self._malformed(f"{text!r} contains whitespace.")
            return
        parts = urlsplit(text)
        if not parts.scheme or not _SCHEME.match(parts.scheme):
            self._malformed(f"{text!r} is not an absolute URI.")
            return
        if not (parts.netloc or parts.path):
            self._malformed(f"{text!r} has nothing after the scheme.")
            return
        self._data_item = DIUri.from_uri(text)

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIUri)
        return item.uri


@value_classes.register(ValueKind.EMAIL)
class EmailValue(DataValue):
    """An email address, stored as a ``mailto:`` URI."""

    data_item_type = DataItemType.URI

    def _parse_user_value(self, text: str) -> None:
        address = _strip_scheme(text, "mailto")
        if not _EMAIL.match(address):
            self._malformed(f"{text!r} is not a valid email address.")
            return
        self._data_item = DIUri("mailto", address)

    def _load_data_item(self, item: DataItem) -> None:
        assert isinstance(item, DIUri)
        if item.scheme != "mailto":
            self._malformed(f"{item.uri!r} is not a mailto URI.")

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIUri)
        return item.hierpart


@value_classes.register(ValueKind.TELEPHONE)
class TelephoneValue(DataValue):
    """An international telephone number such as ``+1-201-555-0123``."""

    data_item_type = DataItemType.URI

    def _parse_user_value(self, text: str) -> None:
        number = re.sub(r"[\s().-]+", "-", _strip_scheme(text, "tel")).strip("-")
        if not _TELEPHONE.match(number):
            self._malformed(f"{text!r} is not an international telephone number.")
            return
        self._data_item = DIUri("tel", number)

    def _load_data_item(self, item: DataItem) -> None:
        assert isinstance(item, DIUri)
        if item.scheme != "tel":
            self._malformed(f"{item.uri!r} is not a tel URI.")

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DIUri)
        return item.hierpart
