"""Number and quantity values.

Input may group thousands with commas (``"9,001"``) and use ``.`` as the
decimal separator.  Wiki values are always grouped, so ``9001`` renders
as ``"9,001"``.
"""
from __future__ import annotations

import math
import re

from semval.dataitems.nodes import DataItem, DataItemType, DINumber
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes

_NUMBER = re.compile(
    r"^(?P<number>[+-]?(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?(?:[eE][+-]?\d+)?)\s*(?P<rest>.*)$"
)
_UNIT = re.compile(r"^[^\d\s,.+-][^\s]*(?: [^\d\s][^\s]*)?$")


def parse_number(text: str) -> tuple[float | int, str] | None:
    """Split ``text`` into a number and the trailing text.

    Returns ``None`` when ``text`` does not start with a number.
    """
    match = _NUMBER.match(text.strip())
    if match is None:
        return None
    literal = match.group("number").replace(",", "")
    number: float | int
    if any(c in literal for c in ".eE"):
        number = float(literal)
    else:
        number = int(literal)
    return number, match.group("rest").strip()


def format_number(number: float | int) -> str:
    """Render ``number`` with thousands separators."""
    if isinstance(number, int):
        return f"{number:,}"
    if number.is_integer() and abs(number) < 1e15:
        return f"{int(number):,}"
    return format(number, ",.15g")


@value_classes.register(ValueKind.NUMBER)
class NumberValue(DataValue):
    """A plain number without unit."""

    data_item_type = DataItemType.NUMBER

    @property
    def number(self) -> float | int | None:
        item = self._data_item
        return item.number if isinstance(item, DINumber) and not self._issues else None

    def _parse_number(self, text: str) -> tuple[float | int, str] | None:
        parsed = parse_number(text)
        if parsed is None:
            self._malformed(f"{text!r} is not a number.")
            return None
        number, rest = parsed
        if isinstance(number, float) and not math.isfinite(number):
            self._malformed(f"{text!r} is out of range.")
            return None
        return number, rest

    def _parse_user_value(self, text: str) -> None:
        parsed = self._parse_number(text)
        if parsed is None:
            return
        number, rest = parsed
        if rest:
            self._malformed(f"{text!r} is not a number; unexpected {rest!r}.")
            return
        self._data_item = DINumber(number)

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DINumber)
        return format_number(item.number)


@value_classes.register(ValueKind.QUANTITY)
class QuantityValue(NumberValue):
    """A number followed by a unit, e.g. ``"12.5 km"``."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._unit = ""

    @property
    def unit(self) -> str:
        return self._unit

    def _parse_user_value(self, text: str) -> None:
        parsed = self._parse_number(text)
        if parsed is None:
            return
        number, unit = parsed
        if not unit:
            self._malformed(f"{text!r} has no unit.")
            return
        if not _UNIT.match(unit):
            self._malformed(f"{unit!r} is not a valid unit.")
            return
        self._unit = unit
        self._data_item = DINumber(number, unit)

    def _load_data_item(self, item: DataItem) -> None:
        assert isinstance(item, DINumber)
        self._unit = item.unit

    def _format_wiki_value(self, item: DataItem) -> str:
        number = super()._format_wiki_value(item)
        return f"{number} {self._unit}" if self._unit else number
