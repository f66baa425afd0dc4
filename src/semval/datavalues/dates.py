"""Date and time values.

Accepted input, case-insensitive English month names::

    1970                    year
    Jan 1970, 1970-01       month
    1 Jan 1970, 1970-01-01  day
    January 1, 1970         day
    1970-01-01 12:30:00     time (also ``T`` separated, or ``1 Jan 1970 12:30``)

Month names are matched against fixed tables, so parsing does not depend
on the process locale.  The wiki value mirrors the precision of the
input, so ``"1 Jan 1970"`` stays ``"1 Jan 1970"`` and ``"1970"`` stays
``"1970"``.
"""
from __future__ import annotations

import re

from semval.dataitems.nodes import DataItem, DataItemType, DITime, TimePrecision
from semval.datatypes.registry import ValueKind
from semval.datavalues.base import DataValue, value_classes

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_MONTHS: dict[str, int] = {
    name.lower(): number
    for names in (MONTH_ABBREVIATIONS, MONTH_NAMES)
    for number, name in enumerate(names, start=1)
}

_TIME_OF_DAY = r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
_PATTERNS = (
    re.compile(
        r"^(?P<year>\d{4})-(?P<month>\d{1,2})"
        rf"(?:-(?P<day>\d{{1,2}})(?:[T ]{_TIME_OF_DAY})?)?$"
    ),
    re.compile(rf"^(?P<day>\d{{1,2}}) (?P<month_name>[A-Za-z]+) (?P<year>\d{{4}})(?: {_TIME_OF_DAY})?$"),
    re.compile(r"^(?P<month_name>[A-Za-z]+) (?P<day>\d{1,2}), (?P<year>\d{4})$"),
    re.compile(r"^(?P<month_name>[A-Za-z]+) (?P<year>\d{4})$"),
)

_YEAR = re.compile(r"^-?\d{1,4}$")
_WHITESPACE = re.compile(r"\s+")


def _time_from_match(match: re.Match[str]) -> DITime | None:
    fields = match.groupdict()
    if fields.get("month_name") is not None:
        month = _MONTHS.get(fields["month_name"].lower())
        if month is None:
            return None
    else:
        month = int(fields["month"])
    if fields.get("hour") is not None:
        precision = TimePrecision.TIME
    elif fields.get("day") is not None:
        precision = TimePrecision.DAY
    else:
        precision = TimePrecision.MONTH
    try:
        return DITime(
            int(fields["year"]),
            month,
            int(fields.get("day") or 1),
            int(fields.get("hour") or 0),
            int(fields.get("minute") or 0),
            int(fields.get("second") or 0),
            precision=precision,
        )
    except ValueError:
        return None


def parse_time(text: str) -> DITime | None:
    """Return a ``DITime`` for ``text``, or ``None`` if no format matches."""
    text = _WHITESPACE.sub(" ", text.strip())
    if _YEAR.match(text):
        year = int(text)
        return DITime(year, precision=TimePrecision.YEAR) if year != 0 else None
    for pattern in _PATTERNS:
        match = pattern.match(text)
        if match is not None:
            return _time_from_match(match)
    return None


def format_time(item: DITime) -> str:
    month = MONTH_ABBREVIATIONS[item.month - 1]
    if item.precision is TimePrecision.YEAR:
        return str(item.year)
    if item.precision is TimePrecision.MONTH:
        return f"{month} {item.year}"
    text = f"{item.day} {month} {item.year}"
    if item.precision is TimePrecision.TIME:
        text += f" {item.hour:02d}:{item.minute:02d}:{item.second:02d}"
    return text


@value_classes.register(ValueKind.TIME)
class TimeValue(DataValue):
    """A calendar date, optionally with a time of day."""

    data_item_type = DataItemType.TIME

    def _parse_user_value(self, text: str) -> None:
        item = parse_time(text)
        if item is None:
            self._malformed(f"{text!r} is not a recognized date.")
            return
        self._data_item = item

    def _format_wiki_value(self, item: DataItem) -> str:
        assert isinstance(item, DITime)
        return format_time(item)
