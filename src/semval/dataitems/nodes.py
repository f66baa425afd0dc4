"""Data item definitions.

A data item is the structured, storage-level representation behind a
value object.  Every data item is a frozen dataclass so that items are
immutable and hashable, and every item knows its ``DataItemType`` and a
compact string serialization that ``DataItem.from_serialization``
reverses.

Constructors reject impossible payloads (an empty property key, the
31st of February) with ``ValueError``; value objects translate those
into validation issues.
"""
from __future__ import annotations

import calendar
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class DataItemType(Enum):
    """Structural kinds of data items."""

    NOTYPE = 0
    NUMBER = 1
    BLOB = 2
    BOOLEAN = 4
    URI = 5
    TIME = 6
    WIKIPAGE = 9
    PROPERTY = 10
    ERROR = 12


class TimePrecision(Enum):
    """How much of a ``DITime`` is significant."""

    YEAR = 1
    MONTH = 2
    DAY = 3
    TIME = 4


class DataItem(ABC):
    """Base class for all data items."""

    __slots__ = ()

    di_type: ClassVar[DataItemType] = DataItemType.NOTYPE

    @abstractmethod
    def serialization(self) -> str:
        """Return the compact string form of this item."""

    @staticmethod
    def from_serialization(di_type: DataItemType, text: str) -> "DataItem":
        """Rebuild a data item from ``di_type`` and its serialization.

        Raises
        ------
        ValueError
            If ``text`` is not a valid serialization for ``di_type``.
        """
        try:
            loader = _LOADERS[di_type]
        except KeyError:
            raise ValueError(f"Cannot unserialize data items of type {di_type.name}") from None
        return loader(text)


# ---------------------------------------------------------------------------
# Scalar items
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DINumber(DataItem):
    """A numeric value, with the unit of a quantity when it has one."""

    number: float | int
    unit: str = ""

    di_type: ClassVar[DataItemType] = DataItemType.NUMBER

    def __post_init__(self) -> None:
        if self.unit != self.unit.strip():
            raise ValueError(f"Invalid unit {self.unit!r}")

    def serialization(self) -> str:
        return f"{self.number} {self.unit}" if self.unit else str(self.number)

    @classmethod
    def _load(cls, text: str) -> "DINumber":
        literal, _, unit = text.partition(" ")
        try:
            number: float | int = int(literal)
        except ValueError:
            number = float(literal)
        return cls(number, unit)


@dataclass(frozen=True, slots=True)
class DIBlob(DataItem):
    """A piece of free text."""

    text: str

    di_type: ClassVar[DataItemType] = DataItemType.BLOB

    def serialization(self) -> str:
        return self.text

    @classmethod
    def _load(cls, text: str) -> "DIBlob":
        return cls(text)


@dataclass(frozen=True, slots=True)
class DIBoolean(DataItem):
    """A truth value."""

    value: bool

    di_type: ClassVar[DataItemType] = DataItemType.BOOLEAN

    def serialization(self) -> str:
        return "t" if self.value else "f"

    @classmethod
    def _load(cls, text: str) -> "DIBoolean":
        if text not in ("t", "f"):
            raise ValueError(f"Invalid boolean serialization {text!r}")
        return cls(text == "t")


@dataclass(frozen=True, slots=True)
class DIUri(DataItem):
    """A URI split into scheme, hierarchical part, query and fragment."""

    scheme: str
    hierpart: str
    query: str = ""
    fragment: str = ""

    di_type: ClassVar[DataItemType] = DataItemType.URI

    def __post_init__(self) -> None:
        if not self.scheme:
            raise ValueError("A URI needs a scheme")

    @property
    def uri(self) -> str:
        """Return the full URI string."""
        text = f"{self.scheme}:{self.hierpart}"
        if self.query:
            text += f"?{self.query}"
        if self.fragment:
            text += f"#{self.fragment}"
        return text

    def serialization(self) -> str:
        return self.uri

    @classmethod
    def from_uri(cls, text: str) -> "DIUri":
        """Split ``text`` into URI components."""
        scheme, sep, rest = text.partition(":")
        if not sep:
            raise ValueError(f"{text!r} has no URI scheme")
        rest, _, fragment = rest.partition("#")
        hierpart, _, query = rest.partition("?")
        return cls(scheme=scheme, hierpart=hierpart, query=query, fragment=fragment)

    @classmethod
    def _load(cls, text: str) -> "DIUri":
        return cls.from_uri(text)


@dataclass(frozen=True, slots=True)
class DITime(DataItem):
    """A Gregorian point in time, significant up to ``precision``."""

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    precision: TimePrecision = TimePrecision.DAY

    di_type: ClassVar[DataItemType] = DataItemType.TIME

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month {self.month} is out of range")
        # calendar.monthrange only accepts years >= 1
        days = calendar.monthrange(self.year if self.year > 0 else 4, self.month)[1]
        if not 1 <= self.day <= days:
            raise ValueError(f"Day {self.day} is out of range for month {self.month}")
        if not (0 <= self.hour < 24 and 0 <= self.minute < 60 and 0 <= self.second < 60):
            raise ValueError("Time of day is out of range")

    def serialization(self) -> str:
        parts = [self.year, self.month, self.day, self.hour, self.minute, self.second]
        width = {
            TimePrecision.YEAR: 1,
            TimePrecision.MONTH: 2,
            TimePrecision.DAY: 3,
            TimePrecision.TIME: 6,
        }[self.precision]
        return "/".join(str(p) for p in parts[:width])

    @classmethod
    def _load(cls, text: str) -> "DITime":
        try:
            parts = [int(p) for p in text.split("/")]
        except ValueError:
            raise ValueError(f"Invalid time serialization {text!r}") from None
        precision = {
            1: TimePrecision.YEAR,
            2: TimePrecision.MONTH,
            3: TimePrecision.DAY,
            6: TimePrecision.TIME,
        }.get(len(parts))
        if precision is None:
            raise ValueError(f"Invalid time serialization {text!r}")
        padded = parts + [1, 1, 0, 0, 0][len(parts) - 1 :]
        return cls(*padded[:6], precision=precision)


# ---------------------------------------------------------------------------
# Structured items
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DIWikiPage(DataItem):
    """A reference to a page.

    Parameters
    ----------
    dbkey:
        The title in storage form (spaces replaced by underscores).
    namespace:
        Numeric namespace; 0 is the main namespace.
    interwiki:
        Interwiki prefix, empty for local pages.
    subobject:
        Name of a subobject on the page, empty for the page itself.
    """

    dbkey: str
    namespace: int = 0
    interwiki: str = ""
    subobject: str = ""

    di_type: ClassVar[DataItemType] = DataItemType.WIKIPAGE

    def __post_init__(self) -> None:
        if not self.dbkey:
            raise ValueError("A page reference needs a title")
        # "#" separates the fields of the serialization
        for name in ("dbkey", "interwiki", "subobject"):
            if "#" in getattr(self, name):
                raise ValueError(f"Page {name} may not contain '#': {getattr(self, name)!r}")

    @property
    def title(self) -> str:
        """Return the title in display form."""
        return self.dbkey.replace("_", " ")

    def serialization(self) -> str:
        return f"{self.dbkey}#{self.namespace}#{self.interwiki}#{self.subobject}"

    @classmethod
    def _load(cls, text: str) -> "DIWikiPage":
        parts = text.split("#")
        if len(parts) != 4:
            raise ValueError(f"Invalid page serialization {text!r}")
        dbkey, namespace, interwiki, subobject = parts
        return cls(dbkey, int(namespace), interwiki, subobject)


@dataclass(frozen=True, slots=True)
class DIProperty(DataItem):
    """A property.

    Keys starting with ``_`` denote internal properties; all other keys
    are user-defined and hold the label in storage form.
    """

    key: str
    inverse: bool = False

    di_type: ClassVar[DataItemType] = DataItemType.PROPERTY

    def __post_init__(self) -> None:
        if not self.key or self.key != self.key.strip():
            raise ValueError(f"Invalid property key {self.key!r}")

    @property
    def is_user_defined(self) -> bool:
        return not self.key.startswith("_")

    @property
    def label(self) -> str:
        """Return the display label of a user property, or the key itself."""
        return self.key.replace("_", " ") if self.is_user_defined else self.key

    def serialization(self) -> str:
        return f"-{self.key}" if self.inverse else self.key

    @classmethod
    def _load(cls, text: str) -> "DIProperty":
        if text.startswith("-"):
            return cls(text[1:], inverse=True)
        return cls(text)


@dataclass(frozen=True, slots=True)
class DIError(DataItem):
    """Placeholder item for a value that failed validation."""

    errors: tuple[str, ...]

    di_type: ClassVar[DataItemType] = DataItemType.ERROR

    def serialization(self) -> str:
        return json.dumps(list(self.errors), ensure_ascii=False)

    @classmethod
    def _load(cls, text: str) -> "DIError":
        try:
            errors = json.loads(text)
        except json.JSONDecodeError:
            raise ValueError(f"Invalid error serialization {text!r}") from None
        return cls(tuple(str(e) for e in errors))


_LOADERS = {
    DataItemType.NUMBER: DINumber._load,
    DataItemType.BLOB: DIBlob._load,
    DataItemType.BOOLEAN: DIBoolean._load,
    DataItemType.URI: DIUri._load,
    DataItemType.TIME: DITime._load,
    DataItemType.WIKIPAGE: DIWikiPage._load,
    DataItemType.PROPERTY: DIProperty._load,
    DataItemType.ERROR: DIError._load,
}
