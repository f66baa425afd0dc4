"""Value objects.

Importing this package registers every built-in value class with
``value_classes``.
"""
from __future__ import annotations

from semval.datavalues.base import DataValue, coerce_raw_value, value_classes
from semval.datavalues.boolean import BooleanValue
from semval.datavalues.dates import TimeValue
from semval.datavalues.error import ErrorValue
from semval.datavalues.numbers import NumberValue, QuantityValue
from semval.datavalues.property import PropertyValue, TypesValue
from semval.datavalues.strings import CodeValue, StringValue
from semval.datavalues.uri import EmailValue, TelephoneValue, URIValue
from semval.datavalues.wikipage import WikiPageValue

__all__ = [
    "BooleanValue",
    "CodeValue",
    "DataValue",
    "EmailValue",
    "ErrorValue",
    "NumberValue",
    "PropertyValue",
    "QuantityValue",
    "StringValue",
    "TelephoneValue",
    "TimeValue",
    "TypesValue",
    "URIValue",
    "WikiPageValue",
    "coerce_raw_value",
    "value_classes",
]
