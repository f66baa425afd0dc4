"""Data item module.

Exports all data item types and the serializer for converting items to
and from JSON/YAML.
"""
from __future__ import annotations

from semval.dataitems.nodes import (
    DataItem,
    DataItemType,
    DIBlob,
    DIBoolean,
    DIError,
    DINumber,
    DIProperty,
    DITime,
    DIUri,
    DIWikiPage,
    TimePrecision,
)
from semval.dataitems.serializer import DataItemSerializer

__all__ = [
    "DataItem",
    "DataItemType",
    "DataItemSerializer",
    "DIBlob",
    "DIBoolean",
    "DIError",
    "DINumber",
    "DIProperty",
    "DITime",
    "DIUri",
    "DIWikiPage",
    "TimePrecision",
]
