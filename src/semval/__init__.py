"""semval: typed value construction and key-scoped caching.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import semval

    value = semval.new_type_id_value("_num", "9001")
    value.get_errors()          # []
    value.get_wiki_value()      # "9,001"

    value = semval.new_property_value("capital of", "germany")
    value.get_wiki_value()      # "Germany"
    value.get_property()        # DIProperty(key="Capital_of")

    semval.find_type_id("String")    # "_txt"
    semval.find_type_label("_txt")   # "Text"

    cache = semval.new_cache_handler("hash").key("population", "Berlin")
    cache.set(3_645_000)
    cache.get()                 # 3645000

    semval.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from semval.cache.handler import CacheHandler
    from semval.dataitems.nodes import DataItem, DIProperty, DIWikiPage
    from semval.datavalues.base import DataValue


def new_type_id_value(
    type_id: str,
    raw: object = None,
    caption: str | None = None,
    property: "DIProperty | None" = None,
    context_subject: "DIWikiPage | None" = None,
) -> "DataValue":
    """Build a value of the given type id (or type label).

    Parameters
    ----------
    type_id:
        A type id such as ``"_txt"`` or a label such as ``"Text"``.
    raw:
        Raw input; ``None`` leaves the value empty.
    caption:
        Display text attached to the value.
    property:
        Property the value is annotated with.
    context_subject:
        Page the value was entered on.

    Returns
    -------
    DataValue
        The value, or an ``ErrorValue`` for unknown and reserved type ids.
    """
    from semval.context import get_context

    return get_context().factory.new_type_id_value(
        type_id, raw, caption, property, context_subject
    )


def new_property_object_value(
    property: "DIProperty",
    raw: object = None,
    caption: str | None = None,
    context_subject: "DIWikiPage | None" = None,
) -> "DataValue":
    """Build a value for a ``DIProperty`` using the property's type."""
    from semval.context import get_context

    return get_context().factory.new_property_object_value(
        property, raw, caption, context_subject
    )


def new_property_value(
    label: str,
    raw: object = None,
    caption: str | None = None,
    context_subject: "DIWikiPage | None" = None,
) -> "DataValue":
    """Build a value for the property with the given label."""
    from semval.context import get_context

    return get_context().factory.new_property_value(label, raw, caption, context_subject)


def new_data_item_value(
    item: "DataItem",
    property: "DIProperty | None" = None,
    caption: str | None = None,
) -> "DataValue":
    """Wrap a data item in the value object matching its kind."""
    from semval.context import get_context

    return get_context().factory.new_data_item_value(item, property, caption)


def find_type_id(label: str) -> str:
    """Return the type id for a type label, or ``""`` if unknown."""
    from semval.context import get_context

    return get_context().registry.find_type_id(label)


def find_type_label(type_id: str) -> str:
    """Return the primary label of a type id, or ``""`` if it has none."""
    from semval.context import get_context

    return get_context().registry.find_type_label(type_id)


def register_datatype_alias(type_id: str, label: str) -> None:
    """Add ``label`` as an alias of ``type_id`` for the rest of the process."""
    from semval.context import get_context

    get_context().registry.register_alias(type_id, label)


def new_cache_handler(cache_id: str | None = None) -> "CacheHandler":
    """Return the process-wide cache handler for ``cache_id``."""
    from semval.cache.handler import CacheHandler

    return CacheHandler.new_from_id(cache_id)


__all__ = [
    "__version__",
    "new_type_id_value",
    "new_property_object_value",
    "new_property_value",
    "new_data_item_value",
    "find_type_id",
    "find_type_label",
    "register_datatype_alias",
    "new_cache_handler",
]
