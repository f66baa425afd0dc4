"""Application context.

Holds the process-wide collaborators (datatype registry, property
registry, value factory and cache handler registry) in one explicit
object instead of scattered module globals.  ``get_context()`` builds a
default context on first use; ``configure()`` replaces it and
``reset_context()`` drops it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from semval.config import Settings

if TYPE_CHECKING:
    from semval.cache.registry import CacheRegistry
    from semval.datatypes.registry import DataTypeRegistry
    from semval.datavalues.base import DataValue
    from semval.factory import DataValueFactory
    from semval.properties import PropertyRegistry

logger = logging.getLogger(__name__)


@dataclass
class SemvalContext:
    settings: Settings
    registry: "DataTypeRegistry[DataValue]"
    properties: "PropertyRegistry"
    factory: "DataValueFactory"
    caches: "CacheRegistry"

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SemvalContext":
        """Build a fresh context with built-in datatypes and properties."""
        from semval.cache.registry import CacheRegistry
        from semval.datatypes.builtins import build_default_registry
        from semval.factory import DataValueFactory
        from semval.properties import PropertyRegistry

        settings = settings if settings is not None else Settings()
        registry = build_default_registry()
        properties = PropertyRegistry(default_type_id=settings.default_property_type)
        return cls(
            settings=settings,
            registry=registry,
            properties=properties,
            factory=DataValueFactory(registry, properties),
            caches=CacheRegistry(settings),
        )


_context: SemvalContext | None = None


def get_context() -> SemvalContext:
    global _context
    if _context is None:
        _context = SemvalContext.from_settings()
        logger.debug("Created default context")
    return _context


def configure(settings: Settings | None = None) -> SemvalContext:
    """Replace the process-wide context with one built from ``settings``."""
    global _context
    _context = SemvalContext.from_settings(settings)
    return _context


def reset_context() -> None:
    global _context
    _context = None
