"""Error types for semval.

Recoverable problems (an unknown type id, a malformed property label, a
raw value the selected value kind rejects, an unavailable cache) are
reported as data: a ``ValueIssue`` attached to the object that was being
built.  Exceptions are reserved for misuse of the API itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class IssueKind(Enum):
    """Categories of recoverable issues."""

    UNKNOWN_TYPE = auto()
    INVALID_PROPERTY = auto()
    VALIDATION_FAILURE = auto()
    UNAVAILABLE_CACHE = auto()


# Issue codes
UNKNOWN_TYPE = "SEM001"
RESERVED_TYPE_PREFIX = "SEM002"
INVALID_PROPERTY_LABEL = "SEM010"
UNKNOWN_INTERNAL_PROPERTY = "SEM011"
INVERSE_PROPERTY_ANNOTATION = "SEM012"
EMPTY_VALUE = "SEM020"
MALFORMED_VALUE = "SEM021"
UNAVAILABLE_CACHE = "SEM030"


@dataclass(frozen=True)
class ValueIssue:
    """A single recoverable issue.

    Parameters
    ----------
    kind:
        Which category the issue belongs to.
    code:
        A short machine-readable identifier, e.g. ``"SEM001"``.
    message:
        Human-readable description of the problem.
    """

    kind: IssueKind
    code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.kind.name}: {self.message}"


class DataTypeNotFoundError(KeyError):
    """Raised when a value kind or type id is not in a registry."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.type_name = name
        self.registry_name = registry_name
        super().__init__(
            f"{name!r} is not registered in the {registry_name!r} registry."
        )


class DataTypeAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.type_name = name
        self.registry_name = registry_name
        super().__init__(
            f"{name!r} is already registered in the {registry_name!r} registry. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class ConfigurationError(ValueError):
    """Raised when settings are malformed."""
