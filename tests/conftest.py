"""Shared test fixtures for semval.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from semval.context import SemvalContext, reset_context


@pytest.fixture(autouse=True)
def _fresh_context() -> Iterator[None]:
    """Drop the process-wide context (and its cache singletons) per test."""
    reset_context()
    yield
    reset_context()


@pytest.fixture()
def context() -> SemvalContext:
    """Return an isolated context built from default settings."""
    return SemvalContext.from_settings()


@pytest.fixture()
def registry(context: SemvalContext):
    return context.registry


@pytest.fixture()
def properties(context: SemvalContext):
    return context.properties


@pytest.fixture()
def factory(context: SemvalContext):
    return context.factory


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"
