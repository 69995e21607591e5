"""Test configuration and common fixtures."""

import pytest

from fakes import BENGALI_CLAIM, FakeSearchProvider, make_context


@pytest.fixture
def bengali_claim() -> str:
    """A realistic Bengali claim of valid length."""
    return BENGALI_CLAIM


@pytest.fixture
def search_provider() -> FakeSearchProvider:
    """Search provider returning two results for every query."""
    return FakeSearchProvider(
        contexts={i: make_context(f"q{i + 1}") for i in range(4)},
    )
