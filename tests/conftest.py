"""Pytest configuration and shared fixtures for RAID calculator tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from raidcalc.application import RaidCalculator, reset_calculator
from raidcalc.domain.layouts import LayoutOptions, RaidCatalog, layout_registry
from raidcalc.domain.value_objects import GroupDivisionPolicy


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def catalog() -> RaidCatalog:
    """Catalog with default options (reject uneven groups, strict RAID 1E)."""
    return RaidCatalog()


@pytest.fixture
def floor_catalog() -> RaidCatalog:
    """Catalog that floors uneven RAID 50/60 group sizes."""
    return RaidCatalog(LayoutOptions(group_division=GroupDivisionPolicy.FLOOR))


@pytest.fixture
def calculator() -> RaidCalculator:
    """RaidCalculator with default settings."""
    return RaidCalculator()


@pytest.fixture
def clean_default_calculator() -> Iterator[None]:
    """Reset the module-level default calculator around a test."""
    reset_calculator()
    yield
    reset_calculator()


@pytest.fixture
def isolated_registry() -> Iterator[None]:
    """Restore the layout registry after a test that modifies it."""
    saved = layout_registry.snapshot()
    yield
    layout_registry.restore(saved)
