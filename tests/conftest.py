"""
Shared pytest fixtures for lifecycle-manager tests.

This module provides:
- A fresh recorder and container per test
- Settings cache cleanup for test isolation
- structlog reset after tests that reconfigure logging

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_something(container, recorder):
        ...
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Ensure the package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lifecycle_manager.core.settings import clear_settings_cache
from lifecycle_manager.registry import Container, as_value
from tests._support.components import Recorder


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test without an explicit marker as a unit test."""
    for item in items:
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test; configure_logging is global."""
    yield
    structlog.reset_defaults()


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def container(recorder: Recorder) -> Container:
    """Empty container with the shared recorder registered as ``recorder``."""
    c = Container()
    c.register("recorder", as_value(recorder))
    return c
