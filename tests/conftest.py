"""Pytest configuration and shared fixtures for furniture tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "constraints"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or REST API end to end"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding constraint override files used by tests."""
    return FIXTURES_PATH


@pytest.fixture
def configure_command():
    """Create a ConfigureFurnitureCommand over the built-in tables."""
    from furniture.application import ConfigureFurnitureCommand

    return ConfigureFurnitureCommand()


@pytest.fixture
def layout_command():
    """Create a LayoutCommand over the built-in tables."""
    from furniture.application import LayoutCommand

    return LayoutCommand()
