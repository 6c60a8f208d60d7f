"""pytest plugin for fences.

Provides fixtures for structure testing:
    fences_config: Structure configuration (override in conftest.py)
    fences_provider: Python source provider for the configured directory
    fences_result: CheckResult of the configured directory

Configuration (pytest.ini or pyproject.toml):
    fences_source_dir: Source directory to analyze (default: "src")

Example:
    from fences.presentation.api import assert_structure

    def test_layers(fences_result):
        assert_structure(fences_result)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from fences.presentation.pytest_plugin.fixtures import (
    fences_config,
    fences_provider,
    fences_result,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "fences_config",
    "fences_provider",
    "fences_result",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "fences_source_dir",
        help="Source directory checked by fences fixtures (default: src)",
        default="src",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "fences: mark test as structure test",
    )
