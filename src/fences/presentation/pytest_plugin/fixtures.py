"""pytest fixtures for structure testing.

User overrides fences_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fences.application.services.structure_checker import StructureChecker
from fences.domain.model.check_result import CheckResult
from fences.domain.model.configuration import StructureConfig
from fences.infrastructure.providers.python_source import PythonSourceProvider
from fences.presentation.api.structure import resolve_config


def _root_dir(config: pytest.Config) -> Path:
    return Path(str(config.rootpath))


def _source_path(config: pytest.Config) -> Path:
    """Configured source directory, FAIL-FIRST if it does not exist."""
    source_dir = str(config.getini("fences_source_dir") or "src")
    source_path = _root_dir(config) / source_dir

    if not source_path.is_dir():
        raise FileNotFoundError(
            f"fences_source_dir '{source_path}' does not exist. "
            f"Configure fences_source_dir in pytest.ini or pyproject.toml."
        )
    return source_path


@pytest.fixture(scope="session")
def fences_config(request: pytest.FixtureRequest) -> StructureConfig:
    """Structure configuration of the project under test.

    Default: ``[tool.fences]`` of the nearest pyproject.toml above rootdir.
    Override this fixture in conftest.py to provide one in code.
    """
    return resolve_config(_root_dir(request.config))


@pytest.fixture(scope="session")
def fences_provider(request: pytest.FixtureRequest) -> PythonSourceProvider:
    """Python source provider for fences_source_dir."""
    return PythonSourceProvider(_source_path(request.config))


@pytest.fixture(scope="session")
def fences_result(
    request: pytest.FixtureRequest,
    fences_config: StructureConfig,
    fences_provider: PythonSourceProvider,
) -> CheckResult:
    """Check result of fences_source_dir, identities relative to rootdir."""
    checker = StructureChecker.from_config(fences_config, display_root=_root_dir(request.config))
    return checker.check(fences_provider)
