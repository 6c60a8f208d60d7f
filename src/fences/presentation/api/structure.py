"""Entry points for checking a Python source tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fences.application.services.structure_checker import StructureChecker
from fences.domain.exceptions.violation import StructureViolationError
from fences.domain.model.configuration import StructureConfig
from fences.infrastructure.config.loader import load_structure_config, read_config_file
from fences.infrastructure.providers.python_source import PythonSourceProvider

if TYPE_CHECKING:
    from pathlib import Path, PurePath

    from fences.domain.model.check_result import CheckResult
    from fences.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


def resolve_config(base_path: Path, config_file: Path | None = None) -> StructureConfig:
    """Structure configuration for base_path.

    An explicit config_file wins. Otherwise ``[tool.fences]`` of the nearest
    pyproject.toml is used; without one every file is unclassified.

    Raises:
        ConfigurationError: If the configuration is missing or invalid
    """
    if config_file is not None:
        return read_config_file(config_file)

    config = load_structure_config(base_path)
    if config is None:
        logger.warning("no [tool.fences] configuration found for %s, no layers declared", base_path)
        return StructureConfig.empty()
    return config


def check_project_structure(
    base_path: Path,
    *,
    config: StructureConfig | None = None,
    display_root: PurePath | None = None,
    reporter: ReporterProtocol | None = None,
) -> CheckResult:
    """Check the Python sources below base_path.

    Args:
        base_path: Source root, also the config search start
        config: Structure configuration (default: resolved from base_path)
        display_root: Identities are rendered relative to it
        reporter: Optional reporter for output

    Returns:
        CheckResult of a fresh analysis

    Raises:
        ConfigurationError: If configuration or source root is invalid
        ProviderError: If a source file cannot be read or parsed
    """
    if config is None:
        config = resolve_config(base_path)

    provider = PythonSourceProvider(base_path)
    checker = StructureChecker.from_config(config, display_root=display_root, reporter=reporter)
    return checker.check(provider)


def assert_structure(result: CheckResult) -> None:
    """Assert that a check found nothing.

    Raises:
        StructureViolationError: If result has diagnostics
    """
    if not result.passed:
        raise StructureViolationError(result.diagnostics)
