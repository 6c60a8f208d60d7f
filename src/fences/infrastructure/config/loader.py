"""Structure configuration loader.

Configuration lives in the ``[tool.fences]`` table of the nearest
``pyproject.toml``, or in a standalone JSON/TOML file:

    [tool.fences]
    exclude = ["node_modules", "tests"]
    ignoreCycles = false

    [tool.fences.layers.domain]
    files = ["src/app/domain/*"]
    exports = ["src/app/domain/public/*"]

    [tool.fences.layers.services]
    files = ["src/app/services/*"]
    allowImports = ["domain"]

The schema lives in ``fences.infrastructure.config.schema``.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from fences.domain.exceptions.configuration import ConfigurationError
from fences.infrastructure.config.schema import StructureSchema, describe_validation_error

if TYPE_CHECKING:
    from fences.domain.model.configuration import StructureConfig

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
TOOL_TABLE = "fences"


def parse_structure_config(
    data: object,
    *,
    source: str = "<config>",
) -> StructureConfig:
    """Build StructureConfig from decoded JSON/TOML data.

    Args:
        data: Decoded configuration object
        source: Label used in error messages

    Returns:
        Validated StructureConfig

    Raises:
        ConfigurationError: On any shape or value problem
    """
    try:
        schema = StructureSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(source, describe_validation_error(e)) from e

    try:
        return schema.to_config()
    except ValueError as e:
        raise ConfigurationError(source, str(e)) from e


def find_pyproject(start: Path) -> Path | None:
    """Find pyproject.toml in start or its parent directories.

    Args:
        start: File or directory to search from

    Returns:
        Path of the nearest pyproject.toml, None if there is none
    """
    current = start.resolve()
    if not current.is_dir():
        current = current.parent

    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(str(path), f"cannot read file: {e}") from e


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(_read_text(path))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e


def _tool_table(document: Mapping[str, object]) -> object | None:
    tool = document.get("tool")
    if not isinstance(tool, Mapping):
        return None
    return tool.get(TOOL_TABLE)


def load_structure_config(start: Path) -> StructureConfig | None:
    """Load ``[tool.fences]`` from the nearest pyproject.toml.

    Args:
        start: File or directory to search from

    Returns:
        StructureConfig, or None when no pyproject.toml or no table exists

    Raises:
        ConfigurationError: If the file is unreadable or the table is invalid
    """
    pyproject = find_pyproject(start)
    if pyproject is None:
        logger.debug("no %s found above %s", PYPROJECT, start)
        return None

    table = _tool_table(_read_toml(pyproject))
    if table is None:
        logger.debug("%s has no [tool.%s] table", pyproject, TOOL_TABLE)
        return None

    logger.debug("loading structure config from %s", pyproject)
    return parse_structure_config(table, source=str(pyproject))


def read_config_file(path: Path) -> StructureConfig:
    """Load structure config from an explicit file.

    Supported: ``*.json`` (whole document), ``pyproject.toml``
    (``[tool.fences]`` table) and other ``*.toml`` (``[tool.fences]`` if
    present, else the whole document).

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    source = str(path)

    if path.suffix == ".json":
        try:
            data = json.loads(_read_text(path))
        except json.JSONDecodeError as e:
            raise ConfigurationError(source, f"invalid JSON: {e}") from e
        return parse_structure_config(data, source=source)

    if path.suffix == ".toml":
        document = _read_toml(path)
        table = _tool_table(document)
        if table is None:
            if path.name == PYPROJECT:
                raise ConfigurationError(source, f"no [tool.{TOOL_TABLE}] table")
            table = document
        return parse_structure_config(table, source=source)

    raise ConfigurationError(source, "unsupported config format (expected .json or .toml)")
