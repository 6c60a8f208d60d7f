"""Structure configuration loading."""

from fences.infrastructure.config.loader import (
    find_pyproject,
    load_structure_config,
    parse_structure_config,
    read_config_file,
)

__all__ = [
    "find_pyproject",
    "load_structure_config",
    "parse_structure_config",
    "read_config_file",
]
