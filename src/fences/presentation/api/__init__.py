"""Python API for structure checks.

Public exports:
    check_project_structure: Check a Python source tree
    assert_structure: Raise StructureViolationError on diagnostics
    resolve_config: Locate the structure configuration for a path
"""

from fences.presentation.api.structure import (
    assert_structure,
    check_project_structure,
    resolve_config,
)

__all__ = [
    "assert_structure",
    "check_project_structure",
    "resolve_config",
]
