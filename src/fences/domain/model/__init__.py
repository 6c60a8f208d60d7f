"""Domain model: module graph, configuration and diagnostics."""

from fences.domain.model.check_result import CheckResult
from fences.domain.model.check_stats import CheckStats
from fences.domain.model.configuration import ExportPolicy, LayerConfig, StructureConfig
from fences.domain.model.diagnostic import Diagnostic, DiagnosticCode
from fences.domain.model.file_node import CycleState, FileNode
from fences.domain.model.module_graph import ModuleGraph

__all__ = [
    "CheckResult",
    "CheckStats",
    "CycleState",
    "Diagnostic",
    "DiagnosticCode",
    "ExportPolicy",
    "FileNode",
    "LayerConfig",
    "ModuleGraph",
    "StructureConfig",
]
