"""Application services."""

from fences.application.services.aggregator import collect_diagnostics, filter_exclusion
from fences.application.services.structure_checker import StructureChecker
from fences.application.services.trace import write_trace

__all__ = [
    "StructureChecker",
    "collect_diagnostics",
    "filter_exclusion",
    "write_trace",
]
