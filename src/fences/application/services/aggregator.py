"""Exclusion filtering and diagnostic aggregation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fences.domain.model.configuration import StructureConfig
    from fences.domain.model.diagnostic import Diagnostic
    from fences.domain.model.module_graph import ModuleGraph


def filter_exclusion(graph: ModuleGraph, config: StructureConfig) -> tuple[str, ...]:
    """Identities not matched by any exclude pattern, in graph order."""
    return tuple(identity for identity in graph if not config.is_excluded(identity))


def collect_diagnostics(graph: ModuleGraph, config: StructureConfig) -> tuple[Diagnostic, ...]:
    """Flatten diagnostics of non-excluded nodes, in graph order.

    Exclusion is applied again here so diagnostics attached to excluded files
    (cycles closing inside them) are dropped.
    """
    return tuple(
        diagnostic
        for identity in filter_exclusion(graph, config)
        for diagnostic in graph[identity].diagnostics
    )
