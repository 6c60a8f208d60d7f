"""Import compliance validator.

Checks every import edge against the importing file's allowed layers and the
imported file's visibility. Always enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fences.application.validators._base import BaseValidator
from fences.domain.model.diagnostic import forbidden_layer, not_exported

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fences.domain.model.configuration import StructureConfig
    from fences.domain.model.diagnostic import Diagnostic
    from fences.domain.model.file_node import FileNode
    from fences.domain.model.module_graph import ModuleGraph


def allowed_layers(layers: Sequence[str], config: StructureConfig) -> tuple[str, ...]:
    """Layers a file in `layers` may import from.

    The allowImports of each of its layers, then its own layers.
    Duplicates removed, first occurrence kept.

    Examples:
        app(allowImports=[domain]) → ("domain", "app")
    """
    names: list[str] = []
    for layer in layers:
        names.extend(config.layer(layer).allow_imports)
    names.extend(layers)
    return tuple(dict.fromkeys(names))


class ComplianceValidator(BaseValidator):
    """Layer compliance validator.

    Per edge F → I (I a known file):
    - F and I share a layer: compliant, nothing else checked
    - I not exported: NOT_EXPORTED
    - F classified and I has layers outside F's allowed set: FORBIDDEN_LAYER

    Unclassified files may import from any layer.
    One edge may produce both diagnostics.
    """

    name = "compliance"

    def check_file(
        self,
        graph: ModuleGraph,
        identity: str,
        config: StructureConfig,
    ) -> tuple[Diagnostic, ...]:
        """Check all import edges of one file.

        Args:
            graph: Classified module graph
            identity: Importing file
            config: Structure configuration

        Returns:
            NOT_EXPORTED and FORBIDDEN_LAYER diagnostics, in edge order
        """
        node = graph[identity]
        allowed = allowed_layers(node.layers, config) if node.layers else ()
        diagnostics: list[Diagnostic] = []

        for target in node.imports:
            imported = graph.get(target)
            # unresolved import
            if imported is None:
                continue
            diagnostics.extend(self._check_edge(graph, node, imported, allowed))

        return tuple(diagnostics)

    def _check_edge(
        self,
        graph: ModuleGraph,
        node: FileNode,
        imported: FileNode,
        allowed: tuple[str, ...],
    ) -> list[Diagnostic]:
        """Check one edge, attaching diagnostics to the importing node."""
        if node.shares_layer_with(imported):
            return []

        found: list[Diagnostic] = []
        source = self._display(node.identity)
        target = self._display(imported.identity)

        if not imported.exported:
            found.append(self._emit(graph, node.identity, not_exported(source, target)))

        if node.layers:
            forbidden = [layer for layer in imported.layers if layer not in allowed]
            if forbidden:
                diagnostic = forbidden_layer(
                    source,
                    node.layers,
                    target,
                    imported.layers,
                    allowed,
                    forbidden,
                )
                found.append(self._emit(graph, node.identity, diagnostic))

        return found
