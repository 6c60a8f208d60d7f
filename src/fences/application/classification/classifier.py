"""Layer classifier.

Tags files with the layers whose file patterns match them and resolves
their export visibility.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fences.domain.model.configuration import ExportPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fences.domain.model.configuration import StructureConfig
    from fences.domain.model.module_graph import ModuleGraph

logger = logging.getLogger(__name__)


class LayerClassifier:
    """Assigns layers and export flags to graph nodes.

    Layers are tested in declaration order. A file may belong to several
    layers. Files matching no layer stay unclassified and exported.
    """

    def __init__(self, config: StructureConfig) -> None:
        if config is None:
            raise TypeError("config must not be None")
        self._config = config

    def classify(self, graph: ModuleGraph, files: Sequence[str]) -> int:
        """Classify files in place.

        Args:
            graph: Collected module graph
            files: Identities to classify (post-exclusion)

        Returns:
            Number of files that joined at least one layer
        """
        classified = 0
        for identity in files:
            node = graph[identity]
            layers, exported = self.resolve(identity)
            node.layers = list(layers)
            node.exported = exported
            if layers:
                classified += 1

        logger.debug("classified %d of %d files into layers", classified, len(files))
        return classified

    def resolve(self, identity: str) -> tuple[tuple[str, ...], bool]:
        """Compute (layers, exported) for one identity.

        With ExportPolicy.LAST_MATCH every matching layer that declares
        exports overwrites the previous decision. With ANY_MATCH the file is
        exported if any of those clauses matches it.
        """
        layers: list[str] = []
        exported: bool | None = None

        for name, layer in self._config.layers.items():
            if not layer.matches(identity):
                continue
            layers.append(name)
            if not layer.has_exports:
                continue

            visible = layer.exports_file(identity)
            if self._config.export_policy is ExportPolicy.ANY_MATCH:
                exported = bool(exported) or visible
            else:
                exported = visible

        return tuple(layers), True if exported is None else exported
