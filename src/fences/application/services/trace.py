"""Graph trace dump for debugging layer configurations."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from fences.domain.model.file_node import FileNode
    from fences.domain.model.module_graph import ModuleGraph

logger = logging.getLogger(__name__)


def node_to_dict(node: FileNode) -> dict[str, object]:
    """Convert FileNode to JSON-serializable dict."""
    data: dict[str, object] = {
        "name": node.identity,
        "imported": list(node.imports),
        "exported": node.exported,
        "layers": list(node.layers),
        "cyclical": node.cyclical.name.lower(),
        "diagnostics": [d.to_dict() for d in node.diagnostics],
    }
    return data


def write_trace(graph: ModuleGraph, files: Sequence[str], path: Path) -> None:
    """Write classified nodes of files to path, sorted by identity.

    Args:
        graph: Analysed module graph
        files: Identities to include (post-exclusion)
        path: Destination JSON file
    """
    data = {identity: node_to_dict(graph[identity]) for identity in sorted(files)}
    with path.open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2)
        fh.write("\n")
    logger.debug("wrote trace of %d files to %s", len(data), path)
