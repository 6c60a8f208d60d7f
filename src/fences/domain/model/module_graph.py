"""Module graph owned by one analysis session."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from fences.domain.model.file_node import FileNode

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from fences.domain.model.diagnostic import Diagnostic
    from fences.domain.ports.module_graph import ModuleGraphProvider


class ModuleGraph:
    """Insertion-ordered mapping of file identity to FileNode.

    Nodes are created lazily the first time an identity is referenced, as a
    root or as a resolved import target. Iteration order is creation order.
    Unresolved import targets stay in FileNode.imports but get no node.

    A graph is analysed at most once; see seal().
    """

    __slots__ = ("_nodes", "_sealed")

    def __init__(self) -> None:
        self._nodes: dict[str, FileNode] = {}
        self._sealed = False

    def node(self, identity: str) -> FileNode:
        """Get node for identity, creating it on first reference."""
        existing = self._nodes.get(identity)
        if existing is not None:
            return existing
        created = FileNode(identity=identity)
        self._nodes[identity] = created
        return created

    def get(self, identity: str) -> FileNode | None:
        """Get node if identity is a known file. O(1)."""
        return self._nodes.get(identity)

    def add_import(self, source: str, target: str, *, resolved: bool) -> None:
        """Record edge source → target.

        Args:
            source: Importing file identity
            target: Imported identity
            resolved: Target is a real file (gets a node)
        """
        if not target:
            raise ValueError("target must not be empty")
        self.node(source).add_import(target)
        if resolved:
            self.node(target)

    def report(self, identity: str, diagnostic: Diagnostic) -> None:
        """Attach a diagnostic to a known file."""
        node = self._nodes.get(identity)
        if node is None:
            raise KeyError(f"unknown file '{identity}'")
        node.diagnostics.append(diagnostic)

    def seal(self) -> None:
        """Mark graph as analysed. FAIL-FIRST on second analysis."""
        if self._sealed:
            raise ValueError("module graph was already analysed; collect a new one")
        self._sealed = True

    def __getitem__(self, identity: str) -> FileNode:
        return self._nodes[identity]

    def __contains__(self, identity: object) -> bool:
        return identity in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    @classmethod
    def from_mapping(cls, imports: Mapping[str, Sequence[str]]) -> ModuleGraph:
        """Build graph from an identity → imports mapping.

        An imported identity is a file iff it is a key of the mapping.

        Time: O(F * I) where F=files, I=avg imports per file
        """
        graph = cls()
        for source, targets in imports.items():
            graph.node(source)
            for target in targets:
                graph.add_import(source, target, resolved=target in imports)
        return graph

    @classmethod
    def collect(cls, provider: ModuleGraphProvider) -> ModuleGraph:
        """Build graph by walking the provider from its roots.

        Every resolved import target is visited once, breadth-first.

        Args:
            provider: Source of roots and per-file imports

        Returns:
            Fully collected graph
        """
        graph = cls()
        visited: set[str] = set()
        pending: deque[str] = deque(provider.roots())

        while pending:
            identity = pending.popleft()
            if identity in visited:
                continue
            visited.add(identity)
            graph.node(identity)

            for target in provider.imports_of(identity):
                resolved = provider.is_resolved(target)
                graph.add_import(identity, target, resolved=resolved)
                if resolved and target not in visited:
                    pending.append(target)

        return graph
