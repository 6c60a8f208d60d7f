"""Cycle detection validator.

Memoized depth-first search over the import graph. Each cycle is reported
once, on its closing file (the file the search re-entered). Enabled unless
config.ignore_cycles is set.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self, TypeAlias

from fences.application.validators._base import BaseValidator
from fences.domain.model.diagnostic import cycle_detected
from fences.domain.model.file_node import CycleState

if TYPE_CHECKING:
    from pathlib import PurePath

    from fences.domain.model.configuration import StructureConfig
    from fences.domain.model.diagnostic import Diagnostic
    from fences.domain.model.file_node import FileNode
    from fences.domain.model.module_graph import ModuleGraph


@dataclass(frozen=True, slots=True)
class Clear:
    """No unresolved cycle below this point."""


@dataclass(frozen=True, slots=True)
class PathPending:
    """Cycle found but not closed yet.

    Attributes:
        path: Files from the current one down to the closing file (last)
    """

    path: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")

    @property
    def closing(self) -> str:
        """File whose re-entry opened the cycle."""
        return self.path[-1]


CycleSignal: TypeAlias = Clear | PathPending

CLEAR = Clear()


@dataclass(slots=True)
class _Frame:
    """One file on the active search path."""

    node: FileNode
    imports: Iterator[str]


class CycleValidator(BaseValidator):
    """Import cycle detector.

    Node state persists across all traversal roots: once a file is ACYCLIC or
    CYCLIC it is never walked again, so the whole pass is O(V + E).

    The walk uses an explicit frame stack, so deep import chains do not hit
    the interpreter recursion limit.
    """

    name = "cycles"

    def check_file(
        self,
        graph: ModuleGraph,
        identity: str,
        config: StructureConfig,
    ) -> tuple[Diagnostic, ...]:
        """Run cycle detection with identity as traversal root.

        Args:
            graph: Module graph
            identity: Traversal root (post-exclusion)
            config: Structure configuration (unused)

        Returns:
            CYCLE_DETECTED diagnostics, in detection order
        """
        return tuple(self.detect(graph, identity))

    def detect(self, graph: ModuleGraph, root: str) -> list[Diagnostic]:
        """Walk the graph from one root with a fresh active path.

        Args:
            graph: Module graph (node states are read and updated)
            root: Identity to start from

        Returns:
            Diagnostics for cycles closed during this walk
        """
        found: list[Diagnostic] = []
        on_path: set[str] = set()
        stack: list[_Frame] = []

        signal = self._enter(graph, root, on_path, stack)

        while stack:
            frame = stack[-1]
            node = frame.node

            if isinstance(signal, PathPending):
                if signal.closing == node.identity:
                    node.resolve_cycle(CycleState.CYCLIC)
                    chain = (node.identity, *signal.path)
                    found.append(self._emit(graph, node.identity, self._cycle(chain)))
                    signal = CLEAR
                else:
                    # member of a cycle closed further up
                    node.resolve_cycle(CycleState.CYCLIC)
                    on_path.discard(node.identity)
                    stack.pop()
                    signal = PathPending((node.identity, *signal.path))
                    continue

            target = next(frame.imports, None)
            if target is None:
                on_path.discard(node.identity)
                node.resolve_cycle(CycleState.ACYCLIC)
                stack.pop()
                signal = CLEAR
                continue

            signal = self._enter(graph, target, on_path, stack)

        return found

    @staticmethod
    def _enter(
        graph: ModuleGraph,
        identity: str,
        on_path: set[str],
        stack: list[_Frame],
    ) -> CycleSignal:
        """Visit identity: signal immediately or push a frame and descend."""
        if identity in on_path:
            return PathPending((identity,))

        node = graph.get(identity)
        # unresolved import or already decided
        if node is None or node.is_resolved:
            return CLEAR

        on_path.add(identity)
        stack.append(_Frame(node=node, imports=iter(node.imports)))
        return CLEAR

    def _cycle(self, chain: tuple[str, ...]) -> Diagnostic:
        return cycle_detected([self._display(identity) for identity in chain])

    @classmethod
    def from_config(
        cls,
        config: StructureConfig,
        display_root: PurePath | None = None,
    ) -> Self | None:
        """Create unless cycles are ignored."""
        if config.ignore_cycles:
            return None  # Disabled
        return cls(display_root)
