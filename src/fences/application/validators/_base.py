"""Base validator class for structure validators.

Provides default implementation of ValidatorProtocol.
Concrete validators inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from fences.domain.model.identity import render_identity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import PurePath

    from fences.domain.model.configuration import StructureConfig
    from fences.domain.model.diagnostic import Diagnostic
    from fences.domain.model.module_graph import ModuleGraph


class BaseValidator(ABC):
    """Base class for validators implementing ValidatorProtocol.

    Concrete validators must:
    1. Set `name` class attribute
    2. Implement `check_file()` method
    3. Optionally override `from_config()` for conditional activation

    Example:
        class NoSelfImportValidator(BaseValidator):
            name = "self-import"

            def check_file(self, graph, identity, config):
                if identity in graph[identity].imports:
                    return (self._emit(graph, identity, ...),)
                return ()
    """

    name: str
    """Short validator name for logs and stats."""

    def __init__(self, display_root: PurePath | None = None) -> None:
        """Initialize validator.

        Args:
            display_root: Absolute identities are rendered relative to it
        """
        self._display_root = display_root

    @abstractmethod
    def check_file(
        self,
        graph: ModuleGraph,
        identity: str,
        config: StructureConfig,
    ) -> tuple[Diagnostic, ...]:
        """Check one file and attach diagnostics to graph nodes.

        Args:
            graph: Classified module graph
            identity: File left after exclusion
            config: Structure configuration

        Returns:
            Diagnostics emitted (empty if valid)
        """

    def validate(
        self,
        graph: ModuleGraph,
        files: Sequence[str],
        config: StructureConfig,
    ) -> tuple[Diagnostic, ...]:
        """Run check_file on every file, in order."""
        diagnostics: list[Diagnostic] = []
        for identity in files:
            diagnostics.extend(self.check_file(graph, identity, config))
        return tuple(diagnostics)

    @classmethod
    def from_config(
        cls,
        config: StructureConfig,
        display_root: PurePath | None = None,
    ) -> Self | None:
        """Create validator from config.

        Default: always enabled (returns new instance).
        Override in subclass for conditional activation.
        """
        return cls(display_root)

    def _display(self, identity: str) -> str:
        """Identity as shown in diagnostics."""
        return render_identity(identity, self._display_root)

    @staticmethod
    def _emit(graph: ModuleGraph, identity: str, diagnostic: Diagnostic) -> Diagnostic:
        """Attach diagnostic to node and return it."""
        graph.report(identity, diagnostic)
        return diagnostic
