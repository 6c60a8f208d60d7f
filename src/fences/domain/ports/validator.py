"""Validator protocol for structure validators.

Validators walk a classified ModuleGraph and attach diagnostics to its nodes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import PurePath

    from fences.domain.model.configuration import StructureConfig
    from fences.domain.model.diagnostic import Diagnostic
    from fences.domain.model.module_graph import ModuleGraph


class ValidatorProtocol(Protocol):
    """Contract for validators.

    Key pattern: from_config() returns None if validator should be disabled.
    """

    name: str
    """Short validator name for logs and stats."""

    def check_file(
        self,
        graph: ModuleGraph,
        identity: str,
        config: StructureConfig,
    ) -> tuple[Diagnostic, ...]:
        """Check one file of a classified graph.

        Diagnostics are attached to graph nodes and also returned.
        """
        ...

    def validate(
        self,
        graph: ModuleGraph,
        files: Sequence[str],
        config: StructureConfig,
    ) -> tuple[Diagnostic, ...]:
        """Check files of a classified graph.

        Diagnostics are attached to their source node and also returned.

        Args:
            graph: Classified module graph
            files: Identities left after exclusion, in graph order
            config: Structure configuration

        Returns:
            Diagnostics emitted by this call
        """
        ...

    @classmethod
    def from_config(
        cls,
        config: StructureConfig,
        display_root: PurePath | None = None,
    ) -> Self | None:
        """Create validator from config, None if disabled."""
        ...
