"""File node entity of the module graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fences.domain.model.diagnostic import Diagnostic


class CycleState(Enum):
    """Cycle membership of a file, resolved once per analysis."""

    UNRESOLVED = auto()  # not reached by cycle detection yet
    ACYCLIC = auto()
    CYCLIC = auto()


@dataclass(slots=True)
class FileNode:
    """One file of the analysed codebase.

    Mutable: created empty on first reference, then filled once by each pass
    (imports during collection, layers/exported during classification,
    diagnostics during validation).

    Attributes:
        identity: Resolved file path or opaque specifier (unique key)
        imports: Imported identities, first-seen order, no duplicates
        layers: Names of matching layers, declaration order
        exported: Visible to files of other layers
        cyclical: Cycle detection state
        diagnostics: Diagnostics attributed to this file (append-only)
    """

    identity: str
    imports: list[str] = field(default_factory=list)
    layers: list[str] = field(default_factory=list)
    exported: bool = True
    cyclical: CycleState = CycleState.UNRESOLVED
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.identity:
            raise ValueError("identity must not be empty")

    def add_import(self, identity: str) -> bool:
        """Record an import, ignoring duplicates.

        Returns:
            True if the import was new
        """
        if identity in self.imports:
            return False
        self.imports.append(identity)
        return True

    def resolve_cycle(self, state: CycleState) -> None:
        """Set cycle state once. Later calls are no-ops."""
        if state is CycleState.UNRESOLVED:
            raise ValueError("cannot resolve to UNRESOLVED")
        if self.cyclical is CycleState.UNRESOLVED:
            self.cyclical = state

    @property
    def is_resolved(self) -> bool:
        """True once cycle detection has decided this node."""
        return self.cyclical is not CycleState.UNRESOLVED

    def shares_layer_with(self, other: FileNode) -> bool:
        """True if both files belong to at least one common layer."""
        return any(layer in other.layers for layer in self.layers)
