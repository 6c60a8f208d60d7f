"""Check result aggregate for structure analysis."""

from __future__ import annotations

from dataclasses import dataclass, field

from fences.domain.model.check_stats import CheckStats
from fences.domain.model.diagnostic import Diagnostic, DiagnosticCode
from fences.domain.model.module_graph import ModuleGraph


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a structure check.

    Attributes:
        diagnostics: All diagnostics, aggregated in graph order
        stats: Analysis statistics
        graph: The analysed (classified) module graph
    """

    diagnostics: tuple[Diagnostic, ...]
    stats: CheckStats
    graph: ModuleGraph = field(default_factory=ModuleGraph, compare=False)

    @property
    def passed(self) -> bool:
        """Check if analysis passed (no diagnostics)."""
        return len(self.diagnostics) == 0

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    def by_code(self, code: DiagnosticCode) -> tuple[Diagnostic, ...]:
        """Diagnostics of one kind, original order kept."""
        return tuple(d for d in self.diagnostics if d.code is code)

    @property
    def messages(self) -> tuple[str, ...]:
        """Rendered messages, in order."""
        return tuple(d.message for d in self.diagnostics)

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no diagnostics)."""
        return cls(diagnostics=(), stats=CheckStats.empty())
