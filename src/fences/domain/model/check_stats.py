"""Check statistics for structure analysis results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from a structure check.

    Attributes:
        files_analyzed: Files left after exclusion
        files_excluded: Files removed by exclude patterns
        edges_analyzed: Import edges of analysed files
        layers_configured: Number of declared layers
        validators_run: Number of validators executed
        analysis_time_ms: Total analysis time in milliseconds
    """

    files_analyzed: int
    files_excluded: int
    edges_analyzed: int
    layers_configured: int
    validators_run: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_analyzed < 0:
            raise ValueError(f"files_analyzed must be >= 0, got {self.files_analyzed}")
        if self.files_excluded < 0:
            raise ValueError(f"files_excluded must be >= 0, got {self.files_excluded}")
        if self.edges_analyzed < 0:
            raise ValueError(f"edges_analyzed must be >= 0, got {self.edges_analyzed}")
        if self.layers_configured < 0:
            raise ValueError(f"layers_configured must be >= 0, got {self.layers_configured}")
        if self.validators_run < 0:
            raise ValueError(f"validators_run must be >= 0, got {self.validators_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            files_analyzed=0,
            files_excluded=0,
            edges_analyzed=0,
            layers_configured=0,
            validators_run=0,
            analysis_time_ms=0.0,
        )
