"""Structure diagnostics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class DiagnosticCode(Enum):
    """Kind of layering rule violated."""

    NOT_EXPORTED = "NOT_EXPORTED"
    FORBIDDEN_LAYER = "FORBIDDEN_LAYER"
    CYCLE_DETECTED = "CYCLE_DETECTED"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Layering rule violation.

    Attributes:
        code: Rule violated
        source: Importing file (closing file for cycles)
        imported: Imported file ("" for cycles)
        allowed: Layers the source may import from
        forbidden: Layers of the imported file that are not allowed
        message: Rendered human-readable text
    """

    code: DiagnosticCode
    source: str
    imported: str
    allowed: tuple[str, ...]
    forbidden: tuple[str, ...]
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.code is not DiagnosticCode.CYCLE_DETECTED and not self.imported:
            raise ValueError(f"imported must not be empty for {self.code.value}")

    def __str__(self) -> str:
        """Format diagnostic for display."""
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-serializable dict."""
        return {
            "code": self.code.value,
            "source": self.source,
            "imported": self.imported,
            "allowed": list(self.allowed),
            "forbidden": list(self.forbidden),
            "message": self.message,
        }


def not_exported(source: str, imported: str) -> Diagnostic:
    """Import of a file hidden by its layer's export clause."""
    return Diagnostic(
        code=DiagnosticCode.NOT_EXPORTED,
        source=source,
        imported=imported,
        allowed=(),
        forbidden=(),
        message=f'"{source}" imports "{imported}" which is not exported',
    )


def forbidden_layer(
    source: str,
    source_layers: Sequence[str],
    imported: str,
    imported_layers: Sequence[str],
    allowed: Sequence[str],
    forbidden: Sequence[str],
) -> Diagnostic:
    """Import from a layer outside the source's allow-list."""
    message = (
        f'"{source}" (layer: {", ".join(source_layers)}) '
        f'imports "{imported}" (layer: {", ".join(imported_layers)}). '
        f"Layer(s) {', '.join(forbidden)} not allowed. "
        f"Only import from {', '.join(allowed)}"
    )
    return Diagnostic(
        code=DiagnosticCode.FORBIDDEN_LAYER,
        source=source,
        imported=imported,
        allowed=tuple(allowed),
        forbidden=tuple(forbidden),
        message=message,
    )


def cycle_detected(chain: Sequence[str]) -> Diagnostic:
    """Import cycle, chain starts and ends with the closing file."""
    if len(chain) < 2 or chain[0] != chain[-1]:
        raise ValueError(f"cycle chain must start and end with the same file, got {chain!r}")
    return Diagnostic(
        code=DiagnosticCode.CYCLE_DETECTED,
        source=chain[0],
        imported="",
        allowed=(),
        forbidden=(),
        message=f"Cycle detected in imports: {' <= '.join(chain)}",
    )
