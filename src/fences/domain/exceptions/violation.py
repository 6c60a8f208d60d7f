"""Structure violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fences.domain.exceptions.base import FencesError

if TYPE_CHECKING:
    from fences.domain.model.diagnostic import Diagnostic


class StructureViolationError(FencesError):
    """Layering rules violated.

    Raised by assert_structure() when diagnostics were found.

    Attributes:
        diagnostics: All found diagnostics
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            raise ValueError("StructureViolationError requires at least one diagnostic")

        self.diagnostics = diagnostics

        msg_parts = [f"Found {len(diagnostics)} structure violation(s):"]
        for d in diagnostics:
            msg_parts.append(str(d))

        super().__init__("\n".join(msg_parts))
