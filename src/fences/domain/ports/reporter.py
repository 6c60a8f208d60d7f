"""Reporter protocol for output formatting.

Users extend fences by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fences.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    fences provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with diagnostics and stats
        """
        ...
