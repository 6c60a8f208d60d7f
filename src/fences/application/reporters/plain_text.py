"""Plain text reporter using print()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fences.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from fences.domain.model.check_result import CheckResult

SUCCESS_LINE = "Project structure is correct."
FAILURE_HEADER = "Diagnostics:"


class PlainTextReporter(BaseReporter):
    """Plain text reporter.

    Prints a success line, or a header followed by one message per line.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        if result.passed:
            self._write(SUCCESS_LINE)
            return

        self._write(FAILURE_HEADER)
        for message in result.messages:
            self._write(message)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
