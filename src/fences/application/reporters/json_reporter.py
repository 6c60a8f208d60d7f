"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from fences.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from fences.domain.model.check_result import CheckResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "diagnostic_count": result.diagnostic_count,
                "by_code": self._count_by_code(result),
            },
            "diagnostics": [d.to_dict() for d in result.diagnostics],
            "stats": {
                "files_analyzed": result.stats.files_analyzed,
                "files_excluded": result.stats.files_excluded,
                "edges_analyzed": result.stats.edges_analyzed,
                "layers_configured": result.stats.layers_configured,
                "validators_run": result.stats.validators_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    @staticmethod
    def _count_by_code(result: CheckResult) -> dict[str, int]:
        counts: dict[str, int] = {}
        for diagnostic in result.diagnostics:
            key = diagnostic.code.value
            counts[key] = counts.get(key, 0) + 1
        return counts
