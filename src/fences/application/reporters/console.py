"""Console reporter: CheckResult → rich formatted output."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fences.application.reporters._base import BaseReporter
from fences.domain.model.diagnostic import DiagnosticCode

if TYPE_CHECKING:
    from fences.domain.model.check_result import CheckResult
    from fences.domain.model.diagnostic import Diagnostic

_TITLES = {
    DiagnosticCode.FORBIDDEN_LAYER: "Forbidden layer imports",
    DiagnosticCode.NOT_EXPORTED: "Imports of non-exported files",
    DiagnosticCode.CYCLE_DETECTED: "Import cycles",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: diagnostics grouped by code in rich tables."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force ANSI styling (None = autodetect)
            width: Console width (None = autodetect)
        """
        super().__init__(output)
        self._console = Console(file=self._output, force_terminal=force_terminal, width=width)

    def report(self, result: CheckResult) -> None:
        """Render check result.

        Args:
            result: Complete check result
        """
        console = self._console
        console.rule("[bold]STRUCTURE CHECK[/bold]")

        stats = result.stats
        console.print(
            f"[bold]Files:[/bold] {stats.files_analyzed} "
            f"([dim]{stats.files_excluded} excluded[/dim])  "
            f"[bold]Imports:[/bold] {stats.edges_analyzed}  "
            f"[bold]Layers:[/bold] {stats.layers_configured}"
        )
        console.print()

        if result.passed:
            console.print("[bold green]Project structure is correct.[/bold green]")
            return

        for code, title in _TITLES.items():
            group = result.by_code(code)
            if group:
                console.print(self._table(title, code, group))
                console.print()

        console.print(f"[bold red]{result.diagnostic_count} diagnostic(s)[/bold red]")

    @staticmethod
    def _table(title: str, code: DiagnosticCode, diagnostics: tuple[Diagnostic, ...]) -> Table:
        table = Table(title=f"{title} ({len(diagnostics)})", title_justify="left")

        if code is DiagnosticCode.CYCLE_DETECTED:
            table.add_column("Cycle", style="yellow")
            for d in diagnostics:
                table.add_row(escape(d.message.split(": ", 1)[-1]))
            return table

        table.add_column("Source", style="cyan")
        table.add_column("Imported", style="magenta")
        if code is DiagnosticCode.FORBIDDEN_LAYER:
            table.add_column("Forbidden", style="red")
            table.add_column("Allowed", style="green")
            for d in diagnostics:
                table.add_row(
                    escape(d.source),
                    escape(d.imported),
                    ", ".join(d.forbidden),
                    ", ".join(d.allowed),
                )
        else:
            for d in diagnostics:
                table.add_row(escape(d.source), escape(d.imported))
        return table
