"""Tests for PlainTextReporter, JSONReporter and ConsoleReporter."""

import json
from io import StringIO

from fences.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from fences.application.services.structure_checker import StructureChecker
from fences.domain.model.check_result import CheckResult
from tests.factories import layered_config


def _failing_result() -> CheckResult:
    """One FORBIDDEN_LAYER (app → other) and one cycle."""
    checker = StructureChecker.from_config(layered_config())
    return checker.check_mapping(
        {"app/b": ["other/c"], "other/c": ["other/d"], "other/d": ["other/c"]}
    )


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_success_line(self) -> None:
        output = StringIO()

        PlainTextReporter(output).report(CheckResult.empty())

        assert output.getvalue() == "Project structure is correct.\n"

    def test_header_and_messages(self) -> None:
        output = StringIO()
        result = _failing_result()

        PlainTextReporter(output).report(result)

        lines = output.getvalue().splitlines()
        assert lines[0] == "Diagnostics:"
        assert lines[1:] == list(result.messages)


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_passed(self) -> None:
        output = StringIO()

        JSONReporter(output).report(CheckResult.empty())

        data = json.loads(output.getvalue())
        assert data["passed"] is True
        assert data["summary"] == {"diagnostic_count": 0, "by_code": {}}
        assert data["diagnostics"] == []
        assert data["stats"]["files_analyzed"] == 0

    def test_diagnostics(self) -> None:
        output = StringIO()

        JSONReporter(output, indent=None).report(_failing_result())

        data = json.loads(output.getvalue())
        assert data["passed"] is False
        assert data["summary"]["by_code"] == {"FORBIDDEN_LAYER": 1, "CYCLE_DETECTED": 1}
        assert data["diagnostics"][0]["forbidden"] == ["other"]
        assert data["diagnostics"][0]["allowed"] == ["domain", "app"]
        assert output.getvalue().count("\n") == 1


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_success(self) -> None:
        output = StringIO()

        ConsoleReporter(output, force_terminal=False, width=120).report(CheckResult.empty())

        text = output.getvalue()
        assert "STRUCTURE CHECK" in text
        assert "Project structure is correct." in text

    def test_tables_per_code(self) -> None:
        output = StringIO()

        ConsoleReporter(output, force_terminal=False, width=200).report(_failing_result())

        text = output.getvalue()
        assert "Forbidden layer imports (1)" in text
        assert "Import cycles (1)" in text
        assert "Imports of non-exported files" not in text
        assert "other/c <= other/d <= other/c" in text
        assert "2 diagnostic(s)" in text

    def test_markup_escaped(self) -> None:
        """Identities with brackets are printed literally."""
        output = StringIO()
        checker = StructureChecker.from_config(layered_config())
        result = checker.check_mapping({"app/[x]": ["other/c"], "other/c": []})

        ConsoleReporter(output, force_terminal=False, width=200).report(result)

        assert "app/[x]" in output.getvalue()
