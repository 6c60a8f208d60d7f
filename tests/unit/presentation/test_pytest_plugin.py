"""Tests for presentation/pytest_plugin (run through pytester)."""

import pytest

PLUGIN = "fences.presentation.pytest_plugin"

PYPROJECT = """\
[tool.pytest.ini_options]
fences_source_dir = "src"

[tool.fences.layers.domain]
files = ["domain/*"]

[tool.fences.layers.app]
files = ["app/*"]
allowImports = ["domain"]
"""

STRUCTURE_TEST = """\
from fences.presentation.api import assert_structure

def test_structure(fences_result):
    assert_structure(fences_result)
"""


def _write_project(pytester: pytest.Pytester, domain_source: str) -> None:
    pytester.makepyprojecttoml(PYPROJECT)
    src = pytester.mkdir("src")
    (src / "domain").mkdir()
    (src / "app").mkdir()
    (src / "domain" / "a.py").write_text(domain_source, encoding="utf-8")
    (src / "app" / "b.py").write_text("from domain import a\n", encoding="utf-8")
    pytester.makepyfile(test_structure=STRUCTURE_TEST)


class TestPytestPlugin:
    """Fixtures and assert_structure inside a user test suite."""

    def test_clean_project_passes(self, pytester: pytest.Pytester) -> None:
        _write_project(pytester, "")

        result = pytester.runpytest("-p", PLUGIN)

        result.assert_outcomes(passed=1)

    def test_violation_fails(self, pytester: pytest.Pytester) -> None:
        _write_project(pytester, "from app import b\n")

        result = pytester.runpytest("-p", PLUGIN)

        result.assert_outcomes(failed=1)
        result.stdout.fnmatch_lines(
            ['*[[]FORBIDDEN_LAYER[]] "src/domain/a.py" (layer: domain) imports "src/app/b.py"*']
        )

    def test_config_overridden_in_conftest(self, pytester: pytest.Pytester) -> None:
        _write_project(pytester, "from app import b\n")
        pytester.makeconftest(
            """
            import pytest
            from fences.domain.model.configuration import StructureConfig

            @pytest.fixture(scope="session")
            def fences_config():
                return StructureConfig(ignore_cycles=True)
            """
        )

        result = pytester.runpytest("-p", PLUGIN)

        result.assert_outcomes(passed=1)

    def test_missing_source_dir_errors(self, pytester: pytest.Pytester) -> None:
        pytester.makepyprojecttoml('[tool.pytest.ini_options]\nfences_source_dir = "lib"\n')
        pytester.makepyfile(test_structure=STRUCTURE_TEST)

        result = pytester.runpytest("-p", PLUGIN)

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*fences_source_dir*does not exist*"])

    def test_marker_registered(self, pytester: pytest.Pytester) -> None:
        result = pytester.runpytest("-p", PLUGIN, "--markers")

        result.stdout.fnmatch_lines(["*@pytest.mark.fences*structure test*"])
