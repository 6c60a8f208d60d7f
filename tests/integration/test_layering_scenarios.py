"""Reference layering scenarios over in-memory import graphs."""

from fences.application.services.structure_checker import StructureChecker
from fences.domain.model.configuration import LayerConfig, StructureConfig
from fences.domain.model.diagnostic import DiagnosticCode
from fences.domain.model.file_node import CycleState
from tests.factories import make_config, make_layer

CYCLE = {"A": ["B"], "B": ["C"], "C": ["A"]}


def _domain_app(*extra: LayerConfig, **kwargs: object) -> StructureConfig:
    return make_config(
        make_layer("domain", "domain/*"),
        make_layer("app", "app/*", allow=["domain"]),
        *extra,
        **kwargs,  # type: ignore[arg-type]
    )


class TestScenarios:
    """Scenarios A to E."""

    def test_a_allowed_import(self) -> None:
        """app may import domain."""
        checker = StructureChecker.from_config(_domain_app())

        result = checker.check_mapping({"domain/a": [], "app/b": ["domain/a"]})

        assert result.diagnostics == ()

    def test_b_forbidden_layer(self) -> None:
        """app may not import other."""
        checker = StructureChecker.from_config(_domain_app(make_layer("other", "other/*")))

        result = checker.check_mapping(
            {"domain/a": [], "app/b": ["domain/a", "other/c"], "other/c": []}
        )

        assert len(result.diagnostics) == 1
        d = result.diagnostics[0]
        assert d.code is DiagnosticCode.FORBIDDEN_LAYER
        assert d.forbidden == ("other",)
        assert d.allowed == ("domain", "app")
        assert d.message == (
            '"app/b" (layer: app) imports "other/c" (layer: other). '
            "Layer(s) other not allowed. Only import from domain, app"
        )

    def test_c_exports(self) -> None:
        """Hidden domain files cannot be imported from other layers."""
        config = make_config(
            make_layer("domain", "domain/*", exports=["domain/public/*"]),
            make_layer("app", "app/*", allow=["domain"]),
        )
        checker = StructureChecker.from_config(config)

        result = checker.check_mapping(
            {
                "domain/public/a": [],
                "domain/internal/b": [],
                "app/x": ["domain/public/a", "domain/internal/b"],
            }
        )

        assert result.graph["domain/public/a"].exported is True
        assert result.graph["domain/internal/b"].exported is False
        assert [d.message for d in result.diagnostics] == [
            '"app/x" imports "domain/internal/b" which is not exported'
        ]

    def test_d_cycle_reported_once(self) -> None:
        checker = StructureChecker.from_config(make_config())

        result = checker.check_mapping(CYCLE)

        assert [d.message for d in result.diagnostics] == [
            "Cycle detected in imports: A <= B <= C <= A"
        ]
        assert all(result.graph[i].cyclical is CycleState.CYCLIC for i in result.graph)

    def test_e_ignore_cycles(self) -> None:
        checker = StructureChecker.from_config(make_config(ignore_cycles=True))

        result = checker.check_mapping(CYCLE)

        assert result.diagnostics == ()
        assert all(result.graph[i].cyclical is CycleState.UNRESOLVED for i in result.graph)


class TestProperties:
    """Whole-run properties."""

    def test_no_layers_only_exports_and_cycles(self) -> None:
        """Without layers every file is unclassified and exported."""
        checker = StructureChecker.from_config(make_config())

        result = checker.check_mapping({"domain/a": ["app/b"], "app/b": []})

        assert result.passed

    def test_excluded_files_never_reported(self) -> None:
        """Excluded files are walked through but never report."""
        config = _domain_app(exclude=["legacy"])
        checker = StructureChecker.from_config(config)

        result = checker.check_mapping(
            {
                "legacy/domain/x": ["app/b"],
                "app/b": ["legacy/domain/x"],
                "domain/a": ["app/b"],
            }
        )

        assert [(d.source, d.code) for d in result.diagnostics] == [
            ("app/b", DiagnosticCode.CYCLE_DETECTED),
            ("domain/a", DiagnosticCode.FORBIDDEN_LAYER),
        ]

    def test_cycle_closing_in_excluded_file_dropped(self) -> None:
        """A cycle closing on an excluded file is attached there and dropped."""
        checker = StructureChecker.from_config(make_config(exclude=["legacy"]))

        result = checker.check_mapping(
            {"app/a": ["legacy/x"], "legacy/x": ["legacy/y"], "legacy/y": ["legacy/x"]}
        )

        assert result.passed
        assert result.graph["legacy/x"].diagnostics != []

    def test_every_cycle_once_whatever_the_order(self) -> None:
        """Root order changes the closing file, never the count."""
        for order in (("A", "B", "C"), ("C", "A", "B"), ("B", "C", "A")):
            imports = {identity: CYCLE[identity] for identity in order}
            result = StructureChecker.from_config(make_config()).check_mapping(imports)

            assert len(result.diagnostics) == 1
            assert result.diagnostics[0].source == order[0]
