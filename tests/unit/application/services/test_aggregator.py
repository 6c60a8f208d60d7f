"""Tests for services/aggregator.py."""

from fences.application.services.aggregator import collect_diagnostics, filter_exclusion
from fences.domain.model.diagnostic import cycle_detected, not_exported
from tests.factories import make_config, make_graph


class TestFilterExclusion:
    """Tests for filter_exclusion."""

    def test_graph_order_kept(self) -> None:
        graph = make_graph({"c": [], "a": [], "b": []})
        assert filter_exclusion(graph, make_config()) == ("c", "a", "b")

    def test_excluded_removed(self) -> None:
        graph = make_graph({"src/a": [], "node_modules/x/index": [], "src/tests/t": []})
        config = make_config(exclude=["node_modules", "tests"])

        assert filter_exclusion(graph, config) == ("src/a",)


class TestCollectDiagnostics:
    """Tests for collect_diagnostics."""

    def test_flattened_in_graph_order(self) -> None:
        graph = make_graph({"b": [], "a": []})
        late = not_exported("a", "b")
        early = not_exported("b", "a")
        graph.report("a", late)
        graph.report("b", early)

        assert collect_diagnostics(graph, make_config()) == (early, late)

    def test_excluded_nodes_dropped(self) -> None:
        graph = make_graph({"a": ["vendor/x"], "vendor/x": ["a"]})
        graph.report("vendor/x", cycle_detected(["vendor/x", "a", "vendor/x"]))
        kept = not_exported("a", "vendor/x")
        graph.report("a", kept)

        assert collect_diagnostics(graph, make_config(exclude=["vendor"])) == (kept,)
