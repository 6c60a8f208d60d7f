"""Tests for domain/model/module_graph.py."""

import pytest

from fences.domain.model.diagnostic import not_exported
from fences.domain.model.module_graph import ModuleGraph
from fences.infrastructure.providers.mapping import MappingProvider
from tests.factories import make_graph


class TestModuleGraphNodes:
    """Lazy node creation and mapping behaviour."""

    def test_node_created_once(self) -> None:
        graph = ModuleGraph()

        first = graph.node("a")
        second = graph.node("a")

        assert first is second
        assert len(graph) == 1
        assert "a" in graph

    def test_get_unknown_returns_none(self) -> None:
        assert ModuleGraph().get("missing") is None

    def test_getitem_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            ModuleGraph()["missing"]

    def test_iteration_in_creation_order(self) -> None:
        graph = ModuleGraph()
        for identity in ("c", "a", "b"):
            graph.node(identity)
        assert list(graph) == ["c", "a", "b"]


class TestAddImport:
    """Tests for ModuleGraph.add_import."""

    def test_resolved_target_gets_node(self) -> None:
        graph = ModuleGraph()

        graph.add_import("a", "b", resolved=True)

        assert graph["a"].imports == ["b"]
        assert "b" in graph

    def test_unresolved_target_has_no_node(self) -> None:
        graph = ModuleGraph()

        graph.add_import("a", "requests", resolved=False)

        assert graph["a"].imports == ["requests"]
        assert "requests" not in graph

    def test_empty_target_raises(self) -> None:
        with pytest.raises(ValueError, match="target must not be empty"):
            ModuleGraph().add_import("a", "", resolved=True)


class TestReport:
    """Tests for ModuleGraph.report."""

    def test_report_appends(self) -> None:
        graph = make_graph({"a": ["b"], "b": []})
        diagnostic = not_exported("a", "b")

        graph.report("a", diagnostic)

        assert graph["a"].diagnostics == [diagnostic]

    def test_report_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="unknown file"):
            ModuleGraph().report("a", not_exported("a", "b"))


class TestSeal:
    """A graph is analysed at most once."""

    def test_second_seal_raises(self) -> None:
        graph = ModuleGraph()
        graph.seal()
        with pytest.raises(ValueError, match="already analysed"):
            graph.seal()


class TestFromMapping:
    """Tests for ModuleGraph.from_mapping."""

    def test_keys_are_files(self) -> None:
        graph = make_graph({"app/b": ["domain/a", "lodash"], "domain/a": []})

        assert list(graph) == ["app/b", "domain/a"]
        assert graph["app/b"].imports == ["domain/a", "lodash"]
        assert graph.get("lodash") is None

    def test_duplicate_imports_suppressed(self) -> None:
        graph = make_graph({"a": ["b", "b"], "b": []})
        assert graph["a"].imports == ["b"]


class TestCollect:
    """Tests for ModuleGraph.collect."""

    def test_walks_from_roots(self) -> None:
        provider = MappingProvider({"a": ["b", "os"], "b": ["c"], "c": ["a"]})

        graph = ModuleGraph.collect(provider)

        assert list(graph) == ["a", "b", "c"]
        assert graph["a"].imports == ["b", "os"]
        assert graph["c"].imports == ["a"]

    def test_reaches_files_beyond_roots(self) -> None:
        """Resolved targets are visited even if not listed as roots."""

        class Provider:
            def roots(self) -> tuple[str, ...]:
                return ("a",)

            def imports_of(self, identity: str) -> tuple[str, ...]:
                return {"a": ("b",), "b": ("c",)}.get(identity, ())

            def is_resolved(self, identity: str) -> bool:
                return identity in ("a", "b", "c")

        graph = ModuleGraph.collect(Provider())

        assert list(graph) == ["a", "b", "c"]
        assert graph["b"].imports == ["c"]
