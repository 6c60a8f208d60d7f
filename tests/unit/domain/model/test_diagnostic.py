"""Tests for domain/model/diagnostic.py."""

import pytest

from fences.domain.model.diagnostic import (
    Diagnostic,
    DiagnosticCode,
    cycle_detected,
    forbidden_layer,
    not_exported,
)


class TestDiagnosticFailFirst:
    """FAIL-FIRST validation tests."""

    def test_empty_source_raises(self) -> None:
        with pytest.raises(ValueError, match="source must not be empty"):
            Diagnostic(DiagnosticCode.NOT_EXPORTED, "", "b", (), (), "msg")

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            Diagnostic(DiagnosticCode.NOT_EXPORTED, "a", "b", (), (), "")

    def test_empty_imported_raises_for_edges(self) -> None:
        with pytest.raises(ValueError, match="imported must not be empty for FORBIDDEN_LAYER"):
            Diagnostic(DiagnosticCode.FORBIDDEN_LAYER, "a", "", (), (), "msg")

    def test_empty_imported_allowed_for_cycles(self) -> None:
        d = Diagnostic(DiagnosticCode.CYCLE_DETECTED, "a", "", (), (), "msg")
        assert d.imported == ""


class TestMessages:
    """Rendered message text."""

    def test_not_exported(self) -> None:
        d = not_exported("app/b", "domain/internal/b")
        assert d.code is DiagnosticCode.NOT_EXPORTED
        assert d.message == '"app/b" imports "domain/internal/b" which is not exported'
        assert d.allowed == ()
        assert d.forbidden == ()

    def test_forbidden_layer(self) -> None:
        d = forbidden_layer("app/b", ["app"], "other/c", ["other"], ["domain", "app"], ["other"])
        assert d.code is DiagnosticCode.FORBIDDEN_LAYER
        assert d.message == (
            '"app/b" (layer: app) imports "other/c" (layer: other). '
            "Layer(s) other not allowed. Only import from domain, app"
        )
        assert d.allowed == ("domain", "app")
        assert d.forbidden == ("other",)

    def test_forbidden_layer_several_layers(self) -> None:
        """Layer lists are joined with comma and space."""
        d = forbidden_layer("f", ["a", "b"], "g", ["c", "d"], ["a", "b"], ["c", "d"])
        assert '(layer: a, b) imports "g" (layer: c, d). Layer(s) c, d not allowed' in d.message

    def test_cycle_detected(self) -> None:
        d = cycle_detected(["A", "B", "C", "A"])
        assert d.code is DiagnosticCode.CYCLE_DETECTED
        assert d.source == "A"
        assert d.imported == ""
        assert d.message == "Cycle detected in imports: A <= B <= C <= A"

    def test_self_cycle(self) -> None:
        assert cycle_detected(["A", "A"]).message == "Cycle detected in imports: A <= A"

    @pytest.mark.parametrize("chain", [["A"], ["A", "B"], []])
    def test_open_chain_raises(self, chain: list[str]) -> None:
        """A chain must start and end with the closing file."""
        with pytest.raises(ValueError, match="cycle chain"):
            cycle_detected(chain)


class TestDiagnosticFormatting:
    """__str__ and to_dict."""

    def test_str(self) -> None:
        d = not_exported("a", "b")
        assert str(d) == '[NOT_EXPORTED] "a" imports "b" which is not exported'

    def test_to_dict(self) -> None:
        d = forbidden_layer("f", ["app"], "g", ["other"], ["app"], ["other"])
        data = d.to_dict()
        assert data["code"] == "FORBIDDEN_LAYER"
        assert data["source"] == "f"
        assert data["imported"] == "g"
        assert data["allowed"] == ["app"]
        assert data["forbidden"] == ["other"]
        assert data["message"] == d.message
