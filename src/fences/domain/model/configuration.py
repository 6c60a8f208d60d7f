"""Layer structure configuration.

User-provided description of the layers, their import allow-lists and their
export patterns. Declaration order of layers is significant.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from fences.domain.model.pattern import (
    CompiledPattern,
    compile_exclude_pattern,
    compile_layer_pattern,
    matches_any,
)

DEFAULT_EXCLUDE: tuple[str, ...] = ("node_modules",)


class ExportPolicy(Enum):
    """How export clauses of several matching layers combine."""

    LAST_MATCH = "last-match"  # last matching layer with exports decides
    ANY_MATCH = "any-match"  # exported if any matching export clause matches


@dataclass(frozen=True, slots=True)
class LayerConfig:
    """One named layer.

    Attributes:
        name: Layer name
        files: Glob patterns selecting the layer's files
        allow_imports: Other layers this layer may import from
        exports: Glob patterns of visible files. None = everything exported.
    """

    name: str
    files: tuple[str, ...]
    allow_imports: tuple[str, ...] = ()
    exports: tuple[str, ...] | None = None
    _file_patterns: tuple[CompiledPattern, ...] = field(
        init=False, repr=False, compare=False, default=()
    )
    _export_patterns: tuple[CompiledPattern, ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self) -> None:
        """Validate invariants and compile patterns. FAIL-FIRST."""
        if not self.name:
            raise ValueError("layer name must not be empty")
        if isinstance(self.files, str):
            raise TypeError(f"layer '{self.name}': files must be a sequence of patterns")
        if isinstance(self.exports, str):
            raise TypeError(f"layer '{self.name}': exports must be a sequence of patterns")

        object.__setattr__(
            self, "_file_patterns", tuple(compile_layer_pattern(p) for p in self.files)
        )
        if self.exports is not None:
            object.__setattr__(
                self, "_export_patterns", tuple(compile_layer_pattern(p) for p in self.exports)
            )

    def matches(self, identity: str) -> bool:
        """Check if file belongs to this layer."""
        return matches_any(identity, self._file_patterns)

    @property
    def has_exports(self) -> bool:
        """True if the layer restricts visibility."""
        return self.exports is not None

    def exports_file(self, identity: str) -> bool:
        """Check if file is visible according to this layer's export clause.

        Raises:
            ValueError: If the layer has no export clause
        """
        if self.exports is None:
            raise ValueError(f"layer '{self.name}' has no exports clause")
        return matches_any(identity, self._export_patterns)


@dataclass(frozen=True, slots=True)
class StructureConfig:
    """Complete layering configuration.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        layers: Layer name → LayerConfig, in declaration order
        exclude: Glob patterns of files left out of the analysis
        ignore_cycles: Skip cycle detection
        trace_file: Where to dump the classified graph as JSON. None = disabled.
        export_policy: How export clauses of several layers combine
    """

    layers: Mapping[str, LayerConfig] = field(default_factory=dict)
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    ignore_cycles: bool = False
    trace_file: Path | None = None
    export_policy: ExportPolicy = ExportPolicy.LAST_MATCH
    _exclude_patterns: tuple[CompiledPattern, ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name, layer in self.layers.items():
            if name != layer.name:
                raise ValueError(f"layer key '{name}' does not match layer name '{layer.name}'")
        if isinstance(self.exclude, str):
            raise TypeError("exclude must be a sequence of patterns")

        object.__setattr__(self, "layers", MappingProxyType(dict(self.layers)))
        object.__setattr__(
            self, "_exclude_patterns", tuple(compile_exclude_pattern(p) for p in self.exclude)
        )

    def is_excluded(self, identity: str) -> bool:
        """Check if file is left out of the analysis."""
        return matches_any(identity, self._exclude_patterns)

    def layer(self, name: str) -> LayerConfig:
        """Get layer by name.

        Raises:
            KeyError: If layer is not declared
        """
        return self.layers[name]

    def unknown_allowed_layers(self) -> tuple[tuple[str, str], ...]:
        """(layer, referenced name) pairs of allowImports naming undeclared layers."""
        return tuple(
            (layer.name, allowed)
            for layer in self.layers.values()
            for allowed in layer.allow_imports
            if allowed not in self.layers
        )

    @classmethod
    def empty(cls) -> StructureConfig:
        """Configuration without layers (only cycle detection is meaningful)."""
        return cls()
