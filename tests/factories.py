"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

from fences.application.classification.classifier import LayerClassifier
from fences.application.services.aggregator import filter_exclusion
from fences.domain.model.configuration import ExportPolicy, LayerConfig, StructureConfig
from fences.domain.model.module_graph import ModuleGraph


def make_layer(
    name: str,
    *files: str,
    allow: Sequence[str] = (),
    exports: Sequence[str] | None = None,
) -> LayerConfig:
    """Create a LayerConfig for tests.

    Args:
        name: Layer name
        files: File patterns (default: "<name>/*")
        allow: allowImports
        exports: Export patterns (None = everything exported)

    Returns:
        LayerConfig instance
    """
    return LayerConfig(
        name=name,
        files=files or (f"{name}/*",),
        allow_imports=tuple(allow),
        exports=None if exports is None else tuple(exports),
    )


def make_config(
    *layers: LayerConfig,
    exclude: Sequence[str] = ("node_modules",),
    ignore_cycles: bool = False,
    trace_file: Path | None = None,
    export_policy: ExportPolicy = ExportPolicy.LAST_MATCH,
) -> StructureConfig:
    """Create a StructureConfig from layers in declaration order."""
    return StructureConfig(
        layers={layer.name: layer for layer in layers},
        exclude=tuple(exclude),
        ignore_cycles=ignore_cycles,
        trace_file=trace_file,
        export_policy=export_policy,
    )


def layered_config(**kwargs: object) -> StructureConfig:
    """domain ← app configuration used by most tests, plus an isolated "other" layer."""
    return make_config(
        make_layer("domain"),
        make_layer("app", allow=["domain"]),
        make_layer("other"),
        **kwargs,  # type: ignore[arg-type]
    )


def make_graph(imports: Mapping[str, Sequence[str]]) -> ModuleGraph:
    """Create a ModuleGraph; keys are the known files."""
    return ModuleGraph.from_mapping(imports)


def classified_graph(
    config: StructureConfig,
    imports: Mapping[str, Sequence[str]],
) -> tuple[ModuleGraph, tuple[str, ...]]:
    """Create a graph, drop excluded files and classify the rest.

    Returns:
        (graph, identities left after exclusion)
    """
    graph = make_graph(imports)
    files = filter_exclusion(graph, config)
    LayerClassifier(config).classify(graph, files)
    return graph, files


def write_sources(root: Path, files: Mapping[str, str]) -> Path:
    """Write a source tree below root.

    Args:
        root: Directory to write into
        files: Relative path → file content

    Returns:
        root
    """
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root
