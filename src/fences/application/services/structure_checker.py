"""Main facade for structure checking.

StructureChecker is the primary entry point for running a layering analysis.
Composition-based: accepts validators and reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Self

from fences.application.classification.classifier import LayerClassifier
from fences.application.services.aggregator import collect_diagnostics, filter_exclusion
from fences.application.services.trace import write_trace
from fences.application.validators import default_validators, validators_from_config
from fences.domain.model.check_result import CheckResult
from fences.domain.model.check_stats import CheckStats
from fences.domain.model.module_graph import ModuleGraph
from fences.domain.ports.reporter import ReporterProtocol
from fences.domain.ports.validator import ValidatorProtocol

if TYPE_CHECKING:
    from pathlib import PurePath

    from fences.domain.model.configuration import StructureConfig
    from fences.domain.ports.module_graph import ModuleGraphProvider

logger = logging.getLogger(__name__)


class StructureChecker:
    """Main facade for structure checking.

    Each check owns a fresh ModuleGraph: collect → exclude → classify →
    validate → aggregate. Nothing is shared between checks, so repeating a
    check on unchanged input yields identical diagnostics.

    Factory methods:
    - with_defaults(): every validator, whatever the config says
    - from_config(): validators enabled by StructureConfig

    Example:
        checker = StructureChecker.from_config(config)
        result = checker.check_mapping({"app/b": ["domain/a"], "domain/a": []})
        if not result.passed:
            print("\\n".join(result.messages))
    """

    def __init__(
        self,
        config: StructureConfig,
        *,
        validators: Sequence[ValidatorProtocol] = (),
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            config: Structure configuration
            validators: Validators to run, in order
            reporter: Optional reporter for output
        """
        if config is None:
            raise TypeError("config must not be None")

        self._config = config
        self._classifier = LayerClassifier(config)
        self._validators = tuple(validators)
        self._reporter = reporter

        for layer, allowed in config.unknown_allowed_layers():
            logger.warning("layer '%s' allows imports from undeclared layer '%s'", layer, allowed)

    @classmethod
    def with_defaults(
        cls,
        config: StructureConfig,
        *,
        display_root: PurePath | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker running every validator."""
        return cls(config, validators=default_validators(display_root), reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: StructureConfig,
        *,
        display_root: PurePath | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker with validators based on config.

        Args:
            config: Structure configuration
            display_root: Absolute identities are rendered relative to it
            reporter: Optional reporter

        Returns:
            StructureChecker with config-based validators
        """
        return cls(
            config,
            validators=validators_from_config(config, display_root),
            reporter=reporter,
        )

    def check(self, provider: ModuleGraphProvider) -> CheckResult:
        """Collect the graph from provider and analyse it."""
        return self.analyse(ModuleGraph.collect(provider))

    def check_mapping(self, imports: Mapping[str, Sequence[str]]) -> CheckResult:
        """Analyse an identity → imported identities mapping."""
        return self.analyse(ModuleGraph.from_mapping(imports))

    def analyse(self, graph: ModuleGraph) -> CheckResult:
        """Run classification and validators on a freshly collected graph.

        Args:
            graph: Module graph, never analysed before

        Returns:
            CheckResult with diagnostics, stats and the classified graph

        Raises:
            ValueError: If graph was already analysed
        """
        graph.seal()
        start_time = time.perf_counter()

        files = filter_exclusion(graph, self._config)
        logger.debug("analysing %d files (%d excluded)", len(files), len(graph) - len(files))

        self._classifier.classify(graph, files)
        self._run_validators(graph, files)
        diagnostics = collect_diagnostics(graph, self._config)

        if self._config.trace_file is not None:
            write_trace(graph, files, self._config.trace_file)

        stats = self._build_stats(graph, files, time.perf_counter() - start_time)
        result = CheckResult(diagnostics=diagnostics, stats=stats, graph=graph)

        # Report if reporter configured
        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _run_validators(self, graph: ModuleGraph, files: Sequence[str]) -> None:
        """Run every validator on a file before moving to the next file."""
        emitted = dict.fromkeys((v.name for v in self._validators), 0)
        for identity in files:
            for validator in self._validators:
                emitted[validator.name] += len(validator.check_file(graph, identity, self._config))

        for name, count in emitted.items():
            logger.debug("validator %s emitted %d diagnostic(s)", name, count)

    def _build_stats(
        self,
        graph: ModuleGraph,
        files: Sequence[str],
        analysis_time_s: float,
    ) -> CheckStats:
        return CheckStats(
            files_analyzed=len(files),
            files_excluded=len(graph) - len(files),
            edges_analyzed=sum(len(graph[f].imports) for f in files),
            layers_configured=len(self._config.layers),
            validators_run=len(self._validators),
            analysis_time_ms=analysis_time_s * 1000,
        )

    @property
    def validator_count(self) -> int:
        """Number of configured validators."""
        return len(self._validators)
