#!/usr/bin/env python3
"""Benchmark script for fences performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of fences package."""
    start = time.perf_counter()
    import fences  # noqa: F401

    return time.perf_counter() - start


def benchmark_classification(files: int) -> float:
    """Measure layer classification of a synthetic file set."""
    from fences.application.classification.classifier import LayerClassifier
    from fences.domain.model.configuration import LayerConfig, StructureConfig

    config = StructureConfig(
        layers={
            "domain": LayerConfig(name="domain", files=("domain/*",), exports=("domain/public/*",)),
            "app": LayerConfig(name="app", files=("app/*",), allow_imports=("domain",)),
        }
    )
    classifier = LayerClassifier(config)
    identities = [f"/repo/src/{'domain' if i % 2 else 'app'}/pkg{i % 50}/m{i}.py" for i in range(files)]

    start = time.perf_counter()
    for identity in identities:
        classifier.resolve(identity)
    return time.perf_counter() - start


def benchmark_full_check(files: int) -> float:
    """Measure a complete check of a chain graph closed into one cycle."""
    from fences.application.services.structure_checker import StructureChecker
    from fences.domain.model.configuration import StructureConfig

    imports = {f"m{i}": [f"m{(i + 1) % files}", "os"] for i in range(files)}
    checker = StructureChecker.from_config(StructureConfig())

    start = time.perf_counter()
    checker.check_mapping(imports)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run fences benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--files",
        type=int,
        default=10000,
        help="Number of synthetic files",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": f"Classification ({args.files} files)",
            "unit": "seconds",
            "value": benchmark_classification(args.files),
        },
        {
            "name": f"Full Check ({args.files} files)",
            "unit": "seconds",
            "value": benchmark_full_check(args.files),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
