"""Command line entry point.

Usage:
    fences [PATH] [--config FILE] [--format text|json|rich] [--graph FILE]
           [--no-type-checking] [--verbose]

Exit codes:
    0  project structure is correct
    1  diagnostics were found
    2  configuration or source error
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from fences import __version__
from fences.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from fences.application.services.structure_checker import StructureChecker
from fences.domain.exceptions.configuration import ConfigurationError
from fences.domain.exceptions.provider import ProviderError
from fences.infrastructure.logger import configure_logging
from fences.infrastructure.providers.mapping import MappingProvider
from fences.infrastructure.providers.python_source import PythonSourceProvider
from fences.presentation.api.structure import resolve_config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2

_REPORTERS: dict[str, type[BaseReporter]] = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "rich": ConsoleReporter,
}


def build_parser() -> argparse.ArgumentParser:
    """Configure the ``fences`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="fences",
        description="Check that module imports respect the declared layers",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "path",
        nargs="?",
        default=Path("."),
        type=Path,
        help="Source root and config search start (default: .)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="Config file (.json, .toml or pyproject.toml); default: nearest pyproject.toml",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(_REPORTERS),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--graph",
        type=Path,
        default=None,
        metavar="FILE",
        help='Analyse a JSON edge list {"file": ["imported", ...]} instead of Python sources',
    )
    parser.add_argument(
        "--no-type-checking",
        dest="type_checking",
        action="store_false",
        help="Ignore imports under `if TYPE_CHECKING:`",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a structure check and return the exit code."""
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    reporter = _REPORTERS[args.format]()

    try:
        config = resolve_config(args.path, args.config)
        provider = (
            MappingProvider.from_json(args.graph)
            if args.graph is not None
            else PythonSourceProvider(args.path, include_type_checking=args.type_checking)
        )
        checker = StructureChecker.from_config(config, display_root=Path.cwd(), reporter=reporter)
        result = checker.check(provider)
    except (ConfigurationError, ProviderError) as e:
        print(f"fences: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug(
        "checked %d files in %.1f ms",
        result.stats.files_analyzed,
        result.stats.analysis_time_ms,
    )
    return EXIT_OK if result.passed else EXIT_DIAGNOSTICS


if __name__ == "__main__":
    raise SystemExit(main())
