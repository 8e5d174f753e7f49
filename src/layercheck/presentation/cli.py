"""Command-line interface.

Usage:
    layercheck [ROOT] [--config FILE] [--format console|json] [--output FILE]
               [--preset default|ci|development] [--disable CHECK]
               [--no-parallel] [--workers N] [-v | -q]

Exit codes:
    0  no findings
    1  findings reported
    2  analysis failed (missing root, invalid configuration)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from layercheck import __version__
from layercheck.application.reporters import ConsoleReporter, JSONReporter
from layercheck.domain.exceptions import ConfigError
from layercheck.domain.model.enums import FindingCategory
from layercheck.infrastructure.config_loader import load_config
from layercheck.infrastructure.logging_config import setup_logging
from layercheck.presentation.api import analyze

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from layercheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FINDINGS = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="layercheck",
        description="Check layered-architecture rules and dependency declarations",
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Source root to scan (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (layercheck.toml or pyproject.toml)",
    )
    parser.add_argument(
        "--format",
        choices=("console", "json"),
        default="console",
        help="Output format (default: console)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write report to file instead of stdout",
    )
    parser.add_argument(
        "--preset",
        choices=("default", "ci", "development"),
        default=None,
        help="Configuration preset",
    )
    parser.add_argument(
        "--disable",
        action="append",
        default=None,
        metavar="CHECK",
        choices=[c.key for c in FindingCategory],
        help="Disable a check (repeatable)",
    )
    parser.add_argument(
        "--no-parallel",
        dest="parallel",
        action="store_false",
        default=None,
        help="Run extraction and checkers sequentially",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also append log records to this file",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads (default: min(cpu_count, 8))",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Errors only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _make_reporter(fmt: str, output: TextIO) -> ReporterProtocol:
    if fmt == "json":
        return JSONReporter(output)
    return ConsoleReporter(output=output)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    try:
        config = load_config(
            args.config,
            preset=args.preset,
            parallel=args.parallel,
            max_workers=args.workers,
            disabled_checks=args.disable,
        )
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    if args.output is not None:
        with args.output.open("w", encoding="utf-8") as stream:
            result = analyze(args.root, config, reporter=_make_reporter(args.format, stream))
    else:
        result = analyze(args.root, config, reporter=_make_reporter(args.format, sys.stdout))

    if result.failed:
        return EXIT_FAILURE
    return EXIT_PASSED if result.passed else EXIT_FINDINGS


if __name__ == "__main__":
    sys.exit(main())
