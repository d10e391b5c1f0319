"""Command-line entry point for the documentation conformance checker.

Exit codes: 0 when every fixture matched, 1 when a comment mismatched or a
fixture was never matched, 2 when the input, fixtures or configuration could
not be used.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .config import CheckerSettings, load_settings
from .errors import (
    CommentMismatchError,
    DuplicateFixtureError,
    MalformedInputError,
    UnusedFixtureError,
)
from .runner import check_documentation, resolve_registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doccheck",
        description="Verify translated XML documentation against golden fixtures.",
    )
    parser.add_argument("docfile", type=Path, help="XML documentation file to check")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--fixtures", type=Path, help="YAML fixture file (overrides config and embedded fixtures)")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first mismatch")
    parser.add_argument("--allow-unused", action="store_true", help="Do not fail on fixtures that never matched")
    parser.add_argument("--summary", action="store_true", help="Print a per-fixture status table")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def _settings_from_args(args: argparse.Namespace) -> CheckerSettings:
    settings = load_settings(args.config) if args.config else CheckerSettings()
    if args.fixtures:
        settings.fixture_path = args.fixtures
    if args.fail_fast:
        settings.mode = "fail_fast"
    if args.allow_unused:
        settings.require_all_fixtures = False
    return settings


def main(argv: list[str] | None = None) -> int:
    """Run the checker and return a process exit code."""
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = _settings_from_args(args)
        registry = resolve_registry(settings)
        report = check_documentation(args.docfile, registry, settings, raise_on_failure=False)
    except (MalformedInputError, DuplicateFixtureError, FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        logger.error(str(exc))
        return EXIT_ERROR
    except CommentMismatchError as exc:
        logger.error(str(exc))
        return EXIT_FAILED

    if args.summary:
        print(report.summary().to_string(index=False))

    try:
        report.raise_for_status()
    except (CommentMismatchError, UnusedFixtureError) as exc:
        logger.error(str(exc))
        return EXIT_FAILED

    logger.info(f"All {report.records_checked} checked comments match")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
