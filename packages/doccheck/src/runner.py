"""Conformance run: stream records, look up fixtures, compare bodies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

import pandas as pd

from .comparator import CommentChecker, MismatchReport
from .config import CheckerSettings
from .errors import CommentMismatchError, UnusedFixtureError
from .fixtures import default_registry
from .reader import DocumentationReader
from .registry import FixtureRegistry, load_fixtures

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Result of checking one documentation file."""

    records_read: int
    records_checked: int
    mismatches: list[MismatchReport]
    unused: list[str]
    occurrences: dict[str, int] = field(default_factory=dict)
    require_all_fixtures: bool = True

    @property
    def is_valid(self) -> bool:
        if self.mismatches:
            return False
        return not (self.require_all_fixtures and self.unused)

    def raise_for_status(self) -> None:
        """
        Raise if the run failed.

        Raises
        ------
        CommentMismatchError
            If any body differed from its fixture.
        UnusedFixtureError
            If fixtures were never matched and ``require_all_fixtures`` is set.
        """
        if self.mismatches:
            raise CommentMismatchError(self.mismatches)
        if self.require_all_fixtures and self.unused:
            raise UnusedFixtureError(self.unused)

    def summary(self) -> pd.DataFrame:
        """
        One row per fixture with its outcome.

        Returns
        -------
        pd.DataFrame
            Columns ``signature``, ``status`` ('pass', 'mismatch' or
            'unused') and ``occurrences``, in registration order.
        """
        mismatched = {report.signature for report in self.mismatches}
        rows = []
        for signature, count in self.occurrences.items():
            if count == 0:
                status = "unused"
            elif signature in mismatched:
                status = "mismatch"
            else:
                status = "pass"
            rows.append({"signature": signature, "status": status, "occurrences": count})
        return pd.DataFrame(rows, columns=["signature", "status", "occurrences"])


def resolve_registry(settings: CheckerSettings) -> FixtureRegistry:
    """Fixture file from settings if given, else the embedded table."""
    if settings.fixture_path is not None:
        return load_fixtures(settings.fixture_path)
    return default_registry()


def check_documentation(
    source: str | Path | BinaryIO,
    registry: FixtureRegistry | None = None,
    settings: CheckerSettings | None = None,
    raise_on_failure: bool = True,
) -> RunReport:
    """
    Check every fixture-covered member of a documentation file.

    Parameters
    ----------
    source : str | Path | BinaryIO
        Documentation XML file or binary stream.
    registry : FixtureRegistry | None, optional
        Fixtures to check against. Defaults to ``settings.fixture_path``,
        or the embedded table when that is unset. The registry records
        lookups, so pass a fresh one per run.
    settings : CheckerSettings | None, optional
        Run options. Defaults to batch mode with all fixtures required.
    raise_on_failure : bool, default True
        Call ``RunReport.raise_for_status`` before returning.

    Returns
    -------
    RunReport
        Counts, mismatches and unused fixtures for the run.

    Raises
    ------
    MalformedInputError
        If the file is not well-formed XML.
    CommentMismatchError
        On the first mismatch in fail-fast mode, or after the run in batch
        mode when ``raise_on_failure`` is set.
    UnusedFixtureError
        After the run, when fixtures were never matched.

    Examples
    --------
    >>> report = check_documentation("doxygen_basic_translate.xml")
    >>> report.records_checked
    12
    """
    if settings is None:
        settings = CheckerSettings()
    if registry is None:
        registry = resolve_registry(settings)

    checker = CommentChecker(fail_fast=settings.fail_fast)
    records_read = 0

    reader = DocumentationReader(
        source,
        member_tag=settings.member_tag,
        signature_attribute=settings.signature_attribute,
        chunk_size=settings.chunk_size,
    )
    with reader:
        for record in reader:
            records_read += 1
            expected = registry.lookup(record.signature)
            if expected is None:
                logger.debug(f"No fixture for {record.signature}, skipping")
                continue
            checker.check(record.signature, record.body, expected)

    mismatches = checker.mismatches
    report = RunReport(
        records_read=records_read,
        records_checked=checker.passed + len(mismatches),
        mismatches=mismatches,
        unused=registry.unused(),
        occurrences={sig: registry.hits(sig) for sig in registry.signatures},
        require_all_fixtures=settings.require_all_fixtures,
    )

    for signature in report.unused:
        logger.warning(f"Fixture never matched: {signature}")
    logger.info(
        f"Checked {report.records_checked} of {records_read} members from {reader.name}: "
        f"{len(mismatches)} mismatches, {len(report.unused)} unused fixtures"
    )

    if raise_on_failure:
        report.raise_for_status()

    return report
