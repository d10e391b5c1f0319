"""Comparison of translated documentation bodies against fixtures.

Both sides are normalized by removing carriage returns, then compared for
exact equality. No trimming, whitespace folding or XML-aware diffing takes
place: the translator's exact text is what is under test.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import CommentMismatchError

logger = logging.getLogger(__name__)

_RULE = "-" * 40


def normalize_comment(text: str) -> str:
    """
    Strip every carriage return, leaving line feeds in place.

    Examples
    --------
    >>> normalize_comment("<summary>\\r\\nText\\r\\n</summary>")
    '<summary>\\nText\\n</summary>'
    """
    return text.replace("\r", "")


@dataclass(frozen=True)
class MismatchReport:
    """A failed comparison. Bodies are stored normalized."""

    signature: str
    actual_body: str
    expected_body: str

    def describe(self) -> str:
        """Render the signature and both bodies in full."""
        return "\n".join([
            f"Signature: {self.signature}",
            f"Actual:\n{_RULE}\n{self.actual_body}\n{_RULE}",
            f"Expected:\n{_RULE}\n{self.expected_body}\n{_RULE}",
        ])


def compare_comment(signature: str, actual: str, expected: str) -> None:
    """
    Compare one documentation body against its fixture.

    Raises
    ------
    CommentMismatchError
        If the normalized texts differ.
    """
    actual = normalize_comment(actual)
    expected = normalize_comment(expected)
    if actual != expected:
        raise CommentMismatchError([MismatchReport(signature, actual, expected)])


class CommentChecker:
    """
    Stateful comparator for one run.

    Parameters
    ----------
    fail_fast : bool, default False
        Raise on the first mismatch instead of collecting all of them.
    """

    def __init__(self, fail_fast: bool = False):
        self.fail_fast = fail_fast
        self.passed = 0
        self._mismatches: list[MismatchReport] = []

    @property
    def mismatches(self) -> list[MismatchReport]:
        return list(self._mismatches)

    def check(self, signature: str, actual: str, expected: str) -> bool:
        """Return True on a match; record or raise on a mismatch."""
        try:
            compare_comment(signature, actual, expected)
        except CommentMismatchError as exc:
            if self.fail_fast:
                raise
            logger.debug(f"Mismatch for {signature}")
            self._mismatches.extend(exc.mismatches)
            return False
        self.passed += 1
        logger.debug(f"Match for {signature}")
        return True

    def raise_for_mismatches(self) -> None:
        if self._mismatches:
            raise CommentMismatchError(self._mismatches)
