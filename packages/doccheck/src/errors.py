"""Error types raised by the conformance checker.

Every error derives from DocCheckError so a harness can catch the whole
family at once. Malformed input and duplicate fixtures are data defects
(ValueError); mismatches and unused fixtures are failed checks
(AssertionError).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .comparator import MismatchReport


class DocCheckError(Exception):
    """Base class for all checker failures."""


class MalformedInputError(DocCheckError, ValueError):
    """The documentation file is not well-formed XML."""

    def __init__(self, source: str, message: str, line: int | None = None, column: int | None = None):
        self.source = source
        self.line = line
        self.column = column
        location = source
        if line is not None:
            location = f"{source}:{line}:{column if column is not None else 0}"
        super().__init__(f"Malformed documentation file {location}: {message}")


class DuplicateFixtureError(DocCheckError, ValueError):
    """Two fixtures were registered under the same signature."""

    def __init__(self, signature: str):
        self.signature = signature
        super().__init__(f"Duplicate fixture signature: {signature}")


class CommentMismatchError(DocCheckError, AssertionError):
    """One or more documentation bodies differ from their fixtures."""

    def __init__(self, mismatches: list[MismatchReport]):
        if not mismatches:
            raise ValueError("CommentMismatchError requires at least one mismatch")
        self.mismatches = list(mismatches)
        header = f"Comments don't match for {len(self.mismatches)} symbol(s)"
        blocks = [report.describe() for report in self.mismatches]
        super().__init__("\n\n".join([header, *blocks]))

    @property
    def signature(self) -> str:
        """Signature of the first mismatching symbol."""
        return self.mismatches[0].signature


class UnusedFixtureError(DocCheckError, AssertionError):
    """Fixtures whose signature never appeared in the documentation file."""

    def __init__(self, signatures: list[str]):
        self.signatures = list(signatures)
        listing = "\n".join(f"  - {sig}" for sig in self.signatures)
        super().__init__(
            f"{len(self.signatures)} fixture(s) never matched a documented symbol:\n{listing}"
        )
