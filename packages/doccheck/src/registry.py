"""Fixture registry: expected documentation bodies keyed by signature.

The registry is built once from a closed table of golden fixtures and never
changes afterwards. Lookups are recorded so that fixtures the translator
never emitted can be reported after a run.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml

from .errors import DuplicateFixtureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureEntry:
    """A golden (signature, expected body) pair."""

    signature: str
    expected_body: str


class FixtureRegistry:
    """
    Closed mapping from member signature to expected documentation body.

    Parameters
    ----------
    entries : Iterable[FixtureEntry]
        Fixtures to register. Signatures must be unique.

    Raises
    ------
    DuplicateFixtureError
        If two entries share a signature.

    Examples
    --------
    >>> registry = FixtureRegistry.from_pairs([("M:pkg.f", "<summary>f</summary>")])
    >>> registry.lookup("M:pkg.f")
    '<summary>f</summary>'
    >>> registry.lookup("M:pkg.other") is None
    True
    >>> registry.unused()
    []
    """

    def __init__(self, entries: Iterable[FixtureEntry]):
        self._entries: dict[str, FixtureEntry] = {}
        for entry in entries:
            if entry.signature in self._entries:
                raise DuplicateFixtureError(entry.signature)
            self._entries[entry.signature] = entry
        self._hits: Counter[str] = Counter()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> FixtureRegistry:
        return cls(FixtureEntry(signature, body) for signature, body in pairs)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, signature: object) -> bool:
        return signature in self._entries

    def __iter__(self) -> Iterator[FixtureEntry]:
        return iter(self._entries.values())

    @property
    def signatures(self) -> list[str]:
        return list(self._entries)

    def lookup(self, signature: str) -> str | None:
        """Return the expected body for ``signature``, or None if unregistered."""
        entry = self._entries.get(signature)
        if entry is None:
            return None
        self._hits[signature] += 1
        return entry.expected_body

    def hits(self, signature: str) -> int:
        return self._hits[signature]

    def unused(self) -> list[str]:
        """Signatures never looked up, in registration order."""
        return [sig for sig in self._entries if self._hits[sig] == 0]


def _entries_from_yaml(data: Any, path: Path) -> Iterator[FixtureEntry]:
    if isinstance(data, dict):
        data = data.get("fixtures")
    if data is None:
        return
    if not isinstance(data, list):
        raise ValueError(f"Fixture file {path} must contain a list of fixtures")

    for index, item in enumerate(data):
        if not isinstance(item, dict) or "signature" not in item or "body" not in item:
            raise ValueError(f"Fixture #{index} in {path} needs 'signature' and 'body' keys")
        signature, body = item["signature"], item["body"]
        if not isinstance(signature, str) or not isinstance(body, str):
            raise ValueError(f"Fixture #{index} in {path}: signature and body must be strings")
        yield FixtureEntry(signature, body)


def load_fixtures(path: str | Path) -> FixtureRegistry:
    """
    Load a fixture registry from a YAML file.

    Parameters
    ----------
    path : str | Path
        YAML file holding a list of ``{signature, body}`` mappings, either at
        the top level or under a ``fixtures`` key.

    Returns
    -------
    FixtureRegistry
        Registry built from the file, in file order.

    Raises
    ------
    FileNotFoundError
        If the fixture file does not exist.
    ValueError
        If an entry is missing a key or holds a non-string value.
    DuplicateFixtureError
        If a signature appears twice.
    yaml.YAMLError
        If the YAML is malformed.

    Examples
    --------
    >>> registry = load_fixtures("conf/fixtures/doxygen_basic_translate.yaml")
    >>> len(registry)
    12
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Fixture file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    registry = FixtureRegistry(_entries_from_yaml(data, path))
    logger.info(f"Loaded {len(registry)} fixtures from {path}")

    return registry
