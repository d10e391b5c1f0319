"""doccheck - documentation-comment conformance checker.

Streams an XML documentation file produced by a comment translator and
checks each documented member against a closed set of golden fixtures.

Public API:
- DocumentationReader / read_records: stream member records from XML
- FixtureRegistry / load_fixtures: golden bodies keyed by signature
- default_registry: embedded fixtures for doxygen_basic_translate
- normalize_comment / compare_comment / CommentChecker: comparison
- check_documentation: run a full check and return a RunReport
- load_config / CheckerSettings: YAML configuration
"""

from .comparator import CommentChecker, MismatchReport, compare_comment, normalize_comment
from .config import CheckerSettings, load_config, load_settings
from .errors import (
    CommentMismatchError,
    DocCheckError,
    DuplicateFixtureError,
    MalformedInputError,
    UnusedFixtureError,
)
from .fixtures import DOXYGEN_BASIC_TRANSLATE, default_registry
from .reader import DocumentationReader, DocumentationRecord, read_records
from .registry import FixtureEntry, FixtureRegistry, load_fixtures
from .runner import RunReport, check_documentation

__all__ = [
    "CheckerSettings",
    "CommentChecker",
    "CommentMismatchError",
    "DOXYGEN_BASIC_TRANSLATE",
    "DocCheckError",
    "DocumentationReader",
    "DocumentationRecord",
    "DuplicateFixtureError",
    "FixtureEntry",
    "FixtureRegistry",
    "MalformedInputError",
    "MismatchReport",
    "RunReport",
    "UnusedFixtureError",
    "check_documentation",
    "compare_comment",
    "default_registry",
    "load_config",
    "load_fixtures",
    "load_settings",
    "normalize_comment",
    "read_records",
]
