"""Configuration loading utilities.

This module loads the YAML configuration that tells the checker where its
fixtures live and how the documentation file is shaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .reader import DEFAULT_CHUNK_SIZE

MODES = ("batch", "fail_fast")


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a doccheck YAML file; an empty file gives ``{}``."""
    config_file = Path(path)
    if not config_file.is_file():
        raise FileNotFoundError(f"doccheck config not found: {config_file}")
    with config_file.open(encoding="utf-8") as stream:
        return yaml.safe_load(stream) or {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Follow ``keys`` down nested mappings, returning ``default`` at the first gap."""
    node = config
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


@dataclass
class CheckerSettings:
    """Options for one conformance run."""

    fixture_path: Path | None = None
    member_tag: str = "member"
    signature_attribute: str = "name"
    mode: str = "batch"
    require_all_fixtures: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got '{self.mode}'")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if not isinstance(self.require_all_fixtures, bool):
            raise ValueError(f"require_all_fixtures must be true or false, got {self.require_all_fixtures!r}")
        if self.fixture_path is not None:
            self.fixture_path = Path(self.fixture_path)

    @property
    def fail_fast(self) -> bool:
        return self.mode == "fail_fast"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> CheckerSettings:
        """Build settings from the ``doccheck`` section of a config dict."""
        defaults = cls()
        return cls(
            fixture_path=get_nested(config, "doccheck", "fixture_path"),
            member_tag=get_nested(config, "doccheck", "member_tag", default=defaults.member_tag),
            signature_attribute=get_nested(
                config, "doccheck", "signature_attribute", default=defaults.signature_attribute
            ),
            mode=get_nested(config, "doccheck", "mode", default=defaults.mode),
            require_all_fixtures=get_nested(
                config, "doccheck", "require_all_fixtures", default=defaults.require_all_fixtures
            ),
            chunk_size=int(get_nested(config, "doccheck", "chunk_size", default=defaults.chunk_size)),
        )


def load_settings(path: str | Path) -> CheckerSettings:
    """
    Load CheckerSettings from a YAML file.

    A relative ``fixture_path`` is resolved against the config file's
    directory.
    """
    path = Path(path)
    settings = CheckerSettings.from_config(load_config(path))
    if settings.fixture_path is not None and not settings.fixture_path.is_absolute():
        settings.fixture_path = path.parent / settings.fixture_path
    return settings
