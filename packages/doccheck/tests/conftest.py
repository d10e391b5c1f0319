"""Shared helpers for building documentation files."""

from pathlib import Path
from typing import Callable

import pytest


def build_doc(
    members: list[tuple[str, str]],
    assembly: str = "doxygen_basic_translate",
    newline: str = "\n",
) -> str:
    """Lay out members the way the translator's XML writer does."""
    lines = [
        '<?xml version="1.0"?>',
        "<doc>",
        "    <assembly>",
        f"        <name>{assembly}</name>",
        "    </assembly>",
        "    <members>",
    ]
    for signature, body in members:
        lines.append(f'        <member name="{signature}">{body}</member>')
    lines += ["    </members>", "</doc>"]
    return newline.join(lines) + newline


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[..., Path]:
    """Write a documentation file from (signature, body) pairs."""

    def _write(members: list[tuple[str, str]], name: str = "doc.xml", newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes(build_doc(members, newline=newline).encode("utf-8"))
        return path

    return _write
