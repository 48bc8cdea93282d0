"""TOML reading utilities.

Uses tomlkit to read the ``[tool.next-release]`` table from a project's
pyproject.toml.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit

TOOL_NAME = "next-release"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def get_tool_table(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Extract [tool.next-release] as a plain dict.

    Returns an empty dict when the table is missing. Keys are returned as
    written (e.g. "bootstrap-version").
    """
    table = doc.get("tool", {}).get(TOOL_NAME, {})
    return table.unwrap() if table else {}
