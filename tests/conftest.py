"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from next_release.models import Release, ReleaseChain


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by CLI tests."""
    yield
    structlog.reset_defaults()
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml with a [tool.next-release] table."""
    content = """\
[project]
name = "test-package"
version = "1.0.0"

[tool.next-release]
bootstrap-version = "0.1.0"
major-on-zero = false
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def tagged_chain() -> ReleaseChain:
    """A chain with two tagged releases and an untagged head."""
    chain = ReleaseChain()
    chain.append(
        Release(
            version="v0.9.0",
            commits=["feat: initial import"],
            commit_id="a1b2c3d",
            timestamp=1_700_000_000,
        )
    )
    chain.link(
        Release(
            version="v1.0.0",
            commits=["feat!: stable api", "docs: usage"],
            commit_id="e4f5a6b",
            timestamp=1_700_100_000,
        )
    )
    chain.link(Release(commits=["fix: handle empty input", "chore: bump deps"]))
    return chain
