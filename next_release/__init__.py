"""Compute the next semantic version of a project from conventional commits."""

from __future__ import annotations

from next_release.commits import BumpLevel, Classification, Commit, classify
from next_release.config import Settings, load_settings
from next_release.errors import (
    ConfigError,
    NextReleaseError,
    SerializationError,
    VersionParseError,
)
from next_release.models import Release, ReleaseChain
from next_release.releases import Releases
from next_release.versions import BOOTSTRAP_VERSION, compute_next, parse_version

__all__ = [
    "BOOTSTRAP_VERSION",
    "BumpLevel",
    "Classification",
    "Commit",
    "ConfigError",
    "NextReleaseError",
    "Release",
    "ReleaseChain",
    "Releases",
    "SerializationError",
    "Settings",
    "VersionParseError",
    "classify",
    "compute_next",
    "load_settings",
    "parse_version",
]
