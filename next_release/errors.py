"""Exceptions raised by next-release.

Every failure surfaces to the immediate caller as one of these types; the
library never logs and swallows an error.
"""

from __future__ import annotations


class NextReleaseError(Exception):
    """Base class for all next-release errors."""


class VersionParseError(NextReleaseError, ValueError):
    """A previous release's version is not a valid semantic version.

    Attributes:
        version: The offending version string, as given.
    """

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid semantic version: {version!r}")


class SerializationError(NextReleaseError):
    """A release collection could not be encoded or decoded."""


class ConfigError(NextReleaseError):
    """The [tool.next-release] table is unreadable or invalid."""
