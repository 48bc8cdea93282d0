"""Release records and the chain that links them.

A project's history is a sequence of releases, each pointing back at the
release before it. Instead of nesting each predecessor inside its successor,
releases live in a :class:`ReleaseChain` and refer to their predecessor by
position, so long histories can be walked without recursion.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .commits import Commit
from .config import Settings
from .logging import get_logger
from .versions import compute_next

logger = get_logger(__name__)


class Release(BaseModel):
    """One version's worth of history.

    Attributes:
        version: Release version (the git tag), or None if not yet tagged.
        commits: Commits made for the release, oldest first. Plain strings
            are accepted and wrapped in :class:`Commit`.
        commit_id: SHA of the tagged commit.
        timestamp: Release time in seconds since the epoch.
        previous: Position of the predecessor in the owning ReleaseChain,
            or None for the first release.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    version: str | None = None
    commits: list[Commit] = Field(default_factory=list)
    commit_id: str | None = Field(default=None, alias="commit_id")
    timestamp: int = 0
    previous: int | None = Field(default=None, exclude=True, frozen=True)

    @field_validator("commits", mode="before")
    @classmethod
    def _wrap_messages(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [Commit(message=c) if isinstance(c, str) else c for c in value]
        return value

    @field_validator("previous", mode="before")
    @classmethod
    def _drop_nested_previous(cls, value: Any) -> Any:
        # Documents from other tools nest the predecessor instead of indexing it.
        if isinstance(value, (dict, Release)):
            return None
        return value


class ReleaseChain:
    """Releases of one project, oldest first.

    A release may only point at a release that was appended before it, so
    the chain can never contain a cycle.

    Example:
        chain = ReleaseChain()
        chain.append(Release(version="v1.0.0"))
        head = chain.link(Release(commits=["feat: add xyz"]))
        chain.calculate_next_version(head)  → "1.1.0"
    """

    def __init__(self, releases: list[Release] | None = None) -> None:
        self._releases: list[Release] = []
        self._members: set[int] = set()
        for release in releases or []:
            self.append(release)

    def __len__(self) -> int:
        return len(self._releases)

    def __iter__(self) -> Iterator[Release]:
        return iter(self._releases)

    def __getitem__(self, index: int) -> Release:
        return self._releases[index]

    def append(self, release: Release) -> int:
        """Add a release and return its position.

        Raises:
            ValueError: If the release is already in the chain, or if
                release.previous does not name a release that is.
        """
        if id(release) in self._members:
            raise ValueError("Release is already in the chain")
        previous = release.previous
        if previous is not None and not 0 <= previous < len(self._releases):
            raise ValueError(
                f"Previous release index {previous} is not in the chain "
                f"(0..{len(self._releases) - 1})"
            )
        self._releases.append(release)
        self._members.add(id(release))
        return len(self._releases) - 1

    def link(self, release: Release) -> int:
        """Append a copy of release whose predecessor is the last release.

        Returns the position of the stored copy; look it up with chain[index].
        """
        previous = len(self._releases) - 1 if self._releases else None
        return self.append(release.model_copy(update={"previous": previous}))

    def previous_of(self, index: int) -> Release | None:
        """Return the predecessor of the release at index, if any."""
        previous = self._releases[index].previous
        return None if previous is None else self._releases[previous]

    def history(self, index: int) -> Iterator[Release]:
        """Yield the release at index, then each predecessor back to the origin."""
        current: int | None = index
        while current is not None:
            release = self._releases[current]
            yield release
            current = release.previous

    def set_version(self, index: int, version: str) -> None:
        """Record the version of the release at index."""
        self._releases[index].version = version

    def calculate_next_version(
        self, index: int, settings: Settings | None = None
    ) -> str:
        """Calculate the version of the release at index from its commits.

        Uses the predecessor's version as the base. When there is no
        predecessor, or the predecessor has no version, the bootstrap version
        is returned regardless of the commits.

        The release itself is not modified; use set_version to record the
        result.

        Raises:
            VersionParseError: If the predecessor's version is not valid semver.
        """
        settings = settings or Settings()
        release = self._releases[index]
        previous = self.previous_of(index)

        if previous is None or previous.version is None:
            logger.warning(
                "no_previous_release",
                hint=f"Using {settings.bootstrap_version} as the next version",
            )
            return settings.bootstrap_version

        return compute_next(
            previous.version,
            (commit.classification for commit in release.commits),
            major_on_zero=settings.major_on_zero,
            bootstrap=settings.bootstrap_version,
        )

    def fill_versions(self, settings: Settings | None = None) -> list[int]:
        """Compute and record the version of every untagged release.

        Releases are processed oldest first, so an untagged release sees the
        version just computed for its predecessor.

        Returns:
            Positions of the releases that were assigned a version.
        """
        filled: list[int] = []
        for index, release in enumerate(self._releases):
            if release.version is None:
                self.set_version(index, self.calculate_next_version(index, settings))
                filled.append(index)
        return filled
