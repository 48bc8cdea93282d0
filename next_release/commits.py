"""Conventional commit classification.

Parses commit messages of the form ``type(scope)!: description`` and maps
them onto a semver bump level:

- ``!`` before the colon, or a ``BREAKING CHANGE:`` footer → major
- ``feat`` → minor
- ``fix`` → patch
- anything else (docs, chore, refactor, non-conventional text) → none

Classification is total: every string classifies, nothing raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel, ConfigDict

HEADER_RE = re.compile(
    r"^(?P<type>[A-Za-z][\w-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<breaking>!)?"
    r":[ \t]+(?P<description>\S.*)$"
)
BREAKING_FOOTER_RE = re.compile(r"^BREAKING[ -]CHANGE:(?:[ \t]|$)", re.MULTILINE)


class BumpLevel(IntEnum):
    """Magnitude of a version increment, ordered by precedence."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3


@dataclass(frozen=True)
class Classification:
    """Result of classifying one commit message.

    Attributes:
        type: Lower-cased type token, or None for non-conventional messages.
        scope: Text inside the parentheses, if any.
        description: Header text after the colon (the whole first line for
            non-conventional messages).
        breaking: True when ``!`` or a breaking-change footer is present.
    """

    type: str | None
    scope: str | None
    description: str
    breaking: bool = False

    @property
    def is_conventional(self) -> bool:
        return self.type is not None

    @property
    def bump(self) -> BumpLevel:
        if self.breaking:
            return BumpLevel.MAJOR
        if self.type == "feat":
            return BumpLevel.MINOR
        if self.type == "fix":
            return BumpLevel.PATCH
        return BumpLevel.NONE


def classify(message: str) -> Classification:
    """Classify a raw commit message.

    Surrounding whitespace is trimmed first, so ``"feat: x\\n"`` and
    ``"feat: x"`` classify identically.

    Examples:
        classify("feat(api)!: drop v1") → type="feat", scope="api", MAJOR
        classify("Merge branch 'main'") → type=None, NONE
    """
    text = message.strip()
    header, _, body = text.partition("\n")
    header = header.rstrip()

    match = HEADER_RE.match(header)
    if match is None:
        return Classification(type=None, scope=None, description=header)

    breaking = bool(match.group("breaking")) or bool(BREAKING_FOOTER_RE.search(body))
    return Classification(
        type=match.group("type").lower(),
        scope=match.group("scope"),
        description=match.group("description").strip(),
        breaking=breaking,
    )


class Commit(BaseModel):
    """A single commit in a release.

    Attributes:
        message: Raw commit message text.
        id: Commit SHA, when the collaborator that read the history knows it.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    id: str | None = None

    @property
    def classification(self) -> Classification:
        return classify(self.message)

    @property
    def bump(self) -> BumpLevel:
        return self.classification.bump
