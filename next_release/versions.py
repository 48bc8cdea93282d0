"""Version parsing and bumping utilities.

Handles conversion between version strings and semver objects and applies
the bump selected by a set of classified commits. Version strings may carry
a single leading ``v`` (as git tags usually do); it is stripped on input and
never added back on output.
"""

from __future__ import annotations

from collections.abc import Iterable

import semver

from .commits import BumpLevel, Classification
from .errors import VersionParseError
from .logging import get_logger

BOOTSTRAP_VERSION = "0.0.1"

logger = get_logger(__name__)


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    Exactly one leading ``v`` is removed before parsing:
    - "1.2.3" → 1.2.3
    - "v1.2.3" → 1.2.3
    - "vv1.2.3" → VersionParseError

    Raises:
        VersionParseError: If the remainder is not a valid semantic version.
    """
    text = version_str[1:] if version_str.startswith("v") else version_str
    try:
        return semver.Version.parse(text)
    except (ValueError, TypeError) as exc:
        raise VersionParseError(version_str) from exc


def highest_bump(classifications: Iterable[Classification]) -> BumpLevel:
    """Return the highest-precedence bump among classifications.

    Precedence is major > minor > patch > none, so the result does not
    depend on commit order.
    """
    return max((c.bump for c in classifications), default=BumpLevel.NONE)


def bump_version(version: semver.Version, level: BumpLevel) -> semver.Version:
    """Apply a bump level to a parsed version.

    Examples:
        1.2.3 + MAJOR → 2.0.0
        1.2.3 + MINOR → 1.3.0
        1.2.3 + PATCH → 1.2.4
        1.2.3 + NONE  → 1.2.3
    """
    if level is BumpLevel.MAJOR:
        return version.bump_major()
    if level is BumpLevel.MINOR:
        return version.bump_minor()
    if level is BumpLevel.PATCH:
        return version.bump_patch()
    return version


def compute_next(
    base_version: str | None,
    classifications: Iterable[Classification],
    *,
    major_on_zero: bool = True,
    bootstrap: str = BOOTSTRAP_VERSION,
) -> str:
    """Compute the next version from a base version and classified commits.

    Args:
        base_version: Version of the previous release, or None if the
            project has never been tagged.
        classifications: Classified commits made since base_version.
        major_on_zero: If False, a breaking change on a 0.x version bumps
            the minor field instead of the major one.
        bootstrap: Version returned when base_version is None.

    Returns:
        The next version, without a leading ``v``.

    Raises:
        VersionParseError: If base_version is not a valid semantic version.
    """
    if base_version is None:
        return bootstrap

    version = parse_version(base_version)
    level = highest_bump(classifications)

    if level is BumpLevel.MAJOR and version.major == 0 and not major_on_zero:
        logger.debug("major_downgraded_on_zero", version=str(version))
        level = BumpLevel.MINOR

    next_version = bump_version(version, level)
    logger.debug(
        "bump_selected",
        base=str(version),
        bump=level.name.lower(),
        next=str(next_version),
    )
    return str(next_version)
