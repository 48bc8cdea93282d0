"""Settings for next-release.

Settings live in the ``[tool.next-release]`` table of pyproject.toml::

    [tool.next-release]
    bootstrap-version = "0.1.0"
    major-on-zero = false

Every key is optional; a missing file or table yields the defaults.
"""

from __future__ import annotations

from pathlib import Path

import tomlkit.exceptions
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError, VersionParseError
from .toml import get_tool_table, load_pyproject
from .versions import BOOTSTRAP_VERSION, parse_version


class Settings(BaseModel):
    """Version computation settings.

    Attributes:
        bootstrap_version: Version assigned to a release that has no tagged
            predecessor.
        major_on_zero: If False, breaking changes on 0.x versions bump the
            minor field instead of the major one.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=lambda name: name.replace("_", "-"),
    )

    bootstrap_version: str = BOOTSTRAP_VERSION
    major_on_zero: bool = True

    @field_validator("bootstrap_version")
    @classmethod
    def _check_bootstrap_version(cls, value: str) -> str:
        try:
            return str(parse_version(value))
        except VersionParseError as exc:
            raise ValueError(str(exc)) from exc


def load_settings(path: Path) -> Settings:
    """Load settings from a pyproject.toml file.

    Args:
        path: Path to pyproject.toml. A missing file yields the defaults.

    Raises:
        ConfigError: If the file cannot be parsed or the table is invalid.
    """
    if not path.exists():
        return Settings()

    try:
        doc = load_pyproject(path)
    except (OSError, tomlkit.exceptions.ParseError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        return Settings.model_validate(get_tool_table(doc))
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.next-release] in {path}: {exc}") from exc
