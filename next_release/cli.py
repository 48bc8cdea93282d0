"""CLI entry point for next-release."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import click

from next_release.config import Settings, load_settings
from next_release.errors import NextReleaseError
from next_release.logging import configure_logging
from next_release.models import Release, ReleaseChain
from next_release.releases import Releases


def _split_messages(text: str) -> list[str]:
    """Split stdin into commit messages.

    NUL-separated input (``git log -z``) keeps multi-line messages intact;
    otherwise each non-blank line is one message.
    """
    parts = text.split("\0") if "\0" in text else text.splitlines()
    return [part for part in parts if part.strip()]


@click.group()
@click.version_option(package_name="next-release")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option("--json-log", is_flag=True, help="Write logs as JSON lines.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default="pyproject.toml",
    show_default=True,
    help="pyproject.toml holding a [tool.next-release] table.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    json_log: bool,
    config_path: Path,
) -> None:
    """Compute the next semantic version from conventional commits."""
    configure_logging(verbose=verbose, quiet=quiet, json_log=json_log)
    try:
        ctx.obj = load_settings(config_path)
    except NextReleaseError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option(
    "-p",
    "--previous",
    default=None,
    help="Version of the last release (e.g. v1.2.0). Omit if never tagged.",
)
@click.option(
    "-f",
    "--file",
    "messages_file",
    type=click.File("r"),
    default="-",
    help="Read commit messages from FILE when none are given. (default: stdin)",
)
@click.argument("messages", nargs=-1)
@click.pass_obj
def bump(
    settings: Settings,
    previous: str | None,
    messages_file: TextIO,
    messages: tuple[str, ...],
) -> None:
    """Print the next version for MESSAGES (or commit messages on stdin)."""
    commits = list(messages) or _split_messages(messages_file.read())

    chain = ReleaseChain()
    if previous is not None:
        chain.append(Release(version=previous))
    head = chain.link(Release(commits=commits))

    try:
        click.echo(chain.calculate_next_version(head, settings))
    except NextReleaseError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("document", type=click.File("r"), default="-")
@click.option("--indent", type=int, default=None, help="Pretty-print with this indent.")
@click.pass_obj
def context(settings: Settings, document: TextIO, indent: int | None) -> None:
    """Fill in missing versions of a releases DOCUMENT (default: stdin).

    Releases are expected oldest first; each one is linked to the release
    listed before it.
    """
    try:
        releases = Releases.from_json(document.read()).releases
        chain = ReleaseChain()
        for release in releases:
            chain.link(release)
        chain.fill_versions(settings)
        click.echo(Releases(releases=list(chain)).as_json(indent=indent))
    except NextReleaseError as e:
        raise click.ClickException(str(e)) from e
