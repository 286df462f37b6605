"""Resolve command implementation for buildver.

Prints the resolved version, and nothing else, on stdout so a pipeline
step can capture it::

    $ buildver resolve --strategy Semantic
    1.4.12

    $ BUILDVER_STRATEGY=Custom BUILDVER_VERSION=2024.1-rc1 buildver resolve
    2024.1-rc1

Every failure stops the command with exit status 1 and the error message
on stderr. No fallback version is ever printed.
"""

from __future__ import annotations

import sys
import click
import asyncio
from pathlib import Path
from typing import Any, Optional

from buildver.constants import NO_VERSION
from buildver.core import Versioning
from buildver.exceptions import BuildVerError
from buildver.context import pass_context, BuildVerContext
from buildver.utils import (
    get_logger,
    is_pep440_version,
    print_error,
    print_warning,
)

logger = get_logger("commands.resolve")


@click.command()
@click.option(
    "--strategy",
    "-s",
    envvar="BUILDVER_STRATEGY",
    help="Versioning strategy: None, Semantic, Tag or Custom.",
)
@click.option(
    "--custom-version",
    envvar="BUILDVER_VERSION",
    help="Version returned verbatim by the Custom strategy.",
)
@click.option(
    "--project-path",
    "-p",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar="BUILDVER_PROJECT_PATH",
    help="Repository directory git commands run in.",
)
@click.option(
    "--allow-dirty-build/--no-allow-dirty-build",
    default=None,
    envvar="BUILDVER_ALLOW_DIRTY_BUILD",
    help="Allow semantic versions of a worktree with uncommitted changes.",
)
@pass_context
def resolve(
    ctx: BuildVerContext,
    strategy: Optional[str],
    custom_version: Optional[str],
    project_path: Optional[Path],
    allow_dirty_build: Optional[bool],
) -> None:
    """Resolve the build version and print it to stdout.

    Options left unset fall back to the configuration file, then to the
    built-in defaults.
    """
    config = ctx.config
    strategy = strategy if strategy is not None else config.strategy
    project_path = project_path if project_path is not None else Path(config.project_path)
    if allow_dirty_build is None:
        allow_dirty_build = config.allow_dirty_build

    versioning = Versioning.for_project(
        project_path,
        allow_dirty_build=allow_dirty_build,
        max_diff_lines=config.max_diff_lines,
    )

    try:
        version = asyncio.run(versioning.determine_version(strategy, custom_version))
    except BuildVerError as e:
        print_error(f"{e}")
        logger.debug("Resolution failed", exc_info=True)
        sys.exit(1)

    _warn_if_not_pep440(version)
    click.echo("" if version is None else version)


def _warn_if_not_pep440(version: Any) -> None:
    """Report versions packaging tools would reject, without changing them."""
    if version == NO_VERSION or is_pep440_version(version):
        return
    print_warning(f"Resolved version {version!r} is not a valid PEP 440 version")
