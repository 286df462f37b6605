"""
Command-line interface for buildver.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from buildver.config import load_config
from buildver.commands import resolve, strategies
from buildver.__version__ import __version__
from buildver.context import BuildVerContext
from buildver.exceptions import ConfigError, BuildVerError
from buildver.utils.logger import get_logger, level_for_verbosity, setup_logging
from buildver.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="BUILDVER_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="BUILDVER_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="buildver",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """buildver: resolve a build version from git history or pipeline input.

    \b
    Available commands:
      buildver resolve             Print the version for a strategy
      buildver strategies          List the versioning strategies

    \b
    Examples:
      buildver resolve --strategy Semantic
      buildver resolve --strategy Custom --custom-version 1.2.3
      buildver -v resolve --strategy Tag
    """
    # Respect NO_COLOR for log and console output
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    buildver_ctx = BuildVerContext()
    buildver_ctx.config_path = loaded_config.source_path
    buildver_ctx.color = color
    buildver_ctx.verbose = verbose
    buildver_ctx.config = loaded_config
    ctx.obj = buildver_ctx

    logger.debug("buildver v%s", __version__)
    logger.debug("Config path: %s", buildver_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())


# Register CLI subcommands
cli.add_command(resolve)
cli.add_command(strategies)


def main() -> int:
    """Main entry point for the buildver CLI.

    Returns:
        Exit code:
            0   Success
            1   Resolution or configuration error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except BuildVerError as exc:
        print_error(str(exc))
        logger.debug(
            "BuildVerError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("Operation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
