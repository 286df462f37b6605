"""
Shared context object for buildver CLI commands.

Created once per CLI invocation and handed to subcommands through
Click's context mechanism.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from buildver.config import BuildVerConfig


class BuildVerContext:
    """Global context object for buildver CLI commands.

    Attributes:
        config_path: Path to the configuration file that was loaded, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; defaults when no file was found.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: BuildVerConfig = BuildVerConfig()


#: Click decorator for injecting :class:`BuildVerContext` into commands.
pass_context = click.make_pass_decorator(BuildVerContext, ensure=True)
