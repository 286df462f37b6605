"""Asynchronous shell command runner.

:class:`CommandRunner` is the single seam between buildver and external
processes. It runs one shell command line, waits for it to finish and
returns its trimmed standard output. Non-zero exits and launch failures
are raised as :class:`~buildver.exceptions.CommandExecutionError`;
nothing is retried.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Union

from buildver.exceptions import CommandExecutionError
from buildver.utils.logger import get_logger

logger = get_logger("core.runner")

__all__ = ["CommandRunner"]


class CommandRunner:
    """Run shell commands in a fixed working directory.

    Args:
        cwd: Working directory for every command; defaults to the
            process working directory.

    Example:
        >>> runner = CommandRunner(cwd="path/to/project")
        >>> await runner.run("git rev-list --count HEAD")
        '42'
    """

    __slots__ = ("cwd",)

    def __init__(self, cwd: Optional[Union[str, Path]] = None) -> None:
        self.cwd: Optional[str] = str(cwd) if cwd is not None else None

    async def run(self, command: str) -> str:
        """Execute ``command`` through the shell and return trimmed stdout.

        Raises:
            CommandExecutionError: The process could not be started or
                exited with a non-zero status.
        """
        logger.debug("Running: %s", command)

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self.cwd,
            )
        except OSError as exc:
            raise CommandExecutionError(
                f"Failed to launch command: {command}",
                command=command,
                original_error=exc,
            ) from exc

        stdout, stderr = await process.communicate()
        output = stdout.decode("utf-8", errors="replace").strip()
        error_output = stderr.decode("utf-8", errors="replace").strip()

        logger.debug("Exit status %s for: %s", process.returncode, command)

        if process.returncode != 0:
            raise CommandExecutionError(
                f"Command failed with exit status {process.returncode}: {command}",
                command=command,
                exit_code=process.returncode,
                stderr=error_output,
            )

        return output
