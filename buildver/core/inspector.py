"""Repository queries built on :class:`~buildver.core.runner.CommandRunner`.

Each public coroutine on :class:`RepositoryInspector` runs exactly one git
command and interprets its output. Nothing is cached: callers that need
a fact twice within one resolution keep the first answer themselves.
Command failures propagate unchanged.
"""

from __future__ import annotations

import re
import shlex
from typing import Optional

from buildver.constants import (
    GIT_COUNT_COMMITS,
    GIT_COUNT_VERSION_TAGS,
    GIT_DESCRIBE,
    GIT_DIFF_EXCERPT,
    GIT_FETCH_ALL,
    GIT_STATUS_PORCELAIN,
    GIT_TAG_POINTS_AT_HEAD,
)
from buildver.core.runner import CommandRunner
from buildver.exceptions import ParseError
from buildver.utils.logger import get_logger

logger = get_logger("core.inspector")

__all__ = ["RepositoryInspector"]

_COUNT_PATTERN = re.compile(r"[0-9]+")


def _parse_count(output: str, command: str) -> int:
    """Parse a non-negative decimal count printed by ``command``."""
    if not _COUNT_PATTERN.fullmatch(output):
        raise ParseError(
            "Expected a number from command output",
            output=output,
            command=command,
        )
    return int(output, 10)


class RepositoryInspector:
    """Source-control facts for the repository a runner points at.

    Args:
        runner: Command runner whose working directory is the repository.
    """

    __slots__ = ("runner",)

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    async def fetch_all(self) -> None:
        """Fetch every remote; only completion matters."""
        await self.runner.run(GIT_FETCH_ALL)

    async def log_diff(self, max_lines: int) -> str:
        """Log and return the first ``max_lines`` lines of the worktree diff."""
        diff = await self.runner.run(GIT_DIFF_EXCERPT.format(max_lines=int(max_lines)))
        if diff:
            logger.info("Uncommitted changes (first %d lines):\n%s", max_lines, diff)
        return diff

    async def get_version_description(self, ref: Optional[str] = None) -> str:
        """Return ``git describe`` output for ``ref`` (HEAD when omitted)."""
        command = GIT_DESCRIBE.format(ref=shlex.quote(ref) if ref else "").rstrip()
        return await self.runner.run(command)

    async def is_dirty(self) -> bool:
        """Return ``True`` if ``git status`` lists any changed path."""
        output = await self.runner.run(GIT_STATUS_PORCELAIN)
        return output != ""

    async def get_tag(self) -> str:
        """Return the tag(s) pointing at HEAD, as printed by git."""
        return await self.runner.run(GIT_TAG_POINTS_AT_HEAD)

    async def has_any_version_tags(self) -> bool:
        """Return ``True`` if at least one ``v``-tag is reachable from HEAD.

        Raises:
            ParseError: The count output is not a number.
        """
        output = await self.runner.run(GIT_COUNT_VERSION_TAGS)
        return _parse_count(output, GIT_COUNT_VERSION_TAGS) > 0

    async def get_total_number_of_commits(self) -> int:
        """Return the number of commits reachable from HEAD.

        Raises:
            ParseError: The count output is not a number.
        """
        output = await self.runner.run(GIT_COUNT_COMMITS)
        return _parse_count(output, GIT_COUNT_COMMITS)
