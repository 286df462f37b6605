"""Versioning strategies and their dispatcher.

:class:`Versioning` maps strategy names to resolvers and turns a strategy
choice into one version string:

- ``None``     → the literal ``"none"``
- ``Custom``   → the caller's value, untouched
- ``Tag``      → the tag on HEAD without its leading ``v``
- ``Semantic`` → ``<MAJOR>.<MINOR>.<commits since tag>`` from
  ``git describe``, or ``0.0.<total commits>`` before the first tag

The registry is a read-only mapping. Entries may be an
:class:`UnimplementedStrategy` placeholder, which is recognised but fails
with :class:`~buildver.exceptions.StrategyNotImplementedError`.

Typical usage::

    versioning = Versioning.for_project("path/to/project")
    version = await versioning.determine_version("Semantic")
"""

from __future__ import annotations

import os
from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from buildver.constants import (
    BRANCH_REF_PREFIX,
    DEFAULT_ALLOW_DIRTY_BUILD,
    DEFAULT_MAX_DIFF_LINES,
    DEFAULT_PROJECT_PATH,
    ENV_HEAD_REF,
    ENV_REF,
    NO_VERSION,
)
from buildver.core.assembler import (
    assemble_semantic_version,
    assemble_untagged_version,
    strip_version_prefix,
)
from buildver.core.description import ParsedDescription, parse_description
from buildver.core.inspector import RepositoryInspector
from buildver.core.runner import CommandRunner
from buildver.exceptions import (
    DirtyWorktreeError,
    InvalidStrategyError,
    StrategyNotImplementedError,
)
from buildver.utils.logger import get_logger

logger = get_logger("core.versioning")

__all__ = [
    "Strategy",
    "UnimplementedStrategy",
    "Versioning",
    "determine_version",
]


class Strategy(str, Enum):
    """Built-in versioning strategies; values are the registry keys."""

    NONE = "None"
    SEMANTIC = "Semantic"
    TAG = "Tag"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class UnimplementedStrategy:
    """Registry placeholder for a strategy that has no resolver yet."""

    display_name: str


Resolver = Callable[[Any], Awaitable[Any]]
StrategyEntry = Union[Resolver, UnimplementedStrategy]


class Versioning:
    """Resolve build versions for one repository.

    Args:
        inspector: Repository queries used by the git-based strategies.
        allow_dirty_build: Permit semantic versions of a dirty worktree.
        max_diff_lines: Lines of diff logged before semantic resolution.
        environ: Pipeline environment; defaults to ``os.environ``.
        strategies: Replacement registry. Production code uses the
            built-in one.
    """

    def __init__(
        self,
        inspector: RepositoryInspector,
        *,
        allow_dirty_build: bool = DEFAULT_ALLOW_DIRTY_BUILD,
        max_diff_lines: int = DEFAULT_MAX_DIFF_LINES,
        environ: Optional[Mapping[str, str]] = None,
        strategies: Optional[Mapping[str, StrategyEntry]] = None,
    ) -> None:
        self.inspector = inspector
        self.allow_dirty_build = allow_dirty_build
        self.max_diff_lines = max_diff_lines
        self._environ: Mapping[str, str] = os.environ if environ is None else environ

        if strategies is None:
            strategies = self._default_strategies()
        self._strategies: Mapping[str, StrategyEntry] = MappingProxyType(
            dict(strategies)
        )

    @classmethod
    def for_project(
        cls,
        project_path: Union[str, Path] = DEFAULT_PROJECT_PATH,
        **kwargs: Any,
    ) -> "Versioning":
        """Create a :class:`Versioning` running git inside ``project_path``."""
        return cls(RepositoryInspector(CommandRunner(cwd=project_path)), **kwargs)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def _default_strategies(self) -> dict:
        return {
            Strategy.NONE.value: self._resolve_none,
            Strategy.SEMANTIC.value: self._resolve_semantic,
            Strategy.TAG.value: self._resolve_tag,
            Strategy.CUSTOM.value: self._resolve_custom,
        }

    @property
    def strategies(self) -> Mapping[str, StrategyEntry]:
        """Read-only view of the strategy registry."""
        return self._strategies

    async def _resolve_none(self, custom_version: Any) -> str:
        return NO_VERSION

    async def _resolve_custom(self, custom_version: Any) -> Any:
        return custom_version

    async def _resolve_semantic(self, custom_version: Any) -> str:
        return await self.generate_semantic_version()

    async def _resolve_tag(self, custom_version: Any) -> str:
        return await self.generate_tag_version()

    # ------------------------------------------------------------------
    # Pipeline facts
    # ------------------------------------------------------------------

    @property
    def head_ref(self) -> Optional[str]:
        """Branch name provided by the pipeline for pull requests."""
        return self._environ.get(ENV_HEAD_REF) or None

    @property
    def ref(self) -> Optional[str]:
        """Full reference path of the build."""
        return self._environ.get(ENV_REF) or None

    @property
    def branch(self) -> Optional[str]:
        """Branch under build, or ``None`` when it cannot be told.

        ``ref`` is only read when ``head_ref`` is absent.
        """
        head_ref = self.head_ref
        if head_ref:
            return head_ref

        ref = self.ref
        if ref and ref.startswith(BRANCH_REF_PREFIX) and len(ref) > len(BRANCH_REF_PREFIX):
            return ref[len(BRANCH_REF_PREFIX):]

        return None

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def determine_version(
        self,
        strategy: Any,
        custom_version: Any = None,
    ) -> Any:
        """Resolve the version for ``strategy``.

        ``custom_version`` is only used by the ``Custom`` strategy, which
        returns it unchanged whatever its type.

        Raises:
            InvalidStrategyError: ``strategy`` is not a registered key.
            StrategyNotImplementedError: ``strategy`` is a placeholder.
        """
        if isinstance(strategy, Strategy):
            strategy = strategy.value
        if not isinstance(strategy, str) or strategy not in self._strategies:
            raise InvalidStrategyError(strategy, available=self._strategies.keys())

        entry = self._strategies[strategy]
        if isinstance(entry, UnimplementedStrategy):
            raise StrategyNotImplementedError(entry.display_name)

        logger.debug("Determining version using the %s strategy", strategy)
        return await entry(custom_version)

    async def generate_semantic_version(self) -> str:
        """Derive ``<tag>.<commits>`` from the repository history.

        Raises:
            DirtyWorktreeError: The worktree is dirty and dirty builds are
                not allowed.
            DescriptionParseError: ``git describe`` output is malformed.
        """
        await self.inspector.fetch_all()
        await self.inspector.log_diff(self.max_diff_lines)

        dirty = await self.inspector.is_dirty()
        if dirty and not self.allow_dirty_build:
            raise DirtyWorktreeError()

        if not await self.inspector.has_any_version_tags():
            total = await self.inspector.get_total_number_of_commits()
            version = assemble_untagged_version(total)
            logger.info("Generated version %s (no version tags found).", version)
            return version

        parsed = await self.parse_semantic_version()
        version = assemble_semantic_version(
            parsed.tag, parsed.commits, parsed.hash, dirty=dirty
        )
        logger.info(
            "Found semantic version %s (%s commits after v%s at %s)",
            version,
            parsed.commits,
            parsed.tag,
            parsed.hash,
        )
        return version

    async def generate_tag_version(self) -> str:
        """Return the tag on HEAD without a single leading ``v``."""
        tag = await self.inspector.get_tag()
        return strip_version_prefix(tag)

    async def parse_semantic_version(self) -> ParsedDescription:
        """Describe the checkout and split the result into its parts.

        Raises:
            DescriptionParseError: The description does not match.
        """
        description = await self.get_version_description()
        parsed = parse_description(description)
        logger.debug("Found match: %s", description)
        return parsed

    async def get_version_description(self) -> str:
        """``git describe`` output for the branch under build."""
        return await self.inspector.get_version_description(self.branch)


async def determine_version(
    strategy: Any,
    custom_version: Any = None,
    *,
    project_path: Union[str, Path] = DEFAULT_PROJECT_PATH,
    allow_dirty_build: bool = DEFAULT_ALLOW_DIRTY_BUILD,
    max_diff_lines: int = DEFAULT_MAX_DIFF_LINES,
) -> Any:
    """Resolve a version for the repository at ``project_path``.

    Shortcut for ``Versioning.for_project(...).determine_version(...)``.
    """
    versioning = Versioning.for_project(
        project_path,
        allow_dirty_build=allow_dirty_build,
        max_diff_lines=max_diff_lines,
    )
    return await versioning.determine_version(strategy, custom_version)
