"""
Centralized constants for buildver.

This module defines immutable configuration values used across buildver,
including git command lines, pipeline environment variables, configuration
defaults, and logging formats. All values are intended to be treated as
read-only.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Git commands
# ---------------------------------------------------------------------------

#: Synchronise every remote so tags and history are complete.
GIT_FETCH_ALL: Final[str] = "git fetch --all"

#: Excerpt of the uncommitted diff, limited to ``{max_lines}`` lines.
GIT_DIFF_EXCERPT: Final[str] = "git --no-pager diff | head -n {max_lines}"

#: Describe the checkout relative to the nearest tag; ``{ref}`` may be empty.
GIT_DESCRIBE: Final[str] = "git describe --long --tags --always --debug {ref}"

#: List changed paths, one per line; empty output means a clean worktree.
GIT_STATUS_PORCELAIN: Final[str] = "git status --porcelain"

#: Tags pointing at the current commit.
GIT_TAG_POINTS_AT_HEAD: Final[str] = "git tag --points-at HEAD"

#: Number of version-like tags reachable from HEAD.
GIT_COUNT_VERSION_TAGS: Final[str] = (
    "git tag --list --merged HEAD | grep 'v[0-9]*' | wc -l"
)

#: Total number of commits reachable from HEAD.
GIT_COUNT_COMMITS: Final[str] = "git rev-list --count HEAD"

# ---------------------------------------------------------------------------
# Pipeline environment
# ---------------------------------------------------------------------------

#: Symbolic branch name provided for pull request builds.
ENV_HEAD_REF: Final[str] = "GITHUB_HEAD_REF"

#: Full reference path of the build, e.g. ``refs/heads/main``.
ENV_REF: Final[str] = "GITHUB_REF"

#: Prefix identifying a branch reference.
BRANCH_REF_PREFIX: Final[str] = "refs/heads/"

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Strategy used when neither config nor CLI select one.
DEFAULT_STRATEGY: Final[str] = "Semantic"

#: Working directory for git commands.
DEFAULT_PROJECT_PATH: Final[str] = "."

#: Refuse semantic versions based on uncommitted changes.
DEFAULT_ALLOW_DIRTY_BUILD: Final[bool] = False

#: Lines of ``git diff`` logged before semantic resolution.
DEFAULT_MAX_DIFF_LINES: Final[int] = 60

#: Value returned by the opt-out strategy.
NO_VERSION: Final[str] = "none"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
