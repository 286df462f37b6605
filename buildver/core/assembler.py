"""Version assembly rules.

Pure functions only: no commands are run here. The semantic rule appends
the number of commits since the tag as the patch component, so a build
exactly on tag ``v1.3`` is ``1.3.0`` and the fourteenth commit after it is
``1.3.14``. Dirty worktrees get ``+dirty`` local-version metadata.
"""

from __future__ import annotations

from typing import Union

__all__ = [
    "DIRTY_SUFFIX",
    "assemble_semantic_version",
    "assemble_untagged_version",
    "strip_version_prefix",
]

DIRTY_SUFFIX = "+dirty"


def strip_version_prefix(tag: str) -> str:
    """Remove one leading ``v`` from ``tag``, if present."""
    if tag.startswith("v"):
        return tag[1:]
    return tag


def assemble_semantic_version(
    tag: str,
    commits: Union[int, str],
    hash: str,
    *,
    dirty: bool = False,
) -> str:
    """Build ``<tag>.<commits>`` from parsed describe parts.

    The hash is accepted for logging callers but is not embedded in the
    version.

    Args:
        tag: ``MAJOR.MINOR`` from the describe string.
        commits: Commits since the tag; decimal string or integer.
        hash: Abbreviated commit hash.
        dirty: Whether the worktree has uncommitted changes.

    Raises:
        ValueError: ``commits`` is not a non-negative decimal number.
    """
    count = int(commits, 10) if isinstance(commits, str) else int(commits)
    if count < 0:
        raise ValueError(f"Commit count must not be negative, got {count}")

    version = f"{tag}.{count}"
    if dirty:
        version += DIRTY_SUFFIX
    return version


def assemble_untagged_version(total_commits: int) -> str:
    """Version for a history without any version tags: ``0.0.<commits>``."""
    return f"0.0.{total_commits}"
