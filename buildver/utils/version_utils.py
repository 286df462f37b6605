"""
Version inspection helpers for buildver.

Resolved versions are opaque strings; these helpers only report whether
a value is PEP 440-compatible and compare versions the way packaging
tools do. They never rewrite a version.
"""

from __future__ import annotations

from typing import Any

from packaging.version import InvalidVersion, Version


def is_pep440_version(value: Any) -> bool:
    """Return ``True`` if ``value`` parses as a PEP 440 version.

    Examples:
        >>> is_pep440_version("1.3.37")
        True
        >>> is_pep440_version("1.3.0+dirty")
        True
        >>> is_pep440_version("none")
        False
    """
    if not isinstance(value, str):
        return False
    try:
        Version(value)
    except InvalidVersion:
        return False
    return True


def versions_equivalent(left: str, right: str) -> bool:
    """Return ``True`` if two version strings denote the same release.

    Trailing zero components are insignificant, so ``"1.3"`` and
    ``"1.3.0"`` are equivalent. Invalid versions are never equivalent.
    """
    try:
        return Version(left) == Version(right)
    except InvalidVersion:
        return False
