"""Parsing of ``git describe --long --tags`` output.

A description has the form ``v<MAJOR>.<MINOR>-<COMMITS>-g<HASH>`` with an
optional ``-dirty`` suffix, e.g. ``v1.2-14-g3f9e2a1``. The whole string
must match; anything else is rejected with
:class:`~buildver.exceptions.DescriptionParseError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Pattern

from buildver.exceptions import DescriptionParseError

__all__ = [
    "DESCRIPTION_PATTERN",
    "ParsedDescription",
    "matches_description",
    "parse_description",
]

#: ASCII-only digits; ``\d`` would also accept other Unicode numerals.
DESCRIPTION_PATTERN: Pattern[str] = re.compile(
    r"v(?P<tag>[0-9]+\.[0-9]+)"
    r"-(?P<commits>[0-9]+)"
    r"-g(?P<hash>[0-9A-Za-z]+)"
    r"(?:-dirty)?"
)


@dataclass(frozen=True)
class ParsedDescription:
    """Named parts of a describe string.

    Attributes:
        tag: ``MAJOR.MINOR`` without the leading ``v``.
        commits: Commits since the tag, as the decimal string git printed.
        hash: Abbreviated commit hash without the ``g`` marker.
    """

    tag: str
    commits: str
    hash: str


def matches_description(description: Any) -> bool:
    """Return ``True`` if ``description`` is a complete describe string."""
    if not isinstance(description, str):
        return False
    return DESCRIPTION_PATTERN.fullmatch(description) is not None


def parse_description(description: Any) -> ParsedDescription:
    """Split a describe string into tag, commit count and hash.

    Raises:
        DescriptionParseError: ``description`` is not a string or does not
            match the describe grammar in full.

    Example:
        >>> parse_description("v0.1-2-g12345678")
        ParsedDescription(tag='0.1', commits='2', hash='12345678')
    """
    match = (
        DESCRIPTION_PATTERN.fullmatch(description)
        if isinstance(description, str)
        else None
    )
    if match is None:
        raise DescriptionParseError(description)

    return ParsedDescription(
        tag=match.group("tag"),
        commits=match.group("commits"),
        hash=match.group("hash"),
    )
