"""
Core versioning logic for buildver.

Exports the strategy dispatcher, the repository queries it relies on,
and the pure parsing and assembly helpers.
"""

from __future__ import annotations

from buildver.core.runner import CommandRunner
from buildver.core.inspector import RepositoryInspector
from buildver.core.description import (
    DESCRIPTION_PATTERN,
    ParsedDescription,
    matches_description,
    parse_description,
)
from buildver.core.assembler import (
    assemble_semantic_version,
    assemble_untagged_version,
    strip_version_prefix,
)
from buildver.core.versioning import (
    Strategy,
    UnimplementedStrategy,
    Versioning,
    determine_version,
)

__all__ = [
    "CommandRunner",
    "RepositoryInspector",
    "DESCRIPTION_PATTERN",
    "ParsedDescription",
    "matches_description",
    "parse_description",
    "assemble_semantic_version",
    "assemble_untagged_version",
    "strip_version_prefix",
    "Strategy",
    "UnimplementedStrategy",
    "Versioning",
    "determine_version",
]
