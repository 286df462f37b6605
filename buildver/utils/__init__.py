"""
Utility helpers for buildver.

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Version inspection helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

from buildver.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)
from buildver.utils.console import (
    print_error,
    print_table,
    print_warning,
    reconfigure_console,
)
from buildver.utils.version_utils import is_pep440_version, versions_equivalent

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_warning",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    "level_for_verbosity",
    # Versions
    "is_pep440_version",
    "versions_equivalent",
]
