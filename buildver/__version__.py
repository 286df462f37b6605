"""
buildver version information.

Single source of truth for the package version, following PEP 440.
"""

from __future__ import annotations

from packaging.version import Version

__version__ = "0.1.0"

#: Structured view of :data:`__version__`.
VERSION_INFO = Version(__version__)

#: Human-readable version (for CLI).
VERSION_STRING = f"buildver {__version__}"
