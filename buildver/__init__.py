"""
buildver — build version resolution for CI pipelines.

Chooses a version string for a build from one of several strategies:

    • ``None``      opt out; the version is ``"none"``
    • ``Custom``    a caller-supplied string, passed through untouched
    • ``Tag``       the tag on HEAD, without its leading ``v``
    • ``Semantic``  ``MAJOR.MINOR.<commits since tag>`` from ``git describe``

Typical usage::

    import asyncio
    from buildver import determine_version

    version = asyncio.run(determine_version("Semantic", project_path="."))
"""

from __future__ import annotations

from buildver.__version__ import __version__
from buildver.core import Strategy, Versioning, determine_version

__author__ = "buildver Contributors"
__license__ = "Apache-2.0"
__description__ = "Resolve build versions from git history for CI pipelines."

__all__ = [
    "__version__",
    "Strategy",
    "Versioning",
    "determine_version",
]
