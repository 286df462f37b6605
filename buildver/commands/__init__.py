"""Subcommands registered on the ``buildver`` CLI group."""

from __future__ import annotations

from buildver.commands.resolve import resolve
from buildver.commands.strategies import strategies

__all__ = ["resolve", "strategies"]
