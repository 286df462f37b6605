"""
Console output utilities for buildver using Rich.

User-facing messages go through this module; diagnostics go through
:mod:`buildver.utils.logger`. Status messages are written to stderr so
that stdout carries nothing but the resolved version, which pipelines
capture verbatim.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

BUILDVER_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
    }
)

_stdout_console: Optional[Console] = None
_stderr_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color(stream: Any) -> bool:
    """Return True if colored output should be enabled for ``stream``."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def _build_console(*, stderr: bool) -> Console:
    use_color = _should_use_color(sys.stderr if stderr else sys.stdout)
    return Console(
        theme=BUILDVER_THEME,
        stderr=stderr,
        no_color=not use_color,
        highlight=False,
    )


def _get_console(*, stderr: bool = False) -> Console:
    """Return the shared Rich console for stdout or stderr."""
    global _stdout_console, _stderr_console

    with _console_lock:
        if stderr:
            if _stderr_console is None:
                _stderr_console = _build_console(stderr=True)
            return _stderr_console
        if _stdout_console is None:
            _stdout_console = _build_console(stderr=False)
        return _stdout_console


def reconfigure_console() -> None:
    """Drop cached consoles so the next call re-reads the environment."""
    global _stdout_console, _stderr_console
    with _console_lock:
        _stdout_console = None
        _stderr_console = None


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message to stderr, without markup interpretation or wrapping."""
    _get_console(stderr=True).print(
        f"{prefix} {message}", style="error", markup=False, soft_wrap=True
    )


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message to stderr."""
    _get_console(stderr=True).print(
        f"{prefix} {message}", style="warning", markup=False, soft_wrap=True
    )


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render rows as a Rich table on stdout.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        column_styles: Per-column ``style``/``justify`` configuration.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
        )

    for row in data:
        table.add_row(*(str(row.get(h, "")) for h in headers))

    _get_console().print(table)
