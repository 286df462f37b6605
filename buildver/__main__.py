"""
Executable module for buildver.

Running ``python -m buildver`` is equivalent to ``buildver``.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure on stderr."""
    sys.stderr.write("buildver CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from buildver.__version__ import __version__

        sys.stderr.write(f"buildver version: {__version__}\n")
    except ImportError:
        sys.stderr.write("buildver version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Entry point for ``python -m buildver``.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        from buildver.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
