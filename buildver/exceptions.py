"""
Custom exception hierarchy for buildver.

This module defines structured exception types used across buildver.
All exceptions inherit from :class:`BuildVerError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, MutableMapping, Optional


class BuildVerError(Exception):
    """Base exception for all buildver errors.

    All buildver-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class InvalidStrategyError(BuildVerError):
    """Raised when a versioning strategy is not registered.

    Args:
        strategy: The offending strategy value, of any type.
        available: Registered strategy keys, listed in the message.
    """

    __slots__ = ("strategy",)

    def __init__(self, strategy: Any, available: Iterable[str] = ()) -> None:
        choices = ", ".join(available)
        message = f"Versioning strategy {strategy!r} is not recognised"
        if choices:
            message += f"; expected one of: {choices}"
        super().__init__(message)

        self.strategy = strategy


class StrategyNotImplementedError(BuildVerError, NotImplementedError):
    """Raised when a strategy is registered but has no resolver yet.

    The message is the strategy's display name.
    """

    __slots__ = ("strategy",)

    def __init__(self, strategy: str) -> None:
        super().__init__(strategy)
        self.strategy = strategy


class ParseError(BuildVerError):
    """Raised when command output cannot be interpreted.

    Args:
        message: Error description.
        output: Raw output that failed to parse.
        command: Command that produced the output.
    """

    __slots__ = ("output", "command")

    def __init__(
        self,
        message: str,
        *,
        output: Optional[str] = None,
        command: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", command)
        _add_if(details, "output", _truncate(output) if output is not None else None)

        super().__init__(message, details)

        self.output = output
        self.command = command


class DescriptionParseError(ParseError):
    """Raised when ``git describe`` output does not match the expected form.

    The quoted description is part of the message, so no extra details
    are attached.
    """

    __slots__ = ("description",)

    def __init__(self, description: Any) -> None:
        super().__init__(f'Failed to parse git describe output: "{description}".')
        self.description = description


class CommandExecutionError(BuildVerError):
    """Raised when an external command fails or cannot be launched.

    Args:
        message: Error description.
        command: Command line that was executed.
        exit_code: Process exit status, if the process ran.
        stderr: Captured error stream, truncated in ``details``.
        original_error: Exception raised while launching the process.
    """

    __slots__ = ("command", "exit_code", "stderr", "original_error")

    def __init__(
        self,
        message: str,
        *,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", command)
        _add_if(details, "exit_code", exit_code)
        if stderr:
            details["stderr"] = _truncate(stderr)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        self.original_error = original_error


class DirtyWorktreeError(BuildVerError):
    """Raised when semantic versioning is attempted on uncommitted changes."""

    __slots__ = ()

    def __init__(
        self,
        message: str = (
            "Branch is dirty. Refusing to base semantic version on "
            "uncommitted changes"
        ),
    ) -> None:
        super().__init__(message)


class ConfigError(BuildVerError):
    """Raised when configuration is missing, unreadable, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
