"""Configuration file loader for buildver.

Supports two formats:

- ``buildver.toml`` — settings under the ``[buildver]`` table
- ``pyproject.toml`` — settings under the ``[tool.buildver]`` table

Discovery order:

1. Explicit path from ``--config`` or ``BUILDVER_CONFIG``
2. ``buildver.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.buildver]`` section

Configuration precedence: defaults < config file < environment < CLI args.
Environment variables and CLI args are applied by the ``resolve`` command.

Example (``buildver.toml``)::

    [buildver]
    strategy = "Semantic"
    project_path = "game"
    allow_dirty_build = false
    max_diff_lines = 60
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from buildver.exceptions import ConfigError
from buildver.utils.logger import get_logger
from buildver.constants import (
    DEFAULT_ALLOW_DIRTY_BUILD,
    DEFAULT_MAX_DIFF_LINES,
    DEFAULT_PROJECT_PATH,
    DEFAULT_STRATEGY,
)

logger = get_logger("config")


@dataclass
class BuildVerConfig:
    """Parsed and validated buildver configuration.

    Attributes:
        strategy: Default versioning strategy name.
        project_path: Directory git commands run in.
        allow_dirty_build: Permit semantic versions of a dirty worktree.
        max_diff_lines: Lines of diff logged before semantic resolution.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    strategy: str = DEFAULT_STRATEGY
    project_path: str = DEFAULT_PROJECT_PATH
    allow_dirty_build: bool = DEFAULT_ALLOW_DIRTY_BUILD
    max_diff_lines: int = DEFAULT_MAX_DIFF_LINES

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration options for debug logging."""
        return {
            "strategy": self.strategy,
            "project_path": self.project_path,
            "allow_dirty_build": self.allow_dirty_build,
            "max_diff_lines": self.max_diff_lines,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    buildver_toml = cwd / "buildver.toml"
    if buildver_toml.is_file():
        logger.debug("Found buildver.toml: %s", buildver_toml)
        return buildver_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_buildver_section(pyproject_toml):
        logger.debug("Found [tool.buildver] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_buildver_section(path: Path) -> bool:
    """Return ``True`` if ``pyproject.toml`` has a ``[tool.buildver]`` table.

    An unreadable or invalid ``pyproject.toml`` is not ours to report, so
    it counts as having no section.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return "buildver" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> BuildVerConfig:
    """Load and validate buildver configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`BuildVerConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return BuildVerConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("buildver", {})
    else:
        section = raw.get("buildver", {})

    if not section:
        logger.debug("Config file found but no buildver section, using defaults")
        return BuildVerConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


_OPTION_TYPES: Dict[str, type] = {
    "strategy": str,
    "project_path": str,
    "allow_dirty_build": bool,
    "max_diff_lines": int,
}


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> BuildVerConfig:
    """Validate a ``[buildver]`` or ``[tool.buildver]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or a negative
            ``max_diff_lines``.
    """
    unknown = set(section.keys()) - set(_OPTION_TYPES)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    config = BuildVerConfig()

    for option, expected in _OPTION_TYPES.items():
        if option not in section:
            continue
        val = section[option]
        # bool is a subclass of int
        if not isinstance(val, expected) or (expected is int and isinstance(val, bool)):
            raise ConfigError(
                f"{option} must be {_type_label(expected)}, got {type(val).__name__}",
                config_path=config_path,
                option=option,
            )
        setattr(config, option, val)

    if config.max_diff_lines < 0:
        raise ConfigError(
            f"max_diff_lines must not be negative, got {config.max_diff_lines}",
            config_path=config_path,
            option="max_diff_lines",
        )

    return config


def _type_label(expected: type) -> str:
    return {bool: "a boolean", int: "an integer", str: "a string"}[expected]
