from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from buildver.config import (
    BuildVerConfig,
    discover_config_file,
    load_config,
    _parse_section,
    _pyproject_has_buildver_section,
    _read_toml,
)
from buildver.exceptions import ConfigError


@pytest.mark.unit
class TestBuildVerConfig:
    """Tests for BuildVerConfig dataclass."""

    def test_default_initialization(self) -> None:
        """Test BuildVerConfig initializes with correct defaults."""
        config = BuildVerConfig()

        assert config.strategy == "Semantic"
        assert config.project_path == "."
        assert config.allow_dirty_build is False
        assert config.max_diff_lines == 60
        assert config.source_path is None

    def test_to_log_dict(self) -> None:
        """Test to_log_dict returns configuration without metadata."""
        config = BuildVerConfig(
            strategy="Tag",
            allow_dirty_build=True,
            source_path=Path("/test/path.toml"),
        )

        result = config.to_log_dict()

        assert result == {
            "strategy": "Tag",
            "project_path": ".",
            "allow_dirty_build": True,
            "max_diff_lines": 60,
        }
        assert "source_path" not in result


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Tests for discover_config_file function."""

    def test_explicit_path_priority(self, tmp_path: Path) -> None:
        """Test explicit path is used when provided and exists."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[buildver]\n", encoding="utf-8")
        (tmp_path / "buildver.toml").write_text("[buildver]\n", encoding="utf-8")

        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file(config_file)

        assert result == config_file.resolve()

    def test_explicit_path_not_found_raises_error(self, tmp_path: Path) -> None:
        """Test ConfigError raised when explicit path doesn't exist."""
        with pytest.raises(ConfigError) as exc_info:
            discover_config_file(tmp_path / "nonexistent.toml")

        assert "not found" in str(exc_info.value).lower()

    def test_discovers_buildver_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "buildver.toml"
        config_file.write_text("[buildver]\n", encoding="utf-8")

        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file()

        assert result == config_file

    def test_buildver_toml_wins_over_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "buildver.toml").write_text("[buildver]\n", encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text("[tool.buildver]\n", encoding="utf-8")

        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file()

        assert result == tmp_path / "buildver.toml"

    def test_discovers_pyproject_toml_with_section(self, tmp_path: Path) -> None:
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text("[tool.buildver]\nstrategy = 'Tag'\n", encoding="utf-8")

        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file()

        assert result == config_file

    def test_ignores_pyproject_toml_without_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.other]\nkey = 'value'\n", encoding="utf-8")

        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file()

        assert result is None

    def test_ignores_invalid_pyproject_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.buildver\n", encoding="utf-8")

        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file()

        assert result is None


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        with patch("buildver.config.Path.cwd", return_value=tmp_path):
            config = load_config()

        assert config == BuildVerConfig()

    def test_loads_buildver_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "buildver.toml"
        config_file.write_text(
            "[buildver]\n"
            "strategy = 'Tag'\n"
            "project_path = 'game'\n"
            "allow_dirty_build = true\n"
            "max_diff_lines = 5\n",
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.strategy == "Tag"
        assert config.project_path == "game"
        assert config.allow_dirty_build is True
        assert config.max_diff_lines == 5
        assert config.source_path == config_file.resolve()

    def test_loads_pyproject_section(self, tmp_path: Path) -> None:
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text(
            "[project]\nname = 'demo'\n\n[tool.buildver]\nstrategy = 'None'\n",
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.strategy == "None"

    def test_empty_section_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "buildver.toml"
        config_file.write_text("# nothing here\n", encoding="utf-8")

        config = load_config(config_file)

        assert config.strategy == "Semantic"
        assert config.source_path == config_file.resolve()


@pytest.mark.unit
class TestReadToml:
    """Tests for _read_toml and _pyproject_has_buildver_section."""

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "buildver.toml"
        path.write_text("[buildver\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            _read_toml(path)

    def test_unreadable_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            _read_toml(tmp_path / "missing.toml")

    def test_section_detection(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.buildver]\n", encoding="utf-8")

        assert _pyproject_has_buildver_section(path) is True


@pytest.mark.unit
class TestParseSection:
    """Tests for _parse_section validation."""

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ConfigError, match="Unknown configuration keys: colour"):
            _parse_section({"colour": True}, config_path="x.toml")

    @pytest.mark.parametrize(
        "option, value",
        [
            ("strategy", 1),
            ("project_path", False),
            ("allow_dirty_build", "yes"),
            ("max_diff_lines", "10"),
            ("max_diff_lines", True),
        ],
    )
    def test_rejects_wrong_types(self, option: str, value: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _parse_section({option: value}, config_path="x.toml")

        assert exc_info.value.option == option

    def test_rejects_negative_diff_lines(self) -> None:
        with pytest.raises(ConfigError, match="must not be negative"):
            _parse_section({"max_diff_lines": -1}, config_path="x.toml")

    def test_zero_diff_lines_allowed(self) -> None:
        config = _parse_section({"max_diff_lines": 0}, config_path="x.toml")

        assert config.max_diff_lines == 0
