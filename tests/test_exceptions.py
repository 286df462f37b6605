from __future__ import annotations

import pytest

from buildver.exceptions import (
    BuildVerError,
    CommandExecutionError,
    ConfigError,
    DescriptionParseError,
    DirtyWorktreeError,
    InvalidStrategyError,
    ParseError,
    StrategyNotImplementedError,
)


@pytest.mark.unit
class TestBuildVerError:
    """Tests for the base exception."""

    def test_message_without_details(self) -> None:
        error = BuildVerError("plain")

        assert str(error) == "plain"
        assert error.details == {}

    def test_message_with_details(self) -> None:
        error = BuildVerError("failed", {"command": "git status", "exit_code": 1})

        assert str(error) == "failed (command=git status, exit_code=1)"

    def test_repr(self) -> None:
        error = BuildVerError("failed", {"a": 1})

        assert repr(error) == "BuildVerError(message='failed', details={'a': 1})"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidStrategyError("x"),
            StrategyNotImplementedError("x"),
            ParseError("x"),
            DescriptionParseError("x"),
            CommandExecutionError("x"),
            DirtyWorktreeError(),
            ConfigError("x"),
        ],
    )
    def test_all_errors_share_base(self, error: Exception) -> None:
        assert isinstance(error, BuildVerError)


@pytest.mark.unit
class TestStrategyErrors:
    """Tests for strategy lookup errors."""

    def test_invalid_strategy_names_value_and_choices(self) -> None:
        error = InvalidStrategyError(None, available=["None", "Tag"])

        assert error.strategy is None
        assert str(error) == (
            "Versioning strategy None is not recognised; expected one of: None, Tag"
        )

    def test_not_implemented_is_builtin_subclass(self) -> None:
        error = StrategyNotImplementedError("Calendar")

        assert isinstance(error, NotImplementedError)
        assert not isinstance(error, InvalidStrategyError)
        assert str(error) == "Calendar"
        assert error.strategy == "Calendar"


@pytest.mark.unit
class TestParseErrors:
    """Tests for output parsing errors."""

    def test_parse_error_details(self) -> None:
        error = ParseError("Expected a number", output="abc", command="wc -l")

        assert error.output == "abc"
        assert str(error) == "Expected a number (command=wc -l, output=abc)"

    def test_description_error_quotes_input(self) -> None:
        error = DescriptionParseError("no-match-can-be-made")

        assert isinstance(error, ParseError)
        assert str(error) == 'Failed to parse git describe output: "no-match-can-be-made".'


@pytest.mark.unit
class TestCommandExecutionError:
    """Tests for CommandExecutionError."""

    def test_records_process_facts(self) -> None:
        error = CommandExecutionError(
            "Command failed", command="git fetch --all", exit_code=128, stderr="fatal"
        )

        assert error.exit_code == 128
        assert error.stderr == "fatal"
        assert error.details == {
            "command": "git fetch --all",
            "exit_code": 128,
            "stderr": "fatal",
        }

    def test_long_stderr_is_truncated_in_details(self) -> None:
        error = CommandExecutionError("failed", stderr="x" * 500)

        assert error.stderr == "x" * 500
        assert error.details["stderr"] == "x" * 200 + "..."

    def test_original_error_is_recorded(self) -> None:
        cause = OSError("no such file")
        error = CommandExecutionError("failed", original_error=cause)

        assert error.original_error is cause
        assert error.details["original_error"] == "no such file"
