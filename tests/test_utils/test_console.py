from __future__ import annotations

import pytest

from buildver.utils.console import (
    print_error,
    print_table,
    print_warning,
    reconfigure_console,
)


@pytest.fixture(autouse=True)
def plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    reconfigure_console()


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_error and print_warning."""

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        print_error("Branch is dirty")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[ERROR] Branch is dirty" in captured.err

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        print_warning("odd version")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[WARNING] odd version" in captured.err

    def test_brackets_in_message_are_kept(self, capsys: pytest.CaptureFixture) -> None:
        print_error("value [bold]x[/bold]")

        assert "value [bold]x[/bold]" in capsys.readouterr().err

    def test_long_messages_are_not_wrapped(self, capsys: pytest.CaptureFixture) -> None:
        message = "word " * 40
        print_error(message.strip())

        assert capsys.readouterr().err.count("\n") == 1


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_renders_rows_on_stdout(self, capsys: pytest.CaptureFixture) -> None:
        print_table(
            [{"Strategy": "Semantic", "Implemented": "yes"}],
            title="Versioning strategies",
        )

        out = capsys.readouterr().out
        assert "Versioning strategies" in out
        assert "Semantic" in out
        assert "Implemented" in out

    def test_empty_data_prints_nothing(self, capsys: pytest.CaptureFixture) -> None:
        print_table([])

        assert capsys.readouterr().out == ""
