"""Tests for the termite CLI commands."""

import importlib
import logging
import runpy
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from termite import __version__
from termite.cli.main import main
from termite.lib.logging_config import ROOT_LOGGER_NAME
from termite.lib.ui.cursor import ERASE_PREVIOUS_LINE


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None]:
    """Undo the logging setup performed by commands."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.unit
class TestMain:
    """Tests for the command group."""

    def test_version(self, cli_runner: CliRunner) -> None:
        """Test --version prints the package version."""
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        """Test every subcommand is registered."""
        result = cli_runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("demo", "palette", "say"):
            assert command in result.output


@pytest.mark.unit
class TestModuleEntryPoint:
    """Tests for running termite as a module."""

    def test_import_does_not_run_cli(self) -> None:
        """Test importing termite.__main__ has no side effects."""
        module = importlib.import_module("termite.__main__")
        assert module.main is main

    def test_run_as_main_invokes_cli(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test python -m termite dispatches to the command group."""
        monkeypatch.setattr("sys.argv", ["termite", "--version"])
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("termite", run_name="__main__")
        assert exc_info.value.code == 0


@pytest.mark.unit
class TestDemoCommand:
    """Tests for 'termite demo'."""

    @pytest.mark.parametrize(
        "kind", ["percentage", "progress_bar", "spinner", "cyclic", "ouroboros"]
    )
    def test_demo_runs_each_kind(self, cli_runner: CliRunner, kind: str) -> None:
        """Test every kind runs to completion and erases its reports."""
        result = cli_runner.invoke(
            main, ["demo", kind, "--steps", "3", "--delay", "0", "-q"]
        )
        assert result.exit_code == 0, result.output
        # three reports plus the final one
        assert result.output.count(ERASE_PREVIOUS_LINE) == 4
        assert "working (3/3)" in result.output
        assert "done" in result.output

    def test_demo_percentage_reaches_100(self, cli_runner: CliRunner) -> None:
        """Test the final percentage report."""
        result = cli_runner.invoke(
            main, ["demo", "percentage", "-n", "4", "-d", "0", "-q"]
        )
        assert result.exit_code == 0
        assert "100% done" in result.output

    def test_demo_bold_progress_bar(self, cli_runner: CliRunner) -> None:
        """Test --bold decorates the filled run."""
        result = cli_runner.invoke(
            main,
            ["demo", "progress_bar", "-n", "2", "-u", "4", "-d", "0", "--bold", "-q"],
        )
        assert result.exit_code == 0
        assert "[\x1b[1m####\x1b[0m] done" in result.output

    def test_demo_invalid_width_exits_with_error(self, cli_runner: CliRunner) -> None:
        """Test a zero width is reported as an error."""
        result = cli_runner.invoke(
            main, ["demo", "ouroboros", "--units", "0", "-d", "0", "-q"]
        )
        assert result.exit_code == 1
        assert "width_units" in result.output

    def test_demo_rejects_unknown_kind(self, cli_runner: CliRunner) -> None:
        """Test click validates the kind argument."""
        result = cli_runner.invoke(main, ["demo", "hourglass"])
        assert result.exit_code == 2


@pytest.mark.unit
class TestPaletteCommand:
    """Tests for 'termite palette'."""

    def test_palette_lists_every_color(self, cli_runner: CliRunner) -> None:
        """Test each color name appears with its codes."""
        result = cli_runner.invoke(main, ["palette"], color=True)
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 16
        assert lines[0].startswith("black")
        assert "\x1b[31m termite \x1b[0m" in result.output
        assert "\x1b[30;41m termite \x1b[0m" in result.output


@pytest.mark.unit
class TestSayCommand:
    """Tests for 'termite say'."""

    def test_say_plain(self, cli_runner: CliRunner) -> None:
        """Test a message without options is printed unchanged."""
        result = cli_runner.invoke(main, ["say", "hello"])
        assert result.exit_code == 0
        assert result.output == "hello\n"

    def test_say_bold_green(self, cli_runner: CliRunner) -> None:
        """Test attributes are applied in option order."""
        result = cli_runner.invoke(main, ["say", "ok", "--bold", "--color", "green"])
        assert result.exit_code == 0
        assert result.output == "\x1b[1;32mok\x1b[0m\n"
