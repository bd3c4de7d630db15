"""Unit tests for termite.loaders.spinner module."""

import pytest

from termite.config.defaults import DEFAULT_SPINNER_SYMBOLS
from termite.lib.errors import InvalidArgumentError
from termite.lib.ui.sequences import SGR
from termite.loaders.spinner import LoadingSpinner


@pytest.mark.unit
class TestLoadingSpinner:
    """Tests for LoadingSpinner."""

    def test_default_symbols(self) -> None:
        """Test the default symbol set and starting symbol."""
        spinner = LoadingSpinner()
        assert spinner.symbols == ["|", "/", "-", "\\"]
        assert spinner.current_symbol == "|"

    def test_advance_cycles_through_symbols(self) -> None:
        """Test advance shows each symbol in order."""
        spinner = LoadingSpinner()
        shown = []
        for _ in range(4):
            spinner.advance()
            shown.append(spinner.current_symbol)
        assert shown == ["/", "-", "\\", "|"]

    def test_advancing_count_times_is_identity(self) -> None:
        """Test a full cycle returns to the starting symbol."""
        spinner = LoadingSpinner(symbols=["a", "b", "c"])
        start = spinner.current_symbol
        for _ in range(3):
            spinner.advance()
        assert spinner.current_symbol == start
        assert spinner.index == 0

    def test_render_is_bold(self) -> None:
        """Test the symbol is always printed bold."""
        assert LoadingSpinner().render("wait") == "\x1b[1m|\x1b[0m wait"

    def test_render_with_extra_attributes(self) -> None:
        """Test extra attributes follow bold."""
        spinner = LoadingSpinner(attributes=[SGR.FG_YELLOW])
        assert spinner.render("") == "\x1b[1;33m|\x1b[0m "

    def test_empty_symbols_fail(self) -> None:
        """Test an empty symbol list is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            LoadingSpinner(symbols=[])
        assert exc_info.value.field == "symbols"

    def test_blank_symbol_fails(self) -> None:
        """Test each symbol must be non-empty."""
        with pytest.raises(InvalidArgumentError):
            LoadingSpinner(symbols=["a", ""])

    def test_instances_do_not_share_symbols(self) -> None:
        """Test default symbol lists are independent copies."""
        first = LoadingSpinner()
        second = LoadingSpinner()
        first.symbols.append("*")

        assert second.symbols == ["|", "/", "-", "\\"]
        assert DEFAULT_SPINNER_SYMBOLS == ("|", "/", "-", "\\")

    def test_caller_list_is_copied(self) -> None:
        """Test mutating the caller's list does not affect the spinner."""
        symbols = ["x", "y"]
        spinner = LoadingSpinner(symbols=symbols)
        symbols.clear()
        assert spinner.symbols == ["x", "y"]
