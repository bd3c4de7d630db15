"""Unit tests for termite.loaders.ouroboros module."""

import pytest

from termite.lib.errors import InvalidArgumentError
from termite.lib.ui.sequences import SGR
from termite.loaders.ouroboros import OuroborosBar


@pytest.mark.unit
class TestOuroborosBar:
    """Tests for OuroborosBar."""

    def test_defaults(self) -> None:
        """Test default width and symbols."""
        bar = OuroborosBar()
        assert bar.width_units == 30
        assert (bar.filler, bar.void) == ("#", " ")
        assert bar.units_completed == 0

    def test_fills_up_to_width(self) -> None:
        """Test the bar fills one cell per advance."""
        bar = OuroborosBar(width_units=3)
        for expected in (1, 2, 3):
            bar.advance()
            assert bar.units_completed == expected
        assert bar.render("") == "[###] "

    def test_full_bar_swaps_symbols_and_restarts(self) -> None:
        """Test the advance after a full bar swaps filler and void."""
        bar = OuroborosBar(width_units=3)
        for _ in range(4):
            bar.advance()

        assert bar.units_completed == 1
        assert (bar.filler, bar.void) == (" ", "#")
        assert bar.render("x") == "[ ##] x"

    def test_two_cycles_restore_symbols(self) -> None:
        """Test oscillation has period two."""
        bar = OuroborosBar(width_units=3, filler="=", void="-")
        for _ in range(7):
            bar.advance()

        assert bar.units_completed == 1
        assert (bar.filler, bar.void) == ("=", "-")
        assert bar.render("") == "[=--] "

    def test_attributes_decorate_filled_run(self) -> None:
        """Test attributes wrap the filled cells only."""
        bar = OuroborosBar(width_units=3, attributes=[SGR.FG_GREEN])
        bar.advance()
        assert bar.render("") == "[\x1b[32m#\x1b[0m  ] "

    def test_attributes_follow_filler_after_swap(self) -> None:
        """Test the swapped filler is decorated, not the old filler."""
        bar = OuroborosBar(width_units=3, attributes=[SGR.FG_GREEN])
        for _ in range(4):
            bar.advance()
        assert bar.render("") == "[\x1b[32m \x1b[0m##] "

    def test_no_attributes_renders_plain(self) -> None:
        """Test an undecorated bar carries no escape sequences."""
        bar = OuroborosBar(width_units=2)
        bar.advance()
        assert "\x1b" not in bar.render("x")

    def test_non_positive_width_fails(self) -> None:
        """Test width_units must be positive."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            OuroborosBar(width_units=0)
        assert exc_info.value.field == "width_units"
