"""
Tests for squares and sides.

Tests:
- Factory interning and normalization
- Spot bounds
- Side opposites
"""

import pytest

from ..engine_core.square import INITIAL, MAX_SPOTS, Side, Square, square


class TestSquareFactory:
    """Tests for the square() factory."""

    def test_same_contents_same_instance(self):
        """Equal contents give the very same object."""
        assert square(Side.RED, 2) is square(Side.RED, 2)
        assert square(Side.BLUE, 3) == square(Side.BLUE, 3)

    def test_different_contents_differ(self):
        assert square(Side.RED, 2) != square(Side.BLUE, 2)
        assert square(Side.RED, 2) != square(Side.RED, 3)

    def test_zero_spots_is_initial(self):
        """Zero spots normalizes to the empty square regardless of side."""
        assert square(Side.RED, 0) is INITIAL
        assert square(Side.BLUE, 0) is INITIAL

    def test_white_is_initial(self):
        """WHITE squares always show exactly one spot."""
        assert square(Side.WHITE, 4) is INITIAL
        assert INITIAL.spots == 1
        assert INITIAL.is_empty

    def test_interned_squares_hash_equal(self):
        """Squares work as dictionary keys by value."""
        counts = {square(Side.RED, 1): "a"}
        assert counts[Square(Side.RED, 1)] == "a"

    @pytest.mark.parametrize("spots", [-1, MAX_SPOTS + 1])
    def test_out_of_range_spots_rejected(self, spots):
        with pytest.raises(ValueError):
            square(Side.RED, spots)

    def test_str(self):
        assert str(square(Side.RED, 3)) == "3r"
        assert str(square(Side.BLUE, 1)) == "1b"
        assert str(INITIAL) == "1-"


class TestSide:
    """Tests for Side."""

    def test_opposite(self):
        assert Side.RED.opposite() is Side.BLUE
        assert Side.BLUE.opposite() is Side.RED

    def test_white_has_no_opposite(self):
        with pytest.raises(ValueError):
            Side.WHITE.opposite()

    def test_is_player(self):
        assert Side.RED.is_player
        assert Side.BLUE.is_player
        assert not Side.WHITE.is_player
