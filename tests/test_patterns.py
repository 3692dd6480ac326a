"""
Tests for EAN-13 pattern tables.
"""

import pytest

from src.barcode.patterns import (
    FIRST_DIGIT_ENCODINGS,
    G_PATTERNS,
    L_AND_G_PATTERNS,
    L_PATTERNS,
    MIDDLE_PATTERN,
    START_END_PATTERN,
    SYMBOL_WIDTH,
    parity_pattern,
)


class TestDigitTables:
    """Tests for the L and G digit tables."""

    def test_every_character_is_seven_modules(self):
        """Test each digit pattern spans seven modules."""
        for pattern in L_AND_G_PATTERNS:
            assert len(pattern) == 4
            assert sum(pattern) == 7

    def test_g_is_reversed_l(self):
        """Test G patterns are L patterns read backwards."""
        for digit in range(10):
            assert G_PATTERNS[digit] == tuple(reversed(L_PATTERNS[digit]))

    def test_combined_table_layout(self):
        """Test L patterns come first, G patterns at index 10 and up."""
        assert len(L_AND_G_PATTERNS) == 20
        assert L_AND_G_PATTERNS[:10] == L_PATTERNS
        assert L_AND_G_PATTERNS[10:] == G_PATTERNS

    def test_patterns_are_distinct(self):
        """Test no two table entries share a ratio."""
        assert len(set(L_AND_G_PATTERNS)) == 20

    def test_l_parity_is_odd(self):
        """Test L characters have an odd number of dark modules."""
        # Left-half characters start with a space, so bars are runs 1 and 3
        for pattern in L_PATTERNS:
            assert (pattern[1] + pattern[3]) % 2 == 1

    def test_g_parity_is_even(self):
        """Test G characters have an even number of dark modules."""
        for pattern in G_PATTERNS:
            assert (pattern[1] + pattern[3]) % 2 == 0

    def test_guards(self):
        """Test guard patterns and symbol width."""
        assert START_END_PATTERN == (1, 1, 1)
        assert MIDDLE_PATTERN == (1, 1, 1, 1, 1)
        assert SYMBOL_WIDTH == 95


class TestFirstDigitEncodings:
    """Tests for the leading digit parity table."""

    def test_zero_is_all_l(self):
        """Test leading 0 uses no G digits."""
        assert FIRST_DIGIT_ENCODINGS[0] == 0x00

    def test_other_digits_use_three_g(self):
        """Test every other leading digit uses exactly three G digits."""
        counts = [bin(encoding).count("1") for encoding in FIRST_DIGIT_ENCODINGS]
        assert counts == [0, 3, 3, 3, 3, 3, 3, 3, 3, 3]

    def test_encodings_are_unique(self):
        """Test the table is injective."""
        assert len(set(FIRST_DIGIT_ENCODINGS)) == 10

    def test_first_digit_always_l(self):
        """Test the first left-half digit is never G."""
        for encoding in FIRST_DIGIT_ENCODINGS:
            assert not encoding & 0x20

    @pytest.mark.parametrize(
        "digit,expected",
        [
            (0, "LLLLLL"),
            (1, "LLGLGG"),
            (5, "LGGLLG"),
            (6, "LGGGLL"),
            (9, "LGGLGL"),
        ],
    )
    def test_parity_pattern(self, digit, expected):
        """Test parity strings for known leading digits."""
        assert parity_pattern(digit) == expected

    def test_parity_pattern_out_of_range(self):
        """Test leading digits outside 0-9 are rejected."""
        with pytest.raises(ValueError):
            parity_pattern(10)
        with pytest.raises(ValueError):
            parity_pattern(-1)
