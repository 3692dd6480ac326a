"""
Tests for the ideal scanline renderer.
"""

import pytest

from src.barcode.encoder import character_runs, encode_ean13, left_guard_end
from src.barcode.patterns import G_PATTERNS, L_PATTERNS, parity_pattern


class TestCharacterRuns:
    """Tests for single character widths."""

    def test_l_and_r_share_widths(self):
        """Test L and R characters use the same ratios."""
        for digit in range(10):
            assert character_runs(digit, "L") == L_PATTERNS[digit]
            assert character_runs(digit, "R") == L_PATTERNS[digit]

    def test_g_widths(self):
        """Test G characters use the reversed ratios."""
        for digit in range(10):
            assert character_runs(digit, "G") == G_PATTERNS[digit]

    def test_unknown_parity(self):
        """Test an unknown parity letter is rejected."""
        with pytest.raises(ValueError):
            character_runs(0, "E")


class TestEncodeEAN13:
    """Tests for rendering full symbols."""

    def test_layout(self):
        """Test guards, quiet zones and total width."""
        row = encode_ean13("5901234123457", quiet_zone=9)
        text = row.to_string()

        assert row.size == 95 + 2 * 9
        assert text.startswith("0" * 9 + "101")
        assert text[54:59] == "01010"
        assert text.endswith("101" + "0" * 9)

    def test_known_bits(self):
        """Test the left half of 4006381333931 against its published encoding."""
        row = encode_ean13("4006381333931", quiet_zone=0)
        # Leading 4 selects L G L L G G for 006381
        expected = "101" "0001101" "0100111" "0101111" "0111101" "0001001" "0110011"
        assert row.to_string().startswith(expected)

    def test_module_width(self):
        """Test every module is drawn module_width bits wide."""
        narrow = encode_ean13("9780201379624", quiet_zone=9)
        wide = encode_ean13("9780201379624", module_width=3, quiet_zone=9)

        assert wide.size == 3 * narrow.size
        assert wide.to_string() == "".join(bit * 3 for bit in narrow.to_string())

    def test_default_quiet_zone_from_settings(self, monkeypatch):
        """Test the quiet zone falls back to settings."""
        monkeypatch.setenv("QUIET_ZONE_MODULES", "4")
        row = encode_ean13("5901234123457")
        assert row.size == 95 + 2 * 4

    def test_left_guard_end(self):
        """Test the cursor position after the start guard."""
        assert left_guard_end(9) == 12
        assert left_guard_end(9, module_width=2) == 24
        row = encode_ean13("5901234123457", module_width=2, quiet_zone=9)
        assert row[left_guard_end(9, 2) - 1]
        assert not row[left_guard_end(9, 2)]

    def test_character_colours(self):
        """Test left characters start light and end dark, right ones start dark."""
        code = "9780201379624"
        row = encode_ean13(code, quiet_zone=9)
        start = left_guard_end(9)
        for x in range(6):
            first = start + 7 * x
            assert not row[first]
            assert row[first + 6]
        right_start = start + 42 + 5
        for x in range(6):
            first = right_start + 7 * x
            assert row[first]
            assert not row[first + 6]

    def test_parity_override(self):
        """Test explicit parities replace those of the leading digit."""
        default = encode_ean13("5901234123457", quiet_zone=0)
        forced = encode_ean13("5901234123457", quiet_zone=0, parities=parity_pattern(5))
        all_l = encode_ean13("5901234123457", quiet_zone=0, parities="LLLLLL")

        assert forced == default
        assert all_l != default

    @pytest.mark.parametrize(
        "code",
        ["590123412345", "59012341234570", "590123412345A", ""],
    )
    def test_invalid_code(self, code):
        """Test codes that are not 13 digits are rejected."""
        with pytest.raises(ValueError):
            encode_ean13(code)

    @pytest.mark.parametrize("parities", ["LLLLL", "LLLLLR", "llllll"])
    def test_invalid_parities(self, parities):
        """Test malformed parity strings are rejected."""
        with pytest.raises(ValueError):
            encode_ean13("5901234123457", parities=parities)

    def test_invalid_module_width(self):
        """Test module width must be positive."""
        with pytest.raises(ValueError):
            encode_ean13("5901234123457", module_width=0)
