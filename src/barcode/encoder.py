"""
Renders EAN-13 numbers into ideal scanlines.

The output has no noise and every module is exactly module_width bits wide,
which makes it suitable as reference input for the reader.
"""

from src.barcode.bitrow import BitRow
from src.barcode.patterns import (
    G_PATTERNS,
    L_PATTERNS,
    MIDDLE_PATTERN,
    START_END_PATTERN,
    parity_pattern,
)
from src.config import get_settings


def character_runs(digit: int, parity: str) -> tuple[int, ...]:
    """
    Get the run widths, in modules, of one digit character.

    Args:
        digit: Digit to draw (0-9)
        parity: "L" or "G" for the left half, "R" for the right half

    Returns:
        Four run widths; L and G characters start with a space, R characters
        start with a bar
    """
    if parity in ("L", "R"):
        return L_PATTERNS[digit]
    if parity == "G":
        return G_PATTERNS[digit]
    raise ValueError(f"Unknown parity: {parity!r}")


def left_guard_end(quiet_zone: int, module_width: int = 1) -> int:
    """Bit index of the first left-half module in a rendered scanline."""
    return (quiet_zone + len(START_END_PATTERN)) * module_width


def _append_runs(bits: list[bool], runs: tuple[int, ...], dark: bool, module_width: int) -> None:
    for run in runs:
        bits.extend([dark] * (run * module_width))
        dark = not dark


def encode_ean13(
    code: str,
    module_width: int = 1,
    quiet_zone: int | None = None,
    parities: str | None = None,
) -> BitRow:
    """
    Encode a 13-digit EAN number as a scanline.

    Args:
        code: Thirteen decimal digits; the check digit is drawn as given
        module_width: Bits per module
        quiet_zone: Light modules on each side (default: from settings)
        parities: Six "L"/"G" letters overriding the parities selected by the
            leading digit

    Returns:
        The rendered scanline
    """
    if len(code) != 13 or not code.isdigit():
        raise ValueError(f"EAN-13 code must be 13 digits: {code!r}")
    if module_width < 1:
        raise ValueError(f"Module width must be positive: {module_width}")

    if quiet_zone is None:
        quiet_zone = get_settings().quiet_zone_modules

    if parities is None:
        parities = parity_pattern(int(code[0]))
    elif len(parities) != 6 or set(parities) - {"L", "G"}:
        raise ValueError(f"Parities must be six L/G letters: {parities!r}")

    bits: list[bool] = [False] * (quiet_zone * module_width)
    _append_runs(bits, START_END_PATTERN, True, module_width)

    for digit, parity in zip(code[1:7], parities):
        _append_runs(bits, character_runs(int(digit), parity), False, module_width)

    _append_runs(bits, MIDDLE_PATTERN, False, module_width)

    for digit in code[7:]:
        _append_runs(bits, character_runs(int(digit), "R"), True, module_width)

    _append_runs(bits, START_END_PATTERN, True, module_width)
    bits.extend([False] * (quiet_zone * module_width))

    return BitRow(bits)
