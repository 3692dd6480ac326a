"""
Bar/space width tables for EAN-13 characters and guards.

Each digit table row lists the widths, in modules, of the four runs that make
up one character. The tables are colour-agnostic: a left-half character starts
with a space, a right-half character starts with a bar, and both are read with
the same ratios.
"""

# Odd parity ("L") digit encodings, also used for the right half
L_PATTERNS: tuple[tuple[int, int, int, int], ...] = (
    (3, 2, 1, 1),  # 0
    (2, 2, 2, 1),  # 1
    (2, 1, 2, 2),  # 2
    (1, 4, 1, 1),  # 3
    (1, 1, 3, 2),  # 4
    (1, 2, 3, 1),  # 5
    (1, 1, 1, 4),  # 6
    (1, 3, 1, 2),  # 7
    (1, 2, 1, 3),  # 8
    (3, 1, 1, 2),  # 9
)

# Even parity ("G") encodings are the L encodings read backwards
G_PATTERNS: tuple[tuple[int, int, int, int], ...] = tuple(
    tuple(reversed(pattern)) for pattern in L_PATTERNS
)

# A match at index >= 10 means a G digit was seen
L_AND_G_PATTERNS: tuple[tuple[int, int, int, int], ...] = L_PATTERNS + G_PATTERNS

START_END_PATTERN: tuple[int, ...] = (1, 1, 1)

# Space-bar-space-bar-space
MIDDLE_PATTERN: tuple[int, ...] = (1, 1, 1, 1, 1)

# Parity of the six left-half digits, keyed by the implicit leading digit.
# Bit 5 is the leftmost digit; a set bit means even parity (G).
#
#   Digit   Parity of digits 1..6
#     0     L L L L L L   0x00
#     1     L L G L G G   0x0B
#     2     L L G G L G   0x0D
#     3     L L G G G L   0x0E
#     4     L G L L G G   0x13
#     5     L G G L L G   0x19
#     6     L G G G L L   0x1C
#     7     L G L G L G   0x15
#     8     L G L G G L   0x16
#     9     L G G L G L   0x1A
FIRST_DIGIT_ENCODINGS: tuple[int, ...] = (
    0x00, 0x0B, 0x0D, 0x0E, 0x13, 0x19, 0x1C, 0x15, 0x16, 0x1A
)

DIGIT_WIDTH = 7
START_END_WIDTH = 3
MIDDLE_WIDTH = 5
SYMBOL_WIDTH = 2 * START_END_WIDTH + MIDDLE_WIDTH + 12 * DIGIT_WIDTH  # 95


def parity_pattern(first_digit: int) -> str:
    """
    Get the L/G parity string selected by an implicit leading digit.

    Args:
        first_digit: Leading digit of the EAN-13 number (0-9)

    Returns:
        Six letters, "L" or "G", for the six left-half digits in order
    """
    if not 0 <= first_digit <= 9:
        raise ValueError(f"Leading digit out of range: {first_digit}")

    encoding = FIRST_DIGIT_ENCODINGS[first_digit]
    return "".join("G" if encoding & (1 << (5 - x)) else "L" for x in range(6))
