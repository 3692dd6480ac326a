"""
EAN-13 reader.

The leading digit of an EAN-13 number is not drawn as bars. It is carried by
the parities used for the six left-half digits: each of those is drawn either
in odd parity (L) or even parity (G), and the resulting six-bit pattern maps
to exactly one leading digit. For example 5 901234 123457 draws its left half
as L G G L L G, which reads 0b011001 == 0x19, the encoding of 5.

Prepending "0" to a UPC-A number gives the equivalent EAN-13 number, which is
why the all-L pattern 0x00 encodes the leading digit 0.
"""

from dataclasses import dataclass
from enum import Enum

import structlog

from src.barcode.bitrow import BitRow
from src.barcode.oned import (
    GuardRange,
    decode_digit,
    find_guard_pattern,
    find_start_guard_pattern,
)
from src.barcode.patterns import (
    FIRST_DIGIT_ENCODINGS,
    L_AND_G_PATTERNS,
    L_PATTERNS,
    MIDDLE_PATTERN,
    START_END_PATTERN,
)
from src.config import Settings, get_settings
from src.models.detection import BarcodeSymbology

logger = structlog.get_logger(__name__)

DIGITS_PER_HALF = 6


class DecodeStatus(str, Enum):
    """Outcome of a decode step."""

    OK = "ok"
    NOT_FOUND = "not_found"


@dataclass
class MiddleDecode:
    """Result of decoding the digits between the start and end guards."""

    status: DecodeStatus
    text: str
    row_offset: int

    @property
    def ok(self) -> bool:
        return self.status == DecodeStatus.OK


def resolve_first_digit(lg_pattern_found: int) -> int | None:
    """
    Determine the implicit leading digit from the left-half parities.

    Args:
        lg_pattern_found: Six-bit mask, bit (5 - x) set when digit x was G

    Returns:
        The leading digit, or None if the mask is not a legal EAN-13 pattern
    """
    for digit, encoding in enumerate(FIRST_DIGIT_ENCODINGS):
        if lg_pattern_found == encoding:
            return digit
    return None


class EAN13Reader:
    """
    Decodes EAN-13 symbols from binarised scanlines.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize reader.

        Args:
            settings: Matching tolerances (default: application settings)
        """
        self.settings = settings or get_settings()

    @property
    def expected_format(self) -> BarcodeSymbology:
        return BarcodeSymbology.EAN_13

    def decode_middle(self, row: BitRow, row_offset: int, result: str = "") -> MiddleDecode:
        """
        Decode the twelve drawn digits and infer the leading one.

        Args:
            row: Scanline crossing the symbol
            row_offset: First bit after the start guard
            result: Text to build on; the leading digit is inserted in front
                of it and the drawn digits are appended

        Returns:
            On success, the text with thirteen digits added and the offset of
            the end guard. On failure the text and offset are partial and
            must be discarded.
        """
        end = row.size
        lg_pattern_found = 0

        for x in range(DIGITS_PER_HALF):
            if row_offset >= end:
                return MiddleDecode(DecodeStatus.NOT_FOUND, result, row_offset)
            match = decode_digit(
                row,
                row_offset,
                L_AND_G_PATTERNS,
                self.settings.max_avg_variance,
                self.settings.max_individual_variance,
            )
            if match is None:
                return MiddleDecode(DecodeStatus.NOT_FOUND, result, row_offset)
            result += str(match.best_match % 10)
            row_offset += match.width
            if match.best_match >= 10:
                lg_pattern_found |= 1 << (5 - x)

        first_digit = resolve_first_digit(lg_pattern_found)
        if first_digit is None:
            return MiddleDecode(DecodeStatus.NOT_FOUND, result, row_offset)
        result = str(first_digit) + result

        middle_range = find_guard_pattern(
            row,
            row_offset,
            True,
            MIDDLE_PATTERN,
            self.settings.guard_max_avg_variance,
            self.settings.guard_max_individual_variance,
        )
        if middle_range is None:
            return MiddleDecode(DecodeStatus.NOT_FOUND, result, row_offset)
        row_offset = middle_range.end

        for _ in range(DIGITS_PER_HALF):
            if row_offset >= end:
                return MiddleDecode(DecodeStatus.NOT_FOUND, result, row_offset)
            match = decode_digit(
                row,
                row_offset,
                L_PATTERNS,
                self.settings.max_avg_variance,
                self.settings.max_individual_variance,
            )
            if match is None:
                return MiddleDecode(DecodeStatus.NOT_FOUND, result, row_offset)
            result += str(match.best_match)
            row_offset += match.width

        return MiddleDecode(DecodeStatus.OK, result, row_offset)

    def decode_end(self, row: BitRow, end_start: int) -> GuardRange | None:
        """Check for an end guard at end_start followed by a quiet zone."""
        guard = find_guard_pattern(
            row,
            end_start,
            False,
            START_END_PATTERN,
            self.settings.guard_max_avg_variance,
            self.settings.guard_max_individual_variance,
        )
        if guard is None or guard.begin != end_start:
            return None

        quiet_end = min(guard.end + (guard.end - guard.begin), row.size)
        if row.bits[guard.end:quiet_end].any():
            return None
        return guard

    def decode_row(self, row: BitRow) -> str | None:
        """
        Scan a whole row for an EAN-13 symbol.

        Every start guard is tried in turn until one yields a middle section
        followed by an end guard. The check digit is not verified.

        Returns:
            Thirteen digits, or None if no symbol was found
        """
        next_start = 0
        while next_start < row.size:
            start_range = find_start_guard_pattern(
                row,
                self.settings.guard_max_avg_variance,
                self.settings.guard_max_individual_variance,
                row_offset=next_start,
            )
            if start_range is None:
                break

            middle = self.decode_middle(row, start_range.end)
            if middle.ok and self.decode_end(row, middle.row_offset) is not None:
                return middle.text

            logger.debug(
                "Start guard rejected",
                begin=start_range.begin,
                end=start_range.end,
                status=middle.status.value,
            )
            next_start = start_range.end

        return None
