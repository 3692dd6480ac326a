"""
EAN-13 scanline decoding.
"""

from src.barcode.bitrow import BitRow
from src.barcode.ean13 import DecodeStatus, EAN13Reader, MiddleDecode, resolve_first_digit
from src.barcode.encoder import encode_ean13
from src.barcode.oned import (
    DigitMatch,
    GuardRange,
    decode_digit,
    find_guard_pattern,
    find_start_guard_pattern,
    record_pattern,
)

__all__ = [
    "BitRow",
    "DecodeStatus",
    "DigitMatch",
    "EAN13Reader",
    "GuardRange",
    "MiddleDecode",
    "decode_digit",
    "encode_ean13",
    "find_guard_pattern",
    "find_start_guard_pattern",
    "record_pattern",
    "resolve_first_digit",
]
