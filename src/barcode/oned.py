"""
Generic one-dimensional pattern matching shared by the EAN readers.

Run widths measured on a scanline are compared to reference bar/space ratios
by scaling the reference to the measured total width and summing the absolute
deviations. A lower variance is a better match.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from src.barcode.bitrow import BitRow
from src.barcode.patterns import START_END_PATTERN

MAX_AVG_VARIANCE = 0.48
MAX_INDIVIDUAL_VARIANCE = 0.7

# Guards are made of unit-width elements only, so they are held to a tighter
# tolerance than digits.
GUARD_MAX_AVG_VARIANCE = 0.25
GUARD_MAX_INDIVIDUAL_VARIANCE = 0.5

DIGIT_COUNTERS = 4


class GuardRange(NamedTuple):
    """Bit-index bounds of a located guard, end exclusive."""

    begin: int
    end: int


@dataclass(frozen=True)
class DigitMatch:
    """Best pattern found for one character."""

    best_match: int
    counters: tuple[int, ...]

    @property
    def width(self) -> int:
        return sum(self.counters)


def record_pattern(row: BitRow, start: int, num_counters: int) -> list[int] | None:
    """
    Measure consecutive alternating runs starting at a bit index.

    The first run takes whatever colour the row has at start. The last run may
    be cut short by the end of the row.

    Args:
        row: Scanline to read
        start: Bit index of the first run
        num_counters: Number of runs to measure

    Returns:
        Run widths, or None if the row has fewer runs left
    """
    end = row.size
    if start < 0 or start >= end:
        return None

    counters = [0] * num_counters
    is_white = not row.get(start)
    position = 0
    i = start
    while i < end:
        if row.get(i) != is_white:
            counters[position] += 1
        else:
            position += 1
            if position == num_counters:
                break
            counters[position] = 1
            is_white = not is_white
        i += 1

    if position == num_counters or (position == num_counters - 1 and i == end):
        return counters
    return None


def pattern_match_variance(
    counters: Sequence[int],
    pattern: Sequence[int],
    max_individual_variance: float,
) -> float:
    """
    Score how far measured runs are from a reference ratio.

    Returns:
        Total deviation over total width, or infinity if any single run is
        off by more than max_individual_variance of a module
    """
    total = sum(counters)
    pattern_length = sum(pattern)
    if total < pattern_length:
        # Fewer bits than modules: nothing sensible to compare
        return float("inf")

    unit_bar_width = total / pattern_length
    max_individual_variance *= unit_bar_width

    total_variance = 0.0
    for counter, expected in zip(counters, pattern):
        variance = abs(counter - expected * unit_bar_width)
        if variance > max_individual_variance:
            return float("inf")
        total_variance += variance
    return total_variance / total


def decode_digit(
    row: BitRow,
    row_offset: int,
    patterns: Sequence[Sequence[int]],
    max_avg_variance: float = MAX_AVG_VARIANCE,
    max_individual_variance: float = MAX_INDIVIDUAL_VARIANCE,
) -> DigitMatch | None:
    """
    Match the character starting at row_offset against a pattern table.

    The cursor is not advanced; callers add DigitMatch.width themselves.

    Returns:
        The index of the closest pattern with its run widths, or None if no
        pattern is within tolerance or the row is exhausted
    """
    counters = record_pattern(row, row_offset, DIGIT_COUNTERS)
    if counters is None:
        return None

    best_variance = max_avg_variance
    best_match = -1
    for index, pattern in enumerate(patterns):
        variance = pattern_match_variance(counters, pattern, max_individual_variance)
        if variance < best_variance:
            best_variance = variance
            best_match = index

    if best_match < 0:
        return None
    return DigitMatch(best_match=best_match, counters=tuple(counters))


def find_guard_pattern(
    row: BitRow,
    row_offset: int,
    white_first: bool,
    pattern: Sequence[int],
    max_avg_variance: float = GUARD_MAX_AVG_VARIANCE,
    max_individual_variance: float = GUARD_MAX_INDIVIDUAL_VARIANCE,
) -> GuardRange | None:
    """
    Find the first occurrence of a guard pattern at or after row_offset.

    Args:
        row: Scanline to search
        row_offset: Bit index to start from
        white_first: Whether the first run of the guard is a space
        pattern: Run width ratios of the guard

    Returns:
        Bounds of the guard, or None if it does not occur
    """
    pattern_length = len(pattern)
    width = row.size
    is_white = white_first
    row_offset = row.next_unset(row_offset) if white_first else row.next_set(row_offset)

    counters = [0] * pattern_length
    position = 0
    pattern_start = row_offset
    for x in range(row_offset, width):
        if row.get(x) != is_white:
            counters[position] += 1
            continue

        if position == pattern_length - 1:
            variance = pattern_match_variance(counters, pattern, max_individual_variance)
            if variance < max_avg_variance:
                return GuardRange(pattern_start, x)
            # Slide the window by one bar/space pair
            pattern_start += counters[0] + counters[1]
            counters = counters[2:] + [0, 0]
            position -= 1
        else:
            position += 1
        counters[position] = 1
        is_white = not is_white

    return None


def find_start_guard_pattern(
    row: BitRow,
    max_avg_variance: float = GUARD_MAX_AVG_VARIANCE,
    max_individual_variance: float = GUARD_MAX_INDIVIDUAL_VARIANCE,
    row_offset: int = 0,
) -> GuardRange | None:
    """
    Find the first start guard preceded by a quiet zone.

    The quiet zone must be at least as wide as the guard itself; a guard at
    the very start of the row is only accepted if the quiet zone fits.
    """
    next_start = row_offset
    while next_start < row.size:
        guard = find_guard_pattern(
            row,
            next_start,
            False,
            START_END_PATTERN,
            max_avg_variance,
            max_individual_variance,
        )
        if guard is None:
            return None

        guard_width = guard.end - guard.begin
        quiet_start = guard.begin - guard_width
        if quiet_start >= 0 and not row.bits[quiet_start:guard.begin].any():
            return guard
        next_start = guard.end

    return None
