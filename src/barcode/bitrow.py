"""
Binarised scanline representation.
"""

from collections.abc import Iterable, Iterator

import numpy as np

DARK_CHARS = frozenset("1X#")
LIGHT_CHARS = frozenset("0.- ")
SEPARATOR_CHARS = frozenset("_")


class BitRow:
    """
    A single thresholded image row.

    True bits are dark modules (bars), False bits are light modules (spaces).
    The row is read-only once built, so it can be shared between readers.
    """

    def __init__(self, bits: Iterable[bool] | np.ndarray):
        array = np.array(bits if isinstance(bits, np.ndarray) else list(bits), dtype=bool)
        if array.ndim != 1:
            raise ValueError(f"Scanline must be one-dimensional, got shape {array.shape}")
        array.setflags(write=False)
        self._bits = array

    @classmethod
    def from_string(cls, text: str) -> "BitRow":
        """
        Build a row from text such as "0001011011".

        "1", "X" and "#" are dark; "0", ".", "-" and space are light;
        underscores may be used as visual separators and are skipped.
        Leading and trailing spaces are light modules; only line endings
        are stripped.
        """
        bits: list[bool] = []
        for char in text.strip("\r\n\t"):
            if char in DARK_CHARS:
                bits.append(True)
            elif char in LIGHT_CHARS:
                bits.append(False)
            elif char in SEPARATOR_CHARS:
                continue
            else:
                raise ValueError(f"Invalid character in scanline: {char!r}")
        return cls(bits)

    @property
    def size(self) -> int:
        return int(self._bits.size)

    @property
    def bits(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        return self._bits

    def get(self, index: int) -> bool:
        return bool(self._bits[index])

    def next_set(self, start: int) -> int:
        """Index of the first dark bit at or after start, or size if none."""
        return self._next(start, True)

    def next_unset(self, start: int) -> int:
        """Index of the first light bit at or after start, or size if none."""
        return self._next(start, False)

    def _next(self, start: int, value: bool) -> int:
        if start >= self.size:
            return self.size
        start = max(start, 0)
        tail = self._bits[start:] if value else ~self._bits[start:]
        hits = np.flatnonzero(tail)
        return start + int(hits[0]) if hits.size else self.size

    def to_string(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __iter__(self) -> Iterator[bool]:
        return (bool(bit) for bit in self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitRow):
            return NotImplemented
        return bool(np.array_equal(self._bits, other._bits))

    def __repr__(self) -> str:
        return f"BitRow(size={self.size})"
