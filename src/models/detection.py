"""
Symbology identifiers for decoded barcodes.
"""

from enum import Enum


class BarcodeSymbology(str, Enum):
    """Supported barcode symbologies."""

    EAN_13 = "EAN-13"
