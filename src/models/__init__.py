"""
Shared enums for decoder results.
"""

from src.models.detection import BarcodeSymbology

__all__ = ["BarcodeSymbology"]
