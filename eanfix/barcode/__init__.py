"""
Barcode validation and repair utilities.
"""

from eanfix.barcode.errors import (
    BarcodeError,
    InvalidLengthError,
    NonNumericCharacterError,
    TooManyBrokenSymbolsError,
)
from eanfix.barcode.fixer import BROKEN_SYMBOL, find_broken_index, fix_barcode
from eanfix.barcode.validator import calculate_ean13_checksum, validate_ean13_checksum

__all__ = [
    "BROKEN_SYMBOL",
    "BarcodeError",
    "InvalidLengthError",
    "NonNumericCharacterError",
    "TooManyBrokenSymbolsError",
    "calculate_ean13_checksum",
    "find_broken_index",
    "fix_barcode",
    "validate_ean13_checksum",
]
