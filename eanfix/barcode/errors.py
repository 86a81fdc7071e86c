"""
Errors raised when a barcode cannot be repaired.
"""


class BarcodeError(ValueError):
    """Base error for malformed barcodes."""


class InvalidLengthError(BarcodeError):
    """Barcode is not exactly 13 characters long."""

    def __init__(self, message: str = "Invalid barcode length."):
        super().__init__(message)


class TooManyBrokenSymbolsError(BarcodeError):
    """Barcode contains more than one broken symbol."""

    def __init__(self, message: str = "Barcode must contain only one broken symbol."):
        super().__init__(message)


class NonNumericCharacterError(BarcodeError):
    """Barcode contains a character that is neither a digit nor the broken symbol."""

    def __init__(self, message: str = "Barcode contains non-numeric characters."):
        super().__init__(message)
