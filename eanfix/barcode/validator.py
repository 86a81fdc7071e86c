"""
Checksum utilities for EAN-13 codes.
"""

from eanfix.barcode.fixer import (
    BARCODE_LENGTH,
    BROKEN_SYMBOL,
    _calculate_missing_digit,
    _calculate_sum_excluding_broken_digit,
    _is_digit,
)

CHECK_DIGIT_INDEX = BARCODE_LENGTH - 1


def calculate_ean13_checksum(code: str) -> int:
    """
    Calculate the EAN-13 check digit from the first 12 digits of a code.

    The check digit is the digit a broken final position would be repaired to.

    Raises:
        ValueError: fewer than 12 characters
        NonNumericCharacterError: one of the first 12 characters is not a digit
    """
    if len(code) < CHECK_DIGIT_INDEX:
        raise ValueError(f"Code must have at least {CHECK_DIGIT_INDEX} digits for EAN-13")

    total = _calculate_sum_excluding_broken_digit(
        code[:CHECK_DIGIT_INDEX] + BROKEN_SYMBOL, CHECK_DIGIT_INDEX
    )
    return _calculate_missing_digit(total, is_even_position=False)


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Codes of the wrong length or with any non-digit character, including a
    broken symbol, are invalid.
    """
    if len(code) != BARCODE_LENGTH:
        return False
    if not all(_is_digit(char) for char in code):
        return False

    return calculate_ean13_checksum(code) == int(code[CHECK_DIGIT_INDEX])
