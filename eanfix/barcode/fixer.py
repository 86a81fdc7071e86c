"""
Repair of EAN-13 barcodes with a single unreadable digit.

The unreadable position is marked with ``X``. Its value is recovered from
the EAN-13 modulo-10 checksum: digits at 0-based odd indexes carry weight 3,
digits at even indexes carry weight 1, and the weighted sum of a complete
barcode is a multiple of 10.
"""

import structlog

from eanfix.barcode.errors import (
    InvalidLengthError,
    NonNumericCharacterError,
    TooManyBrokenSymbolsError,
)

logger = structlog.get_logger(__name__)

BROKEN_SYMBOL = "X"
BARCODE_LENGTH = 13
EVEN_POSITION_WEIGHT = 3
MODULUS_BASE = 10


def fix_barcode(barcode: str) -> str:
    """
    Replace the broken symbol in a barcode with the digit that satisfies the checksum.

    Args:
        barcode: 13 characters, digits plus at most one ``X``

    Returns:
        The repaired barcode, or the input unchanged if nothing is broken

    Raises:
        InvalidLengthError: barcode is not 13 characters long
        NonNumericCharacterError: barcode contains a character other than a digit or ``X``
        TooManyBrokenSymbolsError: barcode contains more than one ``X``
    """
    _validate_barcode(barcode)

    broken_index = find_broken_index(barcode)
    if broken_index is None:
        return barcode

    total = _calculate_sum_excluding_broken_digit(barcode, broken_index)
    missing_digit = _calculate_missing_digit(total, _is_even_position(broken_index))

    logger.debug(
        "Recovered missing digit",
        barcode=barcode,
        broken_index=broken_index,
        missing_digit=missing_digit,
    )

    return barcode[:broken_index] + str(missing_digit) + barcode[broken_index + 1 :]


def find_broken_index(barcode: str) -> int | None:
    """Get the index of the broken symbol, or None if the barcode has none."""
    index = barcode.find(BROKEN_SYMBOL)
    return index if index != -1 else None


def _validate_barcode(barcode: str) -> None:
    if len(barcode) != BARCODE_LENGTH:
        raise InvalidLengthError()

    broken_count = 0
    for char in barcode:
        if char == BROKEN_SYMBOL:
            broken_count += 1
        elif not _is_digit(char):
            raise NonNumericCharacterError()

    # Checked after the scan: a bad character anywhere wins over a second X
    if broken_count > 1:
        raise TooManyBrokenSymbolsError()


def _calculate_sum_excluding_broken_digit(barcode: str, broken_index: int) -> int:
    """Weighted sum of every known digit."""
    total = 0
    for i in range(BARCODE_LENGTH):
        if i == broken_index:
            continue

        char = barcode[i]
        if not _is_digit(char):
            raise NonNumericCharacterError()

        digit = int(char)
        total += digit * EVEN_POSITION_WEIGHT if _is_even_position(i) else digit

    return total


def _is_even_position(index: int) -> bool:
    # Positions are 1-based in EAN-13, so odd indexes are even positions
    return index % 2 == 1


def _calculate_missing_digit(total: int, is_even_position: bool) -> int:
    checksum = (MODULUS_BASE - (total % MODULUS_BASE)) % MODULUS_BASE

    if is_even_position:
        for digit in range(MODULUS_BASE):
            if (digit * EVEN_POSITION_WEIGHT) % MODULUS_BASE == checksum:
                return digit

    return checksum


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return "0" <= char <= "9"
