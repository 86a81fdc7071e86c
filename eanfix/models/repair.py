"""
Repair result model for reporting barcode fixes.
"""

import structlog
from pydantic import BaseModel, Field

from eanfix.barcode import BarcodeError, find_broken_index, fix_barcode, validate_ean13_checksum

logger = structlog.get_logger(__name__)


class RepairResult(BaseModel):
    """Outcome of repairing a single barcode."""

    code: str = Field(..., description="The barcode as supplied")
    fixed_code: str | None = Field(None, description="Repaired barcode, None if repair failed")
    broken_index: int | None = Field(
        None, ge=0, le=12, description="0-based index of the broken symbol"
    )
    missing_digit: int | None = Field(None, ge=0, le=9, description="Recovered digit")
    checksum_valid: bool = Field(False, description="Whether the fixed code passes EAN-13 checksum")
    error: str | None = Field(None, description="Validation error message")

    @property
    def ok(self) -> bool:
        """Check if the barcode was repaired (or was already complete)."""
        return self.fixed_code is not None and self.error is None


def repair_barcode(code: str) -> RepairResult:
    """
    Repair a barcode and describe the outcome.

    Validation failures are recorded on the result instead of raised.

    Args:
        code: Barcode string, possibly with one broken symbol

    Returns:
        RepairResult for the code
    """
    try:
        fixed_code = fix_barcode(code)
    except BarcodeError as e:
        logger.warning("Failed to repair barcode", code=code, error=str(e))
        return RepairResult(code=code, error=str(e))

    broken_index = find_broken_index(code)
    missing_digit = int(fixed_code[broken_index]) if broken_index is not None else None

    return RepairResult(
        code=code,
        fixed_code=fixed_code,
        broken_index=broken_index,
        missing_digit=missing_digit,
        checksum_valid=validate_ean13_checksum(fixed_code),
    )
