"""
Pydantic models for repair results.
"""

from eanfix.models.repair import RepairResult, repair_barcode

__all__ = ["RepairResult", "repair_barcode"]
