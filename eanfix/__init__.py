"""
EAN-13 barcode repair.
"""

from eanfix.barcode import BarcodeError, fix_barcode

__all__ = ["BarcodeError", "fix_barcode"]
