"""
Configuration management for the barcode fixer.
"""

from eanfix.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
