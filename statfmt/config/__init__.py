# statfmt/config/__init__.py
"""
Configuration management for statfmt.

This module provides centralized formatting defaults with:
- Environment variable support (STATFMT_* prefix)
- Default values for all formatter options
- Easy override for testing

Usage:
    from statfmt.config import settings

    # Access settings
    placeholder = settings.na_placeholder

    # Override for testing
    from statfmt.config import StatFmtSettings
    test_settings = StatFmtSettings(na_placeholder="NA")
"""

from statfmt.config.settings import StatFmtSettings, settings

__all__ = [
    "StatFmtSettings",
    "settings",
]
