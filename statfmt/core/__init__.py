# statfmt/core/__init__.py
"""
Core types shared by the statfmt formatters.

This module provides:
- Tagged cell values (numeric, text, missing)
- Row/column exclusion specs
- The per-call rounding options object
- The exception hierarchy
"""

from statfmt.core.cells import Cell, CellKind, is_missing, is_numeric
from statfmt.core.context import RoundingOptions
from statfmt.core.selectors import ByIndex, ByNamePattern, as_exclusion
from statfmt.core.exceptions import (
    StatFmtError,
    ConfigurationError,
    ExclusionError,
    NoRowsError,
    NoColumnsError,
)

__all__ = [
    # Cells
    "Cell",
    "CellKind",
    "is_missing",
    "is_numeric",
    # Options
    "RoundingOptions",
    # Exclusions
    "ByIndex",
    "ByNamePattern",
    "as_exclusion",
    # Exceptions
    "StatFmtError",
    "ConfigurationError",
    "ExclusionError",
    "NoRowsError",
    "NoColumnsError",
]
