"""
statfmt - Text formatters for statistical report tables

statfmt turns numbers into display strings for html or LaTeX tables:
fixed-decimal rounding of values, vectors and tables (with per-column
digits and row/column exclusions), integers with thousands separators,
p-values and multi-line header cells.

Quick Start:
    import pandas as pd
    from statfmt import txt_round, txt_pval

    df = pd.DataFrame({"n": [120, 80], "mean": [1.2345, 2.5]},
                      index=["Treatment", "Control"])
    txt_round(df, digits=2, exclude_cols="^n$")
    txt_pval([0.0312, 0.00002])  # ['0.031', '&lt; 0.0001']

Defaults (digits, NA placeholder, decimal markers, ...) live in
``statfmt.config.settings`` and can be set through STATFMT_* variables.
"""

__version__ = "0.1.0"

# Core types
from statfmt.core import (
    Cell,
    CellKind,
    RoundingOptions,
    ByIndex,
    ByNamePattern,
    StatFmtError,
    ConfigurationError,
    ExclusionError,
    NoRowsError,
    NoColumnsError,
)

# Configuration
from statfmt.config import settings, StatFmtSettings

# Formatters
from statfmt.report.formatters import (
    txt_round,
    round_value,
    round_vector,
    round_table,
    txt_int,
    txt_pval,
    txt_merge_lines,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "CellKind",
    "RoundingOptions",
    "ByIndex",
    "ByNamePattern",
    # Exceptions
    "StatFmtError",
    "ConfigurationError",
    "ExclusionError",
    "NoRowsError",
    "NoColumnsError",
    # Configuration
    "settings",
    "StatFmtSettings",
    # Formatters
    "txt_round",
    "round_value",
    "round_vector",
    "round_table",
    "txt_int",
    "txt_pval",
    "txt_merge_lines",
]
