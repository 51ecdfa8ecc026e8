# statfmt/report/formatters/__init__.py
"""
Formatters for report tables.

This module provides formatting utilities for converting raw values
into display-ready strings for html or LaTeX tables.
"""

from statfmt.report.formatters.rounding import txt_round
from statfmt.report.formatters.numeric import (
    format_fixed,
    round_value,
    round_vector,
)
from statfmt.report.formatters.tables import round_table
from statfmt.report.formatters.tokens import extract_number
from statfmt.report.formatters.integers import txt_int
from statfmt.report.formatters.pvalues import txt_pval
from statfmt.report.formatters.lines import txt_merge_lines

__all__ = [
    # Rounding
    "txt_round",
    "round_value",
    "round_vector",
    "round_table",
    "format_fixed",
    "extract_number",
    # Other text formatters
    "txt_int",
    "txt_pval",
    "txt_merge_lines",
]
