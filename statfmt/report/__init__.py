# statfmt/report/__init__.py
"""Report-facing text formatters."""

from statfmt.report.formatters import (
    txt_round,
    round_table,
    txt_int,
    txt_pval,
    txt_merge_lines,
)

__all__ = [
    "txt_round",
    "round_table",
    "txt_int",
    "txt_pval",
    "txt_merge_lines",
]
