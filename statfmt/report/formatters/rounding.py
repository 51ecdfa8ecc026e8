# statfmt/report/formatters/rounding.py
"""
``txt_round``: one entry point for values, vectors and tables.

The shape of ``x`` decides the path:

- scalar                    -> str (or the value itself when not numeric)
- list / tuple              -> list
- 1-D numpy array           -> object array
- pandas Series             -> Series with the same index and name
- 2-D numpy array/DataFrame -> same type, see :func:`round_table`
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np
import pandas as pd

from statfmt.core.cells import Cell
from statfmt.core.context import DigitSpec, RoundingOptions
from statfmt.report.formatters.numeric import round_cell, round_cells
from statfmt.report.formatters.tables import round_array, round_frame

logger = logging.getLogger(__name__)


def txt_round(
    x: Any,
    digits: Optional[DigitSpec] = None,
    exclude_rows: Any = None,
    exclude_cols: Any = None,
    na_placeholder: Optional[str] = None,
    decimal_marker: Optional[str] = None,
    output_marker: Optional[str] = None,
) -> Any:
    """
    Round numbers, or numbers embedded in strings, for display.

    Args:
        x: Value, vector (list, tuple, 1-D array, Series) or table
            (2-D array, DataFrame)
        digits: Fractional digits; for vectors one per element, for
            tables one per rounded column, or a single count for all
        exclude_rows: Table rows to leave untouched (positions or label pattern)
        exclude_cols: Table columns to leave untouched (positions or label pattern)
        na_placeholder: Display string for missing values (default "")
        decimal_marker: Decimal marker used in string input (default ".", or
            ``output_marker`` when only that one is given)
        output_marker: Decimal marker of the output (default ".")

    Returns:
        Same shape as ``x`` with numeric cells replaced by display strings

    Raises:
        ConfigurationError: If ``digits`` does not fit the input
        NoRowsError / NoColumnsError: If the exclusions leave nothing to round

    Examples:
        >>> txt_round(3.14159, 2)
        '3.14'
        >>> txt_round([1.005, 2.345, 3.1], 2)
        ['1.00', '2.35', '3.10']
        >>> txt_round("12,50", 1, decimal_marker=",")
        '12.5'
        >>> txt_round(-0.0001, 2)
        '0.00'
    """
    options = RoundingOptions.resolve(
        digits=digits,
        na_placeholder=na_placeholder,
        decimal_marker=decimal_marker,
        output_marker=output_marker,
    )

    if isinstance(x, pd.DataFrame):
        return round_frame(x, options, exclude_rows, exclude_cols)
    if isinstance(x, np.ndarray) and x.ndim != 1:
        if x.ndim == 0:
            return txt_round(x.item(), digits, None, None, na_placeholder,
                             decimal_marker, output_marker)
        return round_array(x, options, exclude_rows, exclude_cols)

    if exclude_rows is not None or exclude_cols is not None:
        logger.debug("exclude_rows/exclude_cols ignored for %s input", type(x).__name__)

    if isinstance(x, pd.Series):
        return pd.Series(round_cells(x.tolist(), options), index=x.index, name=x.name, dtype=object)
    if isinstance(x, np.ndarray):
        out = np.empty(len(x), dtype=object)
        out[:] = round_cells(x.tolist(), options)
        return out
    if isinstance(x, (list, tuple)):
        return round_cells(x, options)

    (d,) = options.digits_for(1)
    return round_cell(Cell.from_value(x), d, options)
