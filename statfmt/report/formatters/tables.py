# statfmt/report/formatters/tables.py
"""
Two-dimensional rounding for report tables.

Works on pandas DataFrames (row and column labels available for pattern
exclusions) and on 2-D numpy arrays (positions only). Rows and columns can
be left untouched through ``exclude_rows`` / ``exclude_cols``; every other
cell is rounded with the digit count of its column.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from statfmt.core.context import DigitSpec, RoundingOptions
from statfmt.core.exceptions import ConfigurationError, NoColumnsError, NoRowsError
from statfmt.core.selectors import working_positions
from statfmt.report.formatters.numeric import round_cells

logger = logging.getLogger(__name__)

Table = Union[pd.DataFrame, np.ndarray]


def _round_matrix(
    values: np.ndarray,
    rows: Sequence[int],
    cols: Sequence[int],
    options: RoundingOptions,
) -> np.ndarray:
    """Round the cells at rows x cols of an object matrix, leaving the rest as is."""
    digits = options.digits_for(len(cols), "columns")
    row_options = options.with_digits(digits)

    out = values.astype(object, copy=True)
    for i in rows:
        rounded = round_cells(values[i, cols], row_options, "columns")
        for j, cell in zip(cols, rounded):
            out[i, j] = cell
    return out


def _resolve_axes(
    shape: Sequence[int],
    exclude_rows: Any,
    exclude_cols: Any,
    row_labels: Optional[Sequence[Any]],
    col_labels: Optional[Sequence[Any]],
) -> Tuple[List[int], List[int]]:
    cols = working_positions(shape[1], exclude_cols, col_labels, NoColumnsError)
    rows = working_positions(shape[0], exclude_rows, row_labels, NoRowsError)
    return rows, cols


def round_frame(
    frame: pd.DataFrame,
    options: RoundingOptions,
    exclude_rows: Any = None,
    exclude_cols: Any = None,
) -> pd.DataFrame:
    """
    Round a DataFrame with already resolved options.

    Rounded columns are replaced by ``object`` columns (categorical ones
    included); excluded columns are left as they are, dtype and all.
    """
    rows, cols = _resolve_axes(
        frame.shape, exclude_rows, exclude_cols, list(frame.index), list(frame.columns)
    )

    out = frame.copy()
    values = np.empty(frame.shape, dtype=object)
    for j in cols:
        values[:, j] = frame.iloc[:, j].to_numpy(dtype=object)

    rounded = _round_matrix(values, rows, cols, options)
    for j in cols:
        out.isetitem(j, pd.Series(rounded[:, j], index=out.index, dtype=object))

    logger.debug("Rounded %d rows x %d columns of a %d x %d frame",
                 len(rows), len(cols), *frame.shape)
    return out


def round_array(
    array: np.ndarray,
    options: RoundingOptions,
    exclude_rows: Any = None,
    exclude_cols: Any = None,
) -> np.ndarray:
    """
    Round a 2-D numpy array with already resolved options.

    Arrays carry no labels, so name patterns exclude nothing. The result
    is an ``object`` array of the same shape.
    """
    if array.ndim != 2:
        raise ConfigurationError(
            "table",
            "only vectors, 2-D arrays and DataFrames can be rounded",
            expected=2,
            actual=array.ndim,
        )
    rows, cols = _resolve_axes(array.shape, exclude_rows, exclude_cols, None, None)
    return _round_matrix(array, rows, cols, options)


def round_table(
    table: Table,
    digits: Optional[DigitSpec] = None,
    exclude_rows: Any = None,
    exclude_cols: Any = None,
    na_placeholder: Optional[str] = None,
    decimal_marker: Optional[str] = None,
    output_marker: Optional[str] = None,
) -> Table:
    """
    Round the cells of a table, column by column.

    Args:
        table: DataFrame or 2-D numpy array
        digits: One digit count for all rounded columns, or one per
            rounded column (excluded columns are not counted)
        exclude_rows: Rows to leave untouched: positions (ByIndex, int or
            list of ints) or a label pattern (ByNamePattern or str)
        exclude_cols: Columns to leave untouched, same forms as exclude_rows
        na_placeholder: Display string for missing values
        decimal_marker: Decimal marker used in string cells
        output_marker: Decimal marker of the formatted cells

    Returns:
        A new table of the same shape and labels

    Raises:
        NoColumnsError: If every column is excluded
        NoRowsError: If every row is excluded
        ConfigurationError: If digits has neither 1 nor one entry per
            rounded column, or the input is not two-dimensional

    Example:
        df = pd.DataFrame({"n": [12, 7], "mean": [1.234, 5.678]},
                          index=["A", "Total"])
        round_table(df, digits=1, exclude_cols="^n$")
        # "mean" becomes ["1.2", "5.7"], "n" keeps its integers
    """
    options = RoundingOptions.resolve(
        digits=digits,
        na_placeholder=na_placeholder,
        decimal_marker=decimal_marker,
        output_marker=output_marker,
    )
    if isinstance(table, pd.DataFrame):
        return round_frame(table, options, exclude_rows, exclude_cols)
    if isinstance(table, np.ndarray):
        return round_array(table, options, exclude_rows, exclude_cols)
    raise ConfigurationError(
        "table",
        "expected a pandas DataFrame or a 2-D numpy array",
        expected="DataFrame | ndarray",
        actual=type(table).__name__,
    )
