# statfmt/report/formatters/integers.py
"""
Integer formatting with thousands separators.

English uses ``,`` between every three digits while the SI convention
uses a (non-breaking) space, and only once the number reaches 10 000.
Scientific notation is never used.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np
import pandas as pd

from statfmt.config import settings
from statfmt.core.cells import Cell, CellKind

logger = logging.getLogger(__name__)

SI_THRESHOLD = 10 ** 4


def _format_int(
    value: Any,
    language: str,
    html: bool,
    decimals: Optional[int],
    na_placeholder: str,
) -> Any:
    cell = Cell.from_value(value)
    if cell.kind is CellKind.MISSING:
        return na_placeholder
    if cell.kind is not CellKind.NUMERIC:
        logger.warning("txt_int can only format numbers, got %r; returned unchanged", value)
        return value

    v = value.item() if isinstance(value, np.generic) else value
    if decimals is not None:
        txt = f"{v:,.{decimals}f}"
    elif float(v).is_integer():
        txt = f"{int(v):,}"
    else:
        logger.warning(
            "txt_int expects integers, %r is not one; pass decimals to control "
            "how many decimals are shown", value,
        )
        txt = f"{v:,}"

    if language == "en":
        return txt
    if abs(v) >= SI_THRESHOLD:
        return txt.replace(",", "&nbsp;" if html else " ")
    return txt.replace(",", "")


def txt_int(
    x: Any,
    language: Optional[str] = None,
    html: Optional[bool] = None,
    decimals: Optional[int] = None,
    na_placeholder: Optional[str] = None,
) -> Any:
    """
    SI or English formatting of integers.

    Args:
        x: Number, list/tuple, numpy array, Series or DataFrame
        language: ISO-639-1 code; "en" uses "," as separator, anything
            else the SI space for values of 10 000 and above
        html: Use ``&nbsp;`` instead of a plain space for the SI separator
        decimals: Fixed number of decimals for non-integer values
        na_placeholder: Display string for missing values

    Returns:
        Formatted string(s) in the same shape as ``x``

    Examples:
        >>> txt_int(123)
        '123'
        >>> txt_int(1234)
        '1,234'
        >>> txt_int(12345, language="sv")
        '12&nbsp;345'
        >>> txt_int(1234, language="sv")
        '1234'
    """
    defaults = settings.get_formatter_defaults("txt_int")
    language = defaults["language"] if language is None else language
    html = defaults["html"] if html is None else html
    na_placeholder = defaults["na_placeholder"] if na_placeholder is None else na_placeholder

    def fmt(v: Any) -> Any:
        return _format_int(v, language, html, decimals, na_placeholder)

    if isinstance(x, pd.DataFrame):
        return x.astype(object).map(fmt)
    if isinstance(x, pd.Series):
        return x.astype(object).map(fmt)
    if isinstance(x, np.ndarray):
        return np.vectorize(fmt, otypes=[object])(x)
    if isinstance(x, (list, tuple)):
        return [fmt(v) for v in x]
    return fmt(x)
