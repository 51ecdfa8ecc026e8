# statfmt/report/formatters/pvalues.py
"""
p-value formatting.

You often want 0.1234 to be shown as 0.12 and 0.01234 as 0.012, while
0.001234 is enough as 0.001. Below a significance limit the exact value is
not interesting any more and "< 0.0001" is shown instead.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Union

import numpy as np
import pandas as pd

from statfmt.config import settings
from statfmt.core.cells import Cell, CellKind

logger = logging.getLogger(__name__)


def _plain(x: float) -> str:
    """Positional notation without trailing zeros (1e-4 -> '0.0001')."""
    return np.format_float_positional(x, trim="-")


def _format_pval(
    value: Any,
    lim_2dec: float,
    lim_sig: float,
    lt_sign: str,
    na_placeholder: str,
) -> Any:
    cell = Cell.from_value(value)
    if cell.kind is CellKind.MISSING:
        return na_placeholder
    p = None
    if cell.kind is CellKind.NUMERIC:
        p = float(value)
    elif isinstance(value, str):
        try:
            p = float(value.strip())
        except ValueError:
            pass
    if p is None:
        logger.warning("The value %r is non-numeric and txt_pval can't handle it", value)
        return value

    if p < lim_sig:
        return f"{lt_sign}{_plain(lim_sig)}"
    if p > lim_2dec:
        decimals = max(0, -math.floor(math.log10(p)) + 1)
        return f"{p:.{decimals}f}"
    return np.format_float_positional(p, precision=1, unique=False, fractional=False, trim="-")


def txt_pval(
    pvalues: Any,
    lim_2dec: Optional[float] = None,
    lim_sig: Optional[float] = None,
    html: Optional[Union[bool, str]] = None,
    na_placeholder: Optional[str] = None,
) -> Any:
    """
    Format p-values for display.

    Args:
        pvalues: p-value, list/tuple, numpy array or Series
        lim_2dec: Above this limit two significant digits are kept (and at
            least as many decimals as needed to show them); at or below it
            a single significant digit
        lim_sig: Below this limit the value is shown as "< lim_sig"
        html: True for ``&lt; ``, False for ``< ``, or a custom prefix string
        na_placeholder: Display string for missing values

    Returns:
        Formatted string(s) in the same shape as ``pvalues``

    Examples:
        >>> txt_pval([0.10234, 0.010234, 0.0010234, 0.000010234])
        ['0.10', '0.010', '0.001', '&lt; 0.0001']
        >>> txt_pval(0.000010234, html=False)
        '< 0.0001'
    """
    defaults = settings.get_formatter_defaults("txt_pval")
    lim_2dec = defaults["lim_2dec"] if lim_2dec is None else lim_2dec
    lim_sig = defaults["lim_sig"] if lim_sig is None else lim_sig
    html = defaults["html"] if html is None else html
    na_placeholder = defaults["na_placeholder"] if na_placeholder is None else na_placeholder

    if isinstance(html, str):
        lt_sign = html
    else:
        lt_sign = "&lt; " if html else "< "

    def fmt(v: Any) -> Any:
        return _format_pval(v, lim_2dec, lim_sig, lt_sign, na_placeholder)

    if isinstance(pvalues, pd.Series):
        return pvalues.astype(object).map(fmt)
    if isinstance(pvalues, np.ndarray):
        return np.vectorize(fmt, otypes=[object])(pvalues)
    if isinstance(pvalues, (list, tuple)):
        return [fmt(v) for v in pvalues]
    return fmt(pvalues)
