# statfmt/report/formatters/numeric.py
"""
Scalar and vector rounding for report tables.

Numbers, and strings holding a number, become fixed-decimal display
strings. Missing values become the NA placeholder and any other value is
returned unchanged, so labels and numbers can share a column.
"""

from __future__ import annotations

import numbers
from decimal import Decimal, localcontext
from typing import Any, Iterable, List, Optional

from statfmt.core.cells import Cell, CellKind
from statfmt.core.context import DigitSpec, RoundingOptions
from statfmt.report.formatters.tokens import extract_number


def _format_decimal(value: Decimal, digits: int) -> str:
    if not value.is_finite():
        return f"{float(value):.{digits}f}"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
        rounded = value.quantize(Decimal(1).scaleb(-digits))
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded:f}"


def format_fixed(value: Any, digits: int, output_marker: str = ".") -> str:
    """
    Format a number with exactly ``digits`` fractional places.

    Values that round to zero are emitted as an unsigned zero. Integers and
    Decimals are formatted exactly, whatever their size.

    Examples:
        >>> format_fixed(3.14159, 2)
        '3.14'
        >>> format_fixed(-0.0001, 2)
        '0.00'
        >>> format_fixed(2.5, 1, output_marker=",")
        '2,5'
        >>> format_fixed(10 ** 30, 1)
        '1000000000000000000000000000000.0'
    """
    if isinstance(value, numbers.Integral):
        txt = _format_decimal(Decimal(int(value)), digits)
    elif isinstance(value, Decimal):
        txt = _format_decimal(value, digits)
    else:
        if round(value, digits) == 0:
            value = 0
        txt = f"{value:.{digits}f}"
    if output_marker != ".":
        txt = txt.replace(".", output_marker)
    return txt


def round_cell(cell: Cell, digits: int, options: RoundingOptions) -> Any:
    """
    Round one tagged cell.

    Args:
        cell: The tagged value
        digits: Number of fractional digits for this cell
        options: Placeholder and decimal markers

    Returns:
        The display string, the NA placeholder, or the original value
    """
    if cell.kind is CellKind.MISSING:
        return options.na_placeholder
    if cell.kind is CellKind.NUMERIC:
        return format_fixed(cell.value, digits, options.output_marker)
    if not isinstance(cell.value, str):
        return cell.value

    number = extract_number(cell.value, options.decimal_marker)
    if number is None:
        return cell.value
    return format_fixed(number, digits, options.output_marker)


def round_value(
    value: Any,
    digits: Optional[int] = None,
    na_placeholder: Optional[str] = None,
    decimal_marker: Optional[str] = None,
    output_marker: Optional[str] = None,
) -> Any:
    """
    Round a single value for display.

    Args:
        value: Number, string with an embedded number, or missing value
        digits: Number of fractional digits
        na_placeholder: Returned for missing values
        decimal_marker: Decimal marker used in string input
        output_marker: Decimal marker of the returned string

    Returns:
        Formatted string, or ``value`` unchanged when it is not numeric

    Examples:
        >>> round_value(3.14159, 2)
        '3.14'
        >>> round_value("12,50", 1, decimal_marker=",")
        '12.5'
        >>> round_value("not-a-number", 2)
        'not-a-number'
        >>> round_value(None, 2, na_placeholder="-")
        '-'
    """
    options = RoundingOptions.resolve(
        digits=digits,
        na_placeholder=na_placeholder,
        decimal_marker=decimal_marker,
        output_marker=output_marker,
    )
    (d,) = options.digits_for(1)
    return round_cell(Cell.from_value(value), d, options)


def round_cells(values: Iterable[Any], options: RoundingOptions, target: str = "elements") -> List[Any]:
    """
    Round a sequence of values, pairing each one with its digit count.

    Raises:
        ConfigurationError: If the digits match neither 1 nor len(values)
    """
    cells = [Cell.from_value(v) for v in values]
    digits = options.digits_for(len(cells), target)
    return [round_cell(cell, d, options) for cell, d in zip(cells, digits)]


def round_vector(
    values: Iterable[Any],
    digits: Optional[DigitSpec] = None,
    na_placeholder: Optional[str] = None,
    decimal_marker: Optional[str] = None,
    output_marker: Optional[str] = None,
) -> List[Any]:
    """
    Round every element of a sequence.

    ``digits`` is either one digit count for all elements or one per
    element.

    Returns:
        List of formatted strings (non-numeric elements unchanged)

    Raises:
        ConfigurationError: If ``digits`` has neither 1 nor len(values) entries

    Examples:
        >>> round_vector([1.2345, "n/a", None], digits=2)
        ['1.23', 'n/a', '']
        >>> round_vector([1.2345, 2.5], digits=[1, 0])
        ['1.2', '2']
    """
    options = RoundingOptions.resolve(
        digits=digits,
        na_placeholder=na_placeholder,
        decimal_marker=decimal_marker,
        output_marker=output_marker,
    )
    return round_cells(list(values), options)
