# statfmt/core/cells.py
"""
Tagged cell values.

Every value handed to a formatter is classified exactly once into a
:class:`Cell` so the formatters can branch on ``cell.kind`` instead of
probing types over and over.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

import pandas as pd


class CellKind(Enum):
    """The three kinds of value a formatter can meet."""

    NUMERIC = "numeric"
    TEXT = "text"
    MISSING = "missing"


def is_missing(value: Any) -> bool:
    """
    Check whether a scalar is a missing value.

    ``None``, ``float('nan')``, ``numpy.nan``, ``pd.NA`` and ``pd.NaT`` are
    missing. Containers are never considered missing.

    Examples:
        >>> is_missing(None)
        True
        >>> is_missing(float("nan"))
        True
        >>> is_missing("")
        False
    """
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def is_numeric(value: Any) -> bool:
    """True for real numbers (int, float, numpy numbers, Decimal) but not bool."""
    if pd.api.types.is_bool(value):
        return False
    return isinstance(value, (numbers.Real, Decimal))


@dataclass(frozen=True)
class Cell:
    """
    A value tagged with its kind.

    Attributes:
        kind: NUMERIC, TEXT or MISSING
        value: The original value, untouched

    Example:
        >>> Cell.from_value(3.14).kind
        <CellKind.NUMERIC: 'numeric'>
        >>> Cell.from_value("n = 12").kind
        <CellKind.TEXT: 'text'>
    """

    kind: CellKind
    value: Any

    @classmethod
    def from_value(cls, value: Any) -> "Cell":
        if isinstance(value, Cell):
            return value
        if is_missing(value):
            return cls(CellKind.MISSING, value)
        if is_numeric(value):
            return cls(CellKind.NUMERIC, value)
        return cls(CellKind.TEXT, value)

    @property
    def is_missing(self) -> bool:
        return self.kind is CellKind.MISSING

    @property
    def is_numeric(self) -> bool:
        return self.kind is CellKind.NUMERIC

    @property
    def is_text(self) -> bool:
        return self.kind is CellKind.TEXT
