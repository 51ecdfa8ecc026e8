from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from statfmt.core.cells import Cell, CellKind, is_missing, is_numeric


@pytest.mark.parametrize("value", [None, float("nan"), np.nan, pd.NA, pd.NaT])
def test_missing_values(value):
    assert is_missing(value)
    assert Cell.from_value(value).kind is CellKind.MISSING


@pytest.mark.parametrize("value", ["", "NA", 0, [None], (1, 2)])
def test_not_missing(value):
    assert not is_missing(value)


@pytest.mark.parametrize("value", [1, 2.5, np.float64(1.5), np.int32(3), Decimal("1.25"), -0.0])
def test_numeric_values(value):
    assert is_numeric(value)
    assert Cell.from_value(value).is_numeric


@pytest.mark.parametrize("value", [True, np.bool_(False), "1.5", object()])
def test_text_values(value):
    assert not is_numeric(value)
    assert Cell.from_value(value).is_text


def test_cell_keeps_original_value():
    cell = Cell.from_value("12 %")
    assert cell.value == "12 %"
    assert not cell.is_missing


def test_from_value_accepts_cell():
    cell = Cell(CellKind.NUMERIC, 1.0)
    assert Cell.from_value(cell) is cell
