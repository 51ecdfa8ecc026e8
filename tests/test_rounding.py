import numpy as np
import pandas as pd
import pytest

from statfmt import txt_round
from statfmt.core.exceptions import ConfigurationError


def test_scalar():
    assert txt_round(3.14159, 2) == "3.14"
    assert txt_round("not-a-number", 2) == "not-a-number"
    assert txt_round(None, 2, na_placeholder="–") == "–"


def test_default_digits_is_zero():
    assert txt_round(2.71828) == "3"


def test_list_and_tuple():
    assert txt_round([1.25, "x", None], 1, na_placeholder="NA") == ["1.2", "x", "NA"]
    assert txt_round((0.5, 1.5), [1, 2]) == ["0.5", "1.50"]


def test_vector_digits_mismatch():
    with pytest.raises(ConfigurationError):
        txt_round([1, 2, 3], [1, 2])


def test_series_keeps_index_and_name():
    s = pd.Series([1.234, np.nan], index=["a", "b"], name="mean")
    out = txt_round(s, 1)
    assert list(out) == ["1.2", ""]
    assert list(out.index) == ["a", "b"]
    assert out.name == "mean"


def test_one_dimensional_array():
    out = txt_round(np.array([1.0, 2.5, -0.001]), 2)
    assert isinstance(out, np.ndarray)
    assert out.dtype == object
    assert list(out) == ["1.00", "2.50", "0.00"]


def test_zero_dimensional_array():
    assert txt_round(np.array(3.14159), 3) == "3.142"


def test_matrix_example(mx):
    out = txt_round(mx, 1, exclude_rows=[0, 1])
    assert list(out[2]) == ["3.2", "3.0", "3.1"]


def test_data_frame_dispatch(summary_df):
    out = txt_round(summary_df, 1, exclude_cols="^label$")
    assert isinstance(out, pd.DataFrame)
    assert list(out["n"]) == ["120.0", "80.0", "200.0"]
    assert list(out["label"]) == ["treated", "control", "all"]


def test_locale_decimal_marker():
    assert txt_round("12,50", 1, decimal_marker=",") == "12.5"
    assert txt_round(["1,25", "3,5"], 2, decimal_marker=",") == ["1.25", "3.50"]


def test_output_marker_round_trip():
    out = txt_round([1.234, "2,345"], 2, decimal_marker=",", output_marker=",")
    assert out == ["1,23", "2,35"]
    assert txt_round(out, 2, decimal_marker=",", output_marker=",") == out


def test_output_marker_alone_is_stable_under_re_rounding():
    once = txt_round(1.26, 1, output_marker=",")
    assert once == "1,3"
    assert txt_round(once, 1, output_marker=",") == "1,3"

    values = txt_round([1.234, 5.678, None], 2, output_marker=",")
    assert values == ["1,23", "5,68", ""]
    assert txt_round(values, 2, output_marker=",") == values


def test_explicit_decimal_marker_wins_over_output_marker():
    assert txt_round("1.25", 2, decimal_marker=".", output_marker=",") == "1,25"


def test_exclusions_ignored_for_vectors():
    assert txt_round([1.26, 2.0], 1, exclude_cols=[0]) == ["1.3", "2.0"]


@pytest.mark.parametrize("value", [0.123456, -5.5, "n = 12", "label", None, 1e6])
def test_idempotence(value):
    once = txt_round(value, 2)
    assert txt_round(once, 2) == once
