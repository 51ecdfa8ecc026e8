"""
Test configuration and fixtures for pytest.

Fixtures shared by the formatter tests.
"""
import numpy as np
import pandas as pd
import pytest

from statfmt.config import StatFmtSettings


@pytest.fixture
def mx():
    """3 x 3 numeric matrix used in the txt_round examples."""
    return np.array(
        [
            [1, 1.11, 1.25],
            [2.50, 2.55, 2.45],
            [3.2313, 3, np.pi],
        ]
    )


@pytest.fixture
def summary_df():
    """A small summary table mixing counts, means, labels and missing values."""
    return pd.DataFrame(
        {
            "n": [120, 80, 200],
            "mean": [1.2345, "2,5 (sd)", None],
            "label": ["treated", "control", "all"],
            "sd": [0.98765, 1.5, 12.0],
        },
        index=["Treatment", "Control", "Total"],
    )


@pytest.fixture
def default_settings(monkeypatch):
    """Settings built with no STATFMT_* variables in the environment."""
    for key in [
        "STATFMT_DIGITS",
        "STATFMT_NA_PLACEHOLDER",
        "STATFMT_DECIMAL_MARKER",
        "STATFMT_OUTPUT_MARKER",
        "STATFMT_LANGUAGE",
        "STATFMT_HTML",
        "STATFMT_PVAL_LIM_2DEC",
        "STATFMT_PVAL_LIM_SIG",
    ]:
        monkeypatch.delenv(key, raising=False)
    return StatFmtSettings()
