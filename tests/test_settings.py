import pytest

from statfmt.config import StatFmtSettings
from statfmt.core.context import RoundingOptions
from statfmt.core.exceptions import ConfigurationError


def test_defaults(default_settings):
    assert default_settings.digits == 0
    assert default_settings.na_placeholder == ""
    assert default_settings.decimal_marker == "."
    assert default_settings.output_marker == "."
    assert default_settings.language == "en"
    assert default_settings.html is True
    assert default_settings.pval_lim_2dec == 0.01
    assert default_settings.pval_lim_sig == 0.0001


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STATFMT_DIGITS", "2")
    monkeypatch.setenv("STATFMT_NA_PLACEHOLDER", "NA")
    monkeypatch.setenv("STATFMT_DECIMAL_MARKER", ",")
    monkeypatch.setenv("STATFMT_HTML", "no")
    monkeypatch.setenv("STATFMT_PVAL_LIM_SIG", "0.001")
    s = StatFmtSettings()
    assert s.digits == 2
    assert s.na_placeholder == "NA"
    assert s.decimal_marker == ","
    assert s.html is False
    assert s.pval_lim_sig == 0.001


def test_invalid_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("STATFMT_DIGITS", "two")
    monkeypatch.setenv("STATFMT_HTML", "maybe")
    monkeypatch.setenv("STATFMT_PVAL_LIM_2DEC", "")
    s = StatFmtSettings()
    assert s.digits == 0
    assert s.html is True
    assert s.pval_lim_2dec == 0.01


def test_formatter_defaults(default_settings):
    assert default_settings.get_formatter_defaults("txt_round") == {
        "digits": 0,
        "na_placeholder": "",
        "decimal_marker": ".",
        "output_marker": ".",
    }
    assert default_settings.get_formatter_defaults("unknown") == {}


def test_as_dict(default_settings):
    d = default_settings.as_dict()
    assert d["language"] == "en"
    assert set(d) >= {"digits", "na_placeholder", "pval_lim_sig"}


# --- RoundingOptions ---
def test_options_resolve_from_settings():
    custom = StatFmtSettings(digits=3, na_placeholder="-", decimal_marker=",")
    opts = RoundingOptions.resolve(settings=custom)
    assert opts.digits == 3
    assert opts.na_placeholder == "-"
    assert opts.decimal_marker == ","


def test_options_arguments_win_over_settings():
    custom = StatFmtSettings(digits=3, na_placeholder="-")
    opts = RoundingOptions.resolve(digits=[1, 2], na_placeholder="", settings=custom)
    assert opts.digits == (1, 2)
    assert opts.na_placeholder == ""


def test_options_input_marker_follows_output_marker():
    opts = RoundingOptions.resolve(output_marker=",", settings=StatFmtSettings())
    assert opts.decimal_marker == ","
    opts = RoundingOptions.resolve(decimal_marker=".", output_marker=",", settings=StatFmtSettings())
    assert opts.decimal_marker == "."
    custom = StatFmtSettings(decimal_marker=";")
    assert RoundingOptions.resolve(output_marker=",", settings=custom).decimal_marker == ";"


def test_options_digits_for():
    assert RoundingOptions(digits=2).digits_for(3) == [2, 2, 2]
    assert RoundingOptions(digits=[4]).digits_for(2) == [4, 4]
    assert RoundingOptions(digits=[1, 2]).digits_for(2, "columns") == [1, 2]


def test_options_digits_for_mismatch_message():
    with pytest.raises(ConfigurationError) as exc:
        RoundingOptions(digits=[1, 2]).digits_for(4, "columns")
    assert "4 columns" in str(exc.value)


@pytest.mark.parametrize("kwargs", [{"digits": []}, {"decimal_marker": ""}, {"output_marker": None}])
def test_options_validation(kwargs):
    with pytest.raises(ConfigurationError):
        RoundingOptions(**kwargs)
