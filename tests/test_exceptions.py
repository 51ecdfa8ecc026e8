import pytest

from statfmt.core.exceptions import (
    ConfigurationError,
    ExclusionError,
    NoColumnsError,
    NoRowsError,
    StatFmtError,
)


def test_hierarchy():
    assert issubclass(ConfigurationError, StatFmtError)
    assert issubclass(NoRowsError, ExclusionError)
    assert issubclass(NoColumnsError, ExclusionError)
    assert issubclass(ExclusionError, StatFmtError)


def test_configuration_error_names_argument():
    err = ConfigurationError("digits", "2 digit specifications for 4 columns", "1 or 4", 2)
    assert err.argument == "digits"
    assert "Invalid 'digits'" in str(err)
    assert err.details == {"argument": "digits", "expected": "1 or 4", "actual": 2}


def test_exclusion_errors_message():
    err = NoColumnsError(3, [2, 0, 1])
    assert err.message == "No columns to round: all 3 columns were excluded"
    assert err.excluded == (0, 1, 2)
    assert "No rows" in str(NoRowsError(1, [0]))


def test_catch_all():
    with pytest.raises(StatFmtError):
        raise NoRowsError(0, [])
