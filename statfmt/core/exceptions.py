# statfmt/core/exceptions.py
"""
Exception hierarchy for statfmt.

Only caller mistakes are errors. Values that cannot be formatted are
passed through or replaced by the NA placeholder instead of raising.

Exception Hierarchy:
    StatFmtError (base)
    ├── ConfigurationError
    └── ExclusionError
        ├── NoRowsError
        └── NoColumnsError
"""

from typing import Any, Dict, Optional, Sequence


class StatFmtError(Exception):
    """
    Base exception for all statfmt errors.

    Catch this to handle any error raised by the formatters:

        try:
            txt_round(table, digits=[1, 2])
        except StatFmtError as e:
            logger.error(f"Formatting failed: {e}")
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(StatFmtError):
    """
    Raised when a formatting option is invalid.

    Typical cause is a digits specification whose length matches neither 1
    nor the number of elements/columns it should be applied to.
    """

    def __init__(
        self,
        argument: str,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(
            f"Invalid '{argument}': {message}",
            details={"argument": argument, "expected": expected, "actual": actual},
        )
        self.argument = argument
        self.expected = expected
        self.actual = actual


# ============================================================================
# Exclusion Exceptions
# ============================================================================

class ExclusionError(StatFmtError):
    """Base exception for row/column exclusions that leave nothing to round."""

    axis: str = ""

    def __init__(self, size: int, excluded: Sequence[int]):
        super().__init__(
            f"No {self.axis} to round: all {size} {self.axis} were excluded",
            details={"size": size, "excluded": sorted(excluded)},
        )
        self.size = size
        self.excluded = tuple(sorted(excluded))


class NoRowsError(ExclusionError):
    """Raised when the row exclusion removes every row."""

    axis = "rows"


class NoColumnsError(ExclusionError):
    """Raised when the column exclusion removes every column."""

    axis = "columns"
