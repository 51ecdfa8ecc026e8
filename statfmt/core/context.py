# statfmt/core/context.py
"""
Options object for the rounding formatters.

A :class:`RoundingOptions` is built once per call from the caller's
arguments, falling back to the global settings, and is then passed down
unchanged from the table dispatcher to the scalar primitive.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence, Union

from statfmt.config.settings import StatFmtSettings
from statfmt.config.settings import settings as global_settings
from statfmt.core.exceptions import ConfigurationError

DigitSpec = Union[int, Sequence[int]]


def _check_digit(d: Any) -> int:
    if isinstance(d, bool):
        raise ConfigurationError("digits", f"expected an integer, got {d!r}", "int", d)
    try:
        d = operator.index(d)
    except TypeError:
        raise ConfigurationError(
            "digits", f"expected an integer, got {d!r}", "int", type(d).__name__
        ) from None
    if d < 0:
        raise ConfigurationError("digits", f"must be non-negative, got {d}", ">= 0", d)
    return d


def _check_marker(argument: str, marker: Any) -> str:
    if not isinstance(marker, str) or not marker:
        raise ConfigurationError(argument, "must be a non-empty string", "str", marker)
    return marker


@dataclass(frozen=True)
class RoundingOptions:
    """
    Immutable options shared by every cell of one formatting call.

    Attributes:
        digits: One digit count, or one per element/column
        na_placeholder: Display string for missing values
        decimal_marker: Decimal marker expected in string input
        output_marker: Decimal marker used in the emitted strings

    Example:
        opts = RoundingOptions.resolve(digits=[1, 2], na_placeholder="-")
        opts.digits_for(2, "columns")  # -> [1, 2]
    """

    digits: DigitSpec = 0
    na_placeholder: str = ""
    decimal_marker: str = "."
    output_marker: str = "."

    def __post_init__(self):
        if isinstance(self.digits, (str, bytes)):
            raise ConfigurationError(
                "digits", "expected an integer or a sequence of integers",
                "int | Sequence[int]", self.digits,
            )
        if hasattr(self.digits, "__len__"):
            digits = tuple(_check_digit(d) for d in self.digits)
            if not digits:
                raise ConfigurationError("digits", "no digit specification given", ">= 1", 0)
        else:
            digits = _check_digit(self.digits)
        object.__setattr__(self, "digits", digits)
        _check_marker("decimal_marker", self.decimal_marker)
        _check_marker("output_marker", self.output_marker)

    @classmethod
    def resolve(
        cls,
        digits: Optional[DigitSpec] = None,
        na_placeholder: Optional[str] = None,
        decimal_marker: Optional[str] = None,
        output_marker: Optional[str] = None,
        settings: Optional[StatFmtSettings] = None,
    ) -> "RoundingOptions":
        """
        Build options from call arguments, filling the gaps from settings.

        Args:
            digits: Digit specification, or None for the default
            na_placeholder: Placeholder, or None for the default
            decimal_marker: Input marker, or None for the default (the
                output marker when only that one is customized)
            output_marker: Output marker, or None for the default
            settings: Settings to fall back on (global settings if omitted)

        Returns:
            A validated RoundingOptions
        """
        if settings is None:
            settings = global_settings

        defaults = settings.get_formatter_defaults("txt_round")
        output_marker = defaults["output_marker"] if output_marker is None else output_marker
        if decimal_marker is None:
            decimal_marker = defaults["decimal_marker"]
            # Input written with a custom output marker reads back unchanged.
            if decimal_marker == "." and output_marker != ".":
                decimal_marker = output_marker
        return cls(
            digits=defaults["digits"] if digits is None else digits,
            na_placeholder=defaults["na_placeholder"] if na_placeholder is None else na_placeholder,
            decimal_marker=decimal_marker,
            output_marker=output_marker,
        )

    def digits_for(self, n: int, target: str = "elements") -> List[int]:
        """
        Expand the digit specification to exactly ``n`` entries.

        Args:
            n: Number of elements/columns that will be rounded
            target: What the digits apply to, used in the error message

        Returns:
            List of n digit counts

        Raises:
            ConfigurationError: If the specification has neither 1 nor n entries
        """
        if isinstance(self.digits, int):
            return [self.digits] * n
        if len(self.digits) == 1:
            return [self.digits[0]] * n
        if len(self.digits) != n:
            raise ConfigurationError(
                "digits",
                f"{len(self.digits)} digit specifications given but there are "
                f"{n} {target} to apply them to",
                expected=f"1 or {n}",
                actual=len(self.digits),
            )
        return list(self.digits)

    def with_digits(self, digits: DigitSpec) -> "RoundingOptions":
        """Create a copy with a different digit specification."""
        return replace(self, digits=digits)
