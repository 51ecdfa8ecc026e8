# statfmt/report/formatters/tokens.py
"""
Numeric token extraction from decorated strings.

A string such as ``"mean 12,5 (sd)"`` holds one number surrounded by
text. Extraction happens in three separate steps:

1. normalize the decimal marker to ``"."``
2. match the first numeric token
3. parse the token (grouping spaces removed) into a float

Boundary behavior: when a string holds several numbers only the first one
is used, and a ``-`` before the number that is not directly attached to it
(``"p-value 0.03"``) makes the string non-numeric. Digit groups separated
by single spaces are read as one grouped number, so ``"Group 1 2019"``
parses as 12019 rather than 1.
"""

from __future__ import annotations

import re
from typing import Optional

# Prefix: anything without digits, decimal point or minus sign.
# Number: optional minus, integer part with optional single-space grouping,
#   optional fraction; or a bare fraction (".5").
# Suffix: empty, or anything starting with a non-digit.
NUMERIC_TOKEN = re.compile(
    r"^(?P<prefix>[^0-9.\-]*)"
    r"(?P<number>-?(?:[0-9]+(?: [0-9]+)*(?:\.[0-9]+)?|\.[0-9]+))"
    r"(?P<suffix>[^0-9].*)?$",
    re.DOTALL,
)


def normalize_decimal_marker(text: str, decimal_marker: str = ".") -> str:
    """
    Replace a locale decimal marker by ``"."``.

    Examples:
        >>> normalize_decimal_marker("12,50", ",")
        '12.50'
        >>> normalize_decimal_marker("12.50")
        '12.50'
    """
    if decimal_marker == ".":
        return text
    return text.replace(decimal_marker, ".")


def match_numeric_token(text: str) -> Optional[str]:
    """
    Return the first numeric token of an already normalized string.

    Examples:
        >>> match_numeric_token("n = 1 234.5 subjects")
        '1 234.5'
        >>> match_numeric_token("not-a-number") is None
        True
    """
    m = NUMERIC_TOKEN.match(text)
    if m is None:
        return None
    return m.group("number")


def parse_numeric_token(token: str) -> float:
    """Convert a matched token to a float, dropping thousands grouping spaces."""
    return float(token.replace(" ", ""))


def extract_number(text: str, decimal_marker: str = ".") -> Optional[float]:
    """
    Extract the first number embedded in a string.

    Args:
        text: String that may hold a number among other text
        decimal_marker: Decimal marker used in ``text``

    Returns:
        The number, or None when the string is not numeric-looking

    Examples:
        >>> extract_number("12,50", decimal_marker=",")
        12.5
        >>> extract_number("about 3.2 mg")
        3.2
        >>> extract_number("n/a") is None
        True
    """
    token = match_numeric_token(normalize_decimal_marker(text, decimal_marker))
    if token is None:
        return None
    return parse_numeric_token(token)
