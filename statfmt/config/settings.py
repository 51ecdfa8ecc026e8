# statfmt/config/settings.py
"""
statfmt Settings Module.

Provides library-wide formatting defaults with environment variable support.
All settings can be overridden via environment variables with STATFMT_ prefix.

Environment Variables:
    STATFMT_DIGITS: Default number of fractional digits (default: 0)
    STATFMT_NA_PLACEHOLDER: Text used for missing values (default: "")
    STATFMT_DECIMAL_MARKER: Decimal marker of string input (default: ".")
    STATFMT_OUTPUT_MARKER: Decimal marker of formatted output (default: ".")
    STATFMT_LANGUAGE: Language for thousands separators (default: "en")
    STATFMT_HTML: Emit html entities instead of plain text (default: true)
    STATFMT_PVAL_LIM_2DEC: p-value limit for two decimals (default: 0.01)
    STATFMT_PVAL_LIM_SIG: p-value limit for the less-than sign (default: 0.0001)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off"):
        return False
    return default


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    val = os.environ.get(key)
    if val is not None:
        try:
            return int(val)
        except ValueError:
            pass
    return default


def _get_env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    val = os.environ.get(key)
    if val is not None:
        try:
            return float(val)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable (empty string is a valid value)."""
    return os.environ.get(key, default)


@dataclass
class StatFmtSettings:
    """
    Library-wide formatting defaults for statfmt.

    Every formatter option left as ``None`` by the caller falls back to
    these values. They can be overridden via environment variables with
    STATFMT_ prefix, or by passing values directly to the constructor.

    Attributes:
        digits: Default number of fractional digits for txt_round
        na_placeholder: Display string for missing values
        decimal_marker: Decimal marker expected in string input
        output_marker: Decimal marker used in formatted output
        language: ISO-639-1 code; "en" uses "," as thousands separator
        html: Emit html entities (&nbsp;, &lt;) instead of plain text
        pval_lim_2dec: p-values above this keep two significant digits
        pval_lim_sig: p-values below this are shown as "< lim"

    Example:
        # Use default settings
        from statfmt.config import settings
        print(settings.na_placeholder)

        # Override via environment
        os.environ["STATFMT_DECIMAL_MARKER"] = ","

        # Override programmatically
        custom = StatFmtSettings(digits=2, na_placeholder="-")
    """

    # Rounding
    digits: int = field(
        default_factory=lambda: _get_env_int("STATFMT_DIGITS", 0)
    )
    na_placeholder: str = field(
        default_factory=lambda: _get_env_str("STATFMT_NA_PLACEHOLDER", "")
    )
    decimal_marker: str = field(
        default_factory=lambda: _get_env_str("STATFMT_DECIMAL_MARKER", ".")
    )
    output_marker: str = field(
        default_factory=lambda: _get_env_str("STATFMT_OUTPUT_MARKER", ".")
    )

    # Integers / markup
    language: str = field(
        default_factory=lambda: _get_env_str("STATFMT_LANGUAGE", "en")
    )
    html: bool = field(
        default_factory=lambda: _get_env_bool("STATFMT_HTML", True)
    )

    # p-values
    pval_lim_2dec: float = field(
        default_factory=lambda: _get_env_float("STATFMT_PVAL_LIM_2DEC", 1e-2)
    )
    pval_lim_sig: float = field(
        default_factory=lambda: _get_env_float("STATFMT_PVAL_LIM_SIG", 1e-4)
    )

    def get_formatter_defaults(self, formatter_name: str) -> Dict[str, Any]:
        """
        Get default options for a specific formatter.

        Args:
            formatter_name: Name of the formatter (e.g., "txt_round")

        Returns:
            Dictionary of default keyword arguments for the formatter
        """
        defaults = {
            "txt_round": {
                "digits": self.digits,
                "na_placeholder": self.na_placeholder,
                "decimal_marker": self.decimal_marker,
                "output_marker": self.output_marker,
            },
            "txt_int": {
                "language": self.language,
                "html": self.html,
                "na_placeholder": self.na_placeholder,
            },
            "txt_pval": {
                "lim_2dec": self.pval_lim_2dec,
                "lim_sig": self.pval_lim_sig,
                "html": self.html,
                "na_placeholder": self.na_placeholder,
            },
        }
        return defaults.get(formatter_name, {})

    def as_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "digits": self.digits,
            "na_placeholder": self.na_placeholder,
            "decimal_marker": self.decimal_marker,
            "output_marker": self.output_marker,
            "language": self.language,
            "html": self.html,
            "pval_lim_2dec": self.pval_lim_2dec,
            "pval_lim_sig": self.pval_lim_sig,
        }


# Global settings instance (singleton pattern)
settings = StatFmtSettings()
