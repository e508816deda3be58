"""
Formatting — Rounding and display strings for dashboard metrics.
"""

from __future__ import annotations

import math

import numpy as np


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward +infinity.

    Matches the front end's rounding: 2.5 -> 3, -2.5 -> -2.
    Python's round() would give 2 and -2.
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0
    return int(math.floor(value + 0.5))


def round_half_up_tenths(value: float) -> float:
    """One-decimal counterpart of round_half_up: 0.25 -> 0.3, -0.25 -> -0.2."""
    return round_half_up(value * 10) / 10


def as_number(value) -> int | float:
    """
    Convert a NumPy / pandas scalar to a plain Python number.

    Integral values come back as int so JSON shows 1000, not 1000.0.
    NaN becomes 0.
    """
    if isinstance(value, np.generic):
        value = value.item()
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_millions(value: float) -> str:
    """1234567 -> '$1.2M'"""
    return f"${value / 1_000_000:.1f}M"


def format_thousands(value: float) -> str:
    """21340 -> '$21.3K'"""
    return f"${value / 1_000:.1f}K"


def format_percent(value: int) -> str:
    return f"{value}%"


def format_days(value: int) -> str:
    return f"{value} Days"


def format_signed(value: int, suffix: str = "%") -> str:
    """
    Signed change string; the first character is always '+' or '-'.

    Zero renders as '+0'. The front end colors by the leading sign.
    """
    sign = "-" if value < 0 else "+"
    return f"{sign}{abs(value)}{suffix}"
