"""
Dates — Date coercion and calendar-month helpers.

Every date comparison in the engine goes through real datetime64 values,
never through ISO-string ordering.
"""

from __future__ import annotations

from datetime import date

import pandas as pd


MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def coerce_dates(series: pd.Series) -> pd.Series:
    """Parse a column to datetime64; unparseable values become NaT."""
    return pd.to_datetime(series, errors="coerce")


def to_timestamp(value: date | str | None = None) -> pd.Timestamp:
    """Normalize *value* (default: today) to a midnight Timestamp."""
    if value is None:
        value = date.today()
    return pd.Timestamp(value).normalize()


def month_bounds(month: str) -> tuple[pd.Timestamp, pd.Timestamp]:
    """First and last day of a 'YYYY-MM' month."""
    period = pd.Period(month, freq="M")
    return period.start_time.normalize(), period.end_time.normalize()


def in_month(dates: pd.Series, month: str) -> pd.Series:
    """Boolean mask: which *dates* fall in the 'YYYY-MM' month. NaT is False."""
    start, end = month_bounds(month)
    return dates.between(start, end)


def month_label(month: str) -> str:
    """'2026-01' -> 'Jan'."""
    return MONTH_ABBREVIATIONS[int(month.split("-")[1]) - 1]
