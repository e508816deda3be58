"""
Frames — Column guards and cleaning shared by every metric module.

Metric functions never raise on bad input: a collection that is empty or
missing a required column simply yields zero / empty results. These
helpers are where that rule is applied.
"""

from __future__ import annotations

import pandas as pd

from .dates import coerce_dates
from .formatting import round_half_up

DEAL_COLUMNS = ["accountId", "repId", "value", "status", "createdAt", "closedAt"]


def has_columns(df: pd.DataFrame | None, *columns: str) -> bool:
    """True if *df* is a DataFrame that has every one of *columns*."""
    return isinstance(df, pd.DataFrame) and all(col in df.columns for col in columns)


def clean_deals(deals: pd.DataFrame | None) -> pd.DataFrame:
    """
    Return a cleaned copy of the deals frame.

    - 'value' coerced to numeric (NaN -> 0)
    - 'createdAt' / 'closedAt' coerced to datetime64 (bad values -> NaT)

    Missing columns are added empty, so callers can filter without checks.
    """
    if not isinstance(deals, pd.DataFrame):
        return pd.DataFrame(columns=DEAL_COLUMNS)

    out = deals.copy()
    for col in DEAL_COLUMNS:
        if col not in out.columns:
            out[col] = pd.NA

    out["value"] = pd.to_numeric(out["value"], errors="coerce").fillna(0.0).astype(float)
    out["createdAt"] = coerce_dates(out["createdAt"])
    out["closedAt"] = coerce_dates(out["closedAt"])
    return out


def with_status(deals: pd.DataFrame, *statuses: str) -> pd.DataFrame:
    """Rows of a cleaned deals frame whose status is one of *statuses*."""
    return deals[deals["status"].isin(statuses)]


def total(df: pd.DataFrame, column: str) -> float:
    """Sum of *column*; 0.0 for an empty frame or missing column."""
    if not has_columns(df, column) or df.empty:
        return 0.0
    return float(pd.to_numeric(df[column], errors="coerce").fillna(0).sum())


def mean(df: pd.DataFrame, column: str) -> float:
    """Mean of *column*; 0.0 for an empty frame or missing column."""
    if not has_columns(df, column):
        return 0.0
    numeric = pd.to_numeric(df[column], errors="coerce").dropna()
    return float(numeric.mean()) if len(numeric) > 0 else 0.0


def win_rate(won: int, lost: int) -> int:
    """Won / (Won + Lost) as a rounded percentage; 0 with no closed deals."""
    closed = won + lost
    if closed == 0:
        return 0
    return round_half_up(won / closed * 100)


def cycle_days(deals: pd.DataFrame) -> pd.Series:
    """
    Whole days from createdAt to closedAt per deal (floored).

    Rows missing either date are dropped.
    """
    spans = (deals["closedAt"] - deals["createdAt"]).dropna()
    return spans.dt.days.astype(float)
