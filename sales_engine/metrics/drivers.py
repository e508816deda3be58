"""
Pipeline Drivers — Pipeline Value, Win Rate, Avg Deal Size, Sales Cycle.

Each driver carries:
    value  — the headline figure over all deals, as a display string
    change — last trend month vs. the month before, always signed
    trend  — six samples, one per TREND_MONTHS entry, oldest first

Trend samples are derived from deal history:
    Pipeline Value — value still open at each month's last day ($M)
    Win Rate       — win rate of deals closed within the month (%)
    Avg Deal Size  — mean Won value closed within the month ($K)
    Sales Cycle    — mean days-to-close of Won deals closed within the month
"""

from __future__ import annotations

import pandas as pd

from ..config import STATUS_LOST, STATUS_OPEN, STATUS_WON, TREND_MONTHS
from ..core.dates import in_month, month_bounds
from ..core.formatting import (
    format_days,
    format_millions,
    format_percent,
    format_signed,
    format_thousands,
    round_half_up,
    round_half_up_tenths,
)
from ..core.frames import clean_deals, cycle_days, mean, total, win_rate, with_status


# ----------------------------------------------------------------------
# Headline figures
# ----------------------------------------------------------------------

def pipeline_value(deals: pd.DataFrame) -> float:
    """Sum of Open deal values."""
    return total(with_status(deals, STATUS_OPEN), "value")


def overall_win_rate(deals: pd.DataFrame) -> int:
    won = len(with_status(deals, STATUS_WON))
    lost = len(with_status(deals, STATUS_LOST))
    return win_rate(won, lost)


def average_deal_size(deals: pd.DataFrame) -> float:
    return mean(with_status(deals, STATUS_WON), "value")


def average_sales_cycle(deals: pd.DataFrame) -> float:
    """Mean whole-day cycle of Won deals with a closedAt; 0 with none."""
    days = cycle_days(with_status(deals, STATUS_WON))
    return float(days.mean()) if len(days) > 0 else 0.0


# ----------------------------------------------------------------------
# Monthly series
# ----------------------------------------------------------------------

def _closed_in(deals: pd.DataFrame, month: str) -> pd.DataFrame:
    return deals[in_month(deals["closedAt"], month)]


def _open_at_month_end(deals: pd.DataFrame, month: str) -> float:
    _, end = month_bounds(month)
    created = deals["createdAt"] <= end
    still_open = deals["closedAt"].isna() | (deals["closedAt"] > end)
    return total(deals[created & still_open], "value")


def monthly_series(deals: pd.DataFrame) -> dict[str, list[float]]:
    """Raw (unrounded) per-month values for each driver over TREND_MONTHS."""
    series: dict[str, list[float]] = {
        "pipeline": [], "win_rate": [], "deal_size": [], "cycle": [],
    }

    for month in TREND_MONTHS:
        closed = _closed_in(deals, month)
        series["pipeline"].append(_open_at_month_end(deals, month))
        series["win_rate"].append(float(overall_win_rate(closed)))
        series["deal_size"].append(average_deal_size(closed))
        series["cycle"].append(average_sales_cycle(closed))

    return series


def _relative_change(values: list[float]) -> int:
    """Percent change of the last value vs. the previous one; 0 if previous is 0."""
    previous, latest = values[-2], values[-1]
    if previous == 0:
        return 0
    return round_half_up((latest - previous) / previous * 100)


def _absolute_change(values: list[float]) -> int:
    return round_half_up(values[-1] - values[-2])


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def calculate_drivers(deals: pd.DataFrame) -> list[dict]:
    """
    Compute the four pipeline drivers.

    Returns:
        [
          {"name": "Pipeline Value", "value": "$4.8M", "change": "+12%",
           "trend": [3.2, 3.5, 3.8, 4.0, 4.2, 4.8]},
          {"name": "Win Rate",       "value": "18%",   "change": "-4%",  "trend": [...]},
          {"name": "Avg Deal Size",  "value": "$21.3K","change": "+3%",  "trend": [...]},
          {"name": "Sales Cycle",    "value": "45 Days","change": "+9 Days", "trend": [...]},
        ]
    """
    deals = clean_deals(deals)
    series = monthly_series(deals)

    return [
        {
            "name": "Pipeline Value",
            "value": format_millions(pipeline_value(deals)),
            "change": format_signed(_relative_change(series["pipeline"])),
            "trend": [round_half_up_tenths(v / 1_000_000) for v in series["pipeline"]],
        },
        {
            "name": "Win Rate",
            "value": format_percent(overall_win_rate(deals)),
            "change": format_signed(_absolute_change(series["win_rate"])),
            "trend": [int(v) for v in series["win_rate"]],
        },
        {
            "name": "Avg Deal Size",
            "value": format_thousands(average_deal_size(deals)),
            "change": format_signed(_relative_change(series["deal_size"])),
            "trend": [round_half_up_tenths(v / 1_000) for v in series["deal_size"]],
        },
        {
            "name": "Sales Cycle",
            "value": format_days(round_half_up(average_sales_cycle(deals))),
            "change": format_signed(_absolute_change(series["cycle"]), " Days"),
            "trend": [round_half_up(v) for v in series["cycle"]],
        },
    ]
