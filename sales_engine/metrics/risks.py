"""
Risk Factors — Threshold checks over deals, reps, and activity.

Checks run in a fixed order and the output keeps that order:
    1. stale_deals        — Enterprise deals open STALE_DEAL_DAYS or more
    2. low_win_rate       — one entry per rep below LOW_WIN_RATE_THRESHOLD
    3. inactive_accounts  — accounts with no activity in INACTIVITY_WINDOW_DAYS
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from ..config import (
    INACTIVITY_WINDOW_DAYS,
    LOW_WIN_RATE_THRESHOLD,
    STALE_DEAL_DAYS,
    STALE_DEAL_SEGMENT,
    STATUS_OPEN,
)
from ..core.dates import coerce_dates, to_timestamp
from ..core.frames import clean_deals, has_columns, with_status
from .reps import calculate_rep_performance


def find_stale_deals(
    deals: pd.DataFrame,
    accounts: pd.DataFrame,
    today: date | None = None,
) -> pd.DataFrame:
    """
    Open deals on STALE_DEAL_SEGMENT accounts at least STALE_DEAL_DAYS old.

    Deals whose account cannot be resolved are left out.
    """
    deals = with_status(clean_deals(deals), STATUS_OPEN)
    if deals.empty or not has_columns(accounts, "id", "segment"):
        return deals.iloc[0:0]

    segment_ids = accounts.loc[accounts["segment"] == STALE_DEAL_SEGMENT, "id"]
    in_segment = deals[deals["accountId"].isin(segment_ids)]

    # today is a live instant, so a deal created STALE_DEAL_DAYS ago is already past the limit
    age_days = (to_timestamp(today) - in_segment["createdAt"]).dt.days
    return in_segment[age_days >= STALE_DEAL_DAYS]


def find_low_win_rate_reps(reps: pd.DataFrame, deals: pd.DataFrame) -> list[dict]:
    """Rep performance rows whose win rate is below LOW_WIN_RATE_THRESHOLD."""
    return [
        perf for perf in calculate_rep_performance(reps, deals)
        if perf["winRate"] < LOW_WIN_RATE_THRESHOLD
    ]


def find_inactive_accounts(
    accounts: pd.DataFrame,
    activities: pd.DataFrame,
    today: date | None = None,
) -> pd.DataFrame:
    """Accounts with no activity dated after today - INACTIVITY_WINDOW_DAYS."""
    if not has_columns(accounts, "id"):
        return pd.DataFrame(columns=["id"])

    active_ids: set = set()
    if has_columns(activities, "accountId", "date"):
        cutoff = to_timestamp(today) - pd.Timedelta(days=INACTIVITY_WINDOW_DAYS)
        recent = activities[coerce_dates(activities["date"]) > cutoff]
        active_ids = set(recent["accountId"])

    return accounts[~accounts["id"].isin(active_ids)]


def calculate_risk_factors(
    accounts: pd.DataFrame,
    reps: pd.DataFrame,
    deals: pd.DataFrame,
    activities: pd.DataFrame,
    today: date | None = None,
) -> list[dict]:
    """
    Evaluate every risk check.

    Returns:
        [
          {"type": "stale_deals", "description": "3 Enterprise deals stuck over 30 days", "count": 3},
          {"type": "low_win_rate", "description": "Rep Ankit - Win Rate: 10%", "rep": "Ankit"},
          {"type": "inactive_accounts", "description": "4 Accounts with no recent activity", "count": 4},
        ]

        The "rep" key names the flagged rep for the recommendation step.
    """
    risks: list[dict] = []

    stale = find_stale_deals(deals, accounts, today)
    if len(stale) > 0:
        risks.append({
            "type": "stale_deals",
            "description": f"{len(stale)} {STALE_DEAL_SEGMENT} deals stuck over {STALE_DEAL_DAYS} days",
            "count": len(stale),
        })

    for perf in find_low_win_rate_reps(reps, deals):
        risks.append({
            "type": "low_win_rate",
            "description": f"Rep {perf['name']} - Win Rate: {perf['winRate']}%",
            "rep": perf["name"],
        })

    inactive = find_inactive_accounts(accounts, activities, today)
    if len(inactive) > 0:
        risks.append({
            "type": "inactive_accounts",
            "description": f"{len(inactive)} Accounts with no recent activity",
            "count": len(inactive),
        })

    return risks
