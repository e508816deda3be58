"""
Quarter Summary — QTD revenue against the quarter's targets.
"""

from __future__ import annotations

import pandas as pd

from ..config import QUARTER_END, QUARTER_MONTHS, QUARTER_START, STATUS_WON
from ..core.formatting import as_number, round_half_up
from ..core.frames import clean_deals, has_columns, total, with_status


def quarter_revenue(deals: pd.DataFrame) -> float:
    """Sum of Won deal values closed inside [QUARTER_START, QUARTER_END]."""
    won = with_status(clean_deals(deals), STATUS_WON)
    in_quarter = won["closedAt"].between(
        pd.Timestamp(QUARTER_START), pd.Timestamp(QUARTER_END)
    )
    return total(won[in_quarter], "value")


def quarter_target(targets: pd.DataFrame) -> float:
    """Sum of target rows whose month is one of QUARTER_MONTHS."""
    if not has_columns(targets, "month", "target"):
        return 0.0
    return total(targets[targets["month"].isin(QUARTER_MONTHS)], "target")


def calculate_summary(deals: pd.DataFrame, targets: pd.DataFrame) -> dict:
    """
    Compute the quarter-to-date summary.

    Returns:
        {
          "qtdRevenue":    1000,
          "target":        1500,
          "gap":           -500,
          "gapPercentage": -33,    # 0 when target is 0
        }
    """
    revenue = quarter_revenue(deals)
    target = quarter_target(targets)
    gap = revenue - target
    gap_pct = round_half_up(gap / target * 100) if target > 0 else 0

    return {
        "qtdRevenue": as_number(revenue),
        "target": as_number(target),
        "gap": as_number(gap),
        "gapPercentage": gap_pct,
    }
