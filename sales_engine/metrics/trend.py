"""
Revenue Trend — Won revenue vs. target for each TREND_MONTHS month.
"""

from __future__ import annotations

import pandas as pd

from ..config import STATUS_WON, TREND_MONTHS
from ..core.dates import in_month, month_label
from ..core.formatting import as_number
from ..core.frames import clean_deals, has_columns, total, with_status


def calculate_revenue_trend(deals: pd.DataFrame, targets: pd.DataFrame) -> list[dict]:
    """
    Always six points, oldest first; a month with no target row gets target 0.

    Returns:
        [{"month": "Oct", "revenue": 120000, "target": 150000}, ...]
    """
    won = with_status(clean_deals(deals), STATUS_WON)

    target_by_month: dict[str, float] = {}
    if has_columns(targets, "month", "target"):
        target_by_month = dict(zip(
            targets["month"],
            pd.to_numeric(targets["target"], errors="coerce").fillna(0),
        ))

    points: list[dict] = []
    for month in TREND_MONTHS:
        revenue = total(won[in_month(won["closedAt"], month)], "value")
        points.append({
            "month": month_label(month),
            "revenue": as_number(revenue),
            "target": as_number(target_by_month.get(month, 0)),
        })

    return points
