"""
Rep Performance — Won / Lost counts and win rate per sales rep.
"""

from __future__ import annotations

import pandas as pd

from ..config import STATUS_LOST, STATUS_WON
from ..core.frames import clean_deals, has_columns, win_rate


def calculate_rep_performance(reps: pd.DataFrame, deals: pd.DataFrame) -> list[dict]:
    """
    Win rate for every rep, in rep-collection order.

    Reps with no closed deals get a win rate of 0.

    Returns:
        [{"repId": "r1", "name": "Ankit", "won": 1, "lost": 9, "winRate": 10}, ...]
    """
    if not has_columns(reps, "id", "name"):
        return []

    deals = clean_deals(deals)
    counts = (
        deals[deals["status"].isin([STATUS_WON, STATUS_LOST])]
        .groupby(["repId", "status"])
        .size()
        .to_dict()
    )

    rows: list[dict] = []
    for rep in reps.itertuples(index=False):
        won = int(counts.get((rep.id, STATUS_WON), 0))
        lost = int(counts.get((rep.id, STATUS_LOST), 0))
        rows.append({
            "repId": rep.id,
            "name": rep.name,
            "won": won,
            "lost": lost,
            "winRate": win_rate(won, lost),
        })

    return rows
