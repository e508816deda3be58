import pandas as pd

from conftest import make_deal
from sales_engine.metrics.trend import calculate_revenue_trend
from sales_engine.records import RecordStore


def test_six_points_in_chronological_order(sample_store):
    trend = calculate_revenue_trend(sample_store.get_deals(), sample_store.get_targets())

    assert trend == [
        {"month": "Oct", "revenue": 0, "target": 0},
        {"month": "Nov", "revenue": 0, "target": 0},
        {"month": "Dec", "revenue": 0, "target": 0},
        {"month": "Jan", "revenue": 0, "target": 500},
        {"month": "Feb", "revenue": 1000, "target": 500},
        {"month": "Mar", "revenue": 0, "target": 500},
    ]


def test_revenue_counts_only_won_deals_per_month():
    store = RecordStore.from_records(
        deals=[
            make_deal("d1", 100, "Won", "2025-09-01", "2025-10-01"),
            make_deal("d2", 250, "Won", "2025-09-01", "2025-10-31"),
            make_deal("d3", 999, "Lost", "2025-09-01", "2025-10-15"),
            make_deal("d4", 40, "Won", "2025-12-01", "2026-03-31"),
            make_deal("d5", 5000, "Won", "2026-03-01", "2026-04-01"),
        ],
        targets=[{"month": "2025-10", "target": 300}],
    )

    trend = calculate_revenue_trend(store.get_deals(), store.get_targets())

    assert [p["revenue"] for p in trend] == [350, 0, 0, 0, 0, 40]
    assert [p["target"] for p in trend] == [300, 0, 0, 0, 0, 0]


def test_empty_data_still_returns_six_points():
    trend = calculate_revenue_trend(pd.DataFrame(), pd.DataFrame())

    assert [p["month"] for p in trend] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
    assert all(p["revenue"] == 0 and p["target"] == 0 for p in trend)
