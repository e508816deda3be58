import pandas as pd

from conftest import make_deal
from sales_engine.metrics.drivers import calculate_drivers
from sales_engine.records import RecordStore

DRIVER_NAMES = ["Pipeline Value", "Win Rate", "Avg Deal Size", "Sales Cycle"]


def drivers_for(deals):
    store = RecordStore.from_records(deals=deals)
    return {d["name"]: d for d in calculate_drivers(store.get_deals())}


def test_driver_order_and_shape(sample_store):
    drivers = calculate_drivers(sample_store.get_deals())

    assert [d["name"] for d in drivers] == DRIVER_NAMES
    for driver in drivers:
        assert len(driver["trend"]) == 6
        assert driver["change"][0] in "+-"


def test_headline_values():
    drivers = drivers_for([
        make_deal("d1", 20000, "Won", "2026-01-01", "2026-01-31"),
        make_deal("d2", 10000, "Won", "2026-02-01", "2026-02-11"),
        make_deal("d3", 5000, "Lost", "2026-01-10", "2026-02-15"),
        make_deal("d4", 1300000, "Open", "2026-03-01"),
    ])

    assert drivers["Pipeline Value"]["value"] == "$1.3M"
    assert drivers["Win Rate"]["value"] == "67%"
    assert drivers["Avg Deal Size"]["value"] == "$15.0K"
    assert drivers["Sales Cycle"]["value"] == "20 Days"


def test_trends_follow_monthly_history():
    drivers = drivers_for([
        make_deal("d1", 20000, "Won", "2026-01-01", "2026-01-31"),
        make_deal("d2", 10000, "Won", "2026-02-01", "2026-02-11"),
        make_deal("d3", 5000, "Lost", "2026-01-10", "2026-02-15"),
        make_deal("d4", 1300000, "Open", "2026-03-01"),
    ])

    assert drivers["Pipeline Value"]["trend"] == [0.0, 0.0, 0.0, 0.0, 0.0, 1.3]
    assert drivers["Pipeline Value"]["change"] == "+0%"

    assert drivers["Win Rate"]["trend"] == [0, 0, 0, 100, 50, 0]
    assert drivers["Win Rate"]["change"] == "-50%"

    assert drivers["Avg Deal Size"]["trend"] == [0.0, 0.0, 0.0, 20.0, 10.0, 0.0]
    assert drivers["Avg Deal Size"]["change"] == "-100%"

    assert drivers["Sales Cycle"]["trend"] == [0, 0, 0, 30, 10, 0]
    assert drivers["Sales Cycle"]["change"] == "-10 Days"


def test_positive_change_is_signed():
    drivers = drivers_for([
        make_deal("d1", 10000, "Won", "2026-01-20", "2026-02-10"),
        make_deal("d2", 15000, "Won", "2026-02-20", "2026-03-10"),
    ])

    assert drivers["Avg Deal Size"]["change"] == "+50%"
    # 21 days in February, 18 days in March
    assert drivers["Sales Cycle"]["change"] == "-3 Days"


def test_one_decimal_trends_round_halves_up():
    drivers = drivers_for([
        make_deal("d1", 250_000, "Open", "2025-09-01"),
        make_deal("d2", 2_250, "Won", "2026-03-01", "2026-03-05"),
    ])

    assert drivers["Pipeline Value"]["trend"] == [0.3, 0.3, 0.3, 0.3, 0.3, 0.3]
    assert drivers["Avg Deal Size"]["trend"] == [0.0, 0.0, 0.0, 0.0, 0.0, 2.3]


def test_no_open_deals_renders_zero_pipeline():
    drivers = drivers_for([make_deal("d1", 5000, "Won", "2026-01-01", "2026-01-15")])

    assert drivers["Pipeline Value"]["value"] == "$0.0M"


def test_no_closed_deals_gives_zeros():
    drivers = drivers_for([make_deal("d1", 5000, "Open", "2026-01-01")])

    assert drivers["Win Rate"]["value"] == "0%"
    assert drivers["Avg Deal Size"]["value"] == "$0.0K"
    assert drivers["Sales Cycle"]["value"] == "0 Days"


def test_win_rate_stays_in_range():
    all_won = drivers_for([make_deal(f"w{i}", 100, "Won", "2026-01-01", "2026-01-02") for i in range(3)])
    all_lost = drivers_for([make_deal(f"l{i}", 100, "Lost", "2026-01-01", "2026-01-02") for i in range(3)])

    assert all_won["Win Rate"]["value"] == "100%"
    assert all_lost["Win Rate"]["value"] == "0%"


def test_empty_frame_degrades_to_zero():
    drivers = calculate_drivers(pd.DataFrame())

    assert [d["value"] for d in drivers] == ["$0.0M", "0%", "$0.0K", "0 Days"]
    assert all(d["trend"] == [0, 0, 0, 0, 0, 0] for d in drivers)
    assert all(d["change"].startswith("+") for d in drivers)
