from datetime import date, timedelta

import pytest

from sales_engine.records import RecordStore

TODAY = date(2026, 3, 31)


def days_ago(n):
    return (TODAY - timedelta(days=n)).isoformat()


def make_deal(deal_id, value, status, created_at, closed_at=None, account_id="a1", rep_id="r1"):
    return {
        "id": deal_id,
        "accountId": account_id,
        "repId": rep_id,
        "value": value,
        "status": status,
        "stage": "Closed" if status != "Open" else "Proposal",
        "createdAt": created_at,
        "closedAt": closed_at,
    }


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def accounts():
    return [
        {"id": "a1", "name": "Northwind", "segment": "Enterprise", "status": "Active", "createdAt": "2024-01-10"},
        {"id": "a2", "name": "Wingtip", "segment": "SMB", "status": "Active", "createdAt": "2024-05-02"},
    ]


@pytest.fixture
def reps():
    return [
        {"id": "r1", "name": "Ankit", "email": "ankit@test.com", "team": "Mid-Market", "hireDate": "2024-08-05"},
        {"id": "r2", "name": "Priya", "email": "priya@test.com", "team": "Enterprise", "hireDate": "2021-05-10"},
    ]


@pytest.fixture
def targets():
    return [
        {"month": "2026-01", "target": 500},
        {"month": "2026-02", "target": 500},
        {"month": "2026-03", "target": 500},
    ]


@pytest.fixture
def sample_store(accounts, reps, targets):
    """Small but complete store: every view has something to report."""
    deals = [
        make_deal("d1", 1000, "Won", "2026-01-05", "2026-02-15", rep_id="r2"),
        make_deal("d2", 400, "Lost", "2026-01-10", "2026-02-20", rep_id="r2"),
        make_deal("d3", 300, "Lost", "2025-11-01", "2025-12-01", rep_id="r1"),
        make_deal("d4", 2500000, "Open", days_ago(40), account_id="a1"),
        make_deal("d5", 700, "Open", days_ago(40), account_id="a2"),
    ]
    activities = [
        {"id": "act1", "accountId": "a1", "repId": "r1", "type": "Call", "date": days_ago(3), "notes": ""},
        {"id": "act2", "accountId": "a2", "repId": "r2", "type": "Email", "date": days_ago(45), "notes": ""},
    ]
    return RecordStore.from_records(
        accounts=accounts, reps=reps, deals=deals, activities=activities, targets=targets,
    )
