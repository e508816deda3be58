import json

import pytest
from fastapi.testclient import TestClient

from backend.app.api.deps import get_analyzer
from backend.app.core.config import settings
from backend.app.main import app
from sales_engine.analyzer import SalesAnalyzer
from sales_engine.config import DATA_DIR
from sales_engine.records import RecordStoreError


class BrokenAnalyzer:
    def summary(self):
        raise ValueError("boom")

    def drivers(self):
        raise ZeroDivisionError("division by zero")


@pytest.fixture
def client(sample_store):
    app.dependency_overrides[get_analyzer] = lambda: SalesAnalyzer(sample_store)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_analyzer] = lambda: BrokenAnalyzer()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_summary(client):
    response = client.get("/api/summary")

    assert response.status_code == 200
    assert response.json() == {"qtdRevenue": 1000, "target": 1500, "gap": -500, "gapPercentage": -33}


def test_drivers(client):
    body = client.get("/api/drivers").json()

    assert [d["name"] for d in body] == ["Pipeline Value", "Win Rate", "Avg Deal Size", "Sales Cycle"]
    assert body[0]["value"] == "$2.5M"
    assert body[1]["value"] == "33%"
    assert body[2]["value"] == "$1.0K"
    assert body[3]["value"] == "41 Days"
    assert all(len(d["trend"]) == 6 for d in body)


def test_risk_factors_omit_missing_count(client):
    body = client.get("/api/risk-factors").json()

    for risk in body:
        assert set(risk) <= {"type", "description", "count"}
        if risk["type"] == "low_win_rate":
            assert "count" not in risk
        else:
            assert "count" in risk


def test_recommendations(client):
    body = client.get("/api/recommendations").json()
    risks = client.get("/api/risk-factors").json()

    assert len(body) == len(risks)
    assert all(r["priority"] in {"high", "medium", "low"} for r in body)


def test_revenue_trend(client):
    body = client.get("/api/revenue-trend").json()

    assert [p["month"] for p in body] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
    assert body[4] == {"month": "Feb", "revenue": 1000, "target": 500}


def test_rep_performance(client):
    body = client.get("/api/rep-performance").json()

    assert body == [
        {"repId": "r1", "name": "Ankit", "won": 0, "lost": 1, "winRate": 0},
        {"repId": "r2", "name": "Priya", "won": 1, "lost": 1, "winRate": 50},
    ]


def test_unknown_route_returns_404_body(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found", "path": "/api/does-not-exist"}


def test_engine_exception_returns_500(broken_client):
    response = broken_client.get("/api/summary")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to get summary", "details": "boom"}

    response = broken_client.get("/api/drivers")
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to get drivers"


def test_process_time_header(client):
    response = client.get("/api/health")

    assert "x-process-time" in response.headers


def test_root_lists_endpoints(client):
    body = client.get("/").json()

    assert body["endpoints"]["summary"] == "GET /api/summary"


def test_startup_loads_record_store(monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", DATA_DIR)

    with TestClient(app) as live:
        response = live.get("/api/summary")

    assert response.status_code == 200
    assert set(response.json()) == {"qtdRevenue", "target", "gap", "gapPercentage"}


def test_startup_fails_fast_on_bad_data(monkeypatch, tmp_path):
    (tmp_path / "accounts.json").write_text(json.dumps([]), encoding="utf-8")
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path))

    with pytest.raises(RecordStoreError):
        with TestClient(app):
            pass
