"""
Sales Analyzer — The single entry point for dashboard metrics.

Wraps one RecordStore and exposes each metric view, plus a consolidated
"Sales Snapshot" dictionary that any downstream consumer (API, CLI) can
use directly. Every call re-derives its result from the store.
"""

from __future__ import annotations

from datetime import date

from .core.dates import to_timestamp
from .metrics.drivers import calculate_drivers
from .metrics.recommendations import build_recommendations
from .metrics.reps import calculate_rep_performance
from .metrics.risks import calculate_risk_factors
from .metrics.summary import calculate_summary
from .metrics.trend import calculate_revenue_trend
from .records import RecordStore


class SalesAnalyzer:
    """
    Computes dashboard views over an injected RecordStore.

    Usage:
        analyzer = SalesAnalyzer(RecordStore.from_directory("data/"))
        summary = analyzer.summary()
        snapshot = analyzer.analyze()
    """

    def __init__(self, store: RecordStore):
        self._store = store

    @property
    def store(self) -> RecordStore:
        return self._store

    def summary(self) -> dict:
        return calculate_summary(self._store.get_deals(), self._store.get_targets())

    def drivers(self) -> list[dict]:
        return calculate_drivers(self._store.get_deals())

    def risk_factors(self, today: date | None = None) -> list[dict]:
        return calculate_risk_factors(
            self._store.get_accounts(),
            self._store.get_reps(),
            self._store.get_deals(),
            self._store.get_activities(),
            today,
        )

    def recommendations(self, today: date | None = None) -> list[dict]:
        return build_recommendations(self.risk_factors(today))

    def revenue_trend(self) -> list[dict]:
        return calculate_revenue_trend(self._store.get_deals(), self._store.get_targets())

    def rep_performance(self) -> list[dict]:
        return calculate_rep_performance(self._store.get_reps(), self._store.get_deals())

    def analyze(self, today: date | None = None) -> dict:
        """
        Run every view and return a Sales Snapshot.

        Returns:
            {
              "meta":            {"as_of": "2026-02-20", "records": {"deals": 40, ...}},
              "summary":         { ... },
              "drivers":         [ ... ],
              "riskFactors":     [ ... ],
              "recommendations": [ ... ],
              "revenueTrend":    [ ... ],
              "repPerformance":  [ ... ],
            }
        """
        risks = self.risk_factors(today)

        return {
            "meta": {
                "as_of": to_timestamp(today).strftime("%Y-%m-%d"),
                "records": self._store.counts(),
            },
            "summary": self.summary(),
            "drivers": self.drivers(),
            "riskFactors": risks,
            "recommendations": build_recommendations(risks),
            "revenueTrend": self.revenue_trend(),
            "repPerformance": self.rep_performance(),
        }
