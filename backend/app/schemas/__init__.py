"""
Pydantic schemas for API response validation
"""

from .dashboard import (
    Driver, HealthStatus, Recommendation, RepPerformance, RevenueTrendPoint,
    RiskFactor, Summary
)

__all__ = [
    "Summary", "Driver", "RiskFactor", "Recommendation",
    "RevenueTrendPoint", "RepPerformance", "HealthStatus",
]
