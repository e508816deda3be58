"""
Dashboard metric endpoints

Each endpoint runs one SalesAnalyzer view. Engine failures are logged and
answered with a 500 body of the form {"error": ..., "details": ...}.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import List
import logging

from backend.app.api.deps import get_analyzer
from backend.app.schemas import (
    Driver, Recommendation, RepPerformance, RevenueTrendPoint, RiskFactor, Summary
)
from sales_engine.analyzer import SalesAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()


def engine_error(view: str, path: str, exc: Exception) -> JSONResponse:
    logger.error(f"Error in {path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": f"Failed to get {view}", "details": str(exc)},
    )


@router.get("/summary", response_model=Summary)
def get_summary(analyzer: SalesAnalyzer = Depends(get_analyzer)):
    """Quarter-to-date revenue vs. target"""
    try:
        return analyzer.summary()
    except Exception as e:
        return engine_error("summary", "/api/summary", e)


@router.get("/drivers", response_model=List[Driver])
def get_drivers(analyzer: SalesAnalyzer = Depends(get_analyzer)):
    """Pipeline Value, Win Rate, Avg Deal Size, Sales Cycle"""
    try:
        return analyzer.drivers()
    except Exception as e:
        return engine_error("drivers", "/api/drivers", e)


@router.get(
    "/risk-factors",
    response_model=List[RiskFactor],
    response_model_exclude_none=True,
)
def get_risk_factors(analyzer: SalesAnalyzer = Depends(get_analyzer)):
    """Stale deals, low win rate reps, inactive accounts"""
    try:
        return analyzer.risk_factors()
    except Exception as e:
        return engine_error("risk factors", "/api/risk-factors", e)


@router.get("/recommendations", response_model=List[Recommendation])
def get_recommendations(analyzer: SalesAnalyzer = Depends(get_analyzer)):
    """One prioritized action per risk factor"""
    try:
        return analyzer.recommendations()
    except Exception as e:
        return engine_error("recommendations", "/api/recommendations", e)


@router.get("/revenue-trend", response_model=List[RevenueTrendPoint])
def get_revenue_trend(analyzer: SalesAnalyzer = Depends(get_analyzer)):
    """Six months of Won revenue vs. target"""
    try:
        return analyzer.revenue_trend()
    except Exception as e:
        return engine_error("revenue trend", "/api/revenue-trend", e)


@router.get("/rep-performance", response_model=List[RepPerformance])
def get_rep_performance(analyzer: SalesAnalyzer = Depends(get_analyzer)):
    """Win rate per rep"""
    try:
        return analyzer.rep_performance()
    except Exception as e:
        return engine_error("rep performance", "/api/rep-performance", e)
