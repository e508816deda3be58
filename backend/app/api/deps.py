"""
Shared endpoint dependencies
"""

from fastapi import Request

from sales_engine.analyzer import SalesAnalyzer


def get_analyzer(request: Request) -> SalesAnalyzer:
    """Process-wide analyzer created at startup (see main.lifespan)"""
    return request.app.state.analyzer
