"""
Health check endpoint
"""

from fastapi import APIRouter

from backend.app.schemas import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
def health():
    """Liveness check for the dashboard front end and monitoring"""
    return {"status": "ok"}
