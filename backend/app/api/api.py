"""
Main API router that includes all endpoint routers
"""

from fastapi import APIRouter

from backend.app.api.endpoints import dashboard, health

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(dashboard.router, tags=["dashboard"])
