"""
FastAPI main application module for the Sales Analytics Dashboard
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from backend.app.core.config import settings
from backend.app.api.api import api_router
from sales_engine.analyzer import SalesAnalyzer
from sales_engine.records import RecordStore, RecordStoreError

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the record store once; a bad data directory aborts startup"""
    logger.info("Starting Sales Analytics Dashboard API...")

    try:
        store = RecordStore.from_directory(settings.DATA_DIR)
    except RecordStoreError as e:
        logger.error(f"Failed to load record store: {e}")
        raise

    app.state.analyzer = SalesAnalyzer(store)
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down Sales Analytics Dashboard API...")


# Create FastAPI application
app = FastAPI(
    title="Sales Analytics Dashboard API",
    description="QTD revenue, pipeline drivers, risk factors and revenue trend from static CRM records",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


# Include API routes
app.include_router(api_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "service": "Sales Analytics Dashboard API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "health": "GET /api/health",
            "summary": "GET /api/summary",
            "drivers": "GET /api/drivers",
            "risk_factors": "GET /api/risk-factors",
            "recommendations": "GET /api/recommendations",
            "revenue_trend": "GET /api/revenue-trend",
            "rep_performance": "GET /api/rep-performance",
        },
    }


# Unmatched routes
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={"error": "Endpoint not found", "path": request.url.path},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "details": "An unexpected error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "backend.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
