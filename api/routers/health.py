"""
Health check endpoints.
"""

from fastapi import APIRouter
from typing import Dict, Any
from datetime import datetime, timezone

from api.models import HealthResponse
from fibbench import __version__

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def root():
    """Root endpoint - API information"""
    return {
        "name": "Fibonacci Benchmark API",
        "version": __version__,
        "status": "running",
        "endpoints": {
            "health": "/health",
            "fibonacci": "/api/v1/fibonacci/{n}",
            "batch": "/api/v1/fibonacci/batch",
            "sequence": "/api/v1/fibonacci/sequence",
            "methods": "/api/v1/methods",
            "demo_calculate": "/api/v1/demo/calculate",
            "demo_benchmark": "/api/v1/demo/benchmark",
            "report_datasets": "/api/v1/report/datasets",
            "report": "/report",
        }
    }


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.
    Verifies API is running.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        message="API is running."
    )
