"""
Fibonacci Benchmark API

FastAPI application exposing Fibonacci computation, the interactive demo
and the benchmark report.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from fibbench import __version__
from api.routers import demo, fibonacci, health, report

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Fibonacci Benchmark API",
    description="API for computing Fibonacci numbers, timing batch variants and viewing benchmark reports",
    version=__version__
)

# Configure CORS to allow frontend access from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins
    allow_credentials=False,  # Must be False when allow_origins is "*"
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(fibonacci.router)
app.include_router(demo.router)
app.include_router(report.router)


if __name__ == "__main__":
    import uvicorn
    from api.dependencies import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())
