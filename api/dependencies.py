"""
FastAPI dependency injection for API routes.

Provides:
  - ``get_settings``: process-wide settings from ``FIBBENCH_CONFIG`` (YAML)
    or the environment
  - ``get_demo_service`` / ``get_report_service`` built from those settings
"""

import os
import logging
from functools import lru_cache

from fastapi import Depends

from fibbench.config import Settings, load_settings
from fibbench.demo import DemoService
from fibbench.visualization import ReportViewerService

logger = logging.getLogger(__name__)


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    config_path = os.environ.get("FIBBENCH_CONFIG")
    settings = load_settings(config_path)
    logger.info(f"Settings loaded (data_dir={settings.data_dir}, iterations={settings.benchmark_iterations})")
    return settings


def get_demo_service(settings: Settings = Depends(get_settings)) -> DemoService:
    return DemoService(iterations=settings.benchmark_iterations)


def get_report_service(settings: Settings = Depends(get_settings)) -> ReportViewerService:
    return ReportViewerService(settings.data_path)
