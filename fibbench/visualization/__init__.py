"""
Visualization Package

Chart.js and Matplotlib charts, the tabbed HTML dashboard and the report
viewer service.
"""
from .charts import ChartGenerator
from .dashboard import DashboardGenerator, NavLink
from .models import DEFAULT_THEME, ChartOutput, ColorTheme, PanelData, ReportViewState
from .service import (
    PLACEHOLDER_MESSAGE,
    ReportViewerService,
    render_demo_html,
    write_demo_html,
)
from .static_charts import StaticChartGenerator

__all__ = [
    "DEFAULT_THEME",
    "PLACEHOLDER_MESSAGE",
    "ChartGenerator",
    "ChartOutput",
    "ColorTheme",
    "DashboardGenerator",
    "NavLink",
    "PanelData",
    "ReportViewState",
    "ReportViewerService",
    "StaticChartGenerator",
    "render_demo_html",
    "write_demo_html",
]
