"""
Benchmark report endpoints: raw datasets and the rendered HTML report.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
import logging

from api.dependencies import get_report_service, get_settings
from api.models import DatasetsResponse
from fibbench.config import Settings
from fibbench.data import load_datasets
from fibbench.visualization import ReportViewerService, ReportViewState

router = APIRouter(tags=["report"])
logger = logging.getLogger(__name__)


@router.get("/api/v1/report/datasets", response_model=DatasetsResponse)
async def get_datasets(settings: Settings = Depends(get_settings)):
    """
    Load all three datasets concurrently. Missing files are reported per
    dataset with ``ok: false``; the request itself still succeeds.
    """
    results = await load_datasets(settings.data_path)
    return DatasetsResponse(
        data_dir=str(settings.data_path),
        datasets={name: result.to_dict() for name, result in results.items()},
    )


@router.get("/report", response_class=HTMLResponse)
async def get_report(
    tab: str = Query("complexity", description="Tab shown first: complexity, binet or golden"),
    service: ReportViewerService = Depends(get_report_service),
):
    """Rendered report page with one tab per dataset."""
    try:
        view_state = ReportViewState(active_tab=tab)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    panels = await service.collect_async()
    return HTMLResponse(content=service.render_html(panels, view_state))
