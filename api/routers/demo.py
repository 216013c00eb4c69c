"""
Interactive demo endpoints: calculate and benchmark a list of indices.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
import logging

from api.dependencies import get_demo_service
from api.models import MAX_BATCH_SIZE, MAX_INDEX, DemoRequest, DemoResponse
from fibbench.benchmark import BenchmarkRunner
from fibbench.demo import DemoService, parse_indices
from fibbench.exceptions import InvalidInputError
from fibbench.visualization import render_demo_html

router = APIRouter(prefix="/api/v1/demo", tags=["demo"])
logger = logging.getLogger(__name__)


def _check_limits(text: str) -> None:
    indices = parse_indices(text)
    if len(indices) > MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=400, detail=f"{len(indices)} indices exceed the batch limit of {MAX_BATCH_SIZE}"
        )
    too_large = [n for n in indices if n > MAX_INDEX]
    if too_large:
        raise HTTPException(status_code=400, detail=f"Index {too_large[0]} exceeds the limit of {MAX_INDEX}")


@router.post("/calculate", response_model=DemoResponse)
async def demo_calculate(
    request: DemoRequest,
    include_html: bool = Query(False, description="Also return the rendered results page"),
    service: DemoService = Depends(get_demo_service),
):
    """Parse the input and compute every index."""
    _check_limits(request.input)
    try:
        state = await run_in_threadpool(service.calculate, request.input)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    html = render_demo_html(state) if include_html else None
    return DemoResponse(state=state.to_dict(), html=html)


@router.post("/benchmark", response_model=DemoResponse)
async def demo_benchmark(
    request: DemoRequest,
    include_html: bool = Query(False, description="Also return the rendered benchmark page"),
    service: DemoService = Depends(get_demo_service),
):
    """Time the SIMD and scalar batch paths over the parsed indices."""
    _check_limits(request.input)
    if request.iterations:
        service = DemoService(runner=BenchmarkRunner(iterations=request.iterations))
    try:
        # Blocking timing loop runs in a worker thread
        state = await run_in_threadpool(service.benchmark, request.input)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    html = render_demo_html(state) if include_html else None
    return DemoResponse(state=state.to_dict(), html=html)
