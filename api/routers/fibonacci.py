"""
Fibonacci computation endpoints.
"""

from fastapi import APIRouter, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from typing import List
import logging
import time

from api.models import (
    MAX_INDEX,
    MAX_RECURSIVE_INDEX,
    BatchRequest,
    BatchResponse,
    FibonacciResponse,
    MethodInfo,
    SequenceResponse,
)
from fibbench.core import FibMethod, fib_sequence, format_decimal
from fibbench.exceptions import UnknownMethodError

router = APIRouter(prefix="/api/v1", tags=["fibonacci"])
logger = logging.getLogger(__name__)


def resolve_method(name: str) -> FibMethod:
    """Method name to ``FibMethod``; unknown names are a 400."""
    try:
        return FibMethod.from_name(name)
    except UnknownMethodError as e:
        raise HTTPException(status_code=400, detail=str(e))


def check_index(n: int, method: FibMethod) -> None:
    if n < 0:
        raise HTTPException(status_code=400, detail=f"Fibonacci index must be non-negative, got {n}")
    if n > MAX_INDEX:
        raise HTTPException(status_code=400, detail=f"Index {n} exceeds the limit of {MAX_INDEX}")
    if method is FibMethod.RECURSIVE and n > MAX_RECURSIVE_INDEX:
        raise HTTPException(
            status_code=400,
            detail=f"Recursive method is limited to n <= {MAX_RECURSIVE_INDEX}; use iterative or matrix",
        )


def _compute(method: FibMethod, n: int) -> FibonacciResponse:
    t0 = time.perf_counter()
    try:
        value = method.calculate(n)
    except OverflowError as e:
        raise HTTPException(status_code=400, detail=str(e))
    elapsed_ms = (time.perf_counter() - t0) * 1000
    digits = format_decimal(value)
    return FibonacciResponse(
        n=n,
        method=method.value,
        value=digits,
        digits=len(digits),
        exact=method.exact,
        elapsed_ms=elapsed_ms,
    )


@router.get("/methods", response_model=List[MethodInfo])
async def list_methods():
    """Available algorithms with their complexity."""
    return [
        MethodInfo(
            name=m.value,
            time_complexity=m.time_complexity,
            space_complexity=m.space_complexity,
            exact=m.exact,
        )
        for m in FibMethod
    ]


@router.get("/fibonacci/sequence", response_model=SequenceResponse)
async def get_sequence(
    count: int = Query(20, ge=0, le=1000, description="Number of values"),
    start: int = Query(0, ge=0, le=MAX_INDEX, description="First index"),
):
    """Consecutive values F(start) .. F(start + count - 1)."""
    values = await run_in_threadpool(fib_sequence, count, start)
    return SequenceResponse(start=start, count=count, values=[format_decimal(v) for v in values])


@router.post("/fibonacci/batch", response_model=BatchResponse)
async def calculate_batch(request: BatchRequest):
    """F(n) for every index in the request, order preserved."""
    method = resolve_method(request.method)
    for n in request.indices:
        check_index(n, method)

    def run() -> List[dict]:
        return [_compute(method, n).model_dump() for n in request.indices]

    logger.info(f"Batch of {len(request.indices)} indices with {method.value}")
    return BatchResponse(method=method.value, results=await run_in_threadpool(run))


@router.get("/fibonacci/{n}", response_model=FibonacciResponse)
async def calculate(n: int, method: str = Query("iterative", description="Algorithm name or alias")):
    """F(n) with the selected method."""
    fib_method = resolve_method(method)
    check_index(n, fib_method)
    return await run_in_threadpool(_compute, fib_method, n)
