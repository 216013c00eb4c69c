"""
Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Dict, Any, List, Optional

# Largest index the API computes in one request
MAX_INDEX = 100_000
# Naive recursion is exponential; beyond this it does not return in time
MAX_RECURSIVE_INDEX = 35
MAX_BATCH_SIZE = 1000


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str
    message: Optional[str] = None


class FibonacciResponse(BaseModel):
    n: int
    method: str
    value: str = Field(..., description="F(n) as a decimal string")
    digits: int
    exact: bool
    elapsed_ms: float


class BatchRequest(BaseModel):
    indices: List[int] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE,
                               description="Fibonacci indices, order preserved")
    method: str = Field(default="iterative", description="Algorithm name or alias")


class BatchResponse(BaseModel):
    method: str
    results: List[Dict[str, Any]]


class SequenceResponse(BaseModel):
    start: int
    count: int
    values: List[str]


class MethodInfo(BaseModel):
    name: str
    time_complexity: str
    space_complexity: str
    exact: bool


class DemoRequest(BaseModel):
    input: str = Field(..., description="Comma-separated indices, e.g. '10, 20, 30'")
    iterations: Optional[int] = Field(default=None, ge=1, le=10_000,
                                      description="Timing iterations (benchmark only)")


class DemoResponse(BaseModel):
    success: bool = True
    state: Dict[str, Any]
    html: Optional[str] = None


class DatasetsResponse(BaseModel):
    data_dir: str
    datasets: Dict[str, Dict[str, Any]]
