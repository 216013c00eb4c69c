"""
Interactive Demo Service

Backs the calculate / benchmark / clear actions of the demo. Every action
validates the input first; when no index survives parsing an
``InvalidInputError`` is raised and nothing is computed.
"""
import logging
from dataclasses import replace
from typing import List, Optional

from fibbench.benchmark import BenchmarkRunner
from fibbench.core import fib_batch
from fibbench.exceptions import InvalidInputError

from .input_parser import parse_indices
from .models import DemoViewState, ResultRow

logger = logging.getLogger(__name__)


class DemoService:
    """Stateless operations over ``DemoViewState`` values."""

    def __init__(self, runner: Optional[BenchmarkRunner] = None, iterations: int = 100):
        self.runner = runner or BenchmarkRunner(iterations=iterations)

    @staticmethod
    def require_indices(text: str) -> List[int]:
        """Parse ``text`` or raise ``InvalidInputError`` if it holds no index."""
        indices = parse_indices(text)
        if not indices:
            logger.info("Rejected demo input %r: no valid indices", text)
            raise InvalidInputError()
        return indices

    def calculate(self, text: str, state: Optional[DemoViewState] = None) -> DemoViewState:
        """Compute F(n) for every index in ``text`` and show the results table."""
        indices = self.require_indices(text)
        values = fib_batch(indices)
        rows = tuple(ResultRow(n=n, value=v) for n, v in zip(indices, values))
        return replace(state or DemoViewState(), results=rows)

    def benchmark(self, text: str, state: Optional[DemoViewState] = None) -> DemoViewState:
        """Time the SIMD and scalar batch paths and show the benchmark panel."""
        indices = self.require_indices(text)
        sample = self.runner.compare(indices)
        logger.info(
            "Demo benchmark over %d indices: SIMD %.3f ms, scalar %.3f ms",
            len(indices), sample.variant_a_ms, sample.variant_b_ms,
        )
        return replace(state or DemoViewState(), benchmark=sample)

    @staticmethod
    def clear() -> DemoViewState:
        """Hide both panels."""
        return DemoViewState()
