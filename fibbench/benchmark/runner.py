"""
Benchmark Runner

Times batch Fibonacci computation. The A/B comparison runs the same batch
through two variants ``iterations`` times each and reports the mean per
call: a straight mean with no warm-up and no outlier rejection. The
profiler times individual methods across a range of indices and records
the peak allocation of a single call.
"""
from __future__ import annotations

import logging
import statistics
import time
import tracemalloc
from collections import defaultdict
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from fibbench.core import FibMethod, fib_batch, fib_iterative, fib_matrix, fib_simd_batch

from .models import (
    AggregateResult,
    BenchmarkSample,
    BenchmarkScenario,
    BenchmarkSummary,
    MemoryPoint,
    ProfilePoint,
    ScalingRow,
)

BatchFunc = Callable[[Sequence[int]], List[int]]

DEFAULT_ITERATIONS = 100


class BenchmarkRunner:
    """
    Executes timing comparisons and profiles.

    Variant A defaults to the "SIMD" batch path and variant B to the scalar
    one. Both are the same routine, so the ratio reflects timer noise.
    Samples collected through ``run_scenario`` are kept on the runner; call
    ``aggregate_results()`` to build a ``BenchmarkSummary``.
    """

    def __init__(
        self,
        iterations: int = DEFAULT_ITERATIONS,
        variant_a: BatchFunc = fib_simd_batch,
        variant_b: BatchFunc = fib_batch,
        timer: Callable[[], float] = time.perf_counter,
    ):
        if iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {iterations}")
        self.iterations = iterations
        self.variant_a = variant_a
        self.variant_b = variant_b
        self.timer = timer
        self.logger = logging.getLogger(__name__)

        self.samples: Dict[str, List[BenchmarkSample]] = defaultdict(list)
        self.profile_points: List[ProfilePoint] = []
        self.memory_points: List[MemoryPoint] = []
        self.scaling_rows: List[ScalingRow] = []

    # ------------------------------------------------------------------
    # A/B timing
    # ------------------------------------------------------------------

    def time_batch(self, func: BatchFunc, indices: Sequence[int], iterations: int) -> float:
        """Mean milliseconds per call of ``func(indices)`` over ``iterations`` calls."""
        t0 = self.timer()
        for _ in range(iterations):
            func(indices)
        return (self.timer() - t0) * 1000 / iterations

    def compare(self, indices: Sequence[int], iterations: Optional[int] = None) -> BenchmarkSample:
        """Time variant A then variant B over the same batch."""
        iterations = iterations or self.iterations
        indices = list(indices)

        a_ms = self.time_batch(self.variant_a, indices, iterations)
        b_ms = self.time_batch(self.variant_b, indices, iterations)

        sample = BenchmarkSample(
            variant_a_ms=a_ms,
            variant_b_ms=b_ms,
            indices=indices,
            iterations=iterations,
            timestamp=datetime.now().isoformat(),
        )
        self.logger.debug(
            "Compared %d indices x %d iterations: A=%.4f ms, B=%.4f ms (%.2fx)",
            len(indices), iterations, a_ms, b_ms, sample.speedup_ratio,
        )
        return sample

    def run_scenario(self, scenario: BenchmarkScenario) -> List[BenchmarkSample]:
        """Run ``scenario.runs`` comparisons and record them under the scenario name."""
        scenario_samples = []
        for i in range(scenario.runs):
            sample = self.compare(scenario.indices, scenario.iterations)
            self.logger.info(
                "%s run %d/%d: speedup %.2fx", scenario.name, i + 1, scenario.runs, sample.speedup_ratio
            )
            scenario_samples.append(sample)
        self.samples[scenario.name].extend(scenario_samples)
        return scenario_samples

    # ------------------------------------------------------------------
    # Profiling
    # ------------------------------------------------------------------

    def profile_method(
        self, method: FibMethod, ns: Iterable[int], iterations: Optional[int] = None
    ) -> List[ProfilePoint]:
        """Mean nanoseconds per call of ``method`` at each index."""
        iterations = iterations or self.iterations
        points = []
        for n in ns:
            t0 = time.perf_counter_ns()
            for _ in range(iterations):
                method.calculate(n)
            mean_ns = (time.perf_counter_ns() - t0) / iterations
            points.append(ProfilePoint(method=method.value, n=n, iterations=iterations, mean_ns=mean_ns))
        self.profile_points.extend(points)
        return points

    def scaling(self, ns: Iterable[int], iterations: Optional[int] = None) -> List[ScalingRow]:
        """Iterative vs matrix mean time at each index."""
        iterations = iterations or self.iterations
        rows = []
        for n in ns:
            iter_ns = self._mean_ns(fib_iterative, n, iterations)
            matrix_ns = self._mean_ns(fib_matrix, n, iterations)
            rows.append(ScalingRow(n=n, iterative_ns=iter_ns, matrix_ns=matrix_ns))
        self.scaling_rows.extend(rows)
        return rows

    def profile_memory(self, method: FibMethod, ns: Iterable[int]) -> List[MemoryPoint]:
        """
        Peak bytes allocated by a single ``method.calculate(n)`` call.

        Measured with tracemalloc, so only Python-level allocations count.
        The returned value itself is included in the peak.
        """
        points = []
        for n in ns:
            already_tracing = tracemalloc.is_tracing()
            if not already_tracing:
                tracemalloc.start()
            try:
                tracemalloc.reset_peak()
                baseline, _ = tracemalloc.get_traced_memory()
                method.calculate(n)
                _, peak = tracemalloc.get_traced_memory()
            finally:
                if not already_tracing:
                    tracemalloc.stop()
            points.append(MemoryPoint(method=method.value, n=n, peak_bytes=max(peak - baseline, 0)))
        self.memory_points.extend(points)
        self.logger.debug("Memory profile for %s at %d indices", method.value, len(points))
        return points

    @staticmethod
    def _mean_ns(func: Callable[[int], int], n: int, iterations: int) -> float:
        t0 = time.perf_counter_ns()
        for _ in range(iterations):
            func(n)
        return (time.perf_counter_ns() - t0) / iterations

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def aggregate_results(self, duration: float) -> BenchmarkSummary:
        """Build a BenchmarkSummary from everything collected so far."""
        summary = BenchmarkSummary(
            timestamp=datetime.now().isoformat(),
            duration=duration,
            samples=dict(self.samples),
            profile=list(self.profile_points),
            memory=list(self.memory_points),
            scaling=list(self.scaling_rows),
        )
        for name, samples in self.samples.items():
            if samples:
                summary.aggregates.append(self._aggregate_group(name, samples))
        return summary

    @staticmethod
    def _aggregate_group(name: str, samples: List[BenchmarkSample]) -> AggregateResult:
        """Compute mean/std for the samples of one scenario."""
        agg = AggregateResult(scenario=name, num_runs=len(samples))

        def _stdev(values: List[float]) -> float:
            return statistics.stdev(values) if len(values) >= 2 else 0.0

        a_times = [s.variant_a_ms for s in samples]
        b_times = [s.variant_b_ms for s in samples]
        speedups = [s.speedup_ratio for s in samples]

        agg.avg_variant_a_ms = statistics.mean(a_times)
        agg.avg_variant_b_ms = statistics.mean(b_times)
        agg.std_variant_a_ms = _stdev(a_times)
        agg.std_variant_b_ms = _stdev(b_times)
        agg.avg_speedup = statistics.mean(speedups)
        agg.min_speedup = min(speedups)
        agg.max_speedup = max(speedups)
        return agg
