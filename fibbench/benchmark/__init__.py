"""
Benchmark Package

Timing harness, profiler and report generation for the Fibonacci methods.
"""

from .models import (
    AggregateResult,
    BenchmarkSample,
    BenchmarkScenario,
    BenchmarkSummary,
    MemoryPoint,
    ProfilePoint,
    ScalingRow,
)
from .reporting import ReportGenerator
from .runner import DEFAULT_ITERATIONS, BenchmarkRunner

__all__ = [
    "AggregateResult",
    "BenchmarkSample",
    "BenchmarkScenario",
    "BenchmarkSummary",
    "BenchmarkRunner",
    "DEFAULT_ITERATIONS",
    "MemoryPoint",
    "ProfilePoint",
    "ReportGenerator",
    "ScalingRow",
]
