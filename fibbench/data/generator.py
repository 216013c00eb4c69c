"""
Dataset Generator

Produces the three CSV files the report viewer renders:

    complexity_comparison.csv      iterative vs matrix timing per n
    binet_accuracy.csv             Binet approximation error per n
    golden_ratio_convergence.csv   F(n+1)/F(n) and its distance from φ
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from fibbench.core import (
    PHI,
    binet_error_analysis,
    fib_binet,
    fib_iterative,
    fib_matrix,
    fibonacci_ratio,
)

from .models import DATASETS, AccuracyPoint, ComplexityPoint, GoldenRatioPoint

logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    """Index ranges and repetition counts for dataset generation."""

    complexity_start: int = 10
    complexity_stop: int = 1000
    complexity_step: int = 10
    complexity_iterations: int = 100
    accuracy_max_n: int = 100
    golden_max_n: int = 50


def _mean_call_ns(func: Callable[[int], int], n: int, iterations: int) -> int:
    start = time.perf_counter_ns()
    for _ in range(iterations):
        func(n)
    return (time.perf_counter_ns() - start) // iterations


def _format_cell(value) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


class DataGenerator:
    """Computes dataset points and writes them as CSV."""

    def __init__(self, config: GenerationConfig = None):
        self.config = config or GenerationConfig()
        self.logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Point generation
    # ------------------------------------------------------------------

    def complexity_points(self) -> List[ComplexityPoint]:
        """Mean nanoseconds per call for the iterative and matrix methods."""
        cfg = self.config
        points = []
        for n in range(cfg.complexity_start, cfg.complexity_stop + 1, cfg.complexity_step):
            points.append(ComplexityPoint(
                n=n,
                iterative_ns=_mean_call_ns(fib_iterative, n, cfg.complexity_iterations),
                matrix_ns=_mean_call_ns(fib_matrix, n, cfg.complexity_iterations),
            ))
        return points

    def accuracy_points(self) -> List[AccuracyPoint]:
        """Binet error against the exact value for n = 0 .. accuracy_max_n."""
        points = []
        for n in range(self.config.accuracy_max_n + 1):
            abs_error, rel_error = binet_error_analysis(n)
            points.append(AccuracyPoint(
                n=n,
                exact=fib_iterative(n),
                binet=fib_binet(n),
                abs_error=abs_error,
                rel_error=rel_error,
            ))
        return points

    def golden_ratio_points(self) -> List[GoldenRatioPoint]:
        """Consecutive-term ratios for n = 1 .. golden_max_n."""
        points = []
        for n in range(1, self.config.golden_max_n + 1):
            ratio = fibonacci_ratio(n)
            points.append(GoldenRatioPoint(n=n, ratio=ratio, error_from_phi=abs(ratio - PHI)))
        return points

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @staticmethod
    def to_csv(columns: Sequence[str], points: Sequence) -> str:
        lines = [",".join(columns)]
        for point in points:
            lines.append(",".join(_format_cell(v) for v in point.to_row()))
        return "\n".join(lines) + "\n"

    def write_all(self, output_dir: Path) -> Dict[str, Path]:
        """Generate every dataset into ``output_dir``; returns the written paths."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        producers = {
            "complexity": self.complexity_points,
            "binet": self.accuracy_points,
            "golden": self.golden_ratio_points,
        }

        written: Dict[str, Path] = {}
        for name, produce in producers.items():
            spec = DATASETS[name]
            t0 = time.time()
            points = produce()
            path = output_dir / spec.filename
            path.write_text(self.to_csv(spec.columns, points), encoding="utf-8")
            self.logger.info(
                "Wrote %s (%d rows) in %.0f ms", path, len(points), (time.time() - t0) * 1000
            )
            written[name] = path
        return written
