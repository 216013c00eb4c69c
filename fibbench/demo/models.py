"""
Demo View Models

Immutable values describing what the demo currently shows. Operations take
a state and return a new one instead of toggling shared display objects.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, Optional, Tuple

from fibbench.benchmark import BenchmarkSample
from fibbench.core import abbreviate, format_decimal

# Values longer than this many digits are abbreviated in the table
DISPLAY_MAX_DIGITS = 30
DISPLAY_KEEP_DIGITS = 15


@dataclass(frozen=True)
class ResultRow:
    """One line of the results table."""

    n: int
    value: int

    @cached_property
    def digits(self) -> str:
        """Full decimal representation of the value."""
        return format_decimal(self.value)

    @property
    def display(self) -> str:
        return abbreviate(self.digits, DISPLAY_MAX_DIGITS, DISPLAY_KEEP_DIGITS)

    @property
    def truncated(self) -> bool:
        return len(self.digits) > DISPLAY_MAX_DIGITS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n": self.n,
            "value": self.digits,
            "display": self.display,
            "digits": len(self.digits),
        }


@dataclass(frozen=True)
class DemoViewState:
    """Results table and benchmark panel of the demo."""

    results: Tuple[ResultRow, ...] = field(default_factory=tuple)
    benchmark: Optional[BenchmarkSample] = None

    @property
    def results_visible(self) -> bool:
        return bool(self.results)

    @property
    def benchmark_visible(self) -> bool:
        return self.benchmark is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results_visible": self.results_visible,
            "benchmark_visible": self.benchmark_visible,
            "results": [row.to_dict() for row in self.results],
            "benchmark": self.benchmark.to_dict() if self.benchmark else None,
        }
