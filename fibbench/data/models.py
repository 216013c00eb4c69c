"""
Dataset Models

Typed records for the three generated datasets and the result-or-failure
wrapper the report viewer consumes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .csv_parser import CsvRow, CsvTable


# =============================================================================
# Dataset catalogue
# =============================================================================

@dataclass(frozen=True)
class DatasetSpec:
    """One CSV dataset the report viewer knows how to render."""

    key: str
    filename: str
    title: str
    columns: List[str]


DATASETS: Dict[str, DatasetSpec] = {
    "complexity": DatasetSpec(
        key="complexity",
        filename="complexity_comparison.csv",
        title="Algorithm Complexity",
        columns=["n", "iterative_ns", "matrix_ns"],
    ),
    "binet": DatasetSpec(
        key="binet",
        filename="binet_accuracy.csv",
        title="Binet Accuracy",
        columns=["n", "exact", "binet", "abs_error", "rel_error"],
    ),
    "golden": DatasetSpec(
        key="golden",
        filename="golden_ratio_convergence.csv",
        title="Golden Ratio",
        columns=["n", "ratio", "error_from_phi"],
    ),
}


# =============================================================================
# Load results
# =============================================================================

@dataclass
class DatasetResult:
    """Outcome of loading one dataset: a table or an error message."""

    name: str
    table: Optional[CsvTable] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.table is not None and self.error is None

    @property
    def rows(self) -> List[CsvRow]:
        return self.table.rows if self.table is not None else []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ok": self.ok,
            "error": self.error,
            "headers": self.table.headers if self.table is not None else [],
            "rows": self.table.to_records() if self.table is not None else [],
        }


# =============================================================================
# Typed points (one per CSV line)
# =============================================================================

@dataclass
class ComplexityPoint:
    n: int
    iterative_ns: int
    matrix_ns: int

    def to_row(self) -> List[Any]:
        return [self.n, self.iterative_ns, self.matrix_ns]


@dataclass
class AccuracyPoint:
    n: int
    exact: int
    binet: float
    abs_error: float
    rel_error: float

    def to_row(self) -> List[Any]:
        return [self.n, self.exact, self.binet, self.abs_error, self.rel_error]


@dataclass
class GoldenRatioPoint:
    n: int
    ratio: float
    error_from_phi: float

    def to_row(self) -> List[Any]:
        return [self.n, self.ratio, self.error_from_phi]
