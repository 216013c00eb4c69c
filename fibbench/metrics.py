"""
Derived Display Metrics

Small pure functions that turn parsed dataset rows or timings into the
numbers shown next to the charts.
"""
import math
from typing import Iterable, Mapping, Optional, Sequence


def _parse_float(value: Optional[str]) -> float:
    """Float value of a CSV cell; NaN when absent or not numeric."""
    if value is None:
        return math.nan
    try:
        return float(value)
    except ValueError:
        return math.nan


def count_exact_values(rows: Iterable[Mapping[str, str]], column: str = "rel_error") -> int:
    """Number of rows whose ``column`` parses to exactly zero."""
    return sum(1 for row in rows if _parse_float(row.get(column)) == 0.0)


def largest_exact_index(rows: Iterable[Mapping[str, str]], column: str = "rel_error") -> Optional[int]:
    """Highest ``n`` among the rows with a zero ``column`` value."""
    exact = [
        int(row["n"])
        for row in rows
        if _parse_float(row.get(column)) == 0.0 and row.get("n", "").lstrip("-").isdigit()
    ]
    return max(exact) if exact else None


def convergence_error(rows: Sequence[Mapping[str, str]], column: str = "error_from_phi") -> Optional[str]:
    """
    Last row's ``column`` in scientific notation with four fractional digits,
    e.g. ``"1.2345e-20"``. None when there are no rows.
    """
    if not rows:
        return None
    return f"{_parse_float(rows[-1].get(column)):.4e}"


def speedup_ratio(baseline_ms: float, candidate_ms: float) -> float:
    """
    How many times faster ``candidate`` ran than ``baseline``.

    ``speedup_ratio(10, 5) == 2.0``; swapping the arguments inverts it.
    Returns 0.0 when the candidate duration is not positive.
    """
    if candidate_ms <= 0:
        return 0.0
    return baseline_ms / candidate_ms
