"""
Closed-Form (Binet) Fibonacci

F(n) = (φ^n - ψ^n) / √5 evaluated in IEEE 754 double precision. Exact only
while F(n) fits in the ~15-17 significant digits of a double.
"""
import math
from typing import Tuple

from fibbench.exceptions import InvalidIndexError

from .iterative import fib_iterative

SQRT_5 = math.sqrt(5.0)
PHI = (1.0 + SQRT_5) / 2.0
PSI = (1.0 - SQRT_5) / 2.0

# Largest n for which φ^n is still a finite double
MAX_FLOAT_N = 1474


def fib_binet(n: int) -> float:
    """Binet approximation of F(n). Returns inf once φ^n overflows."""
    if n < 0:
        raise InvalidIndexError(n)
    if n > MAX_FLOAT_N:
        return math.inf
    return (PHI ** n - PSI ** n) / SQRT_5


def fib_binet_rounded(n: int) -> int:
    """Binet approximation rounded to the nearest integer."""
    value = fib_binet(n)
    if math.isinf(value):
        raise OverflowError(f"Binet formula overflows a double for n={n}")
    return int(round(value))


def binet_error_analysis(n: int) -> Tuple[float, float]:
    """
    Error of the rounded Binet value against the exact F(n).

    Returns:
        (absolute error, relative error). Relative error is 0.0 for F(0).
    """
    exact = fib_iterative(n)
    if n > MAX_FLOAT_N:
        return math.inf, math.inf

    abs_error = float(abs(fib_binet_rounded(n) - exact))
    rel_error = abs_error / exact if exact else 0.0
    return abs_error, rel_error


def find_binet_accuracy_limit(search_up_to: int = 200) -> int:
    """Largest n such that the rounded Binet value is exact for every k <= n."""
    a, b = 0, 1
    for n in range(search_up_to + 1):
        if fib_binet_rounded(n) != a:
            return n - 1
        a, b = b, a + b
    return search_up_to


def fibonacci_ratio(n: int) -> float:
    """F(n+1) / F(n), which converges to φ. Requires n >= 1."""
    if n < 0:
        raise InvalidIndexError(n)
    if n == 0:
        raise ValueError("ratio is undefined for n=0 since F(0) is zero")
    previous, current = fib_iterative(n - 1), fib_iterative(n)
    return (previous + current) / current
