"""
Core Fibonacci algorithms.
"""
from .closed_form import (
    MAX_FLOAT_N,
    PHI,
    PSI,
    SQRT_5,
    binet_error_analysis,
    fib_binet,
    fib_binet_rounded,
    fibonacci_ratio,
    find_binet_accuracy_limit,
)
from .formatting import abbreviate, digit_count, format_decimal
from .iterative import fib_batch, fib_iterative, fib_sequence, fib_simd_batch
from .matrix import fib_doubling, fib_matrix, fib_matrix_modulo
from .methods import FibMethod
from .recursive import fib_recursive, fib_recursive_memo

__all__ = [
    "MAX_FLOAT_N",
    "PHI",
    "PSI",
    "SQRT_5",
    "FibMethod",
    "abbreviate",
    "binet_error_analysis",
    "digit_count",
    "fib_batch",
    "fib_binet",
    "fib_binet_rounded",
    "fib_doubling",
    "fib_iterative",
    "fib_matrix",
    "fib_matrix_modulo",
    "fib_recursive",
    "fib_recursive_memo",
    "fib_sequence",
    "fib_simd_batch",
    "fibonacci_ratio",
    "find_binet_accuracy_limit",
    "format_decimal",
]
