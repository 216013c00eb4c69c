"""
Iterative Fibonacci

Exact big-integer computation by pairwise accumulation. Python integers are
unbounded, so results never overflow or lose precision.
"""
from typing import Iterable, List

from fibbench.exceptions import InvalidIndexError


def fib_iterative(n: int) -> int:
    """
    Return F(n) using the textbook iterative recurrence.

    Keeps the pair (a, b) = (F(0), F(1)) and advances it n - 1 times.
    O(n) big-integer additions.

    Raises:
        InvalidIndexError: if n is negative.
    """
    if n < 0:
        raise InvalidIndexError(n)
    if n == 0:
        return 0
    if n == 1:
        return 1

    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def fib_batch(indices: Iterable[int]) -> List[int]:
    """Compute F(n) for every index, independently and in input order."""
    return [fib_iterative(n) for n in indices]


def fib_simd_batch(indices: Iterable[int]) -> List[int]:
    """
    "SIMD" batch path used by the demo comparison.

    Python has no vector unit for arbitrary-precision integers, so this is
    the same routine as ``fib_batch``. Timing the two against each other
    measures run-to-run noise, not a different algorithm.
    """
    return fib_batch(indices)


def fib_sequence(count: int, start: int = 0) -> List[int]:
    """Return ``count`` consecutive values F(start) .. F(start + count - 1)."""
    if start < 0:
        raise InvalidIndexError(start)
    if count <= 0:
        return []

    a, b = fib_iterative(start), fib_iterative(start + 1)
    values = []
    for _ in range(count):
        values.append(a)
        a, b = b, a + b
    return values
