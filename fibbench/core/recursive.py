"""
Recursive Fibonacci

Kept for comparison only: the naive version is O(2^n).
"""
from typing import Dict

from fibbench.exceptions import InvalidIndexError


def fib_recursive(n: int) -> int:
    """Naive doubly-recursive F(n). Exponential time."""
    if n < 0:
        raise InvalidIndexError(n)
    if n < 2:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_recursive_memo(n: int) -> int:
    """
    Top-down recursion with a memo table local to this call.

    The table is filled bottom-up in chunks so deep indices do not hit the
    interpreter recursion limit.
    """
    if n < 0:
        raise InvalidIndexError(n)

    memo: Dict[int, int] = {0: 0, 1: 1}

    def _fib(k: int) -> int:
        if k not in memo:
            memo[k] = _fib(k - 1) + _fib(k - 2)
        return memo[k]

    # Warm the table so each _fib call recurses at most 256 frames
    for k in range(256, n, 256):
        _fib(k)
    return _fib(n)
