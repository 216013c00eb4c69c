"""
Matrix Fibonacci

O(log n) methods based on powers of Q = [[1, 1], [1, 0]], where
Q^n = [[F(n+1), F(n)], [F(n), F(n-1)]].
"""
from typing import Optional, Tuple

from fibbench.exceptions import InvalidIndexError

# 2x2 matrix as a flat row-major tuple (a, b, c, d)
Matrix2 = Tuple[int, int, int, int]

_IDENTITY: Matrix2 = (1, 0, 0, 1)
_Q: Matrix2 = (1, 1, 1, 0)


def _mat_mul(x: Matrix2, y: Matrix2, modulo: Optional[int] = None) -> Matrix2:
    a = x[0] * y[0] + x[1] * y[2]
    b = x[0] * y[1] + x[1] * y[3]
    c = x[2] * y[0] + x[3] * y[2]
    d = x[2] * y[1] + x[3] * y[3]
    if modulo is not None:
        return (a % modulo, b % modulo, c % modulo, d % modulo)
    return (a, b, c, d)


def _mat_pow(base: Matrix2, exponent: int, modulo: Optional[int] = None) -> Matrix2:
    result = _IDENTITY
    while exponent > 0:
        if exponent & 1:
            result = _mat_mul(result, base, modulo)
        base = _mat_mul(base, base, modulo)
        exponent >>= 1
    return result


def fib_matrix(n: int) -> int:
    """F(n) by binary exponentiation of Q."""
    if n < 0:
        raise InvalidIndexError(n)
    return _mat_pow(_Q, n)[1]


def fib_matrix_modulo(n: int, modulo: int) -> int:
    """F(n) mod ``modulo`` without materialising the full value."""
    if n < 0:
        raise InvalidIndexError(n)
    if modulo <= 0:
        raise ValueError(f"modulo must be positive, got {modulo}")
    return _mat_pow(_Q, n, modulo)[1] % modulo


def fib_doubling(n: int) -> int:
    """
    F(n) by fast doubling.

    Uses F(2k) = F(k) * (2F(k+1) - F(k)) and F(2k+1) = F(k)^2 + F(k+1)^2,
    walking the bits of n from the most significant one.
    """
    if n < 0:
        raise InvalidIndexError(n)

    a, b = 0, 1  # F(k), F(k+1) with k = 0
    for bit in bin(n)[2:]:
        c = a * (2 * b - a)
        d = a * a + b * b
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a
