"""
Algorithm Catalogue

Maps method names to implementations together with their complexity
characteristics, so CLIs and the API can select an algorithm by name.
"""
from enum import Enum
from typing import Callable, Dict, Tuple

from fibbench.exceptions import UnknownMethodError

from .closed_form import fib_binet_rounded
from .iterative import fib_iterative
from .matrix import fib_doubling, fib_matrix
from .recursive import fib_recursive, fib_recursive_memo


class FibMethod(Enum):
    """Available Fibonacci algorithms."""

    RECURSIVE = "recursive"
    RECURSIVE_MEMO = "recursive_memo"
    ITERATIVE = "iterative"
    MATRIX = "matrix"
    DOUBLING = "doubling"
    BINET = "binet"

    @classmethod
    def from_name(cls, name: str) -> "FibMethod":
        """Parse a method name or alias (case-insensitive)."""
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        for method in cls:
            if method.value == key:
                return method
        raise UnknownMethodError(name)

    def calculate(self, n: int) -> int:
        """Compute F(n) with this method."""
        return _IMPLEMENTATIONS[self](n)

    @property
    def time_complexity(self) -> str:
        return _COMPLEXITY[self][0]

    @property
    def space_complexity(self) -> str:
        return _COMPLEXITY[self][1]

    @property
    def exact(self) -> bool:
        """False for methods that approximate F(n) in floating point."""
        return self is not FibMethod.BINET


_ALIASES: Dict[str, str] = {
    "memo": "recursive_memo",
    "branchless": "iterative",
    "iterative_branchless": "iterative",
    "fast_doubling": "doubling",
    "matrix_doubling": "doubling",
}

_IMPLEMENTATIONS: Dict[FibMethod, Callable[[int], int]] = {
    FibMethod.RECURSIVE: fib_recursive,
    FibMethod.RECURSIVE_MEMO: fib_recursive_memo,
    FibMethod.ITERATIVE: fib_iterative,
    FibMethod.MATRIX: fib_matrix,
    FibMethod.DOUBLING: fib_doubling,
    FibMethod.BINET: fib_binet_rounded,
}

# (time, space)
_COMPLEXITY: Dict[FibMethod, Tuple[str, str]] = {
    FibMethod.RECURSIVE: ("O(2^n)", "O(n)"),
    FibMethod.RECURSIVE_MEMO: ("O(n)", "O(n)"),
    FibMethod.ITERATIVE: ("O(n)", "O(1)"),
    FibMethod.MATRIX: ("O(log n)", "O(1)"),
    FibMethod.DOUBLING: ("O(log n)", "O(1)"),
    FibMethod.BINET: ("O(1)", "O(1)"),
}
