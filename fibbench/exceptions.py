"""
Exceptions raised at the package seams.

All of them are ``ValueError`` subclasses so callers that only care about
"bad input" can keep catching ``ValueError``.
"""


class InvalidIndexError(ValueError):
    """A Fibonacci index was negative."""

    def __init__(self, n: int):
        super().__init__(f"Fibonacci index must be non-negative, got {n}")
        self.n = n


class UnknownMethodError(ValueError):
    """An algorithm name did not match any known method."""

    def __init__(self, name: str):
        super().__init__(f"Unknown method: {name}")
        self.name = name


class InvalidInputError(ValueError):
    """User input contained no usable Fibonacci indices."""

    def __init__(self, message: str = "Please enter valid Fibonacci indices"):
        super().__init__(message)
