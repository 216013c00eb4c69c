"""
fibbench

Fibonacci benchmark suite: exact big-integer algorithms, dataset generation,
report viewer and interactive demo.
"""

__version__ = "0.1.0"
