"""
Fibonacci Benchmark HTTP API.
"""
