"""
Interactive Demo Package
"""
from .input_parser import parse_indices
from .models import DemoViewState, ResultRow
from .service import DemoService

__all__ = [
    "DemoService",
    "DemoViewState",
    "ResultRow",
    "parse_indices",
]
