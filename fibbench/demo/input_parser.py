"""
Demo Input Parsing

Turns the free-text index field into a list of Fibonacci indices.
"""
import re
from typing import List

# Leading integer of a token, like JavaScript's parseInt: "4abc" -> 4
_LEADING_INT = re.compile(r"^[+-]?[0-9]+")


def parse_indices(text: str) -> List[int]:
    """
    Parse a comma-separated list of indices.

    Tokens are trimmed; empty tokens, tokens without a leading integer and
    negative values are silently dropped. Order is preserved and duplicates
    are kept.
    """
    indices = []
    for token in (text or "").split(","):
        match = _LEADING_INT.match(token.strip())
        if not match:
            continue
        value = int(match.group())
        if value >= 0:
            indices.append(value)
    return indices
