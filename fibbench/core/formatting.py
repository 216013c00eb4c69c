"""
Decimal rendering of arbitrarily large integers.

CPython refuses int -> str conversions above ``sys.get_int_max_str_digits()``
digits (4300 by default). Fibonacci values cross that limit around n = 20600,
so values are rendered by splitting them into chunks below the limit instead
of lifting the limit process-wide.
"""
import math

# Chunks up to this many digits go straight through str()
_CHUNK_DIGITS = 4000

_LOG10_2 = math.log10(2)


def format_decimal(value: int) -> str:
    """Exact base-10 representation of ``value``, however many digits."""
    if value < 0:
        return "-" + format_decimal(-value)
    if value.bit_length() * _LOG10_2 < _CHUNK_DIGITS:
        return str(value)

    half = int(value.bit_length() * _LOG10_2) // 2
    high, low = divmod(value, 10 ** half)
    return format_decimal(high) + format_decimal(low).zfill(half)


def digit_count(value: int) -> int:
    return len(format_decimal(abs(value)))


def abbreviate(digits: str, max_length: int = 30, keep: int = 15) -> str:
    """
    Shorten a long digit string to ``first...last`` for table display.

    Strings of at most ``max_length`` characters are returned unchanged.
    """
    if len(digits) <= max_length:
        return digits
    return f"{digits[:keep]}...{digits[-keep:]}"
