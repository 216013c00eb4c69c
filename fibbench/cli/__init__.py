"""
Command-line helpers shared by the scripts in ``bin/``.
"""
from .console import (
    Colors,
    print_error,
    print_header,
    print_info,
    print_kv,
    print_section,
    print_success,
    print_table,
    print_warning,
    setup_logging,
    use_colors,
)

__all__ = [
    "Colors",
    "print_error",
    "print_header",
    "print_info",
    "print_kv",
    "print_section",
    "print_success",
    "print_table",
    "print_warning",
    "setup_logging",
    "use_colors",
]
