"""
Configuration Package

Environment and YAML settings.
"""

from .settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
]
