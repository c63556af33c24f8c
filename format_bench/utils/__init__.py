"""
Utilities package for the format benchmark.

Exports shared helpers for logging and profiling. Keep this package
lightweight and free of format-specific logic.
"""

from format_bench.utils.logging import configure_logging, get_logger
from format_bench.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
