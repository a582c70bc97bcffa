"""
Utilities package for sortbench.

Exports shared helpers for logging, profiling, and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, profile_block, timed_call

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
    "timed_call",
]
