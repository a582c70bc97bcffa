"""
sortbench - benchmarking suite for classic sorting and searching algorithms.

Loads book records from flat data files and times, per data size:

- Linear search over the unsorted records
- In-place quicksort
- Binary search over the sorted records (and sort + search combined)
- A dictionary (multimap) lookup as a baseline

The algorithms are generic over an ordering, so the same routines work for any
element type and key.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sortbench.algorithms import binary_search, linear_search, quick_sort
from sortbench.config import Settings, get_settings
from sortbench.domain import BY_AUTHOR, KeyOrdering, Ordering, Record
from sortbench.exceptions import (
    BenchmarkError,
    DataFileNotFoundError,
    DataLoadError,
    RecordParseError,
    TargetSelectionError,
    TruncatedInputError,
)
from sortbench.infrastructure import Dataset, load_dataset
from sortbench.orchestrator import RunConfig, available_operations, run_benchmark
from sortbench.utils.logging import configure_logging, get_logger
from sortbench.utils.profiler import ProfileStats, profile_block, timed_call

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Algorithms
    "binary_search",
    "linear_search",
    "quick_sort",
    # Domain
    "BY_AUTHOR",
    "KeyOrdering",
    "Ordering",
    "Record",
    # Errors
    "BenchmarkError",
    "DataFileNotFoundError",
    "DataLoadError",
    "RecordParseError",
    "TargetSelectionError",
    "TruncatedInputError",
    # Configuration
    "Settings",
    "get_settings",
    # Data
    "Dataset",
    "load_dataset",
    # Orchestration
    "RunConfig",
    "available_operations",
    "run_benchmark",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
    "timed_call",
]
