"""
Operations package for sortbench.

This module re-exports the abstract interfaces and the concrete operation
classes so downstream code can import from `sortbench.operations` directly.
"""

from sortbench.operations.abstract import (
    AbstractBenchmarkOperation,
    BenchmarkOperation,
    OperationResult,
)
from sortbench.operations.search import (
    BinarySearchOperation,
    LinearSearchOperation,
    MultimapLookupOperation,
)
from sortbench.operations.sort import QuickSortOperation

__all__ = [
    # Abstracts
    "AbstractBenchmarkOperation",
    "BenchmarkOperation",
    "OperationResult",
    # Concrete operations
    "BinarySearchOperation",
    "LinearSearchOperation",
    "MultimapLookupOperation",
    "QuickSortOperation",
]
