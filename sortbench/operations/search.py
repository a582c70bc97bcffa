"""
Search operations: linear scan, binary search and the multimap baseline.
"""

from __future__ import annotations

from sortbench.algorithms.searching import binary_search, linear_search
from sortbench.domain.models import Record
from sortbench.domain.ordering import BY_AUTHOR, Ordering
from sortbench.infrastructure.loader import Dataset
from sortbench.operations.abstract import AbstractBenchmarkOperation, OperationResult
from sortbench.utils.profiler import timed_call


class LinearSearchOperation(AbstractBenchmarkOperation):
    """
    Scan the unsorted records for every index matching the target.
    """

    name: str = "linear_search"
    label: str = "Linear search"

    def __init__(self, order: Ordering[Record] = BY_AUTHOR) -> None:
        self.order = order

    def execute(self, dataset: Dataset, target: Record) -> OperationResult:
        matches, elapsed = timed_call(linear_search, dataset.records, target, self.order)
        return self._result(dataset, elapsed, matches=len(matches))


class BinarySearchOperation(AbstractBenchmarkOperation):
    """
    Binary search over records already sorted by the same ordering.

    Requires the quick sort operation (or any equivalent sort) to have run on
    `dataset.records` first.
    """

    name: str = "binary_search"
    label: str = "Binary search"

    def __init__(self, order: Ordering[Record] = BY_AUTHOR) -> None:
        self.order = order

    def execute(self, dataset: Dataset, target: Record) -> OperationResult:
        matches, elapsed = timed_call(binary_search, dataset.records, target, self.order)
        return self._result(dataset, elapsed, matches=len(matches))


class MultimapLookupOperation(AbstractBenchmarkOperation):
    """
    Single lookup of the target's author in the dataset's author multimap.
    """

    name: str = "multimap_search"
    label: str = "Multimap search"

    def execute(self, dataset: Dataset, target: Record) -> OperationResult:
        found, elapsed = timed_call(dataset.by_author.get, target.author, [])
        return self._result(
            dataset,
            elapsed,
            matches=len(found),
            notes="dict lookup keyed by author; baseline for the array searches.",
        )


__all__ = ["BinarySearchOperation", "LinearSearchOperation", "MultimapLookupOperation"]
