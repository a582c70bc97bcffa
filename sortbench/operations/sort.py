"""
Quick sort operation: sorts the dataset's records in place.
"""

from __future__ import annotations

from sortbench.algorithms.sorting import quick_sort
from sortbench.domain.models import Record
from sortbench.domain.ordering import BY_AUTHOR, Ordering
from sortbench.infrastructure.loader import Dataset
from sortbench.operations.abstract import AbstractBenchmarkOperation, OperationResult
from sortbench.utils.profiler import timed_call


class QuickSortOperation(AbstractBenchmarkOperation):
    """
    Sort `dataset.records` in place by the configured ordering.

    WARNING: mutates the dataset. Searches that run afterwards see sorted data,
    which is what the binary search operation depends on.
    """

    name: str = "quick_sort"
    label: str = "Quick sort"

    def __init__(self, order: Ordering[Record] = BY_AUTHOR) -> None:
        self.order = order

    def execute(self, dataset: Dataset, target: Record) -> OperationResult:
        del target
        _, elapsed = timed_call(quick_sort, dataset.records, self.order)
        return self._result(dataset, elapsed, matches=None)


__all__ = ["QuickSortOperation"]
