"""
Abstract operation interfaces and result contracts for sortbench.

Each measured step of a benchmark run (linear search, quick sort, binary
search, multimap lookup) implements the BenchmarkOperation protocol and returns
an OperationResult TypedDict so the driver and the reporter can treat them
uniformly.
"""

from __future__ import annotations

import abc
from typing import Any, Optional, Protocol, TypedDict, runtime_checkable

from sortbench.domain.models import Record
from sortbench.infrastructure.loader import Dataset


class OperationResult(TypedDict, total=False):
    """
    Metrics returned by one operation on one dataset.

    `matches` is the number of indices (or multimap values) found for searches
    and is absent for operations that do not search.
    """

    operation: str
    label: str
    size: int
    duration_ns: int
    matches: Optional[int]
    notes: Optional[str]


@runtime_checkable
class BenchmarkOperation(Protocol):
    """
    Common interface all benchmark operations must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    label : str
        The wording used in report lines, e.g. "Linear search".
    """

    name: str
    label: str

    def execute(self, dataset: Dataset, target: Record) -> OperationResult:
        """
        Run the operation once against `dataset` and return its timing.

        Operations may mutate `dataset.records` (quick sort does); the driver
        runs them in a fixed order that relies on this.
        """
        ...


class AbstractBenchmarkOperation(abc.ABC):
    """
    ABC helper for class-based operations.

    Subclasses set `name` and `label` and implement `execute`.
    """

    name: str
    label: str

    @abc.abstractmethod
    def execute(self, dataset: Dataset, target: Record) -> OperationResult:  # pragma: no cover - interface only
        """Run the operation and return metrics."""
        raise NotImplementedError

    def _result(self, dataset: Dataset, duration_ns: int, **fields: Any) -> OperationResult:
        result = OperationResult(
            operation=self.name,
            label=self.label,
            size=len(dataset),
            duration_ns=duration_ns,
        )
        result.update(fields)  # type: ignore[typeddict-item]
        return result


__all__ = [
    "OperationResult",
    "BenchmarkOperation",
    "AbstractBenchmarkOperation",
]
