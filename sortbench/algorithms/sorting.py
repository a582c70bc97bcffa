"""
In-place quicksort over a mutable sequence.

Pivot is the middle element of each range. Two cursors scan inward: the left
one skips elements `le` the pivot, the right one skips elements `ge` the pivot,
and out-of-place pairs are swapped until the cursors cross. Elements equal to
the pivot pass through both scans, so inputs dominated by one key degrade to
O(n^2). That behaviour is kept on purpose; callers that need duplicate-heavy
performance should not use this sort.

Ranges are kept on an explicit stack rather than the call stack, so the
degenerate case above cannot hit the interpreter recursion limit.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Tuple, TypeVar

from sortbench.algorithms.base import resolve_count
from sortbench.domain.ordering import Ordering

T = TypeVar("T")


def _partition(data: MutableSequence[T], start: int, end: int, order: Ordering[T]) -> int:
    """
    Partition `data[start:end + 1]` around its middle element.

    Returns the pivot's final index `p`: everything in `[start, p)` is `le` the
    pivot and everything in `(p, end]` is `ge` it.
    """
    middle = (start + end) // 2
    data[start], data[middle] = data[middle], data[start]
    pivot = data[start]

    left, right = start + 1, end
    while left <= right:
        while left <= right and order.le(data[left], pivot):
            left += 1
        while left <= right and order.ge(data[right], pivot):
            right -= 1
        if left < right:
            data[left], data[right] = data[right], data[left]
            left += 1
            right -= 1

    # `right` is the last slot holding an element le the pivot
    data[start], data[right] = data[right], data[start]
    return right


def quick_sort(data: MutableSequence[T], order: Ordering[T], n: Optional[int] = None) -> None:
    """
    Sort the first `n` elements of `data` in place (all of them when `n` is None).

    Not stable: records that compare equal under `order` may be reordered.
    """
    count = resolve_count(data, n)
    if count < 2:
        return

    pending: List[Tuple[int, int]] = [(0, count - 1)]
    while pending:
        start, end = pending.pop()
        split = _partition(data, start, end, order)
        if split - 1 > start:
            pending.append((start, split - 1))
        if split + 1 < end:
            pending.append((split + 1, end))


__all__ = ["quick_sort"]
