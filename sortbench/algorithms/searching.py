"""
Linear and binary search returning every matching index.

Both searches report all positions whose element is `eq` to the target under
the supplied ordering, in ascending index order.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

from sortbench.algorithms.base import resolve_count
from sortbench.domain.ordering import Ordering

T = TypeVar("T")


def linear_search(
    data: Sequence[T], target: T, order: Ordering[T], n: Optional[int] = None
) -> List[int]:
    """
    Scan the first `n` elements and collect the indices equal to `target`.

    No ordering precondition. O(n).
    """
    count = resolve_count(data, n)
    return [index for index in range(count) if order.eq(data[index], target)]


def binary_search(
    data: Sequence[T], target: T, order: Ordering[T], n: Optional[int] = None
) -> List[int]:
    """
    Find the contiguous block of elements equal to `target`.

    The first `n` elements must already be sorted ascending by `order`. Once a
    match is found the search backs up to the first element of the equal block
    and then collects the block front to back. O(log n + k) for k matches.
    """
    count = resolve_count(data, n)
    low, high = 0, count - 1
    while low <= high:
        middle = (low + high) // 2
        if order.eq(data[middle], target):
            break
        if order.gt(data[middle], target):
            high = middle - 1
        else:
            low = middle + 1
    else:
        return []

    first = middle
    while first > 0 and order.eq(data[first - 1], target):
        first -= 1

    matches: List[int] = []
    index = first
    while index < count and order.eq(data[index], target):
        matches.append(index)
        index += 1
    return matches


__all__ = ["linear_search", "binary_search"]
