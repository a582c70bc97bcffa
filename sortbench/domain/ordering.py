"""
Comparators used by the sorting and searching algorithms.

The algorithms in `sortbench.algorithms` are generic: they take an `Ordering`
and never apply `<` or `==` to elements directly. A `KeyOrdering` collapses an
element to a single key and compares keys, which gives the weak order the
benchmark needs: records sharing a key are equal and interchangeable.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Ordering(Protocol[T_contra]):
    """
    Comparison contract consumed by the sort and search routines.
    """

    def lt(self, left: T_contra, right: T_contra) -> bool: ...

    def gt(self, left: T_contra, right: T_contra) -> bool: ...

    def le(self, left: T_contra, right: T_contra) -> bool: ...

    def ge(self, left: T_contra, right: T_contra) -> bool: ...

    def eq(self, left: T_contra, right: T_contra) -> bool: ...


class KeyOrdering(Generic[T]):
    """
    Order elements by `key(element)`.

    Parameters
    ----------
    key : callable
        Extracts the comparison key. Keys must be totally ordered.
    name : str
        Label used in logs and reprs.
    """

    def __init__(self, key: Callable[[T], Any], name: str = "key") -> None:
        self.key = key
        self.name = name

    def lt(self, left: T, right: T) -> bool:
        return self.key(left) < self.key(right)

    def gt(self, left: T, right: T) -> bool:
        return self.key(left) > self.key(right)

    def le(self, left: T, right: T) -> bool:
        return self.key(left) <= self.key(right)

    def ge(self, left: T, right: T) -> bool:
        return self.key(left) >= self.key(right)

    def eq(self, left: T, right: T) -> bool:
        return self.key(left) == self.key(right)

    def __repr__(self) -> str:
        return f"KeyOrdering({self.name})"


BY_AUTHOR: KeyOrdering = KeyOrdering(attrgetter("author"), name="author")


__all__ = ["Ordering", "KeyOrdering", "BY_AUTHOR"]
