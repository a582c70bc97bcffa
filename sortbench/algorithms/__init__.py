"""
Algorithms package for sortbench.

Generic sort and search routines. They are parameterised by an `Ordering` and
know nothing about records.
"""

from sortbench.algorithms.searching import binary_search, linear_search
from sortbench.algorithms.sorting import quick_sort

__all__ = [
    "binary_search",
    "linear_search",
    "quick_sort",
]
