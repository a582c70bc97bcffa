"""
Domain package for sortbench.

Exports the record model and the comparators the algorithms are parameterised
with. Keep this package focused on data definitions and ordering rules.
"""

from sortbench.domain.models import FIELDS_PER_RECORD, Record
from sortbench.domain.ordering import BY_AUTHOR, KeyOrdering, Ordering

__all__ = [
    "FIELDS_PER_RECORD",
    "Record",
    "BY_AUTHOR",
    "KeyOrdering",
    "Ordering",
]
