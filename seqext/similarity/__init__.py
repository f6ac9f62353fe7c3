"""
Jaccard similarity and ranking.

Set mode compares two collections; predicate (binary) mode compares one
object against an idealized comparand that satisfies every predicate.
"""

from .jaccard import jaccard_index, binary_jaccard_index
from .ranking import (
    RankedSequence,
    jaccard_sort,
    jaccard_scores,
    binary_jaccard_sort,
    binary_jaccard_scores,
)

__all__ = [
    'jaccard_index',
    'binary_jaccard_index',
    'RankedSequence',
    'jaccard_sort',
    'jaccard_scores',
    'binary_jaccard_sort',
    'binary_jaccard_scores',
]
