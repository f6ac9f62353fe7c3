# seqext/similarity/jaccard.py
from __future__ import annotations

import logging
from typing import Any, FrozenSet, Iterable, Sequence

from ..errors import EmptyCollectionError, InvalidArgumentError, require
from ..types import Predicate

logger = logging.getLogger(__name__)


# =========================
# Shared scoring
# =========================

def to_set(items: Iterable[Any], argument: str) -> FrozenSet[Any]:
    """Collapse ``items`` to a set; unhashable elements are rejected."""
    try:
        return frozenset(items)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"{argument} elements must be hashable for Jaccard comparison",
            argument=argument,
            details={"cause": str(exc)},
        ) from exc


def jaccard_ratio(a: FrozenSet[Any], b: FrozenSet[Any]) -> float:
    """
    |a ∩ b| / |a ∪ b| over already-deduplicated sets.

    Two empty sets are an exact match (1.0). Every public entry point rejects
    empty inputs before getting here, so callers never observe that case.
    """
    if not a and not b:
        return 1.0
    return len(a & b) / float(len(a | b))


def binary_ratio(item: Any, predicates: Sequence[Predicate]) -> float:
    """
    Binary Jaccard of ``item`` against a comparand satisfying every predicate.

    With the other side always true, both-true + only-item-true equals the
    number of predicates and only-other-true is zero, so the coefficient is
    just the fraction of predicates ``item`` satisfies.
    """
    satisfied = sum(1 for predicate in predicates if predicate(item))
    return satisfied / float(len(predicates))


# =========================
# Validation
# =========================

def check_predicates(predicates: Any, operation: str) -> Sequence[Predicate]:
    """Reject a missing, empty or non-callable predicate list."""
    require(predicates, "predicates")
    predicates = list(predicates)
    if not predicates:
        raise EmptyCollectionError(f"{operation} requires at least one predicate", operation=operation)
    for position, predicate in enumerate(predicates):
        if not callable(predicate):
            raise InvalidArgumentError(
                f"predicate at position {position} is not callable",
                argument="predicates",
                value=predicate,
            )
    return predicates


# =========================
# Public API
# =========================

def jaccard_index(source: Iterable[Any], compare_to: Iterable[Any]) -> float:
    """
    Jaccard similarity coefficient of two collections under set semantics.

    Duplicates collapse; elements compare by equality and hash.

    Raises:
        InvalidArgumentError: if either argument is None or holds unhashable elements
        EmptyCollectionError: if either argument is empty
    """
    source_set = to_set(require(source, "source"), "source")
    compare_set = to_set(require(compare_to, "compare_to"), "compare_to")
    if not source_set:
        raise EmptyCollectionError("jaccard_index cannot operate on empty source", operation="jaccard_index")
    if not compare_set:
        raise EmptyCollectionError("jaccard_index cannot operate on empty compare_to", operation="jaccard_index")

    value = jaccard_ratio(source_set, compare_set)
    logger.debug("jaccard_index(%d, %d distinct) = %.6f", len(source_set), len(compare_set), value)
    return value


def binary_jaccard_index(source: Any, predicates: Sequence[Predicate]) -> float:
    """
    Binary-variant Jaccard coefficient of ``source`` against a predicate list.

    The comparand is an idealized object satisfying every predicate, so the
    result is the fraction of predicates that hold for ``source``.

    Raises:
        InvalidArgumentError: if ``source`` or ``predicates`` is None, or a predicate is not callable
        EmptyCollectionError: if ``predicates`` is empty
    """
    require(source, "source")
    predicates = check_predicates(predicates, "binary_jaccard_index")
    return binary_ratio(source, predicates)
