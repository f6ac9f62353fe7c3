"""
Similarity ranking of candidates against a reference.

Candidates are scored independently, then ordered by coefficient
descending. Python's ``sorted`` is stable, so candidates with equal
scores come out in the order they went in.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence

from ..errors import EmptyCollectionError, InvalidArgumentError, require
from ..types import Predicate, SimilarityScore
from .jaccard import binary_ratio, check_predicates, jaccard_ratio, to_set

logger = logging.getLogger(__name__)


def rank_scores(values: Iterable[float]) -> List[SimilarityScore]:
    """Attach original positions to ``values`` and order them best first."""
    scores = [SimilarityScore(value, index) for index, value in enumerate(values)]
    return sorted(scores, key=SimilarityScore.sort_key)


class RankedSequence:
    """
    One-shot lazy iterator over candidates in descending similarity order.

    Construction receives already-validated candidates and a callable that
    scores the candidate at a given position. Scores are computed on the
    first ``next()`` call.
    """

    def __init__(self, candidates: Sequence[Any], score: Callable[[int], float]) -> None:
        self._candidates = candidates
        self._score = score
        self._order: Optional[Iterator[SimilarityScore]] = None
        self._ranked: Optional[List[SimilarityScore]] = None

    @property
    def scores(self) -> List[SimilarityScore]:
        """Ranked scores for every candidate; computed once, independent of iteration state."""
        if self._ranked is None:
            self._ranked = rank_scores(self._score(index) for index in range(len(self._candidates)))
        return self._ranked

    def __iter__(self) -> "RankedSequence":
        return self

    def __next__(self) -> Any:
        if self._order is None:
            self._order = iter(self.scores)
        ranked = next(self._order)
        return self._candidates[ranked.source_index]


# ----------------------------
# Set mode
# ----------------------------

def _validate_set_ranking(source: Any, compare_to: Any, operation: str):
    require(source, "source")
    require(compare_to, "compare_to")
    candidates = list(compare_to)
    source_set = to_set(source, "source")
    if not source_set:
        raise EmptyCollectionError(f"{operation} cannot operate on empty source", operation=operation)
    if not candidates:
        raise EmptyCollectionError(f"{operation} cannot operate against empty compare collection", operation=operation)

    candidate_sets = []
    for position, candidate in enumerate(candidates):
        if candidate is None:
            raise InvalidArgumentError(
                f"compare_to[{position}] must not be None", argument="compare_to", value=candidate
            )
        candidate_set = to_set(candidate, "compare_to")
        if not candidate_set:
            raise EmptyCollectionError(
                f"{operation} cannot operate against empty candidate at position {position}",
                operation=operation,
                details={"position": position},
            )
        candidate_sets.append(candidate_set)

    return source_set, candidates, candidate_sets


def jaccard_sort(source: Iterable[Any], compare_to: Iterable[Iterable[Any]]) -> RankedSequence:
    """
    Order the collections in ``compare_to`` by their Jaccard similarity to ``source``.

    Every argument check happens here, before the iterator is returned.

    Args:
        source: Reference collection
        compare_to: Candidate collections to rank

    Returns:
        RankedSequence yielding the original candidate objects, best first

    Raises:
        InvalidArgumentError: if ``source``, ``compare_to`` or any candidate is None
        EmptyCollectionError: if ``source``, ``compare_to`` or any candidate is empty
    """
    source_set, candidates, candidate_sets = _validate_set_ranking(source, compare_to, "jaccard_sort")
    logger.debug("ranking %d candidates against %d distinct elements", len(candidates), len(source_set))
    return RankedSequence(candidates, lambda index: jaccard_ratio(source_set, candidate_sets[index]))


def jaccard_scores(source: Iterable[Any], compare_to: Iterable[Iterable[Any]]) -> List[SimilarityScore]:
    """Like ``jaccard_sort`` but return the ranked SimilarityScore records."""
    source_set, _, candidate_sets = _validate_set_ranking(source, compare_to, "jaccard_scores")
    return rank_scores(jaccard_ratio(source_set, candidate) for candidate in candidate_sets)


# ----------------------------
# Predicate mode
# ----------------------------

def _validate_binary_ranking(candidates: Any, predicates: Any, operation: str):
    require(candidates, "candidates")
    require(predicates, "predicates")
    candidates = list(candidates)
    if not candidates:
        raise EmptyCollectionError(f"{operation} cannot operate on empty candidates", operation=operation)
    for position, candidate in enumerate(candidates):
        if candidate is None:
            raise InvalidArgumentError(
                f"candidates[{position}] must not be None", argument="candidates", value=candidate
            )
    predicates = check_predicates(predicates, operation)
    return candidates, predicates


def binary_jaccard_sort(
    candidates: Iterable[Any],
    predicates: Sequence[Predicate],
) -> RankedSequence:
    """
    Order ``candidates`` by the fraction of ``predicates`` each one satisfies.

    Raises:
        InvalidArgumentError: if ``candidates``, any candidate or ``predicates`` is None,
            or a predicate is not callable
        EmptyCollectionError: if ``candidates`` or ``predicates`` is empty
    """
    candidates, predicates = _validate_binary_ranking(candidates, predicates, "binary_jaccard_sort")
    logger.debug("ranking %d candidates against %d predicates", len(candidates), len(predicates))
    return RankedSequence(candidates, lambda index: binary_ratio(candidates[index], predicates))


def binary_jaccard_scores(
    candidates: Iterable[Any],
    predicates: Sequence[Predicate],
) -> List[SimilarityScore]:
    """Like ``binary_jaccard_sort`` but return the ranked SimilarityScore records."""
    candidates, predicates = _validate_binary_ranking(candidates, predicates, "binary_jaccard_scores")
    return rank_scores(binary_ratio(candidate, predicates) for candidate in candidates)
