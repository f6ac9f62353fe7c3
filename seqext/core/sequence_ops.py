"""Structural transforms over sequences: slice, partition, init and tail.

Every function here is a pure transform. The input is read once and never
mutated; the result is a freshly allocated container.
"""

import logging
from typing import Any, Iterable, Sequence, Union

from ..errors import EmptyCollectionError, InvalidArgumentError, require
from ..types import OnEmpty, PartitionResult, Predicate
from .window import resolve_window

logger = logging.getLogger(__name__)


def slice_sequence(seq: Sequence[Any], start: int, end: int) -> Sequence[Any]:
    """Get the elements of ``seq`` in the half-open window ``[start, end)``.

    A negative ``end`` counts from the tail. Bounds that underflow or
    overflow produce an empty result rather than an error.

    Args:
        seq: Sequence to slice; the result has the same container type
        start: Inclusive start index, never negative
        end: Exclusive end index, may be negative

    Returns:
        A copy of the selected elements, or an empty sequence of the same type
    """
    require(seq, "seq")
    window = resolve_window(len(seq), start, end)
    if window is None:
        logger.debug("slice(%d, %d) over %d elements is empty", start, end, len(seq))
        return seq[0:0]
    return seq[window.as_slice()]


def partition(
    seq: Iterable[Any],
    predicate: Predicate,
    on_empty: Union[OnEmpty, str] = OnEmpty.RETURN_EMPTY,
) -> PartitionResult:
    """Split ``seq`` into the elements that pass ``predicate`` and those that fail.

    Args:
        seq: Elements to split; any iterable, consumed once
        predicate: Test applied exactly once to every element
        on_empty: Whether an empty input returns two empty lists or raises

    Returns:
        PartitionResult whose ``passed`` and ``failed`` lists keep input order

    Raises:
        EmptyCollectionError: if ``seq`` is empty and ``on_empty`` is THROW
    """
    require(seq, "seq")
    if not callable(predicate):
        raise InvalidArgumentError("predicate must be callable", argument="predicate", value=predicate)
    policy = OnEmpty.coerce(on_empty)

    items = list(seq)
    if not items:
        if policy is OnEmpty.THROW:
            raise EmptyCollectionError("Partition attempt failed due to empty collection", operation="partition")
        return PartitionResult([], [])

    passed, failed = [], []
    for item in items:
        if predicate(item):
            passed.append(item)
        else:
            failed.append(item)

    logger.debug("partitioned %d elements: %d passed, %d failed", len(items), len(passed), len(failed))
    return PartitionResult(passed, failed)


def _check_empty(seq: Sequence[Any], on_empty: Union[OnEmpty, str], operation: str) -> bool:
    """Return True when ``seq`` is empty and the policy allows an empty result."""
    require(seq, "seq")
    policy = OnEmpty.coerce(on_empty)
    if len(seq) > 0:
        return False
    if policy is OnEmpty.THROW:
        raise EmptyCollectionError(f"{operation.capitalize()} attempt failed due to empty collection", operation=operation)
    return True


def init(seq: Sequence[Any], on_empty: Union[OnEmpty, str] = OnEmpty.RETURN_EMPTY) -> Sequence[Any]:
    """Get every element of ``seq`` except the last one.

    Raises:
        EmptyCollectionError: if ``seq`` is empty and ``on_empty`` is THROW
    """
    if _check_empty(seq, on_empty, "init"):
        return seq[:]
    return seq[:len(seq) - 1]


def tail(seq: Sequence[Any], on_empty: Union[OnEmpty, str] = OnEmpty.RETURN_EMPTY) -> Sequence[Any]:
    """Get every element of ``seq`` except the first one.

    Raises:
        EmptyCollectionError: if ``seq`` is empty and ``on_empty`` is THROW
    """
    if _check_empty(seq, on_empty, "tail"):
        return seq[:]
    return seq[1:]
