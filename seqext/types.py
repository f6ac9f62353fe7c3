"""Shared type definitions for seqext.

Value types passed between the windowing, partitioning, chunking and
similarity modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Union

from .errors import InvalidArgumentError

Predicate = Callable[[Any], bool]


class OnEmpty(str, Enum):
    """Policy applied when an operation receives an empty collection."""

    RETURN_EMPTY = "return_empty"
    THROW = "throw"

    @classmethod
    def coerce(cls, value: Union["OnEmpty", str]) -> "OnEmpty":
        """Accept a member or its string value.

        Raises:
            InvalidArgumentError: if ``value`` names no policy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise InvalidArgumentError(
                f"on_empty must be one of {valid}, got {value!r}",
                argument="on_empty",
                value=value,
            ) from None


@dataclass(frozen=True)
class Window:
    """A normalized half-open index range ``[start, end)``.

    Attributes:
        start: First index included
        end: First index excluded; ``start <= end`` always holds
    """
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


class PartitionResult(NamedTuple):
    """Elements that passed and failed a predicate, in original order."""
    passed: List[Any]
    failed: List[Any]


@dataclass(frozen=True)
class SimilarityScore:
    """Jaccard coefficient of one candidate plus its original position.

    Attributes:
        value: Coefficient in ``[0.0, 1.0]``
        source_index: Index of the candidate in the input collection
    """
    value: float
    source_index: int

    def sort_key(self) -> float:
        # descending by value; stability of sorted() keeps input order on ties
        return -self.value
