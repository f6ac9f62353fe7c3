"""Fixed-size chunking of a (possibly lazily produced) sequence.

``chunk`` validates its arguments when it is called and only then hands
back an iterator; groups are built one at a time as the caller pulls them.
"""

import itertools
import logging
from collections.abc import Sized
from typing import Any, Iterable, Iterator, List, Union

from ..errors import EmptyCollectionError, InvalidArgumentError, require
from ..types import OnEmpty

logger = logging.getLogger(__name__)


class ChunkIterator:
    """
    One-shot iterator over consecutive groups of ``size`` elements.

    - All argument checks run in ``__init__``, so invalid sizes and strict
      empty inputs fail before anything is consumed.
    - Each emitted chunk is a new list of exactly ``size`` elements, except
      possibly the last one.
    - Iterating a second time yields nothing; call ``chunk`` again instead.
    """
    __slots__ = ("size", "_source")

    def __init__(
        self,
        source: Iterable[Any],
        size: int,
        on_empty: Union[OnEmpty, str] = OnEmpty.RETURN_EMPTY,
    ) -> None:
        require(source, "source")
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError("The chunk size must be an integer", argument="size", value=size)
        if size <= 0:
            raise InvalidArgumentError("The chunk size must be 1 or greater", argument="size", value=size)
        policy = OnEmpty.coerce(on_empty)

        self.size = size
        self._source: Iterator[Any] = self._prime(source, policy)

    @staticmethod
    def _prime(source: Iterable[Any], policy: OnEmpty) -> Iterator[Any]:
        # Sized inputs answer emptiness directly; iterators are peeked and the
        # first element is chained back in front.
        if isinstance(source, Sized):
            if len(source) == 0 and policy is OnEmpty.THROW:
                raise EmptyCollectionError("Chunk attempt failed due to empty collection", operation="chunk")
            return iter(source)

        it = iter(source)
        if policy is OnEmpty.RETURN_EMPTY:
            return it
        try:
            first = next(it)
        except StopIteration:
            raise EmptyCollectionError("Chunk attempt failed due to empty collection", operation="chunk") from None
        return itertools.chain((first,), it)

    def __iter__(self) -> "ChunkIterator":
        return self

    def __next__(self) -> List[Any]:
        group = list(itertools.islice(self._source, self.size))
        if not group:
            raise StopIteration
        return group


def chunk(
    seq: Iterable[Any],
    size: int,
    on_empty: Union[OnEmpty, str] = OnEmpty.RETURN_EMPTY,
) -> ChunkIterator:
    """Split ``seq`` into lists of ``size`` elements.

    Args:
        seq: Elements to group; sequences and one-shot iterators both work
        size: Elements per chunk, 1 or greater
        on_empty: Whether an empty input yields no chunks or raises

    Returns:
        ChunkIterator emitting the groups on demand

    Raises:
        InvalidArgumentError: if ``size`` is not a positive integer
        EmptyCollectionError: if ``seq`` is empty and ``on_empty`` is THROW
    """
    chunks = ChunkIterator(seq, size, on_empty)
    logger.debug("chunking into groups of %d", size)
    return chunks
