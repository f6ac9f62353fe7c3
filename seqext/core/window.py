"""Half-open index window resolution for slicing."""

from typing import Optional

from ..errors import InvalidArgumentError
from ..types import Window


def resolve_window(length: int, start: int, end: int) -> Optional[Window]:
    """Normalize raw slice bounds against a sequence of ``length`` elements.

    ``start`` is inclusive and must be non-negative; it is never counted
    from the tail. ``end`` is exclusive; a negative ``end`` counts back from
    the tail and a positive ``end`` past ``length`` is clamped to it.

    Args:
        length: Number of elements in the sequence
        start: Raw start index
        end: Raw end index

    Returns:
        The resolved Window, or None when the bounds describe an empty result
    """
    if length < 0:
        raise InvalidArgumentError(f"length must be >= 0, got {length}", argument="length", value=length)

    if start < 0 or start > length:
        return None
    if end == 0 or (end > 0 and start > end):
        return None

    if end < 0:
        effective_end = length + end
        if effective_end < start:
            return None
    else:
        effective_end = min(end, length)

    return Window(start, effective_end)
