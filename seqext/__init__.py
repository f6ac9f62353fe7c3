"""seqext - generic sequence transforms and Jaccard similarity ranking."""

__version__ = "0.1.0"

from .errors import SequenceError, InvalidArgumentError, EmptyCollectionError
from .types import OnEmpty, Window, PartitionResult, SimilarityScore
from .core import (
    resolve_window,
    slice_sequence,
    partition,
    init,
    tail,
    ChunkIterator,
    chunk,
)
from .similarity import (
    jaccard_index,
    binary_jaccard_index,
    RankedSequence,
    jaccard_sort,
    jaccard_scores,
    binary_jaccard_sort,
    binary_jaccard_scores,
)

__all__ = [
    "SequenceError",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "OnEmpty",
    "Window",
    "PartitionResult",
    "SimilarityScore",
    "resolve_window",
    "slice_sequence",
    "partition",
    "init",
    "tail",
    "ChunkIterator",
    "chunk",
    "jaccard_index",
    "binary_jaccard_index",
    "RankedSequence",
    "jaccard_sort",
    "jaccard_scores",
    "binary_jaccard_sort",
    "binary_jaccard_scores",
    "__version__",
]
