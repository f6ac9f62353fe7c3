"""
Structural sequence transforms: windowed slicing, partition, init/tail and chunking.
"""

from .window import resolve_window
from .sequence_ops import slice_sequence, partition, init, tail
from .chunking import ChunkIterator, chunk

__all__ = [
    'resolve_window',
    'slice_sequence',
    'partition',
    'init',
    'tail',
    'ChunkIterator',
    'chunk',
]
