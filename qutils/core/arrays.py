"""
Sequence helpers: chunking, shuffling and random picks.
"""

import random
from typing import Any, List, Optional, Sequence


def chunk_array(items: Sequence[Any], size: int) -> List[List[Any]]:
    """
    Split a sequence into consecutive chunks.

    Works with any sliceable sequence (list, tuple, array.array). The last
    chunk holds whatever is left over.

        chunk_array([1, 2, 3, 4, 5], 2)  # [[1, 2], [3, 4], [5]]

    Args:
        items: Sequence to split
        size: Number of items per chunk (must be >= 1)

    Returns:
        List of chunks, each a plain list
    """
    if size < 1:
        raise ValueError(f"Chunk size must be at least 1, got {size}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def shuffle_array(items: Sequence[Any]) -> List[Any]:
    """Return a shuffled copy of items. The input is left untouched."""
    shuffled = list(items)
    random.shuffle(shuffled)
    return shuffled


def get_random_array_item(items: Sequence[Any]) -> Optional[Any]:
    """Pick a random element, or None if the sequence is empty."""
    if not items:
        return None
    return items[random.randrange(len(items))]
