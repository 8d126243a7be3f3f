"""
Work splitting for the parallel hash workers.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar('T')


def split_work(items: Sequence[T], count: int) -> list[list[T]]:
    """
    Split a sequence into `count` contiguous chunks of near-equal size.

    With len(items) == d * count + r, the first r chunks hold d + 1 items and
    the remaining chunks hold d. Empty chunks are returned when there are
    fewer items than chunks.

    Args:
        items: Ordered sequence to split
        count: Number of chunks (already clamped by the caller)

    Returns:
        List of exactly `count` lists

    Raises:
        ValueError: If count is less than 1

    Examples:
        >>> split_work(['a', 'b', 'c', 'd', 'e'], 2)
        [['a', 'b', 'c'], ['d', 'e']]
        >>> split_work(['a'], 3)
        [['a'], [], []]
    """
    if count < 1:
        raise ValueError(f"Chunk count must be at least 1, got {count}")

    base, remainder = divmod(len(items), count)
    chunks = []
    start = 0
    for index in range(count):
        size = base + 1 if index < remainder else base
        chunks.append(list(items[start:start + size]))
        start += size

    return chunks


__all__ = ['split_work']
