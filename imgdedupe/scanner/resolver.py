"""
Duplicate resolution module for the scanner package.

Groups hash records by exact fingerprint and elects one original per group
using pixel count as the quality measure.

Tie-break policy: a challenger replaces the incumbent only when it has
strictly more pixels. Equal quality, or a dimension read failure on either
side, keeps the incumbent. The outcome therefore depends on record order;
sort the records first when the result must be reproducible across runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..models import HashRecord, Partition
from .dependencies import _logger
from .hashing import read_dimensions

DimensionProvider = Callable[[str], tuple[int, int]]


def _pixel_count(filepath: str | Path, dimensions: DimensionProvider) -> Optional[int]:
    try:
        width, height = dimensions(str(filepath))
    except Exception as e:
        # Any provider failure counts as unknown quality
        _logger.debug(f"Quality unavailable for {filepath}: {e}")
        return None
    return width * height


def compare_quality(
    a: str | Path,
    b: str | Path,
    dimensions: DimensionProvider = read_dimensions,
) -> Optional[int]:
    """
    Compare the quality (pixel count) of two images.

    Args:
        a: First image path
        b: Second image path
        dimensions: Dimension provider returning (width, height)

    Returns:
        1 if a has more pixels than b, -1 if fewer, 0 if equal,
        None if either image's dimensions could not be read
    """
    pixels_a = _pixel_count(a, dimensions)
    if pixels_a is None:
        return None
    pixels_b = _pixel_count(b, dimensions)
    if pixels_b is None:
        return None
    return (pixels_a > pixels_b) - (pixels_a < pixels_b)


def resolve_duplicates(
    records: Iterable[HashRecord],
    dimensions: DimensionProvider = read_dimensions,
    logger: Optional[logging.Logger] = None,
) -> Partition:
    """
    Partition hashed files into originals and duplicates.

    Args:
        records: Hash records, processed in the given order
        dimensions: Dimension provider used by the quality tie-break
        logger: Optional logger for status messages

    Returns:
        Partition with one original per fingerprint; every other member of a
        fingerprint group is a duplicate

    Examples:
        >>> records = [HashRecord('a.jpg', 'ff00'), HashRecord('b.jpg', 'ff00')]
        >>> sizes = {'a.jpg': (10, 10), 'b.jpg': (10, 10)}
        >>> partition = resolve_duplicates(records, dimensions=sizes.__getitem__)
        >>> partition.originals, partition.duplicates
        ({'a.jpg'}, {'b.jpg'})
    """
    best: dict[str, str] = {}
    duplicates: set[str] = set()
    seen_paths: set[str] = set()

    for record in records:
        path = record.path
        # A path listed twice must not end up as both original and duplicate
        if path in seen_paths:
            continue
        seen_paths.add(path)

        incumbent = best.get(record.fingerprint)
        if incumbent is None:
            best[record.fingerprint] = path
            continue

        if compare_quality(path, incumbent, dimensions) == 1:
            duplicates.add(incumbent)
            best[record.fingerprint] = path
        else:
            duplicates.add(path)

    partition = Partition(originals=set(best.values()), duplicates=duplicates)

    if logger:
        logger.info(
            f"Resolved {partition.total_count:,} files: "
            f"{partition.original_count:,} originals, "
            f"{partition.duplicate_count:,} duplicates"
        )

    return partition


__all__ = ['compare_quality', 'resolve_duplicates']
