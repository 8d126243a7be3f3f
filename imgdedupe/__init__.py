"""
imgdedupe
=========
Perceptual image deduplication for directory trees.

Features:
- Perceptual fingerprints (dHash by default) via imagehash
- Parallel hashing across a fixed pool of worker threads
- Corrupt or unsupported files are skipped, never fatal
- Quality-based selection (keeps the image with the most pixels)
- Delete duplicates in place, or copy originals to a target directory
"""

__version__ = "1.0.0"

from .models import HashRecord, Partition
from .config import IMAGE_EXTENSIONS, DEFAULT_WORKERS
from .scanner import (
    find_image_files,
    compute_fingerprint,
    read_dimensions,
    split_work,
    hash_chunk,
    hash_images_parallel,
    aggregate,
    compare_quality,
    resolve_duplicates,
    AggregationError,
    ImageDecodeError,
)

__all__ = [
    "HashRecord",
    "Partition",
    "IMAGE_EXTENSIONS",
    "DEFAULT_WORKERS",
    "find_image_files",
    "compute_fingerprint",
    "read_dimensions",
    "split_work",
    "hash_chunk",
    "hash_images_parallel",
    "aggregate",
    "compare_quality",
    "resolve_duplicates",
    "AggregationError",
    "ImageDecodeError",
]
