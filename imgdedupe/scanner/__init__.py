"""
Scanner package for imgdedupe.

Provides image discovery, parallel fingerprinting, and duplicate resolution.

Public API:
- find_image_files: Discover image files in directories
- get_total_size: Total bytes of a list of files
- compute_fingerprint / make_fingerprinter: Perceptual fingerprint providers
- read_dimensions: Image (width, height) from the file header
- split_work: Balanced contiguous chunks for the worker pool
- hash_chunk: Fingerprint one chunk, skipping undecodable files
- hash_images_parallel: Fingerprint a file list across worker threads
- aggregate: Merge worker output from the result queue
- compare_quality / resolve_duplicates: Elect originals per fingerprint
"""

from __future__ import annotations

from .file_discovery import find_image_files, get_total_size
from .hashing import (
    ImageDecodeError,
    compute_fingerprint,
    decode_image,
    fingerprint,
    make_fingerprinter,
    read_dimensions,
)
from .splitter import split_work
from .worker import WorkerProgress, hash_chunk
from .parallel import (
    AggregationError,
    ProducerClosed,
    aggregate,
    effective_workers,
    hash_images_parallel,
)
from .resolver import compare_quality, resolve_duplicates


__all__ = [
    # File discovery
    'find_image_files',
    'get_total_size',
    # Fingerprint and dimension providers
    'ImageDecodeError',
    'compute_fingerprint',
    'decode_image',
    'fingerprint',
    'make_fingerprinter',
    'read_dimensions',
    # Parallel hashing
    'split_work',
    'WorkerProgress',
    'hash_chunk',
    'AggregationError',
    'ProducerClosed',
    'aggregate',
    'effective_workers',
    'hash_images_parallel',
    # Resolution
    'compare_quality',
    'resolve_duplicates',
]
