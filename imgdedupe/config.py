"""
Configuration constants for imgdedupe.

This module contains all configurable settings including:
- Supported image extensions
- Fingerprint algorithm defaults
- Worker pool and progress polling defaults
"""

# Supported image extensions
IMAGE_EXTENSIONS = {
    # Common formats
    '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.tiff', '.tif',
    # Only decodable when pillow-heif is installed
    '.heic', '.heif',
}

# Extensions that need the pillow-heif opener
HEIF_EXTENSIONS = {'.heic', '.heif'}

# Fingerprint algorithms available from imagehash.
# dhash is the default: cheap, and stable across re-encodes and resizes.
HASH_ALGORITHMS = ('dhash', 'phash', 'ahash', 'whash')
DEFAULT_HASH_ALGORITHM = 'dhash'

# hash_size=8 produces a 64-bit fingerprint
DEFAULT_HASH_SIZE = 8

# Default number of parallel hash workers (clamped to CPU count at runtime)
DEFAULT_WORKERS = 4

# Decompression bomb limit handed to Pillow (500 megapixels)
MAX_IMAGE_PIXELS = 500_000_000

# Seconds the aggregator waits on the result queue before polling progress
PROGRESS_POLL_INTERVAL = 0.1

# Progress bar style for per-worker bars
PROGRESS_BAR_FORMAT = '{desc} {bar:40} {n_fmt:>7}/{total_fmt:7} [{elapsed}]'
