"""
File discovery module for the scanner package.

Provides functionality to find and enumerate image files in directories,
with support for recursive scanning and HEIC/HEIF format detection.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from ..config import IMAGE_EXTENSIONS, HEIF_EXTENSIONS
from .dependencies import HAS_HEIF_SUPPORT, _logger


def find_image_files(root_path: str | Path, recursive: bool = True) -> list[str]:
    """
    Find all image files in the given directory.

    Args:
        root_path: Directory path to search for images
        recursive: If True, search subdirectories recursively

    Returns:
        List of absolute file paths as strings, in traversal order

    Notes:
        - Automatically filters out HEIC/HEIF files if pillow-heif is not installed
        - Handles symlinks by resolving to canonical paths
        - Deduplicates files that may be encountered via multiple paths
    """
    root = Path(root_path)

    extensions_to_scan = IMAGE_EXTENSIONS
    if not HAS_HEIF_SUPPORT:
        extensions_to_scan = IMAGE_EXTENSIONS - HEIF_EXTENSIONS

    images = []
    seen = set()  # resolved paths

    iterator = root.rglob('*') if recursive else root.glob('*')

    for filepath in iterator:
        try:
            if not filepath.is_file():
                continue
        except OSError as e:
            _logger.debug(f"Skipping unreadable entry {filepath}: {e}")
            continue

        if filepath.suffix.lower() in extensions_to_scan:
            resolved = str(filepath.resolve())
            if resolved not in seen:
                seen.add(resolved)
                images.append(resolved)

    return images


def get_total_size(filepaths: Iterable[str]) -> int:
    """
    Sum the sizes of the given files in bytes.

    Files that vanish or cannot be stat'ed count as zero.
    """
    total = 0
    for filepath in filepaths:
        try:
            total += os.path.getsize(filepath)
        except OSError:
            continue
    return total


__all__ = ['find_image_files', 'get_total_size']
