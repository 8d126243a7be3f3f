"""
Hashing module for the scanner package.

Provides the image decoding, perceptual fingerprint, and dimension providers
used by the hash workers and the duplicate resolver.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Callable, Optional

from ..config import DEFAULT_HASH_ALGORITHM, DEFAULT_HASH_SIZE, HASH_ALGORITHMS
from .dependencies import Image, imagehash, _logger

# CLI names do not all match imagehash function names
_HASH_FUNCTIONS = {
    'dhash': imagehash.dhash,
    'phash': imagehash.phash,
    'ahash': imagehash.average_hash,
    'whash': imagehash.whash,
}


class ImageDecodeError(Exception):
    """Raised when a file cannot be opened, decoded, or fingerprinted."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def decode_image(filepath: str | Path) -> Image.Image:
    """
    Open and fully decode an image.

    Args:
        filepath: Path to the image

    Returns:
        A loaded RGB or L mode image detached from the file handle

    Raises:
        ImageDecodeError: If the file is missing, unreadable, or not a valid image
    """
    try:
        with Image.open(filepath) as img:
            # Force load to detect truncated/corrupt images early
            img.load()
            if img.mode not in ('RGB', 'L'):
                return img.convert('RGB')
            return img.copy()
    except Image.UnidentifiedImageError as e:
        raise ImageDecodeError(filepath, f"not a valid image file: {e}") from e
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(filepath, f"image too large: {e}") from e
    except (OSError, ValueError, SyntaxError) as e:
        # Pillow reports truncated data as OSError and some bad headers as SyntaxError
        raise ImageDecodeError(filepath, f"failed to decode: {e}") from e


def fingerprint(
    image: Image.Image,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
    hash_size: int = DEFAULT_HASH_SIZE,
) -> str:
    """
    Calculate the perceptual fingerprint of a decoded image.

    Args:
        image: Decoded image
        algorithm: One of HASH_ALGORITHMS
        hash_size: Hash size (8 gives a 64-bit fingerprint)

    Returns:
        Hex string representation of the hash
    """
    try:
        hash_func = _HASH_FUNCTIONS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown hash algorithm '{algorithm}'") from None
    return str(hash_func(image, hash_size=hash_size))


def compute_fingerprint(
    filepath: str | Path,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
    hash_size: int = DEFAULT_HASH_SIZE,
) -> str:
    """
    Decode an image file and return its fingerprint.

    Raises:
        ImageDecodeError: If the image cannot be decoded or hashed
    """
    image = decode_image(filepath)
    try:
        return fingerprint(image, algorithm=algorithm, hash_size=hash_size)
    except (ValueError, TypeError, OSError) as e:
        raise ImageDecodeError(filepath, f"fingerprint failed ({algorithm}): {e}") from e


def make_fingerprinter(
    algorithm: Optional[str] = None,
    hash_size: Optional[int] = None,
) -> Callable[[str], str]:
    """
    Build a single-argument fingerprint provider for the hash workers.

    Args:
        algorithm: One of HASH_ALGORITHMS (default: dhash)
        hash_size: Hash size, must be >= 2

    Returns:
        Callable mapping a path to its fingerprint

    Raises:
        ValueError: For an unknown algorithm or invalid hash size
    """
    algorithm = algorithm or DEFAULT_HASH_ALGORITHM
    hash_size = DEFAULT_HASH_SIZE if hash_size is None else int(hash_size)

    if algorithm not in HASH_ALGORITHMS:
        raise ValueError(
            f"Unknown hash algorithm '{algorithm}' "
            f"(choose from: {', '.join(HASH_ALGORITHMS)})"
        )
    if hash_size < 2:
        raise ValueError(f"Hash size must be at least 2, got {hash_size}")
    if algorithm == 'whash' and hash_size & (hash_size - 1):
        raise ValueError(f"whash requires a power-of-two hash size, got {hash_size}")

    _logger.debug(f"Fingerprinting with {algorithm} ({hash_size * hash_size} bits)")
    return functools.partial(compute_fingerprint, algorithm=algorithm, hash_size=hash_size)


def read_dimensions(filepath: str | Path) -> tuple[int, int]:
    """
    Read image width and height from the file header.

    Does not decode pixel data.

    Raises:
        ImageDecodeError: If the header cannot be read
    """
    try:
        with Image.open(filepath) as img:
            return img.size
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(filepath, f"cannot read dimensions: {e}") from e


__all__ = [
    'ImageDecodeError',
    'decode_image',
    'fingerprint',
    'compute_fingerprint',
    'make_fingerprinter',
    'read_dimensions',
]
