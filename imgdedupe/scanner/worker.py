"""
Hash worker for the scanner package.

A worker fingerprints every path of the chunk it owns, skipping files that
cannot be decoded, and advances its private progress handle once per path.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..models import HashRecord
from .dependencies import _logger
from .hashing import ImageDecodeError, compute_fingerprint


class WorkerProgress:
    """
    Progress handle owned by a single hash worker.

    Only the owning worker calls advance(); display code polls `completed`.
    """

    def __init__(self, total: int, label: str = ""):
        self.total = total
        self.label = label
        self._completed = 0

    @property
    def completed(self) -> int:
        """Number of paths processed so far (hashed or skipped)."""
        return self._completed

    @property
    def done(self) -> bool:
        return self._completed >= self.total

    def advance(self, amount: int = 1) -> None:
        self._completed += amount

    def __repr__(self) -> str:
        return f"WorkerProgress({self.label!r}, {self._completed}/{self.total})"


def hash_chunk(
    filepaths: Sequence[str],
    progress: Optional[WorkerProgress] = None,
    fingerprint_file: Callable[[str], str] = compute_fingerprint,
) -> list[HashRecord]:
    """
    Fingerprint every file in a chunk.

    Args:
        filepaths: Paths owned by this worker
        progress: Optional handle advanced once per path, hashed or skipped
        fingerprint_file: Fingerprint provider (raises ImageDecodeError on bad input)

    Returns:
        One HashRecord per successfully decoded file, in chunk order

    Notes:
        - A decode failure skips the file; any other exception propagates
          and fails the worker
    """
    records: list[HashRecord] = []

    for filepath in filepaths:
        try:
            records.append(HashRecord(path=filepath, fingerprint=fingerprint_file(filepath)))
        except ImageDecodeError as e:
            _logger.debug(f"Skipping {filepath}: {e.reason}")
        finally:
            if progress is not None:
                progress.advance()

    return records


__all__ = ['WorkerProgress', 'hash_chunk']
