"""
Data models for imgdedupe.

Contains dataclasses for hash records and the originals/duplicates partition.
"""

from dataclasses import dataclass, field
import os


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable form."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


@dataclass(frozen=True)
class HashRecord:
    """
    Fingerprint of one successfully decoded image.

    Attributes:
        path: Full path to the image file
        fingerprint: Hex string of the perceptual hash
    """
    path: str
    fingerprint: str


@dataclass
class Partition:
    """
    Result of duplicate resolution.

    Attributes:
        originals: One path per distinct fingerprint (the kept file)
        duplicates: Every other member of a fingerprint group
    """
    originals: set = field(default_factory=set)
    duplicates: set = field(default_factory=set)

    @property
    def original_count(self) -> int:
        """Number of files kept."""
        return len(self.originals)

    @property
    def duplicate_count(self) -> int:
        """Number of files classified as duplicates."""
        return len(self.duplicates)

    @property
    def total_count(self) -> int:
        """Number of successfully hashed files covered by the partition."""
        return len(self.originals) + len(self.duplicates)

    @property
    def potential_savings(self) -> int:
        """Bytes that could be saved by removing duplicates."""
        total = 0
        for path in self.duplicates:
            try:
                total += os.path.getsize(path)
            except OSError:
                continue
        return total
