"""
Report formatting and display for the CLI interface.

Provides functions to print the originals/duplicates partition in a
human-readable format.
"""

from __future__ import annotations

from ..models import Partition
from ..utils.formatters import format_number, format_size


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)


def _print_paths(paths: set, marker: str) -> None:
    for path in sorted(paths):
        print(f"  {marker} {path}")


def print_partition_report(
    partition: Partition,
    scanned: int,
    skipped: int,
    verbose: bool = False,
) -> None:
    """
    Print a summary of the resolved partition.

    Args:
        partition: Resolver output
        scanned: Number of image files found
        skipped: Number of files that could not be decoded
        verbose: Also list every original and duplicate path

    Notes:
        - Counts are always printed, even when files were skipped
        - Paths are listed in sorted order
    """
    print("\n" + "=" * 70)
    print("DUPLICATE IMAGE REPORT")
    print("=" * 70)

    print(f"\nImages scanned:     {format_number(scanned)}")
    print(f"Could not decode:   {format_number(skipped)}")
    print(f"Originals:          {format_number(partition.original_count)}")
    print(f"Duplicates:         {format_number(partition.duplicate_count)}")

    if verbose:
        if partition.originals:
            _print_section_header("ORIGINALS (kept)")
            _print_paths(partition.originals, "[KEEP]")
        if partition.duplicates:
            _print_section_header("DUPLICATES")
            _print_paths(partition.duplicates, "[DUPE]")

    print("\n" + "=" * 70)
    print(f"Total space recoverable: {format_size(partition.potential_savings)}")
    print("=" * 70)


__all__ = ['print_partition_report']
