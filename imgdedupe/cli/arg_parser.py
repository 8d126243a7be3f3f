"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
imgdedupe command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..config import HASH_ALGORITHMS
from ..user_config import get_user_config


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Defaults for workers and hashing come from the user configuration.

    Returns:
        Configured ArgumentParser instance
    """
    config = get_user_config()

    parser = argparse.ArgumentParser(
        prog='imgdedupe',
        description='Find perceptually duplicate images and keep the best copy',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s /path/to/photos
      Scan for duplicates (report only, no changes)

  %(prog)s /path/to/photos --action delete --no-dry-run
      Actually delete the lower-quality duplicates (BE CAREFUL!)

  %(prog)s /path/to/photos --action copy --target-dir ./originals --no-dry-run
      Copy one original per duplicate group (and every unique image) to ./originals

  %(prog)s /path/to/photos --sorted
      Process files in path order so repeated runs keep the same files

Notes:
  Images are grouped by exact fingerprint equality. When two copies have the
  same pixel count, the first one processed is kept.
        """
    )

    parser.add_argument(
        'directory',
        type=Path,
        nargs='?',
        default=None,
        help='Directory to scan for duplicate images'
    )

    # Scanning options
    parser.add_argument(
        '-r', '--no-recursive',
        action='store_true',
        help='Do not scan subdirectories'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=config.default_workers,
        help=f'Number of hash worker threads (capped at CPU count). Default: {config.default_workers}'
    )

    parser.add_argument(
        '--hash-algorithm',
        choices=HASH_ALGORITHMS,
        default=config.hash_algorithm,
        help=f'Perceptual hash algorithm. Default: {config.hash_algorithm}'
    )

    parser.add_argument(
        '--hash-size',
        type=int,
        default=config.hash_size,
        help=f'Hash size; the fingerprint has hash-size squared bits. Default: {config.hash_size}'
    )

    parser.add_argument(
        '--sorted',
        action='store_true',
        dest='sort_records',
        help='Resolve duplicates in path order for reproducible results'
    )

    # Action options
    parser.add_argument(
        '-a', '--action',
        choices=['report', 'delete', 'copy'],
        default='report',
        help='delete: remove duplicates in place; copy: copy originals to --target-dir. Default: report'
    )

    parser.add_argument(
        '-t', '--target-dir',
        type=Path,
        help='Existing directory to copy originals into (for --action copy)'
    )

    parser.add_argument(
        '--no-dry-run',
        action='store_true',
        help='Actually perform the action (default is dry-run)'
    )

    # Output options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output (lists every original and duplicate)'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['/path/to/photos', '--workers', '2'])
        >>> args.workers
        2
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
