"""
File action handlers for the CLI interface.

Deletes duplicates in place or copies originals to a target directory.
Preconditions are checked for the whole batch before any file is touched;
after that, the first failure stops the batch and is raised as ActionError
with the paths already processed. Nothing is rolled back.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, Optional


class ActionError(Exception):
    """
    A file action failed part way through a batch.

    Attributes:
        action: 'delete' or 'copy'
        path: Source path that failed
        completed: Paths processed before the failure
    """

    def __init__(self, action: str, path: str, completed: list[str], cause: OSError):
        self.action = action
        self.path = path
        self.completed = list(completed)
        self.cause = cause
        super().__init__(
            f"Failed to {action} {path}: {cause} "
            f"({len(self.completed)} file(s) already processed)"
        )


def _refuse_directories(paths: list[str], action: str) -> None:
    """Raise IsADirectoryError if any path is a directory."""
    for path in paths:
        if os.path.isdir(path):
            raise IsADirectoryError(errno.EISDIR, f"Refusing to {action} a directory", path)


def _copy_exclusive(
    source: str,
    dest: Path,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Copy a file, failing if the destination appears in the meantime.

    A partially written destination is removed again. Failing to copy the
    timestamps and permission bits only logs a warning.
    """
    with open(source, 'rb') as src:
        dst = open(dest, 'xb')
        try:
            with dst:
                shutil.copyfileobj(src, dst)
        except BaseException:
            dest.unlink(missing_ok=True)
            raise

    try:
        shutil.copystat(source, dest)
    except OSError as e:
        if logger:
            logger.warning(f"Copied {source} without its metadata: {e}")


def delete_files(
    paths: Iterable[str],
    dry_run: bool = False,
    logger: Optional[logging.Logger] = None,
) -> list[str]:
    """
    Delete files in place.

    Args:
        paths: Files to delete
        dry_run: If True, only check preconditions and log
        logger: Optional logger instance

    Returns:
        Deleted paths (or paths that would be deleted), in sorted order

    Raises:
        IsADirectoryError: If any path is a directory (nothing is deleted)
        ActionError: On the first failed deletion
    """
    ordered = sorted(str(p) for p in paths)
    _refuse_directories(ordered, 'delete')

    deleted: list[str] = []
    for path in ordered:
        if dry_run:
            if logger:
                logger.info(f"[DRY RUN] Would delete: {path}")
            deleted.append(path)
            continue

        try:
            os.remove(path)
        except OSError as e:
            raise ActionError('delete', path, deleted, e) from e

        deleted.append(path)
        if logger:
            logger.info(f"Deleted: {path}")

    return deleted


def copy_files(
    paths: Iterable[str],
    target_dir: str | Path,
    dry_run: bool = False,
    logger: Optional[logging.Logger] = None,
) -> list[str]:
    """
    Copy files into an existing directory without overwriting anything.

    Args:
        paths: Files to copy
        target_dir: Existing destination directory
        dry_run: If True, only check preconditions and log
        logger: Optional logger instance

    Returns:
        Destination paths written (or that would be written)

    Raises:
        FileNotFoundError: If target_dir does not exist
        NotADirectoryError: If target_dir is not a directory
        IsADirectoryError: If any source path is a directory
        FileExistsError: If two sources share a file name, or a destination
            file already exists (nothing is copied)
        ActionError: On the first failed copy
    """
    target = Path(target_dir)
    if not target.exists():
        raise FileNotFoundError(errno.ENOENT, "Target directory does not exist", str(target))
    if not target.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, "Target is not a directory", str(target))

    ordered = sorted(str(p) for p in paths)
    _refuse_directories(ordered, 'copy')

    destinations: dict[Path, str] = {}
    for path in ordered:
        dest = target / Path(path).name
        if dest in destinations:
            raise FileExistsError(
                errno.EEXIST, f"Name collision with {destinations[dest]}", str(dest)
            )
        if dest.exists():
            raise FileExistsError(errno.EEXIST, "Destination already exists", str(dest))
        destinations[dest] = path

    copied: list[str] = []
    for dest, path in destinations.items():
        if dry_run:
            if logger:
                logger.info(f"[DRY RUN] Would copy: {path} -> {dest}")
            copied.append(str(dest))
            continue

        try:
            _copy_exclusive(path, dest, logger)
        except OSError as e:
            raise ActionError('copy', path, copied, e) from e

        copied.append(str(dest))
        if logger:
            logger.info(f"Copied: {path} -> {dest}")

    return copied


__all__ = ['ActionError', 'delete_files', 'copy_files']
