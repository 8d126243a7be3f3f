"""
Interactive prompts for the CLI interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def prompt_for_directory() -> Path:
    """
    Ask for the directory to scan until an existing directory is given.

    Surrounding quotes (common when copy-pasting) are stripped.
    """
    print("\nimgdedupe: no directory given")

    while True:
        dir_input = input("Directory to scan: ").strip().strip('"\'')
        if not dir_input:
            continue

        directory = Path(dir_input).expanduser()
        if directory.is_dir():
            return directory
        print(f"Not a directory: {directory}")


def confirm_action(action: str, count: int, target_dir: Optional[Path] = None) -> bool:
    """
    Prompt user to confirm a file action.

    Args:
        action: 'delete' or 'copy'
        count: Number of files that will be affected
        target_dir: Destination shown for copies

    Returns:
        True if user confirms (types 'y'), False otherwise

    Examples:
        >>> confirm_action('delete', 42)
        Permanently delete 42 duplicate files? [y/N]: y
        True
    """
    if action == 'delete':
        question = f"Permanently delete {count:,} duplicate files?"
    else:
        question = f"Copy {count:,} original files to {target_dir}?"
    answer = input(f"\n{question} [y/N]: ")
    return answer.strip().lower() == 'y'


__all__ = [
    'prompt_for_directory',
    'confirm_action',
]
