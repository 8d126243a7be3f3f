"""
CLI package for imgdedupe.

Provides the command-line interface for scanning a directory and deleting
duplicates or copying originals.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- delete_files / copy_files: File actions on the resolved partition
- print_partition_report: Function to display results report
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .actions import ActionError, delete_files, copy_files
from .reporting import print_partition_report
from .interactive import prompt_for_directory, confirm_action


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'ActionError',
    'delete_files',
    'copy_files',
    'print_partition_report',
    'prompt_for_directory',
    'confirm_action',
]
