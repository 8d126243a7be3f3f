"""
CLI workflow orchestration for imgdedupe.

Provides the CLIOrchestrator class that coordinates the entire CLI workflow
from argument parsing through hashing, resolution, reporting, and actions.
"""

from __future__ import annotations

import logging

from ..scanner import (
    AggregationError,
    find_image_files,
    get_total_size,
    hash_images_parallel,
    make_fingerprinter,
    resolve_duplicates,
)
from ..utils.formatters import format_size
from ..utils.validators import validate_directory
from .arg_parser import parse_arguments
from .interactive import prompt_for_directory, confirm_action
from .reporting import print_partition_report
from .actions import ActionError, copy_files, delete_files


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI workflow.

    Manages the complete lifecycle from argument parsing through duplicate
    resolution, reporting, and action execution.
    """

    def __init__(self, argv=None):
        """
        Initialize the orchestrator.

        Args:
            argv: Argument list to parse instead of sys.argv
        """
        self.argv = argv
        self.logger = None
        self.args = None
        self.fingerprinter = None
        self.image_files = []
        self.records = []
        self.partition = None

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Interactive prompts (if needed)
        3. Validation
        4. File scanning
        5. Parallel hashing
        6. Duplicate resolution & reporting
        7. Action execution
        """
        self._setup_phase()

        self._interactive_phase()

        exit_code = self._validate_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._scan_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._hash_phase()
        if exit_code != 0:
            return exit_code

        self._resolve_phase()
        self._report_phase()

        if self.args.action != 'report':
            return self._action_phase()

        return 0

    def _setup_phase(self) -> None:
        """Phase 1: Parse arguments and setup logging."""
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

    def _interactive_phase(self) -> None:
        """Phase 2: Handle interactive directory prompt if needed."""
        if self.args.directory is None:
            self.args.directory = prompt_for_directory()

    def _validate_phase(self) -> int:
        """
        Phase 3: Validate arguments and check prerequisites.

        Returns:
            0 for success, 1 for validation error
        """
        is_valid, error_msg = validate_directory(self.args.directory)
        if not is_valid:
            self.logger.error(error_msg)
            return 1

        if self.args.workers < 1:
            self.logger.error(f"--workers must be at least 1, got {self.args.workers}")
            return 1

        try:
            self.fingerprinter = make_fingerprinter(self.args.hash_algorithm, self.args.hash_size)
        except ValueError as e:
            self.logger.error(str(e))
            return 1

        if self.args.action == 'copy':
            if not self.args.target_dir:
                self.logger.error("--target-dir required for 'copy' action")
                return 1
            is_valid, error_msg = validate_directory(self.args.target_dir)
            if not is_valid:
                self.logger.error(f"Invalid --target-dir: {error_msg}")
                return 1

        return 0

    def _scan_phase(self) -> int:
        """
        Phase 4: Scan for image files.

        Returns:
            0 for success, non-zero if no images found
        """
        self.logger.info(f"Scanning {self.args.directory} for images...")

        recursive = not self.args.no_recursive
        self.image_files = find_image_files(self.args.directory, recursive=recursive)

        self.logger.info(
            f"Found {len(self.image_files):,} image files "
            f"({format_size(get_total_size(self.image_files))})"
        )

        if not self.image_files:
            self.logger.info("No images found. Exiting.")
            return 1

        return 0

    def _hash_phase(self) -> int:
        """
        Phase 5: Fingerprint images in parallel.

        Returns:
            0 for success, 1 if a hash worker failed
        """
        try:
            self.records = hash_images_parallel(
                self.image_files,
                max_workers=self.args.workers,
                fingerprint_file=self.fingerprinter,
                show_progress=not self.args.no_progress,
                logger=self.logger,
            )
        except AggregationError as e:
            self.logger.error(f"Hashing failed, no files were classified: {e}")
            return 1
        return 0

    def _resolve_phase(self) -> None:
        """Phase 6: Elect one original per fingerprint."""
        records = self.records
        if self.args.sort_records:
            records = sorted(records, key=lambda record: record.path)

        self.partition = resolve_duplicates(records, logger=self.logger)

    def _report_phase(self) -> None:
        """Phase 6b: Display the report."""
        print_partition_report(
            self.partition,
            scanned=len(self.image_files),
            skipped=len(self.image_files) - len(self.records),
            verbose=self.args.verbose,
        )

    def _action_phase(self) -> int:
        """
        Phase 7: Delete duplicates or copy originals.

        Returns:
            0 for success or user abort, 1 if the action failed
        """
        dry_run = not self.args.no_dry_run
        if self.args.action == 'delete':
            targets = self.partition.duplicates
        else:
            targets = self.partition.originals

        if not targets:
            self.logger.info(f"Nothing to {self.args.action}.")
            return 0

        if dry_run:
            self.logger.info("[DRY RUN MODE - No files will be modified]")
        elif not confirm_action(self.args.action, len(targets), self.args.target_dir):
            self.logger.info("Aborted.")
            return 0

        try:
            if self.args.action == 'delete':
                done = delete_files(targets, dry_run=dry_run, logger=self.logger)
            else:
                done = copy_files(
                    targets, self.args.target_dir, dry_run=dry_run, logger=self.logger
                )
        except ActionError as e:
            self.logger.error(str(e))
            self.logger.info(f"Processed before failure: {len(e.completed):,} files")
            return 1
        except OSError as e:
            self.logger.error(f"Cannot {self.args.action}: {e}")
            return 1

        verb = 'Would process' if dry_run else 'Processed'
        self.logger.info(f"{verb}: {len(done):,} files")
        return 0


__all__ = ['CLIOrchestrator', 'setup_logging']
