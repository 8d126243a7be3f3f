"""
Parallel processing module for the scanner package.

Splits the file list across a fixed pool of hash workers and merges their
records through a many-producer, single-consumer queue.

Every worker puts its records on the queue and then, always, a
ProducerClosed message. The aggregator returns only after it has seen one
ProducerClosed per worker, so a finished aggregate is never partial.
"""

from __future__ import annotations

import logging
import os
import queue
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, Any, Sequence

from ..config import DEFAULT_WORKERS, PROGRESS_POLL_INTERVAL, PROGRESS_BAR_FORMAT
from ..models import HashRecord
from .dependencies import HAS_TQDM, _tqdm_class, _logger
from .hashing import compute_fingerprint
from .splitter import split_work
from .worker import WorkerProgress, hash_chunk


class AggregationError(RuntimeError):
    """
    Raised when one or more hash workers failed.

    Attributes:
        failures: Mapping of worker index to the exception it raised
    """

    def __init__(self, failures: dict[int, BaseException]):
        self.failures = failures
        details = "; ".join(
            f"worker {index}: {type(exc).__name__}: {exc}"
            for index, exc in sorted(failures.items())
        )
        super().__init__(f"{len(failures)} hash worker(s) failed ({details})")


@dataclass(frozen=True)
class ProducerClosed:
    """Final message a worker puts on the result queue."""
    worker: int
    error: Optional[BaseException] = None


def effective_workers(requested: int) -> int:
    """
    Clamp a requested worker count to the host's available parallelism.

    Examples:
        >>> effective_workers(0)
        1
    """
    available = os.cpu_count() or 1
    return max(1, min(int(requested), available))


def _produce(
    index: int,
    chunk: Sequence[str],
    progress: WorkerProgress,
    channel: queue.Queue,
    fingerprint_file: Callable[[str], str],
) -> None:
    """Hash one chunk and push its records, then close this producer."""
    error: Optional[BaseException] = None
    try:
        for record in hash_chunk(chunk, progress=progress, fingerprint_file=fingerprint_file):
            channel.put(record)
    except BaseException as e:
        error = e
        raise
    finally:
        channel.put(ProducerClosed(worker=index, error=error))


def aggregate(
    channel: queue.Queue,
    producers: int,
    on_poll: Optional[Callable[[], None]] = None,
    poll_interval: float = PROGRESS_POLL_INTERVAL,
) -> list[HashRecord]:
    """
    Collect records from every producer on the channel.

    Args:
        channel: Queue receiving HashRecord and ProducerClosed messages
        producers: Number of producers that will close the channel
        on_poll: Optional callback run between messages (progress refresh)
        poll_interval: Seconds to wait for a message before polling

    Returns:
        All records, in arrival order (no ordering guarantee across workers)

    Raises:
        AggregationError: If any producer closed with an error
    """
    records: list[HashRecord] = []
    failures: dict[int, BaseException] = {}
    open_producers = producers

    while open_producers:
        try:
            message = channel.get(timeout=poll_interval)
        except queue.Empty:
            if on_poll is not None:
                on_poll()
            continue

        if isinstance(message, ProducerClosed):
            open_producers -= 1
            if message.error is not None:
                failures[message.worker] = message.error
        else:
            records.append(message)

        if on_poll is not None:
            on_poll()

    if failures:
        raise AggregationError(failures)

    return records


class _ProgressDisplay:
    """Polls worker progress handles into tqdm bars and a callback."""

    def __init__(
        self,
        handles: list[WorkerProgress],
        show_progress: bool,
        progress_callback: Optional[Callable[[int, int], None]],
    ):
        self.handles = handles
        self.progress_callback = progress_callback
        self.total = sum(handle.total for handle in handles)
        self._last_reported = -1
        self.bars: list[Any] = []

        if HAS_TQDM and show_progress and _tqdm_class is not None:
            for position, handle in enumerate(handles):
                self.bars.append(_tqdm_class(
                    total=handle.total,
                    desc=handle.label,
                    unit="img",
                    position=position,
                    bar_format=PROGRESS_BAR_FORMAT,
                    leave=True,
                ))

    def refresh(self) -> None:
        for bar, handle in zip(self.bars, self.handles):
            completed = handle.completed
            if completed != bar.n:
                bar.update(completed - bar.n)

        if self.progress_callback:
            completed = sum(handle.completed for handle in self.handles)
            if completed != self._last_reported:
                self._last_reported = completed
                self.progress_callback(completed, self.total)

    def close(self) -> None:
        self.refresh()
        for bar in self.bars:
            bar.close()


def hash_images_parallel(
    filepaths: Sequence[str],
    max_workers: int = DEFAULT_WORKERS,
    fingerprint_file: Callable[[str], str] = compute_fingerprint,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = True,
    logger: Optional[logging.Logger] = None,
) -> list[HashRecord]:
    """
    Fingerprint images across a pool of worker threads.

    Args:
        filepaths: Ordered list of image paths
        max_workers: Requested worker count (clamped to CPU count)
        fingerprint_file: Fingerprint provider for a single path
        progress_callback: Optional callback(completed, total) for progress updates
        show_progress: Whether to show one tqdm bar per worker
        logger: Optional logger for status messages

    Returns:
        One HashRecord per decodable image, in no particular order

    Raises:
        AggregationError: If any worker failed for a reason other than a
            bad image
    """
    if not filepaths:
        return []

    logger = logger or _logger
    workers = effective_workers(max_workers)
    if workers != max_workers:
        logger.debug(f"Clamped workers from {max_workers} to {workers}")

    chunks = split_work(filepaths, workers)
    handles = [
        WorkerProgress(total=len(chunk), label=f"Worker {index + 1}")
        for index, chunk in enumerate(chunks)
    ]
    channel: queue.Queue = queue.Queue()
    display = _ProgressDisplay(handles, show_progress, progress_callback)

    logger.info(f"Hashing {len(filepaths):,} images with {workers} worker(s)")

    try:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="hash-worker") as executor:
            for index, chunk in enumerate(chunks):
                executor.submit(_produce, index, chunk, handles[index], channel, fingerprint_file)

            records = aggregate(channel, producers=len(chunks), on_poll=display.refresh)
    finally:
        display.close()

    skipped = len(filepaths) - len(records)
    if skipped:
        logger.info(f"Skipped {skipped:,} file(s) that could not be decoded")

    return records


__all__ = [
    'AggregationError',
    'ProducerClosed',
    'aggregate',
    'effective_workers',
    'hash_images_parallel',
]
