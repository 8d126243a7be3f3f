"""
Unit tests for parallel hashing and result aggregation.
"""

import queue
import threading

import pytest

from imgdedupe.models import HashRecord
from imgdedupe.scanner import (
    AggregationError,
    ImageDecodeError,
    ProducerClosed,
    aggregate,
    effective_workers,
    hash_images_parallel,
    resolve_duplicates,
)
from imgdedupe.scanner import parallel


def fake_fingerprint(path):
    if path.endswith('.bad'):
        raise ImageDecodeError(path, "corrupt")
    return f"fp:{path}"


class TestEffectiveWorkers:
    """Test effective_workers clamping."""

    def test_clamps_to_cpu_count(self, monkeypatch):
        monkeypatch.setattr(parallel.os, 'cpu_count', lambda: 2)
        assert effective_workers(8) == 2
        assert effective_workers(1) == 1

    def test_at_least_one(self, monkeypatch):
        monkeypatch.setattr(parallel.os, 'cpu_count', lambda: None)
        assert effective_workers(4) == 1
        assert effective_workers(0) == 1


class TestAggregate:
    """Test aggregate function."""

    def test_collects_interleaved_producers(self):
        channel = queue.Queue()
        channel.put(HashRecord('a', '1'))
        channel.put(HashRecord('c', '3'))
        channel.put(ProducerClosed(worker=1))
        channel.put(HashRecord('b', '2'))
        channel.put(ProducerClosed(worker=0))

        records = aggregate(channel, producers=2)

        assert set(records) == {HashRecord('a', '1'), HashRecord('b', '2'), HashRecord('c', '3')}

    def test_waits_for_every_producer(self):
        """Records sent after the first close are still collected."""
        channel = queue.Queue()
        release = threading.Event()

        def late_producer():
            release.wait()
            channel.put(HashRecord('late', 'x'))
            channel.put(ProducerClosed(worker=1))

        channel.put(ProducerClosed(worker=0))
        thread = threading.Thread(target=late_producer)
        thread.start()

        polls = []

        def on_poll():
            polls.append(1)
            release.set()

        records = aggregate(channel, producers=2, on_poll=on_poll, poll_interval=0.01)
        thread.join()

        assert records == [HashRecord('late', 'x')]
        assert polls

    def test_failed_producer_raises(self):
        channel = queue.Queue()
        channel.put(HashRecord('a', '1'))
        channel.put(ProducerClosed(worker=0))
        channel.put(ProducerClosed(worker=1, error=RuntimeError("boom")))

        with pytest.raises(AggregationError) as excinfo:
            aggregate(channel, producers=2)

        assert set(excinfo.value.failures) == {1}
        assert "boom" in str(excinfo.value)

    def test_zero_producers(self):
        assert aggregate(queue.Queue(), producers=0) == []


class TestHashImagesParallel:
    """Test hash_images_parallel function."""

    def test_every_file_hashed_once(self):
        paths = [f"/photos/{i:03d}.jpg" for i in range(57)]
        records = hash_images_parallel(
            paths, max_workers=4, fingerprint_file=fake_fingerprint, show_progress=False
        )
        assert len(records) == len(paths)
        assert {r.path for r in records} == set(paths)

    def test_undecodable_files_are_skipped(self):
        paths = ['/p/1.jpg', '/p/2.bad', '/p/3.jpg', '/p/4.bad', '/p/5.jpg']
        records = hash_images_parallel(
            paths, max_workers=3, fingerprint_file=fake_fingerprint, show_progress=False
        )
        assert {r.path for r in records} == {'/p/1.jpg', '/p/3.jpg', '/p/5.jpg'}

    def test_worker_failure_is_fatal(self):
        def flaky(path):
            if path == '/p/3.jpg':
                raise RuntimeError("decoder crashed")
            return fake_fingerprint(path)

        paths = [f"/p/{i}.jpg" for i in range(8)]
        with pytest.raises(AggregationError):
            hash_images_parallel(paths, max_workers=4, fingerprint_file=flaky, show_progress=False)

    def test_progress_callback_reaches_total(self):
        calls = []
        paths = [f"/p/{i}.jpg" for i in range(10)] + ['/p/x.bad']
        hash_images_parallel(
            paths,
            max_workers=2,
            fingerprint_file=fake_fingerprint,
            progress_callback=lambda done, total: calls.append((done, total)),
            show_progress=False,
        )
        assert calls[-1] == (11, 11)
        assert [done for done, _ in calls] == sorted(done for done, _ in calls)

    def test_more_workers_than_files(self):
        records = hash_images_parallel(
            ['/p/only.jpg'], max_workers=16, fingerprint_file=fake_fingerprint, show_progress=False
        )
        assert records == [HashRecord('/p/only.jpg', 'fp:/p/only.jpg')]

    def test_empty_input(self):
        assert hash_images_parallel([], show_progress=False) == []

    def test_real_images(self, sample_images):
        paths = [sample_images[key] for key in ('a', 'b', 'c', 'large', 'broken')]
        records = hash_images_parallel(paths, max_workers=2, show_progress=False)

        by_path = {r.path: r.fingerprint for r in records}
        assert set(by_path) == {sample_images[k] for k in ('a', 'b', 'c', 'large')}
        assert by_path[sample_images['a']] == by_path[sample_images['b']]
        assert by_path[sample_images['a']] != by_path[sample_images['c']]


class TestEndToEnd:
    """Hash then resolve a small directory."""

    def test_one_of_identical_pair_is_duplicate(self, e2e_dir):
        a, b, c = (str(e2e_dir / name) for name in ("a.jpg", "b.jpg", "c.png"))

        records = hash_images_parallel([a, b, c], max_workers=2, show_progress=False)
        partition = resolve_duplicates(records)

        assert c in partition.originals
        assert len(partition.originals) == 2
        assert len(partition.duplicates) == 1
        assert partition.originals | partition.duplicates == {a, b, c}
        assert not ({a, b} <= partition.originals)
