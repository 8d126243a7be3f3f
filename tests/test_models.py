"""
Unit tests for data models (HashRecord and Partition).
"""

import dataclasses

import pytest
from imgdedupe.models import HashRecord, Partition, format_size


class TestFormatSize:
    """Test the format_size utility function."""

    def test_bytes(self):
        assert format_size(500) == "500.0 B"

    def test_kilobytes(self):
        assert format_size(2048) == "2.0 KB"

    def test_megabytes(self):
        assert format_size(5242880) == "5.0 MB"

    def test_gigabytes(self):
        assert format_size(3221225472) == "3.0 GB"

    def test_zero(self):
        assert format_size(0) == "0.0 B"


class TestHashRecord:
    """Test HashRecord data class."""

    def test_creation(self):
        record = HashRecord(path="/test/image.jpg", fingerprint="ffff0000ffff0000")
        assert record.path == "/test/image.jpg"
        assert record.fingerprint == "ffff0000ffff0000"

    def test_immutable(self):
        record = HashRecord(path="/a.jpg", fingerprint="00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.path = "/b.jpg"

    def test_hash_and_equality(self):
        assert HashRecord("/a.jpg", "00") == HashRecord("/a.jpg", "00")
        assert HashRecord("/a.jpg", "00") != HashRecord("/a.jpg", "01")
        assert len({HashRecord("/a.jpg", "00"), HashRecord("/a.jpg", "00")}) == 1


class TestPartition:
    """Test Partition data class."""

    def test_empty(self):
        partition = Partition()
        assert partition.original_count == 0
        assert partition.duplicate_count == 0
        assert partition.total_count == 0

    def test_counts(self):
        partition = Partition(originals={'a', 'c'}, duplicates={'b'})
        assert partition.original_count == 2
        assert partition.duplicate_count == 1
        assert partition.total_count == 3

    def test_potential_savings(self, temp_dir):
        dupe = temp_dir / "dupe.jpg"
        dupe.write_bytes(b"x" * 1500)
        partition = Partition(originals={'/kept.jpg'}, duplicates={str(dupe), '/gone.jpg'})
        assert partition.potential_savings == 1500
