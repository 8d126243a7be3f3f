"""
Unit tests for file discovery.
"""

from pathlib import Path

from PIL import Image

from imgdedupe.scanner import find_image_files, get_total_size


class TestFindImageFiles:
    """Test find_image_files function."""

    def test_finds_images_not_text(self, sample_images, temp_dir):
        files = find_image_files(temp_dir, recursive=False)
        names = {Path(f).name for f in files}
        assert names == {"a.jpg", "b.jpg", "c.png", "large.png", "broken.png"}

    def test_extension_match_is_case_insensitive(self, temp_dir):
        Image.new('RGB', (4, 4)).save(temp_dir / "UPPER.JPG", 'JPEG')
        files = find_image_files(temp_dir)
        assert [Path(f).name for f in files] == ["UPPER.JPG"]

    def test_recursive_search(self, temp_dir):
        subdir = temp_dir / "subdir"
        subdir.mkdir()
        Image.new('RGB', (10, 10), color='green').save(subdir / "test.png")

        files = find_image_files(temp_dir, recursive=True)
        assert str((subdir / "test.png").resolve()) in files

        files_non_recursive = find_image_files(temp_dir, recursive=False)
        assert files_non_recursive == []

    def test_returns_absolute_paths(self, sample_images, temp_dir):
        assert all(Path(f).is_absolute() for f in find_image_files(temp_dir))

    def test_empty_directory(self, temp_dir):
        empty_dir = temp_dir / "empty"
        empty_dir.mkdir()
        assert find_image_files(empty_dir) == []


class TestGetTotalSize:
    """Test get_total_size function."""

    def test_sums_sizes(self, temp_dir):
        (temp_dir / "x.jpg").write_bytes(b"1" * 100)
        (temp_dir / "y.jpg").write_bytes(b"2" * 50)
        assert get_total_size([str(temp_dir / "x.jpg"), str(temp_dir / "y.jpg")]) == 150

    def test_missing_files_count_as_zero(self, temp_dir):
        (temp_dir / "x.jpg").write_bytes(b"1" * 10)
        assert get_total_size([str(temp_dir / "x.jpg"), "/nonexistent.jpg"]) == 10
