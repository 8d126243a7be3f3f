"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image


def make_ramp(path, size=(100, 100), reverse=False, fmt=None):
    """
    Save a horizontal grayscale ramp.

    An increasing ramp has an all-ones dHash; a decreasing one is all zeros,
    at any resolution.
    """
    width, height = size
    img = Image.new('RGB', size)
    pixels = img.load()
    for x in range(width):
        value = x * 255 // max(1, width - 1)
        if reverse:
            value = 255 - value
        for y in range(height):
            pixels[x, y] = (value, value, value)
    img.save(path, fmt)
    return str(path)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a set of sample images for testing.

    Returns:
        dict with paths to:
        - a.jpg, b.jpg: identical 500x500 ramps (same fingerprint)
        - c.png: reversed ramp (unique fingerprint)
        - large.png: 1000x1000 ramp (same fingerprint as a/b, more pixels)
        - broken.png: not an image
        - notes.txt: not an image extension
    """
    images = {}

    images['a'] = make_ramp(temp_dir / "a.jpg", size=(500, 500), fmt='JPEG')
    shutil.copyfile(images['a'], temp_dir / "b.jpg")
    images['b'] = str(temp_dir / "b.jpg")

    images['c'] = make_ramp(temp_dir / "c.png", size=(200, 200), reverse=True)

    images['large'] = make_ramp(temp_dir / "large.png", size=(1000, 1000))

    broken = temp_dir / "broken.png"
    broken.write_bytes(b"this is not a png")
    images['broken'] = str(broken)

    notes = temp_dir / "notes.txt"
    notes.write_text("not an image")
    images['notes'] = str(notes)

    return images


@pytest.fixture
def e2e_dir(temp_dir):
    """Directory holding only a.jpg, b.jpg (same content) and c.png (unique)."""
    scan_dir = temp_dir / "photos"
    scan_dir.mkdir()
    make_ramp(scan_dir / "a.jpg", size=(500, 500), fmt='JPEG')
    shutil.copyfile(scan_dir / "a.jpg", scan_dir / "b.jpg")
    make_ramp(scan_dir / "c.png", size=(120, 80), reverse=True)
    return scan_dir
