"""
Pytest configuration and fixtures for imageorient tests.
"""
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Dict
from PIL import Image
import numpy as np


LOGICAL_WIDTH = 50
LOGICAL_HEIGHT = 70

# Transpose that turns the upright image into what a camera would store
# for each orientation code; applying the code's correction undoes it.
STORED_TRANSPOSE = {
    2: Image.Transpose.FLIP_LEFT_RIGHT,
    3: Image.Transpose.ROTATE_180,
    4: Image.Transpose.FLIP_TOP_BOTTOM,
    5: Image.Transpose.TRANSPOSE,
    6: Image.Transpose.ROTATE_90,
    7: Image.Transpose.TRANSVERSE,
    8: Image.Transpose.ROTATE_270,
}


def make_logical_image() -> Image.Image:
    """A 50x70 grayscale gradient with no symmetry."""
    pixels = np.fromfunction(
        lambda y, x: x * 3 + y * 1.4,
        (LOGICAL_HEIGHT, LOGICAL_WIDTH),
    )
    return Image.fromarray(pixels.astype(np.uint8))


def write_oriented_jpeg(path: Path, orientation: int) -> Path:
    """Store the logical image as a camera would for the given code."""
    img = make_logical_image()
    if orientation in STORED_TRANSPOSE:
        img = img.transpose(STORED_TRANSPOSE[orientation])

    if orientation:
        exif = Image.Exif()
        exif[0x0112] = orientation
        img.save(path, "JPEG", quality=100, exif=exif)
    else:
        img.save(path, "JPEG", quality=100)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="imageorient_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def logical_image() -> Image.Image:
    """The upright image every oriented fixture represents."""
    return make_logical_image()


@pytest.fixture
def oriented_jpegs(temp_dir) -> Dict[int, Path]:
    """JPEG files for orientation codes 0 (no EXIF) through 8."""
    return {
        code: write_oriented_jpeg(temp_dir / f"orientation_{code}.jpg", code)
        for code in range(9)
    }


@pytest.fixture
def png_image(temp_dir) -> Path:
    """Create a PNG image (never carries a JPEG APP1 segment)."""
    image_path = temp_dir / "plain.png"
    img = Image.new("RGB", (40, 30), color="blue")
    img.save(image_path, "PNG")
    return image_path
