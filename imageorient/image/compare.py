"""
Pixel comparison helpers for checking orientation-corrected output.
"""
import numpy as np
from PIL import Image


def gray_pixels(img: Image.Image) -> np.ndarray:
    """Grayscale pixels as a signed array, indexed [y, x]."""
    return np.asarray(img.convert("L"), dtype=np.int16)


def max_gray_difference(a: Image.Image, b: Image.Image) -> int:
    """
    Largest absolute grayscale difference between two images of equal size.

    Lossy re-encoding leaves small differences even between images with
    the same content, so callers compare the result against a tolerance.
    """
    if a.size != b.size:
        raise ValueError(f"Image sizes differ: {a.size} vs {b.size}")
    if a.width == 0 or a.height == 0:
        return 0
    return int(np.abs(gray_pixels(a) - gray_pixels(b)).max())
