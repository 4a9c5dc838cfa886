"""
Image orientation correction using EXIF orientation codes.
Follows Single Responsibility Principle - only handles orientation.
"""
from types import MappingProxyType
from typing import Optional, Tuple
from PIL import Image
import logging

from ..core.interfaces import ImageConfig, ITransformEngine, Transform

logger = logging.getLogger(__name__)


ORIENTATION_TRANSFORMS = MappingProxyType({
    0: Transform.IDENTITY,
    1: Transform.IDENTITY,
    2: Transform.FLIP_HORIZONTAL,
    3: Transform.ROTATE_180,
    4: Transform.FLIP_VERTICAL,
    5: Transform.TRANSPOSE,
    6: Transform.ROTATE_270,
    7: Transform.TRANSVERSE,
    8: Transform.ROTATE_90,
})


class PillowTransformEngine(ITransformEngine):
    """Flips and rotates PIL images with Image.transpose."""

    _TRANSPOSE = MappingProxyType({
        Transform.FLIP_HORIZONTAL: Image.Transpose.FLIP_LEFT_RIGHT,
        Transform.ROTATE_180: Image.Transpose.ROTATE_180,
        Transform.FLIP_VERTICAL: Image.Transpose.FLIP_TOP_BOTTOM,
        Transform.TRANSPOSE: Image.Transpose.TRANSPOSE,
        Transform.ROTATE_270: Image.Transpose.ROTATE_270,
        Transform.TRANSVERSE: Image.Transpose.TRANSVERSE,
        Transform.ROTATE_90: Image.Transpose.ROTATE_90,
    })

    def apply(self, transform: Transform, image: Image.Image) -> Image.Image:
        if transform is Transform.IDENTITY:
            return image
        return image.transpose(self._TRANSPOSE[transform])


_default_engine = PillowTransformEngine()


def transform_for(orientation: int) -> Transform:
    """Map an orientation code to its transform; unknown codes are identity."""
    return ORIENTATION_TRANSFORMS.get(orientation, Transform.IDENTITY)


def fix_orientation(
    image: Image.Image,
    orientation: int,
    engine: Optional[ITransformEngine] = None
) -> Image.Image:
    """
    Correct a decoded image for its orientation code.

    Args:
        image: Decoded image as stored in the file
        orientation: EXIF orientation code (0-8)
        engine: Transform engine (defaults to Pillow)

    Returns:
        The same image for codes 0 and 1, otherwise a new transformed image
    """
    transform = transform_for(orientation)
    if transform is Transform.IDENTITY:
        return image

    logger.debug(f"Applying {transform.value} for orientation {orientation}")
    return (engine or _default_engine).apply(transform, image)


def fix_dimensions(width: int, height: int, orientation: int) -> Tuple[int, int]:
    """Return (width, height) as displayed after orientation correction."""
    if transform_for(orientation).swaps_dimensions:
        return height, width
    return width, height


def fix_config(config: ImageConfig, orientation: int) -> ImageConfig:
    """Return the config with dimensions swapped when the code requires it."""
    if transform_for(orientation).swaps_dimensions:
        return config.swapped()
    return config
