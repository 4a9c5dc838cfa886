"""
Image module for imageorient: scanning, orientation and Pillow backends.
"""
from .scanner import read_orientation, ORIENTATION_TAG
from .orientation import (
    ORIENTATION_TRANSFORMS,
    PillowTransformEngine,
    transform_for,
    fix_orientation,
    fix_dimensions,
    fix_config,
)
from .backend import PillowBackend
from .compare import max_gray_difference

__all__ = [
    'read_orientation',
    'ORIENTATION_TAG',
    'ORIENTATION_TRANSFORMS',
    'PillowTransformEngine',
    'transform_for',
    'fix_orientation',
    'fix_dimensions',
    'fix_config',
    'PillowBackend',
    'max_gray_difference',
]
