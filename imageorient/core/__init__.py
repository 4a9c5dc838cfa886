"""
Core module - Interfaces, data types, and stream replay for imageorient.
"""
from .interfaces import (
    # Enums
    Transform,
    ByteOrder,

    # Data classes
    ImageConfig,

    # Abstract interfaces
    IImageBackend,
    ITransformEngine,
    IOrientedDecoder,
)
from .stream import ReplayableSource, MAX_SCAN_BYTES, as_stream

__all__ = [
    # Enums
    "Transform",
    "ByteOrder",

    # Data classes
    "ImageConfig",

    # Abstract interfaces
    "IImageBackend",
    "ITransformEngine",
    "IOrientedDecoder",

    # Stream replay
    "ReplayableSource",
    "MAX_SCAN_BYTES",
    "as_stream",
]
