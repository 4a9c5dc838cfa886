"""
imageorient - Orientation-aware image decoding.

Decodes images with Pillow and corrects them for the EXIF orientation tag
(if present):
- Scans the JPEG APP1 segment for the orientation code without consuming
  the stream irreversibly
- Replays the scanned bytes into the decoder
- Flips/rotates the decoded image, or swaps the probed dimensions

Example usage:
    import imageorient

    with open("photo.jpg", "rb") as f:
        img, format_name = imageorient.decode(f)

    with open("photo.jpg", "rb") as f:
        config, format_name = imageorient.decode_config(f)
    print(f"{config.width}x{config.height} {format_name}")
"""

from .decoder import (
    OrientedDecoder,
    DecoderConfig,
    decode,
    decode_config,
    decode_file,
    decode_config_file,
)
from .core.interfaces import (
    Transform,
    ByteOrder,
    ImageConfig,
)
from .core.stream import ReplayableSource, MAX_SCAN_BYTES
from .image import (
    read_orientation,
    ORIENTATION_TRANSFORMS,
    PillowBackend,
    PillowTransformEngine,
    transform_for,
    fix_orientation,
    fix_dimensions,
    fix_config,
)
from .core.formats import format_name

__version__ = "1.0.0"

__all__ = [
    # Main facade
    "OrientedDecoder",
    "DecoderConfig",
    "decode",
    "decode_config",
    "decode_file",
    "decode_config_file",

    # Core types
    "Transform",
    "ByteOrder",
    "ImageConfig",

    # Stream replay
    "ReplayableSource",
    "MAX_SCAN_BYTES",

    # Orientation
    "read_orientation",
    "ORIENTATION_TRANSFORMS",
    "transform_for",
    "fix_orientation",
    "fix_dimensions",
    "fix_config",

    # Pillow collaborators
    "PillowBackend",
    "PillowTransformEngine",

    # Formats
    "format_name",
]
