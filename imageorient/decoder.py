"""
OrientedDecoder - Main facade for orientation-aware decoding.
Scans the EXIF orientation, replays the stream into the decoder,
and corrects the result. Follows Facade Pattern for simplified API.
"""
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union
from dataclasses import dataclass
from PIL import Image
import logging

from .core.interfaces import (
    IImageBackend,
    IOrientedDecoder,
    ITransformEngine,
    ImageConfig,
)
from .core.stream import MAX_SCAN_BYTES, BytesLike, ReplayableSource, as_stream
from .image.backend import PillowBackend
from .image.orientation import PillowTransformEngine, fix_config, fix_orientation
from .image.scanner import read_orientation

logger = logging.getLogger(__name__)


@dataclass
class DecoderConfig:
    """Configuration for orientation-aware decoding."""
    max_scan_bytes: int = MAX_SCAN_BYTES
    formats: Optional[List[str]] = None

    def __post_init__(self):
        if isinstance(self.max_scan_bytes, bool) or not isinstance(self.max_scan_bytes, int):
            raise ValueError(f"max_scan_bytes must be an integer, got {self.max_scan_bytes!r}")
        if self.max_scan_bytes <= 0:
            raise ValueError(f"max_scan_bytes must be positive, got {self.max_scan_bytes}")


class OrientedDecoder(IOrientedDecoder):
    """
    Decodes images and corrects them for their EXIF orientation.

    Orientation is best effort: a missing or corrupt EXIF block decodes the
    image as stored, and decoder errors propagate exactly as Pillow raises them.

    Example:
        decoder = OrientedDecoder()

        with open("photo.jpg", "rb") as f:
            img, format_name = decoder.decode(f)

        config, _ = decoder.decode_config_file(Path("photo.jpg"))
        print(f"{config.width}x{config.height}")
    """

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        backend: Optional[IImageBackend] = None,
        engine: Optional[ITransformEngine] = None
    ):
        self.config = config or DecoderConfig()
        self.backend = backend or PillowBackend(self.config.formats)
        self.engine = engine or PillowTransformEngine()

    def decode(self, stream: Union[BinaryIO, BytesLike]) -> Tuple[Image.Image, str]:
        """
        Decode an image and apply its EXIF orientation.

        Args:
            stream: Readable binary stream or image bytes

        Returns:
            Tuple of (corrected image, lowercase format name)
        """
        with ReplayableSource(as_stream(stream), self.config.max_scan_bytes) as source:
            orientation = read_orientation(source.scan_view())
            try:
                img, format_name = self.backend.decode(source.replay_view())
            except Exception as e:
                logger.debug(f"Decoding failed: {e}")
                raise

        return fix_orientation(img, orientation, self.engine), format_name

    def decode_config(self, stream: Union[BinaryIO, BytesLike]) -> Tuple[ImageConfig, str]:
        """
        Probe dimensions and color mode, swapping width and height for
        orientations that rotate the image a quarter turn.

        Args:
            stream: Readable binary stream or image bytes

        Returns:
            Tuple of (corrected config, lowercase format name)
        """
        with ReplayableSource(as_stream(stream), self.config.max_scan_bytes) as source:
            orientation = read_orientation(source.scan_view())
            try:
                config, format_name = self.backend.probe_config(source.replay_view())
            except Exception as e:
                logger.debug(f"Probing failed: {e}")
                raise

        return fix_config(config, orientation), format_name

    def orientation(self, stream: Union[BinaryIO, BytesLike]) -> int:
        """Read the orientation code only. Consumes up to max_scan_bytes of the stream."""
        with ReplayableSource(as_stream(stream), self.config.max_scan_bytes) as source:
            return read_orientation(source.scan_view())

    def decode_file(self, image_path: Path) -> Tuple[Image.Image, str]:
        """Decode an image file with orientation correction."""
        with open(image_path, "rb") as f:
            return self.decode(f)

    def decode_config_file(self, image_path: Path) -> Tuple[ImageConfig, str]:
        """Probe an image file with orientation correction."""
        with open(image_path, "rb") as f:
            return self.decode_config(f)


_default_decoder = OrientedDecoder()


def decode(stream: Union[BinaryIO, BytesLike]) -> Tuple[Image.Image, str]:
    """Decode an image and correct it for its EXIF orientation."""
    return _default_decoder.decode(stream)


def decode_config(stream: Union[BinaryIO, BytesLike]) -> Tuple[ImageConfig, str]:
    """Probe an image's orientation-corrected dimensions and color mode."""
    return _default_decoder.decode_config(stream)


def decode_file(image_path: Path) -> Tuple[Image.Image, str]:
    """Decode an image file and correct it for its EXIF orientation."""
    return _default_decoder.decode_file(image_path)


def decode_config_file(image_path: Path) -> Tuple[ImageConfig, str]:
    """Probe an image file's orientation-corrected dimensions and color mode."""
    return _default_decoder.decode_config_file(image_path)
