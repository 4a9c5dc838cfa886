"""
Pillow-backed image decoding and probing.
Decodes exactly what is stored in the stream; orientation is left to callers.
"""
from typing import BinaryIO, List, Optional, Tuple
from PIL import Image
import logging

from ..core.formats import format_name
from ..core.interfaces import IImageBackend, ImageConfig

logger = logging.getLogger(__name__)


class PillowBackend(IImageBackend):
    """General-purpose decoder and prober built on PIL.Image.open."""

    def __init__(self, formats: Optional[List[str]] = None):
        self.formats = list(formats) if formats else None

    def decode(self, stream: BinaryIO) -> Tuple[Image.Image, str]:
        """Decode all pixel data. Pillow errors propagate unchanged."""
        img = Image.open(stream, formats=self.formats)
        img.load()
        return img, format_name(img.format)

    def probe_config(self, stream: BinaryIO) -> Tuple[ImageConfig, str]:
        """Read the image header only; no pixel data is decoded."""
        with Image.open(stream, formats=self.formats) as img:
            config = ImageConfig(width=img.width, height=img.height, mode=img.mode)
            return config, format_name(img.format)
