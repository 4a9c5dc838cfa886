"""
Abstract interfaces following Interface Segregation Principle (SOLID).
Defines contracts and value types shared by all imageorient components.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Tuple

from PIL import Image


class Transform(Enum):
    """Geometric transforms an EXIF orientation code can require."""
    IDENTITY = "identity"
    FLIP_HORIZONTAL = "flip_horizontal"
    ROTATE_180 = "rotate_180"
    FLIP_VERTICAL = "flip_vertical"
    TRANSPOSE = "transpose"
    ROTATE_270 = "rotate_270"
    TRANSVERSE = "transverse"
    ROTATE_90 = "rotate_90"

    @property
    def swaps_dimensions(self) -> bool:
        """True for the transforms with a quarter-turn component."""
        return self in (
            Transform.TRANSPOSE,
            Transform.ROTATE_270,
            Transform.TRANSVERSE,
            Transform.ROTATE_90,
        )


class ByteOrder(Enum):
    """TIFF byte order markers and their struct prefixes."""
    BIG_ENDIAN = 0x4D4D
    LITTLE_ENDIAN = 0x4949

    @property
    def prefix(self) -> str:
        return ">" if self is ByteOrder.BIG_ENDIAN else "<"


@dataclass(frozen=True)
class ImageConfig:
    """Image dimensions and color mode, as reported without decoding pixels."""
    width: int
    height: int
    mode: str = ""

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def swapped(self) -> "ImageConfig":
        """Return a copy with width and height exchanged."""
        return ImageConfig(width=self.height, height=self.width, mode=self.mode)


class IImageBackend(ABC):
    """Interface for the general-purpose image decoder and prober."""

    @abstractmethod
    def decode(self, stream: BinaryIO) -> Tuple[Image.Image, str]:
        """Decode a full image, returning it with its format name."""
        pass

    @abstractmethod
    def probe_config(self, stream: BinaryIO) -> Tuple[ImageConfig, str]:
        """Read dimensions and color mode without decoding pixel data."""
        pass


class ITransformEngine(ABC):
    """Interface for flipping and rotating decoded images."""

    @abstractmethod
    def apply(self, transform: Transform, image: Image.Image) -> Image.Image:
        """Return a new image with the transform applied."""
        pass


class IOrientedDecoder(ABC):
    """Interface for orientation-aware decoding."""

    @abstractmethod
    def decode(self, stream: BinaryIO) -> Tuple[Image.Image, str]:
        """Decode an image and correct it for its EXIF orientation."""
        pass

    @abstractmethod
    def decode_config(self, stream: BinaryIO) -> Tuple[ImageConfig, str]:
        """Probe an image and report its orientation-corrected dimensions."""
        pass
