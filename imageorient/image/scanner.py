"""
EXIF orientation scanner for JPEG streams.

Walks the JPEG segment chain up to the APP1 (EXIF) block and reads the
orientation tag from the first image file directory. Anything unexpected
(missing markers, bad framing, short reads, read errors, out-of-range
values) yields 0, meaning "no orientation hint".
"""
import logging
import struct
from typing import BinaryIO, Optional, Union

from ..core.interfaces import ByteOrder
from ..core.stream import BytesLike, as_stream

logger = logging.getLogger(__name__)

MARKER_SOI = 0xFFD8
MARKER_APP1 = 0xFFE1
MARKER_PREFIX = 0xFF
EXIF_HEADER = 0x45786966  # "Exif"
ORIENTATION_TAG = 0x0112

# Tag id (2) + type (2) + count (4) + value (4).
DIRECTORY_ENTRY_SIZE = 12
# Bytes of the TIFF header already consumed when the IFD0 offset is read.
TIFF_HEADER_SIZE = 8

ORIENTATION_UNKNOWN = 0

_SKIP_CHUNK = 64 * 1024


class _ShortRead(Exception):
    """Stream ended before the requested bytes were available."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise _ShortRead()
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _skip(stream: BinaryIO, size: int) -> None:
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(remaining, _SKIP_CHUNK))
        if not chunk:
            raise _ShortRead()
        remaining -= len(chunk)


def _read_u16(stream: BinaryIO, prefix: str = ">") -> int:
    return struct.unpack(f"{prefix}H", _read_exact(stream, 2))[0]


def _read_u32(stream: BinaryIO, prefix: str = ">") -> int:
    return struct.unpack(f"{prefix}I", _read_exact(stream, 4))[0]


def _find_app1(stream: BinaryIO) -> bool:
    """Advance the stream to the payload of the APP1 segment."""
    if _read_u16(stream) != MARKER_SOI:
        logger.debug("Missing JPEG SOI marker")
        return False

    while True:
        marker = _read_u16(stream)
        size = _read_u16(stream)
        if marker >> 8 != MARKER_PREFIX:
            logger.debug(f"Invalid JPEG marker 0x{marker:04x}")
            return False
        if marker == MARKER_APP1:
            return True
        if size < 2:
            logger.debug(f"Invalid size {size} for segment 0x{marker:04x}")
            return False
        _skip(stream, size - 2)


def _read_byte_order(stream: BinaryIO) -> Optional[ByteOrder]:
    """Check the EXIF header and return the TIFF byte order."""
    if _read_u32(stream) != EXIF_HEADER:
        logger.debug("APP1 segment is not EXIF")
        return None
    _skip(stream, 2)

    tag = _read_u16(stream)
    try:
        byte_order = ByteOrder(tag)
    except ValueError:
        logger.debug(f"Invalid TIFF byte order 0x{tag:04x}")
        return None
    # TIFF magic number, not checked.
    _skip(stream, 2)
    return byte_order


def _scan_directory(stream: BinaryIO, prefix: str) -> int:
    """Read IFD0 and return the orientation value, or 0."""
    offset = _read_u32(stream, prefix)
    if offset < TIFF_HEADER_SIZE:
        logger.debug(f"Invalid IFD0 offset {offset}")
        return ORIENTATION_UNKNOWN
    _skip(stream, offset - TIFF_HEADER_SIZE)

    count = _read_u16(stream, prefix)
    for _ in range(count):
        tag = _read_u16(stream, prefix)
        if tag != ORIENTATION_TAG:
            _skip(stream, DIRECTORY_ENTRY_SIZE - 2)
            continue
        # Type and count are not checked.
        _skip(stream, 6)
        value = _read_u16(stream, prefix)
        if not 1 <= value <= 8:
            logger.debug(f"Invalid orientation value {value}")
            return ORIENTATION_UNKNOWN
        return value

    logger.debug("No orientation tag in IFD0")
    return ORIENTATION_UNKNOWN


def read_orientation(stream: Union[BinaryIO, BytesLike]) -> int:
    """
    Read the EXIF orientation code from a JPEG stream.

    Only as many bytes as needed are consumed. Never raises for the
    stream's contents or for read errors: both yield 0.

    Args:
        stream: Readable binary stream positioned at the start of the
            image, or the image bytes

    Returns:
        Orientation code 1-8, or 0 if absent or invalid
    """
    stream = as_stream(stream)
    try:
        if not _find_app1(stream):
            return ORIENTATION_UNKNOWN
        byte_order = _read_byte_order(stream)
        if byte_order is None:
            return ORIENTATION_UNKNOWN
        return _scan_directory(stream, byte_order.prefix)
    except _ShortRead:
        logger.debug("Stream ended while scanning for orientation")
        return ORIENTATION_UNKNOWN
    except OSError as e:
        logger.debug(f"Read error while scanning for orientation: {e}")
        return ORIENTATION_UNKNOWN
