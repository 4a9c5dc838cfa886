"""
Read-once, replay-once byte source.

A bounded prefix of the caller's stream is read through a scan view and
recorded; a single replay view then yields that prefix again followed
by the rest of the stream, so a metadata scanner and a full decoder both
see the original byte sequence while the underlying stream is read only
once.
"""
import io
import logging
from typing import BinaryIO, Optional, Union

logger = logging.getLogger(__name__)

# EXIF lives in the APP1 segment right after SOI, well inside this window.
MAX_SCAN_BYTES = 1 << 20

BytesLike = Union[bytes, bytearray, memoryview]


def as_stream(source: Union[BinaryIO, BytesLike]) -> BinaryIO:
    """Wrap raw bytes in a BytesIO; pass file objects through."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


class _ScanView(io.RawIOBase):
    """Capped view that records every byte it hands out."""

    def __init__(self, source: "ReplayableSource"):
        self._source = source

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed scan view")
        return self._source._scan_into(b)


class _ReplayView(io.RawIOBase):
    """Yields the recorded prefix, then the remainder of the stream."""

    def __init__(self, source: "ReplayableSource"):
        self._source = source
        self._pos = 0

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed replay view")
        n, self._pos = self._source._replay_into(b, self._pos)
        return n


class ReplayableSource:
    """
    Wraps a readable binary stream so its first ``limit`` bytes can be
    scanned once and replayed ahead of the remainder.

    Not thread-safe; build one per decode call.

    Example:
        with ReplayableSource(fp) as source:
            code = read_orientation(source.scan_view())
            img = Image.open(source.replay_view())
    """

    def __init__(self, stream: BinaryIO, limit: int = MAX_SCAN_BYTES):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {limit!r}")
        self._stream = stream
        self._limit = limit
        self._recorded = bytearray()
        self._scan: Optional[_ScanView] = None
        self._replaying = False
        self._closed = False

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def consumed(self) -> int:
        """Number of bytes read from the underlying stream by the scan view."""
        return len(self._recorded)

    @property
    def closed(self) -> bool:
        return self._closed

    def scan_view(self) -> io.RawIOBase:
        """
        Return the capped, recording view of the stream.

        Raises:
            ValueError: if replay has already started or the source is closed
        """
        self._check_open()
        if self._replaying:
            raise ValueError("cannot scan after replay has started")
        if self._scan is None:
            self._scan = _ScanView(self)
        return self._scan

    def replay_view(self) -> io.RawIOBase:
        """
        Return the view yielding the recorded prefix followed by the rest
        of the stream. Starting a replay closes the scan view.

        Raises:
            ValueError: if a replay view was already handed out or the
                source is closed
        """
        self._check_open()
        if self._replaying:
            raise ValueError("replay view already created")
        self._replaying = True
        if self._scan is not None:
            self._scan.close()
        logger.debug(f"Replaying {len(self._recorded)} scanned bytes")
        return _ReplayView(self)

    def close(self) -> None:
        """Release the recorded prefix. The caller's stream is left open."""
        if self._closed:
            return
        self._closed = True
        self._recorded = bytearray()
        if self._scan is not None:
            self._scan.close()

    def __enter__(self) -> "ReplayableSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed replayable source")

    def _scan_into(self, b) -> int:
        self._check_open()
        remaining = self._limit - len(self._recorded)
        if remaining <= 0 or len(b) == 0:
            return 0
        data = self._stream.read(min(len(b), remaining))
        if not data:
            return 0
        n = len(data)
        b[:n] = data
        self._recorded.extend(data)
        return n

    def _replay_into(self, b, pos: int):
        self._check_open()
        if len(b) == 0:
            return 0, pos
        recorded = len(self._recorded)
        if pos < recorded:
            n = min(len(b), recorded - pos)
            b[:n] = self._recorded[pos:pos + n]
            return n, pos + n
        data = self._stream.read(len(b))
        if not data:
            return 0, pos
        n = len(data)
        b[:n] = data
        return n, pos + n
