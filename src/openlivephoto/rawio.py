import os
import logging
from typing import BinaryIO

from .errors import TruncatedInputError

logger = logging.getLogger(__name__)

def _long(p: str) -> str:
    # Windows long path prefix
    if os.name == "nt":
        ap = os.path.abspath(p)
        if not ap.startswith("\\\\?\\"):
            ap = "\\\\?\\" + ap
        return ap
    return p

def read_exact(stream: BinaryIO, size: int, what: str = "data") -> bytes:
    """Read exactly ``size`` bytes or raise :class:`TruncatedInputError`."""
    data = stream.read(size)
    if len(data) < size:
        raise TruncatedInputError(
            f"expected {size} bytes of {what} at 0x{stream.tell() - len(data):x}, got {len(data)}"
        )
    return data

def stream_length(stream: BinaryIO) -> int:
    """Return the total length of a seekable stream, keeping its cursor."""
    cur = stream.tell()
    total = stream.seek(0, os.SEEK_END)
    stream.seek(cur, os.SEEK_SET)
    return total

def extract_range(source: str, start: int, end: int, dest: str) -> int:
    """Copy the inclusive byte range ``[start, end]`` of ``source`` into ``dest``.

    ``end`` is clamped to the last byte of the source. The range is read in
    full before ``dest`` is created, so a short source never leaves a
    destination file behind. An existing ``dest`` is replaced.

    Returns the number of bytes written.
    """
    with open(source, "rb") as fi:
        total = stream_length(fi)
        if end > total - 1:
            end = total - 1
        length = end - start + 1
        if length < 1:
            raise TruncatedInputError(
                f"source shorter than expected: {source} has {total} bytes, range starts at {start}"
            )
        fi.seek(start, os.SEEK_SET)
        data = fi.read(length)
    if len(data) < length:
        raise TruncatedInputError(
            f"source shorter than expected: read {len(data)} of {length} bytes from {source}"
        )
    with open(_long(dest), "wb") as fo:
        fo.write(data)
    logger.debug("Copied %s [%d, %d] -> %s", source, start, end, dest)
    return length
