"""
Segment scanners for the elements of a live photo container.

Each scanner takes a binary stream whose cursor sits at the first byte
of an element, walks the element using only its format framing and
returns the offset of the element's last byte. On return the cursor is
positioned one byte past that offset, which is where the next element
or separator begins.

The scanners are deliberately narrow. They trust the framing of the
container and do not validate checksums, chunk types or box contents:

* JPEG is walked marker segment by marker segment until the start of
  scan, after which the entropy coded data is searched for the end of
  image marker. Markers without a length field (restart markers, for
  instance) are not special-cased in the header section.
* PNG is walked chunk by chunk until the fixed zero-length ``IEND``
  chunk.
* MP4 has no structural end marker usable here and is always the last
  element, so it is assumed to extend to the end of the file.
"""

from __future__ import annotations

import os
from typing import BinaryIO

from .errors import FormatError, TruncatedInputError
from .rawio import read_exact
from .signatures import JPEG_SOI, JPEG_SOS, JPEG_EOI, PNG_SIGNATURE, PNG_IEND_CHUNK

DEFAULT_CHUNK = 64 * 1024

def scan_jpeg(stream: BinaryIO, chunk: int = DEFAULT_CHUNK) -> int:
    """Return the offset of the final ``D9`` byte of a JPEG element.

    Parameters
    ----------
    stream: BinaryIO
        Seekable stream positioned at the ``FF D8`` start of image marker.
    chunk: int, optional
        Block size used while searching the entropy coded data.

    Raises
    ------
    FormatError
        If the element does not start with ``FF D8`` or a header segment
        declares a length smaller than its own length field.
    TruncatedInputError
        If the stream ends before the end of image marker.
    """
    if read_exact(stream, 2, "JPEG start marker") != JPEG_SOI:
        raise FormatError(f"not a valid JPEG at 0x{stream.tell() - 2:x}")

    # header segments: marker, big-endian length (counting itself), payload
    while True:
        marker = read_exact(stream, 2, "JPEG marker")
        seg_len = int.from_bytes(read_exact(stream, 2, "JPEG segment length"), "big")
        if seg_len < 2:
            raise FormatError(
                f"JPEG segment {marker.hex()} at 0x{stream.tell() - 4:x} declares length {seg_len}"
            )
        stream.seek(seg_len - 2, os.SEEK_CUR)
        if marker == JPEG_SOS:
            break

    # entropy coded data: first FF D9 pair, the byte before the data counts as 00
    carry = b"\x00"
    pos = stream.tell()
    while True:
        block = stream.read(chunk)
        if not block:
            raise TruncatedInputError(f"JPEG end of image marker not found before 0x{pos:x}")
        buf = carry + block
        idx = buf.find(JPEG_EOI)
        if idx >= 0:
            # buf[0] sits at pos - 1, so the D9 byte sits at pos + idx
            end = pos + idx
            stream.seek(end + 1, os.SEEK_SET)
            return end
        carry = buf[-1:]
        pos += len(block)

def scan_png(stream: BinaryIO) -> int:
    """Return the offset of the final CRC byte of a PNG ``IEND`` chunk.

    The 12-byte lookahead covers the chunk length, the chunk type and the
    first 4 data bytes. Skipping the declared data length from there lands
    on the next chunk because the 4 trailing CRC bytes balance the 4 data
    bytes already consumed.
    """
    if read_exact(stream, len(PNG_SIGNATURE), "PNG signature") != PNG_SIGNATURE:
        raise FormatError(f"not a valid PNG at 0x{stream.tell() - len(PNG_SIGNATURE):x}")
    while True:
        head = read_exact(stream, len(PNG_IEND_CHUNK), "PNG chunk header")
        if head == PNG_IEND_CHUNK:
            return stream.tell() - 1
        data_len = int.from_bytes(head[:4], "big", signed=False)
        stream.seek(data_len, os.SEEK_CUR)

def scan_mp4(stream: BinaryIO) -> int:
    """Return the offset of the last byte of the stream."""
    return stream.seek(0, os.SEEK_END) - 1
