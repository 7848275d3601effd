"""
Live photo container parser.

A live photo is a single file holding a still image (JPEG or PNG)
followed by a video (MP4), with the vendor marker ``LIVE_CVR`` in
between. The file has no index or length table, so the parser walks it
once from the start: it peeks 8 bytes at the cursor, hands the stream to
the scanner for the recognised element and records the byte range the
scanner reports. Separators are skipped and never recorded.

Only containers whose video comes last are supported. Anything the
8-byte lookahead does not recognise fails the whole parse.
"""

from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import FormatError
from .rawio import read_exact, stream_length
from .scanner import DEFAULT_CHUNK, scan_jpeg, scan_png, scan_mp4
from .signatures import (
    ElementKind, JPEG, PNG, MP4, LOOKAHEAD,
    JPEG_SOI, PNG_SIGNATURE, MP4_FTYP, MP4_FTYP_OFFSET, LIVE_SEPARATOR,
)

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Element:
    """One embedded image or video.

    Attributes
    ----------
    kind: ElementKind
        Format of the element.
    start: int
        Offset of the first byte of the element in the container.
    end: int
        Offset of the last byte of the element. Both offsets are
        inclusive.
    """
    kind: ElementKind
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

@dataclass(frozen=True)
class Container:
    """A parsed live photo: its path and its elements in file order."""
    path: str
    elements: Tuple[Element, ...] = ()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def first_of(self, kind: ElementKind) -> Optional[Element]:
        """Return the first element of ``kind`` or ``None``."""
        for el in self.elements:
            if el.kind == kind:
                return el
        return None

    def kinds(self) -> List[ElementKind]:
        return [el.kind for el in self.elements]

class ContainerParser:
    """Split a live photo container into its elements."""

    def __init__(self, chunk: int = DEFAULT_CHUNK) -> None:
        """Create a parser.

        Parameters
        ----------
        chunk: int, optional
            Read block size used while searching JPEG entropy data for
            the end of image marker. Values below 4096 are raised to
            4096.
        """
        self.chunk = max(4096, chunk)

    def parse(self, path: str) -> Container:
        """Parse the container at ``path``.

        Raises
        ------
        FormatError
            If the lookahead at any cursor position matches no element
            signature and is not a separator, or an element header is
            malformed.
        TruncatedInputError
            If any fixed-size read runs past the end of the file.
        """
        elements: List[Element] = []
        with open(path, "rb") as fh:
            total = stream_length(fh)
            while fh.tell() != total:
                cur = fh.tell()
                head = read_exact(fh, LOOKAHEAD, "lookahead")
                fh.seek(cur, os.SEEK_SET)

                if head[:2] == JPEG_SOI:
                    kind = JPEG
                    end = scan_jpeg(fh, self.chunk)
                elif head == PNG_SIGNATURE:
                    kind = PNG
                    end = scan_png(fh)
                elif head[MP4_FTYP_OFFSET:] == MP4_FTYP:
                    kind = MP4
                    end = scan_mp4(fh)
                elif head == LIVE_SEPARATOR:
                    logger.debug("Separator at 0x%x", cur)
                    fh.seek(LOOKAHEAD, os.SEEK_CUR)
                    continue
                else:
                    raise FormatError(f"unrecognised data at 0x{cur:x} in {path}: {head.hex()}")

                logger.debug("%s element at [0x%x, 0x%x]", kind, cur, end)
                elements.append(Element(kind=kind, start=cur, end=end))

        logger.info("Parsed %s: %d element(s)", path, len(elements))
        return Container(path=path, elements=tuple(elements))

def parse(path: str) -> Container:
    """Parse ``path`` with a default :class:`ContainerParser`."""
    return ContainerParser().parse(path)
