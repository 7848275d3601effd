"""
Extraction of live photo elements into standalone files.

The recovery component takes a parsed :class:`~openlivephoto.parser.Container`
and copies the byte ranges of its elements into new files. It never
re-parses the container: it trusts the element list produced by the
parser and only checks that the backing file is still there before each
copy. Extraction is fail-fast; ``extract_all`` stops at the first error
and leaves the files written so far in place.
"""

from __future__ import annotations

import os
import logging
from typing import List, Optional

from .errors import ElementNotFoundError, SourceMissingError
from .parser import Container, Element
from .rawio import extract_range
from .signatures import ElementKind, JPEG, MP4
from .utils import is_blank, numbered_path

logger = logging.getLogger(__name__)

class ElementRecovery:
    """Write the elements of a parsed container to disk."""

    def __init__(self, container: Container) -> None:
        self.container = container

    def extract(self, element: Element, dest: str) -> str:
        """Copy a single element to ``dest`` and return ``dest``.

        Raises
        ------
        SourceMissingError
            If the container file no longer exists.
        TruncatedInputError
            If the container file became shorter than the element.
        """
        src = self.container.path
        if not os.path.isfile(src):
            raise SourceMissingError(f"live photo no longer exists: {src}")
        extract_range(src, element.start, element.end, dest)
        logger.info("Extracted %s [%d, %d] -> %s", element.kind, element.start, element.end, dest)
        return dest

    def extract_first(self, kind: ElementKind, dest: str) -> str:
        """Copy the first element of ``kind`` to ``dest``.

        Nothing is written when the container has no such element.
        """
        element = self.container.first_of(kind)
        if element is None:
            raise ElementNotFoundError(f"no {kind} element in {self.container.path}")
        return self.extract(element, dest)

    def extract_jpeg(self, dest: str) -> str:
        return self.extract_first(JPEG, dest)

    def extract_mp4(self, dest: str) -> str:
        return self.extract_first(MP4, dest)

    def extract_all(self, base: Optional[str] = None) -> List[str]:
        """Copy every element next to ``base`` with a numbered name.

        Parameters
        ----------
        base: str, optional
            Path whose folder and stem name the outputs. ``None`` or a
            blank string means the container's own path. For a base of
            ``photo.jpg`` holding a JPEG and an MP4 the outputs are
            ``photo-01.Jpg`` and ``photo-02.Mp4``.

        Returns
        -------
        list of str
            Written paths in element order.
        """
        if is_blank(base):
            base = self.container.path
        written: List[str] = []
        for index, element in enumerate(self.container, start=1):
            written.append(self.extract(element, numbered_path(base, index, element.kind)))
        return written

def extract_first(container: Container, kind: ElementKind, dest: str) -> str:
    return ElementRecovery(container).extract_first(kind, dest)

def extract_all(container: Container, base: Optional[str] = None) -> List[str]:
    return ElementRecovery(container).extract_all(base)
