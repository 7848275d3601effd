"""
Small helpers shared by the extraction code and its front ends.
"""

from __future__ import annotations

import os
from typing import Optional

from .signatures import ElementKind

def is_blank(path: Optional[str]) -> bool:
    """Return True for ``None``, empty and whitespace-only paths."""
    return path is None or not path.strip()

def numbered_path(base: str, index: int, kind: ElementKind) -> str:
    """Return the destination of the ``index``-th element extracted next to ``base``.

    The stem of ``base`` is kept, a two digit running index is appended and
    the extension is replaced by the element kind, so ``a/photo.jpg`` with
    index 2 and an MP4 element becomes ``a/photo-02.Mp4``.
    """
    folder = os.path.dirname(base)
    stem = os.path.splitext(os.path.basename(base))[0]
    return os.path.join(folder, f"{stem}-{index:02d}.{kind.name}")
