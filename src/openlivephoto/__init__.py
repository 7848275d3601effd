"""
OpenLivePhoto core package.

This package bundles together the scanning, parsing and extraction
components used to split vendor "live photo" files into their still
image and video. To avoid eager importing of heavy dependencies (such
as PySide6) the modules are import-light. When adding new top-level
exports be careful not to import GUI frameworks here.
"""

# Re-export common classes for convenience
from .errors import (
    LivePhotoError, FormatError, TruncatedInputError,
    ElementNotFoundError, SourceMissingError,
)
from .signatures import ElementKind, JPEG, PNG, MP4
from .parser import ContainerParser, Container, Element, parse
from .recovery import ElementRecovery, extract_first, extract_all
from .rawio import extract_range

__all__ = [
    'LivePhotoError',
    'FormatError',
    'TruncatedInputError',
    'ElementNotFoundError',
    'SourceMissingError',
    'ElementKind',
    'JPEG',
    'PNG',
    'MP4',
    'ContainerParser',
    'Container',
    'Element',
    'parse',
    'ElementRecovery',
    'extract_first',
    'extract_all',
    'extract_range',
]
