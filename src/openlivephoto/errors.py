"""
Exceptions raised by the OpenLivePhoto core.

Every error derives from :class:`LivePhotoError` so callers can catch the
whole family at once, and each one also derives from the closest builtin
exception so generic handlers keep working.
"""


class LivePhotoError(Exception):
    """Base class for all container parsing and extraction errors."""


class FormatError(LivePhotoError, ValueError):
    """The bytes at the cursor are not a recognised element or separator."""


class TruncatedInputError(LivePhotoError, EOFError):
    """A fixed-size read returned fewer bytes than required."""


class ElementNotFoundError(LivePhotoError, LookupError):
    """The requested element kind is absent from a parsed container."""


class SourceMissingError(LivePhotoError, FileNotFoundError):
    """The file backing a container disappeared after it was parsed."""
