class AsciiGridError(Exception):
    """Base class for conversion failures."""


class DecodeError(AsciiGridError):
    """The source could not be read or decoded as an image."""
