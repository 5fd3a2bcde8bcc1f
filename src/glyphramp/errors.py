class GlyphrampError(Exception):
    """Base class for failures reported to the user."""


class DecodeError(GlyphrampError):
    """The image path is missing or does not hold a readable image."""


class OutputWriteError(GlyphrampError):
    """A result file could not be created or written."""


class InvalidPalette(GlyphrampError, ValueError):
    """The palette is empty, malformed, or names an unknown preset."""
