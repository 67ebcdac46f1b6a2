"""quillhtml exception hierarchy.

Rendering itself never raises for malformed deltas; these are raised for
caller mistakes (bad options) and for strict delta parsing.
"""


class QuillHtmlError(Exception):
    """Base exception for all quillhtml errors."""


class QuillHtmlOptionError(QuillHtmlError, ValueError):
    """Raised for invalid render options."""


class QuillHtmlDeltaError(QuillHtmlError, ValueError):
    """Raised by strict delta parsing when the input is not a usable delta."""
