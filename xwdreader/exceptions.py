# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for xwdreader

This module defines custom exceptions for the xwdreader library.
Every malformed-input condition detected while decoding an XWD
buffer is reported through one of these classes.

Copyright 2025 DNAi inc.
"""


class XWDError(Exception):
    """
    Base exception for all xwdreader errors.

    All xwdreader exceptions inherit from this class, allowing
    catch-all error handling for any XWD decoding error.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class XWDReadError(XWDError):
    """
    Raised when an XWD buffer cannot be decoded.

    Subclasses name the specific structural problem.
    """
    pass


class TruncatedHeaderError(XWDReadError):
    """Raised when the buffer is shorter than the fixed 100-byte header."""
    pass


class BufferTooSmallError(XWDReadError):
    """
    Raised when a computed region does not fit inside the buffer.

    This exception is raised when:
    - header_size points past the end of the buffer
    - The pixel region would overlap the header
    - A pixel region is shorter than the scanlines it must hold
    """
    pass


class InvalidWindowNameError(XWDReadError):
    """Raised when the window name bytes are not valid UTF-8 text."""
    pass


class MisalignedPixelDataError(XWDReadError):
    """Raised when raw pixel bytes do not hold a whole number of pixels."""
    pass


class OutOfBoundsError(XWDError):
    """
    Raised when a sub-rectangle does not lie inside the captured window.
    """
    pass


class UnsupportedPixelFormatError(XWDError):
    """
    Raised when the bit depth cannot be converted.

    Only 8, 16 and 32 bits per pixel are supported for RGB conversion.
    """
    pass


class XWDIOError(XWDError):
    """Raised when an XWD file cannot be opened or memory-mapped."""
    pass
