# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
xwdreader - A Pure Python X Window Dump Reader

Decodes XWD screen captures into a typed header, color table and
window name, gives zero-copy access to scanlines and sub-rectangles
of the pixel data, and converts 8, 16 and 32 bits-per-pixel data
to RGB.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from xwdreader.byte_source import ByteSource, as_view, map_file
from xwdreader.colormap import XWD_COLOR_SIZE, XWDColor, read_colors
from xwdreader.core import XWDFile
from xwdreader.exceptions import (
    XWDError,
    XWDReadError,
    TruncatedHeaderError,
    BufferTooSmallError,
    InvalidWindowNameError,
    MisalignedPixelDataError,
    OutOfBoundsError,
    UnsupportedPixelFormatError,
    XWDIOError,
)
from xwdreader.header import (
    XWD_HEADER_SIZE,
    XWD_FILE_VERSION,
    MIME_TYPE,
    XWDHeader,
    read_header,
    read_window_name,
)
from xwdreader.pixel_format import mask_width, shift_offset, to_rgb888
from xwdreader.scanner import (
    LineScanner,
    SubScanner,
    line_scanner,
    raw_image_data,
    sub_scanner,
)

__all__ = [
    "XWDFile",
    "ByteSource",
    "as_view",
    "map_file",
    "XWD_HEADER_SIZE",
    "XWD_FILE_VERSION",
    "XWD_COLOR_SIZE",
    "MIME_TYPE",
    "XWDHeader",
    "XWDColor",
    "read_header",
    "read_window_name",
    "read_colors",
    "raw_image_data",
    "LineScanner",
    "SubScanner",
    "line_scanner",
    "sub_scanner",
    "to_rgb888",
    "shift_offset",
    "mask_width",
    "XWDError",
    "XWDReadError",
    "TruncatedHeaderError",
    "BufferTooSmallError",
    "InvalidWindowNameError",
    "MisalignedPixelDataError",
    "OutOfBoundsError",
    "UnsupportedPixelFormatError",
    "XWDIOError",
]
