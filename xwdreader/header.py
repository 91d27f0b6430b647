# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
XWD (X Windows Dump) header decoder

This module handles reading the fixed header and the window name
that follows it. XWD files are used to dump X Window System windows
to files; every header field is stored big-endian.

Copyright 2025 DNAi inc.
"""

import struct
from dataclasses import dataclass, fields
from typing import Dict, Any

from xwdreader.byte_source import ByteSource, as_view
from xwdreader.exceptions import (
    TruncatedHeaderError,
    BufferTooSmallError,
    InvalidWindowNameError,
)


XWD_HEADER_SIZE = 100
XWD_FILE_VERSION = 7
MIME_TYPE = 'image/x-xwindowdump'

HEADER_FORMAT = '>25I'

# Tag names used by to_metadata(), in field order
HEADER_TAGS = (
    'HeaderSize', 'FileVersion', 'PixmapFormat', 'PixmapDepth',
    'PixmapWidth', 'PixmapHeight', 'XOffset', 'ByteOrder', 'BitmapUnit',
    'BitmapBitOrder', 'BitmapPad', 'BitsPerPixel', 'BytesPerLine',
    'VisualClass', 'RedMask', 'GreenMask', 'BlueMask', 'BitsPerRGB',
    'ColormapEntries', 'NumberOfColors', 'WindowWidth', 'WindowHeight',
    'WindowX', 'WindowY', 'WindowBorderWidth',
)


@dataclass(frozen=True)
class XWDHeader:
    """
    Fixed 100-byte XWD file header.

    The header is a sequence of 25 unsigned 32-bit integers:
    - Header size, including the window name that follows
    - File version
    - Pixmap format, depth, width and height
    - X offset
    - Byte order, bitmap unit, bit order and pad
    - Bits per pixel and bytes per line
    - Visual class and red/green/blue masks
    - Bits per RGB, colormap entries and number of colors
    - Window width, height, x, y and border width
    """
    header_size: int
    file_version: int
    pixmap_format: int
    pixmap_depth: int
    pixmap_width: int
    pixmap_height: int
    xoffset: int
    byte_order: int
    bitmap_unit: int
    bitmap_bit_order: int
    bitmap_pad: int
    bits_per_pixel: int
    bytes_per_line: int
    visual_class: int
    red_mask: int
    green_mask: int
    blue_mask: int
    bits_per_rgb: int
    colormap_entries: int
    ncolors: int
    window_width: int
    window_height: int
    window_x: int
    window_y: int
    window_bdrwidth: int

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def pixel_data_size(self) -> int:
        """Size in bytes of the pixel region (all scanlines)."""
        return self.window_height * self.bytes_per_line

    def to_metadata(self) -> Dict[str, Any]:
        """
        Render the header as a tag dictionary.

        Returns:
            Dictionary of XWD metadata
        """
        metadata: Dict[str, Any] = {}
        metadata['File:FileType'] = 'XWD'
        metadata['File:FileTypeExtension'] = 'xwd'
        metadata['File:MIMEType'] = MIME_TYPE

        for tag, field in zip(HEADER_TAGS, fields(self)):
            metadata[f'XWD:{tag}'] = getattr(self, field.name)

        metadata['XWD:ByteOrder'] = 'Big-endian' if self.byte_order == 0 else 'Little-endian'
        metadata['XWD:RedMask'] = hex(self.red_mask)
        metadata['XWD:GreenMask'] = hex(self.green_mask)
        metadata['XWD:BlueMask'] = hex(self.blue_mask)

        metadata['File:ImageWidth'] = self.pixmap_width
        metadata['File:ImageHeight'] = self.pixmap_height
        metadata['File:BitsPerPixel'] = self.bits_per_pixel
        return metadata


def read_header(source: ByteSource) -> XWDHeader:
    """
    Decode the fixed XWD header.

    No field is validated here; callers check the values they rely on.

    Args:
        source: Buffer holding the XWD file

    Returns:
        Decoded XWDHeader

    Raises:
        TruncatedHeaderError: If source is shorter than 100 bytes
    """
    view = as_view(source)
    if len(view) < XWD_HEADER_SIZE:
        raise TruncatedHeaderError(
            f"Invalid XWD file: {len(view)} bytes, header needs {XWD_HEADER_SIZE}"
        )
    return XWDHeader(*struct.unpack_from(HEADER_FORMAT, view, 0))


def read_window_name(source: ByteSource, header: XWDHeader) -> str:
    """
    Decode the captured window's title.

    The name occupies bytes [100, header_size) and is stored as a
    NUL-terminated string. Everything from the first NUL on is dropped
    before decoding, so the result never carries the terminator.

    Args:
        source: Buffer holding the XWD file
        header: Header decoded from the same buffer

    Returns:
        Window name, possibly empty

    Raises:
        InvalidWindowNameError: If header_size is below 100 or the
            bytes are not valid UTF-8
        BufferTooSmallError: If header_size exceeds the buffer length
    """
    view = as_view(source)
    if header.header_size < XWD_HEADER_SIZE:
        raise InvalidWindowNameError(
            f"header_size {header.header_size} is smaller than the fixed header"
        )
    if header.header_size > len(view):
        raise BufferTooSmallError(
            f"header_size {header.header_size} exceeds buffer length {len(view)}"
        )

    raw = bytes(view[XWD_HEADER_SIZE:header.header_size])
    raw = raw.split(b'\x00', 1)[0]
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidWindowNameError(f"Window name is not valid text: {str(e)}") from e
