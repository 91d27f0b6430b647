# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
XWD color table decoder

The color table follows the header at offset header_size and holds
ncolors records of 12 bytes each.

Copyright 2025 DNAi inc.
"""

import struct
from dataclasses import dataclass
from typing import List, Tuple

from xwdreader.byte_source import ByteSource, as_view
from xwdreader.exceptions import BufferTooSmallError
from xwdreader.header import XWDHeader


XWD_COLOR_SIZE = 12

COLOR_FORMAT = '>IHHHBB'


@dataclass(frozen=True)
class XWDColor:
    """One colormap slot: pixel value, 16-bit RGB, flags and padding."""
    pixel: int
    red: int
    green: int
    blue: int
    flags: int
    pad: int

    @property
    def rgb888(self) -> Tuple[int, int, int]:
        return (self.red >> 8, self.green >> 8, self.blue >> 8)


def read_colors(source: ByteSource, header: XWDHeader) -> List[XWDColor]:
    """
    Decode the color table.

    Records are read in file order until header.ncolors have been
    produced or fewer than 12 bytes remain before the pixel data.
    A table shorter than declared is returned as is. When the pixel
    region does not fit the buffer the table runs to the buffer end.

    Args:
        source: Buffer holding the XWD file
        header: Header decoded from the same buffer

    Returns:
        List of XWDColor entries

    Raises:
        BufferTooSmallError: If header_size exceeds the buffer length
    """
    view = as_view(source)
    if header.header_size > len(view):
        raise BufferTooSmallError(
            f"header_size {header.header_size} exceeds buffer length {len(view)}"
        )

    end = len(view) - header.pixel_data_size
    if end < header.header_size:
        end = len(view)

    colors = []
    offset = header.header_size
    while len(colors) < header.ncolors and offset + XWD_COLOR_SIZE <= end:
        colors.append(XWDColor(*struct.unpack_from(COLOR_FORMAT, view, offset)))
        offset += XWD_COLOR_SIZE
    return colors
