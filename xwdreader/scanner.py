# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pixel region location and scanline iteration

The pixel data is the trailing window_height * bytes_per_line bytes
of the file. Scanners hand out memoryview slices of that region
without copying; the slices are only valid while the underlying
byte source is alive.

Copyright 2025 DNAi inc.
"""

from typing import Iterator

from xwdreader.byte_source import ByteSource, as_view
from xwdreader.exceptions import (
    BufferTooSmallError,
    OutOfBoundsError,
    UnsupportedPixelFormatError,
)
from xwdreader.header import XWDHeader


def raw_image_data(source: ByteSource, header: XWDHeader) -> memoryview:
    """
    Locate the raw pixel region.

    Args:
        source: Buffer holding the XWD file
        header: Header decoded from the same buffer

    Returns:
        memoryview over the last window_height * bytes_per_line bytes

    Raises:
        BufferTooSmallError: If the region would overlap the header
    """
    view = as_view(source)
    length = header.pixel_data_size
    start = len(view) - length
    if start < header.header_size:
        raise BufferTooSmallError(
            f"Pixel data needs {length} bytes after a {header.header_size}-byte "
            f"header, buffer holds {len(view)}"
        )
    return view[start:]


class LineScanner:
    """
    Iterates full scanlines of a pixel region, top to bottom.

    Each item is bytes_per_line bytes long. Once window_height lines
    have been produced the scanner stays exhausted.
    """

    def __init__(self, header: XWDHeader, raw_pixels: ByteSource):
        self.header = header
        self.raw_pixels = as_view(raw_pixels)
        self.current_line = 0
        if len(self.raw_pixels) < header.pixel_data_size:
            raise BufferTooSmallError(
                f"Pixel region holds {len(self.raw_pixels)} bytes, "
                f"{header.window_height} lines need {header.pixel_data_size}"
            )

    def __iter__(self) -> Iterator[memoryview]:
        return self

    def __next__(self) -> memoryview:
        if self.current_line >= self.header.window_height:
            raise StopIteration
        w = self.header.bytes_per_line
        start = self.current_line * w
        self.current_line += 1
        return self.raw_pixels[start:start + w]


class SubScanner:
    """
    Iterates the row segments of a rectangle inside the window.

    The rectangle is given in pixels. Rows are addressed with a stride
    of bytes_per_line, not window_width * bpp: the latter ignores row
    padding and drifts off the scanlines of padded captures. With
    bytes_per_line, row r is always bytes [x*bpp, (x+width)*bpp) of
    scanline y+r. For unpadded captures the two strides are equal and
    a full-window rectangle reproduces the LineScanner sequence
    exactly; for padded ones it yields each scanline minus its padding.
    """

    def __init__(self, header: XWDHeader, raw_pixels: ByteSource,
                 x: int, y: int, width: int, height: int):
        if x < 0 or y < 0 or width < 0 or height < 0:
            raise OutOfBoundsError(
                f"sub_scanner: negative rectangle ({x}, {y}, {width}, {height})"
            )
        if x > header.window_width:
            raise OutOfBoundsError(f"sub_scanner: x {x} beyond window width {header.window_width}")
        if y > header.window_height:
            raise OutOfBoundsError(f"sub_scanner: y {y} beyond window height {header.window_height}")
        if x + width > header.window_width:
            raise OutOfBoundsError(
                f"sub_scanner: x + width {x + width} beyond window width {header.window_width}"
            )
        if y + height > header.window_height:
            raise OutOfBoundsError(
                f"sub_scanner: y + height {y + height} beyond window height {header.window_height}"
            )
        if header.bits_per_pixel % 8 != 0:
            raise UnsupportedPixelFormatError(
                f"sub_scanner: {header.bits_per_pixel} bits per pixel is not byte aligned"
            )

        self.header = header
        self.raw_pixels = as_view(raw_pixels)
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.current_line = 0

        bpp = header.bytes_per_pixel
        if height > 0 and width > 0:
            last_end = (y + height - 1) * header.bytes_per_line + (x + width) * bpp
            if last_end > len(self.raw_pixels):
                raise BufferTooSmallError(
                    f"sub_scanner: rectangle ends at byte {last_end}, "
                    f"pixel region holds {len(self.raw_pixels)}"
                )

    def __iter__(self) -> Iterator[memoryview]:
        return self

    def __next__(self) -> memoryview:
        if self.current_line >= self.height:
            raise StopIteration
        bpp = self.header.bytes_per_pixel
        row_start = (self.current_line + self.y) * self.header.bytes_per_line
        self.current_line += 1
        return self.raw_pixels[row_start + self.x * bpp:row_start + (self.x + self.width) * bpp]


def line_scanner(header: XWDHeader, raw_pixels: ByteSource) -> LineScanner:
    return LineScanner(header, raw_pixels)


def sub_scanner(header: XWDHeader, raw_pixels: ByteSource,
                x: int, y: int, width: int, height: int) -> SubScanner:
    return SubScanner(header, raw_pixels, x, y, width, height)
