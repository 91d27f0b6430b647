# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pixel format conversion

Converts raw XWD pixels to 8-bit-per-channel RGB triples.

Supported depths:
- 8 bits: grayscale, one byte per pixel
- 16 bits: packed big-endian word split with the header's color masks
- 32 bits: big-endian word holding unused, blue, green, red (high to low)

Copyright 2025 DNAi inc.
"""

from typing import List, Tuple

from xwdreader.byte_source import ByteSource, as_view
from xwdreader.exceptions import MisalignedPixelDataError, UnsupportedPixelFormatError
from xwdreader.header import XWDHeader


RGB = Tuple[int, int, int]

SUPPORTED_BITS_PER_PIXEL = (8, 16, 32)


def shift_offset(mask: int) -> int:
    """
    Index of the lowest set bit of a 32-bit mask.

    Args:
        mask: Channel mask

    Returns:
        0-based bit index, or 0 for an empty mask
    """
    for i in range(32):
        if (mask >> i) & 1:
            return i
    return 0


def mask_width(mask: int) -> int:
    """Number of set bits in a 32-bit mask."""
    return bin(mask & 0xFFFFFFFF).count('1')


def _scale_channel(value: int, width: int) -> int:
    # Spread a width-bit channel value over 8 bits
    if width < 8:
        return (value << (8 - width)) & 0xFF
    return (value >> (width - 8)) & 0xFF


def to_rgb888(header: XWDHeader, raw: ByteSource) -> List[RGB]:
    """
    Convert raw pixel bytes to RGB triples.

    For 16-bit pixels each channel is isolated with its mask, shifted
    down to bit 0 and scaled by the mask's bit width. With the usual
    5-6-5 masks this shifts red and blue left by 3 and green by 2.

    Args:
        header: Header describing the pixel layout
        raw: Bytes of one or more whole pixels, e.g. a scanline

    Returns:
        List of (red, green, blue) tuples, one per pixel

    Raises:
        UnsupportedPixelFormatError: If bits_per_pixel is not 8, 16 or 32
        MisalignedPixelDataError: If raw does not hold whole pixels
    """
    bits = header.bits_per_pixel
    if bits not in SUPPORTED_BITS_PER_PIXEL:
        raise UnsupportedPixelFormatError(f"Unsupported bit depth {bits}")

    data = as_view(raw)
    step = bits // 8
    if len(data) % step != 0:
        raise MisalignedPixelDataError(
            f"{len(data)} bytes is not a whole number of {step}-byte pixels"
        )

    if bits == 8:
        return [(v, v, v) for v in data]

    if bits == 16:
        rshift = shift_offset(header.red_mask)
        gshift = shift_offset(header.green_mask)
        bshift = shift_offset(header.blue_mask)
        rwidth = mask_width(header.red_mask)
        gwidth = mask_width(header.green_mask)
        bwidth = mask_width(header.blue_mask)

        pixels = []
        for i in range(0, len(data), 2):
            value = (data[i] << 8) | data[i + 1]
            red = _scale_channel((value & header.red_mask) >> rshift, rwidth)
            green = _scale_channel((value & header.green_mask) >> gshift, gwidth)
            blue = _scale_channel((value & header.blue_mask) >> bshift, bwidth)
            pixels.append((red, green, blue))
        return pixels

    return [(data[i + 3], data[i + 2], data[i + 1]) for i in range(0, len(data), 4)]
