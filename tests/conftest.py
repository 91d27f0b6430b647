# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Shared fixtures: synthetic XWD captures built in memory.

Copyright 2025 DNAi inc.
"""

import struct

import pytest


def pattern(length: int) -> bytes:
    """Deterministic, non-repeating-per-row filler for pixel data."""
    return bytes((i * 7 + 3) % 251 for i in range(length))


def build_xwd(
    width: int = 64,
    height: int = 48,
    bits_per_pixel: int = 32,
    bytes_per_line: int = None,
    name: bytes = b'xwdump\x00',
    colors=(),
    ncolors: int = None,
    pixels: bytes = None,
    red_mask: int = 0xFF0000,
    green_mask: int = 0x00FF00,
    blue_mask: int = 0x0000FF,
) -> bytes:
    """
    Build an XWD file the way xwd(1) lays it out.

    colors is a sequence of (pixel, red, green, blue, flags, pad) tuples.
    """
    if bytes_per_line is None:
        bytes_per_line = width * bits_per_pixel // 8
    if ncolors is None:
        ncolors = len(colors)
    if pixels is None:
        pixels = pattern(height * bytes_per_line)

    header_size = 100 + len(name)
    header = struct.pack(
        '>25I',
        header_size, 7, 2, 24, width, height, 0, 0, 32, 0, 32,
        bits_per_pixel, bytes_per_line, 4, red_mask, green_mask, blue_mask,
        8, 256, ncolors, width, height, 10, 20, 0,
    )
    table = b''.join(struct.pack('>IHHHBB', *color) for color in colors)
    return header + name + table + pixels


@pytest.fixture
def make_xwd():
    return build_xwd


@pytest.fixture
def screen32():
    """A 64x48 true color capture with two colormap entries."""
    return build_xwd(colors=[(0, 0xFFFF, 0, 0, 7, 0), (1, 0, 0x8000, 0x1234, 7, 0)])
