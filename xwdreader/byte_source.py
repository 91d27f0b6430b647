# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Byte sources for XWD decoding

Any object supporting the buffer protocol (bytes, bytearray,
memoryview, mmap) can be decoded. Views handed out by the decoders
borrow from the source and become invalid once it is released.

Copyright 2025 DNAi inc.
"""

import mmap
from pathlib import Path
from typing import Union

from xwdreader.exceptions import XWDIOError


ByteSource = Union[bytes, bytearray, memoryview, mmap.mmap]


def as_view(source: ByteSource) -> memoryview:
    """
    Return a read-only, byte-addressed view over a byte source.

    Args:
        source: Any object supporting the buffer protocol

    Returns:
        memoryview of unsigned bytes sharing memory with source
    """
    view = source if isinstance(source, memoryview) else memoryview(source)
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view.toreadonly()


def map_file(file_path: Union[str, Path]) -> mmap.mmap:
    """
    Memory-map a file read-only.

    Args:
        file_path: Path to the XWD file

    Returns:
        Read-only mmap over the whole file

    Raises:
        XWDIOError: If the file cannot be opened or mapped
    """
    path = Path(file_path)
    try:
        with open(path, 'rb') as f:
            # The mapping stays valid after the descriptor is closed
            return mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
    except (OSError, ValueError) as e:
        raise XWDIOError(f"Failed to map {path}: {str(e)}") from e
