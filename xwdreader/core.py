# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Core XWD file reader

This module ties the decoders together behind a single XWDFile
class that opens a file (or wraps an in-memory buffer) and exposes
its header, color table, window name and pixel data.

Copyright 2025 DNAi inc.
"""

import hashlib
import mmap
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional, Union

from xwdreader.byte_source import ByteSource, as_view, map_file
from xwdreader.colormap import XWDColor, read_colors
from xwdreader.header import XWDHeader, read_header, read_window_name
from xwdreader.pixel_format import RGB, to_rgb888
from xwdreader.scanner import LineScanner, SubScanner, raw_image_data


class XWDFile:
    """
    Reader for X Window Dump files.

    Decoding is lazy: each part is read on first access and cached.
    Pixel rows are memoryview slices into the file mapping; a row kept
    past close() keeps the mapping alive until the row is released.

    Example:
        >>> with XWDFile('screen.xwd') as xwd:
        ...     print(xwd.window_name, xwd.header.window_width)
        ...     for row in xwd.rgb_rows():
        ...         pass
    """

    HASH_TYPES = ('md5', 'sha1', 'sha256')

    def __init__(self, file_path: Optional[Union[str, Path]] = None,
                 file_data: Optional[ByteSource] = None):
        """
        Initialize XWD reader.

        Args:
            file_path: Path to XWD file, memory-mapped read-only
            file_data: XWD file data (bytes, bytearray, memoryview or mmap)

        Raises:
            ValueError: If neither or both of file_path and file_data are given
            XWDIOError: If the file cannot be opened or mapped
        """
        if (file_path is None) == (file_data is None):
            raise ValueError("Exactly one of file_path or file_data must be provided")

        self._mmap: Optional[mmap.mmap] = None
        if file_path is not None:
            self.file_path: Optional[Path] = Path(file_path)
            self._mmap = map_file(self.file_path)
            self._view = as_view(self._mmap)
        else:
            self.file_path = None
            self._view = as_view(file_data)

        self._header: Optional[XWDHeader] = None
        self._colors: Optional[List[XWDColor]] = None
        self._window_name: Optional[str] = None
        self._pixels: Optional[memoryview] = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """
        Release the buffer views and unmap the file.

        Rows handed out earlier that are still referenced keep the
        mapping alive; it is then unmapped when the last of them is
        garbage collected instead of here.
        """
        if self._pixels is not None:
            self._pixels.release()
            self._pixels = None
        self._view.release()
        if self._mmap is not None:
            mapping, self._mmap = self._mmap, None
            try:
                mapping.close()
            except BufferError:
                # Exported rows hold their own reference to the mapping
                pass

    @property
    def size(self) -> int:
        return len(self._view)

    @property
    def header(self) -> XWDHeader:
        if self._header is None:
            self._header = read_header(self._view)
        return self._header

    @property
    def colors(self) -> List[XWDColor]:
        if self._colors is None:
            self._colors = read_colors(self._view, self.header)
        return self._colors

    @property
    def window_name(self) -> str:
        if self._window_name is None:
            self._window_name = read_window_name(self._view, self.header)
        return self._window_name

    @property
    def pixels(self) -> memoryview:
        """Raw pixel region, window_height scanlines of bytes_per_line bytes."""
        if self._pixels is None:
            self._pixels = raw_image_data(self._view, self.header)
        return self._pixels

    def lines(self) -> LineScanner:
        """Scanner over every full scanline."""
        return LineScanner(self.header, self.pixels)

    def region(self, x: int, y: int, width: int, height: int) -> SubScanner:
        """
        Scanner over a rectangle of the window.

        Args:
            x: Left edge in pixels
            y: Top edge in pixels
            width: Rectangle width in pixels
            height: Rectangle height in pixels

        Raises:
            OutOfBoundsError: If the rectangle leaves the window
        """
        return SubScanner(self.header, self.pixels, x, y, width, height)

    def rgb_rows(self) -> Iterator[List[RGB]]:
        """
        Yield each scanline converted to RGB triples.

        Row padding past window_width pixels is not converted.

        Raises:
            UnsupportedPixelFormatError: If bits_per_pixel is not 8, 16 or 32
        """
        header = self.header
        for row in self.region(0, 0, header.window_width, header.window_height):
            yield to_rgb888(header, row)

    def get_metadata(self) -> Dict[str, Any]:
        """
        Get header fields, window name and color count as tags.

        Returns:
            Dictionary of XWD metadata
        """
        metadata = self.header.to_metadata()
        metadata['XWD:WindowName'] = self.window_name
        metadata['XWD:ColorCount'] = len(self.colors)
        if self.file_path is not None:
            metadata['File:FileName'] = self.file_path.name
        metadata['File:FileSize'] = self.size
        return metadata

    def pixel_data_hash(self, hash_type: str = 'md5') -> str:
        """
        Hash the raw pixel region, excluding header and color table.

        Args:
            hash_type: Type of hash to calculate ('md5', 'sha1', 'sha256')

        Returns:
            Hexadecimal hash string

        Raises:
            ValueError: If hash_type is not supported
        """
        hash_type = hash_type.lower()
        if hash_type not in self.HASH_TYPES:
            raise ValueError(f"Unsupported hash type: {hash_type}")
        hasher = hashlib.new(hash_type)
        hasher.update(self.pixels)
        return hasher.hexdigest()
