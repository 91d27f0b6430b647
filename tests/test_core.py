# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tests for the XWDFile reader.

Copyright 2025 DNAi inc.
"""

import hashlib
import struct

import pytest

from xwdreader import (
    OutOfBoundsError,
    UnsupportedPixelFormatError,
    XWDFile,
    XWDIOError,
    map_file,
)


def minimal_capture() -> bytes:
    header = struct.pack(
        '>25I', 100, 7, 2, 24, 2, 1, 0, 0, 32, 0, 32, 32, 8, 4,
        0xFF0000, 0xFF00, 0xFF, 8, 256, 0, 2, 1, 0, 0, 0,
    )
    return header + bytes([0, 0, 0, 255, 0, 0, 255, 0])


def test_end_to_end_minimal_capture():
    with XWDFile(file_data=minimal_capture()) as xwd:
        rows = [bytes(row) for row in xwd.lines()]
        assert rows == [bytes([0, 0, 0, 255, 0, 0, 255, 0])]
        assert xwd.window_name == ''
        assert xwd.colors == []
        assert list(xwd.rgb_rows()) == [[(255, 0, 0), (0, 255, 0)]]


def test_open_from_path(tmp_path, screen32):
    path = tmp_path / 'screen.xwd'
    path.write_bytes(screen32)
    with XWDFile(path) as xwd:
        assert xwd.size == len(screen32)
        assert xwd.header.window_width == 64
        assert xwd.window_name == 'xwdump'
        assert len(xwd.colors) == 2
        lines = [bytes(line) for line in xwd.lines()]
        assert len(lines) == 48
        assert b''.join(lines) == screen32[-48 * 256:]


def test_region(screen32):
    xwd = XWDFile(file_data=screen32)
    lines = [bytes(line) for line in xwd.lines()]
    segments = [bytes(s) for s in xwd.region(20, 20, 20, 20)]
    assert segments == [line[80:160] for line in lines[20:40]]
    with pytest.raises(OutOfBoundsError):
        xwd.region(0, 0, 64, 49)


def test_rgb_rows_trim_padding(make_xwd):
    pixels = bytes([0, 1, 2, 3, 0, 4, 5, 6, 0xEE, 0xEE, 0xEE, 0xEE]) * 2
    data = make_xwd(width=2, height=2, bytes_per_line=12, pixels=pixels)
    xwd = XWDFile(file_data=data)
    assert list(xwd.rgb_rows()) == [[(3, 2, 1), (6, 5, 4)]] * 2


def test_rgb_rows_unsupported_depth(make_xwd):
    xwd = XWDFile(file_data=make_xwd(width=2, height=2, bits_per_pixel=24))
    with pytest.raises(UnsupportedPixelFormatError):
        list(xwd.rgb_rows())


def test_get_metadata(tmp_path, screen32):
    path = tmp_path / 'screen.xwd'
    path.write_bytes(screen32)
    with XWDFile(path) as xwd:
        metadata = xwd.get_metadata()
    assert metadata['File:FileType'] == 'XWD'
    assert metadata['File:FileName'] == 'screen.xwd'
    assert metadata['File:FileSize'] == len(screen32)
    assert metadata['XWD:WindowName'] == 'xwdump'
    assert metadata['XWD:ColorCount'] == 2
    assert metadata['XWD:WindowWidth'] == 64


def test_pixel_data_hash(screen32):
    xwd = XWDFile(file_data=screen32)
    pixels = screen32[-48 * 256:]
    assert xwd.pixel_data_hash() == hashlib.md5(pixels).hexdigest()
    assert xwd.pixel_data_hash('SHA256') == hashlib.sha256(pixels).hexdigest()
    with pytest.raises(ValueError):
        xwd.pixel_data_hash('crc32')


def test_requires_exactly_one_source(screen32, tmp_path):
    with pytest.raises(ValueError):
        XWDFile()
    with pytest.raises(ValueError):
        XWDFile(file_path=tmp_path / 'a.xwd', file_data=screen32)


def test_missing_file(tmp_path):
    with pytest.raises(XWDIOError):
        XWDFile(tmp_path / 'missing.xwd')


def test_empty_file_cannot_be_mapped(tmp_path):
    path = tmp_path / 'empty.xwd'
    path.write_bytes(b'')
    with pytest.raises(XWDIOError):
        map_file(path)


def test_close_is_idempotent(screen32):
    xwd = XWDFile(file_data=screen32)
    assert xwd.header.bits_per_pixel == 32
    xwd.close()
    xwd.close()


def test_close_while_loop_variable_holds_a_row(tmp_path, screen32):
    path = tmp_path / 'screen.xwd'
    path.write_bytes(screen32)
    total = 0
    with XWDFile(path) as xwd:
        for line in xwd.lines():
            total += line[0]
    assert total == sum(screen32[-48 * 256::256])
    # the row outlives the file and still reads the mapped bytes
    assert line[0] == screen32[-256]


def test_exception_in_with_block_is_not_masked(tmp_path, screen32):
    path = tmp_path / 'screen.xwd'
    path.write_bytes(screen32)
    with pytest.raises(KeyError):
        with XWDFile(path) as xwd:
            row = next(xwd.lines())
            raise KeyError(row[0])
