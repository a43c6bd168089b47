"""Reading and writing uncompressed 24/32-bit Windows and OS/2 BMP files."""

from __future__ import annotations

import struct
from enum import IntEnum
from os import PathLike

from pixelscan.bitmap import Bitmap
from pixelscan.geometry import add_padding

BMP_MAGIC = 0x4D42
"""The first two bytes of every BMP file ("BM", little endian)."""

_FILE_HEADER = struct.Struct("<HIII")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_CORE_HEADER = struct.Struct("<IHHHH")
_HEADER_SIZE = struct.Struct("<I")

_CORE_HEADER_SIZE = 12
_INFO_HEADER_SIZES = (40, 108, 124)
_COMPRESSION_RGB = 0


class BMPErrorCode(IntEnum):
    """Reasons a BMP file could not be read."""

    GENERIC = 0
    ACCESS = 1
    INVALID_KEY = 2
    UNSUPPORTED_HEADER = 3
    INVALID_COLOR_PANES = 4
    UNSUPPORTED_COLOR_DEPTH = 5
    UNSUPPORTED_COMPRESSION = 6
    INVALID_PIXEL_DATA = 7


_ERROR_STRINGS = {
    BMPErrorCode.ACCESS: "Could not open file",
    BMPErrorCode.INVALID_KEY: "Not a BMP file",
    BMPErrorCode.UNSUPPORTED_HEADER: "Unsupported BMP header",
    BMPErrorCode.INVALID_COLOR_PANES: "Invalid number of color panes in BMP file",
    BMPErrorCode.UNSUPPORTED_COLOR_DEPTH: "Unsupported color depth in BMP file",
    BMPErrorCode.UNSUPPORTED_COMPRESSION: "Unsupported file compression in BMP file",
    BMPErrorCode.INVALID_PIXEL_DATA: "Could not read BMP pixel data",
}


def bmp_error_string(code: int) -> str | None:
    """Return the description of a BMP error code, or ``None`` if it has none."""
    try:
        return _ERROR_STRINGS.get(BMPErrorCode(code))
    except ValueError:
        return None


class BMPReadError(Exception):
    """Raised when BMP data cannot be read; ``code`` tells why."""

    def __init__(self, code: int) -> None:
        self.code = BMPErrorCode(code)
        super().__init__(bmp_error_string(self.code) or "Could not read BMP file")


def _unpack(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    try:
        return layout.unpack_from(data, offset)
    except struct.error as exc:
        raise BMPReadError(BMPErrorCode.GENERIC) from exc


def flip_bitmap_data(data: bytes | bytearray, width: int, height: int, bytewidth: int) -> bytes:
    """Return ``data`` with its ``height`` rows of ``bytewidth`` bytes in reverse order.

    This turns a bottom-up raster into a top-down one and back again.
    """
    rows = [bytes(data[y * bytewidth : (y + 1) * bytewidth]) for y in range(height)]
    rest = bytes(data[height * bytewidth :])
    if height <= 1:
        return bytes(data)
    return b"".join(reversed(rows)) + rest


def bitmap_from_bmp_data(data: bytes | bytearray | memoryview) -> Bitmap:
    """Parse the contents of a BMP file into a :class:`Bitmap`.

    Supports uncompressed 24-bit and 32-bit images with a Windows v3/v4/v5 or
    an OS/2 v1 header. Raises :class:`BMPReadError` otherwise.
    """
    data = bytes(data)
    magic, _file_size, _reserved, image_offset = _unpack(_FILE_HEADER, data, 0)
    if magic != BMP_MAGIC:
        raise BMPReadError(BMPErrorCode.INVALID_KEY)

    (header_size,) = _unpack(_HEADER_SIZE, data, _FILE_HEADER.size)
    if header_size == _CORE_HEADER_SIZE:
        _, width, height, planes, bits_per_pixel = _unpack(
            _CORE_HEADER, data, _FILE_HEADER.size
        )
        compression = _COMPRESSION_RGB
    elif header_size in _INFO_HEADER_SIZES:
        # Only the common v3 part is read; the rest is skipped.
        _, width, height, planes, bits_per_pixel, compression, *_ = _unpack(
            _INFO_HEADER, data, _FILE_HEADER.size
        )
    else:
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_HEADER)

    if planes != 1:
        raise BMPReadError(BMPErrorCode.INVALID_COLOR_PANES)
    if bits_per_pixel not in (24, 32):
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_COLOR_DEPTH)
    if compression != _COMPRESSION_RGB:
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_COMPRESSION)
    if width < 0:
        raise BMPReadError(BMPErrorCode.INVALID_PIXEL_DATA)

    bytes_per_pixel = bits_per_pixel // 8
    bytewidth = add_padding(width * bytes_per_pixel)
    rows = abs(height)
    image_size = bytewidth * rows
    pixels = data[image_offset : image_offset + image_size]
    if image_size == 0 or len(pixels) < image_size:
        raise BMPReadError(BMPErrorCode.INVALID_PIXEL_DATA)

    # A negative height marks a top-down image, which is how bitmaps are kept.
    if height >= 0:
        pixels = flip_bitmap_data(pixels, width, rows, bytewidth)

    return Bitmap(pixels, width, rows, bytewidth, bits_per_pixel, bytes_per_pixel)


def read_bmp(path: str | PathLike[str]) -> Bitmap:
    """Read the BMP file at ``path``."""
    try:
        with open(path, "rb") as stream:
            data = stream.read()
    except OSError as exc:
        raise BMPReadError(BMPErrorCode.ACCESS) from exc
    return bitmap_from_bmp_data(data)


def _pixel_rows(bitmap: Bitmap, bytewidth: int) -> bytes:
    assert bitmap.buffer is not None
    source = bitmap.buffer
    bpp = bitmap.bytes_per_pixel
    row_length = bitmap.width * bpp
    out = bytearray()
    for y in range(bitmap.height):
        start = y * bitmap.bytewidth
        if bitmap.bytewidth % 4 == 0:
            row = bytes(source[start : start + row_length])
        else:
            row = b"".join(
                bytes(source[start + x * bpp : start + x * bpp + 3]).ljust(bpp, b"\0")
                for x in range(bitmap.width)
            )
        out += row.ljust(bytewidth, b"\0")
    return bytes(out)


def create_bitmap_data(bitmap: Bitmap) -> bytes:
    """Return the complete contents of a Windows v3 BMP file for ``bitmap``."""
    if bitmap.buffer is None:
        raise ValueError("bitmap has no pixel data")
    bytewidth = (bitmap.width * bitmap.bytes_per_pixel + 3) & ~3
    image_size = bytewidth * bitmap.height
    image_offset = _FILE_HEADER.size + _INFO_HEADER.size

    file_header = _FILE_HEADER.pack(
        BMP_MAGIC, _INFO_HEADER.size + image_size, 0, image_offset
    )
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size,
        bitmap.width,
        -bitmap.height,  # stored top-down
        1,
        bitmap.bits_per_pixel,
        _COMPRESSION_RGB,
        image_size,
        0,
        0,
        0,
        0,
    )
    return file_header + info_header + _pixel_rows(bitmap, bytewidth)


def save_bmp(bitmap: Bitmap, path: str | PathLike[str]) -> None:
    """Write ``bitmap`` to ``path`` as a Windows v3 BMP file."""
    data = create_bitmap_data(bitmap)
    with open(path, "wb") as stream:
        stream.write(data)