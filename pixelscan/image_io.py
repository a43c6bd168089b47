"""Loading and saving bitmaps by image type."""

from __future__ import annotations

from enum import IntEnum
from os import PathLike

from pixelscan.bitmap import Bitmap
from pixelscan.bmp_io import bmp_error_string, read_bmp, save_bmp

_MAX_EXTENSION_LENGTH = 4


class ImageType(IntEnum):
    """Image file formats known by name."""

    INVALID = 0
    PNG = 1
    BMP = 2


class UnsupportedImageTypeError(Exception):
    """Raised when an image type cannot be read or written."""


_EXTENSIONS = {"png": ImageType.PNG, "bmp": ImageType.BMP}


def get_extension(fname: str) -> str | None:
    """Return the text after the last dot of ``fname``.

    The first character is never taken as the dot; a name without a dot
    yields everything after its first character. An empty name gives ``None``.
    """
    if not fname:
        return None
    dot = fname.rfind(".", 1)
    return fname[dot + 1 :] if dot > 0 else fname[1:]


def image_type_from_extension(extension: str) -> ImageType:
    """Guess the image type from a file extension, case-insensitively."""
    if len(extension) > _MAX_EXTENSION_LENGTH:
        return ImageType.INVALID
    return _EXTENSIONS.get(extension.lower(), ImageType.INVALID)


def load_bitmap(path: str | PathLike[str], image_type: int) -> Bitmap:
    """Read the image at ``path`` as the given type."""
    if image_type == ImageType.BMP:
        return read_bmp(path)
    raise UnsupportedImageTypeError(f"cannot read images of type {image_type!r}")


def save_bitmap(bitmap: Bitmap, path: str | PathLike[str], image_type: int) -> None:
    """Write ``bitmap`` to ``path`` as the given type."""
    if image_type == ImageType.BMP:
        save_bmp(bitmap, path)
        return
    raise UnsupportedImageTypeError(f"cannot write images of type {image_type!r}")


def io_error_string(image_type: int, error: int) -> str | None:
    """Return the description of a read error for the given image type."""
    if image_type == ImageType.BMP:
        return bmp_error_string(error)
    return "Unsupported image type"