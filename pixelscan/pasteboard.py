"""Copying bitmaps to the system pasteboard."""

from __future__ import annotations

from enum import IntEnum

from pixelscan.bitmap import Bitmap


class PasteErrorCode(IntEnum):
    """Reasons a bitmap could not be copied to the pasteboard."""

    NO_ERROR = 0
    GENERIC = 1
    OPEN = 2
    CLEAR = 3
    DATA = 4
    PASTE = 5
    UNSUPPORTED = 6


_ERROR_STRINGS = {
    PasteErrorCode.OPEN: "Could not open pasteboard",
    PasteErrorCode.CLEAR: "Could not clear pasteboard",
    PasteErrorCode.DATA: "Could not create image data from bitmap",
    PasteErrorCode.PASTE: "Could not paste data",
    PasteErrorCode.UNSUPPORTED: "Unsupported platform",
}


def paste_error_string(code: int) -> str | None:
    """Return the description of a paste error code, or ``None`` if it has none."""
    try:
        return _ERROR_STRINGS.get(PasteErrorCode(code))
    except ValueError:
        return None


class PasteError(Exception):
    """Raised when a bitmap cannot be copied; ``code`` tells why."""

    def __init__(self, code: int) -> None:
        self.code = PasteErrorCode(code)
        super().__init__(paste_error_string(self.code) or "Could not copy to pasteboard")


def copy_bitmap_to_pasteboard(bitmap: Bitmap) -> None:
    """Copy ``bitmap`` to the pasteboard.

    Raises :class:`PasteError` with ``DATA`` if the bitmap holds no pixels,
    and with ``UNSUPPORTED`` where no pasteboard can be reached.
    """
    if bitmap.buffer is None:
        raise PasteError(PasteErrorCode.DATA)
    raise PasteError(PasteErrorCode.UNSUPPORTED)