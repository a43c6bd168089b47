import pytest

from pixelscan.bitmap import Bitmap
from pixelscan.pasteboard import (
    PasteError,
    PasteErrorCode,
    copy_bitmap_to_pasteboard,
    paste_error_string,
)


def test_error_strings():
    assert paste_error_string(PasteErrorCode.OPEN) == "Could not open pasteboard"
    assert paste_error_string(PasteErrorCode.UNSUPPORTED) == "Unsupported platform"
    assert paste_error_string(PasteErrorCode.DATA) == "Could not create image data from bitmap"


def test_no_string_for_success_or_unknown():
    assert paste_error_string(PasteErrorCode.NO_ERROR) is None
    assert paste_error_string(PasteErrorCode.GENERIC) is None
    assert paste_error_string(99) is None


def test_error_message_matches_code():
    err = PasteError(PasteErrorCode.PASTE)
    assert err.code is PasteErrorCode.PASTE
    assert str(err) == "Could not paste data"


def test_empty_bitmap_is_data_error():
    bitmap = Bitmap(None, 0, 0, 0)
    with pytest.raises(PasteError) as info:
        copy_bitmap_to_pasteboard(bitmap)
    assert info.value.code is PasteErrorCode.DATA


def test_copy_without_pasteboard_is_unsupported():
    bitmap = Bitmap(bytes(4), 1, 1, 4)
    with pytest.raises(PasteError) as info:
        copy_bitmap_to_pasteboard(bitmap)
    assert info.value.code is PasteErrorCode.UNSUPPORTED