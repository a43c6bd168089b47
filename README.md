# pixelscan

Helpers for screen-based acceptance testing and automation, in pure Python
with no dependencies beyond the standard library.

## What is in the package

- `pixelscan.geometry`: frozen value types `Point`, `SignedPoint`, `Size` and
  `Rect` (with `Rect.make(x, y, width, height)`), and `add_padding(width)`,
  which rounds a row length up to a multiple of 4 bytes.
- `pixelscan.rgb`: `RGBColor`, conversion to and from `0xRRGGBB` integers
  (`rgb_to_hex`, `hex_from_rgb`, `rgb_from_hex`, `red_from_hex`, …) and the
  similarity tests `colors_similar` and `hex_similar`. A tolerance of 0.0
  means an exact match and 1.0 matches any colour.
- `pixelscan.bitmap`: `Bitmap`, a raster image stored top row first with
  pixels in blue, green, red byte order. It offers `copy()`,
  `copy_portion(rect)`, `point_in_bounds`, `rect_in_bounds`, `bounds()`,
  `color_at(x, y)` and `hex_at(x, y)`.
- `pixelscan.color_find`: `find_color`, `find_all_color` and
  `count_of_colors`, plus `*_in_rect` variants that limit the search to a
  rectangle.
- `pixelscan.bitmap_find`: `find_bitmap`, `find_all_bitmap` and
  `count_of_bitmap`, plus `*_in_rect` variants, for finding a small bitmap
  inside a larger one. Each returned point lies one pixel to the right of
  and one pixel below the top-left corner of the match.
- `pixelscan.bmp_io`: reads and writes uncompressed 24- and 32-bit BMP files
  (`read_bmp`, `bitmap_from_bmp_data`, `save_bmp`, `create_bitmap_data`,
  `flip_bitmap_data`). Read failures raise `BMPReadError`, whose `code` is a
  `BMPErrorCode`; `bmp_error_string(code)` describes it.
- `pixelscan.image_io`: `ImageType`, `get_extension`,
  `image_type_from_extension`, `load_bitmap`, `save_bitmap` and
  `io_error_string`.
- `pixelscan.b64codec`: `encode(data)` produces padded base64.
  `decode(data)` ignores line breaks, padding and any other characters that
  are not base64 digits.
- `pixelscan.deadbeef`: the small "deadbeef" pseudo-random generator
  `DeadbeefRandom`, with `seed`, `seed_from_time`, `rand`, `uniform` and
  `randrange`, and `generate_seed()`.
- `pixelscan.mouse`: `Mouse` drives a `MouseBackend`. The backend is a
  virtual screen that records every event in its `events` list as
  `("move", x, y)` or `("button", number, down)`. `Mouse` can `move`, `drag`,
  `toggle`, `click`, `double_click`, `scroll` and `smoothly_move` along a
  randomised, human-like path. `MouseButton`, `WheelDirection`,
  `button_is_valid` and `crude_hypot` are also provided.
- `pixelscan.alert`: `show_alert(title, msg, default_button, cancel_button)`
  runs the first of `gmessage`, `gxmessage`, `kmessage` or `xmessage` that it
  finds and waits for the user. It returns `True` when the default button is
  pressed. If no such program is available it raises `AlertError`.
- `pixelscan.pasteboard`: `PasteErrorCode`, `PasteError` and
  `paste_error_string`, together with `copy_bitmap_to_pasteboard`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from pixelscan.bmp_io import read_bmp
from pixelscan.color_find import find_color, count_of_colors

screen = read_bmp("screenshot.bmp")
point = find_color(screen, 0xFF0000, 0.0)
if point is not None:
    print("first red pixel at", point.x, point.y)
print("reddish pixels:", count_of_colors(screen, 0xFF0000, 0.1))
```

```python
from pixelscan.bitmap_find import count_of_bitmap
from pixelscan.bmp_io import read_bmp

haystack = read_bmp("screen.bmp")
needle = read_bmp("button.bmp")
print("occurrences:", count_of_bitmap(needle, haystack, 0.0))
```

```python
from pixelscan.geometry import Point
from pixelscan.mouse import Mouse, MouseBackend

backend = MouseBackend(800, 600)
mouse = Mouse(backend, sleep=lambda seconds: None)
mouse.smoothly_move(Point(400, 300))
mouse.click()
print(mouse.position(), backend.events[-2:])
```

## What the package does not do

- It does not synthesise keyboard input, and it has no key-code tables.
- Mouse events go only to the virtual `MouseBackend`. Nothing is sent to a
  real display.
- `copy_bitmap_to_pasteboard` never reaches a system pasteboard. It always
  raises `PasteError`: with code `DATA` if the bitmap has no pixels, and with
  code `UNSUPPORTED` otherwise.
- Of the image types, only BMP can be read or written. `load_bitmap` and
  `save_bitmap` raise `UnsupportedImageTypeError` for PNG.
- It cannot capture the screen. Bitmaps come from BMP files or are built in
  memory.