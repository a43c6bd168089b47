"""Bitmap and colour search, BMP image I/O, base64, a deadbeef random generator, simulated mouse input and alerts."""

__version__ = "0.1.0"