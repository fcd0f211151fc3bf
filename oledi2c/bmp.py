"""Reading 1-bit BMP images into a display-sized pixel grid."""

from __future__ import annotations

import struct
from pathlib import Path

from oledi2c.display import MAX_HEIGHT, MAX_WIDTH

HEADER_SIZE = 54
SUPPORTED_HEIGHTS = (32, 64)


class BitmapError(Exception):
    """Raised when an image cannot be read or is not a supported BMP."""


def _row_bits(chunk: bytes, width: int) -> list[bool]:
    bits = [bool(chunk[col // 8] >> (7 - col % 8) & 1) for col in range(width)]
    return bits + [False] * (MAX_WIDTH - width)


def parse_bitmap(data: bytes) -> list[list[bool]]:
    """Decode a 1bpp BMP into ``MAX_HEIGHT`` rows of ``MAX_WIDTH`` pixels.

    Pixels outside the image stay False; missing pixel data reads as zero.
    """
    if len(data) < HEADER_SIZE or data[:2] != b"BM":
        raise BitmapError("invalid BMP file")
    (offset,) = struct.unpack_from("<I", data, 10)
    width, height = struct.unpack_from("<ii", data, 18)
    (bpp,) = struct.unpack_from("<H", data, 28)
    if bpp != 1 or width > MAX_WIDTH or height not in SUPPORTED_HEIGHTS:
        raise BitmapError("only 1bpp 128x32 or 128x64 BMPs are supported")

    width = max(width, 0)
    row_bytes = (width + 31) // 32 * 4
    pixels = [[False] * MAX_WIDTH for _ in range(MAX_HEIGHT)]
    position = offset
    # BMP rows are stored bottom-up.
    for row in reversed(range(height)):
        chunk = data[position:position + row_bytes].ljust(row_bytes, b"\0")
        position += row_bytes
        pixels[row] = _row_bits(chunk, width)
    return pixels


def load_bitmap(path: str | Path) -> list[list[bool]]:
    """Read and decode a BMP file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise BitmapError(f"cannot open {path}: {exc}") from exc
    return parse_bitmap(data)