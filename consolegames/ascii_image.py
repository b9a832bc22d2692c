"""Turning pictures into coloured ASCII-art frames and storing them on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

CONSOLE_WINDOW_SIZE = 150
ASCII_STRENGTH = "@MNHQ$OC?71>!:-."
WHITE = 255
BLACK = 0

_SUFFIXES = ("_dataBuffer.dat", "_frontColorBuffer.dat", "_backColorBuffer.dat")


@dataclass(frozen=True)
class AsciiFrame:
    """A grid of characters with a foreground and background RGB colour each.

    ``width`` counts character columns; every source pixel takes two of them.
    ``front`` and ``back`` hold three bytes (R, G, B) per character.
    """

    width: int
    height: int
    chars: bytes
    front: bytes
    back: bytes

    def __post_init__(self):
        cells = self.width * self.height
        if len(self.chars) != cells:
            raise ValueError(f"expected {cells} characters, got {len(self.chars)}")
        if len(self.front) != 3 * cells or len(self.back) != 3 * cells:
            raise ValueError(f"expected {3 * cells} colour bytes per buffer")

    def lines(self):
        """Return the characters as one string per row."""
        text = self.chars.decode("ascii")
        return [text[row * self.width:(row + 1) * self.width] for row in range(self.height)]

    def to_ansi(self):
        """Return the frame as text with 24-bit terminal colour escapes."""
        rows = []
        for row_no, line in enumerate(self.lines()):
            parts = []
            base = row_no * self.width
            for col, char in enumerate(line):
                at = 3 * (base + col)
                fr, fg, fb = self.front[at:at + 3]
                br, bg, bb = self.back[at:at + 3]
                parts.append(f"\x1b[38;2;{fr};{fg};{fb}m\x1b[48;2;{br};{bg};{bb}m{char}")
            rows.append("".join(parts) + "\x1b[0m")
        return "\n".join(rows)


def reduction_factor(width, height):
    """Smallest integer factor that fits the picture into the console window."""
    if width < 1 or height < 1:
        raise ValueError("image dimensions must be positive")
    return (max(width, height) - 1) // CONSOLE_WINDOW_SIZE + 1


def _as_image(pixels):
    array = np.asarray(pixels)
    if array.ndim != 3:
        raise ValueError("pixels must be shaped (height, width, channels)")
    return array


def downsample(pixels, factor):
    """Average ``factor`` x ``factor`` blocks, rounding halves up.

    Rows and columns that do not fill a whole block are dropped.
    """
    if factor < 1:
        raise ValueError("reduction factor must be at least 1")
    array = _as_image(pixels)
    height, width, channels = array.shape
    rows, cols = height // factor, width // factor
    block = array[:rows * factor, :cols * factor].astype(np.int64)
    sums = block.reshape(rows, factor, cols, factor, channels).sum(axis=(1, 3))
    return np.floor(sums / (factor * factor) + 0.5).astype(np.int64)


def grayscale(pixels):
    """Return the luminance of each pixel from its first three (R, G, B) channels."""
    array = _as_image(pixels).astype(np.int64)
    if array.shape[2] < 3:
        raise ValueError("pixels need at least three colour channels")
    weighted = 306 * array[..., 0] + 601 * array[..., 1] + 116 * array[..., 2]
    return (weighted >> 10).astype(np.uint8)


def to_ascii(pixels, color=False, inverse=False):
    """Convert pixels into an :class:`AsciiFrame`, two characters per pixel.

    In colour mode the pixel colour is the foreground on white, or with
    ``inverse`` the background behind white characters.  Otherwise the
    characters are black on white.
    """
    array = _as_image(pixels)
    gray = grayscale(array).astype(np.int64)
    index = np.floor(gray / 16.0 + 0.5).astype(np.int64)
    index = np.minimum(index, len(ASCII_STRENGTH) - 1)
    table = np.frombuffer(ASCII_STRENGTH.encode("ascii"), dtype=np.uint8)
    chars = np.repeat(table[index], 2, axis=1)
    rows, cols = gray.shape

    rgb = np.clip(array[..., :3], 0, 255).astype(np.uint8)
    white = np.full_like(rgb, WHITE)
    if color:
        front, back = (white, rgb) if inverse else (rgb, white)
    else:
        front, back = np.full_like(rgb, BLACK), white

    return AsciiFrame(
        width=cols * 2,
        height=rows,
        chars=chars.tobytes(),
        front=np.repeat(front, 2, axis=1).tobytes(),
        back=np.repeat(back, 2, axis=1).tobytes(),
    )


def load_image(path, color=False, inverse=False):
    """Read an image file and turn it into a frame sized for the console."""
    with Image.open(path) as img:
        pixels = np.asarray(img.convert("RGBA"), dtype=np.int64)
    height, width = pixels.shape[:2]
    factor = reduction_factor(width, height)
    return to_ascii(downsample(pixels, factor), color, inverse)


def _frame_paths(prefix):
    return tuple(Path(f"{prefix}{suffix}") for suffix in _SUFFIXES)


def save_frame(frame, prefix):
    """Write the three buffers of a frame next to ``prefix``; return their paths."""
    paths = _frame_paths(prefix)
    for path, data in zip(paths, (frame.chars, frame.front, frame.back)):
        path.write_bytes(data)
    return paths


def load_frame(prefix, width, height):
    """Read a frame of ``width`` character columns and ``height`` rows."""
    cells = width * height
    sizes = (cells, 3 * cells, 3 * cells)
    buffers = []
    for path, size in zip(_frame_paths(prefix), sizes):
        data = path.read_bytes()
        if len(data) < size:
            raise ValueError(f"{path} holds {len(data)} bytes, expected {size}")
        buffers.append(data[:size])
    return AsciiFrame(width, height, *buffers)