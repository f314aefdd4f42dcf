"""Fixed-size raster images with PBM, PPM and QOI encoders."""

from __future__ import annotations

import struct
from typing import Callable, Iterator, Sequence

from .pixel import Pixel, Rgba

_QOI_OP_INDEX = 0x00
_QOI_OP_DIFF = 0x40
_QOI_OP_LUMA = 0x80
_QOI_OP_RUN = 0xC0
_QOI_OP_RGB = 0xFE
_QOI_OP_RGBA = 0xFF

_QOI_MAGIC = b"qoif"
_QOI_PADDING = b"\0\0\0\0\0\0\0\x01"
_QOI_MAX_RUN = 0x3E


def _qoi_hash(px: Rgba) -> int:
    return (px.r * 3 + px.g * 5 + px.b * 7 + px.a * 11) & 0x3F


def _check_size(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


class Image:
    """A ``width`` by ``height`` grid of pixels of one type, indexed by ``(x, y)``."""

    __slots__ = ("width", "height", "pixel_type", "_rows")

    def __init__(
        self,
        width: int,
        height: int,
        pixel_type: type[Pixel],
        rows: Sequence[Sequence[Pixel]],
    ) -> None:
        _check_size(width, height)
        if len(rows) != height or any(len(row) != width for row in rows):
            raise ValueError(f"rows do not form a {width}x{height} grid")
        for row in rows:
            for px in row:
                if not isinstance(px, pixel_type):
                    raise TypeError(f"expected {pixel_type.__name__} pixel, got {px!r}")
        self.width = width
        self.height = height
        self.pixel_type = pixel_type
        self._rows = [list(row) for row in rows]

    @classmethod
    def fill(cls, width: int, height: int, pixel: Pixel) -> Image:
        """An image with every pixel set to ``pixel``."""
        if not isinstance(pixel, Pixel):
            raise TypeError(f"expected a pixel, got {pixel!r}")
        _check_size(width, height)
        return cls(width, height, type(pixel), [[pixel] * width for _ in range(height)])

    @classmethod
    def fill_with(
        cls,
        width: int,
        height: int,
        pixel_type: type[Pixel],
        func: Callable[[tuple[int, int]], Pixel],
    ) -> Image:
        """An image whose pixel at ``(x, y)`` is ``func((x, y))``, filled row by row."""
        _check_size(width, height)
        rows = [[func((x, y)) for x in range(width)] for y in range(height)]
        return cls(width, height, pixel_type, rows)

    @classmethod
    def white(cls, width: int, height: int, pixel_type: type[Pixel]) -> Image:
        return cls.fill(width, height, pixel_type.white())

    @classmethod
    def black(cls, width: int, height: int, pixel_type: type[Pixel]) -> Image:
        return cls.fill(width, height, pixel_type.black())

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        x, y = index
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel {index!r} outside {self.width}x{self.height} image")
        return x, y

    def __getitem__(self, index: tuple[int, int]) -> Pixel:
        x, y = self._check_index(index)
        return self._rows[y][x]

    def __setitem__(self, index: tuple[int, int], value: Pixel) -> None:
        x, y = self._check_index(index)
        if not isinstance(value, self.pixel_type):
            raise TypeError(f"expected {self.pixel_type.__name__} pixel, got {value!r}")
        self._rows[y][x] = value

    def __iter__(self) -> Iterator[tuple[Pixel, ...]]:
        """Iterate over the rows from top to bottom."""
        for row in self._rows:
            yield tuple(row)

    def __len__(self) -> int:
        return self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.pixel_type is other.pixel_type
            and self._rows == other._rows
        )

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height}, {self.pixel_type.__name__})"

    def _pixels(self) -> Iterator[Pixel]:
        for row in self._rows:
            yield from row

    def to_pbm_p1(self) -> bytes:
        """Encode as plain (ASCII) PBM."""
        header = f"P1\n{self.width} {self.height}\n".encode("ascii")
        return header + bytes(ord("1") if px.to_bit() else ord("0") for px in self._pixels())

    def to_ppm_p6(self) -> bytes:
        """Encode as binary PPM with 8-bit channels."""
        out = bytearray(f"P6\n{self.width} {self.height}\n255\n".encode("ascii"))
        for px in self._pixels():
            rgb = px.to_rgb()
            out += bytes((rgb.r, rgb.g, rgb.b))
        return bytes(out)

    def to_qoi(self) -> bytes:
        """Encode as a four-channel, linear-alpha QOI image."""
        out = bytearray(_QOI_MAGIC)
        out += struct.pack(">II", self.width, self.height)
        out += bytes((4, 1))

        index = [Rgba(0, 0, 0, 0)] * 64
        run = 0
        prev = self.pixel_type.black()

        for px in self._pixels():
            if px == prev:
                run += 1
                if run == _QOI_MAX_RUN:
                    out.append(_QOI_OP_RUN | (run - 1))
                    run = 0
            else:
                if run:
                    out.append(_QOI_OP_RUN | (run - 1))
                    run = 0
                cur = px.to_rgba()
                last = prev.to_rgba()
                slot = _qoi_hash(cur)
                if index[slot] == cur:
                    out.append(_QOI_OP_INDEX | slot)
                else:
                    index[slot] = cur
                    if cur.a != last.a:
                        out += bytes((_QOI_OP_RGBA, cur.r, cur.g, cur.b, cur.a))
                    else:
                        vr = (cur.r - last.r) & 0xFF
                        vg = (cur.g - last.g) & 0xFF
                        vb = (cur.b - last.b) & 0xFF
                        dr, dg, db = ((v + 2) & 0xFF for v in (vr, vg, vb))
                        lr = (vr + 8 - vg) & 0xFF
                        lg = (vg + 32) & 0xFF
                        lb = (vb + 8 - vg) & 0xFF
                        if dr | dg | db <= 0x03:
                            out.append(_QOI_OP_DIFF | dr << 4 | dg << 2 | db)
                        elif lr | lb <= 0x0F and lg <= 0x3F:
                            out += bytes((_QOI_OP_LUMA | lg, lr << 4 | lb))
                        else:
                            out += bytes((_QOI_OP_RGB, cur.r, cur.g, cur.b))
            prev = px

        if run:
            out.append(_QOI_OP_RUN | (run - 1))

        out += _QOI_PADDING
        return bytes(out)