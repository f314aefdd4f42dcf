"""Pixel formats and the conversions between them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFF:
        raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")


class Pixel(ABC):
    """A pixel that can be converted to colour, grey or bilevel form."""

    @classmethod
    @abstractmethod
    def white(cls) -> Pixel: ...

    @classmethod
    @abstractmethod
    def black(cls) -> Pixel: ...

    @abstractmethod
    def to_rgba(self) -> Rgba: ...

    def to_rgb(self) -> Rgb:
        return self.to_rgba().to_rgb()

    def to_grey(self) -> int:
        """Luminance in 0..255."""
        return self.to_rgb().to_grey()

    def to_bit(self) -> bool:
        """True for an ink (black) dot."""
        return Grey(self.to_grey()).to_bit()


@dataclass(frozen=True, slots=True)
class Rgba(Pixel):
    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    @classmethod
    def white(cls) -> Rgba:
        return cls(0xFF, 0xFF, 0xFF, 0xFF)

    @classmethod
    def black(cls) -> Rgba:
        return cls(0, 0, 0, 0xFF)

    def to_rgba(self) -> Rgba:
        return self

    def to_rgb(self) -> Rgb:
        return Rgb(self.r, self.g, self.b)


@dataclass(frozen=True, slots=True)
class Rgb(Pixel):
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))

    @classmethod
    def white(cls) -> Rgb:
        return cls(0xFF, 0xFF, 0xFF)

    @classmethod
    def black(cls) -> Rgb:
        return cls(0, 0, 0)

    def to_rgba(self) -> Rgba:
        return Rgba(self.r, self.g, self.b, 0xFF)

    def to_rgb(self) -> Rgb:
        return self

    def to_grey(self) -> int:
        luma = self.r * 0.299 + self.g * 0.587 + self.b * 0.114
        return min(0xFF, math.floor(luma + 0.5))


@dataclass(frozen=True, slots=True)
class Grey(Pixel):
    """An 8-bit grey level; 0 is black."""

    value: int

    def __post_init__(self) -> None:
        _check_channel("value", self.value)

    @classmethod
    def white(cls) -> Grey:
        return cls(0xFF)

    @classmethod
    def black(cls) -> Grey:
        return cls(0)

    def to_rgba(self) -> Rgba:
        return self.to_rgb().to_rgba()

    def to_rgb(self) -> Rgb:
        return Rgb(self.value, self.value, self.value)

    def to_grey(self) -> int:
        return self.value

    def to_bit(self) -> bool:
        return self.value == 0


@dataclass(frozen=True, slots=True)
class Bit(Pixel):
    """A bilevel pixel; True is black."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise ValueError(f"bit value must be a bool, got {self.value!r}")

    @classmethod
    def white(cls) -> Bit:
        return cls(False)

    @classmethod
    def black(cls) -> Bit:
        return cls(True)

    def to_rgba(self) -> Rgba:
        return self.to_rgb().to_rgba()

    def to_rgb(self) -> Rgb:
        return Grey(self.to_grey()).to_rgb()

    def to_grey(self) -> int:
        return 0 if self.value else 0xFF

    def to_bit(self) -> bool:
        return self.value