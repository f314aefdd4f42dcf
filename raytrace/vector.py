"""Three-dimensional vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import ClassVar, Iterable, Iterator

_FIELDS = ("x", "y", "z")


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable 3D vector.

    ``a * b`` is the dot product of two vectors, ``a ^ b`` their cross
    product, and ``abs(a)`` the length of ``a``. Indexing wraps modulo 3.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    I: ClassVar[Vector]
    J: ClassVar[Vector]
    K: ClassVar[Vector]

    X: ClassVar[int] = 0
    Y: ClassVar[int] = 1
    Z: ClassVar[int] = 2

    @classmethod
    def unit(cls, axis: int) -> Vector:
        """The unit vector along ``axis``; any other axis gives the zero vector."""
        return cls(
            1.0 if axis == cls.X else 0.0,
            1.0 if axis == cls.Y else 0.0,
            1.0 if axis == cls.Z else 0.0,
        )

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector:
        """Build a vector from exactly three numbers."""
        items = tuple(values)
        if len(items) != 3:
            raise ValueError(f"a vector needs 3 components, got {len(items)}")
        x, y, z = (float(v) for v in items)
        return cls(x, y, z)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def sq(self) -> float:
        """The squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> Vector:
        """This vector scaled to unit length."""
        return self / abs(self)

    def rotate_on_axis(self, axis: int, theta: float) -> Vector:
        """Rotate by ``theta`` degrees about the given coordinate axis."""
        rad = math.radians(theta)
        cos, sin = math.cos(rad), math.sin(rad)
        c1 = self[axis + 1]
        c2 = self[axis + 2]
        return self.replace_component(axis + 1, cos * c1 - sin * c2).replace_component(
            axis + 2, sin * c1 + cos * c2
        )

    def replace_component(self, index: int, value: float) -> Vector:
        """A copy with the component at ``index`` (modulo 3) set to ``value``."""
        return replace(self, **{_FIELDS[index % 3]: float(value)})

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object):
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vector(self.x / other, self.y / other, self.z / other)

    def __xor__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.cross(other)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __abs__(self) -> float:
        return math.sqrt(self.sq())

    def __getitem__(self, index: int) -> float:
        return getattr(self, _FIELDS[index % 3])

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


Vector.I = Vector(1.0, 0.0, 0.0)
Vector.J = Vector(0.0, 1.0, 0.0)
Vector.K = Vector(0.0, 0.0, 1.0)