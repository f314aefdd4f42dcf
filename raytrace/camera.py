"""A pinhole camera with an orthonormal view basis."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector


@dataclass(frozen=True, slots=True)
class Camera:
    """Camera at ``eye`` looking along ``centre`` with ``hfov`` degrees of view."""

    eye: Vector
    centre: Vector
    up: Vector
    right: Vector
    hfov: float

    @classmethod
    def looking(cls, eye: Vector, centre: Vector, up: Vector, hfov: float) -> Camera:
        """Build a camera, orthonormalising the view direction and up vector."""
        centre = centre.norm()
        up = up.norm()
        right = (up ^ centre).norm()
        up = (centre ^ right).norm()
        return cls(eye, centre, up, right, hfov)

    @classmethod
    def _axis_aligned(cls, eye: Vector, centre: Vector, up: Vector, hfov: float) -> Camera:
        return cls(eye, centre, up, up ^ centre, hfov)

    @classmethod
    def px_towards_origin(cls, dist: float, hfov: float) -> Camera:
        """On the negative x axis, looking along +x."""
        return cls._axis_aligned(Vector(-dist, 0.0, 0.0), Vector.I, Vector.J, hfov)

    @classmethod
    def py_towards_origin(cls, dist: float, hfov: float) -> Camera:
        """On the negative y axis, looking along +y."""
        return cls._axis_aligned(Vector(0.0, -dist, 0.0), Vector.J, -Vector.K, hfov)

    @classmethod
    def pz_towards_origin(cls, dist: float, hfov: float) -> Camera:
        """On the negative z axis, looking along +z."""
        return cls._axis_aligned(Vector(0.0, 0.0, -dist), Vector.K, Vector.J, hfov)

    @classmethod
    def nx_towards_origin(cls, dist: float, hfov: float) -> Camera:
        """On the positive x axis, looking along -x."""
        return cls._axis_aligned(Vector(dist, 0.0, 0.0), -Vector.I, Vector.J, hfov)

    @classmethod
    def ny_towards_origin(cls, dist: float, hfov: float) -> Camera:
        """On the positive y axis, looking along -y."""
        return cls._axis_aligned(Vector(0.0, dist, 0.0), -Vector.J, Vector.K, hfov)

    @classmethod
    def nz_towards_origin(cls, dist: float, hfov: float) -> Camera:
        """On the positive z axis, looking along -z."""
        return cls._axis_aligned(Vector(0.0, 0.0, dist), -Vector.K, Vector.J, hfov)