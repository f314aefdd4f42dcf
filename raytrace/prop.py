"""Objects that can be placed in a scene and hit by rays."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .pixel import Rgb
from .vector import Vector


class Prop(ABC):
    """A scene object with a flat ``colour`` attribute."""

    colour: Rgb

    @abstractmethod
    def raycast(self, eye: Vector, ray: Vector) -> float | None:
        """Distance from ``eye`` to the first hit along ``ray``, or None on a miss."""


@dataclass(frozen=True, slots=True)
class Sphere(Prop):
    centre: Vector
    radius: float
    colour: Rgb

    def raycast(self, eye: Vector, ray: Vector) -> float | None:
        ray_sq = ray.sq()
        if ray_sq == 0:
            raise ValueError("ray must be a non-zero vector")
        disp = self.centre - eye
        along = disp * ray
        disc = along**2 - disp.sq() * ray_sq + ray_sq * self.radius**2
        if disc >= 0:
            t = (along - math.sqrt(disc)) / ray_sq
            return t * abs(ray)
        return None