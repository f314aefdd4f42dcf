"""A collection of props seen through a camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .camera import Camera
from .image import Image
from .pixel import Rgb
from .prop import Prop


def _distance_key(item: tuple[Prop, float]) -> tuple[bool, float]:
    dist = item[1]
    if math.isnan(dist):
        return (True, 0.0)
    return (False, dist)


@dataclass
class Scene:
    """Props rendered against a flat background colour."""

    camera: Camera
    props: list[Prop] = field(default_factory=list)
    bg: Rgb = field(default_factory=Rgb.white)

    def clear(self) -> None:
        self.props.clear()

    def push(self, prop: Prop) -> None:
        if not isinstance(prop, Prop):
            raise TypeError(f"expected a prop, got {prop!r}")
        self.props.append(prop)

    def raycast(self, coord: tuple[int, int], size: tuple[int, int]) -> Rgb | None:
        """Colour of the nearest prop seen at pixel ``coord`` of an image of ``size``."""
        x, y = coord
        w, h = size
        cam = self.camera
        focus = w / 2 / math.tan(math.radians(cam.hfov / 2))
        xproj = float(x - w // 2)
        yproj = float(-(y - h // 2))
        ray = focus * cam.centre + xproj * cam.right + yproj * cam.up

        hits = [
            (prop, dist)
            for prop in self.props
            if (dist := prop.raycast(cam.eye, ray)) is not None
        ]
        if not hits:
            return None
        nearest, _ = min(hits, key=_distance_key)
        return nearest.colour

    def render(self, width: int, height: int) -> Image:
        """Render to an RGB image, using the background where nothing is hit."""

        def shade(coord: tuple[int, int]) -> Rgb:
            colour = self.raycast(coord, (width, height))
            return self.bg if colour is None else colour

        return Image.fill_with(width, height, Rgb, shade)