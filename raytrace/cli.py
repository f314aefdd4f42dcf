"""Render the demonstration scene and write the encoded image to a file or stdout."""

from __future__ import annotations

import argparse
import sys

from .camera import Camera
from .pixel import Rgb
from .prop import Sphere
from .scene import Scene
from .vector import Vector

_ENCODERS = {
    "qoi": lambda img: img.to_qoi(),
    "ppm": lambda img: img.to_ppm_p6(),
    "pbm": lambda img: img.to_pbm_p1(),
}


def demo_scene() -> Scene:
    """A red and a green sphere on white, seen from the negative z axis."""
    return Scene(
        camera=Camera.pz_towards_origin(20.0, 120.0),
        props=[
            Sphere(Vector(-3.0, 5.0, -10.0), 5.0, Rgb(0xFF, 0, 0)),
            Sphere(Vector(4.0, 5.0, 10.0), 5.0, Rgb(0, 0xFF, 0)),
        ],
        bg=Rgb.white(),
    )


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="raytrace", description=__doc__)
    parser.add_argument("--width", type=_positive_int, default=7680)
    parser.add_argument("--height", type=_positive_int, default=4320)
    parser.add_argument("--format", choices=sorted(_ENCODERS), default="qoi")
    parser.add_argument("-o", "--output", help="output file (default: stdout)")
    args = parser.parse_args(argv)

    image = demo_scene().render(args.width, args.height)
    data = _ENCODERS[args.format](image)

    if args.output:
        with open(args.output, "wb") as fh:
            fh.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())