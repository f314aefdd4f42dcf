# raytrace

A small ray tracer in plain Python with no third-party dependencies. It
casts one ray per pixel from a pinhole camera into a scene of spheres,
paints each pixel with the flat colour of the nearest sphere hit (or the
background colour), and encodes the result as a PBM (P1), PPM (P6) or QOI
image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `raytrace` command renders the built-in demo scene (a red sphere and a
green sphere on a white background, seen from the negative z axis with a
120° horizontal field of view) and writes the encoded image to standard
output, or to a file with `-o`:

```
raytrace > spheres.qoi
raytrace --width 640 --height 360 --format ppm -o spheres.ppm
```

Options:

- `--width N`, `--height N`: image size in pixels, positive integers
  (defaults 7680 and 4320).
- `--format {pbm,ppm,qoi}`: output encoding (default `qoi`).
- `-o FILE`, `--output FILE`: write to `FILE` instead of standard output.

At the default size a pure-Python render takes a long time; pass a smaller
size for a quick look.

## Library use

```python
from raytrace.camera import Camera
from raytrace.pixel import Rgb
from raytrace.prop import Sphere
from raytrace.scene import Scene
from raytrace.vector import Vector

scene = Scene(
    camera=Camera.pz_towards_origin(20.0, 120.0),
    props=[
        Sphere(centre=Vector(-3.0, 5.0, -10.0), radius=5.0, colour=Rgb(0xFF, 0, 0)),
        Sphere(centre=Vector(4.0, 5.0, 10.0), radius=5.0, colour=Rgb(0, 0xFF, 0)),
    ],
    bg=Rgb.white(),
)

image = scene.render(320, 180)

with open("spheres.qoi", "wb") as out:
    out.write(image.to_qoi())
```

`raytrace.cli.demo_scene()` returns the same scene the command renders.

### Modules

- `raytrace.vector`: `Vector`, an immutable 3-vector. `+`, `-`, `-v`,
  scaling with `*` and `/`, the dot product with `v * w`, the cross product
  with `v ^ w`, length with `abs(v)`; also `dot`, `cross`, `sq`, `norm`,
  `to_tuple`, `Vector.from_iterable`, `Vector.unit(axis)`,
  `replace_component(index, value)` and `rotate_on_axis(axis, theta)` with
  `theta` in degrees. Indexing wraps modulo 3. `Vector.I`, `Vector.J`,
  `Vector.K` are the unit axes and `Vector.X`, `Vector.Y`, `Vector.Z` the
  axis numbers.
- `raytrace.pixel`: the `Pixel` base class and the formats `Rgba`, `Rgb`,
  `Grey` and `Bit`, each with `white()`, `black()`, `to_rgba()`, `to_rgb()`,
  `to_grey()` and `to_bit()`. Channels must be integers in 0..255 (a
  `ValueError` otherwise). Grey levels use the weights 0.299, 0.587 and
  0.114; `to_bit()` is true for black (grey level 0).
- `raytrace.camera`: `Camera`, with `eye`, `centre`, `up`, `right` and
  `hfov` (horizontal field of view in degrees). `Camera.looking(eye, centre,
  up, hfov)` orthonormalises the view basis; `px_towards_origin`,
  `py_towards_origin`, `pz_towards_origin`, `nx_towards_origin`,
  `ny_towards_origin` and `nz_towards_origin` take `(dist, hfov)` and place
  the camera `dist` units out on the named axis, looking at the origin.
- `raytrace.prop`: the abstract `Prop` and `Sphere(centre, radius, colour)`.
  `raycast(eye, ray)` returns the distance to the hit or `None` on a miss,
  and raises `ValueError` for a zero ray.
- `raytrace.image`: `Image`, a `width` by `height` grid of one pixel type,
  indexed as `image[x, y]` (out-of-range indices raise `IndexError`, pixels
  of the wrong type `TypeError`). Build with `Image.fill(width, height,
  pixel)`, `Image.fill_with(width, height, pixel_type, func)`,
  `Image.white(...)` or `Image.black(...)`. Iterating yields rows top to
  bottom; `len()` is the height. Encoders: `to_pbm_p1()`, `to_ppm_p6()` and
  `to_qoi()` (four channels, linear alpha), each returning `bytes`.
- `raytrace.scene`: `Scene(camera, props=[], bg=Rgb.white())` with
  `push(prop)`, `clear()`, `raycast(coord, size)` (the colour seen at one
  pixel, or `None`) and `render(width, height)`, which returns an `Image` of
  `Rgb` pixels.
- `raytrace.cli`: `main(argv=None)` and `demo_scene()`.

## What it does not do

There is no lighting, shading, shadows, reflection or anti-aliasing: every
hit pixel takes the flat colour of the sphere. Spheres are the only shape.
Images can be written but not read back; there is no decoder for any of the
formats, and scenes cannot be loaded from files.