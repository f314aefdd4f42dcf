"""A small ray tracer that renders flat-coloured spheres to PBM, PPM and QOI images."""

__version__ = "0.1.0"