"""A small ray tracer: renders a built-in demo scene to PPM and reads .rt scene files."""

__version__ = "0.1.0"