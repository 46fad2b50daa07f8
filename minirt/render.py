"""Render the built-in scene to an image file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from minirt.camera import CameraFrame, initialize_camera
from minirt.scene import Camera, Ray
from minirt.trace import color_ray
from minirt.vector import Vec3

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


def render(frame: CameraFrame) -> list[list[int]]:
    """Trace one ray per pixel and return rows of packed RGBA colours."""
    origin = Vec3()
    return [
        [
            color_ray(Ray(origin, frame.pixel_center(i, j) - origin))
            for i in range(frame.width)
        ]
        for j in range(frame.height)
    ]


def save_ppm(pixels: Sequence[Sequence[int]], path: str | Path) -> None:
    """Write rows of packed RGBA colours as a binary PPM (alpha dropped)."""
    if not pixels or not pixels[0]:
        raise ValueError("image is empty")
    width = len(pixels[0])
    if any(len(row) != width for row in pixels):
        raise ValueError("image rows differ in length")
    body = bytearray()
    for row in pixels:
        for value in row:
            body += bytes(((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF))
    header = f"P6\n{width} {len(pixels)}\n255\n".encode("ascii")
    Path(path).write_bytes(header + bytes(body))


def main(argv: Sequence[str] | None = None) -> int:
    """Render the scene and save it; returns the exit status."""
    parser = argparse.ArgumentParser(prog="minirt", description="Render the scene to a PPM image.")
    parser.add_argument("output", nargs="?", default="minirt.ppm", help="image file to write")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)

    camera = Camera(lookat=Vec3(0.0, 0.0, -1.0), vup=Vec3(0.0, 1.0, 0.0), fov=90)
    try:
        frame = initialize_camera(camera, args.width, args.height)
        save_ppm(render(frame), args.output)
    except (OSError, ValueError) as exc:
        print(f"minirt: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())