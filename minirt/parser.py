"""Reading scene descriptions: one tab-separated object per line."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from minirt.color import parse_color
from minirt.numbers import atof, atoi, split
from minirt.scene import (
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Scene,
    SceneError,
    SceneObject,
    Sphere,
)
from minirt.vector import Vec3

_LINE_CHARS = "ACLsplcy0123456789.,\t"


class ParseError(SceneError):
    """Raised when a scene description cannot be read."""


def split_and_check(text: str, sep: str, fields: int) -> list[str]:
    """Split ``text`` on ``sep`` and require exactly ``fields`` pieces."""
    pieces = split(text, sep)
    if len(pieces) != fields:
        raise ParseError(
            f"expected {fields} fields separated by {sep!r}, "
            f"got {len(pieces)} in {text!r}"
        )
    return pieces


def parse_vec3(text: str) -> Vec3:
    """Parse ``x,y,z`` into a vector."""
    x, y, z = (atof(piece) for piece in split_and_check(text, ",", 3))
    return Vec3(x, y, z)


def validate_orientation(orientation: Vec3) -> bool:
    """Whether every component of ``orientation`` lies in [0, 1]."""
    return all(
        0.0 <= component <= 1.0
        for component in (orientation.x, orientation.y, orientation.z)
    )


def validate_line(line: str) -> bool:
    """Whether ``line`` holds only identifier letters, digits, dots, commas
    and tabs, and ends with a newline."""
    return line.strip(_LINE_CHARS).startswith("\n")


def check_filetype(filename: str) -> bool:
    """Whether ``filename`` carries the ``.rt`` extension."""
    dot = filename.rfind(".")
    return dot != -1 and filename[dot:] == ".rt"


def parse_ambient(line: str) -> Ambient:
    """``A <intensity> <r,g,b>``"""
    fields = split_and_check(line, "\t", 3)
    return Ambient(
        intensity=atof(fields[1]),
        color=parse_color(split_and_check(fields[2], ",", 3)),
    )


def parse_camera(line: str) -> Camera:
    """``C <x,y,z> <x,y,z direction> <fov>``; the field of view is 8-bit."""
    fields = split_and_check(line, "\t", 4)
    return Camera(
        lookfrom=parse_vec3(fields[1]),
        lookat=parse_vec3(fields[2]),
        fov=atoi(fields[3]) & 0xFF,
    )


def parse_light(line: str) -> Light:
    """``L <x,y,z> <intensity> <r,g,b>``"""
    fields = split_and_check(line, "\t", 4)
    return Light(
        pos=parse_vec3(fields[1]),
        intensity=atof(fields[2]),
        color=parse_color(split_and_check(fields[3], ",", 3)),
    )


def parse_sphere(line: str) -> Sphere:
    """``sp <x,y,z> <diameter> <r,g,b>``"""
    fields = split_and_check(line, "\t", 4)
    return Sphere(
        pos=parse_vec3(fields[1]),
        diameter=atof(fields[2]),
        color=parse_color(split_and_check(fields[3], ",", 3)),
    )


def parse_cylinder(line: str) -> Cylinder:
    """``cy <x,y,z> <axis> <diameter> <height> <r,g,b>``"""
    fields = split_and_check(line, "\t", 6)
    return Cylinder(
        pos=parse_vec3(fields[1]),
        orientation=parse_vec3(fields[2]),
        diameter=atof(fields[3]),
        height=atof(fields[4]),
        color=parse_color(split_and_check(fields[5], ",", 3)),
    )


def parse_plane(line: str) -> Plane:
    """``pl <x,y,z> <normal> <r,g,b>``"""
    fields = split_and_check(line, "\t", 4)
    return Plane(
        pos=parse_vec3(fields[1]),
        orientation=parse_vec3(fields[2]),
        color=parse_color(split_and_check(fields[3], ",", 3)),
    )


_DISPATCH = (
    ("L", parse_light),
    ("C", parse_camera),
    ("A", parse_ambient),
    ("s", parse_sphere),
    ("c", parse_cylinder),
    ("p", parse_plane),
)


def parse_line(line: str, scene: Scene) -> bool:
    """Parse one line into ``scene``.

    The object kind is chosen by the first of ``L C A s c p`` found anywhere
    in the line. Returns False when none is present.
    """
    for marker, parse in _DISPATCH:
        if marker in line:
            obj: SceneObject = parse(line)
            scene.add(obj)
            return True
    return False


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a scene from lines; empty strings are skipped."""
    scene = Scene()
    for line in lines:
        if not line:
            continue
        if not parse_line(line, scene):
            raise ParseError(f"unrecognised line: {line!r}")
    return scene


def parse_file(filename: str | Path) -> Scene:
    """Read a ``.rt`` scene file."""
    name = str(filename)
    if not check_filetype(name):
        raise ParseError(f"not a valid file: {name}")
    try:
        with open(name, encoding="utf-8", newline="\n") as handle:
            return parse_lines(handle)
    except OSError as exc:
        raise ParseError(f"cannot read {name}: {exc.strerror or exc}") from exc