"""Three-component vectors and small numeric helpers for ray tracing."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector, also used for points."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3() - self

    def scale(self, factor: float) -> Vec3:
        """Multiply every component by ``factor``."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def divide(self, factor: float) -> Vec3:
        """Divide every component by ``factor``."""
        return Vec3(self.x / factor, self.y / factor, self.z / factor)

    def multiply(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def square(self) -> Vec3:
        """Component-wise square."""
        return self.multiply(self)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> Vec3:
        """Return the vector scaled to length one."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalise a zero-length vector")
        return self.scale(1.0 / length)


def reflection(vec: Vec3, n: Vec3) -> Vec3:
    """Reflect ``vec`` about the normal ``n``."""
    return vec - n.scale(2 * vec.dot(n))


def refraction(uv: Vec3, n: Vec3, e: float) -> Vec3:
    """Refract the unit direction ``uv`` through a surface with normal ``n``.

    ``e`` is the ratio of refractive indices.
    """
    cos_theta = min((-uv).dot(n), 1.0)
    perpendicular = (uv + n.scale(cos_theta)).scale(e)
    parallel = n.scale(-math.sqrt(abs(1.0 - perpendicular.dot(perpendicular))))
    return parallel + perpendicular


def reflectance(cos: float, idx: float) -> float:
    """Schlick's approximation of reflectance at angle cosine ``cos``."""
    r0 = (1.0 - idx) / (1.0 + idx)
    r0 *= r0
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def to_radians(degrees: float) -> float:
    return math.pi * degrees / 180.0


def to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def lerp(s: float, e: float, f: float) -> float:
    """Linear interpolation from ``s`` to ``e`` by fraction ``f``."""
    return s * (1.0 - f) + e * f


def color_lerp(f: float) -> int:
    """Map a fraction in [0, 1] to a colour channel value 0..255."""
    value = int(255 * lerp(0.0, 1.0, f))
    return max(0, min(255, value))


def vec3_lerp(v: Vec3) -> int:
    """Pack a vector of channel fractions into an RGBA integer."""
    return (
        (color_lerp(v.x) << 24)
        | (color_lerp(v.y) << 16)
        | (color_lerp(v.z) << 8)
        | 0xFF
    )


def linear_to_gamma(linear: float) -> float:
    """Gamma-2 correction; non-positive input gives zero."""
    if linear > 0:
        return math.sqrt(linear)
    return 0.0