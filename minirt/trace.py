"""Ray intersection with spheres, planes and cylinders, and pixel colouring."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.color import Color
from minirt.scene import Cylinder, Intersection, ObjectType, Ray
from minirt.vector import Vec3

FLT_MAX = 3.4028234663852886e38

_SPHERE_A_CENTER = Vec3(-0.25, -0.25, -2.0)
_SPHERE_A_RADIUS = 0.3
_SPHERE_B_CENTER = Vec3(0.0, 1.0, -6.0)
_SPHERE_B_RADIUS = 0.6
_CYLINDER = Cylinder(
    pos=Vec3(0.0, 1.0, -7.0),
    orientation=Vec3(0.0, 0.0, 1.0),
    diameter=10.0,
    height=0.1,
    min=-0.5,
    max=0.5,
    closed=True,
)
_PLANE_CENTER = Vec3(0.0, 0.0, -3.0)
_PLANE_ROT = Vec3(0.0, 0.0, 1.0)
_WHITE = 0xFFFFFFFF


@dataclass(frozen=True)
class CylinderHits:
    """The two ray parameters of a cylinder hit; zero means no hit."""

    t0: float = 0.0
    t1: float = 0.0


def hit_sphere(center: Vec3, radius: float, ray: Ray) -> float:
    """Nearest ray parameter where ``ray`` meets the sphere, or -1.0."""
    oc = center - ray.origin
    a = ray.dir.length() ** 2
    h = ray.dir.dot(oc)
    c = oc.length() ** 2 - radius * radius
    discriminant = h * h - a * c
    if discriminant < 0:
        return -1.0
    return (h - math.sqrt(discriminant)) / a


def intersect_plane(center: Vec3, rot: Vec3, ray: Ray) -> float:
    """Ray parameter of a plane hit, or -1.0 when the ray is not facing it."""
    denom = center.dot(ray.origin)
    if denom > 1e-6:
        p0l0 = rot - ray.dir
        return p0l0.dot(center) / denom
    return -1.0


def _hit_plane(ray: Ray) -> float:
    t = intersect_plane(_PLANE_CENTER, _PLANE_ROT, ray)
    return t if t > 0.0 else 0.0


def check_cap(ray: Ray, t: float) -> bool:
    """Whether the point at ``t`` lies within the unit cap radius."""
    x = ray.origin.x + t * ray.dir.x
    z = ray.origin.z + t * ray.dir.z
    return x * x + z * z <= 1


def intersect_caps(cy: Cylinder, ray: Ray) -> CylinderHits:
    """Hits of ``ray`` with the end caps of a closed cylinder."""
    if not cy.closed or ray.dir.y <= 0.00001 or ray.dir.z == 0:
        return CylinderHits()
    upper = cy.pos.z + cy.max
    lower = cy.pos.z + cy.min
    t0 = 0.0
    t1 = 0.0
    t = (lower - ray.origin.z) / ray.dir.z
    if check_cap(ray, t):
        t0 = t
    t = (upper - ray.origin.z) / ray.dir.z
    if check_cap(ray, t):
        t1 = t
    return CylinderHits(t0, t1)


def intersect_cylinder(cy: Cylinder, ray: Ray) -> CylinderHits:
    """Hits of ``ray`` with the infinite side of a y-axis cylinder."""
    pos = ray.origin - cy.pos
    a = ray.dir.x ** 2 + ray.dir.z ** 2
    if a == 0.0:
        return CylinderHits()
    b = 2 * pos.x * ray.dir.x + 2 * pos.z * ray.dir.z
    c = pos.x * pos.x + pos.z * pos.z - cy.diameter / 2
    disc = b * b - 4 * a * c
    if disc < 0:
        return CylinderHits()
    root = math.sqrt(disc)
    return CylinderHits((-b - root) / (2 * a), (-b + root) / (2 * a))


def hit_cylinder(cy: Cylinder, ray: Ray) -> float:
    """Ray parameter of the first accepted cylinder hit, or 0."""
    sides = intersect_cylinder(cy, ray)
    caps = intersect_caps(cy, ray)
    upper = cy.pos.y + cy.max
    lower = cy.pos.y + cy.min
    y0 = ray.origin.y + sides.t0 * ray.dir.y
    y1 = ray.origin.y + sides.t1 * ray.dir.y
    if caps.t0:
        return caps.t0
    if caps.t1:
        return caps.t1
    if lower < y0 < upper:
        return sides.t0
    if lower < y1 < upper:
        return sides.t1
    return 0.0


def intersections(ray: Ray) -> Intersection:
    """Closest hit of ``ray`` in the built-in scene."""
    tmin = FLT_MAX
    kind = ObjectType.NONE
    candidates = (
        (hit_sphere(_SPHERE_A_CENTER, _SPHERE_A_RADIUS, ray), ObjectType.SPHERE),
        (hit_cylinder(_CYLINDER, ray), ObjectType.CYLINDER),
        (hit_sphere(_SPHERE_B_CENTER, _SPHERE_B_RADIUS, ray), ObjectType.SPHERE),
        (_hit_plane(ray), ObjectType.PLANE),
    )
    for t, candidate in candidates:
        if 0.0 < t < tmin:
            tmin = t
            kind = candidate
    return Intersection(t=tmin, type=kind)


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


def _pack(r: float, g: float, b: float) -> int:
    return Color(_channel(r), _channel(g), _channel(b)).rgba()


def color_ray(ray: Ray) -> int:
    """Packed RGBA colour seen along ``ray``."""
    hit = intersections(ray)
    if hit.type == ObjectType.SPHERE:
        normal = (ray.at(hit.t) - _SPHERE_B_CENTER).unit()
        shade = (normal + Vec3(1.0, 1.0, 1.0)).scale(0.5)
        return _pack(shade.x * 255, shade.y * 255, shade.z * 255)
    if hit.type == ObjectType.CYLINDER:
        point = ray.at(hit.t)
        normal = (point - Vec3(0.0, point.y, -7.0)).unit()
        shade = (normal + Vec3(1.0, 0.0, 1.0)).scale(0.5)
        return _pack(shade.x * 255, 0, shade.z * 255)
    if hit.type == ObjectType.PLANE:
        return _WHITE
    a = 0.5 * (ray.dir.unit().y + 1.0)
    sky = Vec3(1.0, 1.0, 1.0).scale(1.0 - a) + Vec3(0.5, 0.7, 1.0).scale(a)
    sky = sky.scale(255)
    return _pack(sky.x, sky.y, sky.z)