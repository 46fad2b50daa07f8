"""Scene objects, rays and the scene container."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Union

from minirt.color import Color
from minirt.vector import Vec3

MAX_OBJ = 100


class SceneError(Exception):
    """Raised when a scene cannot be built."""


class ObjectType(IntEnum):
    NONE = 0
    AMBIENT = 1
    PLANE = 2
    SPHERE = 3
    CYLINDER = 4
    LIGHT = 5
    CAMERA = 6


@dataclass
class Ambient:
    intensity: float = 0.0
    color: Color = field(default_factory=Color)
    type: ClassVar[ObjectType] = ObjectType.AMBIENT


@dataclass
class Plane:
    pos: Vec3 = field(default_factory=Vec3)
    orientation: Vec3 = field(default_factory=Vec3)
    color: Color = field(default_factory=Color)
    type: ClassVar[ObjectType] = ObjectType.PLANE


@dataclass
class Sphere:
    pos: Vec3 = field(default_factory=Vec3)
    diameter: float = 0.0
    color: Color = field(default_factory=Color)
    type: ClassVar[ObjectType] = ObjectType.SPHERE


@dataclass
class Cylinder:
    """A cylinder around an axis through ``pos``, with optional caps."""

    pos: Vec3 = field(default_factory=Vec3)
    orientation: Vec3 = field(default_factory=Vec3)
    diameter: float = 0.0
    height: float = 0.0
    min: float = 0.0
    max: float = 0.0
    closed: bool = False
    cap: bool = False
    color: Color = field(default_factory=Color)
    type: ClassVar[ObjectType] = ObjectType.CYLINDER


@dataclass
class Camera:
    """Camera placement: eye point, target, field of view and up direction."""

    lookfrom: Vec3 = field(default_factory=Vec3)
    lookat: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    fov: int = 90
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    type: ClassVar[ObjectType] = ObjectType.CAMERA


@dataclass
class Light:
    pos: Vec3 = field(default_factory=Vec3)
    intensity: float = 0.0
    color: Color = field(default_factory=Color)
    type: ClassVar[ObjectType] = ObjectType.LIGHT


@dataclass(frozen=True)
class Ray:
    origin: Vec3
    dir: Vec3

    def at(self, t: float) -> Vec3:
        """The point at distance ``t`` along the ray."""
        return self.origin + self.dir.scale(t)


@dataclass(frozen=True)
class Intersection:
    t: float
    type: ObjectType


SceneObject = Union[Ambient, Plane, Sphere, Cylinder, Camera, Light]


class Scene:
    """An ordered collection of at most ``MAX_OBJ`` scene objects."""

    def __init__(self) -> None:
        self._objects: list[SceneObject] = []

    def add(self, obj: SceneObject) -> None:
        if len(self._objects) >= MAX_OBJ:
            raise SceneError(f"scene holds at most {MAX_OBJ} objects")
        self._objects.append(obj)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self._objects)