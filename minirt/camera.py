"""Camera set-up: from a placement to a grid of pixel centres."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.scene import Camera
from minirt.vector import Vec3, to_radians


@dataclass(frozen=True)
class CameraFrame:
    """A camera prepared for an image of ``width`` x ``height`` pixels.

    ``u``, ``v`` and ``w`` are the camera's basis vectors; ``pixel_delta_u``
    and ``pixel_delta_v`` are the steps between neighbouring pixel centres.
    """

    lookfrom: Vec3
    lookat: Vec3
    fov: int
    vup: Vec3
    pixel00_pos: Vec3
    u: Vec3
    v: Vec3
    w: Vec3
    pixel_delta_u: Vec3
    pixel_delta_v: Vec3
    width: int
    height: int
    aspectratio: float

    def pixel_center(self, i: float, j: float) -> Vec3:
        """Position of the centre of pixel column ``i``, row ``j``."""
        return (
            self.pixel00_pos
            + self.pixel_delta_u.scale(i)
            + self.pixel_delta_v.scale(j)
        )


def calculate_height(width: int, aspectratio: float) -> int:
    """Image height for ``width`` at ``aspectratio``, never below one."""
    return max(int(width / aspectratio), 1)


def initialize_camera(camera: Camera, width: int, height: int) -> CameraFrame:
    """Build the viewport for ``camera`` on an image of the given size.

    The eye is placed at the origin; ``camera.lookat`` sets the viewing
    direction and, through its distance, the focal length.
    """
    if width < 1 or height < 1:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    aspectratio = width / height
    lookfrom = Vec3()
    offset = lookfrom - camera.lookat
    focal_length = offset.length()
    theta = to_radians(camera.fov / 2.0)
    h = math.tan(theta / 2)
    viewport_height = 2 * h * focal_length
    viewport_width = viewport_height * aspectratio

    w = offset.unit()
    u = camera.vup.cross(w).unit()
    v = w.cross(u)

    viewport_u = u.scale(viewport_width)
    viewport_v = v.scale(-1).scale(viewport_height)
    pixel_delta_u = viewport_u.scale(1.0 / width)
    pixel_delta_v = viewport_v.scale(1.0 / height)
    upper_left = (
        lookfrom
        - w.scale(focal_length)
        - viewport_u.scale(0.5)
        - viewport_v.scale(0.5)
    )
    pixel00_pos = upper_left + (pixel_delta_u + pixel_delta_v).scale(0.5)

    return CameraFrame(
        lookfrom=lookfrom,
        lookat=camera.lookat,
        fov=camera.fov,
        vup=camera.vup,
        pixel00_pos=pixel00_pos,
        u=u,
        v=v,
        w=w,
        pixel_delta_u=pixel_delta_u,
        pixel_delta_v=pixel_delta_v,
        width=width,
        height=height,
        aspectratio=aspectratio,
    )