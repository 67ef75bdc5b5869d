"""A positionable thin-lens camera."""

from __future__ import annotations

import math

from .ray import Ray
from .util import random_in_unit_disk
from .vec3 import Point3, Vec3


class Camera:
    """Camera looking from one point at another, with depth of field."""

    def __init__(
        self,
        lookfrom: Point3,
        lookat: Point3,
        vup: Vec3,
        vfov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        theta = math.radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2.0)
        viewport_width = aspect_ratio * viewport_height

        w = (lookfrom - lookat).normalize()
        u = vup.cross(w).normalize()
        v = w.cross(u)

        self._origin = lookfrom
        self._horizontal = focus_dist * viewport_width * u
        self._vertical = focus_dist * viewport_height * v
        self._lower_left_corner = (
            lookfrom - self._horizontal / 2.0 - self._vertical / 2.0 - focus_dist * w
        )
        self._u = u
        self._v = v
        self._lens_radius = aperture / 2.0

    def get_ray(self, s: float, t: float) -> Ray:
        """Ray through viewport coordinates (s, t), both in [0, 1]."""
        rd = self._lens_radius * random_in_unit_disk()
        offset = self._u * rd.x + self._v * rd.y
        origin = self._origin + offset
        target = self._lower_left_corner + s * self._horizontal + t * self._vertical
        return Ray(origin, target - origin)