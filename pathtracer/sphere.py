"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .aabb import Aabb
from .hit import HitRecord, Hittable
from .material import Material
from .ray import Ray
from .vec3 import Point3, Vec3


@dataclass(frozen=True)
class Sphere(Hittable):
    """A sphere with a centre, a radius and a material."""

    center: Point3
    radius: float
    material: Material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Intersection at the near root of the ray-sphere equation, if in range."""
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None

        root = (-half_b - math.sqrt(discriminant)) / a
        if root < t_min or t_max < root:
            return None

        p = ray.at(root)
        rec = HitRecord(p=p, normal=Vec3(0.0, 0.0, 0.0), material=self.material, t=root)
        rec.set_face_normal(ray, (p - self.center) / self.radius)
        return rec

    def bounding_box(self) -> Aabb | None:
        r = Vec3(self.radius, self.radius, self.radius)
        return Aabb(self.center - r, self.center + r)

    def centroid(self) -> Point3:
        return self.center