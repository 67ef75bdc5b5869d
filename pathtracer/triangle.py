"""Triangles."""

from __future__ import annotations

from dataclasses import dataclass

from .aabb import Aabb
from .hit import HitRecord, Hittable
from .material import Material
from .ray import Ray
from .vec3 import Point3, Vec3

_F32_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Triangle(Hittable):
    """A triangle given by three vertices, with a material."""

    vertices: tuple[Point3, Point3, Point3]
    material: Material

    def __post_init__(self) -> None:
        if len(self.vertices) != 3:
            raise ValueError("a triangle needs exactly three vertices")
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Moller-Trumbore intersection in front of the ray origin."""
        v0, v1, v2 = self.vertices
        edge1 = v1 - v0
        edge2 = v2 - v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)
        if -_F32_EPSILON < a < _F32_EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)
        if t <= _F32_EPSILON:
            return None

        normal = edge1.cross(edge2).normalize()
        rec = HitRecord(p=ray.origin + t * ray.direction, normal=normal, material=self.material, t=t)
        rec.set_face_normal(ray, normal)
        return rec

    def bounding_box(self) -> Aabb | None:
        """Box around the vertices, padded so it is never infinitely thin."""
        xs, ys, zs = zip(*self.vertices)
        pad = Vec3(_F32_EPSILON, _F32_EPSILON, _F32_EPSILON)
        low = Point3(min(xs), min(ys), min(zs))
        high = Point3(max(xs), max(ys), max(zs))
        return Aabb(low - pad, high + pad)

    def centroid(self) -> Point3:
        v0, v1, v2 = self.vertices
        return (v0 + v1 + v2) / 3.0