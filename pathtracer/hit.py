"""Hit records and the interface of objects a ray can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .aabb import Aabb
from .ray import Ray
from .vec3 import Point3, Vec3

if TYPE_CHECKING:
    from .material import Material


@dataclass(slots=True)
class HitRecord:
    """Where a ray struck a surface and what the surface is made of."""

    p: Point3
    normal: Vec3
    material: Material
    t: float
    front_face: bool = field(default=False)

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray and record which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Closest intersection in (t_min, t_max), or None."""

    @abstractmethod
    def bounding_box(self) -> Aabb | None:
        """Box enclosing the object, or None if it is unbounded."""

    @abstractmethod
    def centroid(self) -> Point3:
        """Centre point of the object."""


class World(list, Hittable):
    """A list of hittable objects that is itself hittable."""

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = t_max
        for obj in self:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self) -> Aabb | None:
        if not self:
            return None
        output: Aabb | None = None
        for obj in self:
            box = obj.bounding_box()
            if box is None:
                return None
            output = box if output is None else output.include(box)
        return output

    def centroid(self) -> Point3:
        if not self:
            raise ValueError("an empty world has no centroid")
        total = Vec3(0.0, 0.0, 0.0)
        for obj in self:
            total = total + obj.centroid()
        return total / len(self)