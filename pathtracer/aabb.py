"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .axis import Axis
from .ray import Ray
from .vec3 import Point3, Vec3


def _component_min(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def _component_max(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


def _format_vec(v: Vec3) -> str:
    return f"[{v.x}, {v.y}, {v.z}]"


def _inverse(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(slots=True)
class Aabb:
    """A three-dimensional axis-aligned bounding box."""

    min: Point3
    max: Point3

    @classmethod
    def empty(cls) -> Aabb:
        """A box that contains nothing and is neutral under include."""
        return cls(
            Vec3(math.inf, math.inf, math.inf),
            Vec3(-math.inf, -math.inf, -math.inf),
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """True if the ray passes through the box within [t_min, t_max]."""
        for axis in Axis:
            inv_d = _inverse(ray.direction[axis])
            t0 = (self.min[axis] - ray.origin[axis]) * inv_d
            t1 = (self.max[axis] - ray.origin[axis]) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = max(t_min, t0)
            t_max = min(t_max, t1)
            if t_max <= t_min:
                return False
        return True

    def is_empty(self) -> bool:
        return (
            self.min.x > self.max.x
            or self.min.y > self.max.y
            or self.min.z > self.max.z
        )

    def contains(self, point: Point3) -> bool:
        return all(
            lo <= p <= hi for p, lo, hi in zip(point, self.min, self.max)
        )

    def approx_contains_eps(self, point: Point3, epsilon: float) -> bool:
        return (
            point.x - self.min.x > -epsilon
            and point.x - self.max.x < epsilon
            and point.y - self.min.y > epsilon
            and point.y - self.max.y < epsilon
            and point.z - self.min.z > epsilon
            and point.z - self.max.z < epsilon
        )

    def approx_contains_aabb_eps(self, other: Aabb, epsilon: float) -> bool:
        return self.approx_contains_eps(
            other.min, epsilon
        ) and self.approx_contains_eps(other.max, epsilon)

    def relative_eq(self, other: Aabb, epsilon: float) -> bool:
        """True if every bound differs from the other's by less than epsilon."""
        pairs = zip((*self.min, *self.max), (*other.min, *other.max))
        return all(abs(a - b) < epsilon for a, b in pairs)

    def include(self, other: Aabb) -> Aabb:
        """Smallest box enclosing both boxes."""
        return Aabb(
            _component_min(self.min, other.min),
            _component_max(self.max, other.max),
        )

    def include_in_place(self, other: Aabb) -> None:
        self.min = _component_min(self.min, other.min)
        self.max = _component_max(self.max, other.max)

    def grow(self, point: Point3) -> Aabb:
        """Smallest box enclosing this box and the point."""
        return Aabb(_component_min(self.min, point), _component_max(self.max, point))

    def grow_in_place(self, point: Point3) -> None:
        self.min = _component_min(self.min, point)
        self.max = _component_max(self.max, point)

    def size(self) -> Vec3:
        return self.max - self.min

    def center(self) -> Point3:
        return self.min + self.size() / 2.0

    def surface_area(self) -> float:
        s = self.size()
        return 2.0 * (s.x * s.y + s.x * s.z + s.y * s.z)

    def volume(self) -> float:
        s = self.size()
        return s.x * s.y * s.z

    def largest_axis(self) -> Axis:
        s = self.size()
        if s.x > s.y and s.x > s.z:
            return Axis.X
        if s.y > s.z:
            return Axis.Y
        return Axis.Z

    def __str__(self) -> str:
        return f"Min bound: {_format_vec(self.min)}; Max bound: {_format_vec(self.max)}"