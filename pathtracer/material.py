"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .hit import HitRecord
from .ray import Ray
from .util import near_zero, random_in_unit_sphere, reflect, refract
from .vec3 import Color


class Material(ABC):
    """How light leaving a surface relates to light arriving at it."""

    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        """Attenuation and scattered ray, or None if the ray is absorbed."""


@dataclass(frozen=True, slots=True)
class Lambertian(Material):
    """Ideal diffuse surface."""

    albedo: Color

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        direction = rec.normal + random_in_unit_sphere().normalize()
        if near_zero(direction):
            direction = rec.normal
        return self.albedo, Ray(rec.p, direction)


@dataclass(frozen=True, slots=True)
class Metal(Material):
    """Reflective surface; fuzz perturbs the reflected direction."""

    albedo: Color
    fuzz: float

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        scattered = Ray(rec.p, reflected + self.fuzz * random_in_unit_sphere())
        if scattered.direction.dot(rec.normal) > 0.0:
            return self.albedo, scattered
        return None


@dataclass(frozen=True, slots=True)
class Dielectric(Material):
    """Clear material such as glass, with the given index of refraction."""

    ir: float

    @staticmethod
    def reflectance(cosine: float, ref_idx: float) -> float:
        """Schlick's approximation of reflectance."""
        r0 = ((1.0 - ref_idx) / (1.0 + ref_idx)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Color, Ray] | None:
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        will_reflect = random.random() < self.reflectance(cos_theta, refraction_ratio)

        if cannot_refract or will_reflect:
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Color(1.0, 1.0, 1.0), Ray(rec.p, direction)