"""Colour conversion, random sampling and reflection helpers."""

from __future__ import annotations

import math
import random

from .vec3 import Color, Vec3

_NEAR_ZERO_EPS = 1.0e-8


def _to_byte(num: float) -> int:
    if num < 0.0 or math.isnan(num):
        return 0
    if num >= 1.0:
        return 255
    return int(num * 256.0)


def to_rgb(vec: Vec3) -> tuple[int, int, int]:
    """Convert a colour with components in [0, 1] to 8-bit RGB."""
    return (_to_byte(vec.x), _to_byte(vec.y), _to_byte(vec.z))


def _gamma_channel(value: float, samples_per_pixel: int) -> int:
    scaled = value / samples_per_pixel
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    return int(256.0 * min(math.sqrt(scaled), 0.999))


def gamma_correction(vec: Vec3, samples_per_pixel: int) -> tuple[int, int, int]:
    """Average an accumulated colour, apply gamma 2 and convert to 8-bit RGB."""
    return (
        _gamma_channel(vec.x, samples_per_pixel),
        _gamma_channel(vec.y, samples_per_pixel),
        _gamma_channel(vec.z, samples_per_pixel),
    )


def _uniform(low: float, high: float) -> float:
    return low + (high - low) * random.random()


def random_vec(low: float, high: float) -> Vec3:
    """Vector whose components are drawn uniformly from [low, high)."""
    return Vec3(_uniform(low, high), _uniform(low, high), _uniform(low, high))


def random_in_unit_sphere() -> Vec3:
    """Random point strictly inside the unit sphere."""
    while True:
        v = random_vec(-1.0, 1.0)
        if v.length() < 1.0:
            return v


def random_in_hemisphere(normal: Vec3) -> Vec3:
    """Random point in the unit sphere on the side the normal points to."""
    in_unit_sphere = random_in_unit_sphere()
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere


def random_in_unit_disk() -> Vec3:
    """Random point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(_uniform(-1.0, 1.0), _uniform(-1.0, 1.0), 0.0)
        if p.length() < 1.0:
            return p


def near_zero(vec: Vec3) -> bool:
    """True when every component is very close to zero."""
    return all(abs(c) < _NEAR_ZERO_EPS for c in vec)


def _scale_channel(value: float) -> int:
    scaled = 255.999 * value
    if math.isnan(scaled) or scaled <= 0.0:
        return 0
    return int(scaled)


def format_color(color: Color) -> str:
    """Format a colour as three space-separated integers in 0..255."""
    return " ".join(str(_scale_channel(c)) for c in color)


def reflect(incoming: Vec3, normal: Vec3) -> Vec3:
    """Mirror reflection of a vector about a normal."""
    return incoming - 2.0 * incoming.dot(normal) * normal


def refract(incoming: Vec3, normal: Vec3, etai_over_etat: float) -> Vec3:
    """Refract a unit vector through a surface with the given index ratio."""
    cos_theta = min((-incoming).dot(normal), 1.0)
    r_out_perp = etai_over_etat * (incoming + cos_theta * normal)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * normal
    return r_out_perp + r_out_parallel