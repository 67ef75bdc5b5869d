import random

import pytest

from pathtracer.aabb import Aabb
from pathtracer.axis import Axis
from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3


def unit_box():
    return Aabb(Vec3(-1.0, -1.0, -1.0), Vec3(1.0, 1.0, 1.0))


def test_initiation():
    aabb = unit_box()
    assert aabb.min.x == -1.0
    assert aabb.max.x == 1.0


def test_relative_eq():
    aabb = unit_box()
    other = Aabb(
        Vec3(-1.0000001, -1.0000001, -1.0000001),
        Vec3(1.0000001, 1.0000001, 1.0000001),
    )
    assert aabb.relative_eq(other, 0.00001)


def test_relative_eq_rejects_distant_box():
    other = Aabb(Vec3(-2.0, -1.0, -1.0), Vec3(1.0, 1.0, 1.0))
    assert not unit_box().relative_eq(other, 0.00001)


def test_check_empty():
    aabb = Aabb.empty()
    x, y, z = random.random(), random.random(), random.random()
    assert x < aabb.min.x and y < aabb.min.y and z < aabb.min.z
    assert aabb.max.x < x and aabb.max.y < y and aabb.max.z < z


def test_containment():
    aabb = unit_box()
    assert aabb.contains(Vec3(0.125, -0.25, 0.5))
    assert not aabb.contains(Vec3(1.0, -2.0, 4.0))


def test_approx_containment():
    aabb = unit_box()
    assert aabb.approx_contains_eps(Vec3(0.0, 0.0, 0.0), 1e-6)
    assert not aabb.approx_contains_eps(Vec3(1.0, -2.0, 4.0), 1e-6)


def test_approx_contains_aabb():
    outer = Aabb(Vec3(-2.0, -2.0, -2.0), Vec3(2.0, 2.0, 2.0))
    assert outer.approx_contains_aabb_eps(unit_box(), 1e-6)
    assert not unit_box().approx_contains_aabb_eps(outer, 1e-6)


def test_inclusion():
    aabb1 = Aabb(Vec3(-101.0, 0.0, 0.0), Vec3(-100.0, 1.0, 1.0))
    aabb2 = Aabb(Vec3(100.0, 0.0, 0.0), Vec3(101.0, 1.0, 1.0))
    joint = aabb1.include(aabb2)

    in1 = Vec3(-100.5, 0.5, 0.5)
    in2 = Vec3(100.5, 0.5, 0.5)
    in_joint = Vec3(0.0, 0.5, 0.5)

    assert aabb1.contains(in1)
    assert not aabb1.contains(in2)
    assert not aabb1.contains(in_joint)

    assert not aabb2.contains(in1)
    assert aabb2.contains(in2)
    assert not aabb2.contains(in_joint)

    assert joint.contains(in1)
    assert joint.contains(in2)
    assert joint.contains(in_joint)


def test_inclusion_in_place():
    size = Vec3(1.0, 1.0, 1.0)
    aabb_pos = Vec3(-101.0, 0.0, 0.0)
    aabb = Aabb(aabb_pos, aabb_pos + size)
    other_pos = Vec3(100.0, 0.0, 0.0)
    other = Aabb(other_pos, other_pos + size)

    in_aabb = aabb_pos + size / 2.0
    in_other = other_pos + size / 2.0
    in_joint = Vec3(0.0, 0.0, 0.0) + size / 2.0

    assert aabb.contains(in_aabb)
    assert not aabb.contains(in_other)
    assert not aabb.contains(in_joint)

    assert not other.contains(in_aabb)
    assert other.contains(in_other)
    assert not other.contains(in_joint)

    aabb.include_in_place(other)

    assert aabb.contains(in_aabb)
    assert aabb.contains(in_other)
    assert aabb.contains(in_joint)


def test_grow():
    p1 = Vec3(0.0, 0.0, 0.0)
    p2 = Vec3(1.0, 1.0, 1.0)
    p3 = Vec3(2.0, 2.0, 2.0)

    aabb = Aabb.empty()
    assert not aabb.contains(p1)

    aabb1 = aabb.grow(p1)
    assert aabb1.contains(p1)

    aabb2 = aabb.grow(p2)
    assert aabb2.contains(p2)
    assert not aabb2.contains(p3)


def test_grow_in_place():
    p1 = Vec3(0.0, 0.0, 0.0)
    p2 = Vec3(1.0, 1.0, 1.0)
    p3 = Vec3(2.0, 2.0, 2.0)

    aabb = Aabb.empty()
    assert not aabb.contains(p1)

    aabb.grow_in_place(p1)
    assert aabb.contains(p1)

    aabb.grow_in_place(p2)
    assert aabb.contains(p2)
    assert not aabb.contains(p3)


def test_size():
    size = unit_box().size()
    assert size.x == 2.0 and size.y == 2.0 and size.z == 2.0


def test_center():
    aabb = Aabb(Vec3(41.0, 41.0, 41.0), Vec3(43.0, 43.0, 43.0))
    center = aabb.center()
    assert center.x == 42.0 and center.y == 42.0 and center.z == 42.0


def test_is_empty():
    assert Aabb.empty().is_empty()
    aabb = Aabb(Vec3(41.0, 41.0, 41.0), Vec3(43.0, 43.0, 43.0))
    assert not aabb.is_empty()


def test_surface_area():
    aabb = Aabb(Vec3(41.0, 41.0, 41.0), Vec3(43.0, 43.0, 43.0))
    assert aabb.surface_area() == 24.0


def test_volume():
    aabb = Aabb(Vec3(41.0, 41.0, 41.0), Vec3(43.0, 43.0, 43.0))
    assert aabb.volume() == 8.0


def test_largest_axis():
    aabb = Aabb(Vec3(-100.0, 0.0, 0.0), Vec3(100.0, 0.0, 0.0))
    assert aabb.largest_axis() is Axis.X


@pytest.mark.parametrize(
    "lo, hi, expected",
    [
        (Vec3(0.0, 0.0, 0.0), Vec3(1.0, 5.0, 2.0), Axis.Y),
        (Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), Axis.Z),
    ],
)
def test_largest_axis_other_axes(lo, hi, expected):
    assert Aabb(lo, hi).largest_axis() is expected


def test_hit_ray_through_box():
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    assert unit_box().hit(ray, 0.0, float("inf"))


def test_hit_ray_missing_box():
    ray = Ray(Vec3(-5.0, 3.0, 0.0), Vec3(1.0, 0.0, 0.0))
    assert not unit_box().hit(ray, 0.0, float("inf"))


def test_hit_respects_t_range():
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    assert not unit_box().hit(ray, 0.0, 1.0)


def test_hit_ray_pointing_away():
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0))
    assert not unit_box().hit(ray, 0.0, float("inf"))


def test_str_mentions_bounds():
    text = str(unit_box())
    assert text.startswith("Min bound: ")
    assert "; Max bound: " in text