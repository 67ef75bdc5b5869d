import pytest
from PIL import Image

from pathtracer.camera import Camera
from pathtracer.hit import World
from pathtracer.material import Lambertian
from pathtracer.ray import Ray
from pathtracer.sphere import Sphere
from pathtracer.tracer import Tracer
from pathtracer.vec3 import Color, Point3, Vec3


def _camera(aspect=1.0):
    return Camera(
        Point3(0.0, 0.0, 0.0),
        Point3(0.0, 0.0, -1.0),
        Vec3(0.0, 1.0, 0.0),
        20.0,
        aspect,
        0.0,
        1.0,
    )


@pytest.mark.parametrize("width,height,samples", [(1, 4, 1), (4, 1, 1), (4, 4, 0)])
def test_invalid_sizes_rejected(width, height, samples):
    with pytest.raises(ValueError):
        Tracer(width, height, samples)


def test_depth_zero_is_black():
    tracer = Tracer(2, 2, 1)
    ray = Ray(Point3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert tracer.ray_color(ray, World(), 0) == Color(0.0, 0.0, 0.0)


def test_sky_straight_up_is_blue():
    tracer = Tracer(2, 2, 1)
    ray = Ray(Point3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    color = tracer.ray_color(ray, World(), 5)
    assert (color.x, color.y, color.z) == pytest.approx((0.5, 0.7, 1.0), abs=1e-9)


def test_sky_straight_down_is_white():
    tracer = Tracer(2, 2, 1)
    ray = Ray(Point3(0.0, 0.0, 0.0), Vec3(0.0, -3.0, 0.0))
    color = tracer.ray_color(ray, World(), 5)
    assert (color.x, color.y, color.z) == pytest.approx((1.0, 1.0, 1.0), abs=1e-9)


def test_black_surface_absorbs():
    world = World([Sphere(Point3(0.0, 0.0, -5.0), 1.0, Lambertian(Color(0.0, 0.0, 0.0)))])
    tracer = Tracer(2, 2, 1)
    ray = Ray(Point3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert tracer.ray_color(ray, world, 10) == Color(0.0, 0.0, 0.0)


def test_hit_with_single_bounce_budget_is_black():
    world = World([Sphere(Point3(0.0, 0.0, -5.0), 1.0, Lambertian(Color(0.9, 0.9, 0.9)))])
    tracer = Tracer(2, 2, 1)
    ray = Ray(Point3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert tracer.ray_color(ray, world, 1) == Color(0.0, 0.0, 0.0)


def test_trace_empty_world_has_full_blue():
    tracer = Tracer(4, 3, 2)
    tracer.trace(_camera(4 / 3), World(), 3)
    image = tracer.image
    assert image.size == (4, 3)
    assert all(pixel[2] == 255 for pixel in image.getdata())
    assert all(pixel[0] <= pixel[1] <= pixel[2] for pixel in image.getdata())


def test_trace_black_sphere_fills_view():
    world = World([Sphere(Point3(0.0, 0.0, -100.0), 90.0, Lambertian(Color(0.0, 0.0, 0.0)))])
    tracer = Tracer(3, 3, 1)
    tracer.trace(_camera(), world, 4)
    assert set(tracer.image.getdata()) == {(0, 0, 0)}


def test_save_round_trip(tmp_path):
    tracer = Tracer(3, 2, 1)
    tracer.trace(_camera(1.5), World(), 2)
    path = tracer.save(tmp_path / "nested" / "out", "image.png")
    assert path == tmp_path / "nested" / "out" / "image.png"
    with Image.open(path) as loaded:
        assert loaded.size == (3, 2)
        assert list(loaded.convert("RGB").getdata()) == list(tracer.image.getdata())