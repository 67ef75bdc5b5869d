"""Command that renders the random sphere scene to a PNG file."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from .bvh import Bvh, SplitMethod
from .camera import Camera
from .hit import World
from .material import Dielectric, Lambertian, Metal
from .sphere import Sphere
from .tracer import Tracer
from .vec3 import Color, Point3, Vec3

ASPECT_RATIO = 3.0 / 2.0
IMAGE_WIDTH = 1024
SAMPLES_PER_PIXEL = 1000
MAX_DEPTH = 100
IMAGE_OUT_DIR = "output"
IMAGE_FILE_NAME = "rendering-1024X.png"


def _random_color(rng: random.Random, low: float, high: float) -> Color:
    return Color(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))


def random_scene(rng: random.Random | None = None) -> World:
    """Ground plane, a grid of small random spheres and three large ones."""
    rng = rng or random.Random()
    world = World()
    world.append(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 12):
        for b in range(-11, 12):
            choose_mat = rng.random()
            center = Point3(a + rng.uniform(0.0, 0.9), 0.2, b + rng.uniform(0.0, 0.9))
            if choose_mat < 0.8:
                albedo = _random_color(rng, 0.0, 1.0) * _random_color(rng, 0.0, 1.0)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                material = Metal(_random_color(rng, 0.4, 1.0), rng.uniform(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.append(Sphere(center, 0.2, material))

    world.append(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.append(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.append(Sphere(Point3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the random sphere scene.")
    parser.add_argument("--width", type=int, default=IMAGE_WIDTH)
    parser.add_argument("--samples", type=int, default=SAMPLES_PER_PIXEL)
    parser.add_argument("--max-depth", type=int, default=MAX_DEPTH)
    parser.add_argument("--output-dir", default=IMAGE_OUT_DIR)
    parser.add_argument("--file-name", default=IMAGE_FILE_NAME)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    width = args.width
    height = int(width / ASPECT_RATIO)

    world = random_scene(random.Random(args.seed))
    bvh = Bvh(4, SplitMethod.MIDDLE)
    bvh.build(world)

    camera = Camera(
        Point3(13.0, 2.0, 3.0),
        Point3(0.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        20.0,
        ASPECT_RATIO,
        0.1,
        10.0,
    )
    tracer = Tracer(width, height, args.samples)

    print(f"Image Resolution: {width}x{height}")
    print(f"Image will be saved at: {args.output_dir}/{args.file_name}")
    print("Rendering Scene ...")
    tracer.trace(camera, world, args.max_depth)
    print("Scene Rendering Completed.")

    print("Saving Image ...")
    tracer.save(args.output_dir, args.file_name)
    print("Image saved successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())