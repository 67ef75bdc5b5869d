"""Render a world through a camera into an RGB image."""

from __future__ import annotations

import math
from pathlib import Path

from PIL import Image
from tqdm import tqdm

from .camera import Camera
from .hit import Hittable
from .ray import Ray
from .util import gamma_correction
from .vec3 import Color

import random

_BLACK = Color(0.0, 0.0, 0.0)
_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)
_T_MIN = 0.001


class Tracer:
    """Path tracer that fills an image buffer of a fixed size."""

    def __init__(self, width: int, height: int, samples: int) -> None:
        if width < 2 or height < 2:
            raise ValueError("image width and height must both be at least 2")
        if samples < 1:
            raise ValueError("at least one sample per pixel is needed")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples
        self._image = Image.new("RGB", (width, height))

    @property
    def image(self) -> Image.Image:
        """A copy of the current image buffer."""
        return self._image.copy()

    def ray_color(self, ray: Ray, world: Hittable, depth: int) -> Color:
        """Colour seen along a ray, following at most ``depth`` bounces."""
        attenuation_total = _WHITE
        current = ray
        for _ in range(depth):
            rec = world.hit(current, _T_MIN, math.inf)
            if rec is None:
                unit_direction = current.direction.normalize()
                t = 0.5 * (unit_direction.y + 1.0)
                sky = (1.0 - t) * _WHITE + t * _SKY_BLUE
                return attenuation_total * sky
            scattered = rec.material.scatter(current, rec)
            if scattered is None:
                return _BLACK
            attenuation, current = scattered
            attenuation_total = attenuation_total * attenuation
        return _BLACK

    def _pixel(self, camera: Camera, world: Hittable, x: int, y: int, max_depth: int) -> tuple[int, int, int]:
        color = _BLACK
        for _ in range(self.samples_per_pixel):
            u = (x + random.random()) / (self.width - 1)
            v = 1.0 - (y + random.random()) / (self.height - 1)
            color = color + self.ray_color(camera.get_ray(u, v), world, max_depth)
        return gamma_correction(color, self.samples_per_pixel)

    def trace(self, camera: Camera, world: Hittable, max_depth: int) -> None:
        """Render every pixel of the image, showing progress on a terminal."""
        pixels: list[tuple[int, int, int]] = []
        with tqdm(total=self.width * self.height, unit="px", disable=None) as bar:
            for y in range(self.height):
                for x in range(self.width):
                    pixels.append(self._pixel(camera, world, x, y, max_depth))
                bar.update(self.width)
        self._image.putdata(pixels)

    def save(self, directory: str | Path, file_name: str) -> Path:
        """Write the image into ``directory`` (created if needed); return the path."""
        folder = Path(directory)
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / file_name
        self._image.save(path)
        return path