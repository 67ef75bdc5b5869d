# pathtracer

A small Monte Carlo path tracer written in pure Python. It renders scenes
made of spheres and triangles with diffuse (`Lambertian`), reflective
(`Metal`) and glass (`Dielectric`) materials, through a thin-lens `Camera`
with depth of field, and writes the result as an image file with Pillow.

## Installation

```
pip install .
```

## Rendering the demo scene

```
pathtracer
```

The same command is available as `python -m pathtracer.render`.

It builds a random scene: a large ground sphere, a 23 × 23 grid of small
spheres with random materials, and three large spheres (glass, diffuse and
metal). It builds a bounding volume hierarchy over the scene, traces the
scene with a progress bar (shown when writing to a terminal), and saves the
image as `output/rendering-1024X.png`, creating the directory if needed.

Options:

| Option          | Default               | Meaning                                   |
|-----------------|-----------------------|-------------------------------------------|
| `--width`       | `1024`                | image width; height is `int(width / 1.5)` |
| `--samples`     | `1000`                | samples per pixel                         |
| `--max-depth`   | `100`                 | maximum number of bounces per ray         |
| `--output-dir`  | `output`              | directory the image is written to         |
| `--file-name`   | `rendering-1024X.png` | name of the image file                    |
| `--seed`        | none                  | seed for the random scene layout          |

The defaults take a very long time in pure Python. For a quick preview, try
something like:

```
pathtracer --width 150 --samples 8 --max-depth 10 --seed 1
```

`--seed` fixes the scene layout only; the sampling during rendering is still
random.

## Using the library

```python
from pathtracer.vec3 import Vec3
from pathtracer.camera import Camera
from pathtracer.hit import World
from pathtracer.material import Lambertian, Metal, Dielectric
from pathtracer.sphere import Sphere
from pathtracer.tracer import Tracer

world = World()
world.append(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))
world.append(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
world.append(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))

camera = Camera(
    Vec3(13.0, 2.0, 3.0),  # look from
    Vec3(0.0, 0.0, 0.0),   # look at
    Vec3(0.0, 1.0, 0.0),   # up
    20.0,                  # vertical field of view in degrees
    3.0 / 2.0,             # aspect ratio
    0.1,                   # aperture
    10.0,                  # focus distance
)

tracer = Tracer(120, 80, 8)      # width, height, samples per pixel
tracer.trace(camera, world, 20)  # maximum bounce depth
path = tracer.save("output", "scene.png")
print(path)
```

`Tracer` needs a width and height of at least 2 and at least one sample per
pixel, and raises `ValueError` otherwise. `Tracer.image` returns a copy of
the rendered Pillow image; `Tracer.save` returns the path it wrote.
`render.random_scene(rng)` returns the demo scene as a `World` and takes an
optional `random.Random`.

### Building blocks

- `pathtracer.vec3.Vec3` — an immutable 3-vector with arithmetic, indexing,
  `dot`, `cross`, `length`, `length_squared` and `normalize`. `Point3` and
  `Color` are aliases of it.
- `pathtracer.ray.Ray` — an origin and a direction; `at(t)` gives the point
  along the ray.
- `pathtracer.aabb.Aabb` — an axis-aligned bounding box with a ray slab test
  (`hit`), `contains`, union (`include`, `include_in_place`), `grow`,
  `grow_in_place`, `size`, `center`, `surface_area`, `volume`,
  `largest_axis` and `relative_eq`. `Aabb.empty()` is a box that contains
  nothing.
- `pathtracer.axis.Axis` — the X, Y and Z axes as integer indices.
- `pathtracer.hit` — `HitRecord`, the abstract `Hittable`, and `World`, a
  list of hittable objects whose `hit` returns the closest `HitRecord` or
  `None`.
- `pathtracer.sphere.Sphere` and `pathtracer.triangle.Triangle` — the two
  primitives, each with `hit`, `bounding_box` and `centroid`.
- `pathtracer.material` — the abstract `Material` and `Lambertian`, `Metal`
  and `Dielectric`; `scatter` returns an attenuation and a scattered ray, or
  `None` when the ray is absorbed. `Dielectric.reflectance` is Schlick's
  approximation.
- `pathtracer.bvh.Bvh` — builds a bounding volume hierarchy over a world,
  splitting at the middle along the largest axis; the flattened nodes are in
  `Bvh.nodes`. Building from a world with no bounded objects raises
  `ValueError`.
- `pathtracer.stack.Stack` — a small LIFO stack whose `pop` and `peek`
  return `None` when empty.
- `pathtracer.util` — sampling helpers (`random_vec`,
  `random_in_unit_sphere`, `random_in_hemisphere`, `random_in_unit_disk`),
  `near_zero`, `reflect`, `refract` and colour conversion
  (`gamma_correction`, `to_rgb`, `format_color`).

## What it does not do

- The bounding volume hierarchy is only built; it has no ray traversal.
  `Tracer` tests every ray against every object in the world, so rendering
  time grows with the number of objects.
- Rendering runs in a single process on one core.
- There is no scene file format and no model loading; scenes are built in
  Python code.

## Running the tests

```
pip install .[test]
pytest
```