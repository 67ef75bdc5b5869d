[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtracer"
version = "0.1.0"
description = "A small Monte Carlo path tracer with spheres, triangles, diffuse, metal and glass materials"
requires-python = ">=3.10"
keywords = ["ray tracing", "path tracing", "rendering", "bvh", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pillow",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pathtracer = "pathtracer.render:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtracer"]

[tool.pytest.ini_options]
addopts = "-ra"
