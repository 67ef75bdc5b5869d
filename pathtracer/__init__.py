"""A small Monte Carlo path tracer with spheres, triangles and simple materials."""

__version__ = "0.1.0"