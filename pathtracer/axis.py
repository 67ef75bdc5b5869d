"""Coordinate axes."""

from enum import IntEnum


class Axis(IntEnum):
    """Index of a coordinate axis."""

    X = 0
    Y = 1
    Z = 2

    def __str__(self) -> str:
        return self.name.lower()