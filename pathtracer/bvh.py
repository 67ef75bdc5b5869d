"""Bounding volume hierarchy construction."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto

from .aabb import Aabb
from .axis import Axis
from .hit import World
from .stack import Stack
from .vec3 import Point3

logger = logging.getLogger(__name__)

_F32_EPSILON = 1.1920929e-07


class Accelerator(ABC):
    """A structure that speeds up ray intersection with a world."""

    @abstractmethod
    def build(self, world: World) -> None:
        """Build the structure over the objects of the world."""


class SplitMethod(Enum):
    """How a node's primitives are divided between its children."""

    MIDDLE = auto()


@dataclass(slots=True)
class BVHPrimitiveInfo:
    """Bounds and centroid of one object, with its index in the world."""

    primitive_index: int
    bounds: Aabb
    centroid: Point3


@dataclass(slots=True)
class BvhNode:
    """A node of the flattened tree.

    For a leaf, ``index`` is the first primitive of the node; for an interior
    node it is the position of the right child, the left child being the node
    right after its parent.
    """

    aabb: Aabb
    primitives_per_node: int = 0
    index: int | None = None
    split_axis: Axis | None = None
    leaf: bool = False

    def make_interior(self, index: int, split_axis: Axis) -> None:
        self.index = index
        self.split_axis = split_axis
        self.leaf = False

    def make_leaf(self, index: int, num_primitives: int) -> None:
        self.index = index
        self.primitives_per_node = num_primitives
        self.leaf = True

    def is_leaf(self) -> bool:
        return self.leaf

    def set_num_primitives(self, num_primitives: int) -> None:
        self.primitives_per_node = num_primitives


class Bvh(Accelerator):
    """Bounding volume hierarchy stored as a depth-first list of nodes."""

    def __init__(
        self,
        max_primitives_per_node: int | None = None,
        split_method: SplitMethod | None = None,
    ) -> None:
        self.max_primitives_per_node = 4 if max_primitives_per_node is None else max_primitives_per_node
        self.split_method = SplitMethod.MIDDLE if split_method is None else split_method
        self.nodes: list[BvhNode] = []
        self.primitives: list[BVHPrimitiveInfo] = []
        self._parent_stack: Stack[int] = Stack()

    def build(self, world: World) -> None:
        """Build the tree over every bounded object in the world."""
        self.primitives = [
            BVHPrimitiveInfo(i, box, obj.centroid())
            for i, obj in enumerate(world)
            if (box := obj.bounding_box()) is not None
        ]
        if not self.primitives:
            raise ValueError("cannot build a BVH without bounded primitives")

        self.nodes = [BvhNode(Aabb.empty()) for _ in range(2 * len(self.primitives) - 1)]
        self._build_recursive(0, len(self.primitives), 0)

        before = len(self.nodes)
        self.nodes = [node for node in self.nodes if not node.aabb.is_empty()]
        logger.info("BVH node size before cleanup: %d, after cleanup: %d", before, len(self.nodes))

    def _build_recursive(self, left: int, right: int, depth: int) -> int:
        """Build the subtree for primitives[left:right] at node ``depth``.

        Returns the position of the last node written.
        """
        aabb = Aabb.empty()
        for info in self.primitives[left:right]:
            aabb = aabb.include(info.bounds)

        num_primitives = right - left
        node = BvhNode(aabb)
        node.set_num_primitives(num_primitives)
        self.nodes[depth] = node

        if num_primitives <= self.max_primitives_per_node:
            node.make_leaf(left, num_primitives)
            return depth

        axis = aabb.largest_axis()
        if aabb.max[axis] - aabb.min[axis] < _F32_EPSILON:
            node.make_leaf(left, num_primitives)
            return depth

        if self.split_method is SplitMethod.MIDDLE:
            self.primitives[left:right] = sorted(
                self.primitives[left:right], key=lambda info: info.centroid[axis]
            )
        split = (left + right) // 2

        self._parent_stack.push(depth)
        depth = self._build_recursive(left, split, depth + 1)
        parent = self._parent_stack.pop()
        self.nodes[parent].make_interior(depth + 1, axis)
        return self._build_recursive(split, right, depth + 1)