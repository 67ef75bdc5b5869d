"""A simple last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO container; pop and peek return None when empty."""

    def __init__(self) -> None:
        self._elements: list[T] = []

    def push(self, item: T) -> None:
        self._elements.append(item)

    def pop(self) -> T | None:
        return self._elements.pop() if self._elements else None

    def peek(self) -> T | None:
        return self._elements[-1] if self._elements else None

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)