"""Row-major traversal over a grid buffer."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


def coords_to_index(x: int, y: int, width: int, offset: int) -> int:
    """Return the physical buffer index of logical ``(x, y)``."""
    return (y * width + x) + offset


@dataclass
class GridIteratorItem(Generic[T]):
    """A cell produced while walking a grid."""

    element: T
    x: int
    y: int


class GridIterator(Generic[T]):
    """Cursor over a buffer owned by the iterator.

    ``x`` runs fastest, then ``y``. Traversal stops at the first position
    whose physical index has no backing cell, so a zero-offset grid yields
    exactly ``width * height`` items.
    """

    def __init__(self, storage: List[T], width: int, height: int, offset: int = 0) -> None:
        self._storage = storage
        self._width = width
        self._height = height
        self._offset = offset
        self._x = 0
        self._y = 0
        self._done = False

    def __iter__(self) -> "GridIterator[T]":
        return self

    def __next__(self) -> GridIteratorItem[T]:
        if self._done:
            raise StopIteration
        if self._x >= self._width:
            self._x = 0
            self._y += 1
        if self._y >= self._height or self._width == 0:
            self._done = True
            raise StopIteration

        index = coords_to_index(self._x, self._y, self._width, self._offset)
        if not 0 <= index < len(self._storage):
            self._done = True
            raise StopIteration

        item = GridIteratorItem(copy.copy(self._storage[index]), self._x, self._y)
        self._x += 1
        return item


__all__ = ["GridIterator", "GridIteratorItem", "coords_to_index"]
