"""Exceptions raised by grid containers."""

from __future__ import annotations


class GridError(Exception):
    """Base class for grid errors."""


class CellRejected(GridError):
    """Raised when a write cannot be placed in the grid.

    Covers both a coordinate outside the logical bounds and a coordinate
    whose physical index has no backing cell. The two are not told apart.
    """

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"cannot set cell ({x}, {y})")
        self.x = x
        self.y = y


__all__ = ["GridError", "CellRejected"]
