"""numpy interop for :class:`Grid`."""

from collections import Counter
from typing import Any, Dict, Optional

import numpy as np

from .grid import Grid


def to_array(grid: Grid[Any]) -> np.ndarray:
    """Return the raw buffer of ``grid`` as a ``(height, width)`` array."""
    width, height = grid.size()
    return np.array(grid.grid()).reshape(height, width)


def from_array(arr: np.ndarray, x_offset: int = 0, y_offset: int = 0) -> Grid[Any]:
    """Return a grid whose buffer is the row-major flattening of ``arr``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2D array, got shape {arr.shape}")
    height, width = arr.shape
    return Grid.from_cells(width, height, arr.ravel().tolist(), x_offset, y_offset)


class GridProxy:
    """Lightweight wrapper around a :class:`Grid` with cached metadata."""

    def __init__(self, grid: Grid[Any]):
        self.grid = grid
        self._array: Optional[np.ndarray] = None
        self._histogram: Optional[Dict[Any, int]] = None

    # ------------------------------------------------------------------
    def shape(self) -> tuple[int, int]:
        return self.to_array().shape

    def to_array(self) -> np.ndarray:
        if self._array is None:
            self._array = to_array(self.grid)
        return self._array

    def histogram(self) -> Dict[Any, int]:
        """Return a mapping from cell value to number of occurrences."""
        if self._histogram is None:
            self._histogram = dict(Counter(self.grid.grid()))
        return self._histogram

    def invalidate(self) -> None:
        """Drop cached values after the wrapped grid was mutated."""
        self._array = None
        self._histogram = None

    def __getitem__(self, key):
        return self.to_array()[key]


__all__ = ["GridProxy", "to_array", "from_array"]
