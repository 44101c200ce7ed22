"""Fixed-size two-dimensional grid container with offset addressing."""

from .src.core import CellRejected, Grid, GridError, GridIterator, GridIteratorItem

__all__ = ["Grid", "GridIterator", "GridIteratorItem", "GridError", "CellRejected"]
