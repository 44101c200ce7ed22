"""Core grid utilities and data structures."""

from .errors import CellRejected, GridError
from .grid import Grid
from .iterator import GridIterator, GridIteratorItem
from .grid_utils import compare_to, compute_conflict_map, structural_diff
from .grid_proxy import GridProxy, from_array, to_array

__all__ = [
    "Grid",
    "GridIterator",
    "GridIteratorItem",
    "GridError",
    "CellRejected",
    "GridProxy",
    "compare_to",
    "compute_conflict_map",
    "structural_diff",
    "from_array",
    "to_array",
]
