"""Dense fixed-size 2D grid with optional coordinate offset."""

from __future__ import annotations

import copy
import logging
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from .errors import CellRejected, GridError
from .iterator import GridIterator, coords_to_index

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _check_size(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class Grid(Generic[T]):
    """Row-major grid of ``width * height`` cells.

    Logical coordinates may be negative when the grid is built with an
    offset. The offset is folded into a single integer
    ``y_offset * height + x_offset`` which is added to the row-major index.
    When the offset is zero, coordinates outside ``[0, width) x [0, height)``
    are rejected; when it is non-zero only the physical index is checked.

    Parameters
    ----------
    width, height:
        Grid dimensions. Zero gives an empty grid.
    x_offset, y_offset:
        Requested origin shift.
    default:
        Zero-argument factory producing the initial value of every cell,
        e.g. ``bool`` or ``int``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        x_offset: int = 0,
        y_offset: int = 0,
        default: Callable[[], T] = bool,
    ) -> None:
        _check_size("width", width)
        _check_size("height", height)
        _check_size("x_offset", x_offset)
        _check_size("y_offset", y_offset)
        self._grid: List[T] = [default() for _ in range(width * height)]
        self._size: Tuple[int, int] = (width, height)
        self._offset = y_offset * height + x_offset
        self._consumed = False

    @classmethod
    def from_cells(
        cls,
        width: int,
        height: int,
        cells: Iterable[T],
        x_offset: int = 0,
        y_offset: int = 0,
    ) -> "Grid[T]":
        """Build a grid whose buffer is ``cells`` in row-major order."""
        buf = list(cells)
        if len(buf) != width * height:
            raise ValueError(
                f"expected {width * height} cells for a {width}x{height} grid, got {len(buf)}"
            )
        new: Grid[T] = cls(width, height, x_offset, y_offset, default=lambda: None)
        new._grid = buf
        return new

    # Dimensions ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    @property
    def offset(self) -> int:
        return self._offset

    def size(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self._size

    def __len__(self) -> int:
        return len(self._alive())

    # Access ---------------------------------------------------------------

    def check_bounds(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` passes the logical bounds policy."""
        width, height = self._size
        if self._offset == 0:
            return 0 <= x < width and 0 <= y < height
        return True

    def _index(self, x: int, y: int) -> Optional[int]:
        storage = self._alive()
        if not self.check_bounds(x, y):
            return None
        index = coords_to_index(x, y, self._size[0], self._offset)
        if 0 <= index < len(storage):
            return index
        return None

    def get(self, x: int, y: int) -> Optional[T]:
        """Return the element at ``(x, y)`` or ``None`` if there is none."""
        index = self._index(x, y)
        if index is None:
            return None
        return self._grid[index]

    def set(self, x: int, y: int, item: T) -> None:
        """Store ``item`` at ``(x, y)``.

        Raises :class:`CellRejected` and leaves the grid untouched when the
        coordinate is out of bounds or maps outside the buffer.
        """
        index = self._index(x, y)
        if index is None:
            logger.debug("rejected write at (%d, %d) on %r", x, y, self)
            raise CellRejected(x, y)
        self._grid[index] = item

    def get_row(self, row_idx: int) -> Tuple[T, ...]:
        """Return the ``width`` raw cells of physical row ``row_idx``.

        Offsets are ignored. ``row_idx`` must lie in ``[0, height)``.
        """
        storage = self._alive()
        width, height = self._size
        if not 0 <= row_idx < height:
            raise IndexError(f"row {row_idx} out of range for height {height}")
        start = row_idx * width
        return tuple(storage[start : start + width])

    def grid(self) -> List[T]:
        """Return a copy of the physical buffer in storage order."""
        return list(self._alive())

    # Traversal ------------------------------------------------------------

    def iter(self) -> GridIterator[T]:
        """Return an iterator over a snapshot of the current contents."""
        width, height = self._size
        return GridIterator(self.grid(), width, height, self._offset)

    def __iter__(self) -> GridIterator[T]:
        return self.iter()

    def into_iter(self) -> GridIterator[T]:
        """Iterate over the buffer itself, consuming the grid."""
        storage = self._alive()
        width, height = self._size
        self._consumed = True
        return GridIterator(storage, width, height, self._offset)

    # Copying --------------------------------------------------------------

    def clone(self) -> "Grid[T]":
        """Return an independent grid with the same size, offset and cells."""
        self._alive()
        new = type(self).__new__(type(self))
        new._grid = list(self._grid)
        new._size = self._size
        new._offset = self._offset
        new._consumed = False
        return new

    def __copy__(self) -> "Grid[T]":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Grid[T]":
        new = self.clone()
        new._grid = copy.deepcopy(self._grid, memo)
        return new

    # Rendering ------------------------------------------------------------

    def __str__(self) -> str:
        storage = self._alive()
        width, height = self._size
        output = ""
        for row in range(height):
            for col in range(width):
                output += str(storage[row * width + col])
            output += "\n"
        return "\n" + output

    def __repr__(self) -> str:
        if self._consumed:
            return f"Grid(size={self._size}, offset={self._offset}, consumed)"
        return f"Grid(size={self._size}, offset={self._offset})"

    def _alive(self) -> List[T]:
        if self._consumed:
            raise GridError("grid was consumed by into_iter()")
        return self._grid


__all__ = ["Grid"]
