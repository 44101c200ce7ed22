"""Low-level comparisons over raw grid buffers."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from .grid import Grid

_MISSING = object()


def _raw(buf: Sequence[Any], size: Tuple[int, int], x: int, y: int) -> Any:
    """Return the physical cell at column ``x``, row ``y`` ignoring offsets."""
    width, height = size
    if 0 <= x < width and 0 <= y < height:
        return buf[y * width + x]
    return _MISSING


def compute_conflict_map(before: Grid[Any], after: Grid[Any]) -> List[List[int]]:
    """Return map of cell conflicts between ``before`` and ``after`` grids."""
    w1, h1 = before.size()
    w2, h2 = after.size()
    buf1, buf2 = before.grid(), after.grid()
    h = max(h1, h2)
    w = max(w1, w2)
    conflict: List[List[int]] = [[0 for _ in range(w)] for _ in range(h)]
    for y in range(h):
        for x in range(w):
            if _raw(buf1, (w1, h1), x, y) != _raw(buf2, (w2, h2), x, y):
                conflict[y][x] = 1
    return conflict


def structural_diff(a: Grid[Any], b: Grid[Any]) -> List[List[bool]]:
    """Return a mask over ``a`` marking cells that differ in ``b``."""
    w, h = a.size()
    buf_a, buf_b = a.grid(), b.grid()
    mask: List[List[bool]] = [[True for _ in range(w)] for _ in range(h)]
    for y in range(h):
        for x in range(w):
            mask[y][x] = _raw(buf_a, (w, h), x, y) != _raw(buf_b, b.size(), x, y)
    return mask


def compare_to(a: Grid[Any], b: Grid[Any]) -> float:
    """Return ratio of matching cells (1.0 equals perfect match)."""
    if a.size() != b.size():
        return 0.0
    total = len(a)
    if not total:
        return 1.0
    matches = sum(1 for p, q in zip(a.grid(), b.grid()) if p == q)
    return matches / total


__all__ = ["compute_conflict_map", "structural_diff", "compare_to"]
