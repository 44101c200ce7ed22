"""Grid comparison utilities for debugging purposes."""

from __future__ import annotations

from typing import Any, List

from gridkit.src.core.grid import Grid


def visual_diff_report(left: Grid[Any], right: Grid[Any]) -> str:
    """Return a human-readable report of mismatches between ``left`` and ``right``.

    Cells are compared in the raw buffer layout, so offsets play no part.
    Each differing cell is listed with its column/row and both values. A
    summary of total errors and match ratio is appended.
    """

    report_lines: List[str] = []

    size_left = left.size()
    size_right = right.size()
    if size_left != size_right:
        report_lines.append(f"Size mismatch: left {size_left}, right {size_right}")

    w = max(size_left[0], size_right[0])
    h = max(size_left[1], size_right[1])

    errors = 0
    for y in range(h):
        row_left = left.get_row(y) if y < size_left[1] else ()
        row_right = right.get_row(y) if y < size_right[1] else ()
        for x in range(w):
            has_a = x < len(row_left)
            has_b = x < len(row_right)
            if has_a and has_b and row_left[x] == row_right[x]:
                continue

            left_desc = repr(row_left[x]) if has_a else "empty"
            right_desc = repr(row_right[x]) if has_b else "empty"
            report_lines.append(f"Mismatch at ({x},{y}): left {left_desc}, right {right_desc}")
            errors += 1

    total_cells = h * w
    match_ratio = (total_cells - errors) / total_cells if total_cells else 1.0
    report_lines.append(f"Total errors: {errors}")
    report_lines.append(f"Match ratio: {match_ratio:.2f}")

    return "\n".join(report_lines)


__all__ = ["visual_diff_report"]
