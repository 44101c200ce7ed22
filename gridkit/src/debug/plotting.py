"""matplotlib renderings of grid buffers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple

import matplotlib
matplotlib.use("Agg")  # ensure headless operation for tests
import matplotlib.pyplot as plt
import numpy as np

from gridkit.src.core.grid import Grid
from gridkit.src.core.grid_proxy import to_array
from gridkit.src.core.grid_utils import compute_conflict_map
from gridkit.src.utils import config_loader


def _numeric(grid: Grid[Any]) -> np.ndarray:
    arr = to_array(grid)
    if arr.dtype == bool:
        return arr.astype(int)
    if not np.issubdtype(arr.dtype, np.number):
        raise ValueError(f"cannot plot grid of dtype {arr.dtype}")
    return arr


def grid_heatmap(grid: Grid[Any], cmap: str | None = None) -> plt.Figure:
    """Return a figure of the raw buffer of ``grid``."""
    fig = plt.figure()
    plt.imshow(_numeric(grid), cmap=cmap or config_loader.PLOT_CMAP, interpolation="nearest")
    plt.axis("off")
    plt.tight_layout()
    return fig


def grid_diff_heatmap(
    predicted: Grid[Any], target: Grid[Any], *, return_data: bool = False
) -> Tuple[plt.Figure, list[list[int]] | None]:
    """Return a heatmap showing mismatched cells between ``predicted`` and ``target``."""

    if predicted.size() != target.size():
        raise ValueError("grid sizes must match")

    heat = compute_conflict_map(predicted, target)

    fig = plt.figure()
    plt.imshow(heat, cmap="Reds", interpolation="nearest")
    plt.axis("off")
    plt.tight_layout()

    if return_data:
        return fig, heat
    return fig, None


def save_grid_image(grid: Grid[Any], out_path: str | Path, cmap: str | None = None) -> Path:
    """Render ``grid`` to ``out_path`` and return the written path."""
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = grid_heatmap(grid, cmap=cmap)
    fig.savefig(path)
    plt.close(fig)
    return path


__all__ = ["grid_heatmap", "grid_diff_heatmap", "save_grid_image"]
