"""Build a grid from a layout file and render it.

The layout is a YAML or JSON mapping::

    width: 5
    height: 5
    x_offset: 2
    y_offset: 2
    default: bool
    cells:
      - [-2, -2, true]

Invoke as::

    grid_viewer layout.yaml [--plot grid.png]

The rendered grid is printed to stdout. Cells the grid rejects are logged
and make the command exit with status 1.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from gridkit.src.core.errors import CellRejected
from gridkit.src.core.grid import Grid
from gridkit.src.utils import config_loader
from gridkit.src.utils.logger import get_logger

DEFAULT_FACTORIES: Dict[str, Callable[[], Any]] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
}


def _coord(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")
    return value


def build_grid(layout: Any) -> Tuple[Grid[Any], List[Tuple[int, int, Any]]]:
    """Return the grid described by ``layout`` and the cells it rejected."""
    logger = get_logger("grid_viewer")

    if not isinstance(layout, dict):
        raise ValueError("layout must be a mapping")

    kind = str(layout.get("default", "bool"))
    if kind not in DEFAULT_FACTORIES:
        raise ValueError(
            f"unknown default {kind!r}, expected one of {sorted(DEFAULT_FACTORIES)}"
        )

    grid: Grid[Any] = Grid(
        layout["width"],
        layout["height"],
        layout.get("x_offset", 0),
        layout.get("y_offset", 0),
        default=DEFAULT_FACTORIES[kind],
    )
    logger.info("built %r", grid)

    rejected: List[Tuple[int, int, Any]] = []
    for entry in layout.get("cells") or []:
        x, y, value = entry
        x, y = _coord("x", x), _coord("y", y)
        try:
            grid.set(x, y, value)
        except CellRejected as exc:
            logger.warning("%s", exc)
            rejected.append((x, y, value))
    return grid, rejected


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("layout", type=Path, help="YAML or JSON layout file")
    parser.add_argument("--plot", type=Path, help="Write a heatmap image to this path")
    parser.add_argument("--config", type=Path, help="Override configuration file")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument(
        "--show-config", action="store_true", help="Print the runtime configuration"
    )
    args = parser.parse_args(argv)

    if args.config:
        try:
            config_loader.apply_config(config_loader.load_config(str(args.config)))
        except (OSError, ValueError, yaml.YAMLError) as exc:
            print(f"[ERROR] cannot load config {args.config}: {exc}", file=sys.stderr)
            return 2
    if args.log_file:
        config_loader.set_log_file(args.log_file)
    if args.show_config:
        config_loader.print_runtime_config()

    logger = get_logger("grid_viewer")
    try:
        layout = config_loader.load_config(str(args.layout))
        grid, rejected = build_grid(layout)
    except (OSError, KeyError, ValueError, TypeError, yaml.YAMLError) as exc:
        print(f"[ERROR] cannot build grid from {args.layout}: {exc}", file=sys.stderr)
        return 2

    print(grid)

    if args.plot:
        if len(grid) == 0:
            logger.warning("grid is empty, skipping plot")
        else:
            from gridkit.src.debug.plotting import save_grid_image

            try:
                path = save_grid_image(grid, args.plot)
            except ValueError as exc:
                print(f"[ERROR] cannot plot grid: {exc}", file=sys.stderr)
                return 2
            logger.info("wrote %s", path)

    if rejected:
        logger.warning("%d cell(s) rejected", len(rejected))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
