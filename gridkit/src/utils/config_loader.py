"""Loads YAML/JSON configuration files and runtime grid settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError(f"Unsupported config format: {path_p.suffix or path_p.name}")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package configuration, or ``{}`` when no file exists."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


GRID_CONFIG: Dict[str, Any] = load_grid_config()
LOG_LEVEL: str = str(GRID_CONFIG.get("log_level", "INFO"))
LOG_FILE: Optional[str] = GRID_CONFIG.get("log_file")
_PLOT_CONF = GRID_CONFIG.get("plot") or {}
PLOT_CMAP: str = str(_PLOT_CONF.get("cmap", "viridis"))


def apply_config(config: Dict[str, Any]) -> None:
    """Overlay settings from ``config`` onto the runtime configuration."""
    if not isinstance(config, dict):
        raise ValueError("config must be a mapping")
    if "log_level" in config:
        set_log_level(str(config["log_level"]))
    if "log_file" in config:
        set_log_file(config["log_file"])
    plot = config.get("plot") or {}
    if "cmap" in plot:
        set_plot_cmap(str(plot["cmap"]))


def set_log_level(value: str) -> None:
    """Override the logging level at runtime."""
    global LOG_LEVEL
    LOG_LEVEL = value
    GRID_CONFIG["log_level"] = value


def set_log_file(value: Optional[str]) -> None:
    """Override the log file path at runtime."""
    global LOG_FILE
    LOG_FILE = value
    GRID_CONFIG["log_file"] = value


def set_plot_cmap(value: str) -> None:
    """Override the matplotlib colormap used for plots."""
    global PLOT_CMAP
    PLOT_CMAP = value
    GRID_CONFIG.setdefault("plot", {})["cmap"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
        "plot_cmap": PLOT_CMAP,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
