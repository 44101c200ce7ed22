import json
import logging

import yaml

from gridkit.src.core.grid import Grid
from gridkit.src.debug.plotting import grid_diff_heatmap, save_grid_image
from gridkit.tools.grid_viewer import build_grid, main


def _write_layout(tmp_path, layout, name="layout.yaml"):
    path = tmp_path / name
    if name.endswith(".json"):
        path.write_text(json.dumps(layout))
    else:
        path.write_text(yaml.safe_dump(layout))
    return path


def test_build_grid_with_offset():
    grid, rejected = build_grid(
        {"width": 5, "height": 5, "x_offset": 2, "y_offset": 2, "cells": [[-2, -2, True]]}
    )
    assert grid.get(-2, -2) is True
    assert rejected == []


def test_build_grid_collects_rejections(caplog):
    with caplog.at_level(logging.WARNING, logger="grid_viewer"):
        grid, rejected = build_grid(
            {"width": 2, "height": 2, "default": "int", "cells": [[0, 0, 1], [3, 0, 2]]}
        )
    assert grid.get(0, 0) == 1
    assert rejected == [(3, 0, 2)]
    assert any("cannot set cell (3, 0)" in rec.message for rec in caplog.records)


def test_main_prints_grid(tmp_path, capsys):
    path = _write_layout(
        tmp_path, {"width": 3, "height": 2, "default": "int", "cells": [[1, 1, 5]]}
    )
    assert main([str(path)]) == 0
    assert "\n000\n050\n" in capsys.readouterr().out


def test_main_reports_rejected_cells(tmp_path):
    path = _write_layout(
        tmp_path, {"width": 1, "height": 1, "cells": [[0, 1, True]]}, name="l.json"
    )
    assert main([str(path)]) == 1


def test_main_bad_layout(tmp_path, capsys):
    path = _write_layout(tmp_path, {"width": 2, "height": 2, "default": "complex"})
    assert main([str(path)]) == 2
    assert "unknown default" in capsys.readouterr().err


def test_main_writes_plot(tmp_path):
    layout = _write_layout(tmp_path, {"width": 2, "height": 2, "cells": [[0, 0, True]]})
    out = tmp_path / "plots" / "grid.png"
    assert main([str(layout), "--plot", str(out)]) == 0
    assert out.exists()


def test_main_cannot_plot_strings(tmp_path, capsys):
    layout = _write_layout(tmp_path, {"width": 1, "height": 1, "default": "str"})
    assert main([str(layout), "--plot", str(tmp_path / "g.png")]) == 2
    assert "cannot plot" in capsys.readouterr().err


def test_save_grid_image(tmp_path):
    grid = Grid(3, 3, default=int)
    grid.set(1, 1, 2)
    path = save_grid_image(grid, tmp_path / "g.png", cmap="gray")
    assert path.exists()


def test_grid_diff_heatmap_data():
    pred = Grid.from_cells(2, 2, [1, 2, 3, 4])
    tgt = Grid.from_cells(2, 2, [1, 0, 3, 4])
    fig, heat = grid_diff_heatmap(pred, tgt, return_data=True)
    assert heat == [[0, 1], [0, 0]]
    fig.clf()


def test_main_layout_must_be_mapping(tmp_path, capsys):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    assert main([str(path)]) == 2
    err = capsys.readouterr().err
    assert err.startswith("[ERROR]")
    assert "layout must be a mapping" in err


def test_main_unsupported_config(tmp_path, capsys):
    layout = _write_layout(tmp_path, {"width": 1, "height": 1})
    config = tmp_path / "c.toml"
    config.write_text("")
    assert main([str(layout), "--config", str(config)]) == 2
    assert "[ERROR] cannot load config" in capsys.readouterr().err


def test_main_missing_config(tmp_path, capsys):
    layout = _write_layout(tmp_path, {"width": 1, "height": 1})
    assert main([str(layout), "--config", str(tmp_path / "absent.yaml")]) == 2
    assert "[ERROR] cannot load config" in capsys.readouterr().err


def test_main_rejects_fractional_size(tmp_path, capsys):
    layout = _write_layout(tmp_path, {"width": 2.7, "height": 1})
    assert main([str(layout)]) == 2
    captured = capsys.readouterr()
    assert "[ERROR]" in captured.err
    assert "False" not in captured.out


def test_main_rejects_fractional_coordinates(tmp_path, capsys):
    layout = _write_layout(tmp_path, {"width": 2, "height": 2, "cells": [[0.5, 0, True]]})
    assert main([str(layout)]) == 2
    assert "x must be an int" in capsys.readouterr().err


def test_main_show_config(tmp_path, capsys):
    layout = _write_layout(tmp_path, {"width": 1, "height": 1})
    assert main([str(layout), "--show-config"]) == 0
    assert "Runtime configuration:" in capsys.readouterr().out
