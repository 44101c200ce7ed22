from gridkit.src.core.grid import Grid
from gridkit.src.core.grid_utils import compare_to, compute_conflict_map, structural_diff
from gridkit.src.debug.visualizer import visual_diff_report


def test_structural_diff_mask():
    g1 = Grid.from_cells(2, 2, [1, 2, 3, 4])
    g2 = Grid.from_cells(2, 2, [1, 0, 3, 5])
    mask = structural_diff(g1, g2)
    assert mask == [[False, True], [False, True]]


def test_conflict_map_covers_larger_grid():
    g1 = Grid.from_cells(1, 1, [1])
    g2 = Grid.from_cells(2, 1, [1, 2])
    assert compute_conflict_map(g1, g2) == [[0, 1]]


def test_compare_to():
    g1 = Grid.from_cells(2, 2, [1, 2, 3, 4])
    g2 = Grid.from_cells(2, 2, [1, 2, 4, 4])
    assert compare_to(g1, g2) == 0.75
    assert compare_to(g1, Grid(1, 1)) == 0.0
    assert compare_to(Grid(0, 0), Grid(0, 0)) == 1.0


def test_comparison_ignores_offset():
    g1 = Grid(2, 1, 1, 0, default=int)
    g2 = Grid(2, 1, default=int)
    g1.set(0, 0, 5)
    g2.set(1, 0, 5)
    assert compare_to(g1, g2) == 1.0


def test_visual_diff_report():
    left = Grid.from_cells(2, 1, [1, 2])
    right = Grid.from_cells(2, 1, [1, 3])
    report = visual_diff_report(left, right)
    assert "Mismatch at (1,0): left 2, right 3" in report
    assert "Total errors: 1" in report
    assert "Match ratio: 0.50" in report


def test_visual_diff_report_size_mismatch():
    left = Grid.from_cells(1, 1, [1])
    right = Grid.from_cells(1, 2, [1, 1])
    report = visual_diff_report(left, right)
    assert report.startswith("Size mismatch: left (1, 1), right (1, 2)")
    assert "Mismatch at (0,1): left empty, right 1" in report
