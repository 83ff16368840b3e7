"""Grid packing: density switch, cell sizes, placement."""

import pytest

from bubblechain.board.grid import (
    InvalidDimensionsError,
    capacity_normal,
    compute_grid,
    placement_for,
)
from bubblechain.config import GridConfig


def test_capacity_normal():
    # 1200 // 300 columns, 800 // 140 rows
    assert capacity_normal(1200, 800) == 20


@pytest.mark.parametrize("width,height", [(1200, 800), (1920, 1080), (700, 500), (300, 140)])
def test_capacity_boundary_switches_to_compact(width: int, height: int):
    cap = capacity_normal(width, height)

    assert compute_grid(cap, width, height).compact is False
    assert compute_grid(cap + 1, width, height).compact is True


def test_normal_grid():
    grid = compute_grid(20, 1200, 800)

    assert (grid.cell_width, grid.cell_height) == (280, 120)
    assert grid.compact is False
    assert grid.max_rows == 5
    assert (grid.columns, grid.rows) == (4, 5)


def test_compact_grid_dimensions():
    grid = compute_grid(21, 1200, 800)

    # 6 columns (ceil(sqrt(21 * 1.5))), 4 rows; height clamps to 100
    assert grid.compact is True
    assert grid.cell_width == (1200 - 5 * 20) // 6
    assert grid.cell_height == 100
    assert grid.max_rows == 800 // 120


def test_compact_width_and_height_are_clamped():
    grid = compute_grid(500, 1200, 800)

    assert grid.compact is True
    assert 100 <= grid.cell_width <= 200
    assert grid.cell_height == 50


def _assert_cells_never_grow(width: int, height: int, up_to: int) -> None:
    previous = compute_grid(0, width, height)
    for count in range(1, up_to):
        grid = compute_grid(count, width, height)
        assert grid.cell_width <= previous.cell_width, (width, height, count)
        assert grid.cell_height <= previous.cell_height, (width, height, count)
        previous = grid


@pytest.mark.parametrize("width,height", [(1200, 800), (1920, 1080), (1963, 321)])
def test_cells_never_grow_with_more_notes(width: int, height: int):
    _assert_cells_never_grow(width, height, 400)


@pytest.mark.parametrize("height", list(range(60, 1401, 97)))
def test_cells_never_grow_across_aspect_ratios(height: int):
    for width in range(150, 2001, 131):
        _assert_cells_never_grow(width, height, 120)


def test_column_step_does_not_grow_cells():
    # 27 -> 28 notes moves from 13 to 14 columns; two rows would fit taller cells
    before = compute_grid(27, 1963, 321)
    after = compute_grid(28, 1963, 321)

    assert before.cell_height == 93
    assert after.cell_height == 93
    assert after.cell_width <= before.cell_width


def test_empty_count_has_no_cells():
    grid = compute_grid(0, 1200, 800)

    assert grid.compact is False
    assert (grid.columns, grid.rows) == (0, 0)


def test_grid_is_pure():
    assert compute_grid(37, 1024, 640) == compute_grid(37, 1024, 640)


def test_placement_is_column_major():
    grid = compute_grid(20, 1200, 800)

    assert placement_for(0, grid) == (20, 20)
    assert placement_for(4, grid) == (20, 20 + 4 * 140)
    assert placement_for(5, grid) == (20 + 300, 20)
    assert placement_for(12, grid) == (20 + 2 * 300, 20 + 2 * 140)


def test_compact_placement_uses_compact_cell_size():
    grid = compute_grid(21, 1200, 800)
    step_x = grid.cell_width + 20

    assert placement_for(5, grid) == (20, 20 + 5 * 120)
    assert placement_for(6, grid) == (20 + step_x, 20)


def test_area_shorter_than_a_cell_still_places():
    grid = compute_grid(3, 100, 40)

    assert grid.compact is True
    assert grid.max_rows == 1
    assert [placement_for(i, grid) for i in range(3)] == [
        (20, 20),
        (20 + grid.cell_width + 20, 20),
        (20 + 2 * (grid.cell_width + 20), 20),
    ]


@pytest.mark.parametrize("width,height", [(0, 800), (1200, 0), (-5, 800), (1200, -1)])
def test_non_positive_area_is_rejected(width: int, height: int):
    with pytest.raises(InvalidDimensionsError):
        compute_grid(5, width, height)
    with pytest.raises(InvalidDimensionsError):
        capacity_normal(width, height)


def test_negative_count_and_index_are_rejected():
    with pytest.raises(InvalidDimensionsError):
        compute_grid(-1, 1200, 800)

    grid = compute_grid(3, 1200, 800)
    with pytest.raises(ValueError):
        placement_for(-1, grid)


def test_config_overrides_cell_size():
    cfg = GridConfig(normal_width=180, normal_height=80)

    assert capacity_normal(1200, 800, cfg) == (1200 // 200) * (800 // 100)
    grid = compute_grid(10, 1200, 800, cfg)
    assert (grid.cell_width, grid.cell_height) == (180, 80)
    assert placement_for(8, grid) == (20 + 200, 20)
