"""Grid packing: uniform cell sizing and column-major placement.

Cells use the normal size while every note fits in the available area;
past that the packer switches to compact mode, picking a column count
close to the area's aspect ratio and shrinking cells to fit (within the
configured bounds). Placement fills each column top to bottom before
moving right.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..config import GridConfig


class InvalidDimensionsError(ValueError):
    """Non-positive bounds or a negative count/index."""


@dataclass(frozen=True)
class GridLayout:
    """Cell geometry for a given note count and available area."""

    count: int
    width: int  # available area
    height: int
    cell_width: int
    cell_height: int
    columns: int
    rows: int
    compact: bool
    max_rows: int  # cells per column during placement
    config: GridConfig = field(default_factory=GridConfig)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "width": self.width,
            "height": self.height,
            "cell_width": self.cell_width,
            "cell_height": self.cell_height,
            "columns": self.columns,
            "rows": self.rows,
            "compact": self.compact,
            "max_rows": self.max_rows,
        }


def _check_bounds(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(f"available area must be positive, got {width}x{height}")


def capacity_normal(width: int, height: int, config: GridConfig | None = None) -> int:
    """How many normal-size cells fit in the area."""
    cfg = config or GridConfig()
    _check_bounds(width, height)
    cols = width // (cfg.normal_width + cfg.gap_x)
    rows = height // (cfg.normal_height + cfg.gap_y)
    return cols * rows


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


def _compact_shape(count: int, width: int, height: int, cfg: GridConfig) -> tuple[int, int]:
    """Columns and rows of the ideal compact arrangement for `count` notes."""
    ideal_cols = math.ceil(math.sqrt(count * width / height))
    max_cols = width // (cfg.compact_col_width + cfg.gap_x)
    cols = max(1, min(ideal_cols, max_cols))
    return cols, math.ceil(count / cols)


def compute_grid(count: int, width: int, height: int, config: GridConfig | None = None) -> GridLayout:
    """Compute cell size and density for `count` notes in a width x height area.

    Cells never grow as `count` grows. Columns only increase with `count`, but
    a column step can lower `ceil(count / cols)`, so compact rows are the most
    any compact count up to `count` needed.
    """
    cfg = config or GridConfig()
    _check_bounds(width, height)
    if count < 0:
        raise InvalidDimensionsError(f"count must be non-negative, got {count}")

    capacity = capacity_normal(width, height, cfg)
    if count <= capacity:
        cell_width, cell_height, compact = cfg.normal_width, cfg.normal_height, False
    else:
        cols, _ = _compact_shape(count, width, height, cfg)
        rows = max(_compact_shape(m, width, height, cfg)[1] for m in range(capacity + 1, count + 1))

        fit_width = (width - (cols - 1) * cfg.gap_x) // cols
        fit_height = (height - (rows - 1) * cfg.gap_y) // rows
        cell_width = min(_clamp(fit_width, cfg.compact_min_width, cfg.compact_max_width), cfg.normal_width)
        cell_height = min(_clamp(fit_height, cfg.compact_min_height, cfg.compact_max_height), cfg.normal_height)
        compact = True

    # A column always holds at least one cell, even when the area is shorter than a cell
    max_rows = max(1, height // (cell_height + cfg.gap_y))
    columns = math.ceil(count / max_rows) if count else 0
    rows = min(count, max_rows)

    return GridLayout(
        count=count,
        width=width,
        height=height,
        cell_width=cell_width,
        cell_height=cell_height,
        columns=columns,
        rows=rows,
        compact=compact,
        max_rows=max_rows,
        config=cfg,
    )


def placement_for(index: int, grid: GridLayout) -> tuple[int, int]:
    """Top-left (x, y) of the cell at `index` in column-major order."""
    if index < 0:
        raise InvalidDimensionsError(f"index must be non-negative, got {index}")
    cfg = grid.config
    column, row = divmod(index, grid.max_rows)
    x = cfg.start_x + column * (grid.cell_width + cfg.gap_x)
    y = cfg.start_y + row * (grid.cell_height + cfg.gap_y)
    return x, y
