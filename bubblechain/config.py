"""Board configuration read from bubblechain.toml."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "bubblechain.toml"


@dataclass(frozen=True)
class GridConfig:
    """Cell sizes and spacing used by the grid packer."""

    normal_width: int = 280
    normal_height: int = 120
    gap_x: int = 20
    gap_y: int = 20
    start_x: int = 20
    start_y: int = 20
    compact_min_width: int = 100
    compact_max_width: int = 200
    compact_min_height: int = 50
    compact_max_height: int = 100
    compact_col_width: int = 120  # narrowest column considered when choosing compact columns


@dataclass(frozen=True)
class ViewportConfig:
    """Default canvas size and the chrome subtracted from it."""

    width: int = 1280
    height: int = 800
    margin_x: int = 40
    margin_y: int = 180

    def available(self, width: int | None = None, height: int | None = None) -> tuple[int, int]:
        """Usable (width, height) for bubbles inside a viewport."""
        w = self.width if width is None else width
        h = self.height if height is None else height
        return w - self.margin_x, h - self.margin_y


@dataclass(frozen=True)
class BoardConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    viewport: ViewportConfig = field(default_factory=ViewportConfig)


def _coerce_section(cls, raw: Any, section: str):
    if not isinstance(raw, dict):
        return cls()

    known = {f.name for f in fields(cls)}
    values: dict[str, int] = {}
    for key, value in raw.items():
        if key not in known:
            raise ValueError(f"[{section}] unknown key: {key}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"[{section}] {key} must be an integer")
        if value < 0 or (value == 0 and not key.startswith(("gap_", "start_", "margin_"))):
            raise ValueError(f"[{section}] {key} must be positive")
        values[key] = value
    return cls(**values)


def load_config(path: Path) -> BoardConfig:
    """Load board configuration from TOML."""
    import tomllib

    data = tomllib.loads(path.read_text(encoding="utf-8"))

    grid = _coerce_section(GridConfig, data.get("grid"), "grid")
    if grid.compact_min_width > grid.compact_max_width:
        raise ValueError("[grid] compact_min_width exceeds compact_max_width")
    if grid.compact_min_height > grid.compact_max_height:
        raise ValueError("[grid] compact_min_height exceeds compact_max_height")

    viewport = _coerce_section(ViewportConfig, data.get("viewport"), "viewport")
    return BoardConfig(grid=grid, viewport=viewport)


def load_board_config(board_path: Path) -> BoardConfig:
    """Load the board-owned config, falling back to defaults."""
    config_path = board_path / CONFIG_FILENAME
    if not config_path.exists():
        return BoardConfig()
    return load_config(config_path)
