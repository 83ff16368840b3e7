"""Layout command - auto-arrange the board on a grid."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from ..board.arrange import arrange
from ..board.grid import InvalidDimensionsError
from . import load_snapshot, write_output


def run_layout(
    board_path: Path,
    *,
    width: int | None = None,
    height: int | None = None,
    mode: str = "connection",
    fmt: str = "md",
    out: Path | None = None,
) -> int:
    """Compute cell size and placement for every note.

    Args:
        board_path: Board directory
        width: Viewport width (defaults to the board config)
        height: Viewport height (defaults to the board config)
        mode: connection|keyword placement order
        fmt: md|json
        out: Optional output path; prints to stdout if None

    Returns:
        Exit code (0 = success, 1 = unreadable board or invalid viewport)
    """
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    board, store = snapshot

    avail_w, avail_h = board.config.viewport.available(width, height)
    try:
        grid, placements = arrange(
            board.notes, store.links, avail_w, avail_h, mode=mode, config=board.config.grid
        )
    except InvalidDimensionsError as e:
        console.print(f"Error: viewport too small ({e})", style="bold red")
        return 1

    payload = {
        "mode": mode,
        "grid": grid.to_dict(),
        "placements": [p.to_dict() for p in placements],
    }

    if fmt == "json":
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = _layout_to_markdown(payload)

    write_output(text, out, console, what="layout")
    return 0


def _layout_to_markdown(payload: dict) -> str:
    grid = payload["grid"]
    density = "compact" if grid["compact"] else "normal"
    lines = [
        f"## Layout ({payload['mode']} order)",
        "",
        f"- Area: {grid['width']}x{grid['height']}",
        f"- Cells: {grid['cell_width']}x{grid['cell_height']} ({density})",
        f"- Grid: {grid['columns']} columns x {grid['rows']} rows",
        "",
        "| Note | x | y | Color |",
        "|---|---:|---:|---|",
    ]
    for p in payload["placements"]:
        lines.append(f"| `{p['note_id']}` | {p['x']} | {p['y']} | {p['color']} |")
    return "\n".join(lines).rstrip() + "\n"
