"""Auto-arrange: full placements for every note on the board."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..config import GridConfig
from ..models import Link, Note, palette_color
from .chains import resolve_chains
from .grid import GridLayout, compute_grid, placement_for

ARRANGE_MODES = ("connection", "keyword")


@dataclass(frozen=True)
class Placement:
    note_id: str
    x: int
    y: int
    width: int
    height: int
    color: str

    def to_dict(self) -> dict:
        return {
            "note_id": self.note_id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": self.color,
        }


def keyword_groups(notes: Sequence[Note]) -> list[tuple[str, list[Note]]]:
    """Group notes by keyword: named groups alphabetically, unnamed last."""
    groups: dict[str, list[Note]] = {}
    for note in notes:
        groups.setdefault(note.keyword.strip(), []).append(note)

    named = sorted((k for k in groups if k), key=lambda k: (k.casefold(), k))
    ordered = [(k, groups[k]) for k in named]
    if "" in groups:
        ordered.append(("", groups[""]))
    return ordered


def arrange(
    notes: Sequence[Note],
    links: Iterable[Link],
    width: int,
    height: int,
    *,
    mode: str = "connection",
    config: GridConfig | None = None,
) -> tuple[GridLayout, list[Placement]]:
    """Lay out every note in the area, in connection or keyword-group order."""
    if mode not in ARRANGE_MODES:
        raise ValueError(f"mode must be one of: {', '.join(ARRANGE_MODES)}")

    if mode == "connection":
        sequence = resolve_chains(notes, links).ordered
    else:
        sequence = [n for _, group in keyword_groups(notes) for n in group]

    grid = compute_grid(len(sequence), width, height, config)
    placements = []
    for i, note in enumerate(sequence):
        x, y = placement_for(i, grid)
        placements.append(
            Placement(
                note_id=note.id,
                x=x,
                y=y,
                width=grid.cell_width,
                height=grid.cell_height,
                color=palette_color(i),
            )
        )
    return grid, placements
