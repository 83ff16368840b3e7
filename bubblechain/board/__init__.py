"""Board loading, chain resolution and layout."""

from .loader import Board, BoardError, load_board
from .links import LinkStore, load_links, save_links
from .chains import resolve_chains
from .grid import GridLayout, InvalidDimensionsError, capacity_normal, compute_grid, placement_for
from .tags import synthesize_tags

__all__ = [
    "Board",
    "BoardError",
    "load_board",
    "LinkStore",
    "load_links",
    "save_links",
    "resolve_chains",
    "GridLayout",
    "InvalidDimensionsError",
    "capacity_normal",
    "compute_grid",
    "placement_for",
    "synthesize_tags",
]
