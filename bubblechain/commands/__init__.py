"""Command implementations behind the CLI."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from ..board.links import LinkStore, load_links
from ..board.loader import Board, BoardError, load_board


def load_snapshot(board_path: Path, console: Console) -> tuple[Board, LinkStore] | None:
    """Load notes and links, reporting failures on the console."""
    try:
        board = load_board(board_path)
        store = load_links(board_path)
    except (BoardError, ValueError) as e:
        console.print(f"Error: {e}", style="bold red", markup=False)
        return None
    return board, store


def write_output(text: str, out: Path | None, console: Console, *, what: str) -> None:
    if out:
        out.write_text(text, encoding="utf-8")
        console.print(f"Wrote {what} to {out}", style="green")
    else:
        print(text, end="" if text.endswith("\n") else "\n")
