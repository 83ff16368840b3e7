"""Link commands - list, connect and disconnect notes."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..board.links import save_links
from . import load_snapshot


def run_links(board_path: Path, *, output_json: bool = False) -> int:
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    board, store = snapshot

    if output_json:
        print(json.dumps(store.to_dict(), indent=2))
        return 0

    if not len(store):
        console.print("No links.", style="dim")
        return 0

    t = Table(show_header=True, header_style="bold")
    t.add_column("Link", style="cyan", no_wrap=True)
    t.add_column("From")
    t.add_column("To")
    for link in store.links:
        src = link.source if board.get(link.source) else f"{link.source} (missing)"
        dst = link.target if board.get(link.target) else f"{link.target} (missing)"
        t.add_row(link.id, src, dst)
    Console().print(t)
    return 0


def run_connect(board_path: Path, source: str, target: str) -> int:
    """Add a link from `source` to `target` and save the link file."""
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    board, store = snapshot

    missing = [nid for nid in (source, target) if board.get(nid) is None]
    if missing:
        console.print(f"Error: unknown note id(s): {', '.join(missing)}", style="bold red")
        return 1

    link = store.add_link(source, target)
    save_links(board_path, store)
    console.print(f"Connected {source} -> {target} ({link.id})", style="green")
    return 0


def run_disconnect(board_path: Path, link_id: str) -> int:
    """Remove a link by id. Removing an absent link is not an error."""
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    _, store = snapshot

    if not store.remove_link(link_id):
        console.print(f"No link '{link_id}'", style="yellow")
        return 0

    save_links(board_path, store)
    console.print(f"Removed {link_id}", style="green")
    return 0
