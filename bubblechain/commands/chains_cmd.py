"""Chains command - resolve link chains, tags and residual notes."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..board.chains import resolve_chains
from ..board.loader import Board
from ..board.sorting import sort_notes
from ..board.tags import synthesize_tags
from ..models import Resolution, Tag, category_color, category_label
from . import load_snapshot, write_output


def run_chains(board_path: Path, *, fmt: str = "md", out: Path | None = None) -> int:
    """Print the board's chains with their tags, then the residual notes."""
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    board, store = snapshot

    resolution = resolve_chains(board.notes, store.links)
    tags = synthesize_tags(resolution.chains, board.notes)
    payload = _chains_payload(board, resolution, tags)

    if fmt == "rich":
        _print_rich(payload, console=Console())
        return 0

    if fmt == "json":
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = _chains_to_markdown(payload)

    write_output(text, out, console, what="chains")
    return 0


def run_order(board_path: Path, *, mode: str = "connection", output_json: bool = False) -> int:
    """Print notes in the requested list order."""
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    board, store = snapshot

    try:
        notes = sort_notes(board.notes, store.links, mode)
    except ValueError as e:
        console.print(f"Error: {e}", style="bold red")
        return 1

    if output_json:
        rows = [
            {
                "id": n.id,
                "keyword": n.keyword,
                "category": category_label(n.category),
                "color": category_color(n.category),
            }
            for n in notes
        ]
        print(json.dumps({"mode": mode, "notes": rows}, indent=2))
        return 0

    for i, note in enumerate(notes, start=1):
        print(f"{i:>3}. {note.id}  {note.label}")
    return 0


def _chains_payload(board: Board, resolution: Resolution, tags: list[Tag]) -> dict:
    def label(note_id: str) -> str:
        note = board.get(note_id)
        return note.label if note else note_id

    return {
        "title": f"Chains for {board.path.name}",
        "note_count": len(board.notes),
        "chains": [
            {
                "tag": tag.to_dict(),
                "notes": [{"id": nid, "label": label(nid)} for nid in tag.note_ids],
            }
            for tag in tags
        ],
        "residual": [{"id": n.id, "label": n.label} for n in resolution.residual],
        "ordered": resolution.ordered_ids,
    }


def _chains_to_markdown(payload: dict) -> str:
    lines: list[str] = []
    lines.append(f"## {payload['title']}")
    lines.append("")
    lines.append(f"- Notes: {payload['note_count']}")
    lines.append(f"- Chains: {len(payload['chains'])}")
    lines.append(f"- Unconnected: {len(payload['residual'])}")
    lines.append("")

    for entry in payload["chains"]:
        tag = entry["tag"]
        lines.append(f"### {tag['name']} ({tag['color']})")
        lines.append("")
        for i, note in enumerate(entry["notes"], start=1):
            lines.append(f"{i}. `{note['id']}` {note['label']}")
        lines.append("")

    if payload["residual"]:
        lines.append("### Unconnected")
        lines.append("")
        for note in payload["residual"]:
            lines.append(f"- `{note['id']}` {note['label']}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _print_rich(payload: dict, *, console: Console) -> None:
    console.print(f"[bold]{payload['title']}[/bold]")
    console.print(f"Notes: {payload['note_count']}  Chains: {len(payload['chains'])}")
    console.print()

    for entry in payload["chains"]:
        tag = entry["tag"]
        t = Table(title=escape(tag["name"]), title_style=f"bold {tag['color']}", show_header=True, header_style="bold")
        t.add_column("#", justify="right")
        t.add_column("Note", style="cyan", no_wrap=True)
        t.add_column("Label")
        for i, note in enumerate(entry["notes"], start=1):
            t.add_row(str(i), escape(note["id"]), escape(note["label"]))
        console.print(t)
        console.print()

    if payload["residual"]:
        console.print("[bold]Unconnected[/bold]")
        for note in payload["residual"]:
            console.print(f"  [cyan]{escape(note['id'])}[/cyan] {escape(note['label'])}")
