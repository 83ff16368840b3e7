"""Article command - compose board notes into an article."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown

from ..board.article import Article, add_chain, assemble_article
from ..board.chains import resolve_chains
from ..board.tags import synthesize_tags
from . import load_snapshot, write_output


def run_article(
    board_path: Path,
    *,
    title: str | None = None,
    tags: tuple[str, ...] = (),
    fmt: str = "md",
    out: Path | None = None,
) -> int:
    """Assemble an article from the board.

    With no tags, every note is included in chain order. With one or more
    tag names, only those chains are added, in the order given.
    """
    console = Console(stderr=True)

    snapshot = load_snapshot(board_path, console)
    if snapshot is None:
        return 1
    board, store = snapshot

    title = title or board.path.name
    if not tags:
        article = assemble_article(title, board.notes, store.links)
    else:
        resolution = resolve_chains(board.notes, store.links)
        by_name: dict[str, list] = {}
        for tag in synthesize_tags(resolution.chains, board.notes):
            by_name.setdefault(tag.name.casefold(), []).append(tag)

        article = Article(title=title)
        for name in tags:
            matches = by_name.get(name.casefold())
            if not matches:
                console.print(f"Error: tag '{name}' not found", style="bold red")
                return 1
            for tag in matches:
                add_chain(article, tag, board.notes)

    if fmt == "json":
        text = json.dumps(article.to_dict(), indent=2) + "\n"
    elif fmt == "rich":
        Console().print(Markdown(article.to_markdown()))
        return 0
    else:
        text = article.to_markdown()

    write_output(text, out, console, what="article")
    return 0
