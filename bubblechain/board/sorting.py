"""Sort modes for note lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models import Link, Note, category_label
from .chains import resolve_chains

SORT_MODES = ("connection", "original", "keyword", "category")


def sort_notes(notes: Sequence[Note], links: Iterable[Link], mode: str = "connection") -> list[Note]:
    """Return notes in the order a list view shows them.

    connection: chain order, then unchained notes (input order without links)
    original: input order
    keyword: keyword, case-insensitive; notes without one first
    category: category label
    """
    if mode not in SORT_MODES:
        raise ValueError(f"mode must be one of: {', '.join(SORT_MODES)}")

    if mode == "connection":
        links = list(links)
        if not links:
            return list(notes)
        return resolve_chains(notes, links).ordered
    if mode == "keyword":
        return sorted(notes, key=lambda n: n.keyword.strip().casefold())
    if mode == "category":
        return sorted(notes, key=lambda n: category_label(n.category))
    return list(notes)
