"""Chain resolution over note links."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..models import Chain, Link, Note, Resolution

logger = logging.getLogger(__name__)


def _first_outgoing(links: Iterable[Link]) -> dict[str, str]:
    """Map each source to the target of its oldest outgoing link."""
    first: dict[str, tuple[int, str]] = {}
    for link in links:
        current = first.get(link.source)
        if current is None or link.seq < current[0]:
            first[link.source] = (link.seq, link.target)
    return {src: target for src, (_, target) in first.items()}


def resolve_chains(notes: Sequence[Note], links: Iterable[Link]) -> Resolution:
    """Resolve notes and links into ordered chains plus residual notes.

    Walks start at notes with outgoing but no incoming links, then at any
    linked note not yet reached (cycles without an entry point). Each walk
    follows the oldest outgoing link and stops at a visited note, a missing
    note, or a note with no outgoing link.

    Returns a Resolution whose `ordered` list holds every walk in discovery
    order followed by the never-visited notes in input order. Only walks of
    two or more notes become chains; a single-note walk keeps its place in
    `ordered` but is neither a chain nor residual.
    """
    links = list(links)
    by_id = {n.id: n for n in notes}
    next_of = _first_outgoing(links)

    has_incoming = {l.target for l in links}
    connected = has_incoming | {l.source for l in links}

    visited: set[str] = set()
    walks: list[Chain] = []

    def walk(start: str) -> None:
        chain: list[str] = []
        current: str | None = start
        while current is not None and current not in visited:
            if current not in by_id:
                logger.debug("Skipping dangling link target %r", current)
                break
            visited.add(current)
            chain.append(current)
            current = next_of.get(current)
        if chain:
            walks.append(tuple(chain))

    starts = [n.id for n in notes if n.id in next_of and n.id not in has_incoming]
    for note_id in starts:
        if note_id not in visited:
            walk(note_id)

    for note in notes:
        if note.id in connected and note.id not in visited:
            walk(note.id)

    chains = [w for w in walks if len(w) > 1]
    residual = [n for n in notes if n.id not in visited]
    ordered = [by_id[note_id] for w in walks for note_id in w] + residual

    return Resolution(ordered=ordered, chains=chains, residual=residual)
