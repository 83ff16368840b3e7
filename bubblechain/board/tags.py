"""Tag synthesis for resolved chains."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models import Chain, Note, Tag, palette_color


def fallback_tag_name(position: int) -> str:
    return f"Group No.{position + 1}"


def synthesize_tags(chains: Iterable[Chain], notes: Sequence[Note]) -> list[Tag]:
    """Label every chain of two or more notes.

    The name is the first non-empty keyword found walking the chain, else
    "Group No.<k>" where k is the tag's 1-based position in this call.
    Colors cycle through the palette by the same position.
    """
    by_id = {n.id: n for n in notes}
    tags: list[Tag] = []

    for chain in chains:
        if len(chain) < 2:
            continue

        position = len(tags)
        name = ""
        for note_id in chain:
            note = by_id.get(note_id)
            if note is not None and note.keyword.strip():
                name = note.keyword.strip()
                break

        tags.append(
            Tag(
                name=name or fallback_tag_name(position),
                note_ids=tuple(chain),
                color=palette_color(position),
            )
        )

    return tags
