"""Article assembly from board notes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..models import Link, Note, Tag
from .chains import resolve_chains


@dataclass
class Article:
    """An article being composed: paragraphs plus the notes they came from."""

    title: str
    paragraphs: list[str] = field(default_factory=list)
    note_ids: list[str] = field(default_factory=list)

    def add_note(self, note: Note) -> bool:
        """Append a note as a paragraph. Returns False if it was already used."""
        if note.id in self.note_ids:
            return False
        self.note_ids.append(note.id)
        self.paragraphs.append(note.text)
        return True

    def to_markdown(self) -> str:
        lines = [f"# {self.title}", ""]
        for paragraph in self.paragraphs:
            lines.append(paragraph)
            lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {"title": self.title, "paragraphs": list(self.paragraphs), "note_ids": list(self.note_ids)}


def assemble_article(
    title: str,
    notes: Sequence[Note],
    links: Iterable[Link],
    used: Iterable[str] = (),
) -> Article:
    """Compose every unused note into an article, in chain order."""
    skip = set(used)
    article = Article(title=title)
    for note in resolve_chains(notes, links).ordered:
        if note.id not in skip:
            article.add_note(note)
    return article


def add_chain(article: Article, tag: Tag, notes: Sequence[Note]) -> int:
    """Append a tagged chain's notes, skipping ones already used.

    Returns the number of notes added.
    """
    by_id = {n.id: n for n in notes}
    added = 0
    for note_id in tag.note_ids:
        note = by_id.get(note_id)
        if note is not None and article.add_note(note):
            added += 1
    return added
