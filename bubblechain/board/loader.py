"""Board loading: Markdown notes with YAML frontmatter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from pathlib import Path

import frontmatter
import yaml

from ..config import BoardConfig, load_board_config
from ..models import Note

logger = logging.getLogger(__name__)


class BoardError(ValueError):
    """A board file could not be read."""


@dataclass
class Board:
    """One conversation's notes, in input order."""

    path: Path
    notes: list[Note] = field(default_factory=list)
    config: BoardConfig = field(default_factory=BoardConfig)

    _by_id: dict[str, Note] = field(default_factory=dict)

    def __post_init__(self):
        self._by_id = {n.id: n for n in self.notes}

    def get(self, note_id: str) -> Note | None:
        return self._by_id.get(str(note_id))


def _coerce_created(value, path: Path | None = None) -> datetime | None:
    """Normalize a frontmatter timestamp to an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    else:
        try:
            dt = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Ignoring unparseable created value %r in %s", value, path)
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def load_note(path: Path) -> Note:
    """Load a single Markdown note."""
    try:
        post = frontmatter.load(path)
    except yaml.YAMLError as e:
        raise BoardError(f"Invalid frontmatter in {path}: {e}") from e

    fm = post.metadata
    note_id = fm.get("id")
    keyword = fm.get("keyword")
    if keyword is None:
        keyword = fm.get("title", "")

    return Note(
        id=str(note_id) if note_id is not None else path.stem,
        text=post.content.strip(),
        keyword=str(keyword or "").strip(),
        created=_coerce_created(fm.get("created"), path),
        category=str(fm.get("category") or "").strip(),
        path=path,
    )


def _iter_note_files(board_path: Path):
    for path in sorted(board_path.rglob("*.md")):
        rel = path.relative_to(board_path)
        if any(part.startswith(".") for part in rel.parts):
            continue
        yield path


def _input_order_key(note: Note):
    # Undated notes go last; ties break on id
    created = note.created.timestamp() if note.created else float("inf")
    return (created, note.id)


def load_board(board_path: Path) -> Board:
    """Load every note under a board directory."""
    notes: list[Note] = []
    seen: dict[str, Path] = {}

    for path in _iter_note_files(board_path):
        note = load_note(path)
        if note.id in seen:
            raise BoardError(f"Duplicate note id '{note.id}' in {path} and {seen[note.id]}")
        seen[note.id] = path
        notes.append(note)

    notes.sort(key=_input_order_key)
    logger.debug("Loaded %d notes from %s", len(notes), board_path)

    return Board(path=board_path, notes=notes, config=load_board_config(board_path))
