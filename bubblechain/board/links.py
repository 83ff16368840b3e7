"""Link storage: directed note links ordered by creation."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ..models import Link
from .loader import BoardError

logger = logging.getLogger(__name__)

STATE_DIRNAME = ".bubblechain"
LINKS_FILENAME = "links.json"


class LinkStore:
    """Directed links for one board.

    Duplicates and cycles are allowed. Creation order is kept in each
    link's `seq`, assigned from a monotonic counter.
    """

    def __init__(self, links: Iterable[Link] = (), *, next_seq: int | None = None):
        self._links: dict[str, Link] = {}
        for link in sorted(links, key=lambda l: l.seq):
            self._links[link.id] = link
        highest = max((l.seq for l in self._links.values()), default=-1)
        self.next_seq = max(highest + 1, next_seq or 0)
        self.version = 0

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, link_id: object) -> bool:
        return link_id in self._links

    @property
    def links(self) -> list[Link]:
        """All links, oldest first."""
        return sorted(self._links.values(), key=lambda l: l.seq)

    def add_link(self, source: str, target: str) -> Link:
        seq = self.next_seq
        link = Link(id=f"link-{seq}", source=str(source), target=str(target), seq=seq)
        # Ids from older files may collide with the generated scheme
        while link.id in self._links:
            seq += 1
            link = Link(id=f"link-{seq}", source=link.source, target=link.target, seq=seq)
        self._links[link.id] = link
        self.next_seq = seq + 1
        self.version += 1
        return link

    def remove_link(self, link_id: str) -> bool:
        """Delete a link by id. Returns False if it was not present."""
        if self._links.pop(link_id, None) is None:
            return False
        self.version += 1
        return True

    def links_from(self, note_id: str) -> list[Link]:
        """Outgoing links of a note, oldest first."""
        return [l for l in self.links if l.source == note_id]

    def links_to(self, note_id: str) -> list[Link]:
        """Incoming links of a note."""
        return [l for l in self._links.values() if l.target == note_id]

    def to_dict(self) -> dict:
        return {"next_seq": self.next_seq, "links": [l.to_dict() for l in self.links]}

    @classmethod
    def from_dict(cls, data: dict) -> "LinkStore":
        raw_links = data.get("links", [])
        if not isinstance(raw_links, list):
            raise ValueError("'links' must be a list")
        # Records without a seq fall back to their position in the file
        links = [Link.from_dict(raw, default_seq=i) for i, raw in enumerate(raw_links)]
        next_seq = data.get("next_seq")
        return cls(links, next_seq=int(next_seq) if next_seq is not None else None)


def get_links_path(board_path: Path) -> Path:
    """Path of the board's link file."""
    return board_path / STATE_DIRNAME / LINKS_FILENAME


def load_links(board_path: Path) -> LinkStore:
    """Load the board's links. A missing file yields an empty store."""
    path = get_links_path(board_path)
    if not path.exists():
        return LinkStore()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, list):
            data = {"links": data}
        store = LinkStore.from_dict(data)
    except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
        raise BoardError(f"Malformed link file {path}: {e}") from e

    logger.debug("Loaded %d links from %s", len(store), path)
    return store


def save_links(board_path: Path, store: LinkStore) -> Path:
    """Write the board's links and return the file path."""
    path = get_links_path(board_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(store.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote %d links to %s", len(store), path)
    return path
