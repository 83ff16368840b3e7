"""Data models for board notes, links and derived views."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

# Display palette, indexed modulo its length
PALETTE: tuple[str, ...] = ("blue", "green", "purple", "orange", "red")


def palette_color(index: int) -> str:
    """Color for the given position; total for any non-negative index."""
    return PALETTE[index % len(PALETTE)]


class Category(str, Enum):
    """User-assigned note categories."""

    CORE_INSIGHT = "core-insight"
    SUPPORTING_EVIDENCE = "supporting-evidence"
    PERSONAL_REFLECTION = "personal-reflection"
    ACTION_ITEMS = "action-items"
    KEY_QUESTION = "key-question"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def color(self) -> str:
        return _CATEGORY_COLORS[self]


_CATEGORY_LABELS = {
    Category.CORE_INSIGHT: "Core Insight",
    Category.SUPPORTING_EVIDENCE: "Supporting Evidence",
    Category.PERSONAL_REFLECTION: "Personal Reflection",
    Category.ACTION_ITEMS: "Action Items",
    Category.KEY_QUESTION: "Key Question",
}

_CATEGORY_COLORS = {
    Category.CORE_INSIGHT: "blue",
    Category.SUPPORTING_EVIDENCE: "green",
    Category.PERSONAL_REFLECTION: "purple",
    Category.ACTION_ITEMS: "orange",
    Category.KEY_QUESTION: "red",
}

GENERAL_LABEL = "General"
GENERAL_COLOR = "blue"


def category_label(value: str | None) -> str:
    """Display label for a raw category value (unknown -> General)."""
    try:
        return Category(value).label
    except ValueError:
        return GENERAL_LABEL


def category_color(value: str | None) -> str:
    """Palette color for a raw category value (unknown -> blue)."""
    try:
        return Category(value).color
    except ValueError:
        return GENERAL_COLOR


@dataclass(frozen=True)
class Note:
    """A single recorded note (a bubble on the board)."""

    id: str
    text: str = ""
    keyword: str = ""  # short label, may be empty
    created: datetime | None = None
    category: str = ""
    path: Path | None = None

    @property
    def label(self) -> str:
        """Keyword if set, else the first line of the text."""
        if self.keyword.strip():
            return self.keyword.strip()
        first = self.text.strip().split("\n", 1)[0]
        return first[:60] if first else self.id


@dataclass(frozen=True)
class Link:
    """Directed association between two notes.

    `seq` is the creation order within the owning store; lower is older.
    """

    id: str
    source: str
    target: str
    seq: int

    def to_dict(self) -> dict:
        return {"id": self.id, "from": self.source, "to": self.target, "seq": self.seq}

    @classmethod
    def from_dict(cls, data: dict, *, default_seq: int = 0) -> "Link":
        seq = data.get("seq")
        return cls(
            id=str(data["id"]),
            source=str(data["from"]),
            target=str(data["to"]),
            seq=int(seq) if seq is not None else default_seq,
        )


# An ordered run of note ids connected by links
Chain = tuple[str, ...]


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a note snapshot against its links."""

    ordered: list[Note] = field(default_factory=list)
    chains: list[Chain] = field(default_factory=list)  # multi-node chains, discovery order
    residual: list[Note] = field(default_factory=list)  # never visited, input order

    @property
    def ordered_ids(self) -> list[str]:
        return [n.id for n in self.ordered]


@dataclass(frozen=True)
class Tag:
    """Display label for a multi-note chain."""

    name: str
    note_ids: tuple[str, ...]
    color: str

    def to_dict(self) -> dict:
        return {"name": self.name, "note_ids": list(self.note_ids), "color": self.color}
