"""Pytest configuration and fixtures."""

import shutil
from pathlib import Path

import pytest

from bubblechain.board.links import LinkStore, save_links
from bubblechain.board.loader import Board, load_board
from bubblechain.models import Note


@pytest.fixture
def fixture_board_path() -> Path:
    """Path to the read-only sample board."""
    return Path(__file__).parent / "fixtures" / "sample_board"


@pytest.fixture
def board_path(fixture_board_path: Path, tmp_path: Path) -> Path:
    """Writable copy of the sample board with its links saved.

    Links: n1->n2, n2->n3, n5->n6, n6->n5 (oldest first). n4 stays unlinked.
    """
    dest = tmp_path / "sample_board"
    shutil.copytree(fixture_board_path, dest)

    store = LinkStore()
    for src, dst in [("n1", "n2"), ("n2", "n3"), ("n5", "n6"), ("n6", "n5")]:
        store.add_link(src, dst)
    save_links(dest, store)
    return dest


@pytest.fixture
def board(board_path: Path) -> Board:
    return load_board(board_path)


def make_notes(*ids: str, keywords: dict[str, str] | None = None) -> list[Note]:
    keywords = keywords or {}
    return [Note(id=i, text=f"text of {i}", keyword=keywords.get(i, "")) for i in ids]


def make_links(*pairs: tuple[str, str]) -> LinkStore:
    store = LinkStore()
    for src, dst in pairs:
        store.add_link(src, dst)
    return store
