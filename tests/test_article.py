from bubblechain.board.article import Article, add_chain, assemble_article
from bubblechain.board.chains import resolve_chains
from bubblechain.board.links import load_links
from bubblechain.board.loader import Board
from bubblechain.board.tags import synthesize_tags


def test_assemble_in_chain_order(board: Board):
    store = load_links(board.path)

    article = assemble_article("Notes", board.notes, store.links)

    assert article.note_ids == ["n1", "n2", "n3", "n5", "n6", "n4"]
    assert article.paragraphs[0] == board.get("n1").text


def test_used_notes_are_skipped(board: Board):
    store = load_links(board.path)

    article = assemble_article("Notes", board.notes, store.links, used=["n2", "n6"])

    assert article.note_ids == ["n1", "n3", "n5", "n4"]


def test_add_whole_chain_by_tag(board: Board):
    store = load_links(board.path)
    tags = synthesize_tags(resolve_chains(board.notes, store.links).chains, board.notes)
    ideas = next(t for t in tags if t.name == "Ideas")

    article = Article(title="Draft")
    article.add_note(board.get("n2"))

    assert add_chain(article, ideas, board.notes) == 2
    assert article.note_ids == ["n2", "n1", "n3"]
    # Adding the same chain again changes nothing
    assert add_chain(article, ideas, board.notes) == 0


def test_markdown_rendering():
    article = Article(title="Trip", paragraphs=["First.", "Second."], note_ids=["a", "b"])

    assert article.to_markdown() == "# Trip\n\nFirst.\n\nSecond.\n"
    assert Article(title="Empty").to_markdown() == "# Empty\n"
