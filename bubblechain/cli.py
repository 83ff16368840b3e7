"""CLI entrypoint for bubblechain."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import CONFIG_FILENAME


def _auto_detect_board(start: Path) -> Path | None:
    """Find a board (a directory holding bubblechain.toml) by walking up from `start`."""
    cur = start.resolve()
    for p in (cur, *cur.parents):
        if (p / CONFIG_FILENAME).is_file():
            return p
    return None


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="bubblechain")
@click.option(
    "--board",
    "-b",
    type=click.Path(exists=False, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Path to the board directory (defaults to the nearest directory with bubblechain.toml)",
)
@click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, board: Path | None, verbose: bool) -> None:
    """bubblechain - chain, lay out and compose note boards.

    A board is a directory of Markdown notes; links between notes live in
    .bubblechain/links.json inside it.
    """
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    if board is None:
        detected = _auto_detect_board(Path.cwd())
        if detected is None:
            raise click.ClickException("Board not found. Pass --board /path/to/board or run from inside one.")
        board = detected

    if not board.exists() or not board.is_dir():
        raise click.BadParameter(f"Directory '{board}' does not exist.", param_hint="--board / -b")

    ctx.obj["board"] = board.resolve()


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["md", "json", "rich"]),
    default="md",
    show_default=True,
    help="Output format",
)
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write output to a file")
@click.pass_context
def chains(ctx: click.Context, fmt: str, out: Path | None) -> None:
    """Show link chains with their tags, then unconnected notes."""
    from .commands.chains_cmd import run_chains

    sys.exit(run_chains(ctx.obj["board"], fmt=fmt, out=out))


@cli.command()
@click.option(
    "--sort",
    "mode",
    type=click.Choice(["connection", "original", "keyword", "category"]),
    default="connection",
    show_default=True,
    help="List order",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def order(ctx: click.Context, mode: str, output_json: bool) -> None:
    """List notes in connection, original, keyword or category order."""
    from .commands.chains_cmd import run_order

    sys.exit(run_order(ctx.obj["board"], mode=mode, output_json=output_json))


@cli.command()
@click.option("--width", type=int, default=None, help="Viewport width in pixels (default from config)")
@click.option("--height", type=int, default=None, help="Viewport height in pixels (default from config)")
@click.option(
    "--arrange",
    "mode",
    type=click.Choice(["connection", "keyword"]),
    default="connection",
    show_default=True,
    help="Placement order",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["md", "json"]),
    default="md",
    show_default=True,
    help="Output format",
)
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write output to a file")
@click.pass_context
def layout(
    ctx: click.Context,
    width: int | None,
    height: int | None,
    mode: str,
    fmt: str,
    out: Path | None,
) -> None:
    """Auto-arrange notes on a grid sized to the viewport.

    Examples:

        bubblechain layout --width 1440 --height 900

        bubblechain layout --arrange keyword --format json
    """
    from .commands.layout_cmd import run_layout

    sys.exit(run_layout(ctx.obj["board"], width=width, height=height, mode=mode, fmt=fmt, out=out))


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def links(ctx: click.Context, output_json: bool) -> None:
    """List links, oldest first."""
    from .commands.links_cmd import run_links

    sys.exit(run_links(ctx.obj["board"], output_json=output_json))


@cli.command()
@click.argument("source")
@click.argument("target")
@click.pass_context
def connect(ctx: click.Context, source: str, target: str) -> None:
    """Link note SOURCE to note TARGET."""
    from .commands.links_cmd import run_connect

    sys.exit(run_connect(ctx.obj["board"], source, target))


@cli.command()
@click.argument("link_id")
@click.pass_context
def disconnect(ctx: click.Context, link_id: str) -> None:
    """Remove the link LINK_ID."""
    from .commands.links_cmd import run_disconnect

    sys.exit(run_disconnect(ctx.obj["board"], link_id))


@cli.command()
@click.option("--title", type=str, default=None, help="Article title (defaults to the board name)")
@click.option("--tag", "tags", multiple=True, metavar="NAME", help="Only add the chain with this tag (repeatable)")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["md", "json", "rich"]),
    default="md",
    show_default=True,
    help="Output format",
)
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write output to a file")
@click.pass_context
def article(ctx: click.Context, title: str | None, tags: tuple[str, ...], fmt: str, out: Path | None) -> None:
    """Compose notes into an article in chain order.

    Examples:

        bubblechain article --title "Weekly notes"

        bubblechain article --tag "Group No.1" --tag ideas
    """
    from .commands.article_cmd import run_article

    sys.exit(run_article(ctx.obj["board"], title=title, tags=tags, fmt=fmt, out=out))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
