import json
from pathlib import Path

from click.testing import CliRunner

from bubblechain.cli import _auto_detect_board, cli


def test_auto_detect_board_walks_up(board_path: Path):
    nested = board_path / "notes"

    assert _auto_detect_board(nested) == board_path.resolve()


def test_auto_detect_board_none(tmp_path: Path):
    assert _auto_detect_board(tmp_path) is None


def test_cli_chains_json(board_path: Path):
    result = CliRunner().invoke(cli, ["--board", str(board_path), "chains", "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.output)["ordered"][:3] == ["n1", "n2", "n3"]


def test_cli_missing_board(tmp_path: Path):
    result = CliRunner().invoke(cli, ["--board", str(tmp_path / "nope"), "chains"])

    assert result.exit_code != 0
    assert "does not exist" in result.output
