from pathlib import Path

import pytest

from backtrack.io.parser import PuzzleFormatError, load_puzzle, load_trunk, parse_trunk
from backtrack.puzzles.queens import QueensConfig
from backtrack.puzzles.trunks import Suitcase, TrunkConfig

DATA = Path(__file__).resolve().parent.parent / "data"


def test_parse_trunk():
    trunk = parse_trunk("3 2\nA 1 2\nB 2 2\n")
    assert (trunk.width, trunk.height) == (3, 2)
    assert trunk.remaining == (Suitcase(1, 2, "A"), Suitcase(2, 2, "B"))


def test_parse_trunk_skips_blanks_and_comments():
    trunk = parse_trunk("# a trunk\n\n2 2\n  # comment\n  A 1 1\n\n")
    assert [s.name for s in trunk.remaining] == ["A"]


def test_load_trunk_sample():
    trunk = load_trunk(DATA / "default-1.txt")
    assert (trunk.width, trunk.height) == (3, 3)
    assert [s.name for s in trunk.remaining] == ["E", "D", "C", "B", "A"]


def test_load_puzzle_text_falls_back_to_trunk(tmp_path):
    path = tmp_path / "trunk.txt"
    path.write_text("4 1\nA 2 1\n", encoding="utf-8")
    assert isinstance(load_puzzle(path), TrunkConfig)


def test_load_puzzle_yaml_queens():
    config = load_puzzle(DATA / "queens-8.yaml")
    assert isinstance(config, QueensConfig)
    assert config.size == 8
    assert config.queens() == [(0, 0)]


def test_load_puzzle_yaml_trunk():
    config = load_puzzle(DATA / "trunk-default.yaml")
    assert isinstance(config, TrunkConfig)
    assert config == load_trunk(DATA / "default-1.txt")


@pytest.mark.parametrize("text,line", [
    ("3\nA 1 1\n", 1),
    ("3 x\n", 1),
    ("3 3\nA 1\n", 2),
    ("3 3\nA 1 1\nB one 1\n", 3),
])
def test_parse_errors_carry_line(text, line):
    with pytest.raises(PuzzleFormatError) as excinfo:
        parse_trunk(text, "bad.txt")
    assert excinfo.value.line == line
    assert str(excinfo.value).startswith(f"bad.txt:{line}:")


def test_parse_missing_header():
    with pytest.raises(PuzzleFormatError, match="header"):
        parse_trunk("# only a comment\n")


def test_parse_rejects_bad_dimensions():
    with pytest.raises(PuzzleFormatError):
        parse_trunk("0 3\n")
    with pytest.raises(PuzzleFormatError):
        parse_trunk("3 3\nA 0 1\n")


def test_yaml_errors(tmp_path):
    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("puzzle: sudoku\n", encoding="utf-8")
    with pytest.raises(PuzzleFormatError, match="Unknown puzzle"):
        load_puzzle(unknown)

    scalar = tmp_path / "scalar.yml"
    scalar.write_text("just text\n", encoding="utf-8")
    with pytest.raises(PuzzleFormatError, match="mapping"):
        load_puzzle(scalar)

    off_board = tmp_path / "queens.yaml"
    off_board.write_text("puzzle: queens\nsize: 4\nrow: 9\n", encoding="utf-8")
    with pytest.raises(PuzzleFormatError, match="off a 4x4 board"):
        load_puzzle(off_board)

    missing = tmp_path / "trunk.yaml"
    missing.write_text("puzzle: trunk\nheight: 3\n", encoding="utf-8")
    with pytest.raises(PuzzleFormatError):
        load_puzzle(missing)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_puzzle(DATA / "does-not-exist.txt")


@pytest.mark.parametrize("text", [
    "2 1\nAB 1 1\nC 1 1\n",
    "2 1\nA 1 1\nBC 1 1\n",
])
def test_parse_rejects_multi_character_labels(text):
    with pytest.raises(PuzzleFormatError, match="single character"):
        parse_trunk(text)


def test_parse_rejects_duplicate_labels():
    with pytest.raises(PuzzleFormatError, match="more than once"):
        parse_trunk("2 1\nA 1 1\nA 1 1\n")


def test_hash_after_fields_is_not_a_comment():
    with pytest.raises(PuzzleFormatError) as excinfo:
        parse_trunk("2 1\nA 1 1 # note\n")
    assert excinfo.value.line == 2


def test_hash_label_is_reserved(tmp_path):
    path = tmp_path / "hash.yaml"
    path.write_text(
        "puzzle: trunk\nwidth: 2\nheight: 1\nsuitcases:\n  - {name: '#', width: 1, height: 1}\n",
        encoding="utf-8",
    )
    with pytest.raises(PuzzleFormatError, match="reserved"):
        load_puzzle(path)
