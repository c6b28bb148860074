"""
Tests for puzzle file loading.

Usage:
    pytest tests/test_loader.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.puzzle_loader import list_puzzles, load_puzzle, parse_puzzle
from src.sudoku import MalformedPuzzle

PUZZLE_DIR = Path(__file__).parent.parent / "puzzles"

GRID_TEXT = """\
5 3 0 0 7 0 0 0 0
6 0 0 1 9 5 0 0 0
0 9 8 0 0 0 0 6 0
8 0 0 0 6 0 0 0 3
4 0 0 8 0 3 0 0 1
7 0 0 0 2 0 0 0 6
0 6 0 0 0 0 2 8 0
0 0 0 4 1 9 0 0 5
0 0 0 0 8 0 0 7 9
"""

COMPACT_TEXT = (
    "53..7....6..195....98....6.8...6...34..8.3..17...2...6"
    ".6....28....419..5....8..79"
)


def test_parse_grid_layout():
    grid = parse_puzzle(GRID_TEXT)

    assert grid.shape == (9, 9)
    assert grid[0].tolist() == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert grid[8, 8] == 9


def test_parse_compact_layout_matches_grid():
    assert parse_puzzle(COMPACT_TEXT).tolist() == parse_puzzle(GRID_TEXT).tolist()


def test_comments_and_blank_lines_ignored():
    text = "# easy puzzle\n\n" + GRID_TEXT + "\n\n"
    assert parse_puzzle(text).tolist() == parse_puzzle(GRID_TEXT).tolist()


@pytest.mark.parametrize("text", [
    "",
    "# only a comment\n",
    "\n".join(GRID_TEXT.splitlines()[:8]),
    GRID_TEXT.replace("5 3 0", "5 3 x"),
    GRID_TEXT.replace("0 0 7 9", "0 0 7 9 1"),
    GRID_TEXT.replace("5 3 0", "5 3 12"),
    COMPACT_TEXT[:-1] + "a",
    "\u00b2" + COMPACT_TEXT[1:],
])
def test_malformed_text_rejected(text):
    with pytest.raises(MalformedPuzzle):
        parse_puzzle(text)


def test_non_ascii_digits_rejected_from_file(tmp_path):
    path = tmp_path / "superscript.txt"
    path.write_text("\u00b2" + "0" * 80, encoding="utf-8")

    with pytest.raises(MalformedPuzzle, match="non-digits"):
        load_puzzle(path)


def test_load_puzzle_from_file(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(GRID_TEXT, encoding="utf-8")

    board = load_puzzle(path)

    assert board.get_cell(0, 0) == 5
    assert board.heuristic() == 51


def test_load_puzzle_rejects_conflicts(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text(GRID_TEXT.replace("5 3 0 0 7", "5 3 5 0 7", 1), encoding="utf-8")

    with pytest.raises(MalformedPuzzle) as excinfo:
        load_puzzle(path)
    assert (0, 0) in excinfo.value.conflicts

    lenient = load_puzzle(path, strict=False)
    assert not lenient.is_consistent()


def test_load_missing_file(tmp_path):
    with pytest.raises(MalformedPuzzle):
        load_puzzle(tmp_path / "missing.txt")


def test_list_puzzles(tmp_path):
    (tmp_path / "b.txt").write_text(GRID_TEXT, encoding="utf-8")
    (tmp_path / "a.txt").write_text(GRID_TEXT, encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignore me", encoding="utf-8")

    assert [p.name for p in list_puzzles(tmp_path)] == ["a.txt", "b.txt"]
    assert list_puzzles(tmp_path / "nope") == []


def test_bundled_puzzles_load():
    puzzles = list_puzzles(PUZZLE_DIR)

    assert {p.stem for p in puzzles} >= {"easy", "hard", "two_solutions"}
    for path in puzzles:
        board = load_puzzle(path)
        assert board.is_consistent()
        assert not board.is_solved()
