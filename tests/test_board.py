"""
Tests for BoardState

Covers:
1. Construction and validation
2. Validity checks and candidate counting
3. Basic and heuristic next-state generation
4. Heuristic value and identity encodings

Usage:
    pytest tests/test_board.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.sudoku import BoardState, MalformedPuzzle


PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

EMPTY_GRID = [[0] * 9 for _ in range(9)]


def _dead_end_grid():
    """(0,0) has no legal value: row 0 holds 1-8 and column 0 holds 9."""
    grid = [row[:] for row in EMPTY_GRID]
    grid[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][0] = 9
    return grid


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------

def test_from_2d_list_builds_immutable_grid():
    """Grid is stored as tuple of tuples and the source list is not aliased."""
    source = [row[:] for row in PUZZLE]
    board = BoardState.from_2d_list(source)

    assert isinstance(board.grid, tuple)
    assert all(isinstance(row, tuple) for row in board.grid)
    assert board.rows == 9 and board.cols == 9

    source[0][2] = 4
    assert board.get_cell(0, 2) == 0


def test_from_2d_list_rejects_wrong_shape():
    with pytest.raises(MalformedPuzzle):
        BoardState.from_2d_list(PUZZLE[:8])

    short_row = [row[:] for row in PUZZLE]
    short_row[3] = short_row[3][:8]
    with pytest.raises(MalformedPuzzle):
        BoardState.from_2d_list(short_row)


def test_from_2d_list_rejects_bad_values():
    too_big = [row[:] for row in PUZZLE]
    too_big[0][2] = 10
    with pytest.raises(MalformedPuzzle):
        BoardState.from_2d_list(too_big)

    negative = [row[:] for row in PUZZLE]
    negative[0][2] = -1
    with pytest.raises(MalformedPuzzle):
        BoardState.from_2d_list(negative)

    not_a_number = [row[:] for row in PUZZLE]
    not_a_number[0][2] = "x"
    with pytest.raises(MalformedPuzzle):
        BoardState.from_2d_list(not_a_number)

    for lossy in (5.9, True, "5"):
        grid = [row[:] for row in PUZZLE]
        grid[0][2] = lossy
        with pytest.raises(MalformedPuzzle, match="not an integer"):
            BoardState.from_2d_list(grid)


def test_from_2d_list_accepts_integral_numbers():
    grid = [row[:] for row in PUZZLE]
    grid[0][0] = 5.0

    assert BoardState.from_2d_list(grid).get_cell(0, 0) == 5


def test_strict_construction_reports_conflicts():
    """Two 5s in row 0 are rejected in strict mode and accepted otherwise."""
    grid = [row[:] for row in EMPTY_GRID]
    grid[0][0] = 5
    grid[0][1] = 5

    with pytest.raises(MalformedPuzzle) as excinfo:
        BoardState.from_2d_list(grid, strict=True)
    assert excinfo.value.conflicts == [(0, 0), (0, 1)]

    lenient = BoardState.from_2d_list(grid)
    assert not lenient.is_consistent()
    assert lenient.find_conflicts() == [(0, 0), (0, 1)]


def test_conflicts_in_column_and_box():
    grid = [row[:] for row in EMPTY_GRID]
    grid[0][4] = 7
    grid[8][4] = 7
    grid[6][6] = 2
    grid[8][8] = 2
    board = BoardState.from_2d_list(grid)

    assert board.find_conflicts() == [(0, 4), (6, 6), (8, 4), (8, 8)]


def test_known_puzzles_are_consistent():
    assert BoardState.from_2d_list(PUZZLE, strict=True).is_consistent()
    assert BoardState.from_2d_list(SOLVED, strict=True).is_consistent()


# ----------------------------------------------------------------------
# Validity and constraint counting
# ----------------------------------------------------------------------

def test_is_valid_literal_scenario():
    """Row 0 = [5,3,0,0,7,0,0,0,0]: 5 is taken, 4 is free in row, column and box."""
    board = BoardState.from_2d_list(PUZZLE)

    assert board.is_valid(0, 2, 5) is False
    assert board.is_valid(0, 2, 4) is True


def test_is_valid_checks_column_and_box():
    board = BoardState.from_2d_list(PUZZLE)

    # 8 sits lower in column 2
    assert board.is_valid(0, 2, 8) is False
    # 6 sits in the top-left box at (1,0)
    assert board.is_valid(0, 2, 6) is False
    # 9 sits in the top-left box at (2,1)
    assert board.is_valid(0, 2, 9) is False


def test_is_solved():
    assert BoardState.from_2d_list(SOLVED).is_solved()
    assert not BoardState.from_2d_list(PUZZLE).is_solved()
    assert not BoardState.from_2d_list(EMPTY_GRID).is_solved()


def test_count_valid_numbers():
    board = BoardState.from_2d_list(PUZZLE)

    assert board.candidates(0, 2) == [1, 2, 4]
    assert board.count_valid_numbers(0, 2) == 3
    assert BoardState.from_2d_list(EMPTY_GRID).count_valid_numbers(4, 4) == 9
    assert BoardState.from_2d_list(_dead_end_grid()).count_valid_numbers(0, 0) == 0


# ----------------------------------------------------------------------
# Next-state generation
# ----------------------------------------------------------------------

def test_basic_generation_fills_first_empty_cell():
    board = BoardState.from_2d_list(PUZZLE)
    children = board.next_states_basic()

    assert [child.get_cell(0, 2) for child in children] == [1, 2, 4]
    for child in children:
        assert board.diff(child) == [(0, 2)]
        assert board.is_valid(0, 2, child.get_cell(0, 2))


def test_basic_generation_leaves_parent_untouched():
    board = BoardState.from_2d_list(PUZZLE)
    before = board.grid
    board.next_states_basic()
    board.next_states_with_heuristic()

    assert board.grid == before
    assert board.get_cell(0, 2) == 0


def test_heuristic_generation_uses_most_constrained_cell():
    """Children differ from the parent only at the first minimum-options cell."""
    board = BoardState.from_2d_list(PUZZLE)

    best, best_count = None, 10
    for r in range(9):
        for c in range(9):
            if board.get_cell(r, c) == 0:
                count = board.count_valid_numbers(r, c)
                if count < best_count:
                    best, best_count = (r, c), count

    assert board.most_constrained_cell() == best

    children = board.next_states_with_heuristic()
    assert len(children) == best_count
    for child in children:
        assert board.diff(child) == [best]
        assert board.is_valid(best[0], best[1], child.get_cell(*best))


def test_heuristic_generation_breaks_ties_in_row_major_order():
    board = BoardState.from_2d_list(EMPTY_GRID)

    assert board.most_constrained_cell() == (0, 0)
    children = board.next_states_with_heuristic()
    assert len(children) == 9
    assert all(board.diff(child) == [(0, 0)] for child in children)


def test_next_states_dispatch():
    board = BoardState.from_2d_list(PUZZLE)

    assert board.next_states() == board.next_states_basic()
    assert board.next_states(prioritize_most_constrained=True) == \
        board.next_states_with_heuristic()


def test_no_children_for_solved_or_dead_end_boards():
    solved = BoardState.from_2d_list(SOLVED)
    assert solved.next_states_basic() == []
    assert solved.next_states_with_heuristic() == []
    assert solved.most_constrained_cell() is None

    dead_end = BoardState.from_2d_list(_dead_end_grid())
    assert dead_end.next_states_basic() == []
    assert dead_end.most_constrained_cell() == (0, 0)
    assert dead_end.next_states_with_heuristic() == []


def test_heuristic_drops_by_one_per_move():
    board = BoardState.from_2d_list(PUZZLE)
    assert board.heuristic() == 51

    for child in board.next_states_basic() + board.next_states_with_heuristic():
        assert child.heuristic() == board.heuristic() - 1

    assert BoardState.from_2d_list(SOLVED).heuristic() == 0


def test_generated_boards_stay_consistent():
    """Following children until none remain never breaks uniqueness."""
    for prioritize in (False, True):
        board = BoardState.from_2d_list(PUZZLE)
        while True:
            children = board.next_states(prioritize_most_constrained=prioritize)
            if not children:
                break
            board = children[-1]
            assert board.is_consistent()


# ----------------------------------------------------------------------
# Identity
# ----------------------------------------------------------------------

def test_identity_of_equal_boards():
    a = BoardState.from_2d_list(PUZZLE)
    b = BoardState.from_2d_list([row[:] for row in PUZZLE])

    assert a == b
    assert a.key == b.key
    assert a.compact_hash == b.compact_hash
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_key_is_row_major_concatenation():
    board = BoardState.from_2d_list(PUZZLE)

    assert len(board.key) == 81
    assert board.key.startswith("530070000600195000")
    assert board.key == "".join(str(v) for row in PUZZLE for v in row)


def test_different_boards_have_different_keys():
    board = BoardState.from_2d_list(PUZZLE)
    children = board.next_states_basic()

    assert len({child.key for child in children}) == len(children)
    assert board.key not in {child.key for child in children}
    assert board != children[0]


def test_diff_and_to_list():
    board = BoardState.from_2d_list(PUZZLE)
    solved = BoardState.from_2d_list(SOLVED)

    assert len(board.diff(solved)) == 51
    assert board.to_list() == PUZZLE
    assert list(board.empty_cells())[:3] == [(0, 2), (0, 3), (0, 5)]

    with pytest.raises(TypeError):
        board.diff(PUZZLE)
