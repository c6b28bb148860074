"""
Puzzle Loader Module - Reads Sudoku puzzles from text files.

Two layouts are accepted:

    Grid (one row per line, whitespace separated):
        5 3 0 0 7 0 0 0 0
        6 0 0 1 9 5 0 0 0
        ...

    Compact (all 81 cells on one line, '0' or '.' for empty):
        530070000600195000098000060800060003400803001700020006060000280000419005000080079

Blank lines and lines starting with '#' are ignored in both layouts.
"""

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from src.sudoku import BoardState, GRID_SIZE, MalformedPuzzle

logger = logging.getLogger(__name__)

PUZZLE_SUFFIX = ".txt"


def _content_lines(text: str) -> List[str]:
    """Strip comments and blank lines."""
    lines = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            lines.append(stripped)
    return lines


def parse_puzzle(text: str) -> np.ndarray:
    """
    Parse puzzle text into a 9x9 integer array.

    Args:
        text: File contents in grid or compact layout

    Returns:
        9x9 numpy array of ints in 0-9

    Raises:
        MalformedPuzzle: If the text is not a 9x9 grid of digits
    """
    lines = _content_lines(text)
    if not lines:
        raise MalformedPuzzle("Puzzle file is empty")

    cell_count = GRID_SIZE * GRID_SIZE

    if len(lines) == 1 and len(lines[0]) == cell_count and " " not in lines[0]:
        compact = lines[0].replace(".", "0")
        if not (compact.isascii() and compact.isdigit()):
            raise MalformedPuzzle(f"Compact puzzle contains non-digits: {lines[0]!r}")
        grid = np.array([int(ch) for ch in compact], dtype=int).reshape(GRID_SIZE, GRID_SIZE)
    else:
        try:
            grid = np.loadtxt(lines, dtype=int, ndmin=2)
        except ValueError as e:
            raise MalformedPuzzle(f"Could not parse puzzle grid: {e}") from e

    if grid.shape != (GRID_SIZE, GRID_SIZE):
        raise MalformedPuzzle(
            f"Expected a {GRID_SIZE}x{GRID_SIZE} grid, got {grid.shape[0]}x{grid.shape[1]}"
        )
    if grid.min() < 0 or grid.max() > GRID_SIZE:
        raise MalformedPuzzle(f"Cell values must be between 0 and {GRID_SIZE}")

    return grid


def load_puzzle(path: Union[str, Path], strict: bool = True) -> BoardState:
    """
    Load a puzzle file into a BoardState.

    Args:
        path: Path to the puzzle file
        strict: Reject puzzles whose fixed cells repeat a value

    Returns:
        Initial BoardState

    Raises:
        MalformedPuzzle: If the file is unreadable or not a valid puzzle
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedPuzzle(f"Cannot read puzzle file {path}: {e}") from e

    grid = parse_puzzle(text)
    board = BoardState.from_2d_list(grid.tolist(), strict=strict)
    logger.info(f"Loaded puzzle {path.name}: {board.heuristic()} empty cells")
    return board


def list_puzzles(directory: Union[str, Path]) -> List[Path]:
    """
    List puzzle files in a directory.

    Args:
        directory: Directory to scan

    Returns:
        Sorted puzzle paths (empty if the directory does not exist)
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.debug(f"Puzzle directory not found: {directory}")
        return []
    return sorted(p for p in directory.iterdir() if p.suffix == PUZZLE_SUFFIX)
