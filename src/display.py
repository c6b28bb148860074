"""
Display Module - Plain-text rendering of boards and results.
"""

from typing import List

from src.sudoku import BoardState, BOX_SIZE, Solution

BAND_RULE = "- - - - - - - - - - -"


def format_board(board: BoardState) -> str:
    """
    Render a board with box separators.

    Example output (first band):
        5 3 0 | 0 7 0 | 0 0 0
        6 0 0 | 1 9 5 | 0 0 0
        0 9 8 | 0 0 0 | 0 6 0
        - - - - - - - - - - -
    """
    lines: List[str] = []
    for r, row in enumerate(board.grid):
        if r % BOX_SIZE == 0 and r != 0:
            lines.append(BAND_RULE)
        parts = []
        for c, value in enumerate(row):
            if c % BOX_SIZE == 0 and c != 0:
                parts.append("|")
            parts.append(str(value))
        lines.append(" ".join(parts))
    return "\n".join(lines)


def format_solution(solution: Solution) -> str:
    """Summarize a Solution: every solved board followed by its metrics."""
    metrics = solution.metrics
    lines: List[str] = []

    if solution.has_solution:
        heading = "Solved Sudoku puzzle" if solution.solution_count == 1 else \
            f"Solved Sudoku puzzles ({solution.solution_count})"
        lines.append(heading + ":")
        for board in solution.boards:
            lines.append(format_board(board))
            lines.append("")
    elif solution.was_cancelled:
        lines.append("Search stopped before a solution was found.")
    else:
        lines.append("No solution exists for the given Sudoku puzzle.")

    lines.append(
        f"[{metrics.strategy_name}] {metrics.states_explored} states explored, "
        f"{metrics.pruned_branches} pruned, {metrics.vertex_count} vertices, "
        f"{metrics.edge_count} edges, {metrics.iterations} iteration(s), "
        f"peak frontier {metrics.peak_frontier}, {metrics.computation_time_ms:.2f} ms"
    )
    return "\n".join(lines)
