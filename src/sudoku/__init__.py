"""
Sudoku Package - State-space search framework for 9x9 Sudoku.

Boards are nodes, single-cell placements are edges. Three pluggable
strategies explore that graph and can be selected at runtime by name.

Public API:
    - BoardState: Immutable board representation
    - SearchGraph: Adjacency bookkeeping of explored transitions
    - Solution: Result of strategy computation
    - SolutionMetrics: Performance statistics
    - SolutionContext: Deadline, cancellation and budget for one run
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - run_strategy(): Create and run a strategy on a board
    - solve_bfs() / solve_dls() / solve_hybrid(): One entry point per strategy
    - MalformedPuzzle / ResourceExceeded: Error conditions

Usage:
    from src.sudoku import BoardState, SolutionContext, create_strategy

    board = BoardState.from_2d_list(grid, strict=True)

    context = SolutionContext(board=board, timeout_sec=30.0)

    strategy = create_strategy("hybrid")
    solution = strategy.solve(context)

    for solved in solution.boards:
        print(solved.key)
"""

# Core data structures
from .board import BoardState, GRID_SIZE, BOX_SIZE, EMPTY
from .graph import SearchGraph
from .solution import Solution, SolutionMetrics
from .context import SolutionContext
from .errors import SudokuError, MalformedPuzzle, ResourceExceeded

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    run_strategy,
    solve_bfs,
    solve_dls,
    solve_hybrid,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "BoardState",
    "GRID_SIZE",
    "BOX_SIZE",
    "EMPTY",
    "SearchGraph",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Errors
    "SudokuError",
    "MalformedPuzzle",
    "ResourceExceeded",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "run_strategy",
    "solve_bfs",
    "solve_dls",
    "solve_hybrid",
]
