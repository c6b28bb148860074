"""
Errors Module - Exception types raised by the Sudoku core.
"""

from typing import List, Optional, Tuple


class SudokuError(Exception):
    """Base class for all Sudoku solver errors."""


class MalformedPuzzle(SudokuError, ValueError):
    """
    Raised when a puzzle grid cannot be used as a starting board.

    Attributes:
        conflicts: Cells that violate row/column/box uniqueness, if any
    """

    def __init__(self, message: str,
                 conflicts: Optional[List[Tuple[int, int]]] = None):
        super().__init__(message)
        self.conflicts = conflicts or []


class ResourceExceeded(SudokuError, RuntimeError):
    """
    Raised when a search expands more states than its configured budget.

    Attributes:
        states_explored: States expanded when the budget tripped
        limit: Configured maximum
    """

    def __init__(self, states_explored: int, limit: int):
        super().__init__(
            f"Search exceeded state budget: {states_explored} > {limit}"
        )
        self.states_explored = states_explored
        self.limit = limit
