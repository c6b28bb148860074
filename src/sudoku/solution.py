"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import BoardState


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of board states expanded
        pruned_branches: Children skipped (already visited or over threshold)
        strategy_name: Name of strategy that computed this solution
        vertex_count: Vertices in the search graph when the run ended
        edge_count: Edges in the search graph when the run ended
        iterations: Threshold iterations (IDA*), 1 for single-pass searches
        peak_frontier: Largest queue/stack/path length seen
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    pruned_branches: int = 0
    strategy_name: str = ""
    vertex_count: int = 0
    edge_count: int = 0
    iterations: int = 0
    peak_frontier: int = 0


@dataclass
class Solution:
    """
    Result of a strategy computation.

    An empty boards list with was_cancelled False means the puzzle has no
    solution reachable from the starting board.

    Attributes:
        boards: Solved boards in discovery order
        was_cancelled: True if stopped by cancellation or deadline
        metrics: Performance statistics
    """
    boards: List[BoardState] = field(default_factory=list)
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def solution_count(self) -> int:
        """Number of solved boards."""
        return len(self.boards)

    @property
    def has_solution(self) -> bool:
        """Check if at least one solved board was found."""
        return len(self.boards) > 0

    @property
    def first(self) -> Optional[BoardState]:
        """First solved board, or None."""
        return self.boards[0] if self.boards else None
