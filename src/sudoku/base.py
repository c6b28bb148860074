"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .board import BoardState
from .context import SolutionContext
from .graph import SearchGraph
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses implement _search() and define name and description
    class attributes. solve() wraps the search with timing, the
    consistency check on the starting board and the per-run graph.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for menus
        timeout_sec: Suggested deadline for this strategy (None = none)
    """
    name: str = "base"
    description: str = "Base strategy"
    timeout_sec: Optional[float] = None

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for solved boards reachable from context.board.

        A starting board whose fixed cells already repeat a value can never
        be completed legally, so it yields an empty solution without
        searching.

        Args:
            context: Solution context with board, cancellation, limits

        Returns:
            Solution with solved boards and metrics

        Raises:
            ResourceExceeded: If context.max_states is exceeded
        """
        start_time = time.perf_counter()
        metrics = SolutionMetrics(strategy_name=self.name)
        board = context.board

        if not board.is_consistent():
            logger.warning(
                f"[{self.name}] Starting board repeats values in cells "
                f"{board.find_conflicts()}, no solution possible"
            )
            return self._build_solution([], metrics, start_time, was_cancelled=False)

        graph = SearchGraph(board)
        try:
            boards, was_cancelled = self._search(context, graph, metrics)
        finally:
            metrics.vertex_count = graph.vertex_count
            metrics.edge_count = graph.edge_count

        if logger.isEnabledFor(logging.DEBUG) and graph.vertex_count <= 64:
            logger.debug(f"[{self.name}] Search graph:\n{graph.describe()}")

        solution = self._build_solution(boards, metrics, start_time, was_cancelled)
        logger.info(
            f"[{self.name}] {solution.solution_count} solution(s), "
            f"{metrics.states_explored} states explored, "
            f"{metrics.vertex_count} vertices, {metrics.edge_count} edges, "
            f"{metrics.computation_time_ms:.1f}ms"
            + (" (cancelled)" if was_cancelled else "")
        )
        return solution

    @abstractmethod
    def _search(self, context: SolutionContext, graph: SearchGraph,
                metrics: SolutionMetrics) -> Tuple[List[BoardState], bool]:
        """
        Run the search.

        Must periodically check context.is_cancelled() and stop with the
        boards found so far if True, and call context.check_budget() once
        per expanded state.

        Args:
            context: Solution context
            graph: Graph to record transitions in
            metrics: Metrics to update in place

        Returns:
            Tuple of (solved boards, was_cancelled)
        """
        pass

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _report_depth(self, context: SolutionContext, board: BoardState,
                      states_explored: int) -> None:
        """Report progress as the share of originally empty cells now filled."""
        initial_empty = context.board.heuristic()
        if initial_empty > 0:
            filled = initial_empty - board.heuristic()
            context.report_progress(
                min(0.99, filled / initial_empty),
                f"{states_explored} states explored"
            )

    def _build_solution(self, boards: List[BoardState], metrics: SolutionMetrics,
                        start_time: float, was_cancelled: bool) -> Solution:
        """Build Solution object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        return Solution(
            boards=boards,
            was_cancelled=was_cancelled,
            metrics=metrics,
        )
