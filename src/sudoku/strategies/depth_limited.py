"""
Depth-Limited Strategy - Stack-based search stopping at the first solution.

Structurally the breadth-first search with a stack in place of the queue.
An 81-cell grid can take at most 81 moves, so the puzzle size is the
depth limit and no explicit cutoff is applied.
"""

import logging
from typing import List, Set, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..graph import SearchGraph
from ..solution import SolutionMetrics

logger = logging.getLogger(__name__)


@register_strategy
class DepthLimitedStrategy(SolverStrategy):
    """
    Stack-driven depth-first search returning the first solution found.

    Uses basic (first empty cell) generation and string-key visited
    tracking, same as BFS, but pops the most recently pushed board and
    returns as soon as a solved board comes off the stack.
    """
    name = "dls"
    description = "Depth-Limited Search (fast) - Stops at first solution"

    PROGRESS_INTERVAL = 1000

    def _search(self, context: SolutionContext, graph: SearchGraph,
                metrics: SolutionMetrics) -> Tuple[List[BoardState], bool]:
        start = context.board
        stack: List[BoardState] = [start]
        known: Set[str] = {start.key}
        metrics.iterations = 1
        metrics.peak_frontier = 1

        while stack:
            if self._check_cancelled(context):
                logger.info(f"[DLS] Cancelled with {len(stack)} states stacked")
                return [], True

            board = stack.pop()
            metrics.states_explored += 1

            if board.is_solved():
                logger.debug(
                    f"[DLS] Solution found after {metrics.states_explored} states, "
                    f"{len(stack)} left unexplored"
                )
                return [board], False

            context.check_budget(metrics.states_explored)

            for child in board.next_states_basic():
                child_key = child.key
                if child_key in known:
                    metrics.pruned_branches += 1
                    continue
                stack.append(child)
                known.add(child_key)
                graph.add_edge(board, child)

            if len(stack) > metrics.peak_frontier:
                metrics.peak_frontier = len(stack)

            if metrics.states_explored % self.PROGRESS_INTERVAL == 0:
                self._report_depth(context, board, metrics.states_explored)

        return [], False
