"""
Breadth-First Strategy - Exhaustive level-order enumeration of solutions.

Expands states level by level with basic (first empty cell) generation and
collects every solved board it reaches. The frontier holds a whole level
of the search tree at once, so memory grows quickly on loosely constrained
puzzles; use the hybrid strategy when only one solution is needed.
"""

import logging
from collections import deque
from typing import Deque, List, Set, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..graph import SearchGraph
from ..solution import SolutionMetrics

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Queue-driven breadth-first search returning all solutions.

    Algorithm:
        1. Seed queue and visited-set with the starting board
        2. Dequeue a board; if solved, record it and keep going
        3. Otherwise enqueue each child whose key is unseen, marking it
           visited and recording the parent -> child edge
        4. Stop when the queue is empty
    """
    name = "bfs"
    description = "Breadth-First Search (exhaustive) - Finds every solution"

    PROGRESS_INTERVAL = 1000

    def _search(self, context: SolutionContext, graph: SearchGraph,
                metrics: SolutionMetrics) -> Tuple[List[BoardState], bool]:
        start = context.board
        solutions: List[BoardState] = []
        queue: Deque[BoardState] = deque([start])
        known: Set[str] = {start.key}
        metrics.iterations = 1
        metrics.peak_frontier = 1

        while queue:
            if self._check_cancelled(context):
                logger.info(f"[BFS] Cancelled with {len(queue)} states queued")
                return solutions, True

            board = queue.popleft()
            metrics.states_explored += 1

            if board.is_solved():
                solutions.append(board)
                logger.debug(f"[BFS] Solution {len(solutions)} found")
                continue

            context.check_budget(metrics.states_explored)

            for child in board.next_states_basic():
                child_key = child.key
                if child_key in known:
                    metrics.pruned_branches += 1
                    continue
                queue.append(child)
                known.add(child_key)
                graph.add_edge(board, child)

            if len(queue) > metrics.peak_frontier:
                metrics.peak_frontier = len(queue)

            if metrics.states_explored % self.PROGRESS_INTERVAL == 0:
                self._report_depth(context, board, metrics.states_explored)

        return solutions, False
