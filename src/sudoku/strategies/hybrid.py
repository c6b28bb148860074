"""
Hybrid Strategy - Iterative-deepening A* over most-constrained-cell moves.

Combines the bounded memory of depth-first search with heuristic guidance:
each iteration is a depth-first probe that refuses to expand states whose
f = g + h exceeds the current threshold, and children are generated at the
empty cell with the fewest legal values so dead ends surface early.

h is the number of empty cells. Every move fills exactly one cell, so h is
admissible and drops by exactly one per move.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Hashable, Iterator, List, Optional, Set, Tuple, Union

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..graph import SearchGraph
from ..solution import SolutionMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """Probe reached a solved board."""
    board: BoardState


@dataclass(frozen=True)
class Threshold:
    """Probe was cut off; bound is the smallest f that exceeded the threshold."""
    bound: int


@dataclass(frozen=True)
class Exhausted:
    """Probe ran out of states without exceeding the threshold."""


EXHAUSTED = Exhausted()

ProbeResult = Union[Found, Threshold, Exhausted]


class _SearchCancelled(Exception):
    """Unwinds the recursive probe when the context is cancelled."""


@contextmanager
def _on_path(path: Set[Hashable], identity: Hashable) -> Iterator[None]:
    """Mark identity as on the current DFS path for the duration of the block."""
    path.add(identity)
    try:
        yield
    finally:
        path.discard(identity)


@register_strategy
class HybridStrategy(SolverStrategy):
    """
    IDA* search returning the first solution found.

    Algorithm:
        1. threshold = h(start)
        2. Probe depth-first from start with g = 0:
           - f > threshold: return Threshold(f)
           - solved: return Found(board), ending every enclosing probe
           - otherwise recurse into each child not already on the path,
             keeping the smallest Threshold seen
        3. Found -> done; Exhausted -> unsolvable; Threshold(t) -> repeat
           with threshold = t

    Parameters:
        use_compact_hash: Track the current path by integer digest instead
            of the collision-free string key
    """
    name = "hybrid"
    description = "Hybrid IDA* (heuristic) - Most constrained cell first"

    def __init__(self, use_compact_hash: bool = False):
        """
        Initialize hybrid strategy.

        Args:
            use_compact_hash: Use BoardState.compact_hash for path marks.
                Faster to compute, but two distinct boards may collide.
        """
        self.use_compact_hash = use_compact_hash

    def _identity(self, board: BoardState) -> Hashable:
        if self.use_compact_hash:
            return board.compact_hash
        return board.key

    def _search(self, context: SolutionContext, graph: SearchGraph,
                metrics: SolutionMetrics) -> Tuple[List[BoardState], bool]:
        start = context.board
        threshold = start.heuristic()

        while True:
            metrics.iterations += 1
            logger.debug(f"[Hybrid] Iteration {metrics.iterations}, threshold {threshold}")

            try:
                result = self._probe(start, 0, threshold, set(), graph, context, metrics)
            except _SearchCancelled:
                logger.info(f"[Hybrid] Cancelled during iteration {metrics.iterations}")
                return [], True

            if isinstance(result, Found):
                return [result.board], False
            if isinstance(result, Exhausted):
                logger.debug("[Hybrid] State space exhausted, no solution")
                return [], False
            threshold = result.bound

    def _probe(self, board: BoardState, g: int, threshold: int,
               path: Set[Hashable], graph: SearchGraph,
               context: SolutionContext, metrics: SolutionMetrics) -> ProbeResult:
        """
        Depth-first probe bounded by threshold.

        Args:
            board: Board to expand
            g: Moves made from the starting board
            threshold: Largest f allowed in this iteration
            path: Identities of boards on the current path

        Returns:
            Found, Threshold or Exhausted
        """
        f = g + board.heuristic()
        if f > threshold:
            metrics.pruned_branches += 1
            return Threshold(f)

        if board.is_solved():
            return Found(board)

        if self._check_cancelled(context):
            raise _SearchCancelled()

        metrics.states_explored += 1
        context.check_budget(metrics.states_explored)

        minimum: Optional[int] = None
        with _on_path(path, self._identity(board)):
            if len(path) > metrics.peak_frontier:
                metrics.peak_frontier = len(path)
                self._report_depth(context, board, metrics.states_explored)

            for child in board.next_states_with_heuristic():
                if self._identity(child) in path:
                    metrics.pruned_branches += 1
                    continue
                graph.add_edge(board, child)

                result = self._probe(child, g + 1, threshold, path, graph, context, metrics)
                if isinstance(result, Found):
                    return result
                if isinstance(result, Threshold):
                    if minimum is None or result.bound < minimum:
                        minimum = result.bound

        if minimum is None:
            return EXHAUSTED
        return Threshold(minimum)
