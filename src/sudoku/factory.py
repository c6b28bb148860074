"""
Strategy Factory Module - Registry, factory and entry points for strategies.
"""

from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy
from .board import BoardState
from .context import SolutionContext
from .solution import Solution


# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "hybrid"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name ("bfs", "dls", "hybrid")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available strategy names.

    Returns:
        List of registered strategy names
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        Default strategy name ("hybrid" if available, else first registered)
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""


def run_strategy(name: str, board: BoardState,
                 timeout_sec: Optional[float] = None,
                 max_states: Optional[int] = None,
                 **kwargs: Any) -> Solution:
    """
    Create a strategy by name and run it on a board.

    Args:
        name: Strategy name
        board: Initial board state
        timeout_sec: Deadline in seconds (defaults to the strategy's own)
        max_states: State budget (None = unbounded)
        **kwargs: Strategy constructor arguments

    Returns:
        Solution from the strategy
    """
    strategy = create_strategy(name, **kwargs)
    context = SolutionContext(
        board=board,
        timeout_sec=timeout_sec if timeout_sec is not None else strategy.timeout_sec,
        max_states=max_states,
    )
    return strategy.solve(context)


def solve_bfs(board: BoardState) -> List[BoardState]:
    """Every solved board reachable from board (breadth-first)."""
    return run_strategy("bfs", board).boards


def solve_dls(board: BoardState) -> List[BoardState]:
    """At most one solved board (depth-first, stack based)."""
    return run_strategy("dls", board).boards


def solve_hybrid(board: BoardState) -> List[BoardState]:
    """At most one solved board (IDA* with most-constrained-cell ordering)."""
    return run_strategy("hybrid", board).boards
