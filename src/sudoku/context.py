"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import BoardState
from .errors import ResourceExceeded


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing board state,
    cancellation, resource limits and progress reporting.

    Attributes:
        board: Initial board state to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = no deadline)
        max_states: Maximum states a search may expand (None = unbounded)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: BoardState
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_states: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def check_budget(self, states_explored: int) -> None:
        """
        Enforce the state budget.

        Args:
            states_explored: States expanded so far

        Raises:
            ResourceExceeded: If max_states is set and has been passed
        """
        if self.max_states is not None and states_explored > self.max_states:
            raise ResourceExceeded(states_explored, self.max_states)

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time

    def remaining_time(self) -> Optional[float]:
        """
        Get seconds remaining before timeout.

        Returns:
            Remaining time in seconds (may be negative if exceeded),
            or None when there is no deadline
        """
        if self.timeout_sec is None:
            return None
        return self.timeout_sec - self.elapsed_time()
