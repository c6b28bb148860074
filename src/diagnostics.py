"""
Diagnostics Module - Time and memory measurement around a solve.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

import psutil

logger = logging.getLogger(__name__)


def memory_usage_kb() -> int:
    """
    Resident memory of the current process.

    Returns:
        RSS in kilobytes
    """
    return psutil.Process().memory_info().rss // 1024


@dataclass
class Measurement:
    """
    Resource usage captured by measure().

    Attributes:
        label: Name of the measured block
        memory_before_kb: RSS on entry
        memory_after_kb: RSS on exit
        elapsed_ms: Wall time spent in the block
    """
    label: str
    memory_before_kb: int = 0
    memory_after_kb: int = 0
    elapsed_ms: float = 0.0

    @property
    def memory_delta_kb(self) -> int:
        """Change in RSS across the block."""
        return self.memory_after_kb - self.memory_before_kb


@contextmanager
def measure(label: str) -> Iterator[Measurement]:
    """
    Measure wall time and memory of a block.

    Example:
        with measure("bfs") as m:
            solution = strategy.solve(context)
        print(m.elapsed_ms, m.memory_delta_kb)
    """
    measurement = Measurement(label=label, memory_before_kb=memory_usage_kb())
    logger.info(f"{label} - Before solving - Used memory: {measurement.memory_before_kb} KB")
    start = time.perf_counter()
    try:
        yield measurement
    finally:
        measurement.elapsed_ms = (time.perf_counter() - start) * 1000
        measurement.memory_after_kb = memory_usage_kb()
        logger.info(
            f"{label} - After solving - Used memory: {measurement.memory_after_kb} KB "
            f"({measurement.memory_delta_kb:+d} KB), time taken: {measurement.elapsed_ms:.2f} ms"
        )
