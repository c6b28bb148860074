"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .breadth_first import BreadthFirstStrategy
from .depth_limited import DepthLimitedStrategy
from .hybrid import HybridStrategy

__all__ = [
    "BreadthFirstStrategy",
    "DepthLimitedStrategy",
    "HybridStrategy",
]
