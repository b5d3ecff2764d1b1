"""Board consumers: random playouts and position counting."""

from .playout import PlayoutRunner, PlayoutStats, run_playouts
from .perft import DepthCount, PositionCounter, count_positions

__all__ = [
    "PlayoutRunner",
    "PlayoutStats",
    "run_playouts",
    "DepthCount",
    "PositionCounter",
    "count_positions",
]
