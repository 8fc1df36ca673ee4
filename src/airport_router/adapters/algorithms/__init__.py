"""
Algorithm adapters for airport routing.
"""

from src.airport_router.adapters.algorithms.dijkstra_adapter import (
    DijkstraPathFinder,
)

__all__ = [
    "DijkstraPathFinder",
]
