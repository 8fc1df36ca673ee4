"""
Graph Repository port interface.

Defines the caching protocol for the routing context (airport index
plus route graph).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.airport_router.adapters.repositories.route_graph_repo import (
        RoutingContext,
    )


class GraphNotInitializedError(Exception):
    """Raised when the routing context cannot be built on first access."""

    pass


@runtime_checkable
class RoutingContextCache(Protocol):
    """
    Protocol for routing context caching.

    The context is built once and read by every query; it is never
    mutated in place. All implementations must be thread-safe.
    """

    def get(self) -> Optional[RoutingContext]:
        """
        Get cached context or None if miss.
        """
        ...

    def set(self, context: RoutingContext) -> None:
        """
        Store context in cache.
        """
        ...

    def invalidate(self) -> None:
        """
        Clear the cached context, forcing a rebuild on next access.
        """
        ...
