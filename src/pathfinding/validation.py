"""
Input validation for the pathfinding module.

Provides validation functions that check inputs before graph construction
and search, ensuring fail-fast behavior with clear error messages.
"""

from typing import Iterable, Mapping

from .exceptions import InvalidHopBudgetError, UnknownAirportError


def validate_hop_budget(max_hops: int) -> None:
    """
    Validate the hop budget of a search.

    Args:
        max_hops: Maximum number of hops in an itinerary.

    Raises:
        InvalidHopBudgetError: If max_hops < 1.
    """
    if max_hops < 1:
        raise InvalidHopBudgetError(max_hops)


def validate_route_endpoints(
    node_ids: Iterable[str],
    airports_by_id: Mapping[str, object],
    context: str = "airport data",
) -> None:
    """
    Validate that every route node resolves to a known airport.

    Routes referencing unknown ids must be dropped by the data loader;
    reaching the graph builder with one is a programming error.

    Args:
        node_ids: Distinct ids referenced by the scheduled routes.
        airports_by_id: Known airports keyed by id.
        context: Description for error message.

    Raises:
        UnknownAirportError: On the first id that does not resolve.
    """
    for node_id in node_ids:
        if node_id not in airports_by_id:
            raise UnknownAirportError(node_id, context)
