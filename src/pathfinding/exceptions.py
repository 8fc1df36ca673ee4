"""
Custom exceptions for the pathfinding module.

Provides a hierarchy of exceptions for clear error handling
and debugging of graph construction and route search.
"""


class PathfindingError(Exception):
    """Base exception for all pathfinding module errors."""

    pass


class ValidationError(PathfindingError):
    """Base exception for input validation errors."""

    pass


class InvalidHopBudgetError(ValidationError):
    """Raised when a search is requested with a hop budget below one."""

    def __init__(self, max_hops: int) -> None:
        self.max_hops = max_hops
        message = f"Invalid hop budget: max_hops ({max_hops}) must be >= 1"
        super().__init__(message)


class GraphConstructionError(PathfindingError):
    """Base exception for contract violations while building a route graph."""

    pass


class UnknownAirportError(GraphConstructionError):
    """Raised when a route references an airport id missing from the airport set."""

    def __init__(self, airport_id: str, context: str = "airport data") -> None:
        self.airport_id = airport_id
        message = f"Airport id '{airport_id}' not found in {context}"
        super().__init__(message)
