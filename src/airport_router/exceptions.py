"""
Custom exceptions for the airport_router module.

The core returns None / unreachable results instead of raising; these
exceptions are raised by the service layer so consumers (the HTTP API)
can map each outcome to a response.
"""


class RoutingError(Exception):
    """Base exception for all route query errors."""
    pass


class AirportNotFoundError(RoutingError):
    """Raised when a code does not resolve to a known airport."""
    def __init__(self, code: str):
        self.code = code
        self.message = f"No airport found for code '{code}'"
        super().__init__(self.message)


class RouteNotFoundError(RoutingError):
    """Raised when no path exists between two airports under the constraints."""
    def __init__(self, source: str, destination: str, max_hops: int):
        self.source = source
        self.destination = destination
        self.max_hops = max_hops
        self.message = (
            f"Could not find a route from '{source}' to '{destination}' "
            f"within {max_hops} hops"
        )
        super().__init__(self.message)
