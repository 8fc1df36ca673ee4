"""
Route result schemas.

Defines the output contract for the path finder and the display form
handed to the HTTP layer.
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable outcome of a path search.

    Unreachable pairs are an ordinary value, not an error: empty hops
    and infinite distance.

    Attributes:
        hops: Airport ids from source to destination, inclusive.
        distance: Total distance in kilometers.
    """

    hops: Tuple[str, ...] = ()
    distance: float = math.inf

    @property
    def is_found(self) -> bool:
        """True when a path exists."""
        return bool(self.hops) and math.isfinite(self.distance)

    @property
    def num_hops(self) -> int:
        """Number of airports on the path (0 if unreachable)."""
        return len(self.hops)

    @property
    def source(self) -> str:
        """First airport id."""
        if not self.hops:
            raise ValueError("Route has no hops")
        return self.hops[0]

    @property
    def destination(self) -> str:
        """Last airport id."""
        if not self.hops:
            raise ValueError("Route has no hops")
        return self.hops[-1]

    @classmethod
    def unreachable(cls) -> "RouteResult":
        return cls()


@dataclass(frozen=True)
class RouteSummary:
    """
    Display form of a found route.

    Attributes:
        source: Requested source code, upper-cased.
        destination: Requested destination code, upper-cased.
        distance: Total distance in kilometers.
        hops: Display code of every airport on the path
            (IATA, else ICAO, else raw id).
    """

    source: str
    destination: str
    distance: float
    hops: Tuple[str, ...]
