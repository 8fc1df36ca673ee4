from dataclasses import dataclass
from typing import Tuple

from .graph import Edge, EdgeKind


@dataclass(frozen=True, slots=True)
class PathState:
    """
    Represents a candidate partial path in the search space.

    Each PathState tracks:
    - Current node (dense index)
    - Distance accumulated from the source
    - Ordered nodes visited so far, including the source
    - Hop count (grows only on SCHEDULED edges, the source counts as one)
    - Kind of the edge that led here

    States are pushed once and never updated; a cheaper state for the same
    node is pushed as a new entry and the stale one is skipped on pop.
    """

    node: int
    distance: float
    path: Tuple[int, ...]
    hop_count: int
    last_kind: EdgeKind

    @classmethod
    def initial(cls, source: int) -> "PathState":
        """
        Start state for a search.

        last_kind is SCHEDULED so the first move may be a PROXIMITY edge.
        """
        return cls(
            node=source,
            distance=0.0,
            path=(source,),
            hop_count=1,
            last_kind=EdgeKind.SCHEDULED,
        )

    def hops_after(self, edge: Edge) -> int:
        """Hop count after traversing edge."""
        if edge.kind is EdgeKind.SCHEDULED:
            return self.hop_count + 1
        return self.hop_count

    def can_traverse(self, edge: Edge) -> bool:
        """Two PROXIMITY edges may never be chained back to back."""
        return not (
            self.last_kind is EdgeKind.PROXIMITY and edge.kind is EdgeKind.PROXIMITY
        )

    def extend(self, neighbor: int, edge: Edge) -> "PathState":
        """New state after moving to neighbor along edge."""
        return PathState(
            node=neighbor,
            distance=self.distance + edge.distance,
            path=self.path + (neighbor,),
            hop_count=self.hops_after(edge),
            last_kind=edge.kind,
        )
