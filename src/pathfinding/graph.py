"""
Directed weighted route graph.

Nodes are addressed by a dense integer index assigned during construction,
with a side mapping from external airport ids. The search loop only touches
integers; the string-keyed helpers exist for callers and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


class EdgeKind(Enum):
    """Kind of connection an edge represents."""

    SCHEDULED = "scheduled"
    """Long-haul connection backed by a route record (a flight)."""

    PROXIMITY = "proximity"
    """Short-haul ground transfer synthesized from geographic distance."""


@dataclass(frozen=True)
class Edge:
    """
    Directed edge weight and kind.

    Attributes:
        distance: Great-circle distance in kilometers.
        kind: SCHEDULED or PROXIMITY.
    """

    distance: float
    kind: EdgeKind

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError(f"distance must be >= 0, got {self.distance}")


@dataclass(frozen=True)
class RouteGraph:
    """
    Immutable adjacency storage for the hybrid route graph.

    Dense indices ``0 .. node_count - 1`` are the route nodes (ids that
    appear as a source or destination of a scheduled route). Indices from
    ``node_count`` onwards are proximity-only leaves: they can be reached
    through a PROXIMITY edge but have no outgoing edges of their own.

    Attributes:
        node_ids: External id for every dense index.
        index: External id -> dense index.
        adjacency: Outgoing edges per dense index, keyed by neighbour index.
        node_count: Number of route nodes.
    """

    node_ids: Tuple[str, ...]
    index: Mapping[str, int]
    adjacency: Tuple[Mapping[int, Edge], ...]
    node_count: int

    @classmethod
    def from_adjacency(
        cls,
        node_ids: Sequence[str],
        adjacency: Sequence[Dict[int, Edge]],
        node_count: int,
    ) -> "RouteGraph":
        """
        Freeze builder output into a read-only graph.

        Args:
            node_ids: External id per dense index.
            adjacency: Mutable adjacency dicts, one per dense index.
            node_count: How many leading indices are route nodes.

        Returns:
            RouteGraph whose mappings cannot be mutated.
        """
        if len(node_ids) != len(adjacency):
            raise ValueError(
                f"node_ids ({len(node_ids)}) and adjacency ({len(adjacency)}) "
                "must have the same length"
            )
        if not 0 <= node_count <= len(node_ids):
            raise ValueError(f"node_count out of range: {node_count}")

        return cls(
            node_ids=tuple(node_ids),
            index=MappingProxyType({node_id: i for i, node_id in enumerate(node_ids)}),
            adjacency=tuple(MappingProxyType(dict(edges)) for edges in adjacency),
            node_count=node_count,
        )

    @classmethod
    def empty(cls) -> "RouteGraph":
        return cls.from_adjacency([], [], 0)

    def __len__(self) -> int:
        return self.node_count

    @property
    def nodes(self) -> Tuple[str, ...]:
        """Route node ids, in the order they were first referenced."""
        return self.node_ids[: self.node_count]

    def has_node(self, node_id: str) -> bool:
        """Check if node_id is a route node (not merely a proximity leaf)."""
        idx = self.index.get(node_id)
        return idx is not None and idx < self.node_count

    def dense_id(self, node_id: str) -> Optional[int]:
        """Dense index for node_id, or None if the graph never saw it."""
        return self.index.get(node_id)

    def neighbors(self, node_id: str) -> Dict[str, Edge]:
        """Outgoing edges of node_id keyed by neighbour id (empty if unknown)."""
        idx = self.index.get(node_id)
        if idx is None:
            return {}
        return {self.node_ids[n]: edge for n, edge in self.adjacency[idx].items()}

    def edge(self, source_id: str, destination_id: str) -> Optional[Edge]:
        """Edge source_id -> destination_id, if present."""
        source = self.index.get(source_id)
        destination = self.index.get(destination_id)
        if source is None or destination is None:
            return None
        return self.adjacency[source].get(destination)

    def count_edges(self, kind: Optional[EdgeKind] = None) -> int:
        """Count edges, optionally only those of one kind."""
        if kind is None:
            return sum(len(edges) for edges in self.adjacency)
        return sum(
            1 for edges in self.adjacency for edge in edges.values() if edge.kind is kind
        )

    def translate(self, path: Sequence[int]) -> List[str]:
        """Map a sequence of dense indices back to external ids."""
        return [self.node_ids[i] for i in path]
