"""
Constrained Dijkstra search over the hybrid route graph.

Constraints:
- Hop budget: an itinerary may touch at most max_hops airports reached by
  SCHEDULED edges (the source counts as the first). PROXIMITY edges do not
  consume budget. The destination is always accepted once it improves.
- Two PROXIMITY edges may never be traversed back to back.

Queue handling:
- Binary heap with lazy deletion: entries for already finalized nodes are
  skipped when popped instead of being removed eagerly.
- The queue is drained completely even after the destination has been
  popped. With non-negative weights the first destination pop is already
  optimal; draining keeps the result correct without relying on that.
"""

import heapq
import itertools
import math
from typing import Dict, List, Set, Tuple

from .graph import RouteGraph
from .path_state import PathState
from .validation import validate_hop_budget

DEFAULT_MAX_HOPS = 5

# (distance, insertion order, state); insertion order only keeps the heap
# from comparing PathState objects.
QueueEntry = Tuple[float, int, PathState]


def find_shortest_path(
    graph: RouteGraph,
    source_id: str,
    destination_id: str,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> Tuple[Tuple[str, ...], float]:
    """
    Shortest path between two nodes under hop and mode constraints.

    Args:
        graph: Read-only route graph.
        source_id: External id of the start node.
        destination_id: External id of the target node.
        max_hops: Hop budget (see module docstring).

    Returns:
        (hops, distance). hops includes both endpoints; ((), inf) when the
        destination is unknown or unreachable.

    Raises:
        InvalidHopBudgetError: If max_hops < 1.
    """
    validate_hop_budget(max_hops)

    if source_id == destination_id:
        return (source_id,), 0.0

    source = graph.dense_id(source_id)
    destination = graph.dense_id(destination_id)
    if source is None or destination is None:
        return (), math.inf

    best_path, best_distance = _run_search(graph, source, destination, max_hops)
    if not best_path:
        return (), math.inf
    return tuple(graph.translate(best_path)), best_distance


def _run_search(
    graph: RouteGraph,
    source: int,
    destination: int,
    max_hops: int,
) -> Tuple[Tuple[int, ...], float]:
    finalized: Set[int] = set()
    distances: Dict[int, float] = {source: 0.0}
    counter = itertools.count()

    queue: List[QueueEntry] = []
    heapq.heappush(queue, (0.0, next(counter), PathState.initial(source)))

    best_path: Tuple[int, ...] = ()
    best_distance = math.inf

    while queue:
        distance, _, state = heapq.heappop(queue)

        if state.node in finalized or distance > best_distance:
            continue

        if state.node == destination:
            if distance < best_distance:
                best_path = state.path
                best_distance = distance
            continue

        finalized.add(state.node)

        for neighbor, edge in graph.adjacency[state.node].items():
            if neighbor in finalized or not state.can_traverse(edge):
                continue

            candidate = distance + edge.distance
            if candidate >= distances.get(neighbor, math.inf):
                continue

            if state.hops_after(edge) >= max_hops and neighbor != destination:
                continue

            distances[neighbor] = candidate
            heapq.heappush(queue, (candidate, next(counter), state.extend(neighbor, edge)))

    return best_path, best_distance
