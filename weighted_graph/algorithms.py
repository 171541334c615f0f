import heapq
import itertools
import logging
from typing import Dict, Hashable, List, Optional, Tuple

from .errors import VertexNotFoundError
from .graph import Edge, WeightedGraph

logger = logging.getLogger(__name__)


def shortest_path(
    graph: WeightedGraph,
    source: Hashable,
    destination: Hashable
) -> List[Edge]:
    """
    Finds the minimum-weight path from source to destination with
    Dijkstra's algorithm, expanding one settled frontier vertex at a time.

    Args:
        graph: The graph to search. Edge weights must be non-negative.
        source: The starting vertex.
        destination: The vertex to reach.

    Returns:
        The edges of the path in source -> destination order, each carrying
        its own stored weight. Empty if destination cannot be reached or if
        source is destination.

    Raises:
        VertexNotFoundError: If source or destination is not in the graph.
    """
    for vertex in (source, destination):
        if vertex not in graph:
            raise VertexNotFoundError(f"Vertex {vertex} does not exist.")

    # settled vertex -> predecessor it was reached from; first settle wins
    predecessors: Dict[Hashable, Optional[Hashable]] = {source: None}
    # (cumulative weight, insertion order, from vertex, to vertex)
    candidates: List[Tuple[int, int, Hashable, Hashable]] = []
    order = itertools.count()

    frontier = source
    reached = 0
    while frontier != destination:
        for neighbor in graph.neighbors(frontier):
            if neighbor not in predecessors:
                weight = graph.get_edge_weight(frontier, neighbor)
                heapq.heappush(candidates, (reached + weight, next(order), frontier, neighbor))

        while candidates and candidates[0][3] in predecessors:
            heapq.heappop(candidates)
        if not candidates:
            logger.debug("No path from %r to %r", source, destination)
            return []

        reached, _, via, frontier = heapq.heappop(candidates)
        predecessors[frontier] = via

    path: List[Edge] = []
    current = destination
    while current != source:
        previous = predecessors[current]
        path.append(Edge(previous, current, graph.get_edge_weight(previous, current)))
        current = previous
    path.reverse()

    logger.debug("Shortest path from %r to %r has %d edges, weight %d",
                 source, destination, len(path), reached)
    return path
