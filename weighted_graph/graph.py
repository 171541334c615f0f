import logging
from collections import namedtuple
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Sequence, TypeVar

from .errors import (
    DuplicateVertexError,
    EdgeNotFoundError,
    SelfLoopError,
    VertexNotFoundError,
)

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)

# Returned by get_edge_weight and path_length when there is no edge or path.
NO_EDGE = -1

# A weighted hop from source to destination.
Edge = namedtuple("Edge", ["source", "destination", "weight"])


class WeightedGraph(Generic[V]):
    """
    A weighted graph stored as an adjacency mapping of
    vertex -> {neighbor: weight}.

    The graph is either directed or undirected for its whole lifetime. In an
    undirected graph every edge is stored in both directions with the same
    weight. Self-loops and parallel edges are not supported.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: Dict[V, Dict[V, int]] = {}  # vertex -> {neighbor: weight}

    @property
    def directed(self) -> bool:
        """Whether edges are one-directional."""
        return self._directed

    def get_vertices(self) -> List[V]:
        """Returns a snapshot list of all vertices, in no particular order."""
        return list(self._adjacency)

    def vertex_exists(self, vertex: V) -> bool:
        return vertex in self._adjacency

    def edge_exists(self, source: V, destination: V) -> bool:
        """
        Checks whether an edge from source to destination exists.

        Missing vertices are not an error; the edge simply does not exist.
        """
        if not (self.vertex_exists(source) and self.vertex_exists(destination)):
            return False
        return destination in self._adjacency[source]

    def get_edge_weight(self, source: V, destination: V) -> int:
        """
        Gets the weight of the edge from source to destination.

        Args:
            source: The starting vertex.
            destination: The ending vertex.

        Returns:
            The stored weight, or NO_EDGE (-1) if the edge or either vertex
            does not exist. A stored weight of -1 is indistinguishable from a
            missing edge; use edge_exists to tell them apart.
        """
        if self.edge_exists(source, destination):
            return self._adjacency[source][destination]
        return NO_EDGE

    def add_vertex(self, vertex: V) -> None:
        """
        Adds a vertex with no edges.

        Raises:
            DuplicateVertexError: If the vertex is None or already exists.
        """
        if vertex is None:
            raise DuplicateVertexError("Vertex None is not allowed.")
        if self.vertex_exists(vertex):
            raise DuplicateVertexError(f"Vertex {vertex} already exists.")
        self._adjacency[vertex] = {}

    def remove_vertex(self, vertex: V) -> None:
        """
        Removes a vertex together with every edge leading to or from it.

        Incoming edges are purged from every other vertex regardless of
        directedness, so no edge is left pointing at the removed vertex.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if not self.vertex_exists(vertex):
            raise VertexNotFoundError(f"Vertex {vertex} does not exist.")
        del self._adjacency[vertex]
        for neighbors in self._adjacency.values():
            neighbors.pop(vertex, None)
        logger.debug("Removed vertex %r", vertex)

    def add_edge(self, source: V, destination: V, weight: int) -> None:
        """
        Adds an edge from source to destination, or overwrites the weight of
        an existing one. In an undirected graph the reverse edge is set too.

        Args:
            source: The starting vertex.
            destination: The ending vertex.
            weight: The weight of the edge.

        Raises:
            VertexNotFoundError: If either vertex does not exist.
            SelfLoopError: If source and destination are the same vertex.
        """
        for vertex in (source, destination):
            if not self.vertex_exists(vertex):
                raise VertexNotFoundError(f"Vertex {vertex} does not exist.")
        if source == destination:
            raise SelfLoopError(f"Edge from {source} to itself is not allowed.")

        self._adjacency[source][destination] = weight
        if not self._directed:
            self._adjacency[destination][source] = weight

    def remove_edge(self, source: V, destination: V) -> None:
        """
        Removes the edge from source to destination, and its mirror in an
        undirected graph.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        if not self.edge_exists(source, destination):
            raise EdgeNotFoundError(f"Edge {source} -> {destination} does not exist.")
        del self._adjacency[source][destination]
        if not self._directed:
            del self._adjacency[destination][source]

    def path_length(self, path: Sequence[V]) -> int:
        """
        Sums the edge weights along consecutive vertices of path.

        Returns:
            The total weight, or NO_EDGE (-1) if path has fewer than two
            vertices or any consecutive pair is not connected.
        """
        if len(path) < 2:
            return NO_EDGE
        total = 0
        for source, destination in zip(path, path[1:]):
            if not self.edge_exists(source, destination):
                return NO_EDGE
            total += self._adjacency[source][destination]
        return total

    def shortest_path_between(self, source: V, destination: V) -> List[Edge]:
        """
        Finds the minimum-weight path from source to destination.

        Weights are assumed to be non-negative.

        Returns:
            The edges of the path in source -> destination order. Empty if
            destination is unreachable or is the source itself; use
            distance_between to tell those apart.

        Raises:
            VertexNotFoundError: If either vertex does not exist.
        """
        from .algorithms import shortest_path

        return shortest_path(self, source, destination)

    def distance_between(self, source: V, destination: V) -> Optional[int]:
        """
        Returns the total weight of the shortest path, 0 when source is
        destination, or None when destination is unreachable.

        Raises:
            VertexNotFoundError: If either vertex does not exist.
        """
        if source == destination:
            if not self.vertex_exists(source):
                raise VertexNotFoundError(f"Vertex {source} does not exist.")
            return 0
        path = self.shortest_path_between(source, destination)
        if not path:
            return None
        return sum(edge.weight for edge in path)

    def neighbors(self, vertex: V) -> Iterator[V]:
        """
        Returns an iterator over the vertices reachable by one outgoing edge.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if not self.vertex_exists(vertex):
            raise VertexNotFoundError(f"Vertex {vertex} does not exist.")
        return iter(self._adjacency[vertex])

    def get_edges(self) -> Iterator[Edge]:
        """Yields every edge; an undirected edge is yielded once."""
        seen = set()
        for source, neighbors in self._adjacency.items():
            for destination, weight in neighbors.items():
                if not self._directed:
                    if (destination, source) in seen:
                        continue
                    seen.add((source, destination))
                yield Edge(source, destination, weight)

    def get_vertex_count(self) -> int:
        return len(self._adjacency)

    def get_edge_count(self) -> int:
        """Returns the number of edges; an undirected edge counts once."""
        count = sum(len(neighbors) for neighbors in self._adjacency.values())
        return count if self._directed else count // 2

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return f"directed: {self._directed}\n{self._adjacency}"
