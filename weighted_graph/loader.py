"""
Builds a WeightedGraph from the plain-text graph file format:

    <number of vertices>
    <vertex>
    ...
    <number of edges>
    <source>,<destination>,<weight>
    ...

Vertices are added first, then edges, in file order. Any error raised while
building the graph is propagated unchanged; nothing is rolled back.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from .errors import GraphFormatError
from .graph import WeightedGraph

logger = logging.getLogger(__name__)


def _numbered(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    for line_number, line in enumerate(lines, start=1):
        yield line_number, line.strip()


def _next_line(lines: Iterator[Tuple[int, str]], what: str) -> Tuple[int, str]:
    try:
        return next(lines)
    except StopIteration:
        raise GraphFormatError(f"unexpected end of input, expected {what}") from None


def _read_count(lines: Iterator[Tuple[int, str]], what: str) -> int:
    line_number, text = _next_line(lines, f"the number of {what}")
    try:
        count = int(text)
    except ValueError:
        raise GraphFormatError(f"expected the number of {what}, got {text!r}", line_number) from None
    if count < 0:
        raise GraphFormatError(f"number of {what} cannot be negative", line_number)
    return count


def load_graph(lines: Iterable[str], directed: bool = False) -> WeightedGraph[str]:
    """
    Reads a graph from an iterable of text lines.

    Args:
        lines: The lines of a graph file, with or without line endings.
        directed: Whether the resulting graph is directed.

    Returns:
        The populated graph, with string vertices and integer weights.

    Raises:
        GraphFormatError: If the input does not follow the format.
        DuplicateVertexError, VertexNotFoundError, SelfLoopError: If the
            declared vertices or edges are rejected by the graph.
    """
    numbered = _numbered(lines)
    graph: WeightedGraph[str] = WeightedGraph(directed=directed)

    vertex_count = _read_count(numbered, "vertices")
    for _ in range(vertex_count):
        _, vertex = _next_line(numbered, "a vertex")
        graph.add_vertex(vertex)

    edge_count = _read_count(numbered, "edges")
    for _ in range(edge_count):
        line_number, text = _next_line(numbered, "an edge")
        fields = next(csv.reader([text]), [])
        if len(fields) != 3:
            raise GraphFormatError(
                f"expected source,destination,weight, got {text!r}", line_number)
        source, destination, weight = (field.strip() for field in fields)
        try:
            weight_value = int(weight)
        except ValueError:
            raise GraphFormatError(f"edge weight {weight!r} is not an integer", line_number) from None
        graph.add_edge(source, destination, weight_value)

    for line_number, text in numbered:
        if text:
            raise GraphFormatError(f"unexpected trailing content {text!r}", line_number)

    logger.debug("Loaded graph with %d vertices and %d edges (directed=%s)",
                 vertex_count, edge_count, directed)
    return graph


def load_graph_file(path: Union[str, Path], directed: bool = False) -> WeightedGraph[str]:
    """Reads a graph from a utf-8 file. See load_graph."""
    logger.debug("Loading graph from %s", path)
    with open(path, newline="", encoding="utf-8") as f:
        return load_graph(f, directed=directed)
