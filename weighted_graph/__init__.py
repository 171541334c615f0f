from .errors import (
    GraphError, DuplicateVertexError, VertexNotFoundError,
    SelfLoopError, EdgeNotFoundError, GraphFormatError
)
from .graph import WeightedGraph, Edge, NO_EDGE
from .algorithms import shortest_path
from .loader import load_graph, load_graph_file

__all__ = [
    "WeightedGraph", "Edge", "NO_EDGE", "shortest_path",
    "load_graph", "load_graph_file",
    "GraphError", "DuplicateVertexError", "VertexNotFoundError",
    "SelfLoopError", "EdgeNotFoundError", "GraphFormatError"
]
