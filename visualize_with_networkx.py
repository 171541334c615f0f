import logging
import os
import sys

import matplotlib.pyplot as plt

from weighted_graph import load_graph_file
from weighted_graph.visualize import draw

logger = logging.getLogger("visualize_with_networkx")

# Usage: python visualize_with_networkx.py [graph.csv] [source destination]
csv_path = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("WEIGHTED_GRAPH_CSV")
directed = os.environ.get("WEIGHTED_GRAPH_DIRECTED") == "1"
logging.basicConfig(level=os.environ.get("WEIGHTED_GRAPH_LOG_LEVEL", "INFO").upper())

if not csv_path:
    sys.exit("Pass a graph file or set WEIGHTED_GRAPH_CSV.")

graph = load_graph_file(csv_path, directed=directed)
logger.info("Loaded %s with %d vertices and %d edges",
            csv_path, graph.get_vertex_count(), graph.get_edge_count())

path = []
if len(sys.argv) > 3:
    source, destination = sys.argv[2], sys.argv[3]
    path = graph.shortest_path_between(source, destination)
    distance = graph.distance_between(source, destination)
    if distance is None:
        logger.info("No path from %s to %s", source, destination)
    else:
        hops = " -> ".join([source] + [edge.destination for edge in path])
        logger.info("Shortest path %s (weight %d)", hops, distance)

draw(graph, highlight=path)
plt.tight_layout()
if os.environ.get("WEIGHTED_GRAPH_SHOW_PLOT", "1") != "0":
    plt.show()
