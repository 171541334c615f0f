from typing import Iterable, Optional, Union

import matplotlib.pyplot as plt
import networkx as nx

from .graph import Edge, WeightedGraph


def to_networkx(graph: WeightedGraph) -> Union[nx.Graph, nx.DiGraph]:
    """
    Converts a WeightedGraph into a networkx graph of the same directedness.
    Edge weights are stored in the "weight" attribute.
    """
    G = nx.DiGraph() if graph.directed else nx.Graph()
    G.add_nodes_from(graph.get_vertices())
    for edge in graph.get_edges():
        G.add_edge(edge.source, edge.destination, weight=edge.weight)
    return G


def draw(
    graph: WeightedGraph,
    ax: Optional[plt.Axes] = None,
    highlight: Optional[Iterable[Edge]] = None,
) -> plt.Axes:
    """
    Draws the graph with a circular layout and labelled edge weights.

    Args:
        graph: The graph to draw.
        ax: Axes to draw on; a new figure is created if omitted.
        highlight: Edges to emphasise, e.g. a shortest_path_between result.

    Returns:
        The axes the graph was drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    G = to_networkx(graph)
    highlighted = {(edge.source, edge.destination) for edge in highlight or ()}
    if not graph.directed:
        highlighted |= {(v, u) for u, v in highlighted}
    edge_colors = ["crimson" if (u, v) in highlighted else "gray" for u, v in G.edges()]

    pos = nx.circular_layout(G)
    nx.draw(
        G,
        pos,
        ax=ax,
        with_labels=True,
        node_color="lightblue",
        edge_color=edge_colors,
        node_size=800,
        font_size=10,
        font_weight="bold",
    )
    nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"), ax=ax)
    ax.set_title("Directed weighted graph" if graph.directed else "Weighted graph")
    return ax
