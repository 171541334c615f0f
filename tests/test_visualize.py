import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx
import pytest
from weighted_graph.graph import WeightedGraph
from weighted_graph.visualize import to_networkx, draw


@pytest.fixture
def sample_graph():
    def build(directed):
        g = WeightedGraph(directed=directed)
        for vertex in "ABCD":
            g.add_vertex(vertex)
        g.add_edge("A", "B", 1)
        g.add_edge("B", "C", 2)
        g.add_edge("A", "C", 5)
        g.add_edge("C", "D", 1)
        return g
    return build


class TestToNetworkx:
    def test_directed(self, sample_graph):
        G = to_networkx(sample_graph(True))
        assert isinstance(G, nx.DiGraph)
        assert set(G.nodes()) == {"A", "B", "C", "D"}
        assert G.number_of_edges() == 4
        assert G["A"]["C"]["weight"] == 5
        assert not G.has_edge("C", "A")
        assert nx.shortest_path_length(G, "A", "D", weight="weight") == 4

    def test_undirected(self, sample_graph):
        G = to_networkx(sample_graph(False))
        assert not G.is_directed()
        assert G.number_of_edges() == 4
        assert G["D"]["C"]["weight"] == 1

    def test_isolated_vertices_kept(self):
        g = WeightedGraph()
        g.add_vertex("lonely")
        G = to_networkx(g)
        assert list(G.nodes()) == ["lonely"]


class TestDraw:
    def test_draw_on_given_axes(self, sample_graph):
        g = sample_graph(True)
        fig, ax = plt.subplots()
        result = draw(g, ax=ax, highlight=g.shortest_path_between("A", "D"))
        assert result is ax
        assert ax.get_title() == "Directed weighted graph"
        plt.close(fig)

    def test_draw_creates_axes(self, sample_graph):
        ax = draw(sample_graph(False))
        assert ax.get_title() == "Weighted graph"
        plt.close(ax.figure)
