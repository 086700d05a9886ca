'''Shared graph fixtures for the partial tree MST tests.'''

import pytest

from partial_mst.graph import Graph
from partial_mst.graphgen import generate_edges
from partial_mst.structures import PartialTree, Vertex


@pytest.fixture
def abcd_graph():
    g = Graph()
    for name in 'ABCD':
        g.add_vertex(name)
    g.add_edge('A', 'B', 1)
    g.add_edge('B', 'C', 2)
    g.add_edge('C', 'D', 3)
    g.add_edge('A', 'D', 4)
    g.add_edge('A', 'C', 5)
    return g


@pytest.fixture
def trees():
    return [PartialTree(Vertex(i)) for i in range(4)]


@pytest.fixture
def random_graph():
    def make(nvertices, density=0.4, seed=0, max_weight=50):
        edges = generate_edges(nvertices, density=density, min_weight=1, max_weight=max_weight, seed=seed)
        return Graph.from_edges(nvertices, edges)
    return make
