import random

from typing import Any, Callable

import networkx as nx

from partial_mst.graph import Graph
from partial_mst.graphgen import write_graph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rand = random.Random(seed)
    return lambda _a, _b: rand.randint(low, high)


def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    # Convert edge names to index
    edges = [(nodename_to_idx(u), nodename_to_idx(v), decide_weight(u, v)) for (u, v) in g.edges]
    write_graph(fname, g.number_of_nodes(), edges, binary=binary)


def stored_weight(g: nx.classes.graph.Graph, weight: str='weight') -> Callable[[Any, Any], int]:
    return lambda u, v: g.edges[u, v][weight]


def set_weights(g: nx.classes.graph.Graph, decide_weight: Callable[[Any, Any], int]) -> nx.classes.graph.Graph:
    for (u, v) in g.edges:
        g.edges[u, v]['weight'] = decide_weight(u, v)
    return g


def from_networkx(g: nx.classes.graph.Graph, weight: str='weight') -> Graph:
    '''Copy a weighted networkx graph into a Graph, keeping node names.'''
    graph = Graph()
    for node in g.nodes:
        graph.add_vertex(node)
    for (u, v, w) in g.edges(data=weight, default=1):
        graph.add_edge(u, v, w)
    return graph


def to_networkx(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(v.name for v in graph.vertices)
    for (u, v, w) in graph.edges:
        # keep the lightest of any parallel edges
        if g.has_edge(u, v) and g.edges[u, v]['weight'] <= w:
            continue
        g.add_edge(u, v, weight=w)
    return g


def mst_weight(g: nx.classes.graph.Graph, weight: str='weight') -> int:
    return int(nx.minimum_spanning_tree(g, weight=weight).size(weight=weight))
