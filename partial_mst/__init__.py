from partial_mst.graph import Graph, GraphFormatError
from partial_mst.partial_tree_list import EmptyListError, PartialTreeList, execute, initialize
from partial_mst.structures import Arc, MinHeap, PartialTree, Vertex

__all__ = [
    'Arc',
    'EmptyListError',
    'Graph',
    'GraphFormatError',
    'MinHeap',
    'PartialTree',
    'PartialTreeList',
    'Vertex',
    'execute',
    'initialize',
]
