'''
Kruskal's algorithm over a list of growing partial trees.

Every vertex starts as its own partial tree holding a min-heap of the arcs
that leave it. The front tree is repeatedly popped, its cheapest arc into
some other tree is found, the other tree is pulled out of the list and
folded into it, and the grown tree goes back on the end. The loop stops
when one tree remains; the arcs used for the merges form the MST.
'''
import logging

from typing import Iterator, Optional

from partial_mst.graph import Graph
from partial_mst.structures import Arc, PartialTree, Vertex

logger = logging.getLogger(__name__)


class EmptyListError(IndexError):
    pass


class _Node:
    __slots__ = ('tree', 'next')

    def __init__(self, tree: PartialTree) -> None:
        self.tree = tree
        self.next: Optional['_Node'] = None


class PartialTreeList:
    '''Circular singly-linked list of partial trees.

    Only the last node is referenced; the front is ``rear.next``.
    '''

    def __init__(self) -> None:
        self.rear: Optional[_Node] = None
        self._size = 0
        # bumped on every mutation so in-flight iterators can notice
        self._version = 0

    def append(self, tree: PartialTree) -> None:
        node = _Node(tree)
        if self.rear is None:
            node.next = node
        else:
            node.next = self.rear.next
            self.rear.next = node
        self.rear = node
        self._size += 1
        self._version += 1

    def pop_front(self) -> PartialTree:
        if self.rear is None:
            raise EmptyListError('pop from empty partial tree list')

        front = self.rear.next
        self._unlink(self.rear, front)
        return front.tree

    def remove_tree_containing(self, vertex: Vertex) -> Optional[PartialTree]:
        '''Remove and return the tree whose root is at the end of vertex's parent chain.

        The scan starts at the front. Returns None when no tree in the list
        contains the vertex.
        '''
        if self.rear is None:
            raise EmptyListError('remove from empty partial tree list')

        prev = self.rear
        for _ in range(self._size):
            node = prev.next
            if node.tree.contains(vertex):
                self._unlink(prev, node)
                return node.tree
            prev = node

        return None

    def _unlink(self, prev: _Node, node: _Node) -> None:
        if node is prev:
            # only node in the list
            self.rear = None
        else:
            prev.next = node.next
            if node is self.rear:
                self.rear = prev
        node.next = None
        self._size -= 1
        self._version += 1

    def size(self) -> int:
        return self._size

    __len__ = size

    def __iter__(self) -> Iterator[PartialTree]:
        # the pass covers the trees present when iter() is called
        front = self.rear.next if self.rear is not None else None
        return self._walk(front, self._size, self._version)

    def _walk(self, node: Optional[_Node], count: int, version: int) -> Iterator[PartialTree]:
        for _ in range(count):
            if self._version != version:
                raise RuntimeError('partial tree list changed during iteration')
            yield node.tree
            node = node.next

    def __repr__(self):
        return f'PartialTreeList({list(self)!r})'


def initialize(graph: Graph) -> PartialTreeList:
    ptlist = PartialTreeList()

    for vertex in graph.vertices:
        tree = PartialTree(vertex)
        for (neighbor, weight) in vertex.neighbors:
            tree.arcs.insert(Arc(vertex, neighbor, weight))
        ptlist.append(tree)

    logger.debug('Initialized %d partial trees', len(ptlist))
    return ptlist


def execute(ptlist: PartialTreeList) -> list[Arc]:
    mst: list[Arc] = []

    while ptlist.size() > 1:
        tree = ptlist.pop_front()

        arc = tree.arcs.delete_min()
        while arc is not None:
            other = ptlist.remove_tree_containing(arc.v1)
            if other is None:
                other = ptlist.remove_tree_containing(arc.v2)

            if other is not None:
                logger.debug('Merging %s into %s via %s', other, tree, arc)
                tree.merge(other)
                mst.append(arc)
                ptlist.append(tree)
                break

            # both ends already inside tree
            arc = tree.arcs.delete_min()
        else:
            logger.warning('Discarding %s: no arc reaches another tree '
                           '(%d trees left, graph is likely disconnected)', tree, ptlist.size())

    return mst
