import heapq
import itertools

from operator import attrgetter
from typing import Any, Callable, Hashable, Optional


class Vertex:
    def __init__(self, name: Hashable) -> None:
        self.name = name
        self.parent = self
        # (neighbor, weight) pairs, one per incident edge
        self.neighbors: list[tuple['Vertex', int]] = []

    def is_root(self) -> bool:
        return self.parent is self

    def find_root(self) -> 'Vertex':
        v = self
        while v.parent is not v:
            # path halving
            v.parent = v.parent.parent
            v = v.parent
        return v

    def __repr__(self):
        return f'Vertex({self.name!r})'

    __str__ = __repr__


class Arc:
    __slots__ = ('v1', 'v2', 'weight')

    def __init__(self, v1: Vertex, v2: Vertex, weight: int) -> None:
        object.__setattr__(self, 'v1', v1)
        object.__setattr__(self, 'v2', v2)
        object.__setattr__(self, 'weight', weight)

    def __setattr__(self, name, value):
        raise AttributeError('Arc is immutable')

    def endpoints(self) -> frozenset:
        return frozenset((self.v1.name, self.v2.name))

    def __lt__(self, other: 'Arc') -> bool:
        return self.weight < other.weight

    def __repr__(self):
        return f'({self.v1.name}, {self.v2.name}, {self.weight})'

    __str__ = __repr__


class MinHeap:
    '''Priority queue ordered by ``key(item)``.

    Items with equal keys come out in the order they were inserted.
    '''

    def __init__(self, key: Callable[[Any], Any] = lambda item: item) -> None:
        self.key = key
        self._items: list[tuple[Any, int, Any]] = []
        self._counter = itertools.count()

    def insert(self, item) -> None:
        heapq.heappush(self._items, (self.key(item), next(self._counter), item))

    def delete_min(self) -> Optional[Any]:
        if not self._items:
            return None
        return heapq.heappop(self._items)[2]

    def merge(self, other: 'MinHeap') -> None:
        # re-sequence the incoming entries so ties stay ordered by arrival here
        for _, _, item in sorted(other._items):
            self.insert(item)
        other._items = []

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class PartialTree:
    def __init__(self, vertex: Vertex) -> None:
        self.root = vertex
        self.root.parent = self.root
        self.arcs = MinHeap(key=attrgetter('weight'))
        self.num_vertices = 1

    def contains(self, vertex: Vertex) -> bool:
        '''Whether vertex's parent chain leads to this tree's root.'''
        return vertex.find_root() is self.root

    def merge(self, other: 'PartialTree') -> None:
        other.root.parent = self.root
        self.num_vertices += other.num_vertices
        self.arcs.merge(other.arcs)

    def __repr__(self):
        return f'PartialTree(root={self.root.name!r}, vertices={self.num_vertices}, arcs={len(self.arcs)})'

    __str__ = __repr__
