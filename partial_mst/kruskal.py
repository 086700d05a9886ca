'''
Edge-sorted Kruskal with a union-find, used as the reference answer when
checking the partial tree algorithm.
'''

from typing import Iterable


class UnionFind:
    def __init__(self, n_verts: int) -> None:
        self.vertices = [i for i in range(n_verts)]

    def find(self, index: int) -> int:
        start = index

        while self.vertices[index] != index:
            index = self.vertices[index]

        self.vertices[start] = index
        return index

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False
        self.vertices[i] = j
        return True

    def count_roots(self) -> int:
        return sum(1 for i, parent in enumerate(self.vertices) if i == parent)


class Edge:
    def __init__(self, u: int, v: int, weight: int) -> None:
        self.u = u
        self.v = v
        self.weight = weight

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        return Edge(*[int(token) for token in parts])

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


def kruskal(nvertices: int, edges: Iterable[Edge]) -> list[Edge]:
    uf = UnionFind(nvertices)
    mst = []

    for edge in sorted(edges, key=lambda e: e.weight):
        if uf.union(edge.u, edge.v):
            mst.append(edge)
            if len(mst) == nvertices - 1:
                break

    return mst
