'''
File format:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

The binary format holds the same numbers as consecutive little-endian
32-bit integers.
'''
import logging

from typing import Hashable, Iterable

import numpy as np

from partial_mst.kruskal import Edge
from partial_mst.structures import Vertex

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    pass


class Graph:
    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self._by_name: dict[Hashable, Vertex] = {}
        self.edges: list[tuple[Hashable, Hashable, int]] = []

    def add_vertex(self, name: Hashable) -> Vertex:
        if name in self._by_name:
            return self._by_name[name]
        v = Vertex(name)
        self.vertices.append(v)
        self._by_name[name] = v
        return v

    def add_edge(self, u: Hashable, v: Hashable, weight: int) -> None:
        if weight < 0:
            raise GraphFormatError(f'negative weight {weight} on edge ({u}, {v})')
        vu = self.add_vertex(u)
        vv = self.add_vertex(v)
        vu.neighbors.append((vv, weight))
        vv.neighbors.append((vu, weight))
        self.edges.append((u, v, weight))

    def vertex(self, name: Hashable) -> Vertex:
        return self._by_name[name]

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self):
        return f'Graph(nvertices={len(self)}, nedges={self.num_edges})'

    @classmethod
    def from_edges(cls, nvertices: int, edges: Iterable[tuple[int, int, int]]) -> 'Graph':
        g = cls()
        for i in range(nvertices):
            g.add_vertex(i)

        for (u, v, w) in edges:
            if not (0 <= u < nvertices and 0 <= v < nvertices):
                raise GraphFormatError(f'edge ({u}, {v}) out of range for {nvertices} vertices')
            g.add_edge(u, v, w)

        return g

    @classmethod
    def from_file(cls, fname: str) -> 'Graph':
        with open(fname, 'r') as f:
            header = f.readline().split()
            if len(header) != 2:
                raise GraphFormatError(f'{fname}: expected "<nvertices> <nedges>" header')
            nvertices, nedges = _parse_ints(header, fname, 1)

            edges = []
            for lineno, line in enumerate(f, start=2):
                parts = line.split()
                if not parts:
                    continue
                if len(parts) != 3:
                    raise GraphFormatError(f'{fname}:{lineno}: expected "<v1> <v2> <w>"')
                try:
                    edge = Edge.from_line(line)
                except ValueError:
                    raise GraphFormatError(f'{fname}:{lineno}: non-integer token in {parts}') from None
                edges.append((edge.u, edge.v, edge.weight))

        if len(edges) != nedges:
            raise GraphFormatError(f'{fname}: header declares {nedges} edges, found {len(edges)}')

        logger.debug(f'Read {nvertices} vertices and {nedges} edges from {fname}')
        return cls.from_edges(nvertices, edges)

    @classmethod
    def from_bin_file(cls, fname: str) -> 'Graph':
        nums = np.fromfile(fname, dtype='<i4')
        if len(nums) < 2:
            raise GraphFormatError(f'{fname}: missing header')

        nvertices, nedges = int(nums[0]), int(nums[1])
        if len(nums) != 2 + 3 * nedges:
            raise GraphFormatError(f'{fname}: header declares {nedges} edges, '
                                   f'file holds {(len(nums) - 2) / 3:g}')

        edges = nums[2:].reshape(nedges, 3).tolist()

        logger.debug(f'Read {nvertices} vertices and {nedges} edges from {fname}')
        return cls.from_edges(nvertices, edges)


def _parse_ints(tokens: list[str], fname: str, lineno: int) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise GraphFormatError(f'{fname}:{lineno}: non-integer token in {tokens}') from None
