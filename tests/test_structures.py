import pytest

from partial_mst.structures import Arc, MinHeap, PartialTree, Vertex


class TestVertex:
    def test_starts_as_root(self):
        v = Vertex('a')
        assert v.parent is v
        assert v.is_root()
        assert v.find_root() is v

    def test_find_root_halves_path(self):
        chain = [Vertex(i) for i in range(5)]
        for (child, parent) in zip(chain[1:], chain):
            child.parent = parent

        assert chain[4].find_root() is chain[0]
        assert chain[4].parent is chain[2]
        assert chain[2].parent is chain[0]
        # roots are unchanged
        assert chain[0].is_root()


class TestArc:
    def test_ordered_by_weight(self):
        a, b = Vertex('a'), Vertex('b')
        assert Arc(a, b, 1) < Arc(b, a, 2)
        assert not Arc(a, b, 2) < Arc(b, a, 2)

    def test_immutable(self):
        arc = Arc(Vertex('a'), Vertex('b'), 3)
        with pytest.raises(AttributeError):
            arc.weight = 1

    def test_endpoints_unordered(self):
        a, b = Vertex('a'), Vertex('b')
        assert Arc(a, b, 1).endpoints() == Arc(b, a, 1).endpoints()


class TestMinHeap:
    def test_delete_min_order(self):
        heap = MinHeap()
        for n in [5, 1, 4, 2, 3]:
            heap.insert(n)
        assert len(heap) == 5
        assert [heap.delete_min() for _ in range(5)] == [1, 2, 3, 4, 5]

    def test_empty_returns_none(self):
        heap = MinHeap()
        assert heap.is_empty()
        assert heap.delete_min() is None

    def test_ties_in_insertion_order(self):
        heap = MinHeap(key=lambda arc: arc.weight)
        a, b = Vertex('a'), Vertex('b')
        first, second, third = Arc(a, b, 2), Arc(b, a, 2), Arc(a, a, 1)
        for arc in (first, second, third):
            heap.insert(arc)
        assert heap.delete_min() is third
        assert heap.delete_min() is first
        assert heap.delete_min() is second

    def test_merge_moves_items(self):
        left, right = MinHeap(), MinHeap()
        for n in [3, 7]:
            left.insert(n)
        for n in [1, 9, 5]:
            right.insert(n)
        left.merge(right)
        assert right.is_empty()
        assert [left.delete_min() for _ in range(5)] == [1, 3, 5, 7, 9]


class TestPartialTree:
    def test_resets_root_parent(self):
        v, other = Vertex('v'), Vertex('other')
        v.parent = other
        tree = PartialTree(v)
        assert tree.root is v
        assert v.is_root()
        assert tree.arcs.is_empty()

    def test_merge_keeps_own_root(self):
        a, b = PartialTree(Vertex('a')), PartialTree(Vertex('b'))
        a.arcs.insert(Arc(a.root, b.root, 4))
        b.arcs.insert(Arc(b.root, a.root, 4))
        b.arcs.insert(Arc(b.root, Vertex('c'), 1))

        a.merge(b)
        assert b.root.parent is a.root
        assert a.root.is_root()
        assert a.num_vertices == 2
        assert len(a.arcs) == 3
        assert b.arcs.is_empty()
        assert a.contains(b.root)
        assert a.arcs.delete_min().weight == 1
