import pytest

from partial_mst.graph import Graph, GraphFormatError
from partial_mst.graphgen import write_graph


EDGES = [(0, 1, 4), (1, 2, 1), (0, 2, 3)]


def test_add_edge_is_undirected():
    g = Graph()
    g.add_edge('x', 'y', 2)
    x, y = g.vertex('x'), g.vertex('y')
    assert x.neighbors == [(y, 2)]
    assert y.neighbors == [(x, 2)]
    assert len(g) == 2
    assert g.num_edges == 1


def test_add_vertex_is_idempotent():
    g = Graph()
    v = g.add_vertex(1)
    assert g.add_vertex(1) is v
    assert len(g) == 1


def test_negative_weight():
    with pytest.raises(GraphFormatError):
        Graph().add_edge(0, 1, -1)


def test_from_edges_range():
    with pytest.raises(GraphFormatError, match='out of range'):
        Graph.from_edges(2, [(0, 2, 1)])


@pytest.mark.parametrize('binary', [False, True])
def test_read_written_graph(tmp_path, binary):
    fname = str(tmp_path / ('g.bin' if binary else 'g.txt'))
    write_graph(fname, 3, EDGES, binary=binary)

    g = Graph.from_bin_file(fname) if binary else Graph.from_file(fname)
    assert [v.name for v in g.vertices] == [0, 1, 2]
    assert g.edges == EDGES


def test_from_file_skips_blank_lines(tmp_path):
    path = tmp_path / 'g.txt'
    path.write_text('3 2\n0 1 5\n\n1 2 6\n')
    assert Graph.from_file(str(path)).num_edges == 2


@pytest.mark.parametrize('text, message', [
    ('3\n', 'header'),
    ('3 2\n0 1 5\n', 'declares 2 edges'),
    ('3 1\n0 1\n', 'expected'),
    ('3 1\n0 one 5\n', 'non-integer'),
    ('3 1\n0 1 -5\n', 'negative'),
])
def test_malformed_text(tmp_path, text, message):
    path = tmp_path / 'bad.txt'
    path.write_text(text)
    with pytest.raises(GraphFormatError, match=message):
        Graph.from_file(str(path))


def test_malformed_binary(tmp_path):
    path = tmp_path / 'bad.bin'
    path.write_bytes((3).to_bytes(4, 'little') + (2).to_bytes(4, 'little') + (0).to_bytes(4, 'little'))
    with pytest.raises(GraphFormatError, match='declares 2 edges'):
        Graph.from_bin_file(str(path))
