import io
import sys

import pytest

from searchlab.graphs import (
    INVALID_VERTEX,
    INVALID_WEIGHTED,
    OUT_OF_RANGE,
    Graph,
    main,
    read_edges,
)

SAMPLE_EDGES = "0 1 0 2 0 3 1 4 3 4 2 4 -1 -1"


@pytest.fixture
def sample():
    graph = Graph(5)
    assert read_edges(graph, SAMPLE_EDGES.split()) == []
    return graph


def test_edges_are_symmetric(sample):
    for u in range(5):
        for v in range(5):
            assert sample.weight(u, v) == sample.weight(v, u)


def test_neighbours_sorted(sample):
    for v in range(5):
        assert sample.neighbours(v) == sorted(sample.neighbours(v))


def test_adjacency_line_format(sample):
    assert sample.adjacency_lines()[4] == "4 : 1 , 2 , 3 , "


def test_dfs_recursive_order(sample):
    assert sample.dfs_recursive(0) == [0, 1, 4, 2, 3]


def test_bfs_order(sample):
    assert sample.bfs(0) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("method", ["dfs_recursive", "dfs_iterative", "bfs"])
def test_traversals_visit_each_vertex_once(sample, method):
    order = getattr(sample, method)(2)
    assert order[0] == 2
    assert sorted(order) == list(range(5))


def test_dfs_iterative_follows_edges(sample):
    order = sample.dfs_iterative(0)
    for later in order[1:]:
        earlier = order[: order.index(later)]
        assert any(sample.weight(prev, later) for prev in earlier)


def test_traversal_stays_in_component():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    assert sorted(graph.bfs(0)) == [0, 1]
    assert sorted(graph.dfs_recursive(3)) == [2, 3]


def test_read_edges_reports_rejects():
    graph = Graph(3)
    messages = read_edges(graph, "0 -1 5 1 1 2 -1 -1".split())
    assert messages == [INVALID_VERTEX, OUT_OF_RANGE]
    assert graph.weight(1, 2) == 1


def test_read_edges_weighted():
    graph = Graph(3)
    messages = read_edges(graph, "0 1 7 1 2 -1 -1 -1 -1".split(), weighted=True)
    assert messages == [INVALID_WEIGHTED]
    assert graph.weight(1, 0) == 7


def test_read_edges_leaves_rest_of_input():
    tokens = iter("0 1 -1 -1 2".split())
    graph = Graph(3)
    read_edges(graph, tokens)
    assert next(tokens) == "2"


def test_invalid_source_raises(sample):
    with pytest.raises(ValueError):
        sample.bfs(5)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Graph(-1)


def test_main_prints_three_traversals(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n" + SAMPLE_EDGES + "\n0\n0\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.count("visited") == 15