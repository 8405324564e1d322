import io
import sys

import pytest

from searchlab.graphs import Graph
from searchlab.mst import main, matrix_lines, prim


def build(n, edges):
    graph = Graph(n)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


TRIANGLE = [(0, 1, 1), (1, 2, 2), (0, 2, 3)]
LARGER = [(0, 1, 4), (0, 2, 3), (1, 2, 1), (1, 3, 2), (2, 3, 4), (3, 4, 2), (4, 5, 6)]


def test_triangle_tree():
    tree = prim(build(3, TRIANGLE), 0)
    assert tree.edges == ((0, 1, 1), (1, 2, 2))


def test_cost_is_sum_of_edges():
    tree = prim(build(6, LARGER), 0)
    assert tree.cost == sum(w for _, _, w in tree.edges)


def test_connected_graph_spans_all_vertices():
    tree = prim(build(6, LARGER), 0)
    assert len(tree.edges) == 5
    touched = {u for u, _, _ in tree.edges} | {v for _, v, _ in tree.edges}
    assert touched == set(range(6))


@pytest.mark.parametrize("source", range(1, 6))
def test_cost_independent_of_source(source):
    graph = build(6, LARGER)
    assert prim(graph, source).cost == prim(graph, 0).cost


def test_edges_exist_in_graph():
    graph = build(6, LARGER)
    for u, v, w in prim(graph, 3).edges:
        assert graph.weight(u, v) == w


def test_disconnected_graph_stops_early():
    graph = build(4, [(0, 1, 5), (2, 3, 1)])
    tree = prim(graph, 0)
    assert tree.edges == ((0, 1, 5),)


def test_invalid_source():
    with pytest.raises(ValueError):
        prim(Graph(2), 2)


def test_matrix_lines():
    lines = matrix_lines(build(3, TRIANGLE))
    assert lines[0] == "0 : 0 1 3 "


def test_main_reports_cost(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n0 1 1\n1 2 2\n0 2 3\n-1 -1 -1\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Add edge ( 1 , 2 ) with weight 2" in out
    assert "Minimum cost = 3" in out