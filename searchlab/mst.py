"""Minimum spanning trees with Prim's algorithm."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from searchlab.graphs import Graph, read_edges

INF = 1_000_000


@dataclass(frozen=True)
class SpanningTree:
    """Edges (u, v, weight) in the order Prim's algorithm added them."""

    edges: tuple[tuple[int, int, int], ...]

    @property
    def cost(self) -> int:
        return sum(weight for _, _, weight in self.edges)


def prim(graph: Graph, source: int) -> SpanningTree:
    """Grow a minimum spanning tree from source over the reachable vertices."""
    n = len(graph)
    if not 0 <= source < n:
        raise ValueError("source vertex out of range")
    cost = [[graph.weight(i, j) or INF for j in range(n)] for i in range(n)]
    distance = list(cost[source])
    origin = [source] * n
    visited = {source}
    distance[source] = 0
    edges = []
    for _ in range(n - 1):
        candidates = [i for i in range(n) if i not in visited and distance[i] < INF]
        if not candidates:
            break
        v = min(candidates, key=distance.__getitem__)
        u = origin[v]
        visited.add(v)
        edges.append((u, v, cost[u][v]))
        for i in range(n):
            if i not in visited and distance[i] > cost[v][i]:
                distance[i] = cost[v][i]
                origin[i] = v
    return SpanningTree(tuple(edges))


def matrix_lines(graph: Graph) -> list[str]:
    """One line per vertex with its full row of the weight matrix."""
    n = len(graph)
    return [
        f"{i} : " + "".join(f"{graph.weight(i, j)} " for j in range(n))
        for i in range(n)
    ]


def main(argv: list[str] | None = None) -> int:
    """Read a weighted graph from standard input and print its spanning tree."""
    argparse.ArgumentParser(
        description="Read a weighted graph and print a minimum spanning tree."
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        print("\nEnter number of vertices in the graph : ", end="")
        graph = Graph(int(next(tokens)))
        print("\nEnter edges & weight (u v w), or -1 -1 -1 to stop:")
        for message in read_edges(graph, tokens, weighted=True):
            print("\n" + message, end="")
        print("\nAdjacency Matrix:", end="")
        for line in matrix_lines(graph):
            print("\n" + line, end="")
        print("\n\nEnter source : ", end="")
        tree = prim(graph, int(next(tokens)))
    except StopIteration:
        print("\nunexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    for u, v, weight in tree.edges:
        print(f"\nAdd edge ( {u} , {v} ) with weight {weight}", end="")
    print(f"\n\nMinimum cost = {tree.cost}")
    return 0