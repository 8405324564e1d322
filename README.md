# searchlab

Classic graph, search, puzzle and sorting algorithms. Each one can be used as
a library and also comes with a small command that reads from standard input.

| Module               | What it does                                            | Command              |
|----------------------|---------------------------------------------------------|----------------------|
| `searchlab.graphs`   | Undirected graph, recursive and iterative DFS, and BFS  | `searchlab-graph`    |
| `searchlab.mst`      | Prim's minimum spanning tree                            | `searchlab-prim`     |
| `searchlab.puzzle`   | 8-puzzle solved by A* with the Manhattan heuristic      | `searchlab-puzzle`   |
| `searchlab.gridpath` | A* shortest path on a grid of open and blocked cells    | `searchlab-gridpath` |
| `searchlab.queens`   | N-Queens by plain backtracking and by branch and bound  | `searchlab-queens`   |
| `searchlab.sorting`  | Selection sort                                          | `searchlab-sort`     |
| `searchlab.expert`   | Rule-based symptom questionnaire that prints a report   | `searchlab-diagnose` |

The package needs Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

The commands print prompts as they go and read their answers from standard
input, so they can be used interactively or fed from a file.

* `searchlab-graph` reads the number of vertices, then edges as pairs `u v`
  until `-1 -1` (or the end of input). Entries containing a single `-1` or an
  out-of-range vertex are reported and skipped. It prints each vertex's
  neighbours, then reads a source vertex for each of recursive DFS, iterative
  DFS and BFS and prints the visiting order.
* `searchlab-prim` reads the number of vertices, then weighted edges `u v w`
  until `-1 -1 -1`, prints the weight matrix, reads a source vertex and prints
  every edge added to the spanning tree followed by the total cost.
* `searchlab-puzzle` reads a 3x3 goal board and then a 3x3 start board (`0`
  is the blank) and prints every state the A* search expands or generates.
* `searchlab-gridpath` takes no input: it runs A* on a built-in 5x5 grid from
  `(0,0)` to `(4,4)` and prints the cost and the path.
* `searchlab-queens` reads N and prints every solution found by each of the
  two solvers, followed by the number of solutions.
* `searchlab-sort` sorts the integers given as arguments, or a built-in
  sample list when none are given, and prints them in ascending order.
* `searchlab-diagnose` asks a series of yes/no questions (each answer is one
  non-blank character; `Y` or `y` means yes) and prints a report of the
  conditions that match.

## Library use

```python
from searchlab.graphs import Graph
from searchlab.mst import prim
from searchlab.queens import solve_backtracking, solve_branch_and_bound
from searchlab.sorting import selection_sort
from searchlab.gridpath import a_star, SAMPLE_GRID

g = Graph(5)
for u, v in [(0, 1), (0, 2), (0, 3), (1, 4), (3, 4), (2, 4)]:
    g.add_edge(u, v, 1)

print(g.dfs_recursive(0))   # [0, 1, 4, 2, 3]
print(g.dfs_iterative(0))
print(g.bfs(0))             # [0, 1, 2, 3, 4]

tree = prim(g, 0)           # SpanningTree with .edges and .cost
print(tree.cost)

print(sum(1 for _ in solve_backtracking(8)))       # 92
print(sum(1 for _ in solve_branch_and_bound(8)))   # 92

print(selection_sort([64, 25, 12, 22, 11]))        # [11, 12, 22, 25, 64]

result = a_star(SAMPLE_GRID, (0, 0), (4, 4))       # PathResult or None
print(result.cost, result.path)
```

Both N-Queens solvers are generators yielding each solution as a tuple of row
strings such as `".Q.."`.

`searchlab.puzzle.solve` returns the goal `PuzzleState` reached, or `None`;
`searchlab.puzzle.search` yields a `SearchEvent` for every step of the search.

`searchlab.expert.diagnose` takes any callable that answers a question with a
boolean, so the questionnaire can be driven from code; `report` turns the
resulting list of `Diagnosis` values into the report text.