# graphwalk

A small library of weighted graphs whose vertices are numbered from 1. It
also provides the classic traversal, shortest-path and spanning-tree
algorithms, each of which builds a new graph from an existing one.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Graphs

```python
from graphwalk.graph import Graph

g = Graph(5)                    # vertices 1..5
g.add_edge(1, 2, 3)             # undirected, weight 3
g.add_edge(1, 3)                # weight defaults to 1
g.add_one_sided_edge(4, 5, 7)   # directed 4 -> 5

g.weight(1, 2)                  # 3
g.remove_edge(1, 3)
print(g)
```

`print(g)` (or `g.render()`) lists every vertex and its outgoing edges:

    Vertex 1:
      -> 2 (w: 3)
    Vertex 2:
      -> 1 (w: 3)
    ...

The `Graph` class has these methods:

- `Graph(size)` creates a graph with vertices `1..size`. If `size` is not positive, it raises `ValueError`.
- `size()` returns the number of vertices.
- `add_one_sided_edge(source, dest, weight=1)` and `remove_one_sided_edge(source, dest)` act on a single direction.
- `add_edge(source, dest, weight=1)` and `remove_edge(source, dest)` act on both directions.
- `weight(source, dest)` returns the weight of the directed edge.
- `vertex(vertex_id)` returns a `Vertex` with its `id` and its list of outgoing `Edge` values. Each `Edge` has a `dest` and a `weight`, and the list keeps the order in which the edges were added.
- `copy()` returns an independent deep copy.

The methods raise these errors:

- A vertex id outside `1..size` raises `IndexError`.
- A self loop raises `ValueError`.
- Adding an edge that already exists raises `ValueError`.
- Asking for the weight of an edge that does not exist raises `LookupError`. So does removing such an edge.

## Algorithms

```python
from graphwalk.algorithms import bfs, dfs, dijkstra, prim, kruskal

bfs(g, 1)        # directed BFS tree rooted at 1
dfs(g, 1)        # directed DFS forest, starting from 1
dijkstra(g, 1)   # directed shortest-path tree with the original weights
prim(g)          # undirected minimum spanning tree, grown from vertex 1
kruskal(g)       # undirected minimum spanning forest
```

Each function returns a new `Graph` of the same size. The input graph is left unchanged.

- `bfs` covers only the vertices that can be reached from the start. Its edges run from parent to child and have weight 1.
- `dfs` also has edges that run from parent to child with weight 1. When one tree is exhausted, it starts again from the lowest unvisited vertex, so the resulting forest holds every vertex.
- `dijkstra` gives each reachable vertex an incoming edge from its parent on a shortest path. Unreachable vertices get no incoming edge.
- `prim` starts at vertex 1. Vertices that cannot be reached from vertex 1 stay isolated.
- `kruskal` considers each undirected edge once. It sorts the edges by weight, and ties stay in vertex order.

If the start vertex is outside `1..size`, `bfs`, `dfs` and `dijkstra` raise `IndexError`.

## Command line

    graphwalk

This command builds a fixed five-vertex sample graph and prints it. It then removes the edge between 1 and 4 and prints the graph again. Finally it prints the tree or forest that each algorithm produces from the result.

## What it does not do

The command works only on its built-in sample graph. It takes no options other than `--help`. It cannot read a graph from a file or save one, and graphs exist only in memory.