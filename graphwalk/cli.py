"""Command that builds a sample graph and prints the result of each algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from graphwalk.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphwalk.graph import Graph

_SAMPLE_EDGES = (
    (1, 2, 3),
    (1, 3, 1),
    (2, 4, 4),
    (3, 4, 2),
    (4, 5, 7),
    (3, 5, 5),
    (1, 4, 5),
)


def _section(title: str, graph: Graph) -> str:
    return f"{title}\n{graph.render()}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Build the sample graph, run every algorithm on it and print the trees."""
    parser = argparse.ArgumentParser(
        prog="graphwalk",
        description="Print a sample graph and the trees each algorithm derives from it.",
    )
    parser.parse_args(argv)

    graph = Graph(5)
    for source, dest, weight in _SAMPLE_EDGES:
        graph.add_edge(source, dest, weight)

    out = sys.stdout
    out.write(_section("Original Graph:", graph))

    graph.remove_edge(1, 4)
    out.write(_section("removed edge 1 -> 4, 4 -> 1:", graph))

    out.write(_section("bfs Tree starting from vertex 1:", bfs(graph, 1)))
    out.write(_section("dfs tree starting from vertex 1:", dfs(graph, 1)))
    out.write(_section("dijkstra shortest path tree from vertex 1:", dijkstra(graph, 1)))
    out.write(_section("prims minimum spanning tree:", prim(graph)))
    out.write(_section("kruskals minimum spanning tree:", kruskal(graph)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())