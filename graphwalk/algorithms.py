"""Traversal, shortest-path and spanning-tree algorithms over :class:`Graph`."""

from __future__ import annotations

import math
from collections import deque

from graphwalk.graph import Graph

__all__ = ["bfs", "dfs", "dijkstra", "prim", "kruskal"]


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first search tree rooted at ``start``.

    The tree is directed from parent to child and its edges carry weight 1.
    """
    graph.vertex(start)
    tree = Graph(graph.size())
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for edge in graph.vertex(current).edges:
            if edge.dest not in visited:
                visited.add(edge.dest)
                queue.append(edge.dest)
                tree.add_one_sided_edge(current, edge.dest)
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return a depth-first search forest, its first tree rooted at ``start``.

    Once a tree is exhausted, the search resumes from the lowest unvisited
    vertex, so every vertex ends up in the forest. Edges are directed from
    parent to child and carry weight 1.
    """
    graph.vertex(start)
    size = graph.size()
    forest = Graph(size)
    visited: set[int] = set()
    parent: dict[int, int] = {}
    stack = [start]
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            if current in parent:
                forest.add_one_sided_edge(parent[current], current)
            for edge in graph.vertex(current).edges:
                if edge.dest not in visited:
                    stack.append(edge.dest)
                    parent[edge.dest] = current
        if not stack:
            unvisited = next(
                (vertex_id for vertex_id in range(1, size + 1) if vertex_id not in visited),
                None,
            )
            if unvisited is not None:
                stack.append(unvisited)
    return forest


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the tree of shortest paths from ``start``.

    Edges are directed from parent to child and keep their original weights.
    Vertices unreachable from ``start`` have no incoming edge in the tree.
    """
    graph.vertex(start)
    size = graph.size()
    distance: dict[int, float] = {vertex_id: math.inf for vertex_id in range(1, size + 1)}
    parent: dict[int, int] = {}
    visited: set[int] = set()
    distance[start] = 0

    current = start
    while True:
        base = distance[current]
        for edge in graph.vertex(current).edges:
            if edge.dest in visited:
                continue
            if base != math.inf and edge.weight + base < distance[edge.dest]:
                distance[edge.dest] = edge.weight + base
                parent[edge.dest] = current
        visited.add(current)

        candidates = [
            (distance[vertex_id], vertex_id)
            for vertex_id in range(1, size + 1)
            if vertex_id not in visited and distance[vertex_id] < math.inf
        ]
        if not candidates:
            break
        current = min(candidates)[1]

    tree = Graph(size)
    for child in sorted(parent):
        source = parent[child]
        tree.add_one_sided_edge(source, child, graph.weight(source, child))
    return tree


def prim(graph: Graph) -> Graph:
    """Return a minimum spanning tree grown from vertex 1 by Prim's algorithm.

    The result is undirected. Vertices not reachable from vertex 1 stay isolated.
    """
    size = graph.size()
    visited = {1}
    parent: dict[int, int] = {}
    while True:
        smallest = math.inf
        chosen = None
        for vertex_id in range(1, size + 1):
            if vertex_id not in visited:
                continue
            for edge in graph.vertex(vertex_id).edges:
                if edge.dest not in visited and edge.weight < smallest:
                    smallest = edge.weight
                    chosen = (vertex_id, edge.dest)
        if chosen is None:
            break
        source, dest = chosen
        visited.add(dest)
        parent[dest] = source

    tree = Graph(size)
    for child in sorted(parent):
        source = parent[child]
        tree.add_edge(source, child, graph.weight(source, child))
    return tree


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built by Kruskal's algorithm.

    Only edges from a lower id to a higher id are considered, and edges of
    equal weight are taken in vertex order. The result is undirected.
    """
    size = graph.size()
    candidates = [
        (vertex_id, edge.dest, edge.weight)
        for vertex_id in range(1, size + 1)
        for edge in graph.vertex(vertex_id).edges
        if vertex_id < edge.dest
    ]
    candidates.sort(key=lambda item: item[2])

    root = {vertex_id: vertex_id for vertex_id in range(1, size + 1)}
    tree = Graph(size)
    for source, dest, weight in candidates:
        root_source, root_dest = root[source], root[dest]
        if root_source == root_dest:
            continue
        for vertex_id, label in root.items():
            if label == root_dest:
                root[vertex_id] = root_source
        tree.add_edge(source, dest, weight)
    return tree