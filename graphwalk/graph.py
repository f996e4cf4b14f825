"""Weighted graph stored as per-vertex adjacency lists with 1-based vertex ids."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Edge:
    """A connection to ``dest`` carrying ``weight``."""

    dest: int
    weight: int = 1


@dataclass
class Vertex:
    """A vertex with its id and its outgoing edges, in insertion order."""

    id: int
    edges: list[Edge] = field(default_factory=list)


class Graph:
    """A graph with a fixed number of vertices numbered from 1 to ``size``.

    Edges are directed at the storage level; ``add_edge`` and ``remove_edge``
    act on both directions at once. Self loops and duplicate edges are refused.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("Graph size must be positive.")
        self._vertices = [Vertex(vertex_id) for vertex_id in range(1, size + 1)]

    def size(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def _check_pair(self, source: int, dest: int, message: str) -> None:
        count = len(self._vertices)
        if not (0 < source <= count and 0 < dest <= count):
            raise IndexError(message)
        if source == dest:
            raise ValueError("self loops are not allowed.")

    def add_one_sided_edge(self, source: int, dest: int, weight: int = 1) -> None:
        """Add a directed edge from ``source`` to ``dest``."""
        self._check_pair(source, dest, "Source or destination vertex ID is out of bounds.")
        vertex = self._vertices[source - 1]
        if any(edge.dest == dest for edge in vertex.edges):
            raise ValueError("Edge already exists.")
        vertex.edges.append(Edge(dest, weight))

    def add_edge(self, source: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge, stored as two directed edges."""
        self.add_one_sided_edge(source, dest, weight)
        self.add_one_sided_edge(dest, source, weight)

    def remove_one_sided_edge(self, source: int, dest: int) -> None:
        """Remove the directed edge from ``source`` to ``dest``."""
        self._check_pair(source, dest, "Source or destination vertex ID is out of bounds.")
        vertex = self._vertices[source - 1]
        for position, edge in enumerate(vertex.edges):
            if edge.dest == dest:
                del vertex.edges[position]
                return
        raise LookupError("Edge does not exist.")

    def remove_edge(self, source: int, dest: int) -> None:
        """Remove an undirected edge in both directions."""
        self.remove_one_sided_edge(source, dest)
        self.remove_one_sided_edge(dest, source)

    def vertex(self, vertex_id: int) -> Vertex:
        """Return the vertex with the given id."""
        if not 0 < vertex_id <= len(self._vertices):
            raise IndexError("Vertex index out of range")
        return self._vertices[vertex_id - 1]

    def weight(self, source: int, dest: int) -> int:
        """Return the weight of the directed edge from ``source`` to ``dest``."""
        self._check_pair(source, dest, "source or destination vertex is out of range")
        for edge in self._vertices[source - 1].edges:
            if edge.dest == dest:
                return edge.weight
        raise LookupError("edge not found")

    def copy(self) -> Graph:
        """Return an independent deep copy of this graph."""
        duplicate = Graph(len(self._vertices))
        duplicate._vertices = [
            Vertex(vertex.id, [Edge(edge.dest, edge.weight) for edge in vertex.edges])
            for vertex in self._vertices
        ]
        return duplicate

    def render(self) -> str:
        """Return a multi-line listing of every vertex and its edges."""
        lines = []
        for vertex in self._vertices:
            lines.append(f"Vertex {vertex.id}:")
            lines.extend(f"  -> {edge.dest} (w: {edge.weight})" for edge in vertex.edges)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()