import re

import pytest

from graphwalk.cli import main

HEADERS = [
    "Original Graph:",
    "removed edge 1 -> 4, 4 -> 1:",
    "bfs Tree starting from vertex 1:",
    "dfs tree starting from vertex 1:",
    "dijkstra shortest path tree from vertex 1:",
    "prims minimum spanning tree:",
    "kruskals minimum spanning tree:",
]


@pytest.fixture
def sections(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out
    parts = output.split("\n\n")
    assert parts[-1] == ""
    return parts[:-1]


def _vertex_block(section, vertex_id):
    lines = section.splitlines()
    start = lines.index(f"Vertex {vertex_id}:")
    block = []
    for line in lines[start + 1:]:
        if line.startswith("Vertex "):
            break
        block.append(line)
    return block


def _weights(section):
    return [int(value) for value in re.findall(r"\(w: (-?\d+)\)", section)]


def test_sections_appear_in_order(sections):
    assert [section.splitlines()[0] for section in sections] == HEADERS


def test_every_section_lists_all_vertices(sections):
    for section in sections:
        listed = [line for line in section.splitlines() if line.startswith("Vertex ")]
        assert listed == [f"Vertex {i}:" for i in range(1, 6)]


def test_removed_edge_is_gone(sections):
    original, removed = sections[0], sections[1]
    assert "  -> 4 (w: 5)" in _vertex_block(original, 1)
    assert all("-> 4 " not in line for line in _vertex_block(removed, 1))
    assert all("-> 1 " not in line for line in _vertex_block(removed, 4))


def test_rooted_trees_have_four_edges(sections):
    for section in sections[2:5]:
        assert len(_weights(section)) == 4


def test_prim_and_kruskal_agree_on_weight(sections):
    prim_weights = _weights(sections[5])
    kruskal_weights = _weights(sections[6])
    assert len(prim_weights) == len(kruskal_weights) == 8
    assert sum(prim_weights) == sum(kruskal_weights)


def test_unknown_argument_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2