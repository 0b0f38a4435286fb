from __future__ import annotations

from typing import Iterable, List, Tuple

import pytest

from mst_visualizer.graph import Graph, Node


def make_graph(node_ids: Iterable[int], edges: List[Tuple[int, int, int]]) -> Graph:
    g = Graph()
    for i in node_ids:
        g.add_node(Node(id=i, x=float(i) * 10.0, y=0.0))
    for a, b, w in edges:
        g.connect(a, b, w)
    return g


@pytest.fixture
def square_graph() -> Graph:
    # A-B=1, B-C=2, C-D=3, A-D=10, A-C=5 -> MST weight 6
    return make_graph(range(4), [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 3, 10), (0, 2, 5)])


@pytest.fixture
def disconnected_graph() -> Graph:
    return make_graph(range(4), [(0, 1, 1)])


@pytest.fixture
def tie_graph() -> Graph:
    # A-B=5, A-C=5, B-C=1
    return make_graph(range(3), [(0, 1, 5), (0, 2, 5), (1, 2, 1)])


@pytest.fixture
def stale_entry_graph() -> Graph:
    # Prim's pops B-C after both ends are already visited.
    return make_graph(range(4), [(0, 1, 1), (0, 2, 2), (1, 2, 3), (2, 3, 10)])
