import pytest

from mst_visualizer.errors import EmptyGraphError
from mst_visualizer.graph import Graph
from mst_visualizer.steps import PRIMS_PSEUDOCODE, generate_prims_steps, start_node

from conftest import make_graph


def _final_statuses(graph, result):
    statuses = {eid: "unvisited" for eid in graph.edges}
    for step in result.steps:
        for u in step.edge_updates:
            statuses[u.edge_id] = u.status
    return statuses


def test_square_example(square_graph):
    result = generate_prims_steps(square_graph)
    assert result.mst.edge_ids() == ["0-1", "1-2", "2-3"]
    assert result.mst.total_weight == 6
    assert [s.kind for s in result.steps] == [
        "visit",
        "enqueue",
        "include",
        "enqueue",
        "include",
        "enqueue",
        "include",
        "enqueue",
    ]
    statuses = _final_statuses(square_graph, result)
    assert statuses["0-2"] != "included"
    assert statuses["0-3"] != "included"


def test_first_two_steps(square_graph):
    first, second = generate_prims_steps(square_graph).steps[:2]
    assert first.visited_nodes == (0,)
    assert first.min_heap == ()
    assert first.edge_updates == ()
    assert first.algorithm_step == PRIMS_PSEUDOCODE[1]
    assert "node A" in first.explanation

    assert [e.edge.id for e in second.min_heap] == ["0-1", "0-2", "0-3"]
    assert [u.edge_id for u in second.edge_updates] == ["0-1", "0-3", "0-2"]
    assert all(u.status == "candidate" for u in second.edge_updates)
    assert second.algorithm_step == PRIMS_PSEUDOCODE[3]


def test_include_then_enqueue_only_new_candidates(square_graph):
    steps = generate_prims_steps(square_graph).steps
    include, enqueue = steps[2], steps[3]
    assert [(u.edge_id, u.status) for u in include.edge_updates] == [("0-1", "included")]
    assert include.visited_nodes == (0, 1)
    assert [e.edge.id for e in include.min_heap] == ["0-2", "0-3"]

    assert [(u.edge_id, u.status) for u in enqueue.edge_updates] == [("1-2", "candidate")]
    assert [e.edge.id for e in enqueue.min_heap] == ["1-2", "0-2", "0-3"]
    assert enqueue.explanation == "Adding 1 new candidate edges to the queue. Now 3 total."


def test_stale_queue_entry_is_excluded(stale_entry_graph):
    result = generate_prims_steps(stale_entry_graph)
    skips = [s for s in result.steps if s.kind == "skip"]
    assert len(skips) == 1
    assert [(u.edge_id, u.status) for u in skips[0].edge_updates] == [("1-2", "excluded")]
    assert skips[0].visited_nodes == (0, 1, 2)
    assert result.mst.edge_ids() == ["0-1", "0-2", "2-3"]
    assert result.mst.total_weight == 13
    assert len(result.steps) == 9


def test_disconnected_graph_stops_with_partial_tree(disconnected_graph):
    result = generate_prims_steps(disconnected_graph)
    assert result.mst.edge_ids() == ["0-1"]
    assert result.mst.total_weight == 1
    assert not result.mst.is_spanning(4)
    assert result.steps[-1].visited_nodes == (0, 1)
    assert len(result.steps) == 4


def test_no_edges_at_start_node_gives_one_node_tree():
    g = make_graph(range(3), [(1, 2, 4)])
    result = generate_prims_steps(g)
    assert len(result.steps) == 2
    assert result.steps[1].min_heap == ()
    assert result.mst.edges == ()
    assert result.mst.total_weight == 0


def test_visited_nodes_monotonic_and_bounded(stale_entry_graph):
    result = generate_prims_steps(stale_entry_graph)
    sizes = [len(s.visited_nodes) for s in result.steps]
    assert sizes == sorted(sizes)
    assert max(sizes) <= len(stale_entry_graph)


def test_tie_graph_uses_enqueue_order(tie_graph):
    result = generate_prims_steps(tie_graph)
    assert result.mst.edge_ids() == ["0-1", "1-2"]
    assert result.mst.total_weight == 6


def test_start_node_falls_back_to_first_node():
    g = make_graph([5, 2, 7], [(2, 5, 3), (5, 7, 1)])
    assert start_node(g) == 5
    result = generate_prims_steps(g)
    assert result.steps[0].visited_nodes == (5,)
    assert result.mst.total_weight == 4


def test_empty_graph_raises():
    with pytest.raises(EmptyGraphError):
        generate_prims_steps(Graph())
