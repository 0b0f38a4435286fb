import pytest

from mst_visualizer.errors import DuplicateEdgeError, InvalidEdgeEndpointError
from mst_visualizer.graph import Edge, Graph, Node, edge_id, node_label

from conftest import make_graph


def test_labels_and_edge_ids_are_canonical():
    assert node_label(0) == "A"
    assert node_label(3) == "D"
    assert Node(id=2).label == "C"
    assert edge_id(3, 1) == "1-3"
    e = Edge.between(4, 2, 7)
    assert (e.id, e.source, e.target, e.weight, e.status) == ("2-4", 2, 4, 7, "unvisited")


def test_add_edge_validation():
    g = make_graph(range(3), [(0, 1, 4)])
    with pytest.raises(DuplicateEdgeError):
        g.connect(1, 0, 9)
    with pytest.raises(InvalidEdgeEndpointError):
        g.connect(0, 9, 1)
    with pytest.raises(ValueError):
        g.connect(2, 2, 1)
    with pytest.raises(ValueError):
        g.connect(0, 2, 0)
    with pytest.raises(ValueError):
        g.add_edge(Edge(id="2-1", source=2, target=1, weight=3))


def test_try_connect_ignores_same_node_and_existing_pair():
    g = make_graph(range(3), [(0, 1, 4)])
    assert g.try_connect(1, 1, 5) is None
    assert g.try_connect(1, 0, 5) is None
    assert g.edges["0-1"].weight == 4
    edge = g.try_connect(2, 0, 5)
    assert edge is not None and edge.id == "0-2"


def test_remove_node_drops_incident_edges_and_keeps_labels():
    g = make_graph(range(4), [(0, 1, 1), (1, 2, 2), (2, 3, 3)])
    g.remove_node(1)
    assert sorted(g.edges) == ["2-3"]
    assert [n.label for n in g] == ["A", "C", "D"]
    assert g.next_node_id() == 4


def test_validate_catches_dangling_edges():
    g = make_graph(range(2), [(0, 1, 1)])
    del g.nodes[1]
    with pytest.raises(InvalidEdgeEndpointError):
        g.validate()


def test_snapshot_resets_statuses_without_touching_original():
    g = make_graph(range(2), [(0, 1, 1)])
    g.set_status("0-1", "included")
    snap = g.snapshot()
    assert snap.edges["0-1"].status == "unvisited"
    assert g.edges["0-1"].status == "included"
    snap.remove_edge("0-1")
    assert "0-1" in g.edges


def test_set_status_rejects_unknown_status():
    g = make_graph(range(2), [(0, 1, 1)])
    with pytest.raises(ValueError):
        g.set_status("0-1", "maybe")  # type: ignore[arg-type]
    g.set_status("missing", "included")
    assert g.status_counts()["unvisited"] == 1


def test_dict_round_trip_and_id_check():
    g = make_graph(range(3), [(0, 1, 2), (1, 2, 3)])
    again = Graph.from_dict(g.to_dict())
    assert again.to_dict() == g.to_dict()

    bad = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"id": "1-0", "source": 0, "target": 1, "weight": 3}]}
    with pytest.raises(ValueError):
        Graph.from_dict(bad)

    dup = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1, "weight": 3}, {"source": 1, "target": 0, "weight": 4}]}
    with pytest.raises(DuplicateEdgeError):
        Graph.from_dict(dup)

    dangling = {"nodes": [{"id": 0}], "edges": [{"source": 0, "target": 1, "weight": 3}]}
    with pytest.raises(InvalidEdgeEndpointError):
        Graph.from_dict(dangling)


def test_connected_components(disconnected_graph):
    assert disconnected_graph.connected_components() == [[0, 1], [2], [3]]
    assert not disconnected_graph.is_connected()


def test_to_networkx_keeps_weights(square_graph):
    g = square_graph.to_networkx()
    assert g.number_of_nodes() == 4
    assert g.number_of_edges() == 5
    assert g[0][3]["weight"] == 10
