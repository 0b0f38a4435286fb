import pytest
from fastapi.testclient import TestClient

from backend.app import app


@pytest.fixture
def client():
    return TestClient(app)


SQUARE = {
    "nodes": [{"id": i, "x": float(i), "y": 0.0} for i in range(4)],
    "edges": [
        {"source": 0, "target": 1, "weight": 1},
        {"source": 1, "target": 2, "weight": 2},
        {"source": 2, "target": 3, "weight": 3},
        {"source": 0, "target": 3, "weight": 10},
        {"source": 0, "target": 2, "weight": 5},
    ],
}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/algorithms").json() == {"algorithms": ["prims", "kruskals"]}


@pytest.mark.parametrize("algorithm,count", [("prims", 8), ("kruskals", 12)])
def test_steps(client, algorithm, count):
    resp = client.post("/steps", json={"graph": SQUARE, "algorithm": algorithm})
    assert resp.status_code == 200
    body = resp.json()
    assert body["algorithm"] == algorithm
    assert body["stepCount"] == count == len(body["steps"])
    assert body["mst"]["totalWeight"] == 6
    assert [e["id"] for e in body["mst"]["edges"]] == ["0-1", "1-2", "2-3"]
    assert [n["label"] for n in body["graph"]["nodes"]] == ["A", "B", "C", "D"]


def test_steps_rejects_bad_input(client):
    resp = client.post("/steps", json={"graph": {"nodes": [], "edges": []}, "algorithm": "prims"})
    assert resp.status_code == 400
    assert "no nodes" in resp.json()["detail"]

    resp = client.post("/steps", json={"graph": SQUARE, "algorithm": "boruvka"})
    assert resp.status_code == 400

    dangling = {"nodes": [{"id": 0}], "edges": [{"source": 0, "target": 4, "weight": 1}]}
    resp = client.post("/steps", json={"graph": dangling})
    assert resp.status_code == 400
    assert "endpoints" in resp.json()["detail"]

    dup = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"source": 0, "target": 1, "weight": 1}, {"source": 1, "target": 0, "weight": 2}]}
    assert client.post("/steps", json={"graph": dup}).status_code == 400


def test_random_graph(client):
    resp = client.post("/graph/random", json={"node_count": 5, "density": 0.4, "seed": 9})
    assert resp.status_code == 200
    graph = resp.json()["graph"]
    assert len(graph["nodes"]) == 5
    assert len(graph["edges"]) == 4

    again = client.post("/graph/random", json={"node_count": 5, "density": 0.4, "seed": 9}).json()["graph"]
    assert again == graph

    bad = client.post("/graph/random", json={"min_weight": 10, "max_weight": 2})
    assert bad.status_code == 400


def test_components(client):
    resp = client.post("/components", json={"nodes": [{"id": 0}, {"id": 1}, {"id": 2}], "edges": [{"source": 0, "target": 1, "weight": 1}]})
    assert resp.json() == {"components": [[0, 1], [2]], "connected": False}
