from __future__ import annotations

import copy
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Iterator, List, Literal, Mapping, Optional, Tuple

from .disjoint_set import DisjointSet
from .errors import DuplicateEdgeError, InvalidEdgeEndpointError

NodeId = int
EdgeId = str
EdgeStatus = Literal["unvisited", "candidate", "included", "excluded"]

EDGE_STATUSES: Tuple[EdgeStatus, ...] = ("unvisited", "candidate", "included", "excluded")


def node_label(node_id: NodeId) -> str:
    return chr(65 + node_id)


def edge_id(a: NodeId, b: NodeId) -> EdgeId:
    return f"{min(a, b)}-{max(a, b)}"


@dataclass
class Node:
    id: NodeId
    x: float = 0.0
    y: float = 0.0
    label: str = ""

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"Node ids must be >= 0 (got {self.id!r})")
        if not self.label:
            self.label = node_label(self.id)


@dataclass
class Edge:
    id: EdgeId
    source: NodeId
    target: NodeId
    weight: int
    status: EdgeStatus = "unvisited"

    @staticmethod
    def between(a: NodeId, b: NodeId, weight: int) -> "Edge":
        """Build the canonical (source < target) edge for an unordered pair."""
        return Edge(id=edge_id(a, b), source=min(a, b), target=max(a, b), weight=weight)

    def other(self, node_id: NodeId) -> NodeId:
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        raise ValueError(f"Node {node_id!r} is not an endpoint of edge {self.id!r}")


class Graph:
    """An undirected, simple, positively weighted graph.

    Nodes and edges keep insertion order; the step generators rely on it to
    break weight ties. Edge statuses are display state only and are ignored
    by the generators, which always start from an all-unvisited baseline.
    """

    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()) -> None:
        self.nodes: Dict[NodeId, Node] = {}
        self.edges: Dict[EdgeId, Edge] = {}
        for node in nodes:
            self.add_node(node)
        for edge in edges:
            self.add_edge(edge)

    def add_node(self, node: Node) -> None:
        if node.id in self.nodes:
            raise ValueError(f"Node already exists: {node.id!r}")
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        self._check_edge(edge)
        if edge.id in self.edges:
            raise DuplicateEdgeError(f"Edge already exists: {edge.id!r}")
        self.edges[edge.id] = edge

    def connect(self, a: NodeId, b: NodeId, weight: int) -> Edge:
        if a == b:
            raise ValueError("Self-loops are not supported")
        edge = Edge.between(a, b, weight)
        self.add_edge(edge)
        return edge

    def try_connect(self, a: NodeId, b: NodeId, weight: int) -> Optional[Edge]:
        """Editor-style connect: picking the same node twice, or a pair that is
        already joined, is silently ignored."""
        if a == b or edge_id(a, b) in self.edges:
            return None
        return self.connect(a, b, weight)

    def remove_node(self, node_id: NodeId) -> Node:
        node = self.require_node(node_id)
        for e in self.incident_edges(node_id):
            del self.edges[e.id]
        del self.nodes[node_id]
        return node

    def remove_edge(self, eid: EdgeId) -> Edge:
        edge = self.require_edge(eid)
        del self.edges[eid]
        return edge

    def next_node_id(self) -> NodeId:
        # The editor numbers new nodes by count, so ids can collide after a delete.
        candidate = len(self.nodes)
        while candidate in self.nodes:
            candidate += 1
        return candidate

    def incident_edges(self, node_id: NodeId) -> List[Edge]:
        return [e for e in self.edges.values() if e.source == node_id or e.target == node_id]

    def neighbors(self, node_id: NodeId) -> List[NodeId]:
        return [e.other(node_id) for e in self.incident_edges(node_id)]

    def edge_between(self, a: NodeId, b: NodeId) -> Optional[Edge]:
        return self.edges.get(edge_id(a, b))

    def require_node(self, node_id: NodeId) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError as e:
            raise KeyError(f"Unknown node: {node_id!r}") from e

    def require_edge(self, eid: EdgeId) -> Edge:
        try:
            return self.edges[eid]
        except KeyError as e:
            raise KeyError(f"Unknown edge: {eid!r}") from e

    def node_ids(self) -> List[NodeId]:
        return list(self.nodes.keys())

    def edge_list(self) -> List[Edge]:
        return list(self.edges.values())

    def label_of(self, node_id: NodeId) -> str:
        node = self.nodes.get(node_id)
        return node.label if node is not None else node_label(node_id)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def _check_edge(self, edge: Edge) -> None:
        if edge.source == edge.target:
            raise ValueError(f"Self-loops are not supported (edge {edge.id!r})")
        if edge.source > edge.target:
            raise ValueError(f"Edge {edge.id!r} must be stored with source < target")
        if edge.id != edge_id(edge.source, edge.target):
            raise ValueError(f"Edge id {edge.id!r} does not match its endpoints")
        if edge.source not in self.nodes or edge.target not in self.nodes:
            raise InvalidEdgeEndpointError(
                f"Both endpoints must exist (edge={edge.id!r}, source={edge.source!r}, target={edge.target!r})"
            )
        if isinstance(edge.weight, bool) or not isinstance(edge.weight, int) or edge.weight <= 0:
            raise ValueError(f"Edge {edge.id!r} must have a positive integer weight (got {edge.weight!r})")

    def validate(self) -> None:
        """Re-check every invariant; the dicts are public and may have been edited directly."""
        for node_id, node in self.nodes.items():
            if node.id != node_id:
                raise ValueError(f"Node stored under {node_id!r} has id {node.id!r}")
        for key, edge in self.edges.items():
            if key != edge.id:
                raise ValueError(f"Edge stored under {key!r} has id {edge.id!r}")
            self._check_edge(edge)

    def snapshot(self) -> "Graph":
        """Deep copy with every edge back at `unvisited`."""
        g = copy.deepcopy(self)
        g.reset_statuses()
        return g

    def reset_statuses(self) -> None:
        for e in self.edges.values():
            e.status = "unvisited"

    def set_status(self, eid: EdgeId, status: EdgeStatus) -> None:
        if status not in EDGE_STATUSES:
            raise ValueError(f"Unknown edge status {status!r}")
        edge = self.edges.get(eid)
        # Updates for edges deleted since generation are dropped.
        if edge is not None:
            edge.status = status

    def status_counts(self) -> Dict[EdgeStatus, int]:
        out: Dict[EdgeStatus, int] = {s: 0 for s in EDGE_STATUSES}
        for e in self.edges.values():
            out[e.status] += 1
        return out

    def connected_components(self) -> List[List[NodeId]]:
        ds = DisjointSet(self.nodes.keys())
        for e in self.edges.values():
            ds.union(e.source, e.target)
        return ds.components()

    def is_connected(self) -> bool:
        return len(self.connected_components()) <= 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [asdict(n) for n in self.nodes.values()],
            "edges": [asdict(e) for e in self.edges.values()],
        }

    @staticmethod
    def from_dict(obj: Mapping[str, Any]) -> "Graph":
        g = Graph()
        for nd in obj.get("nodes", []):
            node_id = int(nd["id"])
            g.add_node(
                Node(
                    id=node_id,
                    x=float(nd.get("x", 0.0)),
                    y=float(nd.get("y", 0.0)),
                    label=str(nd.get("label") or node_label(node_id)),
                )
            )
        for ed in obj.get("edges", []):
            edge = Edge.between(int(ed["source"]), int(ed["target"]), ed["weight"])
            if "id" in ed and str(ed["id"]) != edge.id:
                raise ValueError(f"Edge id {ed['id']!r} does not match its endpoints ({edge.id!r})")
            status = ed.get("status", "unvisited")
            if status not in EDGE_STATUSES:
                raise ValueError(f"Unknown edge status {status!r}")
            edge.status = status
            g.add_edge(edge)
        return g

    def to_networkx(self):
        """Convert to a networkx.Graph for ad-hoc experimentation."""
        import networkx as nx

        g = nx.Graph()
        for node_id, node in self.nodes.items():
            g.add_node(node_id, x=node.x, y=node.y, label=node.label)
        for e in self.edges.values():
            g.add_edge(e.source, e.target, weight=e.weight, id=e.id, status=e.status)
        return g
