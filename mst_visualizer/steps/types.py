from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Literal, Optional, Tuple

from ..graph import Edge, EdgeId, EdgeStatus, NodeId

AlgorithmName = Literal["prims", "kruskals"]
StepKind = Literal["visit", "enqueue", "include", "skip", "sort", "init", "check", "exclude"]

PRIMS_PSEUDOCODE: Tuple[str, ...] = (
    "1. Start with an arbitrary node (we'll use the first node)",
    "2. Add the node to the visited set",
    "3. Find all edges connecting visited nodes to unvisited nodes",
    "4. Add these edges to the priority queue (min heap)",
    "5. Extract the minimum weight edge from the priority queue",
    "6. If the edge connects to an unvisited node, add it to the MST",
    "7. Add the new node to the visited set",
    "8. Repeat until all nodes are visited or no more edges exist",
)

KRUSKALS_PSEUDOCODE: Tuple[str, ...] = (
    "1. Sort all edges in non-decreasing order of weight",
    "2. Initialize Union-Find data structure for all nodes",
    "3. For each edge in sorted order:",
    "   a. Check if adding the edge creates a cycle using Union-Find",
    "   b. If no cycle is created, add the edge to the MST",
    "   c. Union the sets of the two endpoints",
    "4. Continue until we have V-1 edges (a complete MST)",
)


@dataclass(frozen=True)
class EdgeUpdate:
    edge_id: EdgeId
    status: EdgeStatus

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.edge_id, "status": self.status}


@dataclass(frozen=True)
class PriorityQueueEntry:
    edge: Edge
    weight: int
    source: NodeId
    target: NodeId

    @staticmethod
    def for_edge(edge: Edge) -> "PriorityQueueEntry":
        return PriorityQueueEntry(edge=edge, weight=edge.weight, source=edge.source, target=edge.target)

    def to_dict(self) -> Dict[str, Any]:
        return {"edgeId": self.edge.id, "weight": self.weight, "source": self.source, "target": self.target}


@dataclass(frozen=True)
class SortedEdgeEntry:
    id: EdgeId
    source: NodeId
    target: NodeId
    weight: int
    status: EdgeStatus

    @staticmethod
    def for_edge(edge: Edge, status: EdgeStatus) -> "SortedEdgeEntry":
        return SortedEdgeEntry(id=edge.id, source=edge.source, target=edge.target, weight=edge.weight, status=status)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "source": self.source, "target": self.target, "weight": self.weight, "status": self.status}


@dataclass(frozen=True)
class Step:
    """One replayable unit of algorithm progress.

    `edge_updates` are applied in order on top of the previous step's state.
    Every snapshot field that is not None replaces (never merges into) the
    matching display panel.
    """

    edge_updates: Tuple[EdgeUpdate, ...]
    explanation: str
    algorithm_step: str
    kind: StepKind
    visited_nodes: Optional[Tuple[NodeId, ...]] = None
    min_heap: Optional[Tuple[PriorityQueueEntry, ...]] = None
    sorted_edges: Optional[Tuple[SortedEdgeEntry, ...]] = None
    union_find: Optional[Tuple[Tuple[NodeId, ...], ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "kind": self.kind,
            "edgeUpdates": [u.to_dict() for u in self.edge_updates],
            "explanation": self.explanation,
            "algorithmStep": self.algorithm_step,
        }
        if self.visited_nodes is not None:
            out["visitedNodes"] = list(self.visited_nodes)
        if self.min_heap is not None:
            out["minHeap"] = [e.to_dict() for e in self.min_heap]
        if self.sorted_edges is not None:
            out["sortedEdges"] = [e.to_dict() for e in self.sorted_edges]
        if self.union_find is not None:
            out["unionFind"] = [list(c) for c in self.union_find]
        return out


@dataclass(frozen=True)
class MSTResult:
    edges: Tuple[Edge, ...]
    total_weight: int

    @staticmethod
    def from_edges(edges: Iterable[Edge]) -> "MSTResult":
        edges = tuple(edges)
        return MSTResult(edges=edges, total_weight=sum(e.weight for e in edges))

    def edge_ids(self) -> List[EdgeId]:
        return [e.id for e in self.edges]

    def is_spanning(self, node_count: int) -> bool:
        return len(self.edges) == max(node_count - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges": [{"id": e.id, "source": e.source, "target": e.target, "weight": e.weight} for e in self.edges],
            "totalWeight": self.total_weight,
        }


@dataclass(frozen=True)
class GenerationResult:
    algorithm: AlgorithmName
    steps: Tuple[Step, ...]
    mst: MSTResult
    node_count: int = field(default=0)

    def __len__(self) -> int:
        return len(self.steps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "stepCount": len(self.steps),
            "steps": [s.to_dict() for s in self.steps],
            "mst": self.mst.to_dict(),
        }
