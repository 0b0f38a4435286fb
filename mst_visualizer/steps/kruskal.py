from __future__ import annotations

import logging
from typing import List, Set, Tuple

from ..disjoint_set import DisjointSet
from ..errors import EmptyGraphError
from ..graph import Edge, EdgeStatus, Graph, NodeId
from .types import (
    KRUSKALS_PSEUDOCODE,
    EdgeUpdate,
    GenerationResult,
    MSTResult,
    SortedEdgeEntry,
    Step,
)

log = logging.getLogger(__name__)

CHECK_STEP = KRUSKALS_PSEUDOCODE[3] + " a."
ADD_STEP = KRUSKALS_PSEUDOCODE[3] + " b. & c."


def generate_kruskals_steps(graph: Graph) -> GenerationResult:
    """Record every step of Kruskal's algorithm over `graph`.

    All edges are examined, even after the tree is complete, so the sorted
    edge panel ends fully resolved.
    """

    if len(graph) == 0:
        raise EmptyGraphError("Cannot run Kruskal's algorithm on a graph with no nodes")

    sorted_edges = sorted(graph.edge_list(), key=lambda e: e.weight)
    ds = DisjointSet(graph.node_ids())
    mst_edges: List[Edge] = []
    mst_ids: Set[str] = set()

    def components() -> Tuple[Tuple[NodeId, ...], ...]:
        return tuple(tuple(c) for c in ds.components())

    def snapshot(resolved_upto: int, current: int = -1) -> Tuple[SortedEdgeEntry, ...]:
        # Indices below `resolved_upto` show their final verdict so far.
        out = []
        for idx, e in enumerate(sorted_edges):
            status: EdgeStatus
            if idx < resolved_upto:
                status = "included" if e.id in mst_ids else "excluded"
            elif idx == current:
                status = "candidate"
            else:
                status = "unvisited"
            out.append(SortedEdgeEntry.for_edge(e, status))
        return tuple(out)

    all_candidates = tuple(SortedEdgeEntry.for_edge(e, "candidate") for e in sorted_edges)
    steps: List[Step] = [
        Step(
            edge_updates=tuple(EdgeUpdate(e.id, "candidate") for e in sorted_edges),
            sorted_edges=all_candidates,
            union_find=components(),
            explanation="Kruskal's: sorted edges by weight in non-decreasing order.",
            algorithm_step=KRUSKALS_PSEUDOCODE[0],
            kind="sort",
        ),
        Step(
            edge_updates=(),
            sorted_edges=all_candidates,
            union_find=components(),
            explanation="Initialized Union-Find. Each node in its own set.",
            algorithm_step=KRUSKALS_PSEUDOCODE[1],
            kind="init",
        ),
    ]

    for i, edge in enumerate(sorted_edges):
        name = f"{graph.label_of(edge.source)}-{graph.label_of(edge.target)}"
        root_source = ds.find(edge.source)
        root_target = ds.find(edge.target)

        steps.append(
            Step(
                edge_updates=(EdgeUpdate(edge.id, "candidate"),),
                sorted_edges=snapshot(i, current=i),
                union_find=components(),
                explanation=f"Examining edge {name} (weight {edge.weight}). Checking cycle...",
                algorithm_step=CHECK_STEP,
                kind="check",
            )
        )

        if root_source != root_target:
            ds.union(edge.source, edge.target)
            mst_edges.append(edge)
            mst_ids.add(edge.id)
            steps.append(
                Step(
                    edge_updates=(EdgeUpdate(edge.id, "included"),),
                    sorted_edges=snapshot(i + 1),
                    union_find=components(),
                    explanation=f"No cycle! Adding edge {name} to MST.",
                    algorithm_step=ADD_STEP,
                    kind="include",
                )
            )
        else:
            steps.append(
                Step(
                    edge_updates=(EdgeUpdate(edge.id, "excluded"),),
                    sorted_edges=snapshot(i + 1),
                    union_find=components(),
                    explanation=f"Cycle detected! Skipping edge {name}.",
                    algorithm_step=CHECK_STEP,
                    kind="exclude",
                )
            )

    mst = MSTResult.from_edges(mst_edges)
    log.debug(
        "Kruskal's examined %d edges in %d steps, MST weight %d",
        len(sorted_edges),
        len(steps),
        mst.total_weight,
    )
    return GenerationResult(algorithm="kruskals", steps=tuple(steps), mst=mst, node_count=len(graph))
