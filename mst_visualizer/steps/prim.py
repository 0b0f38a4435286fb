from __future__ import annotations

import logging
from typing import List, Set

from ..errors import EmptyGraphError
from ..graph import Edge, Graph, NodeId
from .types import (
    PRIMS_PSEUDOCODE,
    EdgeUpdate,
    GenerationResult,
    MSTResult,
    PriorityQueueEntry,
    Step,
)

log = logging.getLogger(__name__)


def start_node(graph: Graph) -> NodeId:
    """Node 0 when present, else the first node in insertion order."""
    if len(graph) == 0:
        raise EmptyGraphError("Cannot run Prim's algorithm on a graph with no nodes")
    if 0 in graph.nodes:
        return 0
    return next(iter(graph.nodes))


def generate_prims_steps(graph: Graph) -> GenerationResult:
    """Record every step of Prim's algorithm over `graph`.

    The queue is a plain list re-sorted by weight before each extraction
    (Python's sort is stable, so equal weights keep their enqueue order) rather
    than a binary heap: the visualization shows the whole queue in order at
    every step, and queue entries are deduplicated by edge id.
    """

    start = start_node(graph)
    edges: List[Edge] = graph.edge_list()
    n = len(graph)

    steps: List[Step] = []
    visited: List[NodeId] = []
    visited_set: Set[NodeId] = set()
    mst_edges: List[Edge] = []
    mst_ids: Set[str] = set()

    def visit(node_id: NodeId) -> None:
        visited.append(node_id)
        visited_set.add(node_id)

    visit(start)
    steps.append(
        Step(
            edge_updates=(),
            visited_nodes=tuple(visited),
            min_heap=(),
            explanation=f"Starting Prim's algorithm from node {graph.label_of(start)}. Adding it to the visited set.",
            algorithm_step=PRIMS_PSEUDOCODE[1],
            kind="visit",
        )
    )

    initial = [e for e in edges if e.source == start or e.target == start]
    queue: List[PriorityQueueEntry] = [PriorityQueueEntry.for_edge(e) for e in initial]
    queue.sort(key=lambda item: item.weight)
    steps.append(
        Step(
            edge_updates=tuple(EdgeUpdate(e.id, "candidate") for e in initial),
            visited_nodes=tuple(visited),
            min_heap=tuple(queue),
            explanation=f"Adding all edges connected to starting node {graph.label_of(start)} to the priority queue.",
            algorithm_step=PRIMS_PSEUDOCODE[3],
            kind="enqueue",
        )
    )

    while len(visited_set) < n and queue:
        queue.sort(key=lambda item: item.weight)
        popped = queue.pop(0).edge
        node_to_add = popped.target if popped.source in visited_set else popped.source

        if node_to_add in visited_set:
            steps.append(
                Step(
                    edge_updates=(EdgeUpdate(popped.id, "excluded"),),
                    visited_nodes=tuple(visited),
                    min_heap=tuple(queue),
                    explanation=(
                        f"Skipping edge {_edge_name(graph, popped)} with weight {popped.weight} "
                        "(connects to already visited node)."
                    ),
                    algorithm_step=PRIMS_PSEUDOCODE[5],
                    kind="skip",
                )
            )
            continue

        mst_edges.append(popped)
        mst_ids.add(popped.id)
        visit(node_to_add)
        steps.append(
            Step(
                edge_updates=(EdgeUpdate(popped.id, "included"),),
                visited_nodes=tuple(visited),
                min_heap=tuple(queue),
                explanation=(
                    f"Extracting min edge {_edge_name(graph, popped)} with weight {popped.weight} -> "
                    f"node {graph.label_of(node_to_add)}. Adding to MST."
                ),
                algorithm_step=PRIMS_PSEUDOCODE[5],
                kind="include",
            )
        )

        queued = {item.edge.id for item in queue}
        added: List[Edge] = []
        for e in edges:
            if e.id == popped.id or e.id in mst_ids or e.id in queued:
                continue
            if (e.source in visited_set) != (e.target in visited_set):
                queue.append(PriorityQueueEntry.for_edge(e))
                queued.add(e.id)
                added.append(e)
        queue.sort(key=lambda item: item.weight)
        steps.append(
            Step(
                edge_updates=tuple(EdgeUpdate(e.id, "candidate") for e in added),
                visited_nodes=tuple(visited),
                min_heap=tuple(queue),
                explanation=f"Adding {len(added)} new candidate edges to the queue. Now {len(queue)} total.",
                algorithm_step=PRIMS_PSEUDOCODE[3],
                kind="enqueue",
            )
        )

    mst = MSTResult.from_edges(mst_edges)
    if len(visited_set) < n:
        log.info(
            "Prim's stopped with %d of %d nodes visited (graph is disconnected)",
            len(visited_set),
            n,
        )
    log.debug("Prim's generated %d steps, MST weight %d", len(steps), mst.total_weight)
    return GenerationResult(algorithm="prims", steps=tuple(steps), mst=mst, node_count=n)


def _edge_name(graph: Graph, edge: Edge) -> str:
    return f"{graph.label_of(edge.source)}-{graph.label_of(edge.target)}"
