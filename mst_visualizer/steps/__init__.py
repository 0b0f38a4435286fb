from typing import Sequence

from ..graph import Graph
from .kruskal import generate_kruskals_steps
from .prim import generate_prims_steps, start_node
from .types import (
    KRUSKALS_PSEUDOCODE,
    PRIMS_PSEUDOCODE,
    AlgorithmName,
    EdgeUpdate,
    GenerationResult,
    MSTResult,
    PriorityQueueEntry,
    SortedEdgeEntry,
    Step,
)

ALGORITHM_CHOICES: tuple[AlgorithmName, ...] = ("prims", "kruskals")

ALGORITHM_TITLES = {"prims": "Prim's", "kruskals": "Kruskal's"}


def generate(graph: Graph, algorithm: AlgorithmName = "prims") -> GenerationResult:
    """Validate `graph` and eagerly record every step of `algorithm` over it.

    The generators work on an all-unvisited copy, so the caller's graph (and
    its current edge statuses) is never touched.
    """
    if algorithm not in ALGORITHM_CHOICES:
        raise ValueError(f"Unknown algorithm {algorithm!r}. Choose one of: {', '.join(ALGORITHM_CHOICES)}")
    graph.validate()
    baseline = graph.snapshot()
    if algorithm == "prims":
        return generate_prims_steps(baseline)
    return generate_kruskals_steps(baseline)


def step_count(steps: Sequence[Step]) -> int:
    return len(steps)


__all__ = [
    "ALGORITHM_CHOICES",
    "ALGORITHM_TITLES",
    "AlgorithmName",
    "EdgeUpdate",
    "GenerationResult",
    "KRUSKALS_PSEUDOCODE",
    "MSTResult",
    "PRIMS_PSEUDOCODE",
    "PriorityQueueEntry",
    "SortedEdgeEntry",
    "Step",
    "generate",
    "generate_kruskals_steps",
    "generate_prims_steps",
    "start_node",
    "step_count",
]
