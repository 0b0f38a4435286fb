"""Step-by-step Prim's and Kruskal's minimum spanning tree visualizer."""

from .disjoint_set import DisjointSet
from .errors import DuplicateEdgeError, EmptyGraphError, InvalidEdgeEndpointError, MSTVisualizerError
from .graph import Edge, EdgeStatus, Graph, Node, edge_id, node_label
from .playback import PlaybackController
from .steps import ALGORITHM_CHOICES, GenerationResult, MSTResult, Step, generate, step_count

__all__ = [
    "ALGORITHM_CHOICES",
    "DisjointSet",
    "DuplicateEdgeError",
    "Edge",
    "EdgeStatus",
    "EmptyGraphError",
    "GenerationResult",
    "Graph",
    "InvalidEdgeEndpointError",
    "MSTResult",
    "MSTVisualizerError",
    "Node",
    "PlaybackController",
    "Step",
    "edge_id",
    "generate",
    "node_label",
    "step_count",
]
