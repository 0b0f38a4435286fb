from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..graph import Edge, Graph, Node, NodeId, node_label

log = logging.getLogger(__name__)


@dataclass
class GraphParams:
    node_count: int = 6
    density: float = 0.5
    min_weight: int = 1
    max_weight: int = 20

    def validate(self) -> None:
        if self.node_count < 1:
            raise ValueError(f"node_count must be >= 1 (got {self.node_count!r})")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be within [0, 1] (got {self.density!r})")
        if self.min_weight < 1 or self.max_weight < self.min_weight:
            raise ValueError(
                f"Weights need 1 <= min_weight <= max_weight (got {self.min_weight!r}..{self.max_weight!r})"
            )


def circle_radius(width: float, height: float) -> float:
    return max(min(width, height) / 3.0 - 30.0, 40.0)


def build_random_circle_graph(
    params: Optional[GraphParams] = None,
    *,
    width: float = 500.0,
    height: float = 400.0,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Graph:
    """Build a random connected graph laid out on a jittered circle.

    - Nodes sit on a circle around the canvas centre, each pushed in or out
      by up to 10 units.
    - A spanning skeleton is grown from node 0 by repeatedly taking the
      shortest pair with exactly one endpoint already connected, so the
      result is always connected.
    - Extra pairs (shortest first) are added until the edge count reaches
      `ceil(density * n * (n - 1) / 2)`.
    - Weights are uniform integers in [min_weight, max_weight], independent
      of the layout distance.
    """

    params = params or GraphParams()
    params.validate()
    if rng is None:
        rng = random.Random(seed)

    n = params.node_count
    radius = circle_radius(width, height)
    cx, cy = width / 2.0, height / 2.0

    g = Graph()
    for i in range(n):
        theta = (i * 2.0 * math.pi) / n
        r = radius + (rng.random() * 20.0 - 10.0)
        g.add_node(Node(id=i, x=cx + r * math.cos(theta), y=cy + r * math.sin(theta), label=node_label(i)))

    pairs: List[Tuple[float, NodeId, NodeId]] = []
    for i in range(n):
        for j in range(i + 1, n):
            a, b = g.nodes[i], g.nodes[j]
            pairs.append((math.hypot(b.x - a.x, b.y - a.y), i, j))
    pairs.sort(key=lambda p: p[0])

    skeleton: List[Tuple[NodeId, NodeId]] = []
    connected: Set[NodeId] = {0}
    while len(connected) < n and pairs:
        idx = next(
            (k for k, (_, u, v) in enumerate(pairs) if (u in connected) != (v in connected)),
            None,
        )
        if idx is None:
            break
        _, u, v = pairs.pop(idx)
        skeleton.append((u, v))
        connected.add(u)
        connected.add(v)

    target_edges = math.ceil(n * (n - 1) / 2 * params.density)
    extra = [(u, v) for _, u, v in pairs[: max(0, target_edges - len(skeleton))]]

    for u, v in skeleton + extra:
        g.add_edge(Edge.between(u, v, rng.randint(params.min_weight, params.max_weight)))

    log.debug("Random graph: %d nodes, %d edges (density=%s)", n, len(g.edges), params.density)
    return g
